# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Primitive token readers.

Each reader looks at the next token only. If it has the expected shape the
token is consumed and returned; otherwise the cursor is left untouched and
None is returned. A mismatch is an ordinary outcome here, never an error:
the grammar readers decide what a missing token means.
"""

from __future__ import annotations

from typing import Optional

from default_derive.tokens.tree import Group, Ident, Punct
from .cursor import TokenCursor


def read_ident(cursor: TokenCursor) -> Optional[Ident]:
	if isinstance(cursor.peek(), Ident):
		return cursor.next()  # type: ignore[return-value]
	return None


def read_keyword(cursor: TokenCursor, keyword: str) -> Optional[Ident]:
	"""Consume the next token only if it is the identifier `keyword`."""
	tok = cursor.peek()
	if isinstance(tok, Ident) and tok.text == keyword:
		return cursor.next()  # type: ignore[return-value]
	return None


def read_group(cursor: TokenCursor) -> Optional[Group]:
	"""Consume a delimited group such as `(crate)`, `{ a: T }` or `[u8; 4]`."""
	if isinstance(cursor.peek(), Group):
		return cursor.next()  # type: ignore[return-value]
	return None


def read_punct_matching(cursor: TokenCursor, matching: str) -> Optional[Punct]:
	"""Consume the next punct if its character is exactly `matching`."""
	tok = cursor.peek()
	if isinstance(tok, Punct) and tok.char == matching:
		return cursor.next()  # type: ignore[return-value]
	return None


def at_end(cursor: TokenCursor) -> bool:
	"""Return whether `cursor` has no tokens left (end of the current group)."""
	return cursor.at_end()


__all__ = [
	"read_ident",
	"read_keyword",
	"read_group",
	"read_punct_matching",
	"at_end",
]
