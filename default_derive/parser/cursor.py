# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token cursor shared by all readers: one token of lookahead, forward only.
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from default_derive.core.span import Span
from default_derive.tokens.tree import TokenTree


class TokenCursor:
	"""
	Forward-only view over one token sequence with one token of lookahead.

	The cursor owns a snapshot of the sequence and an index into it. `peek` never
	moves the index, `next` moves it by exactly one, and once the end is reached
	both return None forever. Nothing here raises: absence is always None.
	"""

	__slots__ = ("_tokens", "_pos", "end_span")

	def __init__(self, tokens: Iterable[TokenTree], *, end_span: Optional[Span] = None) -> None:
		self._tokens: Tuple[TokenTree, ...] = tuple(tokens)
		self._pos = 0
		# Where "end of input" is reported (e.g. the enclosing group).
		self.end_span = end_span or Span()

	def peek(self) -> Optional[TokenTree]:
		if self._pos >= len(self._tokens):
			return None
		return self._tokens[self._pos]

	def next(self) -> Optional[TokenTree]:
		tok = self.peek()
		if tok is not None:
			self._pos += 1
		return tok

	def at_end(self) -> bool:
		return self.peek() is None

	@property
	def position(self) -> int:
		return self._pos

	def __len__(self) -> int:
		return len(self._tokens) - self._pos

	def __repr__(self) -> str:
		return f"TokenCursor(pos={self._pos}, len={len(self._tokens)})"


__all__ = ["TokenCursor"]
