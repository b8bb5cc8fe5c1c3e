# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Grammar readers for the derive input.

Accepted shape (nothing else):

	[pub] struct Name {
		[pub] field: Type,
		...
	}

This is a strict top-down descent over `TokenCursor`s with one token of
lookahead and no backtracking. Every unmet expectation raises immediately:
`UnsupportedConstructError` when the input is some other construct (enums,
tuple/unit structs, `pub(crate)`, generic/path/reference field types) and
`MalformedInputError` when a required token is missing. Nothing is ever
half-accepted.
"""

from __future__ import annotations

from typing import List, Optional

from default_derive.core.span import Span
from default_derive.errors import MalformedInputError, UnsupportedConstructError
from default_derive.tokens.tree import Delimiter, Group, Ident, Punct, TokenStream, describe_token, group_text
from .ast import Field, StructDecl, Visibility
from .cursor import TokenCursor
from .readers import at_end, read_group, read_ident, read_keyword, read_punct_matching


def _here(cursor: TokenCursor) -> Span:
	tok = cursor.peek()
	if tok is None:
		return cursor.end_span
	return tok.span


def _got(cursor: TokenCursor) -> str:
	return describe_token(cursor.peek())


def _peek_punct(cursor: TokenCursor, char: str) -> bool:
	tok = cursor.peek()
	return isinstance(tok, Punct) and tok.char == char


def _reject_attributes(cursor: TokenCursor, where: str) -> None:
	if _peek_punct(cursor, "#"):
		raise UnsupportedConstructError(
			f"attributes (`#[...]`) on {where} are not yet supported",
			span=_here(cursor),
		)


def read_visibility(cursor: TokenCursor) -> Optional[Visibility]:
	"""
	Parse an optional `pub`.

	`pub` followed by a group (`pub(crate)`, `pub(super)`, ...) is fatal:
	qualified visibility is not handled.
	"""
	if read_keyword(cursor, "pub") is None:
		return None
	qualifier = cursor.peek()
	if isinstance(qualifier, Group):
		raise UnsupportedConstructError(
			f"visibility modifiers like `pub{group_text(qualifier)}` are not yet supported",
			span=qualifier.span,
		)
	return Visibility.PUBLIC


def _read_field_type(cursor: TokenCursor, field_name: Ident) -> Ident:
	tok = cursor.peek()
	if isinstance(tok, Punct):
		if tok.char == "&":
			raise UnsupportedConstructError(
				f"reference field types (`{field_name}: &...`) are not yet supported",
				span=tok.span,
			)
		if tok.char == "'":
			raise UnsupportedConstructError(
				f"lifetime annotations (`{field_name}: '...`) are not yet supported",
				span=tok.span,
			)
		if tok.char == ":":
			raise UnsupportedConstructError(
				f"path-qualified field types (`{field_name}: ::...`) are not yet supported",
				span=tok.span,
			)
	if isinstance(tok, Group) and tok.delimiter is Delimiter.PARENTHESIS:
		raise UnsupportedConstructError(
			f"tuple field types (`{field_name}: (...)`) are not yet supported",
			span=tok.span,
		)
	if isinstance(tok, Group) and tok.delimiter is Delimiter.BRACKET:
		raise UnsupportedConstructError(
			f"array and slice field types (`{field_name}: [...]`) are not yet supported",
			span=tok.span,
		)
	if isinstance(tok, Group) and tok.delimiter is Delimiter.NONE:
		# Hosts wrap macro-substituted fragments in invisible groups.
		raise UnsupportedConstructError(
			f"macro-substituted field types (`{field_name}: $ty`) are not yet supported",
			span=tok.span,
		)

	typ = read_ident(cursor)
	if typ is None:
		raise MalformedInputError(
			f"failed to parse field type of `{field_name}` (got: {_got(cursor)})",
			span=_here(cursor),
		)

	if _peek_punct(cursor, "<"):
		raise UnsupportedConstructError(
			f"generic field types (`{typ}<...>`) are not yet supported",
			span=_here(cursor),
		)
	if _peek_punct(cursor, ":"):
		raise UnsupportedConstructError(
			f"path-qualified field types (`{typ}::...`) are not yet supported",
			span=_here(cursor),
		)
	return typ


def read_field(cursor: TokenCursor) -> Field:
	"""
	Parse one `[pub] name: Type` field plus its separator.

	A `,` must follow every field except the last one in the body; the last
	field may carry a trailing comma or not.
	"""
	_reject_attributes(cursor, "struct fields")
	visibility = read_visibility(cursor)

	name = read_ident(cursor)
	if name is None:
		raise MalformedInputError(
			f"failed to parse field name (got: {_got(cursor)})",
			span=_here(cursor),
		)

	if read_punct_matching(cursor, ":") is None:
		raise MalformedInputError(
			f"expected a colon following struct field name `{name}`, got: {_got(cursor)}",
			span=_here(cursor),
		)

	typ = _read_field_type(cursor, name)

	if read_punct_matching(cursor, ",") is None and not at_end(cursor):
		raise MalformedInputError(
			f"expected `,` or the end of the struct body after field `{name}`, got: {_got(cursor)}",
			span=_here(cursor),
		)

	return Field(visibility=visibility, name=name, type=typ)


def read_field_list(cursor: TokenCursor) -> List[Field]:
	"""Parse fields until the cursor (a group interior) is exhausted."""
	fields: List[Field] = []
	seen: set[str] = set()
	while not at_end(cursor):
		fld = read_field(cursor)
		if fld.name.text in seen:
			raise MalformedInputError(
				f"field `{fld.name}` is declared more than once",
				span=fld.name.span,
			)
		seen.add(fld.name.text)
		fields.append(fld)
	return fields


def read_record_decl(cursor: TokenCursor, *, visibility: Optional[Visibility] = None) -> StructDecl:
	"""
	Parse `struct Name { ... }` (the visibility has already been consumed).

	Only named-field structs are accepted; `enum`, `union`, tuple structs and
	unit structs are rejected with a diagnostic naming the construct.
	"""
	keyword = cursor.peek()
	if not isinstance(keyword, Ident):
		raise MalformedInputError(
			f"expected a data type keyword such as `struct`, got {_got(cursor)}",
			span=_here(cursor),
		)
	if read_keyword(cursor, "struct") is None:
		raise UnsupportedConstructError(
			f"data type `{keyword}` is not yet supported",
			span=keyword.span,
		)

	name = read_ident(cursor)
	if name is None:
		raise MalformedInputError(
			f"expected a struct name, got {_got(cursor)}",
			span=_here(cursor),
		)

	if _peek_punct(cursor, "<"):
		raise UnsupportedConstructError(
			f"generic parameters on struct `{name}` are not yet supported",
			span=_here(cursor),
		)
	if _peek_punct(cursor, ";"):
		raise UnsupportedConstructError(
			f"unit structs (`struct {name};`) are not yet supported",
			span=_here(cursor),
		)

	body = read_group(cursor)
	if body is None:
		raise MalformedInputError(
			f"expected a struct body for `{name}`, got {_got(cursor)}",
			span=_here(cursor),
		)
	if body.delimiter is not Delimiter.BRACE:
		raise UnsupportedConstructError(
			f"unsupported group delimiter: {body.delimiter.describe()}. "
			"Currently only braces (named structs) are supported",
			span=body.span,
		)

	fields = read_field_list(TokenCursor(body.stream, end_span=body.span))
	return StructDecl(name=name, fields=fields, visibility=visibility)


def parse_derive_input(tokens: TokenStream, *, end_span: Optional[Span] = None) -> StructDecl:
	"""
	Parse the whole token stream handed to the derive.

	The stream must hold exactly one declaration; anything after the struct
	body is rejected.
	"""
	cursor = TokenCursor(tokens, end_span=end_span)
	_reject_attributes(cursor, "the derived declaration")
	visibility = read_visibility(cursor)
	decl = read_record_decl(cursor, visibility=visibility)
	if not at_end(cursor):
		raise MalformedInputError(
			f"unexpected {_got(cursor)} after the body of struct `{decl.name}`",
			span=_here(cursor),
		)
	return decl


__all__ = [
	"read_visibility",
	"read_field",
	"read_field_list",
	"read_record_decl",
	"parse_derive_input",
]
