# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token-tree lexer (text to token trees).

`tokenize` turns source text into the token-tree model of `tokens.tree`:
identifiers, single-character puncts, literals, and delimited groups with
their interiors nested. The record grammar itself never calls this; it is
used by the emitter to validate generated text and by the CLI/tests to build
input streams from source text.

Lexing is done by a small lark grammar whose only structure is balanced
`()`/`{}`/`[]` groups, which is what a token tree is. `tree.render`
is its inverse.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from default_derive.core.span import Span
from .tree import Delimiter, Group, Ident, Literal, Punct, Spacing, TokenTree

_GRAMMAR_SRC = r"""
start: _tt*

_tt: paren | brace | bracket | IDENT | PUNCT | LITERAL

paren: "(" _tt* ")"
brace: "{" _tt* "}"
bracket: "[" _tt* "]"

// Literals win over idents (`r"raw"`, `b'x'`) and over the `'` punct (`'a'`).
LITERAL.2: /b?r"[^"]*"/
	| /b?"(\\.|[^"\\])*"/
	| /b?'(\\u\{[0-9A-Fa-f_]+\}|\\x[0-9A-Fa-f]{2}|\\.|[^'\\\n])'/
	| /[0-9][0-9_]*(\.[0-9][0-9_]*)?([eE][+-]?[0-9_]+)?([A-Za-z_][A-Za-z0-9_]*)?/

// Unicode-aware: `\w` approximates XID_Start/XID_Continue.
IDENT.1: /r#[^\W\d]\w*/ | /[^\W\d]\w*/

PUNCT: /[!#$%&*+,\-.\/:;<=>?@^|~']/

LINE_COMMENT.3: /\/\/[^\n]*/
BLOCK_COMMENT.3: /\/\*(.|\n)*?\*\//

%import common.WS
%ignore WS
%ignore LINE_COMMENT
%ignore BLOCK_COMMENT
"""

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	start="start",
	propagate_positions=True,
	maybe_placeholders=False,
)

_DELIMITERS = {
	"paren": Delimiter.PARENTHESIS,
	"brace": Delimiter.BRACE,
	"bracket": Delimiter.BRACKET,
}


class LexError(ValueError):
	"""
	Error raised when text is not a valid token tree (stray characters,
	unbalanced or mismatched delimiters).

	Carries a best-effort `span` so callers can turn it into a diagnostic.
	"""

	def __init__(self, message: str, *, span: Optional[Span] = None) -> None:
		super().__init__(message)
		self.span = span or Span()


def tokenize(source: str, *, file: Optional[str] = None) -> List[TokenTree]:
	"""Lex `source` into a list of token trees."""
	try:
		tree = _PARSER.parse(source)
	except UnexpectedInput as exc:
		raise _lex_error(exc, file) from exc
	return _build_stream(tree.children, file)


def _lex_error(exc: UnexpectedInput, file: Optional[str]) -> LexError:
	line = getattr(exc, "line", None)
	column = getattr(exc, "column", None)
	if not isinstance(line, int) or line < 1:
		line = column = None
	span = Span(file=file, line=line, column=column)
	if isinstance(exc, UnexpectedCharacters):
		return LexError(f"unexpected character {exc.char!r}", span=span)
	if isinstance(exc, UnexpectedEOF):
		return LexError("unclosed delimiter at end of input", span=span)
	if isinstance(exc, UnexpectedToken):
		if exc.token.type == "$END":
			return LexError("unclosed delimiter at end of input", span=span)
		return LexError(f"unexpected closing delimiter `{exc.token}`", span=span)
	return LexError(str(exc), span=span)


def _build_stream(children: Iterable[object], file: Optional[str]) -> List[TokenTree]:
	items = list(children)
	out: List[TokenTree] = []
	for idx, child in enumerate(items):
		if isinstance(child, Tree):
			delim = _DELIMITERS[str(child.data)]
			out.append(
				Group(
					delimiter=delim,
					stream=tuple(_build_stream(child.children, file)),
					span=Span.from_meta(child.meta, file=file),
				)
			)
			continue
		assert isinstance(child, Token)
		span = Span.from_meta(child, file=file)
		if child.type == "IDENT":
			out.append(Ident(str(child), span=span))
		elif child.type == "LITERAL":
			out.append(Literal(str(child), span=span))
		else:
			nxt = items[idx + 1] if idx + 1 < len(items) else None
			joint = (
				isinstance(nxt, Token)
				and nxt.type == "PUNCT"
				and nxt.start_pos == child.end_pos
			)
			out.append(Punct(str(child), Spacing.JOINT if joint else Spacing.ALONE, span=span))
	return out


__all__ = ["LexError", "tokenize"]
