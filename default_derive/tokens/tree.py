# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token-tree model handed across the derive boundary.

A token tree is exactly one of:
- `Ident`: an identifier or keyword (`struct`, `pub`, `foo`, `r#type`),
- `Punct`: a single punctuation character plus its spacing,
- `Group`: a delimited group owning a nested token sequence,
- `Literal`: a number/string/char literal (never used by the record grammar,
  but the host may hand one over and the lexer produces them).

Groups own their interior, so a stream is a finite tree with no sharing. All
nodes are immutable; spans are carried for diagnostics only and do not take
part in equality.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from default_derive.core.span import Span


class Spacing(Enum):
	# JOINT: the next token is a punct with no whitespace in between (`::`).
	JOINT = "joint"
	ALONE = "alone"


class Delimiter(Enum):
	PARENTHESIS = ("(", ")")
	BRACE = ("{", "}")
	BRACKET = ("[", "]")
	# Invisible group (host-inserted); has no textual delimiters.
	NONE = ("", "")

	@property
	def open(self) -> str:
		return self.value[0]

	@property
	def close(self) -> str:
		return self.value[1]

	def describe(self) -> str:
		if self is Delimiter.NONE:
			return "invisible delimiter"
		return f"{self.name.lower()} `{self.open} {self.close}`"


@dataclass(frozen=True)
class Ident:
	text: str
	span: Span = field(default_factory=Span, compare=False, repr=False)

	def __str__(self) -> str:
		return self.text


@dataclass(frozen=True)
class Punct:
	char: str
	spacing: Spacing = Spacing.ALONE
	span: Span = field(default_factory=Span, compare=False, repr=False)

	def __post_init__(self) -> None:
		if len(self.char) != 1:
			raise ValueError(f"punct must be a single character, got {self.char!r}")

	def __str__(self) -> str:
		return self.char


@dataclass(frozen=True)
class Group:
	delimiter: Delimiter
	stream: Tuple["TokenTree", ...] = ()
	span: Span = field(default_factory=Span, compare=False, repr=False)

	def __str__(self) -> str:
		return f"{self.delimiter.open} ... {self.delimiter.close}"


@dataclass(frozen=True)
class Literal:
	text: str
	span: Span = field(default_factory=Span, compare=False, repr=False)

	def __str__(self) -> str:
		return self.text


TokenTree = Union[Ident, Punct, Group, Literal]
TokenStream = Sequence[TokenTree]


def describe_token(tok: Optional[TokenTree]) -> str:
	"""Describe a (possibly absent) token for diagnostics."""
	if tok is None:
		return "end of input"
	if isinstance(tok, Ident):
		return f"identifier `{tok.text}`"
	if isinstance(tok, Punct):
		return f"punctuation `{tok.char}`"
	if isinstance(tok, Group):
		if tok.delimiter is Delimiter.NONE:
			return "invisible group"
		return f"`{tok.delimiter.open} ... {tok.delimiter.close}` group"
	return f"literal `{tok.text}`"


def render(tokens: Iterable[TokenTree]) -> str:
	"""
	Render a token stream back to text.

	Tokens are separated by a single space, except that a JOINT punct is glued
	to the token after it. Lexing the result yields the same stream for any
	stream produced by `tokenize`.
	"""
	parts: List[str] = []
	glue = False
	for tok in tokens:
		if parts and not glue:
			parts.append(" ")
		if isinstance(tok, Group):
			parts.append(group_text(tok))
			glue = False
		elif isinstance(tok, Punct):
			parts.append(tok.char)
			glue = tok.spacing is Spacing.JOINT
		else:
			parts.append(tok.text)
			glue = False
	return "".join(parts)


def group_text(group: Group) -> str:
	"""Render one group including its delimiters (`(crate)`, `{ a: T }`)."""
	inner = render(group.stream)
	if not inner:
		return f"{group.delimiter.open}{group.delimiter.close}"
	if group.delimiter is Delimiter.BRACE:
		return f"{{ {inner} }}"
	return f"{group.delimiter.open}{inner}{group.delimiter.close}"


__all__ = [
	"Spacing",
	"Delimiter",
	"Ident",
	"Punct",
	"Group",
	"Literal",
	"TokenTree",
	"TokenStream",
	"describe_token",
	"render",
	"group_text",
]
