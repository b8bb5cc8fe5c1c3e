# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token trees: the model exchanged with the host (`tree`) and the text lexer /
renderer used to produce and validate them (`lexer`).
"""

from .tree import (
	Delimiter,
	Group,
	Ident,
	Literal,
	Punct,
	Spacing,
	TokenStream,
	TokenTree,
	describe_token,
	group_text,
	render,
)
from .lexer import LexError, tokenize

__all__ = [
	"Delimiter",
	"Group",
	"Ident",
	"Literal",
	"Punct",
	"Spacing",
	"TokenStream",
	"TokenTree",
	"describe_token",
	"group_text",
	"LexError",
	"render",
	"tokenize",
]
