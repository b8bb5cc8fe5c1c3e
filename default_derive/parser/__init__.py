# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Recursive-descent parser for the derive input.

- cursor: `TokenCursor`, one-token lookahead over a token sequence
- readers: primitive readers (ident, keyword, group, punct, end)
- grammar: visibility/field/field-list/record readers
- ast: the parsed declaration model
"""

from .ast import DataType, EnumDecl, Field, StructDecl, Visibility
from .cursor import TokenCursor
from .grammar import parse_derive_input, read_field, read_field_list, read_record_decl, read_visibility

__all__ = [
	"DataType",
	"EnumDecl",
	"Field",
	"StructDecl",
	"Visibility",
	"TokenCursor",
	"parse_derive_input",
	"read_field",
	"read_field_list",
	"read_record_decl",
	"read_visibility",
]
