# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Code emitter for `OurDefault`.

Given a parsed struct, emit:

	#[automatically_derived] impl crate::OurDefault for Foo {
		fn our_default() -> Self { Foo { a: Default::default(), b: Default::default() } }
	}

The text is built from a template and then lexed back into a token stream.
If our own output fails to lex, that is a generator bug and is reported as
`GeneratorError`, never as a problem with the input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from default_derive.errors import GeneratorError, UnsupportedConstructError
from default_derive.parser.ast import DataType, StructDecl
from default_derive.tokens.lexer import LexError, tokenize
from default_derive.tokens.tree import TokenTree


@dataclass(frozen=True)
class EmitOptions:
	"""Knobs for the generated impl; the defaults produce the `OurDefault` impl."""

	trait_path: str = "crate::OurDefault"
	method_name: str = "our_default"
	default_call: str = "Default::default()"
	separator: str = "\n,"


def field_initializers(decl: StructDecl, options: EmitOptions = EmitOptions()) -> List[str]:
	"""One `name: <default_call>` clause per field, in declaration order."""
	return [f"{fld.name}: {options.default_call}" for fld in decl.fields]


def emit_text(decl: DataType, options: EmitOptions = EmitOptions()) -> str:
	if not isinstance(decl, StructDecl):
		raise UnsupportedConstructError(
			"only structs are currently supported",
			span=decl.name.span,
		)
	inits = options.separator.join(field_initializers(decl, options))
	return (
		"#[automatically_derived] "
		f"impl {options.trait_path} for {decl.name} {{ "
		f"fn {options.method_name}() -> Self {{ "
		f"{decl.name} {{\n{inits}\n}}"
		" } }"
	)


def emit(decl: DataType, options: EmitOptions = EmitOptions()) -> List[TokenTree]:
	"""Emit the impl for `decl` as a token stream."""
	text = emit_text(decl, options)
	try:
		return tokenize(text)
	except LexError as exc:
		raise GeneratorError(
			f"internal error: generated invalid tokens ({exc}) in:\n{text}",
		) from exc


__all__ = ["EmitOptions", "field_initializers", "emit_text", "emit"]
