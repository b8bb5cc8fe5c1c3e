# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from typing import List

import pytest

from default_derive.emitter import EmitOptions, emit, emit_text, field_initializers
from default_derive.errors import GeneratorError, UnsupportedConstructError
from default_derive.parser.ast import EnumDecl, Field, StructDecl
from default_derive.tokens.lexer import tokenize
from default_derive.tokens.tree import Delimiter, Group, Ident, Punct, TokenTree, render


def _struct(name: str, *fields: str) -> StructDecl:
	return StructDecl(
		name=Ident(name),
		fields=[Field(None, Ident(f), Ident("T")) for f in fields],
	)


def _initializer_names(out: List[TokenTree]) -> List[str]:
	"""Pull `[a, b, ...]` out of `impl .. { fn ..() -> Self { Name { a: .., b: .. } } }`."""
	impl_body = out[-1]
	assert isinstance(impl_body, Group) and impl_body.delimiter is Delimiter.BRACE
	fn_body = impl_body.stream[-1]
	assert isinstance(fn_body, Group) and fn_body.delimiter is Delimiter.BRACE
	ctor_name, ctor_body = fn_body.stream
	assert isinstance(ctor_name, Ident)
	assert isinstance(ctor_body, Group)
	clauses: List[List[TokenTree]] = [[]]
	for tok in ctor_body.stream:
		if tok == Punct(","):
			clauses.append([])
		else:
			clauses[-1].append(tok)
	return [clause[0].text for clause in clauses if clause]  # type: ignore[union-attr]


def test_field_initializers() -> None:
	assert field_initializers(_struct("Foo", "a", "b")) == [
		"a: Default::default()",
		"b: Default::default()",
	]


def test_emit_text_template() -> None:
	text = emit_text(_struct("Foo", "bar", "baz"))
	assert text == (
		"#[automatically_derived] impl crate::OurDefault for Foo { "
		"fn our_default() -> Self { Foo {\nbar: Default::default()\n,baz: Default::default()\n} } }"
	)


def test_emit_renders_impl() -> None:
	out = emit(_struct("Foo", "bar"))
	assert render(out) == (
		"# [automatically_derived] impl crate :: OurDefault for Foo "
		"{ fn our_default () -> Self { Foo { bar : Default :: default () } } }"
	)


@pytest.mark.parametrize("count", [0, 1, 2, 5])
def test_emit_one_initializer_per_field(count: int) -> None:
	names = [f"f{i}" for i in range(count)]
	out = emit(_struct("Rec", *names))
	assert _initializer_names(out) == names


def test_emit_zero_fields_has_empty_initializer_list() -> None:
	out = emit(_struct("Empty"))
	impl_body = out[-1]
	assert isinstance(impl_body, Group)
	fn_body = impl_body.stream[-1]
	assert isinstance(fn_body, Group)
	assert fn_body.stream == (Ident("Empty"), Group(Delimiter.BRACE, ()))


def test_emit_output_lexes_back() -> None:
	out = emit(_struct("Foo", "a", "r#type"))
	assert tokenize(render(out)) == out


def test_emit_custom_options() -> None:
	opts = EmitOptions(trait_path="my::Zero", method_name="zero", default_call="Zero::zero()")
	text = render(emit(_struct("P", "x"), opts))
	assert "impl my :: Zero for P" in text
	assert "fn zero ()" in text
	assert "x : Zero :: zero ()" in text


def test_emit_rejects_enum() -> None:
	with pytest.raises(UnsupportedConstructError, match="only structs are currently supported"):
		emit(EnumDecl(name=Ident("E")))


def test_invalid_generated_text_is_internal_error() -> None:
	opts = EmitOptions(default_call="Default::default(")
	with pytest.raises(GeneratorError, match="internal error: generated invalid tokens") as exc:
		emit(_struct("Foo", "a"), opts)
	diag = exc.value.to_diagnostic()
	assert diag.phase == "codegen"
	assert diag.code == "E-INTERNAL"


def test_emit_non_ascii_names() -> None:
	decl = StructDecl(name=Ident("Größe"), fields=[Field(None, Ident("café"), Ident("u8"))])
	out = emit(decl)
	assert _initializer_names(out) == ["café"]
	assert "impl crate :: OurDefault for Größe" in render(out)
	assert tokenize(render(out)) == out
