# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from default_derive.core.span import Span
from default_derive.tokens.tree import (
	Delimiter,
	Group,
	Ident,
	Literal,
	Punct,
	Spacing,
	describe_token,
	group_text,
	render,
)


def test_describe_token() -> None:
	assert describe_token(None) == "end of input"
	assert describe_token(Ident("bar")) == "identifier `bar`"
	assert describe_token(Punct(":")) == "punctuation `:`"
	assert describe_token(Group(Delimiter.PARENTHESIS)) == "`( ... )` group"
	assert describe_token(Group(Delimiter.NONE)) == "invisible group"
	assert describe_token(Literal("1")) == "literal `1`"


def test_punct_must_be_single_character() -> None:
	with pytest.raises(ValueError):
		Punct("::")


def test_equality_ignores_span() -> None:
	assert Ident("a", span=Span(line=1, column=1)) == Ident("a", span=Span(line=9, column=9))
	assert Punct(",", Spacing.ALONE) != Punct(",", Spacing.JOINT)


def test_group_text() -> None:
	assert group_text(Group(Delimiter.PARENTHESIS, (Ident("crate"),))) == "(crate)"
	assert group_text(Group(Delimiter.BRACE, (Ident("a"),))) == "{ a }"
	assert group_text(Group(Delimiter.BRACKET)) == "[]"


def test_render_glues_joint_puncts() -> None:
	toks = [Ident("a"), Punct(":", Spacing.JOINT), Punct(":"), Ident("b"), Punct(",")]
	assert render(toks) == "a :: b ,"


def test_delimiter_describe() -> None:
	assert Delimiter.PARENTHESIS.describe() == "parenthesis `( )`"
	assert Delimiter.BRACKET.describe() == "bracket `[ ]`"
