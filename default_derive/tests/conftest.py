# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from typing import Callable

import pytest

from default_derive.parser.ast import StructDecl
from default_derive.parser.grammar import parse_derive_input
from default_derive.tokens.lexer import tokenize


@pytest.fixture
def parse_src() -> Callable[[str], StructDecl]:
	"""Lex source text and run the derive-input parser over it."""

	def _parse(src: str) -> StructDecl:
		return parse_derive_input(tokenize(src))

	return _parse
