# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Union

from default_derive.tokens.tree import Ident


class Visibility(Enum):
	# Bare `pub`. Qualified forms (`pub(crate)`) are rejected by the parser.
	PUBLIC = auto()


@dataclass(frozen=True)
class Field:
	visibility: Optional[Visibility]
	name: Ident
	# A single bare identifier: no paths, generic args, or references.
	type: Ident


@dataclass(frozen=True)
class StructDecl:
	"""
	Named-field struct declaration.

	`fields` keeps declaration order; the emitter writes initializers in the
	same order.
	"""

	name: Ident
	fields: List[Field] = field(default_factory=list)
	visibility: Optional[Visibility] = None


@dataclass(frozen=True)
class EnumDecl:
	"""Placeholder for `enum` declarations; recognized only to be rejected."""

	name: Ident
	visibility: Optional[Visibility] = None


DataType = Union[StructDecl, EnumDecl]


__all__ = ["Visibility", "Field", "StructDecl", "EnumDecl", "DataType"]
