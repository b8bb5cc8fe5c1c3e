# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Fatal conditions raised while deriving `OurDefault`.

Every error here is terminal: it is raised where it is detected, propagates
unchanged through all readers, and is converted into a single `Diagnostic` at
the host boundary (`default_derive.derive.expand`).

There are three classes:
- `UnsupportedConstructError`: the input is a construct this derive does not
  handle (enums, tuple/unit structs, `pub(crate)`, generic/path/reference
  field types, ...).
- `MalformedInputError`: the input claims to be a named-field struct but a
  required token is missing or wrong.
- `GeneratorError`: the generator produced text that does not lex. This is a
  bug in the generator, never a problem with the caller's input.
"""

from __future__ import annotations

from typing import Optional

from default_derive.core.diagnostics import Diagnostic
from default_derive.core.span import Span


class DeriveError(ValueError):
	"""Base class for all derive failures; carries a best-effort span."""

	code = "E-DERIVE"
	phase = "parser"

	def __init__(self, message: str, *, span: Optional[Span] = None) -> None:
		super().__init__(message)
		self.message = message
		self.span = span or Span()

	def to_diagnostic(self) -> Diagnostic:
		return Diagnostic(
			message=self.message,
			code=self.code,
			phase=self.phase,
			severity="error",
			span=self.span,
		)


class UnsupportedConstructError(DeriveError):
	code = "E-UNSUPPORTED"


class MalformedInputError(DeriveError):
	code = "E-MALFORMED"


class GeneratorError(DeriveError):
	code = "E-INTERNAL"
	phase = "codegen"


__all__ = ["DeriveError", "UnsupportedConstructError", "MalformedInputError", "GeneratorError"]
