# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span representation used by tokens and diagnostics.

A Span carries optional file/line/column info when the token source knows it.
Token trees built by hand (e.g. in tests, or by a host that has no positions)
simply use `Span()`, which denotes an unknown location.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None

	@classmethod
	def from_meta(cls, meta: Any, *, file: Optional[str] = None) -> "Span":
		"""
		Construct a Span from a lark `Token`/`Meta`-like object.

		If `meta` is already a Span, it is returned unchanged. Missing
		attributes (e.g. an empty lark `Meta`) yield `None` fields.
		"""
		if meta is None:
			return cls(file=file)
		if isinstance(meta, cls):
			return meta
		return cls(
			file=file,
			line=getattr(meta, "line", None),
			column=getattr(meta, "column", None),
			end_line=getattr(meta, "end_line", None),
			end_column=getattr(meta, "end_column", None),
		)

	@property
	def known(self) -> bool:
		return self.line is not None

	def short(self) -> str:
		"""Format as `file:line:column`, using `?` for unknown parts."""
		f = self.file or "<input>"
		l = self.line if self.line is not None else "?"
		c = self.column if self.column is not None else "?"
		return f"{f}:{l}:{c}"


__all__ = ["Span"]
