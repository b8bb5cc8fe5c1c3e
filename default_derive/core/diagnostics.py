"""
Common diagnostic structure for the lexer/parser/codegen stages.

A diagnostic is a message plus optional code/phase/span metadata. Every fatal
condition the derive can hit is surfaced to the host as exactly one of these.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .span import Span


@dataclass
class Diagnostic:
	"""Represents a derive diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Stage that produced the diagnostic: "lexer", "parser" or "codegen".
	#
	# Parser diagnostics are caller errors (the input is unsupported or
	# malformed); codegen diagnostics are generator bugs.
	phase: str | None = None
	severity: str = "error"
	span: Span = field(default_factory=Span)  # Source location (Span() denotes unknown).
	notes: list[str] = field(default_factory=list)

	def __post_init__(self) -> None:
		# Normalize missing spans to the sentinel Span() so callers can rely on
		# a structured object instead of None.
		if self.span is None:  # type: ignore[unreachable]
			self.span = Span()

	def render(self, default_file: str | None = None) -> str:
		"""Render as a single human-oriented line (`file:line:col: error: msg`)."""
		prefix = ""
		file = self.span.file or default_file
		if self.span.known:
			prefix = f"{replace(self.span, file=file).short()}: "
		elif file is not None:
			prefix = f"{file}: "
		text = f"{prefix}{self.severity}: {self.message}"
		if self.code:
			text += f" [{self.code}]"
		return text


__all__ = ["Diagnostic"]
