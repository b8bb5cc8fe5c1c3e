# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Command line driver: derive `OurDefault` for the struct declared in a file.

	python -m default_derive foo.rs
	python -m default_derive --json - < foo.rs
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from default_derive.core.diagnostics import Diagnostic
from default_derive.emitter import EmitOptions, emit
from default_derive.errors import DeriveError
from default_derive.parser.ast import StructDecl
from default_derive.parser.grammar import parse_derive_input
from default_derive.tokens.lexer import LexError, tokenize
from default_derive.tokens.tree import render


def _diag_to_json(diag: Diagnostic, source_name: str) -> dict:
	"""Render a Diagnostic to a structured JSON-friendly dict."""
	return {
		"phase": diag.phase,
		"message": diag.message,
		"severity": diag.severity,
		"code": diag.code,
		"file": diag.span.file or source_name,
		"line": diag.span.line,
		"column": diag.span.column,
		"notes": list(diag.notes),
	}


def format_model(decl: StructDecl) -> str:
	"""Human-readable dump of a parsed struct (for `--print-model`)."""
	vis = "pub " if decl.visibility is not None else ""
	lines = [f"{vis}struct {decl.name} ({len(decl.fields)} fields)"]
	for fld in decl.fields:
		fvis = "pub " if fld.visibility is not None else ""
		lines.append(f"  {fvis}{fld.name}: {fld.type}")
	return "\n".join(lines)


def _read_source(source: str) -> str:
	if source == "-":
		return sys.stdin.read()
	return Path(source).read_text(encoding="utf-8")


def _report(diags: List[Diagnostic], source_name: str, as_json: bool) -> int:
	if as_json:
		payload = {"exit_code": 1, "diagnostics": [_diag_to_json(d, source_name) for d in diags]}
		print(json.dumps(payload))
	else:
		for diag in diags:
			print(diag.render(default_file=source_name), file=sys.stderr)
	return 1


def main(argv: Optional[List[str]] = None) -> int:
	"""
	Lex the input file, parse the struct declaration, and print the generated
	impl (or write it to `--output`).

	With --json, prints `{"exit_code", "output", "diagnostics"}` to stdout;
	otherwise diagnostics go to stderr as `file:line:col: error: message`.
	"""
	parser = argparse.ArgumentParser(description="derive OurDefault for a struct declaration")
	parser.add_argument("source", help="Path to a file holding one struct declaration (`-` for stdin)")
	parser.add_argument("-o", "--output", type=Path, help="Write the generated impl to this path")
	parser.add_argument("--trait-path", default=EmitOptions.trait_path, help="Path of the implemented trait")
	parser.add_argument("--method-name", default=EmitOptions.method_name, help="Name of the generated constructor")
	parser.add_argument(
		"--default-call",
		default=EmitOptions.default_call,
		help="Expression used to initialize every field",
	)
	parser.add_argument(
		"--json",
		action="store_true",
		help="Emit output and diagnostics as JSON (phase/message/severity/code/file/line/column)",
	)
	parser.add_argument(
		"--print-model",
		action="store_true",
		help="Print the parsed declaration instead of the generated impl",
	)
	args = parser.parse_args(argv)

	source_name = "<stdin>" if args.source == "-" else args.source
	try:
		text = _read_source(args.source)
	except OSError as err:
		diag = Diagnostic(
			message=f"cannot read {source_name}: {err.strerror or err}",
			code="E-IO",
			phase="driver",
		)
		return _report([diag], source_name, args.json)

	try:
		tokens = tokenize(text, file=source_name)
	except LexError as err:
		diag = Diagnostic(message=str(err), code="E-LEX", phase="lexer", span=err.span)
		return _report([diag], source_name, args.json)

	options = EmitOptions(
		trait_path=args.trait_path,
		method_name=args.method_name,
		default_call=args.default_call,
	)
	try:
		decl = parse_derive_input(tokens)
		output = format_model(decl) if args.print_model else render(emit(decl, options))
	except DeriveError as err:
		return _report([err.to_diagnostic()], source_name, args.json)

	if args.output is not None:
		args.output.write_text(output + "\n", encoding="utf-8")
	if args.json:
		print(json.dumps({"exit_code": 0, "output": output, "diagnostics": []}))
	elif args.output is None:
		print(output)
	return 0


__all__ = ["main", "format_model"]
