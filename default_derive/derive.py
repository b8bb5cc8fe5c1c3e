# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Host-facing entry points.

The host supplies the token stream of the declaration being derived and gets
back the token stream to splice in after it. Two flavours:

- `derive_our_default` raises `DeriveError` on any failure (for hosts that
  propagate exceptions),
- `expand` never raises for derive failures and instead returns
  `(None, [Diagnostic])`, mirroring how the other passes report problems.

Either way the caller gets a complete stream or nothing.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from default_derive.core.diagnostics import Diagnostic
from default_derive.core.span import Span
from default_derive.emitter import EmitOptions, emit
from default_derive.errors import DeriveError
from default_derive.parser.grammar import parse_derive_input
from default_derive.tokens.tree import TokenStream, TokenTree


def derive_our_default(
	tokens: TokenStream,
	options: EmitOptions = EmitOptions(),
	*,
	end_span: Optional[Span] = None,
) -> List[TokenTree]:
	"""Parse the declaration in `tokens` and return the generated impl."""
	decl = parse_derive_input(tokens, end_span=end_span)
	return emit(decl, options)


def expand(
	tokens: TokenStream,
	options: EmitOptions = EmitOptions(),
	*,
	end_span: Optional[Span] = None,
) -> Tuple[Optional[List[TokenTree]], List[Diagnostic]]:
	"""Like `derive_our_default`, but report failures as diagnostics."""
	try:
		return derive_our_default(tokens, options, end_span=end_span), []
	except DeriveError as err:
		return None, [err.to_diagnostic()]


__all__ = ["derive_our_default", "expand"]
