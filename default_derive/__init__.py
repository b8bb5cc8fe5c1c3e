# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
default_derive: an `OurDefault` derive generator.

Reads the token tree of a single named-field struct declaration and emits the
token tree of an `impl OurDefault` block that builds the struct with every
field set to `Default::default()`.

The host-facing entry points live in `default_derive.derive`; the CLI entry
point is `default_derive.cli:main`.
"""

from .derive import derive_our_default, expand

__all__ = ["derive_our_default", "expand"]
