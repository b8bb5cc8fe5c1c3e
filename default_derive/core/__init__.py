"""
default_derive.core: shared location/diagnostic types used across stages.

Modules:
  - span: best-effort source location
  - diagnostics: Diagnostic record handed to the host/CLI
"""

__all__ = [
    "span",
    "diagnostics",
]
