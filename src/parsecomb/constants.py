"""Shared constants for parsecomb.

This module provides centralized constants used across the syntax,
combinator and driver packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Line handling: characters treated as line breaks by position tracking
- Character classes: fixed alphabets used by primitive parsers
- Demonstration data: the operator table used by the example scripts

Python 3.13+. Zero external dependencies.
"""

from types import MappingProxyType
from typing import Final

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Line handling
    "LINE_TERMINATORS",
    "CRLF",
    # Character classes
    "SIGN_CHARS",
    "EXPONENT_CHARS",
    "OPERATOR_CHARS",
    "SPACE_CHARS",
    "PARENTHESES",
    "SQUARE_BRACKETS",
    "BRACKETS",
    # Demonstration data
    "DEFAULT_OPERATOR_TABLE",
]

# ============================================================================
# LINE HANDLING
# ============================================================================

# Both LF and CR terminate a line. A CRLF pair counts as ONE line break
# when computing line:column (see syntax.cursor).
LINE_TERMINATORS: Final[frozenset[str]] = frozenset({"\n", "\r"})
CRLF: Final[str] = "\r\n"

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

SIGN_CHARS: Final[str] = "+-"
EXPONENT_CHARS: Final[str] = "eE"
OPERATOR_CHARS: Final[str] = "+*-/%"
SPACE_CHARS: Final[str] = " \t"
PARENTHESES: Final[str] = "()"
SQUARE_BRACKETS: Final[str] = "[]"
BRACKETS: Final[str] = "{}"

# ============================================================================
# DEMONSTRATION DATA
# ============================================================================

# Read-only view so the shared default cannot be mutated by callers.
DEFAULT_OPERATOR_TABLE: Final = MappingProxyType({"+": 1, "-": 2, "*": 3, "/": 3})
