"""Diagnostic system for parsecomb errors.

Provides structured error diagnostics with codes and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import ParsecombError, ParserConfigurationError, UnpackError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "ParsecombError",
    "ParserConfigurationError",
    "UnpackError",
]
