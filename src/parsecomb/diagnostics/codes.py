"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = ["Diagnostic", "DiagnosticCode"]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration errors (parser construction misuse)
        2000-2999: Usage errors (misuse of a parse result)
        3000-3999: Cursor errors (internal end-of-input guards)
    """

    # Configuration errors (1000-1999)
    NO_TERMINATORS = 1001
    EMPTY_DELIMITER = 1002
    EMPTY_OPERATOR = 1003
    UNKNOWN_LOCALE = 1004
    NEGATIVE_COUNT = 1005

    # Usage errors (2000-2999)
    AMBIGUOUS_UNPACK = 2001

    # Cursor errors (3000-3999)
    UNEXPECTED_EOF = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        position: Character offset the diagnostic refers to (if any)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    position: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[NO_TERMINATORS]: until_n() requires at least one terminator parser
              = help: Pass one or more parsers, e.g. until_n(char(";"), newline())

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.position is not None:
            lines.append(f"  --> position {self.position}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
