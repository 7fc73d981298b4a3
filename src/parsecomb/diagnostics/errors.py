"""parsecomb exception hierarchy with structured diagnostics.

Exceptions are reserved for programmer misuse. Ordinary "no match" outcomes
are reported through Failure results and never raise.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ParsecombError(Exception):
    """Base exception for all parsecomb errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ParsecombError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ParserConfigurationError(ParsecombError, ValueError):
    """Parser built with invalid arguments.

    Raised at construction time, before any input is seen:
    - N-ary until/loop combinator given zero terminators
    - Empty delimiter string for a region combinator
    - Empty operator text in a precedence table
    - Unknown locale for a locale-aware primitive
    """


class UnpackError(ParsecombError, ValueError):
    """A multi-valued capture was unpacked into a single value.

    Raised by unpack() when the wrapped parser produced more than one element.
    """

    def __init__(self, message: str | Diagnostic, *, count: int) -> None:
        """Initialize UnpackError.

        Args:
            message: Error message string OR Diagnostic object
            count: Number of captured elements
        """
        super().__init__(message)
        self.count = count
