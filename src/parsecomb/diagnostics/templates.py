"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All exception messages are created here. NO f-strings in exception
    constructors!
    """

    @staticmethod
    def no_terminators(combinator: str) -> Diagnostic:
        """N-ary combinator built without terminator parsers.

        Args:
            combinator: Name of the N-ary combinator

        Returns:
            Diagnostic for NO_TERMINATORS
        """
        return Diagnostic(
            code=DiagnosticCode.NO_TERMINATORS,
            message=f"{combinator}() requires at least one terminator parser",
            hint=f'Pass one or more parsers, e.g. {combinator}(char(";"), newline())',
        )

    @staticmethod
    def empty_delimiter(combinator: str) -> Diagnostic:
        """Region combinator built with an empty delimiter string.

        Args:
            combinator: Name of the region combinator

        Returns:
            Diagnostic for EMPTY_DELIMITER
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_DELIMITER,
            message=f"{combinator}() delimiters must be non-empty strings",
            hint="An empty delimiter matches everywhere; use a parser delimiter instead",
        )

    @staticmethod
    def empty_operator() -> Diagnostic:
        """Precedence table containing an empty operator.

        Returns:
            Diagnostic for EMPTY_OPERATOR
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_OPERATOR,
            message="Operator precedence table contains an empty operator",
            hint="Remove the '' entry from the table",
        )

    @staticmethod
    def unknown_locale(locale_code: str, reason: str) -> Diagnostic:
        """Locale not recognized by Babel.

        Args:
            locale_code: The locale identifier that failed
            reason: Underlying error text

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=f"Unknown locale '{locale_code}': {reason}",
            hint="Use a CLDR locale identifier such as 'en_US' or 'de_DE'",
        )

    @staticmethod
    def negative_count(combinator: str, count: int) -> Diagnostic:
        """Lookahead combinator built with a negative character count.

        Args:
            combinator: Name of the combinator
            count: The rejected count

        Returns:
            Diagnostic for NEGATIVE_COUNT
        """
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_COUNT,
            message=f"{combinator}() count must be non-negative, got {count}",
            hint=f"Use {combinator}(0) for an empty lookahead",
        )

    @staticmethod
    def ambiguous_unpack(count: int) -> Diagnostic:
        """Unpacking a capture with more than one element.

        Args:
            count: Number of captured elements

        Returns:
            Diagnostic for AMBIGUOUS_UNPACK
        """
        return Diagnostic(
            code=DiagnosticCode.AMBIGUOUS_UNPACK,
            message=(
                f"Expected a capture with at most one element, but found {count} elements"
            ),
            hint="Use the tuple directly, or wrap a single-value parser with pack()",
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Character access past the end of input.

        Args:
            position: Cursor position

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=f"Unexpected EOF at position {position}",
            position=position,
        )
