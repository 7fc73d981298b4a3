"""Locale-aware number primitive backed by Babel CLDR data.

- locale_number() matches a number written with a locale's symbols
- locale_number_value() converts the matched text to Decimal

Babel Dependency:
    This module requires Babel for CLDR data. Import is deferred to parser
    construction time so core installations never import Babel. A clear
    BabelImportError is raised when Babel is missing.

Thread-safe. Symbols are resolved once, when the parser is built.

Python 3.13+.
"""

from dataclasses import dataclass
from decimal import Decimal

from parsecomb.core.babel_compat import (
    get_babel_numbers,
    get_locale_class,
    get_unknown_locale_error,
)
from parsecomb.diagnostics import ErrorTemplate, ParserConfigurationError
from parsecomb.syntax.cursor import Cursor
from parsecomb.syntax.result import Failure, MatchResult, Parser, Success

__all__ = ["NumberSymbols", "locale_number", "locale_number_value", "number_symbols"]


@dataclass(frozen=True, slots=True)
class NumberSymbols:
    """CLDR number symbols of one locale.

    Attributes:
        locale_code: Locale the symbols were resolved for
        decimal: Decimal separator ("." for en_US, "," for de_DE)
        group: Digit grouping separator
        plus: Plus sign
        minus: Minus sign
    """

    locale_code: str
    decimal: str
    group: str
    plus: str
    minus: str


def number_symbols(locale_code: str) -> NumberSymbols:
    """Resolve the number symbols of a locale.

    Raises:
        BabelImportError: If Babel is not installed
        ParserConfigurationError: If the locale is unknown
    """
    numbers = get_babel_numbers()
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()
    try:
        locale = locale_class.parse(locale_code)
    except (unknown_locale_error, ValueError, TypeError) as e:
        raise ParserConfigurationError(
            ErrorTemplate.unknown_locale(locale_code, str(e))
        ) from e
    return NumberSymbols(
        locale_code=locale_code,
        decimal=numbers.get_decimal_symbol(locale),
        group=numbers.get_group_symbol(locale),
        plus=numbers.get_plus_sign_symbol(locale),
        minus=numbers.get_minus_sign_symbol(locale),
    )


def _match_any(cursor: Cursor, candidates: tuple[str, ...]) -> Cursor | None:
    for candidate in candidates:
        if candidate and cursor.startswith(candidate):
            return cursor.advance(len(candidate))
    return None


def _skip_grouped_digits(cursor: Cursor, group: str) -> Cursor:
    """Skip digits, allowing a group separator only between digits."""
    while not cursor.is_eof:
        if cursor.current.isdecimal():
            cursor = cursor.advance()
            continue
        after_group = _match_any(cursor, (group,))
        if after_group is None or after_group.is_eof or not after_group.current.isdecimal():
            break
        cursor = after_group
    return cursor


def locale_number(locale_code: str) -> Parser[str]:
    """Match a number literal written with the symbols of a locale.

    Grammar (symbols from CLDR):
        sign? digits (group digits)* (decimal digits)?

    Returns the raw matched text; convert it with locale_number_value().

    Raises:
        BabelImportError: If Babel is not installed
        ParserConfigurationError: If the locale is unknown

    Example:
        >>> locale_number("de_DE")("1.234,5 EUR").value
        '1.234,5'
    """
    symbols = number_symbols(locale_code)
    signs = (symbols.plus, symbols.minus, "+", "-")

    def parse(cursor: Cursor) -> MatchResult[str]:
        start = cursor
        cursor = _match_any(cursor, signs) or cursor

        if cursor.is_eof or not cursor.current.isdecimal():
            return Failure(start, f"Expected {symbols.locale_code} number", ("0-9",))
        cursor = _skip_grouped_digits(cursor, symbols.group)

        after_decimal = _match_any(cursor, (symbols.decimal,))
        if (
            after_decimal is not None
            and not after_decimal.is_eof
            and after_decimal.current.isdecimal()
        ):
            cursor = _skip_grouped_digits(after_decimal, "")

        return Success(cursor.consumed_since(start), cursor)

    return Parser(parse, f"locale_number({locale_code!r})")


def locale_number_value(num_str: str, locale_code: str) -> Decimal:
    """Convert text matched by locale_number() to Decimal.

    Raises:
        BabelImportError: If Babel is not installed
        babel.numbers.NumberFormatError: If the text is not a valid number
    """
    numbers = get_babel_numbers()
    symbols = number_symbols(locale_code)
    text = num_str.replace(symbols.minus, "-").replace(symbols.plus, "+")
    return numbers.parse_decimal(text, locale=locale_code)
