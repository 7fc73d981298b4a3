"""Primitive parsers: leaf matchers over the head of the input.

Contract shared by every primitive:
    - On match: Success(matched_text, cursor_after_match)
    - On mismatch or empty input: Failure at the input cursor
    - No side effects, never raises for any input

Most single-character primitives are thin wrappers over satisfy().
"""

from collections.abc import Callable

from parsecomb.constants import (
    BRACKETS,
    EXPONENT_CHARS,
    LINE_TERMINATORS,
    OPERATOR_CHARS,
    PARENTHESES,
    SIGN_CHARS,
    SPACE_CHARS,
    SQUARE_BRACKETS,
)
from parsecomb.diagnostics import ErrorTemplate, ParserConfigurationError
from parsecomb.syntax.cursor import Cursor
from parsecomb.syntax.result import Failure, MatchResult, Parser, Success

__all__ = [
    "any_char",
    "brackets",
    "c_identifier",
    "char",
    "digit",
    "ends_with",
    "exponentiation",
    "go_to",
    "in_range",
    "letter",
    "letter_or_digit",
    "lower_letter",
    "newline",
    "not_in_range",
    "number",
    "number_value",
    "one_of",
    "operator",
    "parenthesis",
    "peek",
    "satisfy",
    "space",
    "square_brackets",
    "text",
    "text_exact",
    "upper_letter",
]


def satisfy(
    predicate: Callable[[str], bool],
    name: str = "satisfy",
    expected: tuple[str, ...] = (),
) -> Parser[str]:
    """Match one character for which predicate returns True.

    Args:
        predicate: Test applied to the next character
        name: Parser name used in repr and failure messages
        expected: Descriptions of accepted characters, for diagnostics

    Example:
        >>> vowel = satisfy(lambda ch: ch in "aeiou", "vowel")
        >>> vowel("apple").value
        'a'
    """

    def parse(cursor: Cursor) -> MatchResult[str]:
        if cursor.is_eof or not predicate(cursor.current):
            return Failure(cursor, f"Expected {name}", expected)
        return Success(cursor.current, cursor.advance())

    return Parser(parse, name)


def char(c: str) -> Parser[str]:
    """Match exactly the character c."""
    return satisfy(lambda ch: ch == c, f"char({c!r})", (c,))


def one_of(chars: str) -> Parser[str]:
    """Match any single character contained in chars."""
    return satisfy(lambda ch: ch in chars, f"one_of({chars!r})", tuple(chars))


def any_char() -> Parser[str]:
    """Match any single character; fails only on empty input."""
    return satisfy(lambda _: True, "any_char()")


def digit() -> Parser[str]:
    """Match one decimal digit (Unicode category Nd)."""
    return satisfy(str.isdecimal, "digit()", ("0-9",))


def letter() -> Parser[str]:
    return satisfy(str.isalpha, "letter()", ("a-z", "A-Z"))


def lower_letter() -> Parser[str]:
    return satisfy(lambda ch: ch.isalpha() and ch.islower(), "lower_letter()", ("a-z",))


def upper_letter() -> Parser[str]:
    return satisfy(lambda ch: ch.isalpha() and ch.isupper(), "upper_letter()", ("A-Z",))


def letter_or_digit() -> Parser[str]:
    return satisfy(str.isalnum, "letter_or_digit()", ("a-z", "A-Z", "0-9"))


def in_range(lo: str, hi: str) -> Parser[str]:
    """Match one character c with lo <= c <= hi."""
    return satisfy(lambda ch: lo <= ch <= hi, f"in_range({lo!r}, {hi!r})", (f"{lo}-{hi}",))


def not_in_range(lo: str, hi: str) -> Parser[str]:
    """Match one character outside the inclusive range lo..hi."""
    return satisfy(lambda ch: not lo <= ch <= hi, f"not_in_range({lo!r}, {hi!r})")


def newline() -> Parser[str]:
    """Match a single line terminator character (\\n or \\r)."""
    return satisfy(lambda ch: ch in LINE_TERMINATORS, "newline()", ("\\n", "\\r"))


def space() -> Parser[str]:
    """Match a single space or tab."""
    return satisfy(lambda ch: ch in SPACE_CHARS, "space()", (" ", "\\t"))


def operator() -> Parser[str]:
    """Match one arithmetic operator character: + * - / %."""
    return one_of(OPERATOR_CHARS)


def parenthesis() -> Parser[str]:
    return one_of(PARENTHESES)


def square_brackets() -> Parser[str]:
    return one_of(SQUARE_BRACKETS)


def brackets() -> Parser[str]:
    return one_of(BRACKETS)


def text(target: str) -> Parser[str]:
    """Match target as a prefix of the remaining input.

    Example:
        >>> text("let")("let x").remaining
        ' x'
    """

    def parse(cursor: Cursor) -> MatchResult[str]:
        if not cursor.startswith(target):
            return Failure(cursor, f"Expected {target!r}", (target,))
        return Success(target, cursor.advance(len(target)))

    return Parser(parse, f"text({target!r})")


def exponentiation() -> Parser[str]:
    """Match the two-character power operator **."""
    return text("**")


def text_exact(target: str) -> Parser[str]:
    """Match only when the whole remaining input equals target.

    Example:
        >>> bool(text_exact("+")("+"))
        True
        >>> bool(text_exact("+")("+1"))
        False
    """

    def parse(cursor: Cursor) -> MatchResult[str]:
        if cursor.rest != target:
            return Failure(cursor, f"Expected exactly {target!r}", (target,))
        return Success(target, cursor.advance(len(target)))

    return Parser(parse, f"text_exact({target!r})")


def ends_with(target: str) -> Parser[str]:
    """Zero-width check that the remaining input ends with target.

    Consumes nothing: the cursor model only ever consumes from the front.
    """

    def parse(cursor: Cursor) -> MatchResult[str]:
        if not cursor.endswith(target):
            return Failure(cursor, f"Expected input ending with {target!r}", (target,))
        return Success(target, cursor)

    return Parser(parse, f"ends_with({target!r})")


def _skip_digits(cursor: Cursor) -> Cursor:
    while not cursor.is_eof and cursor.current.isdecimal():
        cursor = cursor.advance()
    return cursor


def number() -> Parser[str]:
    """Match a numeric literal: [+-]? digits ('.' digits?)? ([eE] [+-]? digits)?

    Returns the raw text. The mantissa needs at least one digit on either side
    of the decimal point; the exponent is only consumed when digits follow it.
    Use number_value() to convert the text.

    Examples:
        42 → "42"
        -3.14 → "-3.14"
        .5e-3 → ".5e-3"
        7e → "7" (remaining "e")
    """

    def parse(cursor: Cursor) -> MatchResult[str]:
        start = cursor

        if not cursor.is_eof and cursor.current in SIGN_CHARS:
            cursor = cursor.advance()

        int_end = _skip_digits(cursor)
        has_digits = int_end.pos > cursor.pos
        cursor = int_end

        if not cursor.is_eof and cursor.current == ".":
            frac_end = _skip_digits(cursor.advance())
            if has_digits or frac_end.pos > cursor.pos + 1:
                has_digits = True
                cursor = frac_end

        if not has_digits:
            return Failure(start, "Expected number", ("0-9",))

        if not cursor.is_eof and cursor.current in EXPONENT_CHARS:
            exp = cursor.advance()
            if not exp.is_eof and exp.current in SIGN_CHARS:
                exp = exp.advance()
            exp_end = _skip_digits(exp)
            if exp_end.pos > exp.pos:
                cursor = exp_end

        return Success(cursor.consumed_since(start), cursor)

    return Parser(parse, "number()")


def number_value(num_str: str) -> int | float:
    """Convert text matched by number() to int or float.

    Returns:
        int if the text has neither decimal point nor exponent, float otherwise
    """
    if "." in num_str or any(e in num_str for e in EXPONENT_CHARS):
        return float(num_str)
    return int(num_str)


def c_identifier() -> Parser[str]:
    """Match a C identifier prefix: [A-Za-z_][A-Za-z0-9_]*

    Letters and digits follow Unicode classification, like str.isalpha().
    """

    def parse(cursor: Cursor) -> MatchResult[str]:
        if cursor.is_eof or not (cursor.current.isalpha() or cursor.current == "_"):
            return Failure(cursor, "Expected identifier", ("a-z", "A-Z", "_"))
        start = cursor
        cursor = cursor.advance()
        while not cursor.is_eof and (cursor.current.isalnum() or cursor.current == "_"):
            cursor = cursor.advance()
        return Success(cursor.consumed_since(start), cursor)

    return Parser(parse, "c_identifier()")


def peek(n: int) -> Parser[str]:
    """Zero-width: return the next n characters; fails if fewer remain.

    Raises:
        ParserConfigurationError: If n is negative
    """
    if n < 0:
        raise ParserConfigurationError(ErrorTemplate.negative_count("peek", n))

    def parse(cursor: Cursor) -> MatchResult[str]:
        if cursor.remaining_length < n:
            return Failure(cursor, f"Expected at least {n} characters")
        return Success(cursor.slice_ahead(n), cursor)

    return Parser(parse, f"peek({n})")


def go_to(n: int) -> Parser[None]:
    """Skip n characters unconditionally, clamping at end of input.

    Always succeeds with value None.
    """

    def parse(cursor: Cursor) -> MatchResult[None]:
        return Success(None, cursor.advance(max(n, 0)))

    return Parser(parse, f"go_to({n})")
