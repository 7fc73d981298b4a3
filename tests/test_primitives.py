"""Tests for primitive parsers.

Covers single-character classes, literals, numbers, identifiers and the
zero-width helpers, plus the shared contract that a failing primitive
leaves its input untouched.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from parsecomb import (
    any_char,
    brackets,
    c_identifier,
    char,
    digit,
    ends_with,
    exponentiation,
    go_to,
    in_range,
    letter,
    letter_or_digit,
    lower_letter,
    newline,
    not_in_range,
    number,
    number_value,
    one_of,
    operator,
    parenthesis,
    peek,
    space,
    square_brackets,
    text,
    text_exact,
    upper_letter,
)
from parsecomb.diagnostics import DiagnosticCode, ParserConfigurationError
from parsecomb.syntax import Cursor, Parser

ALL_PRIMITIVES: list[Parser[str]] = [
    any_char(),
    brackets(),
    c_identifier(),
    char("a"),
    digit(),
    exponentiation(),
    in_range("a", "f"),
    letter(),
    letter_or_digit(),
    lower_letter(),
    newline(),
    not_in_range("a", "f"),
    number(),
    one_of("xyz"),
    operator(),
    parenthesis(),
    space(),
    square_brackets(),
    text("let"),
    text_exact("+"),
    upper_letter(),
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================


class TestCharacterClasses:
    """Test single-character primitives."""

    @pytest.mark.parametrize(
        ("parser", "source", "value"),
        [
            (char("a"), "abc", "a"),
            (one_of("+-"), "-1", "-"),
            (any_char(), "?", "?"),
            (digit(), "7x", "7"),
            (letter(), "Zz", "Z"),
            (lower_letter(), "zZ", "z"),
            (upper_letter(), "Zz", "Z"),
            (letter_or_digit(), "9a", "9"),
            (in_range("a", "c"), "cab", "c"),
            (not_in_range("a", "c"), "dab", "d"),
            (newline(), "\r\n", "\r"),
            (space(), "\tx", "\t"),
            (operator(), "%2", "%"),
            (parenthesis(), ")", ")"),
            (square_brackets(), "[1]", "["),
            (brackets(), "}", "}"),
        ],
    )
    def test_match_consumes_one_char(self, parser: Parser[str], source: str, value: str) -> None:
        result = parser(source)

        assert result
        assert result.value == value
        assert result.remaining == source[1:]

    @pytest.mark.parametrize(
        ("parser", "source"),
        [
            (char("a"), "bac"),
            (digit(), "x7"),
            (letter(), "1a"),
            (lower_letter(), "Aa"),
            (upper_letter(), "aA"),
            (in_range("a", "c"), "d"),
            (not_in_range("a", "c"), "b"),
            (space(), "\n"),
            (operator(), "^"),
            (parenthesis(), "["),
        ],
    )
    def test_mismatch_fails(self, parser: Parser[str], source: str) -> None:
        result = parser(source)

        assert not result
        assert result.remaining == source

    def test_any_char_fails_only_on_empty(self) -> None:
        assert not any_char()("")

    def test_failure_expected_tokens(self) -> None:
        assert char(";")("x").expected == (";",)


class TestLiterals:
    """Test text, text_exact, ends_with and exponentiation."""

    def test_text_prefix(self) -> None:
        result = text("let")("let x")

        assert result.value == "let"
        assert result.remaining == " x"

    def test_text_mismatch(self) -> None:
        assert not text("let")("le")

    def test_text_exact_requires_whole_input(self) -> None:
        assert text_exact("+")("+").remaining == ""
        assert not text_exact("+")("+1")

    def test_exponentiation(self) -> None:
        assert exponentiation()("**2").remaining == "2"
        assert not exponentiation()("*2")

    def test_ends_with_is_zero_width(self) -> None:
        result = ends_with(".txt")("notes.txt")

        assert result.value == ".txt"
        assert result.remaining == "notes.txt"
        assert not ends_with(".md")("notes.txt")

    def test_ends_with_ignores_consumed_text(self) -> None:
        assert not ends_with("ab")(Cursor("ab", 1))


# ============================================================================
# NUMBERS AND IDENTIFIERS
# ============================================================================


class TestNumber:
    """Test the numeric literal grammar."""

    @pytest.mark.parametrize(
        ("source", "value", "remaining"),
        [
            ("42", "42", ""),
            ("-3.14)", "-3.14", ")"),
            ("+7", "+7", ""),
            (".5e-3", ".5e-3", ""),
            ("5.", "5.", ""),
            ("1e10x", "1e10", "x"),
            ("7e", "7", "e"),
            ("7e+", "7", "e+"),
            ("2E+3", "2E+3", ""),
        ],
    )
    def test_number_grammar(self, source: str, value: str, remaining: str) -> None:
        result = number()(source)

        assert result
        assert result.value == value
        assert result.remaining == remaining

    @pytest.mark.parametrize("source", ["", "-", ".", "+.e1", "abc"])
    def test_number_needs_a_digit(self, source: str) -> None:
        result = number()(source)

        assert not result
        assert result.remaining == source

    def test_number_value(self) -> None:
        assert number_value("42") == 42
        assert isinstance(number_value("42"), int)
        assert number_value("-2.5") == -2.5
        assert number_value("1e3") == 1000.0

    @given(st.integers())
    def test_integers_round_trip(self, n: int) -> None:
        """PROPERTY: every int literal parses whole and converts back."""
        result = number()(str(n))

        assert result.remaining == ""
        assert number_value(result.value) == n


class TestIdentifier:
    """Test c_identifier prefix matching."""

    def test_prefix_match(self) -> None:
        result = c_identifier()("_foo1 = 2")

        assert result.value == "_foo1"
        assert result.remaining == " = 2"

    def test_cannot_start_with_digit(self) -> None:
        assert not c_identifier()("1abc")


# ============================================================================
# ZERO-WIDTH AND SKIPPING
# ============================================================================


class TestPeekAndGoTo:
    """Test peek and go_to."""

    def test_peek_does_not_consume(self) -> None:
        result = peek(2)("abc")

        assert result.value == "ab"
        assert result.remaining == "abc"

    def test_peek_fails_when_short(self) -> None:
        assert not peek(4)("abc")

    def test_peek_zero_is_empty_lookahead(self) -> None:
        result = peek(0)("abc")

        assert result.value == ""
        assert result.remaining == "abc"

    def test_negative_peek_raises_at_construction(self) -> None:
        with pytest.raises(ParserConfigurationError, match="non-negative") as exc_info:
            peek(-1)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NEGATIVE_COUNT

    def test_go_to_skips(self) -> None:
        result = go_to(2)("abcd")

        assert result
        assert result.value is None
        assert result.remaining == "cd"

    def test_go_to_clamps_and_always_succeeds(self) -> None:
        assert go_to(10)("ab").remaining == ""
        assert go_to(3)("")


# ============================================================================
# SHARED CONTRACT
# ============================================================================


class TestPrimitiveContract:
    """Failure never consumes input, success never over-consumes."""

    @given(source=st.text(max_size=20), index=st.integers(0, len(ALL_PRIMITIVES) - 1))
    def test_failure_leaves_input_unchanged(self, source: str, index: int) -> None:
        """PROPERTY: Failure.remaining == input."""
        result = ALL_PRIMITIVES[index](source)

        if not result:
            assert result.remaining == source

    @given(source=st.text(max_size=20), index=st.integers(0, len(ALL_PRIMITIVES) - 1))
    def test_success_consumes_a_prefix(self, source: str, index: int) -> None:
        """PROPERTY: remaining is a suffix of the input and value its consumed prefix."""
        result = ALL_PRIMITIVES[index](source)

        if result:
            consumed = len(source) - len(result.remaining)
            assert source.endswith(result.remaining)
            assert result.value == source[:consumed]
