"""Tests for composition combinators.

Sequencing, choice, boolean combinators, repetition, assertions,
conditions, and the pack/unpack bridge between single and multi-valued
parsers.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from parsecomb import (
    after,
    and_,
    apply_else,
    apply_if,
    as_parser,
    before,
    char,
    choice,
    choice_keep_first,
    choice_n,
    digit,
    else_condition,
    exactly,
    if_condition,
    ignore,
    letter,
    lookahead,
    negate,
    number,
    one_of,
    one_or_more,
    or_,
    pack,
    peek,
    seq,
    seq_keep_first,
    seq_lookahead,
    seq_n,
    text,
    unpack,
    xor,
    zero_or_more,
)
from parsecomb.diagnostics import DiagnosticCode, ParserConfigurationError, UnpackError
from parsecomb.syntax import Success

digits_and_letters = st.text(alphabet=st.sampled_from("0123ab"), max_size=20)

# ============================================================================
# SEQUENCING AND CHOICE
# ============================================================================


class TestSeq:
    """Test seq and its keep-first / before / after variants."""

    def test_seq_returns_second_value(self) -> None:
        result = seq(char("a"), char("b"))("abc")

        assert result.value == "b"
        assert result.remaining == "c"

    def test_seq_first_failure(self) -> None:
        assert seq(char("a"), char("b"))("xbc").remaining == "xbc"

    def test_seq_second_failure_rewinds(self) -> None:
        result = seq(char("a"), char("b"))("axc")

        assert not result
        assert result.remaining == "axc"

    def test_seq_keep_first_with_optional_second(self) -> None:
        both = seq_keep_first(digit(), char(";"))("1;x")
        only_first = seq_keep_first(digit(), char(";"))("1x")

        assert (both.value, both.remaining) == ("1", "x")
        assert (only_first.value, only_first.remaining) == ("1", "x")

    def test_before_and_after(self) -> None:
        assert before(number(), "$")("$42;").value == "42"

        result = after(number(), ";")("42;rest")
        assert (result.value, result.remaining) == ("42", "rest")

    def test_after_missing_suffix_rewinds(self) -> None:
        result = after(number(), ";")("42 rest")

        assert not result
        assert result.remaining == "42 rest"

    def test_as_parser_wraps_literal(self) -> None:
        assert as_parser("ab")("abc").remaining == "c"
        p = digit()
        assert as_parser(p) is p


class TestChoice:
    """Test choice, choice_n and choice_keep_first."""

    def test_left_bias(self) -> None:
        """When both alternatives match, the first wins."""
        assert choice(text("a"), text("ab"))("abc").remaining == "bc"

    def test_falls_back_to_second(self) -> None:
        assert choice(char("x"), char("a"))("abc").value == "a"

    def test_both_fail(self) -> None:
        result = choice(char("x"), char("y"))("abc")

        assert not result
        assert result.remaining == "abc"

    def test_or_is_choice(self) -> None:
        assert or_(char("x"), char("a"))("a").value == "a"

    def test_choice_n_first_match_wins(self) -> None:
        p = choice_n(char("x"), char("y"), char("a"), letter())

        assert p("abc").value == "a"
        assert not p("123")

    def test_choice_n_single(self) -> None:
        assert choice_n(digit())("5").value == "5"

    def test_choice_n_empty_raises(self) -> None:
        with pytest.raises(ParserConfigurationError) as exc_info:
            choice_n()

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NO_TERMINATORS

    def test_choice_keep_first_prefers_first(self) -> None:
        assert choice_keep_first(digit(), char(";"))("1;").value == "1"

    def test_choice_keep_first_second_yields_none(self) -> None:
        result = choice_keep_first(digit(), char(";"))(";1")

        assert isinstance(result, Success)
        assert result.value is None
        assert result.remaining == "1"


class TestBooleanCombinators:
    """Test and_ and xor."""

    def test_and_returns_second_from_original_input(self) -> None:
        result = and_(peek(2), digit())("12")

        assert result.value == "1"
        assert result.remaining == "2"

    def test_and_fails_if_first_fails(self) -> None:
        assert not and_(letter(), digit())("12")

    def test_xor_exactly_one(self) -> None:
        assert xor(digit(), letter())("a").value == "a"
        assert not xor(digit(), one_of("0123456789"))("1")
        assert not xor(digit(), letter())(";")


# ============================================================================
# REPETITION
# ============================================================================


class TestRepetition:
    """Test zero_or_more, one_or_more and exactly."""

    def test_zero_or_more(self) -> None:
        assert zero_or_more(digit())("12a").value == ("1", "2")
        assert zero_or_more(digit())("abc").value == ()

    def test_zero_or_more_stops_on_zero_width_match(self) -> None:
        result = zero_or_more(peek(1))("abc")

        assert result.value == ()
        assert result.remaining == "abc"

    def test_one_or_more_requires_one(self) -> None:
        assert one_or_more(digit())("123x").value == ("1", "2", "3")
        assert not one_or_more(digit())("x")

    def test_exactly_counts_attempts(self) -> None:
        result = exactly(digit(), 3)("1a23")

        assert result.value == ("1",)
        assert result.remaining == "a23"

    def test_exactly_full_run(self) -> None:
        result = exactly(digit(), 2)("123")

        assert result.value == ("1", "2")
        assert result.remaining == "3"

    def test_exactly_stops_at_end_of_input(self) -> None:
        assert exactly(digit(), 5)("12").value == ("1", "2")

    def test_exactly_non_positive(self) -> None:
        result = exactly(digit(), 0)("12")

        assert result.value == ()
        assert result.remaining == "12"

    @given(digits_and_letters)
    def test_one_or_more_agrees_with_zero_or_more(self, source: str) -> None:
        """PROPERTY: one_or_more matches exactly when zero_or_more finds something."""
        many = zero_or_more(digit())(source)
        some = one_or_more(digit())(source)

        if many.value:
            assert some == many
        else:
            assert not some
            assert some.remaining == source


# ============================================================================
# ASSERTIONS
# ============================================================================


class TestAssertions:
    """Test lookahead, negate and ignore."""

    def test_lookahead_does_not_consume(self) -> None:
        result = lookahead(text("ab"))("abc")

        assert result.value == "ab"
        assert result.remaining == "abc"

    def test_negate(self) -> None:
        assert negate(digit())("a1").value == "a"
        assert not negate(digit())("1a")

    def test_negate_fails_at_end_of_input(self) -> None:
        assert not negate(digit())("")

    def test_ignore(self) -> None:
        result = ignore(number())("12;")

        assert result
        assert result.value is None
        assert result.remaining == ";"
        assert not ignore(number())("x")

    @given(st.text(max_size=20))
    def test_lookahead_is_zero_width(self, source: str) -> None:
        """PROPERTY: lookahead(p).remaining == input, success iff p succeeds."""
        p = text("ab")
        result = lookahead(p)(source)

        assert bool(result) == bool(p(source))
        assert result.remaining == source


# ============================================================================
# CONDITIONS
# ============================================================================


class TestConditions:
    """Test if/else conditions on results and on input."""

    def test_if_condition_on_result(self) -> None:
        even = if_condition(digit(), lambda r: bool(r) and int(r.value) % 2 == 0)

        assert even("4").value == "4"
        assert not even("3")

    def test_else_condition(self) -> None:
        odd = else_condition(digit(), lambda r: bool(r) and int(r.value) % 2 == 0)

        assert odd("3").value == "3"
        assert not odd("4")

    def test_apply_if_and_else_on_input(self) -> None:
        starts_hash = lambda rest: rest.startswith("#")  # noqa: E731

        assert apply_if(char("#"), starts_hash)("#x")
        assert not apply_if(char("#"), starts_hash)("x")
        assert apply_else(letter(), starts_hash)("x").value == "x"
        assert not apply_else(letter(), starts_hash)("#x")


# ============================================================================
# N-ARY SEQUENCES AND PACKING
# ============================================================================


class TestSeqN:
    """Test seq_n and seq_lookahead."""

    def test_seq_n_collects_all(self) -> None:
        result = seq_n(digit(), char("+"), digit())("1+2=")

        assert result.value == ("1", "+", "2")
        assert result.remaining == "="

    def test_seq_n_partial(self) -> None:
        result = seq_n(digit(), char("+"), digit())("1-2")

        assert result
        assert result.value == ("1",)
        assert result.remaining == "-2"

    def test_seq_lookahead(self) -> None:
        result = seq_lookahead(digit(), digit())("12")

        assert result.value == ("1", "2")
        assert result.remaining == "12"


class TestPackUnpack:
    """Test pack, unpack and UnpackError."""

    def test_pack_success(self) -> None:
        result = pack(digit())("5x")

        assert result.value == ("5",)
        assert result.remaining == "x"

    def test_pack_failure_is_empty_success(self) -> None:
        result = pack(digit())("x")

        assert result
        assert result.value == ()
        assert result.remaining == "x"

    def test_unpack_single(self) -> None:
        assert unpack(pack(digit()))("5").value == "5"

    def test_unpack_empty_fails(self) -> None:
        result = unpack(pack(digit()))("x")

        assert not result
        assert result.remaining == "x"

    def test_unpack_many_raises(self) -> None:
        with pytest.raises(UnpackError) as exc_info:
            unpack(one_or_more(digit()))("123")

        assert exc_info.value.count == 3
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.AMBIGUOUS_UNPACK

    @given(digits_and_letters)
    def test_unpack_pack_is_identity(self, source: str) -> None:
        """PROPERTY: unpack(pack(p)) behaves like p."""
        p = digit()
        direct = p(source)
        round_trip = unpack(pack(p))(source)

        assert bool(direct) == bool(round_trip)
        assert direct.remaining == round_trip.remaining
        if direct:
            assert round_trip.value == direct.value
