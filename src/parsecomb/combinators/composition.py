"""Composition combinators: sequencing, choice, repetition and assertions.

Every combinator takes parsers and returns a new Parser; nothing is shared
between invocations. Unless a docstring says otherwise, a combinator that
fails returns Failure at the cursor it was given, so an enclosing choice can
always retry from the same place.
"""

from collections.abc import Callable
from functools import reduce

from parsecomb.combinators.primitives import text
from parsecomb.diagnostics import ErrorTemplate, ParserConfigurationError, UnpackError
from parsecomb.syntax.cursor import Cursor
from parsecomb.syntax.result import Failure, MatchResult, Parser, Success

__all__ = [
    "after",
    "and_",
    "apply_else",
    "apply_if",
    "as_parser",
    "before",
    "choice",
    "choice_keep_first",
    "choice_n",
    "else_condition",
    "exactly",
    "if_condition",
    "ignore",
    "lookahead",
    "negate",
    "one_or_more",
    "or_",
    "pack",
    "seq",
    "seq_keep_first",
    "seq_lookahead",
    "seq_n",
    "unpack",
    "xor",
    "zero_or_more",
]


def as_parser(p: "Parser[str] | str") -> Parser[str]:
    """Accept a literal where a parser is expected."""
    if isinstance(p, str):
        return text(p)
    return p


def _rewind(failure: Failure, cursor: Cursor) -> Failure:
    """Report a nested failure at the cursor the combinator was given."""
    if failure.cursor == cursor:
        return failure
    return Failure(cursor, failure.message, failure.expected)


# ============================================================================
# SEQUENCING AND CHOICE
# ============================================================================


def seq[T](p1: Parser[object], p2: Parser[T]) -> Parser[T]:
    """Run p1, then p2 on what p1 left; return p2's result.

    Short-circuits on the first failure.

    Example:
        >>> from parsecomb import char
        >>> seq(char("a"), char("b"))("abc").value
        'b'
    """

    def parse(cursor: Cursor) -> MatchResult[T]:
        first = p1(cursor)
        if not first:
            return first
        second = p2(first.cursor)
        if not second:
            return _rewind(second, cursor)
        return second

    return Parser(parse, f"seq({p1.name}, {p2.name})")


def choice[T](p1: Parser[T], p2: Parser[T]) -> Parser[T]:
    """Return p1's success, otherwise run p2 on the original input."""

    def parse(cursor: Cursor) -> MatchResult[T]:
        first = p1(cursor)
        if first:
            return first
        return p2(cursor)

    return Parser(parse, f"choice({p1.name}, {p2.name})")


def choice_n[T](*parsers: Parser[T]) -> Parser[T]:
    """Right-associated choice over any number of parsers.

    Raises:
        ParserConfigurationError: If no parsers are given
    """
    if not parsers:
        raise ParserConfigurationError(ErrorTemplate.no_terminators("choice_n"))
    return reduce(lambda acc, p: choice(p, acc), reversed(parsers[:-1]), parsers[-1])


def and_[T](p1: Parser[object], p2: Parser[T]) -> Parser[T]:
    """Succeed with p2's result when both parsers match the same input."""

    def parse(cursor: Cursor) -> MatchResult[T]:
        first = p1(cursor)
        if not first:
            return first
        return p2(cursor)

    return Parser(parse, f"and_({p1.name}, {p2.name})")


def or_[T](p1: Parser[T], p2: Parser[T]) -> Parser[T]:
    """Boolean alias of choice()."""
    return choice(p1, p2)


def xor[T](p1: Parser[T], p2: Parser[T]) -> Parser[T]:
    """Succeed iff exactly one parser matches, returning that parser's result."""

    def parse(cursor: Cursor) -> MatchResult[T]:
        first = p1(cursor)
        second = p2(cursor)
        if bool(first) == bool(second):
            reason = "both" if first else "neither"
            return Failure(cursor, f"Expected exactly one alternative, {reason} matched")
        return first if first else second

    return Parser(parse, f"xor({p1.name}, {p2.name})")


def seq_keep_first[T](p1: Parser[T], p2: Parser[object]) -> Parser[T]:
    """Run p1, then try p2; keep p1's value and whatever p2 consumed.

    p2 is optional: when it fails, the result is p1's success unchanged.
    """

    def parse(cursor: Cursor) -> MatchResult[T]:
        first = p1(cursor)
        if not first:
            return first
        second = p2(first.cursor)
        if not second:
            return first
        return Success(first.value, second.cursor)

    return Parser(parse, f"seq_keep_first({p1.name}, {p2.name})")


def choice_keep_first[T](p1: Parser[T], p2: Parser[object]) -> Parser[T | None]:
    """Return p1's success; otherwise consume p2 but produce no value.

    When p1 fails and p2 matches, the result is Success(None, ...) carrying
    p2's consumption.
    """

    def parse(cursor: Cursor) -> MatchResult[T | None]:
        first = p1(cursor)
        if first:
            return first
        second = p2(cursor)
        if not second:
            return second
        return Success(None, second.cursor)

    return Parser(parse, f"choice_keep_first({p1.name}, {p2.name})")


def before[T](p: Parser[T], previous: "Parser[object] | str") -> Parser[T]:
    """Match previous, then p; return p's result.

    Example:
        >>> from parsecomb import number
        >>> before(number(), "$")("$42;").value
        '42'
    """
    prefix = as_parser(previous)

    def parse(cursor: Cursor) -> MatchResult[T]:
        lead = prefix(cursor)
        if not lead:
            return lead
        result = p(lead.cursor)
        if not result:
            return _rewind(result, cursor)
        return result

    return Parser(parse, f"before({p.name}, {prefix.name})")


def after[T](p: Parser[T], following: "Parser[object] | str") -> Parser[T]:
    """Match p, then following; keep p's value and consume both."""
    suffix = as_parser(following)

    def parse(cursor: Cursor) -> MatchResult[T]:
        result = p(cursor)
        if not result:
            return result
        trail = suffix(result.cursor)
        if not trail:
            return _rewind(trail, cursor)
        return Success(result.value, trail.cursor)

    return Parser(parse, f"after({p.name}, {suffix.name})")


# ============================================================================
# REPETITION
# ============================================================================


def _repeat[T](p: Parser[T], cursor: Cursor) -> tuple[tuple[T, ...], Cursor]:
    values: list[T] = []
    while True:
        result = p(cursor)
        # A match that consumes nothing would repeat forever
        if not result or result.cursor.pos == cursor.pos:
            return tuple(values), cursor
        values.append(result.value)
        cursor = result.cursor


def zero_or_more[T](p: Parser[T]) -> Parser[tuple[T, ...]]:
    """Apply p repeatedly; never fails.

    Stops when p fails or succeeds without consuming input.

    Example:
        >>> from parsecomb import digit
        >>> zero_or_more(digit())("12a").value
        ('1', '2')
        >>> zero_or_more(digit())("abc").value
        ()
    """

    def parse(cursor: Cursor) -> MatchResult[tuple[T, ...]]:
        values, end = _repeat(p, cursor)
        return Success(values, end)

    return Parser(parse, f"zero_or_more({p.name})")


def one_or_more[T](p: Parser[T]) -> Parser[tuple[T, ...]]:
    """Like zero_or_more(), but requires at least one consuming match."""

    def parse(cursor: Cursor) -> MatchResult[tuple[T, ...]]:
        values, end = _repeat(p, cursor)
        if not values:
            return Failure(cursor, f"Expected one or more of {p.name}")
        return Success(values, end)

    return Parser(parse, f"one_or_more({p.name})")


def exactly[T](p: Parser[T], n: int) -> Parser[tuple[T, ...]]:
    """Make n attempts at p, collecting only the successful values.

    n bounds attempts, not matches: a failed attempt uses up one try
    without consuming input. Attempts stop early when input runs out.
    Never fails.

    Example:
        >>> from parsecomb import digit
        >>> result = exactly(digit(), 3)("1a23")
        >>> result.value, result.remaining
        (('1',), 'a23')
    """

    def parse(cursor: Cursor) -> MatchResult[tuple[T, ...]]:
        values: list[T] = []
        attempts = 0
        while attempts < n and not cursor.is_eof:
            result = p(cursor)
            if result:
                values.append(result.value)
                cursor = result.cursor
            attempts += 1
        return Success(tuple(values), cursor)

    return Parser(parse, f"exactly({p.name}, {n})")


# ============================================================================
# ASSERTIONS
# ============================================================================


def lookahead[T](p: Parser[T]) -> Parser[T]:
    """Zero-width: p's value with the input left unconsumed."""

    def parse(cursor: Cursor) -> MatchResult[T]:
        result = p(cursor)
        if not result:
            return _rewind(result, cursor)
        return Success(result.value, cursor)

    return Parser(parse, f"lookahead({p.name})")


def negate(p: Parser[object]) -> Parser[str]:
    """Consume one character where p does NOT match.

    Fails on empty input and wherever p matches.
    """

    def parse(cursor: Cursor) -> MatchResult[str]:
        if cursor.is_eof:
            return Failure(cursor, "Unexpected end of input")
        if p(cursor):
            return Failure(cursor, f"Unexpected {p.name}")
        return Success(cursor.current, cursor.advance())

    return Parser(parse, f"negate({p.name})")


def ignore(p: Parser[object]) -> Parser[None]:
    """Keep p's consumption, discard its value."""

    def parse(cursor: Cursor) -> MatchResult[None]:
        result = p(cursor)
        if not result:
            return result
        return Success(None, result.cursor)

    return Parser(parse, f"ignore({p.name})")


# ============================================================================
# CONDITIONS
# ============================================================================


def if_condition[T](
    p: Parser[T], condition: Callable[[MatchResult[T]], bool]
) -> Parser[T]:
    """Run p and keep its result only when condition(result) holds."""

    def parse(cursor: Cursor) -> MatchResult[T]:
        result = p(cursor)
        if condition(result):
            return result
        return Failure(cursor, f"Condition rejected {p.name}")

    return Parser(parse, f"if_condition({p.name})")


def else_condition[T](
    p: Parser[T], condition: Callable[[MatchResult[T]], bool]
) -> Parser[T]:
    """Run p and keep its result only when condition(result) does NOT hold."""
    return if_condition(p, lambda result: not condition(result))


def apply_if[T](p: Parser[T], condition: Callable[[str], bool]) -> Parser[T]:
    """Run p only when condition(remaining_text) holds."""

    def parse(cursor: Cursor) -> MatchResult[T]:
        if not condition(cursor.rest):
            return Failure(cursor, f"Input rejected before {p.name}")
        return p(cursor)

    return Parser(parse, f"apply_if({p.name})")


def apply_else[T](p: Parser[T], condition: Callable[[str], bool]) -> Parser[T]:
    """Run p only when condition(remaining_text) does NOT hold."""
    return apply_if(p, lambda rest: not condition(rest))


# ============================================================================
# N-ARY SEQUENCES AND PACKING
# ============================================================================


def _collect[T](
    parsers: tuple[Parser[T], ...], cursor: Cursor
) -> tuple[tuple[T, ...], Cursor]:
    values: list[T] = []
    for p in parsers:
        result = p(cursor)
        if not result:
            break
        values.append(result.value)
        cursor = result.cursor
    return tuple(values), cursor


def seq_n[T](*parsers: Parser[T]) -> Parser[tuple[T, ...]]:
    """Run parsers in order, collecting values up to the first failure.

    Never fails: a partial run returns the values matched so far.
    """

    def parse(cursor: Cursor) -> MatchResult[tuple[T, ...]]:
        values, end = _collect(parsers, cursor)
        return Success(values, end)

    return Parser(parse, f"seq_n({', '.join(p.name for p in parsers)})")


def seq_lookahead[T](*parsers: Parser[T]) -> Parser[tuple[T, ...]]:
    """Like seq_n(), but leaves the input unconsumed."""

    def parse(cursor: Cursor) -> MatchResult[tuple[T, ...]]:
        values, _ = _collect(parsers, cursor)
        return Success(values, cursor)

    return Parser(parse, f"seq_lookahead({', '.join(p.name for p in parsers)})")


def pack[T](p: Parser[T]) -> Parser[tuple[T, ...]]:
    """Wrap p's value in a 1-tuple; a failure of p becomes an empty tuple."""

    def parse(cursor: Cursor) -> MatchResult[tuple[T, ...]]:
        result = p(cursor)
        if not result:
            return Success((), cursor)
        return Success((result.value,), result.cursor)

    return Parser(parse, f"pack({p.name})")


def unpack[T](p: Parser[tuple[T, ...]]) -> Parser[T]:
    """Extract the single element of a tuple-valued parser.

    An empty capture is a Failure.

    Raises:
        UnpackError: At parse time, if more than one element was captured
    """

    def parse(cursor: Cursor) -> MatchResult[T]:
        result = p(cursor)
        if not result:
            return result
        match result.value:
            case ():
                return Failure(cursor, f"{p.name} captured nothing")
            case (value,):
                return Success(value, result.cursor)
            case values:
                count = len(values)
                raise UnpackError(ErrorTemplate.ambiguous_unpack(count), count=count)

    return Parser(parse, f"unpack({p.name})")
