"""Region/capture family: text bounded by delimiters, and until/loop scanning.

Members differ along four axes:
    - delimiters given as strings vs. as parsers
    - inner text captured vs. discarded
    - terminator consumed vs. only peeked (stop-before)
    - full scanned text vs. terminator value only

String-delimited members search anywhere in the remaining input, so the
text before the opening delimiter is consumed along with the region.

Failure contract:
    Every member returns Failure at its input cursor, except not_between()
    (string form), which always succeeds and consumes the whole input.
"""

from parsecomb.combinators.composition import as_parser, choice_n
from parsecomb.diagnostics import ErrorTemplate, ParserConfigurationError
from parsecomb.syntax.cursor import Cursor
from parsecomb.syntax.result import Failure, MatchResult, Parser, Success

__all__ = [
    "between",
    "between_star",
    "capture_between",
    "capture_between_text",
    "ignore_between",
    "ignore_between_text",
    "loop",
    "loop_at",
    "loop_at_n",
    "loop_lookahead",
    "loop_lookahead_at",
    "loop_lookahead_at_n",
    "loop_lookahead_n",
    "loop_n",
    "not_between",
    "seq_at",
    "seq_lookahead_at",
    "until",
    "until_at",
    "until_at_n",
    "until_lookahead",
    "until_lookahead_at",
    "until_lookahead_at_n",
    "until_lookahead_n",
    "until_n",
]


type Delimiter = Parser[str] | str


def _require_delimiters(combinator: str, *delimiters: str) -> None:
    if not all(delimiters):
        raise ParserConfigurationError(ErrorTemplate.empty_delimiter(combinator))


def _delimiter_parsers(
    combinator: str, start: Delimiter, end: Delimiter
) -> tuple[Parser[str], Parser[str]]:
    _require_delimiters(combinator, *(d for d in (start, end) if isinstance(d, str)))
    return as_parser(start), as_parser(end)


def _locate(
    cursor: Cursor, start: str, end: str, *, repeat_start: bool = False
) -> tuple[int, int] | None:
    """Find (inner_start, end_index) of the first start...end span.

    With repeat_start, back-to-back repeats of start are absorbed into the
    opening fence before end is searched for.
    """
    start_index = cursor.find(start)
    if start_index == -1:
        return None
    inner_start = start_index + len(start)
    if repeat_start:
        while cursor.source.startswith(start, inner_start):
            inner_start += len(start)
    end_index = cursor.source.find(end, inner_start)
    if end_index == -1:
        return None
    return inner_start, end_index


# ============================================================================
# UNTIL FAMILY
# ============================================================================


def _scan_until(p: Parser[str], cursor: Cursor) -> tuple[str, Success[str]] | None:
    """Skip characters until p matches; return (skipped_text, p's success)."""
    scan = cursor
    while not scan.is_eof:
        result = p(scan)
        if result:
            return scan.consumed_since(cursor), result
        scan = scan.advance()
    return None


def _no_terminator(cursor: Cursor, p: Parser[str]) -> Failure:
    return Failure(cursor, f"{p.name} never matched", (p.name,))


def until(p: Parser[str]) -> Parser[str]:
    """Consume up to and including the first match of p.

    Returns the skipped text followed by p's matched text.

    Example:
        >>> from parsecomb import char
        >>> result = until(char(";"))("ab;cd")
        >>> result.value, result.remaining
        ('ab;', 'cd')
    """

    def parse(cursor: Cursor) -> MatchResult[str]:
        found = _scan_until(p, cursor)
        if found is None:
            return _no_terminator(cursor, p)
        skipped, end = found
        return Success(skipped + end.value, end.cursor)

    return Parser(parse, f"until({p.name})")


def until_at(p: Parser[str]) -> Parser[str]:
    """Consume up to and including the first match of p; return only p's value."""

    def parse(cursor: Cursor) -> MatchResult[str]:
        found = _scan_until(p, cursor)
        if found is None:
            return _no_terminator(cursor, p)
        return found[1]

    return Parser(parse, f"until_at({p.name})")


def until_lookahead(p: Parser[str]) -> Parser[str]:
    """Like until(), but leaves the input unconsumed."""

    def parse(cursor: Cursor) -> MatchResult[str]:
        found = _scan_until(p, cursor)
        if found is None:
            return _no_terminator(cursor, p)
        skipped, end = found
        return Success(skipped + end.value, cursor)

    return Parser(parse, f"until_lookahead({p.name})")


def until_lookahead_at(p: Parser[str]) -> Parser[str]:
    """Like until_at(), but leaves the input unconsumed."""

    def parse(cursor: Cursor) -> MatchResult[str]:
        found = _scan_until(p, cursor)
        if found is None:
            return _no_terminator(cursor, p)
        return Success(found[1].value, cursor)

    return Parser(parse, f"until_lookahead_at({p.name})")


# ============================================================================
# LOOP FAMILY
# ============================================================================


def _scan_loop(p: Parser[str], cursor: Cursor) -> tuple[list[str], Cursor]:
    """Apply p until it fails, stops consuming, or input runs out."""
    values: list[str] = []
    while not cursor.is_eof:
        result = p(cursor)
        if not result or result.cursor.pos == cursor.pos:
            break
        values.append(result.value)
        cursor = result.cursor
    return values, cursor


def loop(p: Parser[str]) -> Parser[str]:
    """Apply p repeatedly, concatenating its values. Never fails.

    Example:
        >>> from parsecomb import digit
        >>> result = loop(digit())("123abc")
        >>> result.value, result.remaining
        ('123', 'abc')
    """

    def parse(cursor: Cursor) -> MatchResult[str]:
        values, end = _scan_loop(p, cursor)
        return Success("".join(values), end)

    return Parser(parse, f"loop({p.name})")


def loop_at(p: Parser[str]) -> Parser[str]:
    """Apply p repeatedly, returning only the last value; fails if p never matched."""

    def parse(cursor: Cursor) -> MatchResult[str]:
        values, end = _scan_loop(p, cursor)
        if not values:
            return Failure(cursor, f"Expected {p.name}", (p.name,))
        return Success(values[-1], end)

    return Parser(parse, f"loop_at({p.name})")


def loop_lookahead(p: Parser[str]) -> Parser[str]:
    """Like loop(), but leaves the input unconsumed."""

    def parse(cursor: Cursor) -> MatchResult[str]:
        values, _ = _scan_loop(p, cursor)
        return Success("".join(values), cursor)

    return Parser(parse, f"loop_lookahead({p.name})")


def loop_lookahead_at(p: Parser[str]) -> Parser[str]:
    """Like loop_at(), but leaves the input unconsumed."""

    def parse(cursor: Cursor) -> MatchResult[str]:
        values, _ = _scan_loop(p, cursor)
        if not values:
            return Failure(cursor, f"Expected {p.name}", (p.name,))
        return Success(values[-1], cursor)

    return Parser(parse, f"loop_lookahead_at({p.name})")


# ============================================================================
# N-ARY VARIANTS
# ============================================================================


def _terminators(combinator: str, parsers: tuple[Parser[str], ...]) -> Parser[str]:
    if not parsers:
        raise ParserConfigurationError(ErrorTemplate.no_terminators(combinator))
    return choice_n(*parsers)


def until_n(*parsers: Parser[str]) -> Parser[str]:
    """until() over the first of several terminators to match."""
    return until(_terminators("until_n", parsers))


def until_at_n(*parsers: Parser[str]) -> Parser[str]:
    return until_at(_terminators("until_at_n", parsers))


def until_lookahead_n(*parsers: Parser[str]) -> Parser[str]:
    return until_lookahead(_terminators("until_lookahead_n", parsers))


def until_lookahead_at_n(*parsers: Parser[str]) -> Parser[str]:
    return until_lookahead_at(_terminators("until_lookahead_at_n", parsers))


def loop_n(*parsers: Parser[str]) -> Parser[str]:
    """loop() over any of several parsers."""
    return loop(_terminators("loop_n", parsers))


def loop_at_n(*parsers: Parser[str]) -> Parser[str]:
    return loop_at(_terminators("loop_at_n", parsers))


def loop_lookahead_n(*parsers: Parser[str]) -> Parser[str]:
    return loop_lookahead(_terminators("loop_lookahead_n", parsers))


def loop_lookahead_at_n(*parsers: Parser[str]) -> Parser[str]:
    return loop_lookahead_at(_terminators("loop_lookahead_at_n", parsers))


# ============================================================================
# SCANNING SEQUENCES
# ============================================================================


def _collect_at(
    parsers: tuple[Parser[str], ...], cursor: Cursor
) -> tuple[tuple[str, ...], Cursor]:
    values: list[str] = []
    for p in parsers:
        found = _scan_until(p, cursor)
        if found is None:
            break
        values.append(found[1].value)
        cursor = found[1].cursor
    return tuple(values), cursor


def seq_at(*parsers: Parser[str]) -> Parser[tuple[str, ...]]:
    """Skip ahead to each parser in turn, collecting their values.

    Stops at the first parser that never matches; never fails.

    Example:
        >>> from parsecomb import number, operator
        >>> seq_at(number(), operator(), number())("x = 3 * 4").value
        ('3', '*', '4')
    """

    def parse(cursor: Cursor) -> MatchResult[tuple[str, ...]]:
        values, end = _collect_at(parsers, cursor)
        return Success(values, end)

    return Parser(parse, f"seq_at({', '.join(p.name for p in parsers)})")


def seq_lookahead_at(*parsers: Parser[str]) -> Parser[tuple[str, ...]]:
    """Like seq_at(), but leaves the input unconsumed."""

    def parse(cursor: Cursor) -> MatchResult[tuple[str, ...]]:
        values, _ = _collect_at(parsers, cursor)
        return Success(values, cursor)

    return Parser(parse, f"seq_lookahead_at({', '.join(p.name for p in parsers)})")


# ============================================================================
# STRING-DELIMITED REGIONS
# ============================================================================


def _between_text(start: str, end: str) -> Parser[str]:
    _require_delimiters("between", start, end)

    def parse(cursor: Cursor) -> MatchResult[str]:
        span = _locate(cursor, start, end)
        if span is None or span[0] == span[1]:
            return Failure(cursor, f"Expected text between {start!r} and {end!r}", (start, end))
        inner_start, end_index = span
        return Success(cursor.source[inner_start:end_index], cursor.at(end_index + len(end)))

    return Parser(parse, f"between({start!r}, {end!r})")


def between(start: Delimiter, end: Delimiter) -> Parser[str]:
    """Capture the non-empty text between the first start and the next end.

    With two string delimiters, end is consumed. With parser delimiters this
    is capture_between().

    Example:
        >>> result = between("[", "]")("a[xyz]b")
        >>> result.value, result.remaining
        ('xyz', 'b')
    """
    if isinstance(start, str) and isinstance(end, str):
        return _between_text(start, end)
    return capture_between(start, end)


def between_star(start: str, end: str) -> Parser[str]:
    """Like between(), absorbing repeated back-to-back opening delimiters.

    Example:
        >>> between_star("`", "`")("```code`").value
        'code'
    """
    _require_delimiters("between_star", start, end)

    def parse(cursor: Cursor) -> MatchResult[str]:
        span = _locate(cursor, start, end, repeat_start=True)
        if span is None or span[0] == span[1]:
            return Failure(cursor, f"Expected text between {start!r} and {end!r}", (start, end))
        inner_start, end_index = span
        return Success(cursor.source[inner_start:end_index], cursor.at(end_index + len(end)))

    return Parser(parse, f"between_star({start!r}, {end!r})")


def capture_between_text(start: str, end: str) -> Parser[str]:
    """Like between() with string delimiters, but the captured text may be empty."""
    _require_delimiters("capture_between_text", start, end)

    def parse(cursor: Cursor) -> MatchResult[str]:
        span = _locate(cursor, start, end)
        if span is None:
            return Failure(cursor, f"Expected {start!r} ... {end!r}", (start, end))
        inner_start, end_index = span
        return Success(cursor.source[inner_start:end_index], cursor.at(end_index + len(end)))

    return Parser(parse, f"capture_between_text({start!r}, {end!r})")


def ignore_between_text(start: str, end: str) -> Parser[None]:
    """Like between() with string delimiters, but discards the captured text."""
    _require_delimiters("ignore_between_text", start, end)

    def parse(cursor: Cursor) -> MatchResult[None]:
        span = _locate(cursor, start, end)
        if span is None or span[0] == span[1]:
            return Failure(cursor, f"Expected text between {start!r} and {end!r}", (start, end))
        return Success(None, cursor.at(span[1] + len(end)))

    return Parser(parse, f"ignore_between_text({start!r}, {end!r})")


def _not_between_text(start: str, end: str) -> Parser[str]:
    _require_delimiters("not_between", start, end)

    def parse(cursor: Cursor) -> MatchResult[str]:
        residue: list[str] = []
        scan = cursor
        while (span := _locate(scan, start, end)) is not None:
            inner_start, end_index = span
            residue.append(cursor.source[scan.pos : inner_start - len(start)])
            scan = scan.at(end_index + len(end))
        residue.append(scan.rest)
        return Success("".join(residue), scan.at(len(scan.source)))

    return Parser(parse, f"not_between({start!r}, {end!r})")


def not_between(start: Delimiter, end: Delimiter) -> Parser[str] | Parser[None]:
    """Remove every start...end region, returning what is left.

    With string delimiters this consumes the entire input and never fails.
    With parser delimiters this is ignore_between().

    Example:
        >>> not_between("/*", "*/")("a/* x */b/* y */c").value
        'abc'
    """
    if isinstance(start, str) and isinstance(end, str):
        return _not_between_text(start, end)
    return ignore_between(start, end)


# ============================================================================
# PARSER-DELIMITED REGIONS
# ============================================================================


def _open_region(start: Parser[str], cursor: Cursor) -> Cursor | None:
    """Cursor just after the first start match and its immediate repeats."""
    found = _scan_until(start, cursor)
    if found is None:
        return None
    _, end = _scan_loop(start, found[1].cursor)
    return end


def capture_between(start: Delimiter, end: Delimiter) -> Parser[str]:
    """Capture the text between the first start match and the next end match.

    Unlike string-delimited between(), end is only peeked: the remaining
    input begins at the end delimiter.

    Example:
        >>> from parsecomb import char
        >>> result = capture_between(char("("), char(")"))("f((x + 1))")
        >>> result.value, result.remaining
        ('x + 1', '))')
    """
    open_p, close_p = _delimiter_parsers("capture_between", start, end)

    def parse(cursor: Cursor) -> MatchResult[str]:
        inner = _open_region(open_p, cursor)
        if inner is None:
            return _no_terminator(cursor, open_p)
        scan = inner
        while not scan.is_eof and not close_p(scan):
            scan = scan.advance()
        if scan.is_eof:
            return _no_terminator(cursor, close_p)
        return Success(scan.consumed_since(inner), scan)

    return Parser(parse, f"capture_between({open_p.name}, {close_p.name})")


def ignore_between(start: Delimiter, end: Delimiter) -> Parser[None]:
    """Skip past a start...end region, including repeated end matches."""
    open_p, close_p = _delimiter_parsers("ignore_between", start, end)

    def parse(cursor: Cursor) -> MatchResult[None]:
        inner = _open_region(open_p, cursor)
        if inner is None:
            return _no_terminator(cursor, open_p)
        found = _scan_until(close_p, inner)
        if found is None:
            return _no_terminator(cursor, close_p)
        _, after_end = _scan_loop(close_p, found[1].cursor)
        return Success(None, after_end)

    return Parser(parse, f"ignore_between({open_p.name}, {close_p.name})")
