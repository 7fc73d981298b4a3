"""Position tracking: record where a parser stopped in a caller-owned Scanner.

track() wraps a parser and, after each successful match, writes the line,
column, offset and last consumed character into a Scanner. Each Scanner
carries its own lock, so trackers writing to different scanners never block
each other; trackers sharing one scanner are serialized.

Line/column convention:
    Positions are relative to the input handed to the tracking parser.
    line and column are 1-based and describe the position just after the
    match. LF, CR and CRLF each count as one line break.

Thread Safety:
    Scanner.update() and Scanner.snapshot() take the scanner's lock.
"""

import logging
import threading
from dataclasses import dataclass

from parsecomb.syntax.cursor import Cursor, line_col
from parsecomb.syntax.result import Failure, MatchResult, Parser

__all__ = ["ScanPosition", "Scanner", "track"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ScanPosition:
    """Immutable snapshot of a Scanner.

    Attributes:
        line: 1-based line after the last match
        column: 1-based column after the last match
        position: Number of characters consumed by the last match
        last_char: Last consumed character (None if nothing consumed)
    """

    line: int = 1
    column: int = 1
    position: int = 0
    last_char: str | None = None


class Scanner:
    """Mutable position record owned by the caller.

    Example:
        >>> from parsecomb import until, newline
        >>> scanner = Scanner()
        >>> _ = track(scanner, until(newline()))("ab\\ncd")
        >>> scanner.line, scanner.column, scanner.position
        (2, 1, 3)
    """

    __slots__ = ("_lock", "_position")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._position = ScanPosition()

    def update(self, position: ScanPosition) -> None:
        """Replace the recorded position atomically."""
        with self._lock:
            self._position = position

    def snapshot(self) -> ScanPosition:
        """Return the recorded position as one consistent value."""
        with self._lock:
            return self._position

    @property
    def line(self) -> int:
        return self.snapshot().line

    @property
    def column(self) -> int:
        return self.snapshot().column

    @property
    def position(self) -> int:
        return self.snapshot().position

    @property
    def last_char(self) -> str | None:
        return self.snapshot().last_char

    def __repr__(self) -> str:
        pos = self.snapshot()
        return (
            f"Scanner(line={pos.line}, column={pos.column}, "
            f"position={pos.position}, last_char={pos.last_char!r})"
        )


def track[T](scanner: Scanner, p: Parser[T]) -> Parser[T]:
    """Run p and record the end of its match in scanner.

    Empty input fails immediately without touching the scanner, and so does
    a failure of p. The result of p is returned unchanged.
    """

    def parse(cursor: Cursor) -> MatchResult[T]:
        if cursor.is_eof:
            return Failure(cursor, "Unexpected end of input")
        result = p(cursor)
        if not result:
            return result

        consumed = result.cursor.pos - cursor.pos
        line, column = line_col(cursor.source, result.cursor.pos, cursor.pos)
        position = ScanPosition(
            line=line,
            column=column,
            position=consumed,
            last_char=cursor.source[result.cursor.pos - 1] if consumed else None,
        )
        scanner.update(position)
        logger.debug("track(%s): %s", p.name, position)
        return result

    return Parser(parse, f"track({p.name})")
