"""Immutable cursor infrastructure for combinator parsing.

The cursor is the "remaining input" every parser receives and returns: a
frozen view of the full source plus an offset. Parsers never mutate input,
so backtracking is just reusing an earlier cursor.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor
    - Line:column computed on-demand (O(n) only when asked)

Line Ending Support:
    - LF (Unix, \\n): one line break
    - CRLF (Windows, \\r\\n): one line break
    - CR (Classic Mac, \\r): one line break

    The break of a CRLF pair is its CR: a position between CR and LF is
    already column 1 of the next line.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from parsecomb.constants import CRLF
from parsecomb.diagnostics import ErrorTemplate

__all__ = ["Cursor", "count_line_breaks", "line_col"]


def count_line_breaks(source: str, start: int = 0, end: int | None = None) -> int:
    """Count line breaks in source[start:end], treating CRLF as one break.

    The CR of a CRLF is the break: a CR that ends the range counts even when
    its LF lies outside the range, and an LF whose CR sits just before the
    range does not count.

    Example:
        >>> count_line_breaks("a\\nb\\r\\nc\\rd")
        3
        >>> count_line_breaks("a\\r\\nb", 0, 2)
        1
        >>> count_line_breaks("a\\r\\nb", 2, 4)
        0
    """
    if end is None:
        end = len(source)
    return (
        source.count("\n", start, end)
        + source.count("\r", start, end)
        - source.count(CRLF, max(start - 1, 0), end)
    )


def line_col(source: str, pos: int, start: int = 0) -> tuple[int, int]:
    """Compute 1-based (line, column) of pos, counting from start.

    A new line starts right after a CR, and the LF completing that CRLF
    does not move the column.

    Example:
        >>> line_col("line1\\nline2", 8)
        (2, 3)
        >>> line_col("ab\\r\\ncd", 5)
        (2, 2)
        >>> line_col("ab\\r\\ncd", 3)
        (2, 1)
    """
    line = count_line_breaks(source, start, pos) + 1
    last_break = max(source.rfind("\n", start, pos), source.rfind("\r", start, pos))
    line_start = last_break + 1 if last_break >= 0 else start
    return (line, pos - line_start + 1)


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per parse step)
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().rest
        'ello'
        >>> cursor.rest  # Original unchanged
        'hello'
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def rest(self) -> str:
        """Unconsumed input from the current position to the end."""
        return self.source[self.pos :]

    @property
    def remaining_length(self) -> int:
        """Number of unconsumed characters."""
        return max(len(self.source) - self.pos, 0)

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped at EOF).

        Example:
            >>> cursor = Cursor("hello", 0)
            >>> cursor.advance(2).pos
            2
            >>> cursor.advance(10).pos
            5
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def at(self, pos: int) -> "Cursor":
        """Return a cursor over the same source at an absolute position."""
        return Cursor(self.source, min(max(pos, 0), len(self.source)))

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Example:
            >>> Cursor("hello", 0).slice_ahead(3)
            'hel'
            >>> Cursor("hello", 0).slice_ahead(10)
            'hello'
        """
        return self.source[self.pos : self.pos + n]

    def startswith(self, text: str) -> bool:
        """Check whether the unconsumed input starts with text."""
        return self.source.startswith(text, self.pos)

    def endswith(self, text: str) -> bool:
        """Check whether the unconsumed input ends with text."""
        return len(text) <= self.remaining_length and self.source.endswith(text)

    def find(self, text: str, offset: int = 0) -> int:
        """Find text at or after pos + offset.

        Returns:
            Absolute position of the first occurrence, or -1
        """
        return self.source.find(text, self.pos + offset)

    def consumed_since(self, start: "Cursor") -> str:
        """Text consumed between an earlier cursor and this one."""
        return self.source[start.pos : self.pos]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position

        Example:
            >>> source = "line1\\nline2\\nline3"
            >>> Cursor(source, 0).compute_line_col()
            (1, 1)
            >>> Cursor(source, 8).compute_line_col()
            (2, 3)
        """
        return line_col(self.source, self.pos)
