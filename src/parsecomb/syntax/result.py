"""Match results and the Parser callable.

Every parser invocation returns a MatchResult: either Success (a value plus
the cursor after the match) or Failure (the cursor the parser was given plus
a description of what was expected). The tag, not the value, is the success
signal, so a parser may legitimately succeed with None.

Pattern:
    Every parser has signature:
        (cursor: Cursor) -> Success[T] | Failure

    Parser wraps such a function so it can also be called with a plain str.

Example:
    >>> from parsecomb import char
    >>> result = char("a")("abc")
    >>> result.value, result.remaining
    ('a', 'bc')
    >>> bool(char("x")("abc"))
    False
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Literal

from parsecomb.syntax.cursor import Cursor

__all__ = ["Failure", "MatchResult", "ParseFn", "Parser", "Success", "as_cursor"]

# Same line breaks as Cursor.compute_line_col(): CRLF, LF, CR
_LINE_SPLIT = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Successful match: produced value and cursor after the match.

    Example:
        >>> result = Success("h", Cursor("hello", 1))
        >>> result.value
        'h'
        >>> result.remaining
        'ello'
    """

    value: T
    cursor: Cursor

    @property
    def remaining(self) -> str:
        """Unconsumed input after the match."""
        return self.cursor.rest

    def __bool__(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed match: cursor where the attempt was made and what was expected.

    Design:
        - Stores cursor at failure point (for line:column)
        - User-friendly message
        - Expected tokens tuple (immutable for better errors)

    Example:
        >>> failure = Failure(Cursor("hello", 2), "Expected '}'", expected=("}", "]"))
        >>> failure.format_error()
        "1:3: Expected '}' (expected: '}', ']')"
    """

    cursor: Cursor
    message: str = "No match"
    expected: tuple[str, ...] = field(default_factory=tuple)

    @property
    def remaining(self) -> str:
        """Unconsumed input (unchanged by the failed attempt)."""
        return self.cursor.rest

    def __bool__(self) -> Literal[False]:
        return False

    def format_error(self) -> str:
        """Format failure with line:column.

        Example:
            >>> Failure(Cursor("hello\\nworld", 7), "Expected ']'").format_error()
            "2:2: Expected ']'"
        """
        line, col = self.cursor.compute_line_col()
        error_msg = f"{line}:{col}: {self.message}"

        if self.expected:
            expected_str = ", ".join(f"'{e}'" for e in self.expected)
            error_msg += f" (expected: {expected_str})"

        return error_msg

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format failure with source context and pointer.

        Args:
            context_lines: Number of lines to show before/after the failure

        Example:
            >>> source = "1 + 2\\n3 ^ 4\\n5 * 6"
            >>> print(Failure(Cursor(source, 8), "Unknown operator").format_with_context())
            2:3: Unknown operator
            <BLANKLINE>
               1 | 1 + 2
               2 | 3 ^ 4
                 |   ^
               3 | 5 * 6
        """
        line, col = self.cursor.compute_line_col()
        lines = _LINE_SPLIT.split(self.cursor.source)

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            result_lines.append(f"{i:4} | " + lines[i - 1])
            if i == line:
                result_lines.append(" " * 4 + " | " + " " * (col - 1) + "^")

        return "\n".join(result_lines)


type MatchResult[T] = Success[T] | Failure
type ParseFn[T] = Callable[[Cursor], MatchResult[T]]


def as_cursor(source: str | Cursor) -> Cursor:
    """Wrap a plain string at position 0; pass cursors through."""
    if isinstance(source, Cursor):
        return source
    return Cursor(source, 0)


class Parser[T]:
    """A named, stateless parse function.

    Parsers are built by factory functions and combinators; calling one never
    changes it, so the same parser may be shared across threads.

    Example:
        >>> from parsecomb import digit
        >>> p = digit()
        >>> p
        <Parser digit()>
        >>> p("7x").value
        '7'
    """

    __slots__ = ("_fn", "name")

    def __init__(self, fn: ParseFn[T], name: str = "parser") -> None:
        self._fn = fn
        self.name = name

    def __call__(self, source: str | Cursor) -> MatchResult[T]:
        return self._fn(as_cursor(source))

    def parse(self, source: str | Cursor) -> MatchResult[T]:
        """Alias of calling the parser."""
        return self(source)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>"
