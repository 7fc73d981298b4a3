"""Input and result types shared by every parser.

Public API:
    Cursor: Immutable view of the remaining input
    Success, Failure, MatchResult: Tagged parse results
    Parser: Named callable wrapping a parse function
"""

from .cursor import Cursor, count_line_breaks, line_col
from .result import Failure, MatchResult, ParseFn, Parser, Success, as_cursor

__all__ = [
    "Cursor",
    "Failure",
    "MatchResult",
    "ParseFn",
    "Parser",
    "Success",
    "as_cursor",
    "count_line_breaks",
    "line_col",
]
