"""Operator precedence table parser.

Builds one parser from a mapping of operator text to integer precedence.

Matching order is explicit: longest operator text first, ties broken
lexically. With the default exact=True the whole remaining input must equal
the operator text, so at most one entry can match; with exact=False the
operator is a prefix match and the longest operator wins ("**" over "*").

Example:
    >>> p = operator_precedence({"+": 1, "-": 2, "*": 3, "/": 3})
    >>> p("*").value
    3
    >>> bool(p("^"))
    False
"""

import logging
from collections.abc import Mapping

from parsecomb.combinators.primitives import text, text_exact
from parsecomb.diagnostics import ErrorTemplate, ParserConfigurationError
from parsecomb.syntax.cursor import Cursor
from parsecomb.syntax.result import Failure, MatchResult, Parser, Success

__all__ = ["operator_precedence"]

logger = logging.getLogger(__name__)


def operator_precedence(table: Mapping[str, int], *, exact: bool = True) -> Parser[int]:
    """Parse an operator and yield its precedence.

    Args:
        table: Operator text -> precedence
        exact: Require the whole remaining input to be the operator

    Returns:
        Parser producing the precedence of the matched operator

    Raises:
        ParserConfigurationError: If the table contains an empty operator
    """
    if "" in table:
        raise ParserConfigurationError(ErrorTemplate.empty_operator())

    match_text = text_exact if exact else text
    expected = tuple(sorted(table, key=lambda op: (-len(op), op)))
    entries = tuple((match_text(op), table[op]) for op in expected)
    logger.debug("operator_precedence: %d operators, exact=%s", len(entries), exact)

    def parse(cursor: Cursor) -> MatchResult[int]:
        for op_parser, precedence in entries:
            result = op_parser(cursor)
            if result:
                return Success(precedence, result.cursor)
        return Failure(cursor, "Expected operator", expected)

    return Parser(parse, f"operator_precedence({len(entries)} operators)")
