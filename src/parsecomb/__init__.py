"""parsecomb - a parser-combinator algebra over character input.

Small matching primitives are composed through higher-order combinators
(sequencing, choice, repetition, lookahead, region capture) into larger
parsers. Every parser is a stateless callable from input (str or Cursor) to
a tagged result:

    >>> from parsecomb import between, until, char
    >>> between("[", "]")("a[xyz]b")
    Success(value='xyz', cursor=Cursor(source='a[xyz]b', pos=6))
    >>> until(char(";"))("ab;cd").remaining
    'cd'

Public API:
    Parser, Success, Failure, MatchResult, Cursor - core types
    Primitives - char, digit, letter, text, number, ...
    Combinators - seq, choice, zero_or_more, lookahead, negate, ...
    Regions - between, not_between, capture_between, until*, loop*, ...
    Drivers - matcher (callbacks), track (position Scanner)
    operator_precedence - precedence table parser

Exceptions:
    ParsecombError - Base exception class
    ParserConfigurationError - Invalid arguments when building a parser
    UnpackError - Multi-valued capture unpacked into one value

Submodules:
    parsecomb.combinators.locale - Babel-backed locale_number (needs [babel])
    parsecomb.diagnostics - Diagnostic codes and templates
"""

from . import combinators
from .combinators import *  # noqa: F403
from .diagnostics import ParsecombError, ParserConfigurationError, UnpackError
from .driver import Rule, ScanPosition, Scanner, matcher, track
from .precedence import operator_precedence
from .syntax import Cursor, Failure, MatchResult, Parser, Success

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("parsecomb")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [  # noqa: PLE0604
    *combinators.__all__,
    "Cursor",
    "Failure",
    "MatchResult",
    "ParsecombError",
    "Parser",
    "ParserConfigurationError",
    "Rule",
    "ScanPosition",
    "Scanner",
    "Success",
    "UnpackError",
    "__version__",
    "matcher",
    "operator_precedence",
    "track",
]
