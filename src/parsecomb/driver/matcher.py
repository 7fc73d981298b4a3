"""Side-effecting matcher: dispatch parse outcomes to callbacks.

matcher() runs a parser once, snapshots the attempt as a Rule, and hands the
Rule to a success or failure callback together with caller-owned shared
state. The combinator itself holds no state between calls; all side effects
happen inside the callbacks.

Example:
    >>> from parsecomb import one_or_more, digit
    >>> seen: list[str] = []
    >>> p = matcher(
    ...     one_or_more(digit()),
    ...     lambda rule: rule.state.append("".join(rule.result)),
    ...     shared_state=seen,
    ... )
    >>> _ = p("42+1")
    >>> seen
    ['42']
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from parsecomb.syntax.cursor import Cursor
from parsecomb.syntax.result import MatchResult, Parser

__all__ = ["Callback", "Rule", "matcher"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Rule[T, S]:
    """Snapshot of one parse attempt, passed to matcher callbacks.

    The snapshot is immutable; the shared state it references is not, and
    callbacks are expected to mutate it.

    Attributes:
        input: Text the parser was given
        result: Produced value, or None when the parse failed
        remaining: Text left unconsumed
        state: Caller-supplied shared state, or None when none was given
        succeeded: Whether the parser matched
    """

    input: str
    result: T | None
    remaining: str
    state: S
    succeeded: bool


type Callback[T, S] = Callable[[Rule[T, S]], object]


def matcher[T, S](
    p: Parser[T],
    on_success: Callback[T, S | None],
    on_failure: Callback[T, S | None] | None = None,
    shared_state: S | None = None,
) -> Parser[T]:
    """Wrap p so each invocation reports its outcome to a callback.

    Args:
        p: Parser to run
        on_success: Called with the Rule when p matches
        on_failure: Called with the Rule when p fails (optional)
        shared_state: Object exposed to callbacks as Rule.state

    Returns:
        Parser returning p's result unchanged. Exceptions raised by a
        callback propagate to the caller.
    """

    def parse(cursor: Cursor) -> MatchResult[T]:
        result = p(cursor)
        rule: Rule[T, S | None] = Rule(
            input=cursor.rest,
            result=result.value if result else None,
            remaining=result.remaining,
            state=shared_state,
            succeeded=bool(result),
        )
        if result:
            logger.debug("matcher(%s): success at %d", p.name, cursor.pos)
            on_success(rule)
        elif on_failure is not None:
            logger.debug("matcher(%s): failure at %d", p.name, cursor.pos)
            on_failure(rule)
        return result

    return Parser(parse, f"matcher({p.name})")
