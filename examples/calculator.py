"""Tokenize and evaluate arithmetic with matcher callbacks and tracking.

Demonstrates:
1. matcher() callbacks collecting tokens into shared state
2. track() recording where each line stopped in a Scanner
3. Evaluation by precedence climbing over the collected tokens
4. Reporting an unparsable line with Failure.format_with_context()

Python 3.13+.
"""

from __future__ import annotations

from parsecomb import (
    Rule,
    Scanner,
    choice,
    ignore,
    matcher,
    newline,
    number,
    number_value,
    one_of,
    one_or_more,
    operator_precedence,
    seq_keep_first,
    space,
    track,
    zero_or_more,
)
from parsecomb.syntax import Cursor, Failure

PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "%": 2}

type Token = int | float | str


def emit(rule: Rule[str, list[Token] | None]) -> None:
    """Append the matched text as a number or operator token."""
    value = rule.result or ""
    if rule.state is not None:
        rule.state.append(number_value(value) if value[0].isdecimal() else value)


def tokenize(source: str, scanner: Scanner) -> list[Token] | Failure:
    tokens: list[Token] = []
    blanks = ignore(zero_or_more(space()))
    unsigned = matcher(number(), emit, shared_state=tokens)
    op = matcher(one_of("".join(PRECEDENCE)), emit, shared_state=tokens)
    token = seq_keep_first(choice(unsigned, op), blanks)
    line = track(scanner, seq_keep_first(one_or_more(token), newline()))

    result = line(Cursor(source))
    if not result:
        return result
    if result.remaining:
        return Failure(result.cursor, "Unexpected character")
    return tokens


def evaluate(tokens: list[Token]) -> float:
    """Precedence climbing over a flat token list."""
    precedence_of = operator_precedence(PRECEDENCE)
    position = 0

    def operand() -> float:
        nonlocal position
        value = tokens[position]
        position += 1
        return float(value)

    def climb(min_precedence: int) -> float:
        nonlocal position
        left = operand()
        while position < len(tokens):
            op = str(tokens[position])
            precedence = precedence_of(op).value
            if precedence < min_precedence:
                break
            position += 1
            right = climb(precedence + 1)
            match op:
                case "+":
                    left += right
                case "-":
                    left -= right
                case "*":
                    left *= right
                case "/":
                    left /= right
                case "%":
                    left %= right
        return left

    return climb(1)


def main() -> None:
    for source in ("1 + 2 * 3\n", "10 / 4 - 0.5", "7 % 4 * 2", "2 + $3"):
        scanner = Scanner()
        tokens = tokenize(source, scanner)
        if isinstance(tokens, Failure):
            print(tokens.format_with_context())
            continue
        print(f"{source.strip()!r} = {evaluate(tokens)}  [{scanner!r}]")
    # Output:
    # '1 + 2 * 3' = 7.0  [Scanner(line=2, column=1, position=10, last_char='\n')]
    # '10 / 4 - 0.5' = 2.0  [Scanner(line=1, column=13, position=12, last_char='5')]
    # '7 % 4 * 2' = 6.0  [Scanner(line=1, column=10, position=9, last_char='2')]
    # 1:5: Unexpected character
    #
    #    1 | 2 + $3
    #      |     ^


if __name__ == "__main__":
    main()
