"""Quickstart example for parsecomb.

Builds small parsers from primitives and combinators, then runs the
operator precedence table over a single operator.

Note: Examples print failures with format_error(). In production, inspect
Failure.expected to build richer messages.
"""

from parsecomb import (
    between,
    char,
    choice,
    digit,
    letter,
    not_between,
    number,
    number_value,
    one_or_more,
    operator_precedence,
    seq_at,
    until,
)
from parsecomb.constants import DEFAULT_OPERATOR_TABLE

# Example 1: Primitives
print("=" * 50)
print("Example 1: Primitives")
print("=" * 50)

result = number()("-3.14 rest")
print(repr(result.value), number_value(result.value), repr(result.remaining))
# Output: '-3.14' -3.14 ' rest'

failure = digit()("x1")
print(failure.format_error())
# Output: 1:1: Expected digit() (expected: '0-9')

# Example 2: Composition
print("\n" + "=" * 50)
print("Example 2: Composition")
print("=" * 50)

word_or_number = one_or_more(choice(letter(), digit()))
result = word_or_number("abc123;")
print("".join(result.value), repr(result.remaining))
# Output: abc123 ';'

# Example 3: Regions
print("\n" + "=" * 50)
print("Example 3: Regions")
print("=" * 50)

print(between("[", "]")("a[xyz]b").value)
# Output: xyz
print(until(char(";"))("ab;cd").value)
# Output: ab;
print(not_between("/*", "*/")("a/* x */b/* y */c").value)
# Output: abc
print(seq_at(number(), char("*"), number())("x = 3 * 4").value)
# Output: ('3', '*', '4')

# Example 4: Operator precedence
print("\n" + "=" * 50)
print("Example 4: Operator Precedence")
print("=" * 50)

precedence = operator_precedence(DEFAULT_OPERATOR_TABLE)
for op in ("+", "*", "^"):
    result = precedence(op)
    if result:
        print(f"{op!r} -> precedence {result.value}, remaining {result.remaining!r}")
    else:
        print(f"{op!r} -> {result.format_error()}")
# Output:
# '+' -> precedence 1, remaining ''
# '*' -> precedence 3, remaining ''
# '^' -> 1:1: Expected operator (expected: '*', '+', '-', '/')
