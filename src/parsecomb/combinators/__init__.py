"""Combinator library.

Module Organization:
- primitives.py: Leaf parsers (characters, literals, numbers)
- composition.py: Sequencing, choice, repetition, assertions, packing
- regions.py: Delimiter-bounded regions and until/loop scanning
- locale.py: Babel-backed locale-aware number primitive (optional extra)

locale.py is not imported here so that core installations never load Babel;
import it as parsecomb.combinators.locale.
"""

from .composition import (
    after,
    and_,
    apply_else,
    apply_if,
    as_parser,
    before,
    choice,
    choice_keep_first,
    choice_n,
    else_condition,
    exactly,
    if_condition,
    ignore,
    lookahead,
    negate,
    one_or_more,
    or_,
    pack,
    seq,
    seq_keep_first,
    seq_lookahead,
    seq_n,
    unpack,
    xor,
    zero_or_more,
)
from .primitives import (
    any_char,
    brackets,
    c_identifier,
    char,
    digit,
    ends_with,
    exponentiation,
    go_to,
    in_range,
    letter,
    letter_or_digit,
    lower_letter,
    newline,
    not_in_range,
    number,
    number_value,
    one_of,
    operator,
    parenthesis,
    peek,
    satisfy,
    space,
    square_brackets,
    text,
    text_exact,
    upper_letter,
)
from .regions import (
    between,
    between_star,
    capture_between,
    capture_between_text,
    ignore_between,
    ignore_between_text,
    loop,
    loop_at,
    loop_at_n,
    loop_lookahead,
    loop_lookahead_at,
    loop_lookahead_at_n,
    loop_lookahead_n,
    loop_n,
    not_between,
    seq_at,
    seq_lookahead_at,
    until,
    until_at,
    until_at_n,
    until_lookahead,
    until_lookahead_at,
    until_lookahead_at_n,
    until_lookahead_n,
    until_n,
)

__all__ = [
    "after",
    "and_",
    "any_char",
    "apply_else",
    "apply_if",
    "as_parser",
    "before",
    "between",
    "between_star",
    "brackets",
    "c_identifier",
    "capture_between",
    "capture_between_text",
    "char",
    "choice",
    "choice_keep_first",
    "choice_n",
    "digit",
    "else_condition",
    "ends_with",
    "exactly",
    "exponentiation",
    "go_to",
    "if_condition",
    "ignore",
    "ignore_between",
    "ignore_between_text",
    "in_range",
    "letter",
    "letter_or_digit",
    "lookahead",
    "loop",
    "loop_at",
    "loop_at_n",
    "loop_lookahead",
    "loop_lookahead_at",
    "loop_lookahead_at_n",
    "loop_lookahead_n",
    "loop_n",
    "lower_letter",
    "negate",
    "newline",
    "not_between",
    "not_in_range",
    "number",
    "number_value",
    "one_of",
    "one_or_more",
    "operator",
    "or_",
    "pack",
    "parenthesis",
    "peek",
    "satisfy",
    "seq",
    "seq_at",
    "seq_keep_first",
    "seq_lookahead",
    "seq_lookahead_at",
    "seq_n",
    "space",
    "square_brackets",
    "text",
    "text_exact",
    "unpack",
    "until",
    "until_at",
    "until_at_n",
    "until_lookahead",
    "until_lookahead_at",
    "until_lookahead_at_n",
    "until_lookahead_n",
    "until_n",
    "upper_letter",
    "xor",
    "zero_or_more",
]
