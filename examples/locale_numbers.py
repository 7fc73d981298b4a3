"""Locale-aware number parsing with Babel CLDR data.

Requires the optional extra: pip install parsecomb[babel]

Python 3.13+.
"""

from parsecomb import after, space, zero_or_more
from parsecomb.combinators.locale import locale_number, locale_number_value

PRICES = {
    "en_US": "1,234.56 USD",
    "de_DE": "1.234,56 EUR",
    "en_GB": "-0.5 GBP",
}

for locale_code, source in PRICES.items():
    amount = after(locale_number(locale_code), zero_or_more(space()))
    result = amount(source)
    value = locale_number_value(result.value, locale_code)
    print(f"{locale_code}: {result.value!r} -> {value} (currency {result.remaining})")
# Output:
# en_US: '1,234.56' -> 1234.56 (currency USD)
# de_DE: '1.234,56' -> 1234.56 (currency EUR)
# en_GB: '-0.5' -> -0.5 (currency GBP)
