"""Numeral and word formatting package."""

from service_charge.formatting.numbers import (
    format_currency,
    format_number,
    localize_digits,
    round_half_up,
)
from service_charge.formatting.words import (
    BanglaWordFormatter,
    EnglishWordFormatter,
    WordFormatter,
    get_word_formatter,
    number_to_words,
    register_word_formatter,
)

__all__ = [
    # Digits
    "format_currency",
    "format_number",
    "localize_digits",
    "round_half_up",
    # Words
    "BanglaWordFormatter",
    "EnglishWordFormatter",
    "WordFormatter",
    "get_word_formatter",
    "number_to_words",
    "register_word_formatter",
]
