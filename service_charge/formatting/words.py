"""
Amounts in words.

Every language uses the South Asian periods, regardless of script:

    crore     10,000,000
    lakh         100,000
    thousand       1,000
    hundred          100
    remainder      0..99

so 125000 is "One Lakh Twenty Five Thousand", never "One Hundred Twenty
Five Thousand". Only the words differ per language.

Each language is a WordFormatter subclass registered under its code. English
composes 21-99 from tens and ones; Bengali cannot (every number 1-99 has its
own word), so it uses a complete lookup table.
"""

from abc import ABC, abstractmethod
from typing import Optional

from service_charge.formatting.numbers import Amount, round_half_up, to_decimal
from service_charge.locales import FALLBACK_LANGUAGE, normalize_language_code
from service_charge.observability import get_logger

logger = get_logger(__name__)

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000
HUNDRED = 100


class WordFormatter(ABC):
    """
    Converts whole amounts to words for one language.

    Subclasses provide the vocabulary and below_hundred(); the period
    decomposition is shared.
    """

    language: str
    zero_word: str
    negative_word: str
    crore_word: str
    lakh_word: str
    thousand_word: str
    hundred_word: str

    @abstractmethod
    def below_hundred(self, num: int) -> str:
        """Words for 1-99 (empty string for 0)."""

    def to_words(self, amount: Amount) -> str:
        """
        Full written form of an amount.

        Negative amounts get the negative word in front; fractions are
        rounded to the nearest whole unit.
        """
        value = to_decimal(amount)
        if value < 0:
            return f"{self.negative_word} {self.to_words(value.copy_negate())}"

        num = int(round_half_up(value))
        if num == 0:
            return self.zero_word

        return self._positive_to_words(num)

    def _count_words(self, count: int) -> str:
        # Crore counts can pass 99 for very large amounts
        if count < HUNDRED:
            return self.below_hundred(count)
        return self._positive_to_words(count)

    def _positive_to_words(self, num: int) -> str:
        crore = num // CRORE
        lakh = (num % CRORE) // LAKH
        thousand = (num % LAKH) // THOUSAND
        hundred = (num % THOUSAND) // HUNDRED
        remainder = num % HUNDRED

        parts = []

        if crore > 0:
            parts.append(f"{self._count_words(crore)} {self.crore_word}")
        if lakh > 0:
            parts.append(f"{self.below_hundred(lakh)} {self.lakh_word}")
        if thousand > 0:
            parts.append(f"{self.below_hundred(thousand)} {self.thousand_word}")
        if hundred > 0:
            parts.append(f"{self.below_hundred(hundred)} {self.hundred_word}")
        if remainder > 0:
            parts.append(self.below_hundred(remainder))

        return " ".join(parts)


class EnglishWordFormatter(WordFormatter):
    """English words, composed from ones, teens and tens."""

    language = "en"
    zero_word = "Zero"
    negative_word = "Negative"
    crore_word = "Crore"
    lakh_word = "Lakh"
    thousand_word = "Thousand"
    hundred_word = "Hundred"

    ONES = ["", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine"]
    TEENS = [
        "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
        "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
    ]
    TENS = ["", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety"]

    def below_hundred(self, num: int) -> str:
        if num < 10:
            return self.ONES[num]
        if num < 20:
            return self.TEENS[num - 10]

        tens, ones = divmod(num, 10)
        if ones:
            return f"{self.TENS[tens]} {self.ONES[ones]}"
        return self.TENS[tens]


class BanglaWordFormatter(WordFormatter):
    """Bengali words, looked up directly for 1-99."""

    language = "bn"
    zero_word = "শূন্য"
    negative_word = "ঋণাত্মক"
    crore_word = "কোটি"
    lakh_word = "লক্ষ"
    thousand_word = "হাজার"
    hundred_word = "শত"

    NUMBERS = [
        "", "এক", "দুই", "তিন", "চার", "পাঁচ", "ছয়", "সাত", "আট", "নয়",
        "দশ", "এগারো", "বারো", "তেরো", "চৌদ্দ", "পনেরো", "ষোলো", "সতেরো", "আঠারো", "উনিশ",
        "বিশ", "একুশ", "বাইশ", "তেইশ", "চব্বিশ", "পঁচিশ", "ছাব্বিশ", "সাতাশ", "আটাশ", "ঊনতিরিশ",
        "তিরিশ", "একত্রিশ", "বত্রিশ", "তেত্রিশ", "চৌত্রিশ", "পঁয়তিরিশ", "ছত্রিশ", "সাঁইতিরিশ", "আটত্রিশ", "ঊনচল্লিশ",
        "চল্লিশ", "একচল্লিশ", "বিয়াল্লিশ", "তেতাল্লিশ", "চুয়াল্লিশ", "পঁয়তাল্লিশ", "ছেচল্লিশ", "সাতচল্লিশ", "আটচল্লিশ", "ঊনপঞ্চাশ",
        "পঞ্চাশ", "একান্ন", "বাহান্ন", "তিপ্পান্ন", "চুয়ান্ন", "পঞ্চান্ন", "ছাপ্পান্ন", "সাতান্ন", "আটান্ন", "ঊনষাট",
        "ষাট", "একষট্টি", "বাষট্টি", "তেষট্টি", "চৌষট্টি", "পঁয়সট্টি", "ছেষট্টি", "সাতষট্টি", "আটষট্টি", "ঊনসত্তর",
        "সত্তর", "একাত্তর", "বাহাত্তর", "তিয়াত্তর", "চুয়াত্তর", "পঁচাত্তর", "ছিয়াত্তর", "সাতাত্তর", "আটাত্তর", "ঊনআশি",
        "আশি", "একাশি", "বিরাশি", "তিরাশি", "চুরাশি", "পঁচাশি", "ছিয়াশি", "সাতাশি", "আটাশি", "ঊননব্বই",
        "নব্বই", "একানব্বই", "বিরানব্বই", "তিরানব্বই", "চুরানব্বই", "পঁচানব্বই", "ছিয়ানব্বই", "সাতানব্বই", "আটানব্বই", "নিরানব্বই",
    ]

    def below_hundred(self, num: int) -> str:
        return self.NUMBERS[num]


# language code -> formatter
_WORD_FORMATTERS: dict[str, WordFormatter] = {}


def register_word_formatter(formatter: WordFormatter) -> None:
    """Make a formatter available under its language code."""
    _WORD_FORMATTERS[formatter.language] = formatter


def get_word_formatter(language: Optional[str]) -> WordFormatter:
    """Formatter for a language, or the fallback language's formatter."""
    formatter = _WORD_FORMATTERS.get(normalize_language_code(language))
    if formatter is None:
        logger.debug(
            "language_fallback",
            requested=language,
            resolved=FALLBACK_LANGUAGE,
        )
        return _WORD_FORMATTERS[FALLBACK_LANGUAGE]
    return formatter


def number_to_words(amount: Amount, language: str) -> str:
    """
    Write out an amount in words.

    Example:
        number_to_words(125000, "en") -> "One Lakh Twenty Five Thousand"
        number_to_words(0, "bn") -> "শূন্য"
    """
    return get_word_formatter(language).to_words(amount)


register_word_formatter(EnglishWordFormatter())
register_word_formatter(BanglaWordFormatter())
