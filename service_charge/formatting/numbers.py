"""
Locale-aware amount formatting.

Digit grouping comes from Babel's CLDR data rather than hand-rolled
grouping: en-US groups by thousands (1,250,000) while bn-BD uses the
lakh/crore pattern (12,50,000). Babel is asked for Latin digits, which are
then mapped onto the language's own script.

Currency and decimal places are explicit arguments. Callers take them
from FormattingSettings.
"""

import re
from decimal import ROUND_HALF_UP, Decimal, getcontext, localcontext
from typing import Union

from babel import Locale
from babel.numbers import format_currency as babel_format_currency
from babel.numbers import format_decimal

from service_charge.locales import LanguageConfig, is_language_supported, resolve_language
from service_charge.observability import get_logger

logger = get_logger(__name__)

Amount = Union[int, float, Decimal]

_ASCII_DIGITS = "0123456789"

# Fraction part of a CLDR pattern, e.g. ".###" or ".00"
_FRACTION_PART = re.compile(r"\.[0#]+")
# Last mandatory integer digit of a pattern without a fraction part
_INTEGER_END = re.compile(r"0(?![0#,])")


def resolve_display_language(language: str) -> LanguageConfig:
    """Resolve a language code, logging when the fallback kicks in."""
    config = resolve_language(language)
    if not is_language_supported(language):
        logger.debug(
            "language_fallback",
            requested=language,
            resolved=config.code,
        )
    return config


def to_decimal(amount: Amount) -> Decimal:
    """Convert an int/float/Decimal amount to Decimal without float noise."""
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def _wide_context(value: Decimal, fraction_digits: int):
    # quantize fails once the result needs more digits than the context holds
    context = getcontext().copy()
    context.prec = max(context.prec, value.adjusted() + fraction_digits + 2)
    return localcontext(context)


def round_half_up(amount: Amount, fraction_digits: int = 0) -> Decimal:
    """Round half away from zero to a fixed number of decimal places."""
    value = to_decimal(amount)
    exponent = Decimal(1).scaleb(-fraction_digits)
    with _wide_context(value, fraction_digits):
        return value.quantize(exponent, rounding=ROUND_HALF_UP)


def localize_digits(text: str, language: str) -> str:
    """Replace ASCII digits with the digit glyphs of the language's script."""
    config = resolve_display_language(language)
    if config.digits == _ASCII_DIGITS:
        return text
    return text.translate(str.maketrans(_ASCII_DIGITS, config.digits))


def _with_fraction_digits(pattern: str, fraction_digits: int) -> str:
    fraction = "." + "0" * fraction_digits if fraction_digits else ""
    if _FRACTION_PART.search(pattern):
        return _FRACTION_PART.sub(fraction, pattern)
    return _INTEGER_END.sub(lambda match: match.group(0) + fraction, pattern)


def format_number(
    amount: Amount,
    language: str,
    *,
    fraction_digits: int = 0,
) -> str:
    """
    Format an amount with the grouping and digits of a language.

    Args:
        amount: Value to format
        language: Language code ('en', 'bn'); unsupported codes use the fallback
        fraction_digits: Decimal places to show (0 for whole currency units)

    Example:
        format_number(125000, "en") -> "125,000"
        format_number(125000, "bn") -> "১,২৫,০০০"
    """
    config = resolve_display_language(language)
    locale = Locale.parse(config.locale_code, sep="-")

    pattern = _with_fraction_digits(
        locale.decimal_formats[None].pattern,
        fraction_digits,
    )
    value = round_half_up(amount, fraction_digits)
    with _wide_context(value, fraction_digits):
        formatted = format_decimal(value, format=pattern, locale=locale)
    return localize_digits(formatted, config.code)


def format_currency(
    amount: Amount,
    language: str,
    *,
    currency: str = "BDT",
    fraction_digits: int = 2,
) -> str:
    """
    Format an amount as money in the language's currency pattern.

    Example:
        format_currency(1500, "en") -> "BDT 1,500.00" style output
        format_currency(1500, "bn") -> "১,৫০০.০০৳"
    """
    config = resolve_display_language(language)
    locale = Locale.parse(config.locale_code, sep="-")

    pattern = _with_fraction_digits(
        locale.currency_formats["standard"].pattern,
        fraction_digits,
    )
    value = round_half_up(amount, fraction_digits)
    with _wide_context(value, fraction_digits):
        formatted = babel_format_currency(
            value,
            currency,
            format=pattern,
            locale=locale,
            currency_digits=False,
        )
    return localize_digits(formatted, config.code)
