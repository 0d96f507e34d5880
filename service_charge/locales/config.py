"""
Language Configuration

Add new languages here to make them available to the formatters.
A new language also needs a word formatter registered in
service_charge.formatting.words.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LanguageConfig(BaseModel):
    """Static description of one supported language."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Language code used by the UI (e.g. 'bn')")
    name: str
    native_name: str
    locale_code: str = Field(
        ...,
        description="BCP 47 locale used for number grouping (e.g. 'bn-BD')"
    )
    direction: str = Field(default="ltr", pattern="^(ltr|rtl)$")
    flag: str = ""
    digits: str = Field(
        default="0123456789",
        min_length=10,
        max_length=10,
        description="Digit glyphs for 0-9 in this script"
    )


AVAILABLE_LANGUAGES: list[LanguageConfig] = [
    LanguageConfig(
        code="bn",
        name="Bengali",
        native_name="বাংলা",
        locale_code="bn-BD",
        flag="🇧🇩",
        digits="০১২৩৪৫৬৭৮৯",
    ),
    LanguageConfig(
        code="en",
        name="English",
        native_name="English",
        locale_code="en-US",
        flag="🇬🇧",
    ),
]

# Language the UI starts in
DEFAULT_LANGUAGE = "bn"

# Language every formatter falls back to for an unrecognized code
FALLBACK_LANGUAGE = "en"

_LANGUAGES_BY_CODE = {lang.code: lang for lang in AVAILABLE_LANGUAGES}


def normalize_language_code(code: Optional[str]) -> str:
    """Primary language subtag: "bn-BD", "bn_BD" and "BN" all give "bn"."""
    if not code:
        return ""
    return code.strip().replace("_", "-").split("-")[0].lower()


def get_language_config(code: Optional[str]) -> Optional[LanguageConfig]:
    """Look up a language, or None if it isn't supported."""
    return _LANGUAGES_BY_CODE.get(normalize_language_code(code))


def is_language_supported(code: Optional[str]) -> bool:
    """Check whether a language code maps to a supported language."""
    return get_language_config(code) is not None


def resolve_language(code: Optional[str]) -> LanguageConfig:
    """Supported language for a code, falling back to FALLBACK_LANGUAGE."""
    return get_language_config(code) or _LANGUAGES_BY_CODE[FALLBACK_LANGUAGE]


def get_locale_code(code: Optional[str]) -> str:
    """Locale used for number and date formatting, e.g. 'bn' -> 'bn-BD'."""
    return resolve_language(code).locale_code
