"""Per-language word tables used by the words, currency and ordinal converters."""

import logging
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, field_validator

from numlingo.constants import (
    DEFAULT_LANGUAGE,
    LEXICONS,
    MINUS_WORDS,
    SCALES,
    TENS_JOINERS,
)

logger = logging.getLogger(__name__)

REQUIRED_LEXICON_KEYS = frozenset(range(21)) | frozenset(range(30, 100, 10)) | {100}


class LanguageCode(StrEnum):
    """Supported language codes."""

    EN = "en"
    TR = "tr"
    AZ = "az"
    RU = "ru"


class ScaleEntry(NamedTuple):
    """A named magnitude with its three grammatical number forms."""

    magnitude: int
    singular: str
    plural_1: str
    plural_2: str


class CurrencyNames(NamedTuple):
    currency: str
    sub_currency: str


class LanguageTables(BaseModel):
    """Complete, validated word tables for one language.

    Construction fails with ``pydantic.ValidationError`` when the lexicon is
    missing any of 0-20, the tens or 100, or when the scale list is not
    strictly descending. The lexicon is stored behind a read-only proxy.
    """

    model_config = ConfigDict(frozen=True)

    code: LanguageCode
    lexicon: Mapping[int, str]
    scales: tuple[ScaleEntry, ...]
    minus_word: str
    tens_joiner: str

    @field_validator("lexicon")
    @classmethod
    def _check_lexicon(cls, value: Mapping[int, str]) -> Mapping[int, str]:
        missing = REQUIRED_LEXICON_KEYS.difference(value)
        if missing:
            raise ValueError(f"lexicon is missing entries for {sorted(missing)}")
        return MappingProxyType(dict(value))

    @field_validator("scales")
    @classmethod
    def _check_scales(cls, value: tuple[ScaleEntry, ...]) -> tuple[ScaleEntry, ...]:
        if not value:
            raise ValueError("scale list must not be empty")
        magnitudes = [entry.magnitude for entry in value]
        if any(a <= b for a, b in zip(magnitudes, magnitudes[1:])):
            raise ValueError(f"scale magnitudes must be strictly descending: {magnitudes}")
        return value

    def word(self, number: int) -> str:
        return self.lexicon[number]


def normalize_language(code: str | LanguageCode | None) -> LanguageCode:
    """Map a user-supplied language code onto a supported one.

    Input is case-insensitive; anything unsupported falls back to English.
    """
    if isinstance(code, LanguageCode):
        return code
    normalized = (code or "").strip().lower()
    try:
        return LanguageCode(normalized)
    except ValueError:
        logger.debug(f"Unsupported language {code!r}, falling back to {DEFAULT_LANGUAGE}")
        return LanguageCode(DEFAULT_LANGUAGE)


def _build_tables() -> MappingProxyType:
    return MappingProxyType(
        {
            code: LanguageTables(
                code=code,
                lexicon=dict(LEXICONS[code.value]),
                scales=SCALES[code.value],
                minus_word=MINUS_WORDS[code.value],
                tens_joiner=TENS_JOINERS[code.value],
            )
            for code in LanguageCode
        }
    )


TABLES = _build_tables()


def get_tables(code: str | LanguageCode | None) -> LanguageTables:
    """Return the word tables for ``code`` (English when unsupported)."""
    return TABLES[normalize_language(code)]
