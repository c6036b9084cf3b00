"""Cardinal number-to-words conversion for English, Turkish, Azerbaijani and Russian."""

import logging
import math
import operator
from decimal import Decimal

from numlingo.constants import WORDS_UPPER_BOUND
from numlingo.exceptions import InvalidArgumentError
from numlingo.linguistics.tables import (
    LanguageCode,
    LanguageTables,
    ScaleEntry,
    get_tables,
    normalize_language,
)

logger = logging.getLogger(__name__)


def select_scale_word(entry: ScaleEntry, count: int, lang: str | LanguageCode) -> str:
    """Pick the grammatical form of a scale word for ``count`` units.

    Russian agrees with the count (тысяча / тысячи / тысяч); the other
    supported languages never inflect scale words.

    Examples:
        >>> from numlingo.linguistics.tables import get_tables
        >>> thousand = get_tables("ru").scales[3]
        >>> select_scale_word(thousand, 2, "ru")
        'тысячи'
        >>> select_scale_word(thousand, 11, "ru")
        'тысяч'
    """
    if normalize_language(lang) != LanguageCode.RU:
        return entry.singular

    if 10 < count % 100 < 20:
        return entry.plural_2
    last_digit = count % 10
    if last_digit == 1:
        return entry.singular
    if 2 <= last_digit <= 4:
        return entry.plural_1
    return entry.plural_2


def _as_integer(number: int | float | Decimal) -> int:
    """Widen any integral input to ``int``; truncate floats toward zero."""
    if isinstance(number, bool):
        raise TypeError("Expected a number, got bool")
    if isinstance(number, float | Decimal):
        if not math.isfinite(number):
            raise InvalidArgumentError(f"Cannot convert non-finite number {number} to words")
        return int(number)
    try:
        return operator.index(number)
    except TypeError:
        raise TypeError(f"Expected a number, got {type(number).__name__}") from None


def _convert_two_digits(num: int, tables: LanguageTables) -> str:
    tens, ones = divmod(num, 10)
    tens_word = tables.word(tens * 10)
    if ones == 0:
        return tens_word
    return f"{tens_word}{tables.tens_joiner}{tables.word(ones)}"


def _convert(num: int, tables: LanguageTables) -> str:
    """Spell out a non-negative integer by largest-first scale decomposition."""
    if num <= 20:
        return tables.word(num)
    if num < 100:
        return _convert_two_digits(num, tables)

    for entry in tables.scales:
        if num >= entry.magnitude:
            count, remainder = divmod(num, entry.magnitude)
            scale_word = select_scale_word(entry, count, tables.code)
            prefix = f"{_convert(count, tables)} {scale_word}"
            if remainder == 0:
                return prefix
            return f"{prefix} {_convert(remainder, tables)}"

    return str(num)


def to_words(number: int | float | Decimal, lang: str | LanguageCode = "en") -> str:
    """Convert a number to words.

    Args:
        number: Integer to convert. Floats and decimals are truncated toward zero.
        lang: Language code ("en", "tr", "az", "ru"), case-insensitive.
            Unsupported codes fall back to English.

    Returns:
        The number spelled out. Magnitudes of 10**15 and above are returned
        as plain digits.

    Raises:
        TypeError: If ``number`` is not numeric.
        InvalidArgumentError: If ``number`` is NaN or infinite.

    Examples:
        >>> to_words(21)
        'twenty-one'
        >>> to_words(21, "tr")
        'yirmi bir'
        >>> to_words(-5, "az")
        'mənfi beş'
        >>> to_words(2000, "ru")
        'два тысячи'
    """
    tables = get_tables(lang)
    value = _as_integer(number)

    if abs(value) >= WORDS_UPPER_BOUND:
        logger.debug(f"{value} exceeds the trillion scale, returning digits")
        return str(value)

    if value < 0:
        return f"{tables.minus_word} {_convert(-value, tables)}"

    return _convert(value, tables)
