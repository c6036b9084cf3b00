"""Ordinal numerals in digit form ("21st", "3.", "4-cü", "5-й")."""

import operator

from numlingo.constants import (
    AZ_DEFAULT_SUFFIX,
    AZ_HUNDRED_SUFFIX,
    AZ_LAST_DIGIT_SUFFIXES,
    AZ_TENS_SUFFIXES,
    ENGLISH_ORDINAL_SUFFIXES,
    ENGLISH_TEEN_EXCEPTIONS,
)
from numlingo.linguistics.tables import LanguageCode, normalize_language


def english_suffix(number: int) -> str:
    """Return "st", "nd", "rd" or "th" for a positive integer."""
    if number % 100 in ENGLISH_TEEN_EXCEPTIONS:
        return "th"
    return ENGLISH_ORDINAL_SUFFIXES.get(number % 10, "th")


def azerbaijani_suffix(number: int) -> str:
    """Return the vowel-harmony ordinal suffix for a positive integer.

    The suffix follows the last vowel of the final number word: -ci after
    i/e/ə, -cı after ı/a, -cü after ü/ö, -cu after u/o.

    Round hundreds take -cü (yüz). Anything rounder than that (min, milyon,
    milyard) gets -ci, which is only an approximation: milyon and milyard
    really take -cu and -cı.
    """
    last_digit = number % 10
    if last_digit:
        return AZ_LAST_DIGIT_SUFFIXES[last_digit]

    last_two = number % 100
    if last_two:
        return AZ_TENS_SUFFIXES[last_two]

    if (number // 100) % 10:
        return AZ_HUNDRED_SUFFIX
    return AZ_DEFAULT_SUFFIX


def to_ordinal(number: int, lang: str | LanguageCode = "en") -> str:
    """Format a positive integer as an ordinal.

    Args:
        number: The number to format. Zero and negatives are returned as
            plain digits.
        lang: Language code ("en", "tr", "az", "ru"), case-insensitive.
            Unsupported codes use English rules.

    Returns:
        EN "1st", TR "1.", AZ "1-ci", RU "1-й".

    Raises:
        TypeError: If ``number`` is not an integer (bools and floats included).

    Examples:
        >>> to_ordinal(22)
        '22nd'
        >>> to_ordinal(40, "az")
        '40-cı'
    """
    if isinstance(number, bool):
        raise TypeError("Expected an integer, got bool")
    try:
        number = operator.index(number)
    except TypeError:
        raise TypeError(f"Expected an integer, got {type(number).__name__}") from None

    if number <= 0:
        return str(number)

    match normalize_language(lang):
        case LanguageCode.TR:
            return f"{number}."
        case LanguageCode.RU:
            return f"{number}-й"
        case LanguageCode.AZ:
            return f"{number}-{azerbaijani_suffix(number)}"
        case _:
            return f"{number}{english_suffix(number)}"
