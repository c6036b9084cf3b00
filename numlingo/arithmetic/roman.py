"""Roman numeral conversion."""

from numlingo.constants import ROMAN_MAX, ROMAN_MIN, ROMAN_NUMERALS, ROMAN_SYMBOL_VALUES
from numlingo.exceptions import InvalidArgumentError, OutOfRangeError


def to_roman(number: int) -> str:
    """Convert an integer in [1, 3999] to a Roman numeral.

    Raises:
        OutOfRangeError: If ``number`` is outside [1, 3999].

    Examples:
        >>> to_roman(1994)
        'MCMXCIV'
    """
    if not ROMAN_MIN <= number <= ROMAN_MAX:
        raise OutOfRangeError(
            f"Roman numerals are supported for values between {ROMAN_MIN} and {ROMAN_MAX}, got {number}"
        )

    parts: list[str] = []
    for value, symbol in ROMAN_NUMERALS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def from_roman(roman: str) -> int:
    """Convert a Roman numeral to an integer.

    Case-insensitive. Subtractive pairs (IV, XC, ...) are resolved by
    comparing each symbol with the one before it.

    Raises:
        InvalidArgumentError: If ``roman`` is empty or contains a character
            that is not a Roman numeral symbol.

    Examples:
        >>> from_roman("mcmxciv")
        1994
    """
    if not isinstance(roman, str) or not roman.strip():
        raise InvalidArgumentError("Roman numeral must be a non-empty string")

    total = 0
    previous = 0
    for char in roman.strip().upper():
        value = ROMAN_SYMBOL_VALUES.get(char)
        if value is None:
            raise InvalidArgumentError(f"Invalid Roman numeral {roman!r}: unexpected {char!r}")
        total += value - 2 * previous if value > previous else value
        previous = value
    return total
