"""Currency amounts in words ("twelve dollar fifty cent")."""

import logging
from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, InvalidOperation

from numlingo.constants import (
    COUNTRY_CURRENCY_NAMES,
    DEFAULT_CURRENCY_NAMES,
    DEFAULT_LANGUAGE,
    SUBUNITS_PER_UNIT,
)
from numlingo.exceptions import CurrencyFormatError
from numlingo.linguistics.tables import (
    CurrencyNames,
    LanguageCode,
    normalize_language,
)
from numlingo.linguistics.words import to_words

logger = logging.getLogger(__name__)

ONE = Decimal(1)


def resolve_currency_names(
    lang: str | LanguageCode = "en",
    country: str | None = None,
) -> CurrencyNames:
    """Look up currency and sub-currency names.

    A (language, country) entry wins over the language default; unknown
    languages use the English names. Codes are case-insensitive.
    """
    language = str(lang or "").strip().lower()
    if country:
        names = COUNTRY_CURRENCY_NAMES.get((language, country.strip().upper()))
        if names is not None:
            return CurrencyNames(*names)
        logger.debug(f"No currency names for ({language}, {country}), using language default")
    names = DEFAULT_CURRENCY_NAMES.get(language, DEFAULT_CURRENCY_NAMES[DEFAULT_LANGUAGE])
    return CurrencyNames(*names)


def _as_decimal(amount: Decimal | int | float | str) -> Decimal:
    if isinstance(amount, bool):
        raise CurrencyFormatError("Expected an amount, got bool")
    try:
        if isinstance(amount, float):
            # str() keeps 87364883.56 from turning into 87364883.5599999...
            value = Decimal(str(amount))
        elif isinstance(amount, str):
            value = Decimal(amount.strip().replace(",", ""))
        else:
            value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError) as e:
        raise CurrencyFormatError(f"Invalid amount {amount!r}: {e}") from e

    if not value.is_finite():
        raise CurrencyFormatError(f"Amount must be finite, got {amount!r}")
    return value


def split_amount(amount: Decimal | int | float | str) -> tuple[int, int]:
    """Split an amount into whole units and hundredths.

    ``whole`` is the floor of the amount and ``fraction`` the remainder in
    hundredths, rounded half-up. The fraction is always in [0, 100], so
    negative amounts floor away from zero (-1.50 is ``(-2, 50)``) and 1.999
    is ``(1, 100)``.

    Examples:
        >>> split_amount("87364883.56")
        (87364883, 56)
        >>> split_amount(12)
        (12, 0)
    """
    value = _as_decimal(amount)
    whole = value.to_integral_value(rounding=ROUND_FLOOR)
    fraction = ((value - whole) * SUBUNITS_PER_UNIT).quantize(ONE, rounding=ROUND_HALF_UP)
    return int(whole), int(fraction)


def to_words_currency(
    amount: Decimal | int | float | str,
    lang: str | LanguageCode = "en",
    country: str | None = None,
    currency_name: str | None = None,
    sub_currency_name: str | None = None,
) -> str:
    """Convert a monetary amount to words.

    Args:
        amount: Amount to convert. Floats are read through ``str()``.
        lang: Language code ("en", "tr", "az", "ru"), case-insensitive.
        country: Optional country code selecting a regional currency
            (e.g. "GB" for pound sterling with ``lang="en"``).
        currency_name: Override for the currency name.
        sub_currency_name: Override for the sub-currency name.

    Returns:
        "<whole> <currency> <fraction> <sub-currency>", or
        "<whole> <currency>" when there are no hundredths.

    Raises:
        CurrencyFormatError: If ``amount`` is not a finite number.

    Examples:
        >>> to_words_currency(12.5)
        'twelve dollar fifty cent'
        >>> to_words_currency(3, "en", "GB")
        'three pound sterling'
    """
    names = resolve_currency_names(lang, country)
    language = normalize_language(lang)
    currency = currency_name if currency_name is not None else names.currency
    sub_currency = sub_currency_name if sub_currency_name is not None else names.sub_currency

    whole, fraction = split_amount(amount)

    phrase = f"{to_words(whole, language)} {currency}"
    if fraction == 0:
        return phrase
    return f"{phrase} {to_words(fraction, language)} {sub_currency}"
