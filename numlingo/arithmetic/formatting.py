"""Human-readable file sizes and metric abbreviations."""

from decimal import ROUND_DOWN, ROUND_HALF_UP, Decimal

from numlingo.constants import FILE_SIZE_SUFFIXES, METRIC_SUFFIXES


def _places(decimal_places: int) -> Decimal:
    return Decimal(1).scaleb(-decimal_places)


def to_file_size(num_bytes: int, decimal_places: int = 1) -> str:
    """Format a byte count with binary units ("1.5 MB").

    A value that would round to 1000 or more in its unit is promoted to the
    next one, so 1023 bytes is "1.0 KB" rather than "1,023.0 bytes".

    Examples:
        >>> to_file_size(1536)
        '1.5 KB'
        >>> to_file_size(0)
        '0.0 bytes'
    """
    if num_bytes < 0:
        return "-" + to_file_size(-num_bytes, decimal_places)
    if num_bytes == 0:
        return f"{0:,.{decimal_places}f} {FILE_SIZE_SUFFIXES[0]}"

    magnitude = min((num_bytes.bit_length() - 1) // 10, len(FILE_SIZE_SUFFIXES) - 1)
    adjusted = Decimal(num_bytes) / (1 << (magnitude * 10))

    if (
        adjusted.quantize(_places(decimal_places), rounding=ROUND_HALF_UP) >= 1000
        and magnitude < len(FILE_SIZE_SUFFIXES) - 1
    ):
        magnitude += 1
        adjusted /= 1024

    adjusted = adjusted.quantize(_places(decimal_places), rounding=ROUND_HALF_UP)
    return f"{adjusted:,.{decimal_places}f} {FILE_SIZE_SUFFIXES[magnitude]}"


def to_metric(value: int) -> str:
    """Abbreviate a large count with k/M/B ("1.5k", "12.3M", "2B").

    Digits past the shown precision are cut, not rounded: two decimals
    below 10 units, one below 100, none above. Billions always keep two.

    Examples:
        >>> to_metric(1999)
        '1.99k'
        >>> to_metric(123456)
        '123k'
    """
    if value < 1000:
        return str(value)

    for threshold, suffix in METRIC_SUFFIXES:
        if value >= threshold:
            break

    scaled = Decimal(value) / threshold
    if suffix == "B" or scaled < 10:
        decimals = 2
    elif scaled < 100:
        decimals = 1
    else:
        decimals = 0

    truncated = scaled.quantize(_places(decimals), rounding=ROUND_DOWN)
    text = f"{truncated:,.{decimals}f}"
    if decimals:
        text = text.rstrip("0").rstrip(".")
    return f"{text}{suffix}"
