"""Percentage calculations."""

from numlingo.exceptions import PercentageError


def percentage_of(value: float, total: float) -> float:
    """Return what percent ``value`` is of ``total``.

    Raises:
        PercentageError: If ``total`` is zero.
    """
    if total == 0:
        raise PercentageError("Total value cannot be zero")
    return value / total * 100


def increase_by_percent(value: float, percent: float) -> float:
    return value * (1 + percent / 100)


def decrease_by_percent(value: float, percent: float) -> float:
    return value * (1 - percent / 100)
