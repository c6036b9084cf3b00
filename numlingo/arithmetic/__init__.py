"""Arithmetic helpers: clamping, comparison, formatting, integers, Roman numerals, percentages."""

from numlingo.arithmetic.bounds import clamp, is_approximately
from numlingo.arithmetic.formatting import to_file_size, to_metric
from numlingo.arithmetic.integers import (
    factorial,
    gcd,
    is_even,
    is_odd,
    is_prime,
    lcm,
    round_to_nearest,
)
from numlingo.arithmetic.percentage import (
    decrease_by_percent,
    increase_by_percent,
    percentage_of,
)
from numlingo.arithmetic.roman import from_roman, to_roman

__all__ = [
    "clamp",
    "is_approximately",
    "to_file_size",
    "to_metric",
    "factorial",
    "gcd",
    "is_even",
    "is_odd",
    "is_prime",
    "lcm",
    "round_to_nearest",
    "decrease_by_percent",
    "increase_by_percent",
    "percentage_of",
    "from_roman",
    "to_roman",
]
