"""numlingo: numbers in words, currency phrases, ordinals and arithmetic helpers."""

from numlingo.arithmetic import (
    clamp,
    decrease_by_percent,
    factorial,
    from_roman,
    gcd,
    increase_by_percent,
    is_approximately,
    is_even,
    is_odd,
    is_prime,
    lcm,
    percentage_of,
    round_to_nearest,
    to_file_size,
    to_metric,
    to_roman,
)
from numlingo.config import NumberLinguisticsConfig
from numlingo.engine import NumberLinguisticsEngine
from numlingo.linguistics import LanguageCode, to_ordinal, to_words, to_words_currency

__version__ = "0.1.0"

__all__ = [
    "NumberLinguisticsConfig",
    "NumberLinguisticsEngine",
    "LanguageCode",
    "to_words",
    "to_words_currency",
    "to_ordinal",
    "clamp",
    "is_approximately",
    "to_file_size",
    "to_metric",
    "is_even",
    "is_odd",
    "is_prime",
    "factorial",
    "gcd",
    "lcm",
    "round_to_nearest",
    "to_roman",
    "from_roman",
    "percentage_of",
    "increase_by_percent",
    "decrease_by_percent",
]
