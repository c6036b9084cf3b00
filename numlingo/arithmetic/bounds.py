"""Range clamping and tolerant floating-point comparison."""

from numlingo.constants import DEFAULT_TOLERANCE
from numlingo.exceptions import InvalidArgumentError


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit ``value`` to the closed range [minimum, maximum].

    Raises:
        InvalidArgumentError: If ``minimum`` is greater than ``maximum``.
    """
    if minimum > maximum:
        raise InvalidArgumentError(f"minimum ({minimum}) cannot be greater than maximum ({maximum})")
    return min(max(value, minimum), maximum)


def is_approximately(value: float, other: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Check whether two floats differ by less than ``tolerance``.

    Examples:
        >>> 0.1 + 0.2 == 0.3
        False
        >>> is_approximately(0.1 + 0.2, 0.3)
        True
    """
    return abs(value - other) < tolerance
