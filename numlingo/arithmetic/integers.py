"""Integer helpers: parity, primality, factorial, GCD/LCM and rounding."""

import math

from numlingo.constants import FACTORIAL_MAX
from numlingo.exceptions import OutOfRangeError


def is_even(number: int) -> bool:
    return number % 2 == 0


def is_odd(number: int) -> bool:
    return number % 2 != 0


def is_prime(number: int) -> bool:
    """Trial-division primality test. Numbers below 2 are not prime."""
    if number <= 1:
        return False
    if number == 2:
        return True
    if number % 2 == 0:
        return False

    for divisor in range(3, math.isqrt(number) + 1, 2):
        if number % divisor == 0:
            return False
    return True


def factorial(number: int) -> int:
    """Compute ``number!`` for 0 <= number <= 20.

    The upper limit keeps the result within a signed 64-bit integer.

    Raises:
        OutOfRangeError: If ``number`` is negative or greater than 20.
    """
    if number < 0:
        raise OutOfRangeError("Factorial is not defined for negative numbers")
    if number > FACTORIAL_MAX:
        raise OutOfRangeError(
            f"Result exceeds the range of a 64-bit integer. Max input is {FACTORIAL_MAX}"
        )

    result = 1
    for i in range(2, number + 1):
        result *= i
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (Euclid), always non-negative."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero if either argument is zero."""
    if a == 0 or b == 0:
        return 0
    a, b = abs(a), abs(b)
    return a // gcd(a, b) * b


def round_to_nearest(value: int, nearest: int) -> int:
    """Round ``value`` to the nearest multiple of ``nearest``.

    Ties go to the even multiple (``round_to_nearest(15, 10) == 20``,
    ``round_to_nearest(25, 10) == 20``). A ``nearest`` of zero returns
    ``value`` unchanged.
    """
    if nearest == 0:
        return value
    return round(value / nearest) * nearest
