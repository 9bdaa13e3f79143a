"""Number utilities: digits, powers, roots and sequences."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits, most significant first."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def int_sqrt(x: int) -> int:
    """Return the integer square root of ``x``, rounded down."""
    if x < 0:
        raise ValueError("square root of a negative number")
    low, high = 0, x
    while low <= high:
        mid = low + (high - low) // 2
        square = mid * mid
        if square == x:
            return mid
        if square < x:
            low = mid + 1
        else:
            high = mid - 1
    return high


def _positive_power(x: float, n: int) -> float:
    if n == 0:
        return 1
    half = _positive_power(x, n // 2)
    return half * half * (x if n % 2 else 1)


def power(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n`` by repeated squaring."""
    if n < 0:
        return 1 / _positive_power(x, -n)
    return float(_positive_power(x, n))


def reverse_digits(num: int) -> str:
    """Return the decimal digits of ``num`` in reverse order, keeping any leading zeros."""
    sign = "-" if num < 0 else ""
    return sign + str(abs(num))[::-1]


def product(items: Iterable[int]) -> int:
    """Return the product of the values."""
    return math.prod(items)


def total(items: Iterable[int]) -> int:
    """Return the sum of the values."""
    return sum(items)


def factorial(n: int) -> int:
    """Return ``n!``."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    return math.prod(range(2, n + 1))


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("fibonacci of a negative index")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current