"""Integer roots found by binary search over candidate answers."""

from __future__ import annotations

NO_INTEGER_ROOT = -1


def _compare_power(base: int, exponent: int, m: int) -> int:
    """Sign of ``base ** exponent - m``, stopping as soon as the power exceeds ``m``."""
    value = 1
    for _ in range(exponent):
        value *= base
        if value > m:
            return 1
    return -1 if value < m else 0


def nth_root(n: int, m: int) -> int:
    """Integer ``x`` with ``x ** n == m``, or -1 if there is none.

    Values of ``m`` at most 1 are returned unchanged.
    """
    if m <= 1:
        return m
    low, high = 1, m
    while low <= high:
        mid = (low + high) // 2
        order = _compare_power(mid, n, m)
        if order == 0:
            return mid
        if order < 0:
            low = mid + 1
        else:
            high = mid - 1
    return NO_INTEGER_ROOT


def integer_sqrt(x: int) -> int:
    """Floor of the square root of ``x``; values at most 1 are returned unchanged."""
    if x <= 1:
        return x
    low, high = 1, x // 2
    answer = 1
    while low <= high:
        mid = (low + high) // 2
        if mid * mid <= x:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer