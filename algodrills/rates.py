"""Smallest rate or day that satisfies a monotone feasibility test."""

from __future__ import annotations

from collections.abc import Callable, Sequence

NOT_POSSIBLE = -1


def _first_feasible(low: int, high: int, feasible: Callable[[int], bool]) -> int | None:
    """Smallest value in ``[low, high]`` that is feasible, or None."""
    answer = None
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def _ceil_div(a: int, b: int) -> int:
    return -(-a // b)


def min_eating_speed(piles: Sequence[int], hours: int) -> int:
    """Least bananas per hour that finishes every pile within ``hours``.

    If no speed up to the largest pile suffices, one more than it is returned.
    """
    high = max(piles)

    def feasible(speed: int) -> bool:
        return sum(_ceil_div(pile, speed) for pile in piles) <= hours

    answer = _first_feasible(1, high, feasible)
    return high + 1 if answer is None else answer


def smallest_divisor(nums: Sequence[int], threshold: int) -> int:
    """Least divisor whose rounded-up quotients sum to at most ``threshold``.

    If none up to the largest value suffices, the largest value is returned.
    """
    high = max(nums)

    def feasible(divisor: int) -> bool:
        total = 0
        for num in nums:
            total += _ceil_div(num, divisor)
            if total > threshold:
                return False
        return True

    answer = _first_feasible(1, high, feasible)
    return high if answer is None else answer


def min_days(bloom_day: Sequence[int], bouquets: int, flowers_per_bouquet: int) -> int:
    """Earliest day on which enough adjacent flowers bloom for the bouquets, or -1."""
    if len(bloom_day) < bouquets * flowers_per_bouquet:
        return NOT_POSSIBLE
    if flowers_per_bouquet == 0:
        raise ZeroDivisionError("flowers_per_bouquet must be positive")

    def feasible(day: int) -> bool:
        made = 0
        run = 0
        for bloom in bloom_day:
            if bloom <= day:
                run += 1
            else:
                made += run // flowers_per_bouquet
                run = 0
        made += run // flowers_per_bouquet
        return made >= bouquets

    answer = _first_feasible(min(bloom_day), max(bloom_day), feasible)
    return NOT_POSSIBLE if answer is None else answer