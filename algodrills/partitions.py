"""Splitting sequences into groups under a limit, searched over the answer."""

from __future__ import annotations

from collections.abc import Callable, Sequence

NOT_POSSIBLE = -1


def count_groups(values: Sequence[int], limit: int) -> int:
    """Contiguous groups needed when no group's sum may exceed ``limit``.

    Values are taken greedily from the left; a value that does not fit in the
    current group starts a new one. The count is never less than one.
    """
    groups = 1
    running = 0
    for value in values:
        if running + value <= limit:
            running += value
        else:
            groups += 1
            running = value
    return groups


def _min_largest_group(values: Sequence[int], groups: int, low: int) -> int:
    """Least per-group limit, searched upwards from ``low``, that needs at most ``groups``."""
    high = sum(values)
    while low <= high:
        mid = (low + high) // 2
        if count_groups(values, mid) <= groups:
            high = mid - 1
        else:
            low = mid + 1
    return low


def _largest_feasible(low: int, high: int, feasible: Callable[[int], bool]) -> int | None:
    """Largest value in ``[low, high]`` that is feasible, or None."""
    answer = None
    while low <= high:
        mid = (low + high) // 2
        if feasible(mid):
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    return answer


def allocate_books(books: Sequence[int], students: int) -> int:
    """Least possible maximum of pages any student reads, books kept in order.

    Returns -1 when there are more students than books.
    """
    if students > len(books):
        return NOT_POSSIBLE
    if not books:
        raise ValueError("at least one book is required")
    return _min_largest_group(books, students, max(books))


def painter_partition(boards: Sequence[int], painters: int) -> int:
    """Least possible maximum length any painter covers, boards kept in order."""
    return _min_largest_group(boards, painters, max((0, *boards)))


def split_array(nums: Sequence[int], k: int) -> int:
    """Least possible largest sum when ``nums`` is split into at most ``k`` runs."""
    return _min_largest_group(nums, k, max((0, *nums)))


def ship_within_days(weights: Sequence[int], days: int) -> int:
    """Least ship capacity that carries every package, in order, within ``days``.

    If even the total weight does not suffice, the total weight is returned.
    """
    if not weights:
        raise ValueError("at least one package is required")
    low, high = max(weights), sum(weights)
    answer = high
    while low <= high:
        mid = (low + high) // 2
        if count_groups(weights, mid) <= days:
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def aggressive_cows(stalls: Sequence[int], cows: int) -> int:
    """Largest possible minimum distance between ``cows`` placed in ``stalls``.

    Returns 0 if no positive distance works. ``stalls`` is not modified.
    """
    positions = sorted(stalls)
    if not positions:
        raise ValueError("at least one stall is required")

    def fits(gap: int) -> bool:
        placed = 1
        last = positions[0]
        for position in positions[1:]:
            if position - last >= gap:
                placed += 1
                last = position
        return placed >= cows

    answer = _largest_feasible(1, positions[-1] - positions[0], fits)
    return 0 if answer is None else answer