"""Binary searches over sorted sequences: exact match, bounds, floor and ceil."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence

NOT_FOUND = -1


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return an index of ``target`` in sorted ``nums``, or -1 if absent."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def binary_search_recursive(nums: Sequence[int], target: int) -> int:
    """Recursive form of :func:`binary_search`."""

    def search(low: int, high: int) -> int:
        if low > high:
            return NOT_FOUND
        mid = (low + high) // 2
        value = nums[mid]
        if value == target:
            return mid
        if value < target:
            return search(mid + 1, high)
        return search(low, mid - 1)

    return search(0, len(nums) - 1)


def _first_index(nums: Sequence[int], satisfies) -> int:
    """Smallest index whose element satisfies a monotone predicate, else len."""
    low, high = 0, len(nums) - 1
    answer = len(nums)
    while low <= high:
        mid = (low + high) // 2
        if satisfies(nums[mid]):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def lower_bound(nums: Sequence[int], target: int) -> int:
    """Index of the first element not less than ``target`` (len if none)."""
    return _first_index(nums, lambda value: value >= target)


def upper_bound(nums: Sequence[int], target: int) -> int:
    """Index of the first element strictly greater than ``target`` (len if none)."""
    return _first_index(nums, lambda value: value > target)


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` if present, else where it would be inserted."""
    return lower_bound(nums, target)


def floor_value(nums: Sequence[int], target: int) -> int:
    """Largest element not greater than ``target``, or -1 if there is none."""
    low, high = 0, len(nums) - 1
    answer = NOT_FOUND
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] <= target:
            answer = nums[mid]
            low = mid + 1
        else:
            high = mid - 1
    return answer


def ceil_value(nums: Sequence[int], target: int) -> int:
    """Smallest element not less than ``target``, or -1 if there is none."""
    low, high = 0, len(nums) - 1
    answer = NOT_FOUND
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] >= target:
            answer = nums[mid]
            high = mid - 1
        else:
            low = mid + 1
    return answer


def floor_and_ceil(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return ``(floor, ceil)`` of ``target`` in sorted ``nums``; -1 marks absence."""
    return floor_value(nums, target), ceil_value(nums, target)


def floor_and_ceil_bisect(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Same as :func:`floor_and_ceil`, computed with the ``bisect`` module."""
    ceil_index = bisect_left(nums, target)
    ceil = nums[ceil_index] if ceil_index < len(nums) else NOT_FOUND
    floor_index = bisect_right(nums, target) - 1
    floor = nums[floor_index] if floor_index >= 0 else NOT_FOUND
    return floor, ceil


def first_occurrence(nums: Sequence[int], target: int) -> int:
    """Index of the first ``target`` in sorted ``nums``, or -1."""
    index = lower_bound(nums, target)
    if index < len(nums) and nums[index] == target:
        return index
    return NOT_FOUND


def last_occurrence(nums: Sequence[int], target: int) -> int:
    """Index of the last ``target`` in sorted ``nums``, or -1."""
    low, high = 0, len(nums) - 1
    answer = NOT_FOUND
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] <= target:
            answer = mid
            low = mid + 1
        else:
            high = mid - 1
    if answer == NOT_FOUND or nums[answer] != target:
        return NOT_FOUND
    return answer


def search_range(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Return ``(first, last)`` indices of ``target``, or ``(-1, -1)``."""
    return first_occurrence(nums, target), last_occurrence(nums, target)


def search_range_bisect(nums: Sequence[int], target: int) -> tuple[int, int]:
    """Same as :func:`search_range`, computed with the ``bisect`` module."""
    first = bisect_left(nums, target)
    if first == len(nums) or nums[first] != target:
        return NOT_FOUND, NOT_FOUND
    return first, bisect_right(nums, target) - 1