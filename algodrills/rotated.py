"""Searches in sorted sequences that have been rotated about a pivot."""

from __future__ import annotations

from collections.abc import Sequence

NOT_FOUND = -1


def count_rotations(nums: Sequence[int]) -> int:
    """Times a sorted sequence of unique values was rotated (index of its minimum).

    An empty sequence counts as rotated zero times.
    """
    low, high = 0, len(nums) - 1
    best = 0
    while low <= high:
        if nums[low] <= nums[high]:
            if nums[low] < nums[best]:
                best = low
            break
        mid = (low + high) // 2
        if nums[low] <= nums[mid]:
            if nums[low] < nums[best]:
                best = low
            low = mid + 1
        else:
            if nums[mid] < nums[best]:
                best = mid
            high = mid - 1
    return best


def count_rotations_with_duplicates(nums: Sequence[int]) -> int:
    """Index of a minimum of a rotated sorted sequence that may repeat values."""
    low, high = 0, len(nums) - 1
    best = 0
    while low <= high:
        mid = (low + high) // 2
        if nums[low] == nums[mid] == nums[high]:
            if nums[low] < nums[best]:
                best = low
            low += 1
            high -= 1
            continue
        if nums[low] <= nums[mid]:
            if nums[low] < nums[best]:
                best = low
            low = mid + 1
        else:
            if nums[mid] < nums[best]:
                best = mid
            high = mid - 1
    return best


def find_min(nums: Sequence[int]) -> int:
    """Smallest value of a rotated sorted sequence of unique values."""
    if not nums:
        raise ValueError("find_min() arg is an empty sequence")
    return nums[count_rotations(nums)]


def find_min_with_duplicates(nums: Sequence[int]) -> int:
    """Smallest value of a rotated sorted sequence that may repeat values."""
    if not nums:
        raise ValueError("find_min_with_duplicates() arg is an empty sequence")
    return nums[count_rotations_with_duplicates(nums)]


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence of unique values, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if nums[mid] <= target <= nums[high]:
                low = mid + 1
            else:
                high = mid - 1
    return NOT_FOUND


def search_rotated_with_duplicates(nums: Sequence[int], target: int) -> bool:
    """Whether ``target`` occurs in a rotated sorted sequence that may repeat values."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return True
        if nums[low] == nums[mid] == nums[high]:
            low += 1
            high -= 1
            continue
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        else:
            if nums[mid] <= target <= nums[high]:
                low = mid + 1
            else:
                high = mid - 1
    return False