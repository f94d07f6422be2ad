"""Binary searches driven by local structure: peaks and the unpaired element."""

from __future__ import annotations

from collections.abc import Sequence

NOT_FOUND = -1


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of an element larger than its neighbours; outside counts as lower.

    Adjacent elements are expected to differ. Returns -1 if the search finds
    no peak.
    """
    if not nums:
        raise ValueError("find_peak_element() arg is an empty sequence")
    n = len(nums)
    if n == 1 or nums[0] > nums[1]:
        return 0
    if nums[-1] > nums[-2]:
        return n - 1
    low, high = 1, n - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid - 1] < nums[mid] > nums[mid + 1]:
            return mid
        if nums[mid] < nums[mid + 1]:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value of a sorted sequence that is not part of an equal pair.

    Returns -1 if the search finds no such value.
    """
    if not nums:
        raise ValueError("single_non_duplicate() arg is an empty sequence")
    if len(nums) == 1 or nums[0] != nums[1]:
        return nums[0]
    if nums[-1] != nums[-2]:
        return nums[-1]
    low, high = 1, len(nums) - 2
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] != nums[mid - 1] and nums[mid] != nums[mid + 1]:
            return nums[mid]
        pairs_with_next = nums[mid] == nums[mid + 1]
        odd_index = mid % 2 == 1
        # Before the single value pairs start at even indices; after it, at odd ones.
        if pairs_with_next == odd_index:
            high = mid - 1
        else:
            low = mid + 1
    return NOT_FOUND