"""Order statistics of sorted sequences: k-th of two, median of two, k-th missing."""

from __future__ import annotations

from collections.abc import Sequence
from math import inf


def _boundaries(
    first: Sequence[int], second: Sequence[int], cut1: int, cut2: int
) -> tuple[float, float, float, float]:
    """Values either side of a cut in each sequence, padded with infinities."""
    l1 = first[cut1 - 1] if cut1 > 0 else -inf
    r1 = first[cut1] if cut1 < len(first) else inf
    l2 = second[cut2 - 1] if cut2 > 0 else -inf
    r2 = second[cut2] if cut2 < len(second) else inf
    return l1, r1, l2, r2


def kth_element(arr1: Sequence[int], arr2: Sequence[int], k: int) -> int:
    """The ``k``-th smallest value (1-based) of two sorted sequences taken together.

    Raises IndexError if ``k`` is outside ``1..len(arr1) + len(arr2)`` and
    ValueError if no valid partition exists, which means the input is unsorted.
    """
    if len(arr2) < len(arr1):
        arr1, arr2 = arr2, arr1
    n1, n2 = len(arr1), len(arr2)
    if not 1 <= k <= n1 + n2:
        raise IndexError(f"k must be between 1 and {n1 + n2}, got {k}")

    low, high = max(k - n2, 0), min(k, n1)
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = k - cut1
        l1, r1, l2, r2 = _boundaries(arr1, arr2, cut1, cut2)
        if l1 <= r2 and l2 <= r1:
            return max(l1, l2)
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("inputs must be sorted in ascending order")


def median_of_two(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of two sorted sequences taken together.

    Raises ValueError if both are empty or if the input is unsorted.
    """
    if len(nums2) < len(nums1):
        nums1, nums2 = nums2, nums1
    n1, n2 = len(nums1), len(nums2)
    total = n1 + n2
    if total == 0:
        raise ValueError("median of two empty sequences is undefined")

    left_size = (total + 1) // 2
    low, high = 0, n1
    while low <= high:
        cut1 = (low + high) // 2
        cut2 = left_size - cut1
        l1, r1, l2, r2 = _boundaries(nums1, nums2, cut1, cut2)
        if l1 <= r2 and l2 <= r1:
            if total % 2 == 1:
                return float(max(l1, l2))
            return (max(l1, l2) + min(r1, r2)) / 2.0
        if l1 > r2:
            high = cut1 - 1
        else:
            low = cut1 + 1
    raise ValueError("inputs must be sorted in ascending order")


def kth_missing_linear(nums: Sequence[int], k: int) -> int:
    """The ``k``-th positive integer absent from sorted ``nums``, by a linear scan."""
    for value in nums:
        if value > k:
            break
        k += 1
    return k


def kth_missing_binary(nums: Sequence[int], k: int) -> int:
    """The ``k``-th positive integer absent from sorted ``nums``, by binary search.

    At index ``i`` exactly ``nums[i] - (i + 1)`` positives are missing so far.
    """
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] - (mid + 1) < k:
            low = mid + 1
        else:
            high = mid - 1
    return low + k