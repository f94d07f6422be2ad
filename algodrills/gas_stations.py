"""Adding ``k`` stations to minimise the largest gap between neighbours."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence
from itertools import pairwise

PRECISION = 1e-7


def _gaps(stations: Sequence[int]) -> list[int]:
    if len(stations) < 2:
        raise ValueError("at least two stations are required")
    return [b - a for a, b in pairwise(stations)]


def minimise_max_distance_greedy(stations: Sequence[int], k: int) -> float:
    """Largest gap after placing each new station in the currently widest gap.

    Every placement scans all gaps, so the cost is O(k * n).
    """
    gaps = _gaps(stations)
    added = [0] * len(gaps)

    def spacing(index: int) -> float:
        return gaps[index] / (added[index] + 1)

    for _ in range(k):
        widest = max(range(len(gaps)), key=spacing)
        added[widest] += 1
    return max(spacing(index) for index in range(len(gaps)))


def minimise_max_distance_heap(stations: Sequence[int], k: int) -> float:
    """Same result as the greedy scan, keeping the widest gap on a heap."""
    gaps = _gaps(stations)
    added = [0] * len(gaps)
    heap = [(-float(gap), -index) for index, gap in enumerate(gaps)]
    heapq.heapify(heap)
    for _ in range(k):
        _, negated = heapq.heappop(heap)
        index = -negated
        added[index] += 1
        heapq.heappush(heap, (-(gaps[index] / (added[index] + 1)), negated))
    return -heap[0][0]


def minimise_max_distance(stations: Sequence[int], k: int) -> float:
    """Least achievable largest gap, found by binary search to within 1e-7."""
    gaps = _gaps(stations)

    def achievable(limit: float) -> bool:
        needed = sum(math.ceil(gap / limit) - 1 for gap in gaps)
        return needed <= k

    low, high = 0.0, float(max(gaps))
    while high - low > PRECISION:
        mid = low + (high - low) / 2.0
        if achievable(mid):
            high = mid
        else:
            low = mid
    return high