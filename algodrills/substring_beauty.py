"""Sum of beauty over every substring of a string."""

from __future__ import annotations

from collections import Counter


def beauty_sum(s: str) -> int:
    """Sum over all substrings of (highest minus lowest character frequency)."""
    total = 0
    for start in range(len(s)):
        counts: Counter[str] = Counter()
        for char in s[start:]:
            counts[char] += 1
            frequencies = counts.values()
            total += max(frequencies) - min(frequencies)
    return total