"""Longest palindromic substring, by exhaustive search and by centre expansion."""

from __future__ import annotations


def is_palindrome_span(s: str, low: int, high: int) -> bool:
    """Whether ``s[low:high + 1]`` reads the same both ways."""
    segment = s[low : high + 1]
    return segment == segment[::-1]


def longest_palindrome_brute(s: str) -> str:
    """Longest palindromic substring by checking substrings from each start."""
    best = ""
    n = len(s)
    for start in range(n):
        for end in range(n - 1, start - 1, -1):
            if end - start + 1 <= len(best):
                break
            if is_palindrome_span(s, start, end):
                best = s[start : end + 1]
                break
    return best


def _expand(s: str, left: int, right: int) -> tuple[int, int]:
    """Grow a palindrome around a centre; return its start and length."""
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right - left - 1


def longest_palindrome(s: str) -> str:
    """Longest palindromic substring by expanding around every centre."""
    best_start, best_length = 0, 0
    for centre in range(len(s)):
        for left, right in ((centre, centre), (centre, centre + 1)):
            start, length = _expand(s, left, right)
            if length > best_length:
                best_start, best_length = start, length
    return s[best_start : best_start + best_length]