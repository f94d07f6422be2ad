"""Nesting depth and primitive decomposition of parenthesised strings."""

from __future__ import annotations

from itertools import accumulate


def max_depth(s: str) -> int:
    """Greatest number of parentheses open at once; other characters are ignored."""
    steps = (1 if char == "(" else -1 if char == ")" else 0 for char in s)
    return max(accumulate(steps, initial=0))


def remove_outer_parentheses(s: str) -> str:
    """Drop the outermost pair of every primitive group in a balanced string.

    Any character other than ``(`` is treated as a closing parenthesis.
    """
    kept = []
    balance = 0
    for char in s:
        if char == "(":
            if balance > 0:
                kept.append(char)
            balance += 1
        else:
            balance -= 1
            if balance > 0:
                kept.append(char)
    return "".join(kept)