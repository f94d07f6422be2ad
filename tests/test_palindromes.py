import random

import pytest

from algodrills.palindromes import (
    is_palindrome_span,
    longest_palindrome,
    longest_palindrome_brute,
)


def _random_strings():
    rng = random.Random(99)
    return ["".join(rng.choice("abc") for _ in range(rng.randint(1, 14))) for _ in range(40)]


def test_is_palindrome_span():
    assert is_palindrome_span("racecar", 0, 6) is True
    assert is_palindrome_span("abca", 0, 3) is False
    assert is_palindrome_span("abca", 1, 1) is True


@pytest.mark.parametrize("func", [longest_palindrome, longest_palindrome_brute])
def test_empty_string(func):
    assert func("") == ""


@pytest.mark.parametrize("func", [longest_palindrome, longest_palindrome_brute])
def test_whole_palindrome_is_returned(func):
    assert func("racecar") == "racecar"
    assert func("abba") == "abba"


@pytest.mark.parametrize("func", [longest_palindrome, longest_palindrome_brute])
def test_even_length_example(func):
    assert func("cbbd") == "bb"


@pytest.mark.parametrize("func", [longest_palindrome, longest_palindrome_brute])
def test_odd_example_prefers_leftmost(func):
    assert func("babad") == "bab"


@pytest.mark.parametrize("s", _random_strings())
def test_result_is_palindromic_substring(s):
    result = longest_palindrome(s)
    assert result in s
    assert result == result[::-1]
    assert len(result) >= 1


@pytest.mark.parametrize("s", _random_strings())
def test_approaches_agree(s):
    assert longest_palindrome(s) == longest_palindrome_brute(s)


@pytest.mark.parametrize("s", _random_strings())
def test_no_longer_palindrome_exists(s):
    length = len(longest_palindrome(s))
    for start in range(len(s)):
        for end in range(start + length, len(s)):
            assert not is_palindrome_span(s, start, end)