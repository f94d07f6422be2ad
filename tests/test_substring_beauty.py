import pytest

from algodrills.substring_beauty import beauty_sum


@pytest.mark.parametrize("s", ["", "a", "aaaa", "abcdef", "zyx"])
def test_uniform_or_distinct_strings_have_no_beauty(s):
    assert beauty_sum(s) == 0


def test_worked_example():
    assert beauty_sum("aabcb") == 5


def test_single_beautiful_substring():
    assert beauty_sum("aab") == 1


@pytest.mark.parametrize("s", ["aabcbaa", "abacabad", "mississippi"])
def test_beauty_is_invariant_under_reversal(s):
    assert beauty_sum(s) == beauty_sum(s[::-1])


@pytest.mark.parametrize("s", ["aabcbaa", "abacabad", "mississippi"])
def test_beauty_is_invariant_under_letter_renaming(s):
    renamed = s.translate(str.maketrans("abcdimps", "qrstuvwx"))
    assert beauty_sum(renamed) == beauty_sum(s)


@pytest.mark.parametrize("s", ["aabcb", "abacabad", "mississippi"])
def test_appending_never_reduces_beauty(s):
    assert beauty_sum(s + "a") >= beauty_sum(s)
    assert beauty_sum("b" + s) >= beauty_sum(s)