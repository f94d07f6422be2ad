import math

import pytest

from algodrills.roots import integer_sqrt, nth_root


@pytest.mark.parametrize("x", list(range(0, 200)) + [2**31 - 1, 10**12, 10**12 - 1])
def test_integer_sqrt_matches_isqrt(x):
    assert integer_sqrt(x) == math.isqrt(x)


def test_integer_sqrt_bounds_invariant():
    for x in range(2, 500):
        r = integer_sqrt(x)
        assert r * r <= x < (r + 1) * (r + 1)


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5])
@pytest.mark.parametrize("base", [2, 3, 7, 10])
def test_nth_root_of_exact_power(n, base):
    assert nth_root(n, base**n) == base


@pytest.mark.parametrize("n", [2, 3, 4])
@pytest.mark.parametrize("base", [2, 3, 9])
def test_nth_root_of_non_power(n, base):
    assert nth_root(n, base**n + 1) == -1


@pytest.mark.parametrize("m", [0, 1])
def test_nth_root_small_values_unchanged(m):
    assert nth_root(3, m) == m