import pytest

from algodrills.rates import min_days, min_eating_speed, smallest_divisor


def test_min_eating_speed_worked_example():
    assert min_eating_speed([3, 6, 7, 11], 8) == 4


def test_min_eating_speed_hours_equal_piles_needs_max():
    piles = [30, 11, 23, 4, 20]
    assert min_eating_speed(piles, len(piles)) == max(piles)


def test_min_eating_speed_plenty_of_time_is_one():
    piles = [30, 11, 23, 4, 20]
    assert min_eating_speed(piles, sum(piles)) == 1


def test_min_eating_speed_monotone_in_hours():
    piles = [30, 11, 23, 4, 20]
    speeds = [min_eating_speed(piles, h) for h in range(len(piles), sum(piles) + 1)]
    assert speeds == sorted(speeds, reverse=True)


def test_min_eating_speed_empty_raises():
    with pytest.raises(ValueError):
        min_eating_speed([], 3)


def test_smallest_divisor_worked_example():
    assert smallest_divisor([1, 2, 5, 9], 6) == 5


def test_smallest_divisor_threshold_equal_length_needs_max():
    nums = [44, 22, 33, 11, 1]
    assert smallest_divisor(nums, len(nums)) == max(nums)


def test_smallest_divisor_large_threshold_is_one():
    nums = [44, 22, 33, 11, 1]
    assert smallest_divisor(nums, sum(nums)) == 1


def test_smallest_divisor_monotone_in_threshold():
    nums = [44, 22, 33, 11, 1]
    divisors = [smallest_divisor(nums, t) for t in range(len(nums), sum(nums) + 1)]
    assert divisors == sorted(divisors, reverse=True)


def test_smallest_divisor_empty_raises():
    with pytest.raises(ValueError):
        smallest_divisor([], 3)


def test_min_days_worked_example():
    assert min_days([1, 10, 3, 10, 2], 3, 1) == 3


def test_min_days_too_few_flowers():
    assert min_days([1, 10, 3, 10, 2], 3, 2) == -1


def test_min_days_single_bouquet_of_one_is_earliest():
    bloom = [7, 7, 7, 7, 12, 7, 7]
    assert min_days(bloom, 1, 1) == min(bloom)


def test_min_days_all_flowers_needed_is_latest():
    bloom = [7, 7, 7, 7, 12, 7, 7]
    assert min_days(bloom, 1, len(bloom)) == max(bloom)


def test_min_days_result_is_a_bloom_day():
    bloom = [1, 10, 2, 9, 3, 8, 4, 7, 5, 6, 6]
    result = min_days(bloom, 2, 3)
    assert result in bloom


def test_min_days_monotone_in_bouquets():
    bloom = [1, 10, 2, 9, 3, 8, 4, 7, 5, 6, 6]
    days = [min_days(bloom, m, 2) for m in range(1, len(bloom) // 2 + 1)]
    assert days == sorted(days)


def test_min_days_empty_with_demand_is_not_possible():
    assert min_days([], 1, 1) == -1