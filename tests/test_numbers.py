import math

import pytest

from dsakit.numbers import (
    SubArray,
    factorial,
    majority_element,
    max_subarray,
    sqrt_approx,
    trailing_zeros,
)


def test_majority_found():
    assert majority_element([2, 2, 3, 2]) == 2


def test_majority_absent():
    assert majority_element([1, 2, 3]) is None


def test_majority_exactly_half_is_not_enough():
    assert majority_element([1, 1, 2, 2]) is None


def test_majority_empty():
    assert majority_element([]) is None


def test_max_subarray_worked_example():
    assert max_subarray([-2, -5, 6, -2, -3, 1, 5, -6]) == SubArray(2, 6, 7)


def test_max_subarray_all_negative_picks_largest_element():
    values = [-3, -1, -2]
    result = max_subarray(values)
    assert result.sum == max(values)
    assert result.lo == result.hi == values.index(max(values))


def test_max_subarray_single():
    assert max_subarray([9]) == SubArray(0, 0, 9)


def test_max_subarray_empty_raises():
    with pytest.raises(ValueError):
        max_subarray([])


@pytest.mark.parametrize("n", [0, 0.25, 2, 10, 16, 1234.5])
def test_sqrt_squares_back(n):
    root = sqrt_approx(n)
    assert root == pytest.approx(math.sqrt(n), abs=1e-6)
    assert root <= math.sqrt(n) + 1e-12


def test_sqrt_negative_raises():
    with pytest.raises(ValueError):
        sqrt_approx(-4)


def test_factorial_matches_math():
    assert factorial(10) == math.factorial(10)


@pytest.mark.parametrize("n", [1, 0, -3])
def test_factorial_small_is_one(n):
    assert factorial(n) == 1


@pytest.mark.parametrize("n", [0, 4, 10, 25, 26, 100, 131])
def test_trailing_zeros_match_decimal(n):
    digits = str(math.factorial(max(n, 0)))
    assert trailing_zeros(n) == len(digits) - len(digits.rstrip("0"))


def test_trailing_zeros_source_cases():
    assert trailing_zeros(10) == 2
    assert trailing_zeros(4) == 0