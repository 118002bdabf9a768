"""Numeric routines: majority vote, maximum subarray, square roots and factorials."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from itertools import accumulate
from typing import Hashable, Iterable, Sequence

SQRT_TOLERANCE = 0.000000001


@dataclass(frozen=True)
class SubArray:
    """A contiguous run of a sequence: inclusive bounds and the sum of its values."""

    lo: int
    hi: int
    sum: int


def majority_element(values: Iterable[Hashable]) -> Hashable | None:
    """Return the value that fills more than half of ``values``, or ``None``."""
    items = list(values)
    if not items:
        return None
    value, count = Counter(items).most_common(1)[0]
    return value if count > len(items) // 2 else None


def _first_max_index(sums: Sequence[int]) -> int:
    return max(range(len(sums)), key=sums.__getitem__)


def _crossing(items: Sequence[int], lo: int, mid: int, hi: int) -> SubArray:
    left_sums = list(accumulate(reversed(items[lo : mid + 1])))
    right_sums = list(accumulate(items[mid + 1 : hi + 1]))
    left = _first_max_index(left_sums)
    right = _first_max_index(right_sums)
    return SubArray(mid - left, mid + 1 + right, left_sums[left] + right_sums[right])


def _max_subarray(items: Sequence[int], lo: int, hi: int) -> SubArray:
    if lo == hi:
        return SubArray(lo, hi, items[lo])
    mid = (lo + hi) // 2
    left = _max_subarray(items, lo, mid)
    right = _max_subarray(items, mid + 1, hi)
    cross = _crossing(items, lo, mid, hi)
    if left.sum > right.sum and left.sum > cross.sum:
        return left
    if right.sum > left.sum and right.sum > cross.sum:
        return right
    return cross


def max_subarray(values: Iterable[int]) -> SubArray:
    """Find the contiguous run with the largest sum by divide and conquer."""
    items = list(values)
    if not items:
        raise ValueError("max_subarray() needs at least one value")
    return _max_subarray(items, 0, len(items) - 1)


def sqrt_approx(n: float) -> float:
    """Approximate the square root of ``n`` by bisection, from below."""
    if n < 0:
        raise ValueError(f"cannot take the square root of a negative number: {n}")
    low, high = 0.0, max(float(n), 1.0)
    while high - low > SQRT_TOLERANCE:
        mid = (low + high) / 2
        if mid * mid > n:
            high = mid
        else:
            low = mid
    return low


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` of 1 or less gives 1."""
    return 1 if n <= 1 else math.factorial(n)


def trailing_zeros(n: int) -> int:
    """Count the trailing zeros of ``n!`` in decimal."""
    count = 0
    power = 5
    while power <= n:
        count += n // power
        power *= 5
    return count