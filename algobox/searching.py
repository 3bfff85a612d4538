"""Binary searches: number guessing, peak finding and insert positions."""

from __future__ import annotations

from typing import Callable, Sequence


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in ``1 .. n``.

    ``guess(x)`` returns 0 when ``x`` is the pick, -1 when the pick is lower
    and 1 when it is higher.
    """
    left, right = 1, n
    while left <= right:
        mid = (left + right) // 2
        result = guess(mid)
        if result == 0:
            return mid
        if result == -1:
            right = mid - 1
        else:
            left = mid + 1
    return left


def find_peak_element(nums: Sequence[int]) -> int:
    """Index of a value strictly greater than its neighbours (edges count as lower)."""
    left, right = 0, len(nums) - 1
    while left < right:
        mid = (left + right) // 2
        if nums[mid] < nums[mid + 1]:
            left = mid + 1
        else:
            right = mid
    return left


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left