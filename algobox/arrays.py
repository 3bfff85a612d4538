"""Array transformations: pairwise doubling, pivot partitioning, frequency checks and merging."""

from __future__ import annotations

from collections import Counter
from itertools import chain
from typing import Iterable, MutableSequence, Sequence


def apply_operations(nums: Iterable[int]) -> list[int]:
    """Double each value equal to its right neighbour and zero that neighbour.

    Pairs are handled left to right, so a zeroed neighbour takes part in the
    next comparison. Zeros are then moved to the end, keeping the order of
    the other values. The input is not modified.
    """
    processed: list[int] = []
    current: int | None = None
    for value in nums:
        if current is None:
            current = value
        elif current == value:
            processed.append(current * 2)
            current = 0
        else:
            processed.append(current)
            current = value
    if current is not None:
        processed.append(current)

    non_zero = [value for value in processed if value != 0]
    return non_zero + [0] * (len(processed) - len(non_zero))


def pivot_array(nums: Iterable[int], pivot: int) -> list[int]:
    """Values below ``pivot``, then equal to it, then above it, each group in input order."""
    less: list[int] = []
    equal: list[int] = []
    greater: list[int] = []
    for num in nums:
        if num < pivot:
            less.append(num)
        elif num == pivot:
            equal.append(num)
        else:
            greater.append(num)
    return less + equal + greater


def find_missing_and_repeated_values(grid: Sequence[Sequence[int]]) -> list[int]:
    """Find the value seen twice and the value missing in an n x n grid of ``1 .. n*n``.

    Returns ``[repeated, missing]``; either is -1 when it cannot be found.
    """
    size = len(grid) ** 2
    frequency = Counter(chain.from_iterable(grid))
    repeated = missing = -1
    for value in range(1, size + 1):
        count = frequency[value]
        if count == 2:
            repeated = value
        elif count == 0:
            missing = value
        if repeated != -1 and missing != -1:
            break
    return [repeated, missing]


def merge_arrays(
    nums1: Iterable[Sequence[int]], nums2: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Merge ``[id, value]`` pairs, summing values of ids present in both, sorted by id."""
    totals: dict[int, int] = {}
    for ident, value in nums1:
        totals[ident] = value
    for ident, value in nums2:
        totals[ident] = totals.get(ident, 0) + value
    return [[ident, totals[ident]] for ident in sorted(totals)]


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every value other than ``val`` to the front of ``nums``, in order.

    Returns how many such values there are. Positions past that count keep
    whatever they held before.
    """
    kept = [num for num in nums if num != val]
    nums[: len(kept)] = kept
    return len(kept)


def unique_occurrences(arr: Iterable[int]) -> bool:
    """True when no two distinct values occur the same number of times."""
    counts = Counter(arr).values()
    return len(set(counts)) == len(counts)