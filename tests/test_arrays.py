import pytest

from algobox.arrays import (
    apply_operations,
    find_missing_and_repeated_values,
    merge_arrays,
    pivot_array,
    remove_element,
    unique_occurrences,
)


@pytest.mark.parametrize(
    "nums",
    [[1, 2, 2, 1, 1, 0], [0, 1], [2, 2, 2, 2], [5], [], [3, 3, 0, 3, 3, 7, 7, 7]],
)
def test_apply_operations_preserves_length_and_sum(nums):
    result = apply_operations(nums)
    assert len(result) == len(nums)
    assert sum(result) == sum(nums)


@pytest.mark.parametrize("nums", [[1, 2, 2, 1, 1, 0], [0, 0, 4, 4, 0, 9], [6, 6, 6]])
def test_apply_operations_moves_zeros_to_end(nums):
    result = apply_operations(nums)
    non_zero_count = sum(1 for value in result if value != 0)
    assert all(value != 0 for value in result[:non_zero_count])
    assert all(value == 0 for value in result[non_zero_count:])


def test_apply_operations_without_equal_neighbours_keeps_order():
    assert apply_operations([1, 2, 3]) == [1, 2, 3]


def test_apply_operations_does_not_modify_input():
    nums = [4, 4, 1]
    apply_operations(nums)
    assert nums == [4, 4, 1]


def test_pivot_array_example():
    assert pivot_array([9, 12, 5, 10, 14, 3, 10], 10) == [9, 5, 3, 10, 10, 12, 14]


@pytest.mark.parametrize("pivot", [-1, 0, 3, 7, 100])
def test_pivot_array_is_partitioned_permutation(pivot):
    nums = [7, -2, 3, 3, 0, 15, 7, 1]
    result = pivot_array(nums, pivot)
    assert sorted(result) == sorted(nums)
    ranks = [0 if v < pivot else 1 if v == pivot else 2 for v in result]
    assert ranks == sorted(ranks)
    assert [v for v in result if v < pivot] == [v for v in nums if v < pivot]
    assert [v for v in result if v > pivot] == [v for v in nums if v > pivot]


def test_find_missing_and_repeated_small_grid():
    assert find_missing_and_repeated_values([[1, 3], [2, 2]]) == [2, 4]


@pytest.mark.parametrize(
    "missing,repeated", [(1, 9), (9, 1), (5, 2), (3, 7), (8, 4)]
)
def test_find_missing_and_repeated_constructed(missing, repeated):
    values = [repeated if v == missing else v for v in range(1, 10)]
    grid = [values[0:3], values[3:6], values[6:9]]
    assert find_missing_and_repeated_values(grid) == [repeated, missing]


def test_merge_arrays_disjoint_ids_are_sorted_union():
    nums1 = [[4, 1], [1, 7]]
    nums2 = [[3, 2], [9, 5]]
    assert merge_arrays(nums1, nums2) == [[1, 7], [3, 2], [4, 1], [9, 5]]


def test_merge_arrays_sums_common_ids():
    nums1 = [[1, 2], [2, 3], [4, 5]]
    nums2 = [[1, 4], [3, 2], [4, 1]]
    result = merge_arrays(nums1, nums2)
    ids = [ident for ident, _ in result]
    assert ids == sorted({ident for ident, _ in nums1 + nums2})
    assert sum(value for _, value in result) == sum(v for _, v in nums1 + nums2)


def test_merge_arrays_empty():
    assert merge_arrays([], []) == []


@pytest.mark.parametrize(
    "nums,val",
    [([3, 2, 2, 3], 3), ([0, 1, 2, 2, 3, 0, 4, 2], 2), ([1, 1, 1], 1), ([5, 6], 9), ([], 1)],
)
def test_remove_element(nums, val):
    original = list(nums)
    k = remove_element(nums, val)
    assert k == sum(1 for v in original if v != val)
    assert nums[:k] == [v for v in original if v != val]
    assert nums[k:] == original[k:]


def test_unique_occurrences_true():
    assert unique_occurrences([1, 2, 2, 1, 1, 3]) is True


def test_unique_occurrences_false():
    assert unique_occurrences([1, 2]) is False


def test_unique_occurrences_empty():
    assert unique_occurrences([]) is True