import statistics

import pytest

from algosolve.arrays import (
    find_lucky,
    find_median_sorted_arrays,
    max_area,
    max_unique_sum,
    maximum_mod_length,
    maximum_parity_length,
    maximum_unique_subarray,
    minimum_difference,
    two_sum,
)


def test_two_sum_example():
    assert two_sum([2, 7, 11, 15], 9) == [0, 1]


@pytest.mark.parametrize(
    "nums, target",
    [([3, 2, 4], 6), ([3, 3], 6), ([1, 5, 9, -2, 8], 7), ([10, 20, 30, 40], 70)],
)
def test_two_sum_result_adds_up(nums, target):
    i, j = two_sum(nums, target)
    assert i < j
    assert nums[i] + nums[j] == target


def test_two_sum_without_solution():
    assert two_sum([1, 2, 3], 100) == []


@pytest.mark.parametrize(
    "nums1, nums2",
    [
        ([1, 2, 3, 9, 10], [4, 5, 6, 7, 8]),
        ([1, 3], [2]),
        ([1, 2], [3, 4]),
        ([], [5]),
        ([-5, 0, 5], []),
        ([1, 1, 1], [1, 1, 2, 7]),
    ],
)
def test_median_agrees_with_statistics(nums1, nums2):
    expected = statistics.median(sorted(nums1 + nums2))
    assert find_median_sorted_arrays(nums1, nums2) == pytest.approx(expected)


def test_median_is_symmetric_and_leaves_inputs_alone():
    a, b = [1, 2, 3, 9, 10], [4, 5]
    result = find_median_sorted_arrays(a, b)
    assert result == find_median_sorted_arrays(b, a)
    assert a == [1, 2, 3, 9, 10]
    assert b == [4, 5]


def test_median_of_empty_arrays_raises():
    with pytest.raises(ValueError):
        find_median_sorted_arrays([], [])


@pytest.mark.parametrize(
    "height, expected",
    [([1, 8, 6, 2, 5, 4, 8, 3, 7], 49), ([1, 1], 1)],
)
def test_max_area_examples(height, expected):
    assert max_area(height) == expected


@pytest.mark.parametrize("height", [[1, 8, 6, 2, 5, 4, 8, 3, 7], [4, 3, 2, 1, 4], [2, 9, 1, 6]])
def test_max_area_is_best_pair(height):
    areas = [
        (j - i) * min(height[i], height[j])
        for i in range(len(height))
        for j in range(i + 1, len(height))
    ]
    assert max_area(height) == max(areas)
    assert max_area(height) == max_area(list(reversed(height)))


@pytest.mark.parametrize(
    "arr, expected",
    [([2, 2, 3, 4], 2), ([1, 2, 2, 3, 3, 3], 3), ([2, 2, 2, 3, 3], -1)],
)
def test_find_lucky_examples(arr, expected):
    assert find_lucky(arr) == expected


def test_find_lucky_result_occurs_its_own_number_of_times():
    arr = [5, 5, 5, 5, 5, 4, 4, 4, 4, 1, 7]
    lucky = find_lucky(arr)
    assert arr.count(lucky) == lucky


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([4, 2, 4, 5, 6], 17),
        ([5, 2, 1, 2, 5, 2, 1, 2, 5], 8),
        (
            [187, 470, 25, 436, 538, 809, 441, 167, 477, 110, 275, 133, 666, 345, 411,
             459, 490, 266, 987, 965, 429, 166, 809, 340, 467, 318, 125, 165, 809, 610,
             31, 585, 970, 306, 42, 189, 169, 743, 78, 810, 70, 382, 367, 490, 787, 670,
             476, 278, 775, 673, 299, 19, 893, 817, 971, 458, 409, 886, 434],
            16911,
        ),
    ],
)
def test_maximum_unique_subarray_examples(nums, expected):
    assert maximum_unique_subarray(nums) == expected


def test_maximum_unique_subarray_all_distinct_takes_everything():
    nums = [3, 1, 4, 5, 9, 2, 6]
    assert maximum_unique_subarray(nums) == sum(nums)


@pytest.mark.parametrize(
    "nums, expected",
    [([3, 1, 2], -1), ([7, 9, 5, 8, 1, 3], 1)],
)
def test_minimum_difference_examples(nums, expected):
    assert minimum_difference(nums) == expected


def test_minimum_difference_equal_values():
    assert minimum_difference([4] * 9) == 0


@pytest.mark.parametrize("nums", [[1, 2], [1, 2, 3, 4]])
def test_minimum_difference_rejects_bad_length(nums):
    with pytest.raises(ValueError):
        minimum_difference(nums)


def test_maximum_parity_length_example():
    assert maximum_parity_length([1, 2, 3, 4]) == 4


@pytest.mark.parametrize("nums", [[2, 4, 6, 8], [1, 3, 5], [7]])
def test_maximum_parity_length_same_parity_takes_all(nums):
    assert maximum_parity_length(nums) == len(nums)


@pytest.mark.parametrize("nums", [[1, 2, 1, 1, 2, 1, 2], [1, 3], [2, 2, 1, 3, 5, 6]])
def test_maximum_parity_length_at_least_parity_counts(nums):
    odd = sum(1 for num in nums if num % 2)
    result = maximum_parity_length(nums)
    assert result >= max(odd, len(nums) - odd)
    assert result <= len(nums)


@pytest.mark.parametrize(
    "nums, k, expected",
    [([1, 2, 3, 4, 5], 2, 5), ([1, 4, 2, 3, 1, 4], 3, 4)],
)
def test_maximum_mod_length_examples(nums, k, expected):
    assert maximum_mod_length(nums, k) == expected


def test_maximum_mod_length_modulo_one_takes_all():
    nums = [9, 3, 7, 1]
    assert maximum_mod_length(nums, 1) == len(nums)


def test_maximum_mod_length_two_matches_parity_version():
    nums = [1, 2, 1, 1, 2, 1, 2, 8, 6]
    assert maximum_mod_length(nums, 2) == maximum_parity_length(nums)


def test_maximum_mod_length_rejects_zero_modulus():
    with pytest.raises(ValueError):
        maximum_mod_length([1, 2], 0)


@pytest.mark.parametrize(
    "nums, expected",
    [([1, 2, 3, 4, 5], 15), ([1, 1, 0, 1, 1], 1), ([1, 2, -1, -2, 1, 0, -1], 3)],
)
def test_max_unique_sum_examples(nums, expected):
    assert max_unique_sum(nums) == expected


def test_max_unique_sum_without_positives_takes_largest():
    nums = [-7, -3, -9]
    assert max_unique_sum(nums) == max(nums)


def test_max_unique_sum_empty_raises():
    with pytest.raises(ValueError):
        max_unique_sum([])