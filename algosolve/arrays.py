"""Array puzzles: pair sums, medians, containers, windows and subsequences."""

import heapq
import math
from collections import Counter
from typing import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices ``[i, j]`` with ``i < j`` and ``nums[i] + nums[j] == target``, or ``[]``."""
    wanted: dict[int, int] = {}
    for index, num in enumerate(nums):
        if num in wanted:
            return [wanted[num], index]
        wanted.setdefault(target - num, index)
    return []


def find_median_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Median of the union of two sorted sequences, found by binary partition."""
    short, long_ = (nums1, nums2) if len(nums1) <= len(nums2) else (nums2, nums1)
    m, n = len(short), len(long_)
    total = m + n
    if total == 0:
        raise ValueError("median of empty arrays is undefined")
    half = (total + 1) // 2

    low, high = 0, m
    while low <= high:
        i = (low + high) // 2
        j = half - i
        a_left = short[i - 1] if i > 0 else -math.inf
        a_right = short[i] if i < m else math.inf
        b_left = long_[j - 1] if j > 0 else -math.inf
        b_right = long_[j] if j < n else math.inf

        if a_left <= b_right and b_left <= a_right:
            left_max = max(a_left, b_left)
            if total % 2 == 1:
                return float(left_max)
            return (left_max + min(a_right, b_right)) / 2.0
        if a_left > b_right:
            high = i - 1
        else:
            low = i + 1
    raise ValueError("input sequences must be sorted")


def max_area(height: Sequence[int]) -> int:
    """Largest water area between two lines of the given heights."""
    left, right = 0, len(height) - 1
    best = 0
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] > height[right]:
            right -= 1
        else:
            left += 1
    return best


def find_lucky(arr: Sequence[int]) -> int:
    """Largest positive value occurring exactly as many times as itself, else -1."""
    counts = Counter(arr)
    return max((value for value, count in counts.items() if value > 0 and value == count),
               default=-1)


def maximum_unique_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a contiguous run of distinct values."""
    prefix_after: dict[int, int] = {}
    running = 0
    cut = 0
    best = 0
    for num in nums:
        running += num
        cut = max(cut, prefix_after.get(num, 0))
        best = max(best, running - cut)
        prefix_after[num] = running
    return best


def minimum_difference(nums: Sequence[int]) -> int:
    """Remove n of 3n values to minimise sum(first n kept) - sum(last n kept)."""
    if len(nums) % 3:
        raise ValueError("length of nums must be a multiple of 3")
    n = len(nums) // 3

    # Smallest possible sum of n values picked from nums[:n + i], for i in 0..n.
    largest_kept = [-num for num in nums[:n]]
    heapq.heapify(largest_kept)
    left_sums = [sum(nums[:n])]
    for num in nums[n : 2 * n]:
        dropped = -heapq.heappushpop(largest_kept, -num)
        left_sums.append(left_sums[-1] + num - dropped)

    smallest_kept = list(nums[2 * n :])
    heapq.heapify(smallest_kept)
    right_sum = sum(smallest_kept)
    best = left_sums[n] - right_sum
    for offset, num in enumerate(reversed(nums[n : 2 * n]), start=1):
        dropped = heapq.heappushpop(smallest_kept, num)
        right_sum += num - dropped
        best = min(best, left_sums[n - offset] - right_sum)
    return best


def maximum_parity_length(nums: Sequence[int]) -> int:
    """Longest subsequence whose adjacent pair sums all share one parity."""
    odd = sum(num % 2 for num in nums)
    even = len(nums) - odd
    alternating_from_even = alternating_from_odd = 0
    for num in nums:
        parity = num % 2
        if alternating_from_even % 2 == parity:
            alternating_from_even += 1
        if alternating_from_odd % 2 != parity:
            alternating_from_odd += 1
    return max(odd, even, alternating_from_even, alternating_from_odd)


def maximum_mod_length(nums: Sequence[int], k: int) -> int:
    """Longest subsequence whose adjacent pair sums are all congruent modulo ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    # lengths[target][r]: longest valid subsequence ending in residue r
    # whose adjacent sums are congruent to target.
    lengths = [[0] * k for _ in range(k)]
    best = 0
    for num in nums:
        residue = num % k
        for target, row in enumerate(lengths):
            row[residue] = row[(target - residue) % k] + 1
            best = max(best, row[residue])
    return best


def max_unique_sum(nums: Sequence[int]) -> int:
    """Sum of the distinct positive values, or the largest value if none is positive."""
    if not nums:
        raise ValueError("nums must not be empty")
    positives = {num for num in nums if num > 0}
    return sum(positives) if positives else max(nums)