"""Counting pairs across two arrays whose sums hit a target."""

from collections import Counter
from typing import Iterable


class FindSumPairs:
    """Two arrays; the second can be updated, and pairs summing to a total counted."""

    def __init__(self, nums1: Iterable[int], nums2: Iterable[int]) -> None:
        self._nums2 = list(nums2)
        self._counts1 = Counter(nums1)
        self._counts2 = Counter(self._nums2)

    def add(self, index: int, val: int) -> None:
        """Add ``val`` to the element of the second array at ``index``."""
        old = self._nums2[index]
        self._counts2[old] -= 1
        self._counts2[old + val] += 1
        self._nums2[index] = old + val

    def count(self, tot: int) -> int:
        """Number of index pairs (i, j) with nums1[i] + nums2[j] == tot."""
        return sum(
            count * self._counts2.get(tot - num, 0)
            for num, count in self._counts1.items()
        )