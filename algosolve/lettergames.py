"""Puzzles over letters: pair removal, growing words and typing mistakes."""

from itertools import accumulate, groupby
from typing import Iterable, Sequence

_MOD = 1_000_000_007
_SWAP_AB = str.maketrans("ab", "ba")


def _remove_pairs(
    chars: Iterable[str], first: str, second: str, points: int
) -> tuple[list[str], int]:
    """Remove every ``first``+``second`` pair as it forms; return the rest and the score."""
    stack: list[str] = []
    gained = 0
    for ch in chars:
        if stack and stack[-1] == first and ch == second:
            stack.pop()
            gained += points
        else:
            stack.append(ch)
    return stack, gained


def maximum_gain(s: str, x: int, y: int) -> int:
    """Best score from removing "ab" (worth ``x``) and "ba" (worth ``y``) from ``s``."""
    if x < y:
        x, y = y, x
        s = s.translate(_SWAP_AB)
    remaining, first_gain = _remove_pairs(s, "a", "b", x)
    _, second_gain = _remove_pairs(remaining, "b", "a", y)
    return first_gain + second_gain


def _shift_letter(letter: str, shift: int) -> str:
    return chr(ord("a") + (ord(letter) - ord("a") + shift) % 26)


def kth_character(k: int) -> str:
    """The ``k``-th letter (1-based) of the word grown from "a" by appending its shift."""
    if k < 1:
        raise ValueError("k must be at least 1")
    # Each doubling shifts the new half by one, so position k-1 is shifted
    # once for every set bit in its binary form.
    return _shift_letter("a", bin(k - 1).count("1"))


def kth_character_with_operations(k: int, operations: Sequence[int]) -> str:
    """The ``k``-th letter after doubling "a" per ``operations`` (1 shifts the copy)."""
    if k < 1:
        raise ValueError("k must be at least 1")
    position = k - 1
    shift = 0
    for operation in operations:
        if position == 0:
            break
        shift += operation & (position % 2)
        position //= 2
    return _shift_letter("a", shift)


def possible_string_count(word: str) -> int:
    """Number of originals if at most one key was held down too long while typing ``word``."""
    if not word:
        return 0
    return 1 + sum(len(list(run)) - 1 for _, run in groupby(word))


def possible_original_count(word: str, k: int) -> int:
    """Number of originals of length at least ``k`` that could have produced ``word``, mod 1e9+7."""
    runs = [len(list(run)) for _, run in groupby(word)]
    total = 1
    for run in runs:
        total = total * run % _MOD
    if len(runs) >= k:
        return total

    # ways[j]: number of ways to choose lengths of the runs seen so far totalling j.
    ways = [1] + [0] * (k - 1)
    for run in runs:
        prefix = list(accumulate(ways, initial=0))
        ways = [0] + [
            (prefix[j] - prefix[max(0, j - run)]) % _MOD for j in range(1, k)
        ]
    too_short = sum(ways) % _MOD
    return (total - too_short) % _MOD