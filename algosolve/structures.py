"""Puzzles on folder trees, tournaments and graphs."""

from collections import Counter
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Sequence


def remove_subfolders(folder: Sequence[str]) -> list[str]:
    """Keep only the folders that are not inside another listed folder."""
    roots: set[str] = set()
    kept: list[str] = []
    for path in sorted(folder, key=len):
        prefixes = [path[:i] for i, ch in enumerate(path) if ch == "/" and i > 0]
        prefixes.append(path)
        if not any(prefix in roots for prefix in prefixes):
            roots.add(path)
            kept.append(path)
    return kept


def earliest_and_latest(n: int, first_player: int, second_player: int) -> list[int]:
    """Earliest and latest round in which the two players can meet."""
    if first_player == second_player:
        raise ValueError("the two players must differ")
    if not (1 <= first_player <= n and 1 <= second_player <= n):
        raise ValueError("players must be numbered from 1 to n")
    first, second = sorted((first_player, second_player))

    @lru_cache(maxsize=None)
    def rounds(size: int, f: int, s: int) -> tuple[int, int]:
        if f + s == size + 1:
            return 1, 1
        if f + s > size + 1:
            return rounds(size, size + 1 - s, size + 1 - f)
        half = (size + 1) // 2
        if s <= half:
            outcomes = [
                rounds(half, i + 1, i + j + 2) for i in range(f) for j in range(s - f)
            ]
        else:
            mirrored = size + 1 - s
            middle = (size - 2 * mirrored + 1) // 2
            outcomes = [
                rounds(half, i + 1, i + j + middle + 2)
                for i in range(f)
                for j in range(mirrored - f)
            ]
        return (
            min(early for early, _ in outcomes) + 1,
            max(late for _, late in outcomes) + 1,
        )

    earliest, latest = rounds(n, first, second)
    return [earliest, latest]


@dataclass
class _Folder:
    children: dict[str, "_Folder"] = field(default_factory=dict)
    serial: str = ""


def delete_duplicate_folder(paths: Sequence[Sequence[str]]) -> list[list[str]]:
    """Remove every folder whose subtree structure occurs more than once."""
    root = _Folder()
    for path in paths:
        node = root
        for name in path:
            node = node.children.setdefault(name, _Folder())

    occurrences: Counter[str] = Counter()

    def serialise(node: _Folder) -> None:
        if not node.children:
            return
        parts = []
        for name, child in node.children.items():
            serialise(child)
            parts.append(f"{name}({child.serial})")
        node.serial = "".join(sorted(parts))
        occurrences[node.serial] += 1

    serialise(root)

    remaining: list[list[str]] = []

    def collect(node: _Folder, path: list[str]) -> None:
        if occurrences[node.serial] > 1:
            return
        if path:
            remaining.append(path)
        for name, child in node.children.items():
            collect(child, [*path, name])

    collect(root, [])
    return remaining


def minimum_score(nums: Sequence[int], edges: Sequence[Sequence[int]]) -> int:
    """Smallest max-minus-min of component XORs after cutting two tree edges."""
    n = len(nums)
    if n < 3:
        raise ValueError("the tree needs at least three nodes")
    neighbours: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        neighbours[a].append(b)
        neighbours[b].append(a)

    parent = [-1] * n
    order: list[int] = []
    stack = [0]
    seen = {0}
    while stack:
        node = stack.pop()
        order.append(node)
        for nxt in neighbours[node]:
            if nxt not in seen:
                seen.add(nxt)
                parent[nxt] = node
                stack.append(nxt)

    entry = {node: position for position, node in enumerate(order)}
    size = [1] * n
    subtree_xor = list(nums)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
        subtree_xor[parent[node]] ^= subtree_xor[node]
    total = subtree_xor[0]

    def contains(outer: int, inner: int) -> bool:
        return entry[outer] < entry[inner] < entry[outer] + size[outer]

    best = None
    cut_points = order[1:]
    for pos, u in enumerate(cut_points):
        for v in cut_points[pos + 1 :]:
            if contains(u, v):
                parts = (subtree_xor[v], subtree_xor[u] ^ subtree_xor[v], total ^ subtree_xor[u])
            elif contains(v, u):
                parts = (subtree_xor[u], subtree_xor[v] ^ subtree_xor[u], total ^ subtree_xor[v])
            else:
                parts = (
                    subtree_xor[u],
                    subtree_xor[v],
                    total ^ subtree_xor[u] ^ subtree_xor[v],
                )
            score = max(parts) - min(parts)
            if best is None or score < best:
                best = score
    assert best is not None
    return best


def max_subarrays(n: int, conflicting_pairs: Sequence[Sequence[int]]) -> int:
    """Most subarrays of 1..n free of conflicting pairs after dropping one pair."""
    unbounded = n + 1
    nearest = [unbounded] * (n + 1)
    second_nearest = [unbounded] * (n + 1)
    for pair in conflicting_pairs:
        a, b = sorted(pair)
        if nearest[a] > b:
            second_nearest[a] = nearest[a]
            nearest[a] = b
        elif second_nearest[a] > b:
            second_nearest[a] = b

    result = 0
    tightest = n
    runner_up = unbounded
    gain = [0] * (n + 1)
    for i in range(n, 0, -1):
        if nearest[tightest] > nearest[i]:
            runner_up = min(runner_up, nearest[tightest])
            tightest = i
        else:
            runner_up = min(runner_up, nearest[i])
        bound = min(nearest[tightest], unbounded)
        result += bound - i
        gain[tightest] += min(runner_up, second_nearest[tightest], unbounded) - bound
    return result + max(gain)