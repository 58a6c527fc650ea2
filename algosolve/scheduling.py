"""Scheduling puzzles: events, meeting rooms, matching and free time."""

import heapq
from bisect import bisect_left
from itertools import accumulate
from typing import Sequence


def max_events(events: Sequence[Sequence[int]]) -> int:
    """Most events attendable, one per day, each on a day within its [start, end]."""
    if not events:
        return 0
    ordered = sorted(events, key=lambda event: (event[0], event[1]))
    if ordered[0][0] < 1:
        raise ValueError("event days start at 1")
    last_day = max(event[1] for event in ordered)

    open_ends: list[int] = []
    attended = 0
    index = 0
    day = 1
    while day <= last_day:
        if not open_ends:
            if index == len(ordered):
                break
            day = max(day, ordered[index][0])
        while index < len(ordered) and ordered[index][0] <= day:
            heapq.heappush(open_ends, ordered[index][1])
            index += 1
        while open_ends and open_ends[0] < day:
            heapq.heappop(open_ends)
        if open_ends:
            heapq.heappop(open_ends)
            attended += 1
        day += 1
    return attended


def max_value(events: Sequence[Sequence[int]], k: int) -> int:
    """Largest total value from at most ``k`` non-overlapping [start, end, value] events."""
    if not events:
        return 0
    ordered = sorted(events, key=lambda event: event[1])
    ends = [event[1] for event in ordered]
    # Index of the last event that ends strictly before each event starts.
    previous = [bisect_left(ends, event[0], 0, i) - 1 for i, event in enumerate(ordered)]

    best = 0
    last_round = [0] * len(ordered)
    for _ in range(k):
        best_before = list(accumulate(last_round, max))
        current: list[int] = []
        for event, before in zip(ordered, previous):
            take = event[2] + (best_before[before] if before >= 0 else 0)
            skip = current[-1] if current else 0
            current.append(max(take, skip))
        best = max(best, current[-1])
        last_round = current
    return best


def most_booked(n: int, meetings: Sequence[Sequence[int]]) -> int:
    """Room that hosts the most meetings; delayed meetings keep their duration."""
    if n < 1:
        raise ValueError("there must be at least one room")
    free_rooms = list(range(n))
    busy_rooms: list[tuple[int, int]] = []
    counts = [0] * n
    for start, end in sorted(meetings, key=lambda meeting: meeting[0]):
        while busy_rooms and busy_rooms[0][0] <= start:
            heapq.heappush(free_rooms, heapq.heappop(busy_rooms)[1])
        if free_rooms:
            room = heapq.heappop(free_rooms)
            finish = end
        else:
            available, room = heapq.heappop(busy_rooms)
            finish = available + (end - start)
        counts[room] += 1
        heapq.heappush(busy_rooms, (finish, room))
    return max(range(n), key=counts.__getitem__)


def match_players_and_trainers(players: Sequence[int], trainers: Sequence[int]) -> int:
    """Most pairs where a player's ability does not exceed the trainer's capacity."""
    abilities = sorted(players)
    matched = 0
    for capacity in sorted(trainers):
        if matched < len(abilities) and abilities[matched] <= capacity:
            matched += 1
    return matched


def _gaps(event_time: int, start_time: Sequence[int], end_time: Sequence[int]) -> list[int]:
    if len(start_time) != len(end_time):
        raise ValueError("start_time and end_time must have the same length")
    return [
        start - end
        for start, end in zip([*start_time, event_time], [0, *end_time])
    ]


def max_free_time(
    event_time: int, k: int, start_time: Sequence[int], end_time: Sequence[int]
) -> int:
    """Longest free stretch after moving up to ``k`` events, keeping their order."""
    gaps = _gaps(event_time, start_time, end_time)
    if not 0 <= k <= len(start_time):
        raise ValueError("k must be between 0 and the number of events")
    window = k + 1
    prefix = list(accumulate(gaps, initial=0))
    return max(
        prefix[i + window] - prefix[i] for i in range(len(gaps) - window + 1)
    )


def max_free_time_one_move(
    event_time: int, start_time: Sequence[int], end_time: Sequence[int]
) -> int:
    """Longest free stretch after moving at most one event anywhere it fits."""
    gaps = _gaps(event_time, start_time, end_time)
    # largest_before[i]: largest of gaps[:i]; largest_from[j]: largest of gaps[j:].
    largest_before = list(accumulate(gaps, max, initial=0))
    largest_from = list(accumulate(reversed(gaps), max, initial=0))[::-1]

    best = 0
    for i, (start, end) in enumerate(zip(start_time, end_time)):
        around = gaps[i] + gaps[i + 1]
        best = max(best, around)
        elsewhere = max(largest_before[i], largest_from[i + 2])
        if end - start <= elsewhere:
            best = max(best, around + end - start)
    return best