"""Puzzles over closed integer intervals given as ``[start, end]`` pairs."""

from __future__ import annotations

from operator import itemgetter
from typing import Iterable, Sequence


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching intervals, returned in order of start."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals, key=itemgetter(0)):
        if merged:
            last_start, last_end = merged[-1]
            if min(last_end, end) >= max(last_start, start):
                merged[-1] = [min(last_start, start), max(last_end, end)]
                continue
        merged.append([start, end])
    return merged


def insert_interval(
    intervals: Iterable[Sequence[int]], new_interval: Sequence[int]
) -> list[list[int]]:
    """Insert ``new_interval`` into sorted, disjoint ``intervals``, merging as needed."""
    new_start, new_end = new_interval
    start, end = new_start, new_end
    before: list[list[int]] = []
    after: list[list[int]] = []
    for low, high in intervals:
        if high < new_start:
            before.append([low, high])
        elif low > new_end:
            after.append([low, high])
        else:
            start = min(start, low)
            end = max(end, high)
    return before + [[start, end]] + after


def min_arrow_shots(points: Iterable[Sequence[int]]) -> int:
    """Return the fewest vertical arrows that burst every balloon span."""
    arrows = 0
    reach = 0
    for start, end in sorted(points):
        if arrows and start <= reach:
            reach = min(reach, end)
        else:
            arrows += 1
            reach = end
    return arrows