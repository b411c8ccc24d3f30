"""Deciding whether students can be split into two groups on two distinct days."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations

DAYS = 5


def can_split_groups(schedule: Sequence[Sequence[int]]) -> bool:
    """Whether the students split into two equal groups meeting on different days.

    ``schedule[i][d]`` is 1 when student ``i`` can attend on day ``d``.  Each
    group holds half of the students.
    """
    for row in schedule:
        if len(row) != DAYS:
            raise ValueError(f"each student needs exactly {DAYS} availability flags")
    half = len(schedule) // 2
    for d1, d2 in combinations(range(DAYS), 2):
        only_first = only_second = both = 0
        for row in schedule:
            if row[d1] == 1 and row[d2] == 1:
                both += 1
            elif row[d1] == 1:
                only_first += 1
            elif row[d2] == 1:
                only_second += 1
        missing = max(0, half - only_first) + max(0, half - only_second)
        if missing <= both:
            return True
    return False