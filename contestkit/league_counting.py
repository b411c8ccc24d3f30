"""Solutions to a pairing task and a grid-coverage task."""

from __future__ import annotations

import math
from collections import defaultdict
from collections.abc import Sequence


def _divisors_above_one(value: int) -> list[int]:
    found: set[int] = set()
    for i in range(1, math.isqrt(value) + 1):
        if value % i == 0:
            found.update((i, value // i))
    found.discard(1)
    return sorted(found)


def remaining_after_pairing(values: Sequence[int]) -> list[int]:
    """Values left after pairing elements that share a divisor greedily.

    Divisors are taken from the largest down; for each, the still unpaired
    elements it divides are paired in order of position.
    """
    by_divisor: defaultdict[int, list[int]] = defaultdict(list)
    for index, value in enumerate(values):
        if value < 0:
            raise ValueError("values cannot be negative")
        if value < 2:
            continue
        for divisor in _divisors_above_one(value):
            by_divisor[divisor].append(index)
    paired: set[int] = set()
    for divisor in sorted(by_divisor, reverse=True):
        free = [i for i in by_divisor[divisor] if i not in paired]
        paired.update(free[: len(free) // 2 * 2])
    return [value for index, value in enumerate(values) if index not in paired]


def surviving_cells(
    height: int,
    width: int,
    powers: Sequence[int],
    positions: Sequence[tuple[int, int]],
) -> int:
    """Cells whose Manhattan distance to every station is a multiple of its power.

    Cells and positions are 1-based ``(row, column)``.
    """
    if len(powers) != len(positions):
        raise ValueError("each station needs a power and a position")
    if any(p == 0 for p in powers):
        raise ValueError("powers must be non-zero")
    stations = list(zip(powers, positions))
    return sum(
        1
        for i in range(1, height + 1)
        for j in range(1, width + 1)
        if all((abs(r - i) + abs(c - j)) % p == 0 for p, (r, c) in stations)
    )