"""Solutions to grid, tournament, parity, counting and permutation tasks."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence

MOD_CATALAN = 998244353
_UNREACHABLE = 10**12


def chessboard_repaints(grid: Sequence[Sequence[int]]) -> int:
    """Fewest cells to change so the square 0/1 grid becomes a chessboard."""
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise ValueError("the grid must be square")
    first = second = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            expected = (i + j + 1) % 2
            first += cell != expected
            second += cell != expected ^ 1
    return min(first, second)


def tournament_scores(values: Sequence[int]) -> list[int]:
    """Score of each player if they won every round of a knockout bracket.

    In each round the player gains the strength of the best opponent in the
    sibling half of the bracket.  The number of players must be a power of two.
    """
    size = len(values)
    if size == 0 or size & (size - 1):
        raise ValueError("the number of players must be a power of two")
    levels = [list(values)]
    while len(levels[-1]) > 1:
        prev = levels[-1]
        levels.append([max(a, b) for a, b in zip(prev[::2], prev[1::2])])
    return [
        sum(level[(i >> depth) ^ 1] for depth, level in enumerate(levels[:-1]))
        for i in range(size)
    ]


def pair_points(points: Sequence[tuple[int, int]]) -> list[tuple[int, int]]:
    """Pair up points (1-based indices) consecutively in sorted coordinate order."""
    if len(points) % 2:
        raise ValueError("an even number of points is required")
    order = sorted((x, y, index) for index, (x, y) in enumerate(points, 1))
    ids = [index for _, _, index in order]
    return list(zip(ids[::2], ids[1::2]))


def _trailing_twos(value: int) -> int:
    value = abs(value)
    return (value & -value).bit_length() - 1


def min_parity_operations(values: Sequence[int]) -> int:
    """Fewest operations to balance the counts of odd and even values.

    An odd value becomes even in one step; an even value becomes odd by
    halving it as many times as it holds the factor two.
    """
    odd = [v for v in values if v % 2]
    even = [v for v in values if v % 2 == 0]
    needed = abs(len(odd) - len(even)) // 2
    if len(odd) < len(even):
        return needed
    if any(v == 0 for v in even):
        raise ValueError("zero can never be made odd")
    costs = sorted(_trailing_twos(v) for v in even)
    if needed > len(costs):
        raise ValueError("not enough even values to balance the counts")
    return sum(costs[:needed])


def count_balanced(n: int, x: int) -> int:
    """Balanced bracket sequences of length ``n``, modulo 998244353.

    ``x`` is part of the task's input and does not affect the count.
    """
    if n < 0:
        raise ValueError("length cannot be negative")
    if n % 2:
        return 0
    half = n // 2
    central = math.comb(2 * half, half) % MOD_CATALAN
    return central * pow(half + 1, -1, MOD_CATALAN) % MOD_CATALAN


def _factor_list(k: int) -> list[int]:
    factors = []
    i = 2
    while i * i <= k:
        if k % i == 0:
            factors.append(i)
            k //= i
        i += 1
    if k > 1:
        factors.append(k)
    return factors


def min_increments(values: Sequence[int], k: int) -> int:
    """Fewest unit increments so that the product of the values is divisible by ``k``.

    Each factor of ``k`` must be covered by some value made a multiple of it.
    """
    if k < 1:
        raise ValueError("k must be positive")
    if not values:
        raise ValueError("at least one value is required")
    if any(v < 0 for v in values):
        raise ValueError("values cannot be negative")
    factors = _factor_list(k)
    full = (1 << len(factors)) - 1
    products = [
        math.prod(f for bit, f in enumerate(factors) if mask >> bit & 1)
        for mask in range(full + 1)
    ]
    best = [_UNREACHABLE] * (full + 1)
    best[full] = 0
    for value in reversed(values):
        costs = [(-value) % p for p in products]
        best = [
            min(cost + best[mask | chosen] for chosen, cost in enumerate(costs))
            for mask in range(full + 1)
        ]
    return best[0]


def count_and_pairs(values: Sequence[int], mask: int) -> int:
    """Ordered pairs ``(i, j)`` with ``values[i] & mask == values[j] & mask``."""
    groups = Counter(v & mask for v in values)
    return sum(count * count for count in groups.values())


def pick_positions(permutation: Sequence[int]) -> list[int]:
    """Positions picked by repeatedly taking the smallest remaining value.

    Picking a position removes it together with its nearest remaining
    neighbour on each side.  Positions are 1-based.
    """
    n = len(permutation)
    if sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("input must be a permutation of 1..n")
    position = [0] * (n + 1)
    for index, value in enumerate(permutation, 1):
        position[value] = index
    left = list(range(-1, n + 1))
    right = list(range(1, n + 3))
    removed = [False] * (n + 2)
    picked = []
    for value in range(1, n + 1):
        p = position[value]
        if removed[p]:
            continue
        picked.append(p)
        lo, hi = left[p], right[p]
        removed[p] = True
        if lo != 0:
            removed[lo] = True
            lo = left[lo]
        if hi != n + 1:
            removed[hi] = True
            hi = right[hi]
        right[lo] = hi
        left[hi] = lo
    return picked