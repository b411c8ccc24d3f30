"""Solutions to a set of short competitive-programming tasks."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate

MOD_COLORINGS = 998244353
MOD_SEQUENCES = 10**9 + 7


def segment_sum(distances: Sequence[int], start: int, end: int) -> int:
    """Total distance from station ``start`` to station ``end`` (1-based).

    ``distances[i]`` is the gap between station ``i + 1`` and ``i + 2``.
    A start past the end gives zero.
    """
    stations = len(distances) + 1
    if not (1 <= start <= stations and 1 <= end <= stations):
        raise ValueError("station index out of range")
    return sum(distances[start - 1:end - 1])


def find_odd_cell(grid: Sequence[str]) -> tuple[int, int]:
    """Return the 1-based (row, column) of the row and column holding one mark.

    A mark is any character other than ``'.'``.  When several rows (or
    columns) hold a single mark the largest index wins.
    """
    rows: Counter[int] = Counter()
    cols: Counter[int] = Counter()
    for r, line in enumerate(grid, 1):
        for c, ch in enumerate(line, 1):
            if ch != ".":
                rows[r] += 1
                cols[c] += 1
    row = max((r for r, n in rows.items() if n == 1), default=None)
    col = max((c for c, n in cols.items() if n == 1), default=None)
    if row is None or col is None:
        raise ValueError("no row or column holds exactly one mark")
    return row, col


def deque_queries(values: Sequence[int], queries: Iterable[int]) -> list[tuple[int, int]]:
    """Pair pulled out on each queried operation of the deque game.

    Each operation takes the two front elements, puts the larger back at the
    front and the smaller at the back.  Queries are 1-based operation numbers.
    """
    if len(values) < 2:
        raise ValueError("at least two values are required")
    pairs: list[tuple[int, int]] = []
    losers: list[int] = []
    best = values[0]
    for value in values[1:]:
        pairs.append((best, value))
        losers.append(min(best, value))
        best = max(best, value)
    period = len(losers)
    answers = []
    for query in queries:
        if query < 1:
            raise ValueError("operation numbers start at 1")
        index = query - 1
        if index < len(pairs):
            answers.append(pairs[index])
        else:
            answers.append((best, losers[(index - period) % period]))
    return answers


def can_trace(source: str, target: str) -> bool:
    """Whether ``target`` is written by walking right then left over ``source``."""
    n, m = len(source), len(target)
    for i in range(n):
        for k, j in enumerate(range(i, n)):
            if k >= m or source[j] != target[k]:
                break
            r = k + 1
            if r >= m:
                return True
            for p in range(j - 1, -1, -1):
                if source[p] != target[r]:
                    break
                if r >= m - 1:
                    return True
                r += 1
    return False


def zigzag_arrangement(values: Sequence[int]) -> list[int] | None:
    """Arrange values in a circle where each is a strict local extreme.

    Returns the arrangement, or None when the greedy layout fails.
    """
    n = len(values)
    ordered = sorted(values, reverse=True)
    half = (n + 1) // 2
    circle: list[int] = [0] * n
    circle[0::2] = ordered[:half]
    circle[1::2] = ordered[half:]
    for i, value in enumerate(circle):
        left, right = circle[i - 1], circle[(i + 1) % n]
        if not (value < left and value < right or value > left and value > right):
            return None
    return circle


def make_non_decreasing(values: Sequence[int]) -> list[tuple[int, int, int]] | None:
    """Operations ``(x, y, z)`` setting ``a[x] = a[y] - a[z]`` that sort the list.

    Indices are 1-based.  Returns an empty list if already sorted and None
    if sorting is impossible.
    """
    n = len(values)
    if n < 2:
        raise ValueError("at least two values are required")
    if values[-1] >= 0 and values[-2] <= values[-1]:
        return [(i, i + 1, n) for i in range(n - 2, 0, -1)]
    if all(a <= b for a, b in zip(values, values[1:])):
        return []
    return None


def count_colorings(n: int, k: int) -> int:
    """Colorings of a 2 x n board in two colors with exactly k components."""
    if n < 1:
        raise ValueError("the board needs at least one column")
    size = 2 * n + 3
    dp = [[0] * size for _ in range(4)]
    dp[0][1] = dp[3][1] = 1
    dp[1][2] = dp[2][2] = 1
    for _ in range(2, n + 1):
        nxt = [[0] * size for _ in range(4)]
        for j in range(4):
            p1, p2 = j & 1, (j >> 1) & 1
            for r in range(4):
                p3, p4 = r & 1, (r >> 1) & 1
                same = p1 + p2 + p3 + p4
                if same in (0, 4):
                    shift = 0
                elif same in (1, 3):
                    shift = 0 if p1 == p2 else 1
                elif p1 == p3 or p2 == p4:
                    shift = 0
                elif p1 == p2:
                    shift = 1
                else:
                    shift = 2
                row, src = nxt[j], dp[r]
                for p in range(2 * n + 1):
                    if src[p]:
                        row[p + shift] = (row[p + shift] + src[p]) % MOD_COLORINGS
        dp = nxt
    if not 0 <= k < size:
        return 0
    return sum(state[k] for state in dp) % MOD_COLORINGS


def max_fruit_total(a: int, b: int, c: int) -> int:
    """Most fruit usable in the ratio 1:2:4 given a, b and c pieces."""
    return 7 * max(0, min(a, b // 2, c // 4))


def count_alternating_sequences(n: int, k: int) -> int:
    """Count of the alternating up/down sequences of the task, modulo 1e9+7."""
    parity = k % 2
    prev = [0] * (n + 1)
    prev[0] = 1
    total = 1
    for j in range(k - 1, 0, -1):
        if j % 2 != parity:
            body = list(accumulate(prev[:n], lambda x, y: (x + y) % MOD_SEQUENCES))
        else:
            tail = accumulate(reversed(prev[2:]), lambda x, y: (x + y) % MOD_SEQUENCES, initial=0)
            body = list(tail)[::-1]
        cur = [0, *body]
        total = (total + sum(body)) % MOD_SEQUENCES
        prev = cur
    return total


def min_rounds(n: int, m: int, k: int, limit: int) -> int | None:
    """Fewest coins each of ``m`` friends gives so at least ``limit`` are new.

    ``n`` coins exist in total and ``k`` are already owned.  Returns None
    when no amount works.
    """
    if m <= 0:
        raise ValueError("the number of friends must be positive")
    if n < 0:
        raise ValueError("the number of coins cannot be negative")
    need = limit + k
    rounds = max(0, -(-need // m))
    return rounds if rounds <= n // m else None


def _flip(color: str) -> str:
    return "B" if color == "R" else "R"


def fill_colors(pattern: str) -> str:
    """Replace each run of ``'?'`` with alternating R/B to limit equal neighbours."""
    padded = f"#{pattern}#"
    result = list(padded)
    for run in re.finditer(r"\?+", padded):
        i, j = run.start(), run.end()
        first = "".join("R" if idx % 2 == 0 else "B" for idx in range(j - i))
        second = "".join(_flip(ch) for ch in first)
        before, after = padded[i - 1], padded[j]
        clash_first = (first[0] == before) + (first[-1] == after)
        clash_second = (second[0] == before) + (second[-1] == after)
        chosen = second if clash_second < clash_first else first
        result[i:j] = chosen
    return "".join(result[1:-1])