"""Solutions to graph, counting and range-query tasks."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from itertools import accumulate
from typing import TypeVar

MOD = 10**9 + 7

T = TypeVar("T")


def count_stars(n: int, edges: Sequence[tuple[int, int]]) -> int:
    """Connected star-shaped edge subsets of a tree, modulo 1e9+7.

    Every single edge counts once, and each node of degree ``d`` adds the
    ``2**d - 1 - d`` subsets of two or more of its edges.
    """
    if n < 1:
        raise ValueError("the tree needs at least one node")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    degree: Counter[int] = Counter()
    for u, v in edges:
        degree[u] += 1
        degree[v] += 1
    extra = sum(pow(2, d, MOD) - 1 - d for d in degree.values())
    return (n - 1 + extra) % MOD


def _sweep(values: Sequence[int]) -> list[int]:
    heights: list[int] = []
    for i, value in enumerate(values):
        if i == 0:
            heights.append(1)
            continue
        prev = heights[-1]
        step = -1 if prev <= values[i - 1] else 1
        heights.append(max(1, prev + step))
    return heights


def mountain_heights(values: Sequence[int]) -> list[int]:
    """Height seen at each position, taking the larger of the two sweeps."""
    left = _sweep(values)
    right = _sweep(values[::-1])[::-1]
    return [max(a, b) for a, b in zip(left, right)]


def count_line_arrangements(n: int, pairs: Iterable[tuple[int, int]]) -> int | None:
    """Ways to line up ``n`` people so each given pair stands side by side.

    Returns the count modulo 1e9+7, or None when no line exists.
    """
    if n < 0:
        raise ValueError("the number of people cannot be negative")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in pairs:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError("person index out of range")
        adj[a].append(b)
        adj[b].append(a)
    if any(len(neighbours) > 2 for neighbours in adj):
        return None

    state = [0] * (n + 1)
    cycle = False
    components = 0
    ways = 1
    for start in range(1, n + 1):
        if state[start]:
            continue
        components += 1
        state[start] = 1
        size = 1
        stack = [(start, 0, iter(adj[start]))]
        while stack:
            node, parent, children = stack[-1]
            for child in children:
                if child == parent:
                    continue
                if state[child] == 1:
                    cycle = True
                if state[child] == 0:
                    state[child] = 1
                    size += 1
                    stack.append((child, node, iter(adj[child])))
                    break
            else:
                state[node] = 2
                stack.pop()
        if size >= 2:
            ways = ways * 2 % MOD
    if cycle:
        return None
    return ways * (math.factorial(components) % MOD) % MOD


def count_refills(a: int, b: int, c: int) -> int:
    """Refills needed over days ``2..c`` when capacity grows by ``b`` each day.

    Each day ``a`` units are consumed; leftovers carry over to the next day.
    """
    if a < 0:
        raise ValueError("consumption cannot be negative")
    if b <= 0:
        raise ValueError("the refill size must be positive")
    step = b
    total = 0
    rest = 0
    for _ in range(2, c + 1):
        refills = (a - rest + b - 1) // b
        total += refills
        rest = refills * b + rest - a
        b += step
    return total


def palindromes_upto(x: int) -> int:
    """Number of palindromic integers in ``[1, x]``."""
    if x < 0:
        raise ValueError("x cannot be negative")
    if x == 0:
        return 0
    digits = str(x)
    size = len(digits)
    half = (size + 1) // 2
    count = 0
    for i, ch in enumerate(digits[:half]):
        digit = int(ch)
        if i == 0 and digit > 0:
            digit -= 1
        count += 10 ** (half - i - 1) * digit
    prefix = digits[: size // 2]
    middle = digits[size // 2] if size % 2 else ""
    if int(prefix + middle + prefix[::-1]) <= x:
        count += 1
    for length in range(1, size):
        count += 9 * 10 ** ((length + 1) // 2 - 1)
    return count


def count_palindromes(low: int, high: int) -> int:
    """Number of palindromic integers in ``[low, high]``."""
    if low < 1:
        raise ValueError("low must be at least 1")
    return palindromes_upto(high) - palindromes_upto(low - 1)


class _SparseTable:
    """Idempotent range queries over a static sequence."""

    def __init__(self, values: Sequence[T], op: Callable[[T, T], T]) -> None:
        self._op = op
        self._levels = [list(values)]
        width = 1
        while 2 * width <= len(values):
            prev = self._levels[-1]
            self._levels.append(
                [op(prev[i], prev[i + width]) for i in range(len(prev) - width)]
            )
            width *= 2

    def query(self, left: int, right: int) -> T:
        level = (right - left + 1).bit_length() - 1
        row = self._levels[level]
        return self._op(row[left], row[right - (1 << level) + 1])


def _smallest_divisor_above(value: int, bound: int) -> int | None:
    best: int | None = None
    for i in range(1, math.isqrt(value) + 1):
        if value % i:
            continue
        for divisor in (i, value // i):
            if divisor > bound and (best is None or divisor < best):
                best = divisor
    return best


def divisor_queries(
    a: Sequence[int], b: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int | None]:
    """Smallest ``k`` with ``a[i] % k == b[i]`` for every ``i`` in each range.

    Ranges are 1-based and inclusive; an answer is None when no ``k`` exists.
    """
    if len(a) != len(b):
        raise ValueError("both sequences must have the same length")
    n = len(a)
    below = [0, *accumulate(int(x < y) for x, y in zip(a, b))]
    gcds = _SparseTable([x - y for x, y in zip(a, b)], math.gcd)
    maxima = _SparseTable(list(b), max)
    answers: list[int | None] = []
    for left, right in queries:
        if not 1 <= left <= right <= n:
            raise ValueError("query range out of bounds")
        if below[right] - below[left - 1] > 0:
            answers.append(None)
            continue
        g = gcds.query(left - 1, right - 1)
        bound = maxima.query(left - 1, right - 1)
        answers.append(_smallest_divisor_above(g, bound) if g > 0 else None)
    return answers