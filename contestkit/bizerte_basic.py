"""Solutions to a set of short competitive-programming tasks."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import permutations

MOD = 10**9 + 7

_BEATS = {("R", "S"), ("S", "P"), ("P", "R")}


def _ternary_digits(value: int) -> list[int]:
    digits = []
    while value > 0:
        value, digit = divmod(value, 3)
        digits.append(digit)
    return digits


def ternary_difference(a: int, c: int) -> int:
    """The ``b`` whose digit-wise ternary sum (without carry) with ``a`` is ``c``."""
    if a < 0 or c < 0:
        raise ValueError("values must be non-negative")
    da, dc = _ternary_digits(a), _ternary_digits(c)
    size = max(len(da), len(dc))
    da += [0] * (size - len(da))
    dc += [0] * (size - len(dc))
    return sum(((y - x) % 3) * 3**i for i, (x, y) in enumerate(zip(da, dc)))


def best_trade_profit(markets: Sequence[Sequence[tuple[int, int, int]]], capacity: int) -> int:
    """Most profit from buying on one planet and selling on another.

    ``markets[p][i]`` is ``(buy_price, sell_price, available)`` of item ``i``
    on planet ``p``; at most ``capacity`` items fit in the hold.
    """
    if capacity < 0:
        raise ValueError("capacity cannot be negative")
    if len({len(items) for items in markets}) > 1:
        raise ValueError("every planet must list the same items")
    best = 0
    for buy, sell in permutations(markets, 2):
        gains = sorted(
            ((offer[1] - cost[0], cost[2]) for cost, offer in zip(buy, sell)),
            reverse=True,
        )
        profit, room = 0, capacity
        for gain, available in gains:
            if gain <= 0:
                break
            take = min(available, room)
            profit += gain * take
            room -= take
        best = max(best, profit)
    return best


def sums_match(a: int, b: int, c: int) -> bool:
    """Whether ``a + b == c``."""
    return a + b == c


def rps_scores(rounds: int, first: str, second: str) -> tuple[int, int]:
    """Losses of each player over ``rounds`` rock-paper-scissors rounds.

    Each player repeats their string cyclically.  Returns
    ``(first_losses, second_losses)``.
    """
    if rounds < 0:
        raise ValueError("rounds cannot be negative")
    if not first or not second:
        raise ValueError("both strategies must be non-empty")
    period = math.lcm(len(first), len(second))
    outcomes = [
        (first[i % len(first)], second[i % len(second)]) for i in range(period)
    ]

    def tally(moves: Iterable[tuple[str, str]]) -> tuple[int, int]:
        first_wins = second_wins = 0
        for x, y in moves:
            if (x, y) in _BEATS:
                first_wins += 1
            elif (y, x) in _BEATS:
                second_wins += 1
        return first_wins, second_wins

    full, rest = divmod(rounds, period)
    wins1, wins2 = tally(outcomes)
    extra1, extra2 = tally(outcomes[:rest])
    return wins2 * full + extra2, wins1 * full + extra1


def power_queries(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Value at position ``x`` after ``k`` rounds of prefix products, mod 1e9+7.

    Each query is ``(k, x)`` with 1-based ``x``.
    """
    answers = []
    for k, x in queries:
        if k < 1:
            raise ValueError("k must be at least 1")
        if not 1 <= x <= len(values):
            raise ValueError("position out of range")
        result = 1
        for j in range(1, x + 1):
            exponent = math.comb(k + j - 2, k - 1) % (MOD - 1)
            result = result * pow(values[x - j] % MOD, exponent, MOD) % MOD
        answers.append(result)
    return answers


def max_reachable(n: int, m: int, x: int, y: int, k: int) -> int:
    """Cells other than ``(x, y)`` kept on an ``n`` x ``m`` board after ``k`` cuts."""
    if not (1 <= x <= n and 1 <= y <= m):
        raise ValueError("position outside the board")
    down, right = n - x + 1, m - y + 1
    if k >= 4:
        return n * m - 1
    if k == 3:
        return n * m - min(x, y, right, down)
    if k == 2:
        return n * m - min(x * y, down * y, x * right, down * right, n, m)
    return n * m - min(n * y, m * x, n * right, m * down)


def _side(adj: dict[int, list[tuple[int, int]]], start: int, blocked: int) -> set[int]:
    seen = {start}
    stack = [start]
    while stack:
        node = stack.pop()
        for nb, _ in adj[node]:
            if nb != blocked and nb not in seen:
                seen.add(nb)
                stack.append(nb)
    return seen


def _best_root(adj: dict[int, list[tuple[int, int]]], root: int, nodes: set[int]) -> int:
    order = [root]
    parent: dict[int, int | None] = {root: None}
    children: dict[int, list[tuple[int, int]]] = {node: [] for node in nodes}
    for node in order:
        for nb, cost in adj[node]:
            if nb in nodes and nb != parent[node]:
                parent[nb] = node
                children[node].append((nb, cost))
                order.append(nb)
    down = dict.fromkeys(nodes, 0)
    for node in reversed(order):
        down[node] += sum(down[child] + cost for child, cost in children[node])
    total = {root: down[root]}
    for node in order:
        for child, cost in children[node]:
            total[child] = total[node] + (1 if cost == 0 else -1)
    return min(total.values())


def min_reversals_two_roots(n: int, edges: Sequence[tuple[int, int]]) -> int:
    """Fewest edge reversals so that two roots together reach every node.

    ``edges`` are the ``n - 1`` directed edges ``(u, v)`` of a tree on
    nodes ``1..n``.
    """
    if n < 1:
        raise ValueError("the tree needs at least one node")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    adj: dict[int, list[tuple[int, int]]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        if u not in adj or v not in adj:
            raise ValueError("edge endpoint out of range")
        adj[u].append((v, 0))
        adj[v].append((u, 1))
    if n == 1:
        return 0
    return min(
        sum(
            _best_root(adj, side, _side(adj, side, other))
            for side, other in ((u, v), (v, u))
        )
        for u, v in edges
    )


def sort_with_stack(permutation: Sequence[int]) -> list[tuple[str, str]] | None:
    """Moves between stacks A, B and C that put ``1..n`` onto C in order.

    Stack A holds the permutation with its last element on top.  Returns
    None when it cannot be done.
    """
    n = len(permutation)
    if sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("input must be a permutation of 1..n")
    a = list(permutation)
    b: list[int] = []
    moves: list[tuple[str, str]] = []
    for wanted in range(1, n + 1):
        if b and b[-1] == wanted:
            moves.append(("B", "C"))
            b.pop()
            continue
        while a and a[-1] != wanted:
            moves.append(("A", "B"))
            b.append(a.pop())
        if not a:
            return None
        moves.append(("A", "C"))
        a.pop()
    return moves


def count_rectangles(n: int, m: int) -> int:
    """Axis-aligned rectangles with corners on an ``n`` x ``m`` grid of points."""
    return (n - 1) * n // 2 * (m - 1) * m // 2