"""Solutions to scheduling, counting, tree and string tasks."""

from __future__ import annotations

import heapq
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from itertools import accumulate
from string import ascii_lowercase

MOD = 10**9 + 7
VALUE_LIMIT = 10**6


def _fits(durations: Sequence[int], workers: int, deadline: int) -> bool:
    n = len(durations)
    heap = list(durations[:workers])
    heapq.heapify(heap)
    nxt = workers
    while heap:
        busy = heapq.heappop(heap)
        finish = busy + (durations[nxt] if nxt < n else 0)
        if finish > deadline:
            return False
        if nxt < n:
            heapq.heappush(heap, finish)
        nxt += 1
    return True


def min_workers(durations: Sequence[int], deadline: int) -> int | None:
    """Fewest workers taking jobs in order that finish everything by ``deadline``.

    Each free worker takes the next job.  Returns None when no number of
    workers up to the number of jobs is enough.
    """
    low, high = 1, len(durations)
    answer: int | None = None
    while low <= high:
        mid = low + (high - low) // 2
        if _fits(durations, mid, deadline):
            answer = mid
            high = mid - 1
        else:
            low = mid + 1
    return answer


def count_xor_zero_subsets(values: Iterable[int]) -> int:
    """Sets of distinct values whose occurrence counts XOR to zero, mod 1e9+7."""
    counts = Counter(values)
    groups = Counter(counts.values())
    ways: dict[int, int] = {0: 1}
    for count in sorted(groups):
        weight = pow(2, groups[count] - 1, MOD)
        nxt: defaultdict[int, int] = defaultdict(int)
        for xor, total in ways.items():
            share = total * weight % MOD
            nxt[xor] = (nxt[xor] + share) % MOD
            nxt[xor ^ count] = (nxt[xor ^ count] + share) % MOD
        ways = dict(nxt)
    return ways.get(0, 0) % MOD


def count_winning_cells(grid: Sequence[Sequence[int]]) -> int:
    """Cells whose column sum is strictly greater than their row sum."""
    if len({len(row) for row in grid}) > 1:
        raise ValueError("all rows must have the same length")
    row_sums = [sum(row) for row in grid]
    col_sums = [sum(col) for col in zip(*grid)]
    return sum(1 for r in row_sums for c in col_sums if c > r)


def count_good_pairs(values: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Pairs ``i < j`` in each range other than those starting with a zero
    followed by a zero or a one.

    Ranges are 1-based and inclusive.
    """
    n = len(values)
    zeros = [0, *accumulate(int(v == 0) for v in values)]
    ones = [0, *accumulate(int(v == 1) for v in values)]
    answers = []
    for left, right in queries:
        if not 1 <= left <= right <= n:
            raise ValueError("query range out of bounds")
        length = right - left + 1
        z = zeros[right] - zeros[left - 1]
        o = ones[right] - ones[left - 1]
        answers.append(length * (length - 1) // 2 - z * (z - 1) // 2 - z * o)
    return answers


def figure_count(n: int) -> int:
    """Number of pieces in the figure of size ``n``."""
    return 2 * n * n - n


def _best_of_others(vals: Sequence[int]) -> list[int]:
    prefix = list(accumulate(vals, max, initial=0))
    suffix = list(accumulate(reversed(vals), max, initial=0))[::-1]
    return [max(p, s) for p, s in zip(prefix, suffix[1:])]


def best_paths(
    weights: Sequence[int], edges: Sequence[tuple[int, int]], queries: Iterable[int]
) -> list[int]:
    """Heaviest simple path through each queried node of a weighted tree.

    Nodes are ``1..n`` with ``weights[i - 1]`` the weight of node ``i``.
    """
    n = len(weights)
    if n < 1:
        raise ValueError("the tree needs at least one node")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        adj[u].append(v)
        adj[v].append(u)
    w = [0, *weights]

    parent = [0] * (n + 1)
    order = [1]
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for node in order:
        for nb in adj[node]:
            if nb != parent[node]:
                parent[nb] = node
                children[node].append(nb)
                order.append(nb)

    down = [0] * (n + 1)
    through = [0] * (n + 1)
    for node in reversed(order):
        vals = [down[c] for c in children[node]]
        down[node] = max([w[node], *(v + w[node] for v in vals)])
        through[node] = max(
            [w[node], *(best + v + w[node] for best, v in zip(_best_of_others(vals), vals))]
        )

    up = [0] * (n + 1)
    for node in order:
        vals = [down[c] for c in children[node]]
        for child, best in zip(children[node], _best_of_others(vals)):
            up[child] = max(w[child], up[node] + w[child], best + w[node] + w[child])

    answers = []
    for u in queries:
        if not 1 <= u <= n:
            raise ValueError("node out of range")
        answers.append(max(through[u], up[u] + down[u] - w[u]))
    return answers


def count_even_substrings(text: str) -> int:
    """Substrings in which every letter occurs an even number of times."""
    seen: Counter[int] = Counter({0: 1})
    mask = 0
    total = 0
    for ch in text:
        if ch not in ascii_lowercase:
            raise ValueError("only lowercase letters are supported")
        mask ^= 1 << (ord(ch) - ord("a"))
        total += seen[mask]
        seen[mask] += 1
    return total


def _chain_groups(chain: Sequence[int], occ: Counter[int], a: int, b: int) -> int:
    prev = [0] * (occ[chain[0]] + 1)
    best = 0
    for pre, x in zip(chain, chain[1:]):
        cur = [0] * (occ[x] + 1)
        cur[0] = prev[occ[pre]]
        for j in range(1, occ[x] + 1):
            need = j // b
            rem = occ[pre] - need * a
            cur[j] = cur[j - 1]
            if rem >= 0:
                cur[j] = max(cur[j], need + prev[rem])
            best = max(best, cur[j])
        prev = cur
    return best


def max_groups(values: Iterable[int], a: int, b: int, k: int) -> int:
    """Most groups of ``a`` copies of ``v`` with ``b`` copies of ``v * k``.

    Values are taken along chains ``v, v*k, v*k**2, ...``; zeros are ignored.
    """
    if k < 2:
        raise ValueError("k must be at least 2")
    if b < 1:
        raise ValueError("b must be positive")
    if a < 0:
        raise ValueError("a cannot be negative")
    occ = Counter(values)
    if any(not 0 <= v <= VALUE_LIMIT for v in occ):
        raise ValueError(f"values must lie in [0, {VALUE_LIMIT}]")
    visited: set[int] = set()
    total = 0
    for start in sorted(v for v in occ if v >= 1):
        if start in visited:
            continue
        chain = []
        j = start
        while j <= VALUE_LIMIT and occ.get(j, 0):
            chain.append(j)
            visited.add(j)
            j *= k
        total += _chain_groups(chain, occ, a, b)
    return total


def count_distinct(values: Iterable[int]) -> int:
    """Number of distinct values."""
    return len(set(values))