"""Solutions to a prefix-counting query task and a tree path-sum task."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate


def _common_prefix(first: str, second: str) -> int:
    shortest = min(len(first), len(second))
    return next(
        (k for k, (a, b) in enumerate(zip(first, second)) if a != b), shortest
    )


def prefix_queries(words: Sequence[str], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Words that equal a shared prefix of the two queried words.

    For query ``(i, j)`` (1-based) the shared prefix is capped at one less
    than the shorter word; the answer sums, over each of its non-empty
    prefixes, how many words equal that prefix.
    """
    counts = Counter(words)
    totals = [
        list(accumulate((counts[w[:size]] for size in range(1, len(w) + 1)), initial=0))
        for w in words
    ]
    n = len(words)
    answers = []
    for i, j in queries:
        if not (1 <= i <= n and 1 <= j <= n):
            raise ValueError("word index out of range")
        first, second = words[i - 1], words[j - 1]
        limit = min(len(first), len(second)) - 1
        reach = max(0, min(_common_prefix(first, second), limit))
        answers.append(totals[i - 1][reach])
    return answers


def path_count_sum(n: int, m: int, edges: Sequence[tuple[int, int]]) -> int:
    """Sum over nodes ``v`` of squared side sizes of nodes at distance ``m - 1``.

    For every node ``u`` at distance ``m - 1`` from ``v`` the size of the part
    of the tree hanging from ``u`` away from ``v`` is squared and added.
    The tree is rooted at node 1, which matters only when ``m`` is 0.
    """
    if n < 1:
        raise ValueError("the tree needs at least one node")
    if m < 0:
        raise ValueError("m cannot be negative")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        adj[u].append(v)
        adj[v].append(u)

    parent = [0] * (n + 1)
    depth = [0] * (n + 1)
    children: list[list[int]] = [[] for _ in range(n + 1)]
    order = [1]
    seen = {1}
    for node in order:
        for nb in adj[node]:
            if nb not in seen:
                seen.add(nb)
                parent[nb] = node
                depth[nb] = depth[node] + 1
                children[node].append(nb)
                order.append(nb)
    if len(order) != n:
        raise ValueError("the edges do not form a tree")

    size = [1] * (n + 1)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]

    width = max(m, 2) + 1
    dp = [[0] * width for _ in range(n + 1)]
    for node in range(1, n + 1):
        square = size[node] ** 2
        ancestor = node
        for k in range(1, min(m, depth[node] + 1) + 1):
            dp[ancestor][k] += square
            ancestor = parent[ancestor]
    for node in range(1, n + 1):
        dp[node][0] = dp[node][1] = size[node] ** 2

    for node in order:
        for child in children[node]:
            row, up = dp[child], dp[node]
            for x in range(m, 2, -1):
                row[x] += up[x - 1] - row[x - 2]
            row[2] += (n - size[child]) ** 2
            row[1] = n * n

    return sum(dp[node][m] for node in range(1, n + 1))