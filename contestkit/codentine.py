"""Solutions to a set of simulation, search, hashing and counting tasks."""

from __future__ import annotations

import enum
import math
from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence
from functools import cache
from itertools import combinations

MOD = 10**9 + 7
MOD_TILINGS = 998244353

_TARGET_SUM = 14
_NO_ROUTE = 10**15
_ROUTE_LIMIT = 10**14
_HASH_BASES = (9973, 10**9 + 3)
_FULL_SHARE = 100
AMBIGUOUS = "MANY"


class Outcome(enum.Enum):
    """Result of the game for the first player."""

    WIN = "WIN"
    LOSS = "LOSS"


def is_fourteen(values: Iterable[int]) -> bool:
    """Whether the values add up to fourteen."""
    return sum(values) == _TARGET_SUM


def travel_time(length: int, lights: Iterable[tuple[str, int, int]]) -> int:
    """Time to walk ``length`` cells past blinking traffic lights.

    Each light is ``(color, position, period)``: it starts red when
    ``color`` is ``'R'`` and green otherwise, and switches every ``period``
    time units.  A walker reaching a red light waits for it to turn green.
    A light with period zero is ignored; a later light at the same
    position replaces an earlier one.
    """
    if length < 0:
        raise ValueError("length cannot be negative")
    period: dict[int, int] = {}
    green: dict[int, bool] = {}
    for color, position, cycle in lights:
        if not 1 <= position <= length:
            raise ValueError("light position out of range")
        if cycle < 0:
            raise ValueError("period cannot be negative")
        period[position] = cycle
        green[position] = color != "R"
    time = 0
    for position in range(1, length + 1):
        time += 1
        cycle = period.get(position, 0)
        if not cycle:
            continue
        is_green = green[position] ^ bool((time // cycle) & 1)
        if is_green:
            continue
        time += cycle - time % cycle
    return time


def process_commands(commands: Iterable[str]) -> list[int]:
    """Run ``add``/``rm``/``ask`` commands on a set of names.

    ``ask`` reports the size of the set.  Any other line is a command word
    and an argument separated by the first space: ``rm`` removes the
    argument, every other word adds it.  Lines without a space do nothing.
    """
    names: set[str] = set()
    sizes: list[int] = []
    for line in commands:
        if line == "ask":
            sizes.append(len(names))
            continue
        word, sep, argument = line.partition(" ")
        if not sep:
            continue
        if word == "rm":
            names.discard(argument)
        else:
            names.add(argument)
    return sizes


def shortest_collection(
    grid: Sequence[str],
    colors: int,
    recipes: Iterable[tuple[int, int, int, int]],
) -> int | None:
    """Shortest time to gather every color and reach the bottom-right cell.

    ``grid`` holds ``'0'`` for empty cells and digits ``1..colors`` for
    cells where a color can be picked up.  A recipe ``(c1, c2, c3, t)``
    makes color ``c3`` from ``c1`` and ``c2`` in ``t`` time.  Moving costs
    the Manhattan distance.  The walk starts in the top-left cell.
    Returns None when the colors cannot all be gathered.
    """
    rows = len(grid)
    if rows == 0:
        raise ValueError("the grid needs at least one row")
    cols = len(grid[0])
    if any(len(line) != cols for line in grid):
        raise ValueError("all grid rows must have the same length")
    if colors < 0:
        raise ValueError("the number of colors cannot be negative")

    positions: list[list[tuple[int, int]]] = [[] for _ in range(colors)]
    for r, line in enumerate(grid, 1):
        for c, ch in enumerate(line, 1):
            if ch == "0":
                continue
            if not ch.isdigit():
                raise ValueError("grid cells must be digits")
            index = int(ch) - 1
            if index < colors:
                positions[index].append((r, c))

    makes: list[list[tuple[int, int, int]]] = [[] for _ in range(colors)]
    for c1, c2, c3, cost in recipes:
        if not all(1 <= col <= colors for col in (c1, c2, c3)):
            raise ValueError("recipe color out of range")
        makes[c3 - 1].append((c1 - 1, c2 - 1, cost))

    full = (1 << colors) - 1

    @cache
    def work(r: int, c: int, mask: int) -> int:
        if mask == full:
            return abs(r - rows) + abs(c - cols)
        best = _NO_ROUTE
        for col in range(colors):
            bit = 1 << col
            if mask & bit:
                continue
            for c1, c2, cost in makes[col]:
                if mask >> c1 & 1 and mask >> c2 & 1:
                    best = min(best, cost + work(r, c, mask | bit))
            for nr, nc in positions[col]:
                step = abs(r - nr) + abs(c - nc)
                best = min(best, step + work(nr, nc, mask | bit))
        return best

    answer = work(1, 1, 0)
    return answer if answer < _ROUTE_LIMIT else None


def resolve_names(
    entries: Iterable[tuple[str, str]], queries: Iterable[str]
) -> list[str | None]:
    """Owner of each queried multiset of letters.

    Every entry ``(name, letters)`` claims each non-empty sub-multiset of
    its letters.  A query answers the claiming name, ``"MANY"`` when more
    than one name claims it, or None when nobody does.
    """
    owner: dict[str, str] = {}
    for name, letters in entries:
        ordered = sorted(letters)
        claimed = {
            "".join(part)
            for size in range(1, len(ordered) + 1)
            for part in combinations(ordered, size)
        }
        for key in claimed:
            if key in owner and owner[key] != name:
                owner[key] = AMBIGUOUS
            else:
                owner[key] = name
    return [owner.get("".join(sorted(query))) for query in queries]


def _poly_hash(text: str) -> tuple[int, ...]:
    digests = []
    for base in _HASH_BASES:
        value, power = 0, 1
        for ch in text:
            value = (value + power * ord(ch)) % MOD
            power = power * base % MOD
        digests.append(value)
    return tuple(digests)


def find_equal_concatenations(
    words: Sequence[str],
) -> tuple[int, int, int, int] | None:
    """Four distinct 1-based indices ``(i, j, k, l)`` with equal concatenations.

    ``words[i] + words[j] == words[k] + words[l]``.  Candidate groups are
    examined in order of their polynomial hash.  Returns None when no such
    indices exist.
    """
    groups: defaultdict[str, list[tuple[int, int]]] = defaultdict(list)
    for i, first in enumerate(words, 1):
        for j, second in enumerate(words, 1):
            if i != j:
                groups[first + second].append((i, j))
    for key in sorted(groups, key=_poly_hash):
        pairs = groups[key]
        occurrences: Counter[int] = Counter()
        for a, b in pairs:
            occurrences[a] += 1
            occurrences[b] += 1
        present = set(pairs)
        chosen = next(
            (
                (x, y)
                for x, y in pairs
                if len(pairs) - occurrences[x] - occurrences[y]
                + ((x, y) in present) + ((y, x) in present) > 0
            ),
            None,
        )
        if chosen is None:
            continue
        x, y = chosen
        for a, b in pairs:
            if {a, b}.isdisjoint((x, y)):
                return x, y, a, b
    return None


def best_score(capacity: int, values: Sequence[float]) -> float:
    """Weighted share of the values covered by ``capacity`` units.

    Values are taken from the largest down, each receiving up to 100 units;
    the result is the covered weight divided by the total of the values.
    """
    total = sum(values)
    if total == 0:
        raise ValueError("the values must not sum to zero")
    covered = 0.0
    for value in sorted(values, reverse=True):
        share = _FULL_SHARE if capacity >= _FULL_SHARE else capacity
        covered += share * value
        capacity -= share
    return covered / total


def _mat_mul(a: list[list[int]], b: list[list[int]]) -> list[list[int]]:
    columns = list(zip(*b))
    return [
        [sum(x * y for x, y in zip(row, col)) % MOD_TILINGS for col in columns]
        for row in a
    ]


def count_tilings(length: int, k: int) -> int:
    """Number of tilings of a strip of ``length`` cells, modulo 998244353."""
    if length < 0:
        raise ValueError("length cannot be negative")
    if k < 0:
        raise ValueError("k cannot be negative")
    size = k + 2
    transition = [[0] * size for _ in range(size)]
    transition[0][0] = 1
    transition[k] = [1] * size
    transition[k + 1] = [1] * size
    transition[k][k + 1] = 0
    for i in range(1, k):
        transition[i][i + 1] = 1
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    exponent = length
    while exponent:
        if exponent & 1:
            result = _mat_mul(result, transition)
        transition = _mat_mul(transition, transition)
        exponent >>= 1
    return result[k + 1][0]


def gcd_component_counts(
    values: Sequence[int], edges: Sequence[tuple[int, int]], k: int
) -> list[int]:
    """For each ``i`` in ``1..k``, the component count the task defines.

    Nodes ``1..n`` carry ``values``; the tree is rooted at node 1.
    """
    n = len(values)
    if n < 1:
        raise ValueError("the tree needs at least one node")
    if len(edges) != n - 1:
        raise ValueError("a tree on n nodes has n - 1 edges")
    if any(v < 1 for v in values):
        raise ValueError("values must be positive")
    degree = [0] * (n + 1)
    shared: Counter[int] = Counter()
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge endpoint out of range")
        degree[u] += 1
        degree[v] += 1
        shared[math.gcd(values[u - 1], values[v - 1])] += 1
    parents: Counter[int] = Counter()
    for node in range(1, n + 1):
        children = degree[node] - (node != 1)
        parents[values[node - 1]] += children
    top = max(values)
    answers = []
    for i in range(1, k + 1):
        count = 1 + sum(parents[j] - shared[j] for j in range(i, top + 1, i))
        if values[0] % i == 0:
            count -= 1
        answers.append(count)
    return answers


def game_outcome(values: Iterable[int]) -> Outcome:
    """Whether the first player wins the game on these piles."""
    counts: dict[int, int] = {}
    for value in values:
        counts[value] = min(counts.get(value, 0) + 1, 2)
    counts.setdefault(0, 0)
    moves = 0
    prev = 0
    for key in sorted(counts):
        occ = counts[key]
        if counts[prev] == 2 and occ == 1:
            break
        moves += occ
        prev = key
    return Outcome.WIN if moves & 1 else Outcome.LOSS