import math

import pytest

from contestkit.bizerte_basic import (
    best_trade_profit,
    count_rectangles,
    max_reachable,
    min_reversals_two_roots,
    power_queries,
    rps_scores,
    sort_with_stack,
    sums_match,
    ternary_difference,
)

MOD = 10**9 + 7


@pytest.mark.parametrize("c", [0, 1, 7, 34, 1000])
def test_ternary_difference_from_zero(c):
    assert ternary_difference(0, c) == c


@pytest.mark.parametrize("a", [0, 5, 14, 387420489])
def test_ternary_difference_with_itself(a):
    assert ternary_difference(a, a) == 0


@pytest.mark.parametrize("a,c", [(14, 34), (50, 34), (5, 5), (1000, 1)])
def test_ternary_difference_round_trip(a, c):
    b = ternary_difference(a, c)
    assert ternary_difference(b, c) == a


def test_ternary_difference_rejects_negative():
    with pytest.raises(ValueError):
        ternary_difference(-1, 3)


MARKETS = [
    [(6, 5, 3), (7, 6, 5), (8, 6, 10)],
    [(10, 9, 0), (8, 6, 4), (10, 9, 3)],
    [(4, 3, 0), (8, 4, 12), (7, 2, 5)],
]


def test_best_trade_profit_statement_example():
    assert best_trade_profit(MARKETS, 10) == 16


def test_best_trade_profit_zero_capacity():
    assert best_trade_profit(MARKETS, 0) == 0


def test_best_trade_profit_grows_with_capacity():
    profits = [best_trade_profit(MARKETS, k) for k in range(15)]
    assert profits == sorted(profits)


def test_best_trade_profit_single_planet():
    assert best_trade_profit(MARKETS[:1], 10) == 0


@pytest.mark.parametrize("a,b", [(1, 2), (0, 0), (-3, 10)])
def test_sums_match(a, b):
    assert sums_match(a, b, a + b) is True
    assert sums_match(a, b, a + b + 1) is False


def test_rps_scores_statement_example():
    assert rps_scores(7, "RPS", "RSPP") == (3, 2)


@pytest.mark.parametrize("strategy", ["R", "RRRRRRRR", "RPSPR"])
def test_rps_identical_strategies_tie(strategy):
    assert rps_scores(50, strategy, strategy) == (0, 0)


@pytest.mark.parametrize("rounds,first,second", [(7, "RPS", "RSPP"), (100, "PSR", "SS")])
def test_rps_swapping_players_swaps_scores(rounds, first, second):
    a, b = rps_scores(rounds, first, second)
    assert rps_scores(rounds, second, first) == (b, a)
    assert a + b <= rounds


def test_rps_rejects_empty_strategy():
    with pytest.raises(ValueError):
        rps_scores(3, "", "R")


def test_power_queries_first_round_is_prefix_product():
    values = [2, 3, 5, 7]
    assert power_queries(values, [(1, 4)]) == [math.prod(values) % MOD]


@pytest.mark.parametrize("k", [1, 2, 10, 500])
def test_power_queries_first_position_unchanged(k):
    assert power_queries([123456, 9], [(k, 1)]) == [123456]


def test_power_queries_second_round():
    values = [3, 4]
    assert power_queries(values, [(2, 2)]) == [pow(3, 2, MOD) * 4 % MOD]


def test_power_queries_rejects_bad_position():
    with pytest.raises(ValueError):
        power_queries([1, 2], [(1, 3)])


@pytest.mark.parametrize("n,m,x,y", [(3, 3, 2, 2), (5, 4, 1, 3), (2, 7, 2, 7)])
def test_max_reachable_many_cuts(n, m, x, y):
    assert max_reachable(n, m, x, y, 4) == n * m - 1
    assert max_reachable(n, m, x, y, 9) == n * m - 1


@pytest.mark.parametrize("n,m,x,y", [(3, 3, 2, 2), (5, 4, 1, 3), (6, 2, 4, 1)])
@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_max_reachable_symmetries(n, m, x, y, k):
    value = max_reachable(n, m, x, y, k)
    assert max_reachable(m, n, y, x, k) == value
    assert max_reachable(n, m, n - x + 1, m - y + 1, k) == value


@pytest.mark.parametrize("n,m,x,y", [(3, 3, 2, 2), (5, 4, 1, 3), (8, 9, 4, 5)])
def test_max_reachable_monotone_in_cuts(n, m, x, y):
    values = [max_reachable(n, m, x, y, k) for k in range(1, 5)]
    assert values == sorted(values)


def test_max_reachable_rejects_outside_position():
    with pytest.raises(ValueError):
        max_reachable(3, 3, 4, 1, 1)


def test_min_reversals_statement_example():
    assert min_reversals_two_roots(4, [(2, 1), (3, 1), (4, 1)]) == 1


@pytest.mark.parametrize("n", [1, 2])
def test_min_reversals_tiny_trees(n):
    edges = [(2, 1)] if n == 2 else []
    assert min_reversals_two_roots(n, edges) == 0


def test_min_reversals_directed_path():
    edges = [(i, i + 1) for i in range(1, 8)]
    assert min_reversals_two_roots(8, edges) == 0


def test_min_reversals_outward_star():
    edges = [(1, i) for i in range(2, 7)]
    assert min_reversals_two_roots(6, edges) == 0


def test_min_reversals_rejects_wrong_edge_count():
    with pytest.raises(ValueError):
        min_reversals_two_roots(3, [(1, 2)])


def _replay(permutation, moves):
    stacks = {"A": list(permutation), "B": [], "C": []}
    for src, dst in moves:
        stacks[dst].append(stacks[src].pop())
    return stacks


def test_sort_with_stack_impossible():
    assert sort_with_stack([1, 3, 2]) is None


def test_sort_with_stack_rejects_non_permutation():
    with pytest.raises(ValueError):
        sort_with_stack([1, 1, 2])


@pytest.mark.parametrize("n,m", [(1, 5), (2, 2), (3, 7), (10, 4)])
def test_count_rectangles(n, m):
    assert count_rectangles(n, m) == math.comb(n, 2) * math.comb(m, 2)
    assert count_rectangles(m, n) == count_rectangles(n, m)