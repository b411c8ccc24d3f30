from collections import Counter
from itertools import combinations, product
from math import comb

import pytest

from contestkit.code_blindres import (
    best_paths,
    count_distinct,
    count_even_substrings,
    count_good_pairs,
    count_winning_cells,
    count_xor_zero_subsets,
    figure_count,
    max_groups,
    min_workers,
)


def test_min_workers_empty_is_none():
    assert min_workers([], 10) is None


def test_min_workers_impossible_when_job_too_long():
    assert min_workers([3, 4], 3) is None


def test_min_workers_sum_deadline_needs_one():
    jobs = [2, 5, 1, 3]
    assert min_workers(jobs, sum(jobs)) == 1


def test_min_workers_max_deadline_is_feasible():
    jobs = [2, 5, 1, 3]
    result = min_workers(jobs, max(jobs))
    assert result is not None and 1 <= result <= len(jobs)


def test_min_workers_monotone_in_deadline():
    jobs = [4, 2, 7, 1, 3, 5]
    results = [min_workers(jobs, d) for d in range(max(jobs), sum(jobs) + 1)]
    assert all(r is not None for r in results)
    assert results == sorted(results, reverse=True)


def _brute_xor(values):
    counts = Counter(values)
    keys = list(counts)
    total = 0
    for size in range(len(keys) + 1):
        for chosen in combinations(keys, size):
            x = 0
            for key in chosen:
                x ^= counts[key]
            total += x == 0
    return total


@pytest.mark.parametrize("values", [[5, 6, 7], [1, 1, 2, 3, 3, 3], [4, 4, 4, 9, 9, 2]])
def test_xor_zero_subsets_matches_enumeration(values):
    assert count_xor_zero_subsets(values) == _brute_xor(values)


def test_xor_zero_subsets_distinct_values():
    values = [10, 20, 30, 40]
    assert count_xor_zero_subsets(values) == 2 ** (len(values) - 1)


def test_winning_cells_small_grid():
    assert count_winning_cells([[0, 1], [0, 0]]) == 1


def test_winning_cells_uniform_grid_has_none():
    assert count_winning_cells([[3, 3], [3, 3]]) == 0


def test_winning_cells_transpose_partition():
    grid = [[1, 0, 2], [0, 4, 1], [3, 1, 0]]
    transposed = [list(col) for col in zip(*grid)]
    rows = [sum(r) for r in grid]
    cols = [sum(c) for c in zip(*grid)]
    ties = sum(1 for r, c in product(rows, cols) if r == c)
    assert count_winning_cells(grid) + count_winning_cells(transposed) + ties == 9


def test_winning_cells_ragged_rows_rejected():
    with pytest.raises(ValueError):
        count_winning_cells([[1, 2], [3]])


def test_good_pairs_without_zeros_counts_all():
    values = [2, 1, 5, 1]
    assert count_good_pairs(values, [(1, 4), (2, 3)]) == [comb(4, 2), comb(2, 2)]


def test_good_pairs_all_zeros():
    assert count_good_pairs([0, 0, 0], [(1, 3)]) == [0]


def test_good_pairs_bad_range():
    with pytest.raises(ValueError):
        count_good_pairs([1, 2], [(2, 3)])


def test_figure_count_pinned():
    assert figure_count(3) == 15
    assert figure_count(0) == 0


def test_best_paths_single_node():
    assert best_paths([7], [], [1]) == [7]


def test_best_paths_positive_chain_uses_whole_path():
    weights = [1, 2, 3]
    assert best_paths(weights, [(1, 2), (2, 3)], [1, 2, 3]) == [sum(weights)] * 3


def test_best_paths_star_center():
    weights = [1, 4, 5, 2]
    result = best_paths(weights, [(1, 2), (1, 3), (1, 4)], [1])
    assert result == [weights[0] + weights[1] + weights[2]]


def test_best_paths_wrong_edge_count():
    with pytest.raises(ValueError):
        best_paths([1, 2], [], [1])


def _brute_even(text):
    return sum(
        all(v % 2 == 0 for v in Counter(text[i:j]).values())
        for i in range(len(text))
        for j in range(i + 1, len(text) + 1)
    )


@pytest.mark.parametrize("text", ["abab", "aabbccab", "zzz", "abcabc"])
def test_even_substrings_matches_enumeration(text):
    assert count_even_substrings(text) == _brute_even(text)


def test_even_substrings_distinct_letters():
    assert count_even_substrings("abcdef") == 0


def test_even_substrings_rejects_other_characters():
    with pytest.raises(ValueError):
        count_even_substrings("aB")


def test_max_groups_simple_chain():
    assert max_groups([1, 2], 1, 1, 2) == 1


def test_max_groups_no_chain():
    assert max_groups([3, 5, 7], 1, 1, 2) == 0


def test_max_groups_invalid_k():
    with pytest.raises(ValueError):
        max_groups([1, 1], 1, 1, 1)


def test_max_groups_more_copies_never_fewer_groups():
    base = [1, 2, 2, 4]
    assert max_groups(base + [1, 2], 1, 1, 2) >= max_groups(base, 1, 1, 2)


def test_count_distinct():
    assert count_distinct([4, 4, 5, 6, 6]) == 3
    assert count_distinct([]) == 0