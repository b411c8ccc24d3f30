# contestkit

Solutions to a collection of programming-contest problems. Each one is an
ordinary Python function: you pass Python values in and get Python values
back.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `contestkit.bee_battle`: `segment_sum`, `find_odd_cell`, `deque_queries`,
  `can_trace`, `zigzag_arrangement`, `make_non_decreasing`, `count_colorings`,
  `max_fruit_total`, `count_alternating_sequences`, `min_rounds`, `fill_colors`.
- `contestkit.bee_groups`: `can_split_groups`, which checks whether students
  can be split into two equal groups meeting on two different days.
- `contestkit.bizerte_basic`: `ternary_difference`, `best_trade_profit`,
  `sums_match`, `rps_scores`, `power_queries`, `max_reachable`,
  `min_reversals_two_roots`, `sort_with_stack`, `count_rectangles`.
- `contestkit.bizerte_advanced`: `count_stars`, `mountain_heights`,
  `count_line_arrangements`, `count_refills`, `palindromes_upto`,
  `count_palindromes`, `divisor_queries`.
- `contestkit.code_blindres`: `min_workers`, `count_xor_zero_subsets`,
  `count_winning_cells`, `count_good_pairs`, `figure_count`, `best_paths`,
  `count_even_substrings`, `max_groups`, `count_distinct`.
- `contestkit.genesis`: `chessboard_repaints`, `tournament_scores`,
  `pair_points`, `min_parity_operations`, `count_balanced`, `min_increments`,
  `count_and_pairs`, `pick_positions`.
- `contestkit.codentine`: `is_fourteen`, `travel_time`, `process_commands`,
  `shortest_collection`, `resolve_names`, `find_equal_concatenations`,
  `best_score`, `count_tilings`, `gcd_component_counts`, and `game_outcome`,
  which returns an `Outcome` (`Outcome.WIN` or `Outcome.LOSS`).
- `contestkit.league_basic`: `feasible_positions`, `letter_mapping`,
  `recover_operand`, `pentagon_vertices`.
- `contestkit.league_counting`: `remaining_after_pairing` (greedy pairing by
  shared divisors) and `surviving_cells`.
- `contestkit.league_queries`: `prefix_queries` (counting words that equal
  shared prefixes) and `path_count_sum` (a sum over tree paths).

Each function's docstring states its inputs, indexing (many tasks use 1-based
positions, as in the problem statements) and result.

## Example

```python
from contestkit.bizerte_basic import count_rectangles, sums_match
from contestkit.code_blindres import count_distinct

count_rectangles(3, 3)      # 9
sums_match(1, 2, 3)         # True
count_distinct([1, 2, 2])   # 2
```

## Results and errors

Where a problem can have no answer, the function returns `None` (for example
`min_rounds`, `sort_with_stack`, `letter_mapping`, `shortest_collection`).
Input that breaks a function's stated requirements, such as an index out of
range or a list that is not a permutation, raises `ValueError`.

## What the package does not do

There is no command-line program. The package does not read problem input
from standard input or files and does not print answers in a judge's output
format; parsing the input and formatting the output is left to the caller.