# dpkit

Small, dependency-free solvers for classic dynamic-programming problems:
counting recurrences, paths on grids, interval problems, knapsack variants,
string problems and a few small state machines.

Every solver is a plain function that takes Python values (ints, strings,
lists, tuples) and returns its answer. Bad input raises `ValueError`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `dpkit.sequences`: `frog_jump_cost`, `longest_increasing_subsequence`,
  `min_link_length`, `min_link_max_gap`, `min_link_value_by_age`,
  `min_queue_time`, `max_path_with_route`, `min_recolorings`.
- `dpkit.intervals`: `best_meeting_time` (times as `H:MM:SS` strings),
  `min_merge_cost`, `min_removal_cost`.
- `dpkit.recurrences`: `count_no_double_zero`, `count_block_sequences`,
  `count_domino_tilings_3xn`, `count_binary_partitions`, `count_step_ways`,
  `max_pieces`, `count_flag_colorings`, `count_59_strings`,
  `count_domino_towers` (modulo one million).
- `dpkit.probability`: `parity_probability`, `dice_sum_probability`.
- `dpkit.climbing`: `min_climb_route`, the shortest walk visiting every
  point row by row upwards.
- `dpkit.automata`: `robot_steps`, `count_prime_chains` (modulo
  1000000009), `evolve_row`.
- `dpkit.strings`: `count_bracket_completions`, `z_function`,
  `mirror_prefix_lengths`, `count_near_palindromes`, `count_decodings`,
  `balanced_substring_count`, `binary_sequence`,
  `min_palindrome_partition`, `longest_prefix_chain`,
  `count_distinct_digit_sums` (modulo 1000000007),
  `count_abc_subsequences`.
- `dpkit.grids`: `largest_square_area`, `max_submatrix_sum`,
  `min_path_sum`, `count_jump_paths`, `min_path_picture`,
  `min_column_route`, `max_dice_path`.
- `dpkit.boards`: `max_staircase_sum`, `count_walks_of_length`.
- `dpkit.minimax`: `alternating_pick_value`.
- `dpkit.knapsack`: `min_ticket_cost`, `min_segment_cost`,
  `piggy_bank_range`, `count_subset_sums`, `min_coin_count`,
  `min_purchase_cost`, `equal_thirds`, `representable`.

Functions that may have no answer return `None` in that case, for example
`min_coin_count`, `piggy_bank_range`, `equal_thirds` and `binary_sequence`.

## Example

```python
from dpkit.sequences import longest_increasing_subsequence
from dpkit.knapsack import min_coin_count
from dpkit.strings import z_function

longest_increasing_subsequence([3, 29, 5, 5, 28, 6])  # 3
min_coin_count([1, 3, 4], 6)                         # 2
z_function("aaab")                                   # [4, 2, 1, 0]
```

## What it does not do

The package is a library only. It has no command-line program, reads no
input files and prints nothing; callers pass values in and use the values
returned.