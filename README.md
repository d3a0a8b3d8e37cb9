# drillbook

Worked solutions to short algorithmic exercises, written as plain Python
functions, with a small command that runs the contest-style problems on
judge-style input.

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

- `drillbook.sorting`: `bubble_sort`, `bubble_sort_early_exit`,
  `insertion_sort`, `insertion_sort_sentinel`, `cocktail_sort`, `merge`,
  `merge_sort` and `quick_sort`. Every sort takes any iterable and returns a
  new list, leaving the input alone. `merge` joins two sorted sequences.
  `lomuto_partition(items, low, high)` and
  `first_pivot_partition(items, low, high)` partition a list in place around
  its last or first item in that range and return the pivot's final index;
  bounds outside the list raise `IndexError`.
- `drillbook.classic`: maximum contiguous subarray sum in cubic
  (`max_subarray_sum_cubic`), quadratic (`max_subarray_sum_quadratic`) and
  linear time (`max_subarray_sum`). The empty run counts, so an all-negative
  input gives 0. `hanoi_moves(disks, source, target, spare)` yields `Move`
  objects (`disk`, `source`, `target`) whose `str()` reads
  `Move disk 1 from rod 1 to rod 3`; fewer than one disk raises `ValueError`.
- `drillbook.bitwise`: `trailing_zeros`, `operations_to_all_odd`,
  `xor_of_others`, `special_matrix`, `max_min_difference`,
  `xor_equal_candidate`, `min_time_both_skills`, `max_zero_and_groups`,
  `odd_one_out` and `max_or_with`.
- `drillbook.puzzles`: `max_product_after_increments`, `reduce_grid`,
  `count_charging_minutes`, `max_draws`, `max_draws_bruteforce`,
  `bit_clearing_sequence`, `diversity_after_increment` and
  `diversity_with_set`.
- `drillbook.sequences`: `split_into_distinct`, `blender_time`,
  `profitable_deposit`, `halving_sum` and `or_chain_sequence`.

Functions that have no answer for their input return `None`
(`max_draws`, `max_draws_bruteforce`, `xor_equal_candidate`,
`min_time_both_skills`); input they cannot work with, such as an empty list
where numbers are needed, raises `ValueError`.

## Using the library

```python
from drillbook.classic import max_subarray_sum, hanoi_moves
from drillbook.bitwise import odd_one_out
from drillbook.puzzles import max_draws

max_subarray_sum([1, 2, -2, 3, 22, -1, 4, 5, -3, 6, 7, 8, -9, 19, 20])  # 82
odd_one_out(1, 1, 5)  # 5
max_draws(1, 1, 2)    # 2
max_draws(1, 1, 1)    # None: the scores add up to an odd total

for move in hanoi_moves(3, 1, 3, 2):
    print(move)
```

## Command line

```
drillbook PROBLEM [INPUT]
```

reads the problem's input from the file `INPUT`, or from standard input when
it is left out, as whitespace-separated tokens, and prints the answer.
Most problems read a case count first and print one answer per case, each
ending in a newline; `charging` and `split` read a single case. Where a
function returns `None` the command prints `-1`. Bad input or an unreadable
file prints a message to standard error and exits with status 1.

The problems are:

`all-odd`, `blender`, `both-skills`, `charging`, `deposit`, `diversity`,
`diversity-count`, `draws`, `halving`, `max-min`, `max-or`, `max-product`,
`odd-one-out`, `or-chain`, `reduce-grid`, `special-matrix`, `split`,
`xor-equal`, `xor-of-others`, `zero-and-groups`.

For example:

```
printf '2\n1 1 5\n3 3 7\n' | drillbook odd-one-out
```

prints `5` and `7` on separate lines. `drillbook --help` lists the choices.

From Python, `drillbook.cli.run(problem, text)` returns the same output as a
string, and `drillbook.cli.main(argv)` is the command itself.

## What it does not do

The command covers only the contest-style problems listed above. The sorts,
the subarray sums, the Tower of Hanoi, `max_draws_bruteforce`,
`bit_clearing_sequence` and `trailing_zeros` are library functions only and
have no command.