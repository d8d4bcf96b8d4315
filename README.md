# puzzlekit

A small library of solutions to well-known algorithm puzzles. Each solution
is a plain function that takes Python values and returns the answer. It has
no dependencies beyond the standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

### `puzzlekit.greedy`

- `array_manipulation(size, operations)`: largest value after adding `k` to
  each 1-based range `[a, b]` of a zero array; ranges outside `1..size`
  raise `ValueError`.
- `flower_cost(prices, buyers)`: least total cost when each buyer pays
  `(previous purchases + 1) * price`.
- `grid_challenge(rows)`: whether sorting every row leaves every column ascending.
- `order_sequence(orders)`: 1-based customer numbers in serving order, for
  orders given as `(placed_at, preparation_time)`.
- `largest_permutation(values, swaps)`: largest permutation of `1..n`
  reachable with at most `swaps` swaps.
- `max_toys(prices, budget)`: how many toys fit in the budget.
- `min_unfairness(values, k)`: smallest `max - min` over any `k` values.
- `min_containers(weights)`: containers needed when each holds items within
  4 units of its lightest item.
- `sherlock_min_max(values, low, high)`: the `M` in `[low, high]` that
  maximises the distance to the nearest value.
- `can_permute(first, second, k)`: whether the arrays can be paired so every
  pair sums to at least `k`.

### `puzzlekit.strings`

- `alternating_deletions(text)`, `anagram_changes(text)` (returns `-1` for
  odd length), `is_funny(text)`, `can_form_palindrome(text)`,
  `gemstones(rocks)`, `make_anagram_cost(first, second)`,
  `is_pangram(text)`, `share_letter(first, second)`.

### `puzzlekit.implementation`

- `acm_team(topics)` returns `(most_topics, team_count)`.
- `class_cancelled(arrivals, threshold)`, `caesar_cipher(text, shift)`,
  `cavity_map(grid)`, `chocolate_feast(money, cost, wrappers)`,
  `encrypt(text)`, `find_digits(number)`, `last_stones(count, a, b)`,
  `rotate_matrix(matrix, rotations)` (anticlockwise ring rotation; the
  smaller dimension must be even), `kaprekar_numbers(low, high)`,
  `service_lane(widths, start, end)`, `count_squares(low, high)`,
  `grid_search(grid, pattern)`, `utopian_tree(cycles)`.

### `puzzlekit.search`

- `largest_region(grid)`: size of the largest group of 1s joined by sides
  or corners.
- `wand_waves(grid)` and `count_luck(grid, guess)`: decision points on the
  path from `M` to `*` in a maze of `.` and `X` cells.
- `ice_cream_parlor(money, costs)`: first 1-based pair of indices whose
  costs sum to `money`, or `None`.
- `maximum_sum_modulo(values, modulus)`, `missing_numbers(original, modified)`,
  `count_pairs(values, difference)`, `balanced_sums(values)`.

Invalid arguments (empty inputs where a value is needed, ranges out of
bounds, ragged grids and the like) raise `ValueError`.

## Example

```python
from puzzlekit.greedy import max_toys
from puzzlekit.strings import is_pangram
from puzzlekit.implementation import caesar_cipher

max_toys([1, 12, 5, 111, 200, 1000, 10], 50)   # 4
is_pangram("The quick brown fox jumps over the lazy dog")  # True
caesar_cipher("middle-Outz", 2)                 # "okffng-Qwvb"
```

## What it does not do

puzzlekit is a library only. It has no command-line program and does not
read puzzle input from standard input or print answers in a judge's output
format; parsing input and formatting results is left to the caller.