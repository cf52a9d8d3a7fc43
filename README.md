# algodrills

A library of classic algorithm exercises written as plain Python functions
and classes. The functions take ordinary Python values (lists, strings,
integers) and return their results; apart from the `algodrills` command,
nothing prints.

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

- `algodrills.basics`: number and list helpers: `is_prime`,
  `count_primes`, `is_armstrong` (sum of the cubes of the digits),
  `count_armstrong`, `gcd`, `prime_label` (`"prime"` or `"non prime"`),
  `maximum` (never below 0), `total`, `odd_position_sum`,
  `reversed_values`, `shift_values`, `padded` (zero-pads up to a size and
  raises `ValueError` if the values do not fit), `sequence`, and the
  command entry point `main`.
- `algodrills.roman`: `int_to_roman`, `roman_to_int`.
- `algodrills.dp`: `fib`, `climb_stairs`, `coin_change` (-1 when the
  amount cannot be made), `min_cost_climbing_stairs`.
- `algodrills.windows`: sliding-window and prefix-sum counts:
  `subarrays_with_k_distinct`, `min_subarray_len`,
  `count_subarrays_score_below`, `count_subarrays_with_max_at_least_k`,
  `max_subarray_length`, `num_subarray_product_less_than_k`,
  `subarray_sum`.
- `algodrills.textops`: string work: `concat`, `reverse_text`,
  `is_palindrome`, `strings_equal` (compares only the common length),
  `defang_ip`, `is_pangram`, `sort_sentence`, `largest_odd_number`,
  `find_first`, `sort_vowels`, `longest_unique_substring`,
  `longest_palindrome_length`, `add_strings`, `length_of_last_word`,
  `min_window`, `is_anagram`.
- `algodrills.arrays`: binary searches and array manipulation:
  `find_min_rotated`, `find_peak_element`, `find_kth_positive`,
  `search_rotated`, `search_insert`, `binary_search`,
  `peak_index_in_mountain`, `my_sqrt`, `move_zeroes` (in place),
  `merge_sorted` (in place), `plus_one`, `three_sum_closest`.
- `algodrills.heaps`: `last_stone_weight`, `find_kth_largest`,
  `pick_gifts`, `find_relative_ranks`, `smallest_range` (returns a
  `(low, high)` tuple).
- `algodrills.backtracking`: `generate_parentheses`, `solve_sudoku`
  (fills `"."` cells of a 9x9 board of single-character strings in place
  and returns whether it succeeded), `combination_sum`, `permute_unique`,
  `solve_n_queens`, `subsets`.
- `algodrills.graphs`: `floyd_warshall` (with `INF = 999` for a missing
  edge), `format_matrix`, `num_islands`, `check_valid_grid` (knight's tour
  check), `find_cheapest_price`.
- `algodrills.trees`: `TreeNode`, `ListNode` and `Trie` (`insert`,
  `search`, `starts_with`), plus `build_tree` (from level-order values with
  `None` for missing children), `build_list`, `list_values`,
  `is_symmetric`, `level_order`, `max_depth`, `preorder`, `inorder`,
  `right_side_view` and `reverse_list`.

Functions raise `ValueError` for inputs they cannot work with, such as an
empty array where at least one value is needed.

## Example

```python
from algodrills.roman import int_to_roman, roman_to_int
from algodrills.backtracking import generate_parentheses
from algodrills.trees import Trie, build_tree, level_order

int_to_roman(1994)          # "MCMXCIV"
roman_to_int("LVIII")       # 58
generate_parentheses(2)     # ["(())", "()()"]

level_order(build_tree([3, 9, 20, None, None, 15, 7]))
# [[3], [9, 20], [15, 7]]

trie = Trie()
trie.insert("apple")
trie.search("app")          # False
trie.starts_with("app")     # True
```

## Command line

The package installs an `algodrills` command. Given integers as arguments,
it uses them directly (at most 100):

```
algodrills 153 7 10 370
```

Run without arguments, it asks for a count between 1 and 100 and then for
that many integers:

```
algodrills
```

Either way it prints each value as `Element: <value>`, then
`Prime Count=<n>` and `Armstrong Count=<n>`. On an invalid count or a value
that is not an integer it prints `INVALID SIZE, PROGRAM EXIT` and exits with
status 1.

The command does nothing beyond this count; every other exercise is used
from Python.