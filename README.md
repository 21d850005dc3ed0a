# puzzlekit

Self-contained solutions to classic programming puzzles, grouped by the
kind of data they work on. It has no runtime dependencies and needs
Python 3.10 or later.

## Installation

```
pip install puzzlekit
```

## Modules

### `puzzlekit.integers`

- `is_palindrome_number(x)`: whether the decimal form of `x` reads the
  same both ways (negative numbers never do).
- `integer_sqrt(x)`: floor of the square root; 0 for zero or negatives.
- `count_set_bits(n)`: number of one bits; 0 for zero or negatives.
- `is_happy(n)`: whether repeatedly summing squared digits reaches 1.
- `minimize_xor(num1, num2)`: the number with as many set bits as `num2`
  whose XOR with `num1` is smallest. Raises `ValueError` for negatives.

### `puzzlekit.arrays`

- `two_sum(nums, target)`: every index whose value has a partner at
  another index summing to `target`.
- `plus_one(digits)`: a new list of digits for the number plus one.
- `longest_consecutive(nums)`: length of the longest run of consecutive
  integers (0 for an empty input).
- `single_number(nums)`: the value left when all others appear twice.
- `contains_nearby_duplicate(nums, k)`: whether equal values sit at most
  `k` positions apart.
- `summary_ranges(nums)`: runs as strings such as `"0->2"` or `"7"`.
- `min_operations(boxes)`: for a string of `'0'`/`'1'` boxes, the moves
  needed to gather every ball into each box.
- `ways_to_split_array(nums)`: split points whose left sum is at least the
  right sum.
- `xor_all_pairings(nums1, nums2)`: XOR of `a ^ b` over all pairs.
- `prefix_common_array(a, b)`: for each prefix length, how many items the
  two prefixes share. The lists must have the same length.
- `valid_array_exists(derived)`: whether `derived` is the neighbour XOR of
  some circular binary array.

### `puzzlekit.intervals`

Intervals are closed `[start, end]` pairs.

- `merge_intervals(intervals)`: merge overlapping or touching intervals,
  sorted by start.
- `insert_interval(intervals, new_interval)`: insert into sorted, disjoint
  intervals, merging where they overlap.
- `min_arrow_shots(points)`: fewest vertical arrows that burst every span.

### `puzzlekit.stacks`

- `eval_rpn(tokens)`: evaluate integer reverse Polish notation; division
  truncates toward zero. Raises `ValueError` when an operator lacks
  operands or there is nothing to evaluate.
- `MinStack`: `push`, `pop` (returns the value), `top` and `get_min`, all in
  constant time; `len()` gives its size. Reading or popping an empty stack
  raises `IndexError`.

### `puzzlekit.text`

`is_valid_parentheses`, `group_anagrams` (groups in order of first
appearance), `simplify_path`, `is_isomorphic`, `is_anagram`,
`word_pattern`, `can_construct_note`, `word_subsets`,
`can_construct_palindromes`, `string_matching`, `max_split_score`,
`count_palindromic_subsequences`, `can_be_valid`, `prefix_count`,
`shift_letters`, `vowel_strings`, `count_prefix_suffix_pairs` and
`minimum_length`.

`max_split_score` raises `ValueError` for an empty or non-binary string,
`can_be_valid` when its two strings differ in length, and `shift_letters`
when a shift range falls outside the string.

### `puzzlekit.grids`

- `is_valid_sudoku(board)`: no filled cell repeats in a row, column or box;
  empty cells are `'.'`. Raises `ValueError` unless the board is 9 by 9.
- `rotate(matrix)`: quarter turn clockwise, in place; the matrix must be
  square.
- `set_zeroes(matrix)`: zero every row and column holding a zero, in place.
- `trap_rain_water(height_map)`: water held by an elevation map.
- `min_cost_path(grid)`: fewest arrow changes to walk from the top-left to
  the bottom-right cell, where cells hold 1 (right), 2 (left), 3 (down) or
  4 (up).

## Examples

```python
from puzzlekit.intervals import merge_intervals
from puzzlekit.stacks import MinStack, eval_rpn
from puzzlekit.text import simplify_path

merge_intervals([[1, 3], [2, 6], [8, 10]])   # [[1, 6], [8, 10]]
eval_rpn(["2", "1", "+", "3", "*"])          # 9
simplify_path("/a/./b/../../c/")             # "/c"

stack = MinStack()
stack.push(3)
stack.push(1)
stack.get_min()                              # 1
stack.pop()                                  # 1
stack.get_min()                              # 3
```

## What it does not do

puzzlekit is a library only: it has no command-line tool, and it reads no
files or input of its own.

## Running the tests

```
pip install -e ".[test]"
pytest
```