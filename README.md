# algosolve

A collection of plain-Python solutions to well-known algorithmic problems,
grouped by theme. Every function takes ordinary Python values (ints, strings,
lists) and returns a result. Nothing is printed and the inputs passed in are
not modified. There are no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

- `algosolve.linkedlist`: the `ListNode` dataclass (iterating over a node
  yields the values from it onwards), `build_list`, `list_values`,
  `add_two_numbers` (sum of two numbers stored as reversed digit lists) and
  `get_decimal_value` (a binary number stored most significant bit first).
- `algosolve.numbers`: `reverse_integer` (returns 0 when the result leaves the
  32-bit range), `parse_int` (atoi-style parsing clamped to 32 bits),
  `is_palindrome_number`, `int_to_roman` and `roman_to_int`.
- `algosolve.strings`: `length_of_longest_substring`, `longest_palindrome`,
  `zigzag_convert`, `is_match` (patterns with `.` and `*`),
  `make_fancy_string` (no three equal characters in a row) and
  `is_valid_word`.
- `algosolve.sum_pairs`: `FindSumPairs`, which counts pairs across two lists
  that add up to a total (`count`) while elements of the second list are
  increased (`add`).
- `algosolve.lettergames`: `maximum_gain`, `kth_character`,
  `kth_character_with_operations`, `possible_string_count` and
  `possible_original_count` (result modulo 1 000 000 007).
- `algosolve.arrays`: `two_sum`, `find_median_sorted_arrays`, `max_area`,
  `find_lucky`, `maximum_unique_subarray`, `minimum_difference`,
  `maximum_parity_length`, `maximum_mod_length` and `max_unique_sum`.
- `algosolve.scheduling`: `max_events`, `max_value`, `most_booked`,
  `match_players_and_trainers`, `max_free_time` and
  `max_free_time_one_move`.
- `algosolve.structures`: `remove_subfolders`, `earliest_and_latest`,
  `delete_duplicate_folder`, `minimum_score` and `max_subarrays`.

Inputs that have no meaningful answer raise `ValueError`: for example a
negative number passed to `int_to_roman`, an empty or malformed numeral passed
to `roman_to_int`, a pattern beginning with `*` in `is_match`, two empty lists
in `find_median_sorted_arrays`, or a list whose length is not a multiple of 3
in `minimum_difference`.

## Examples

```python
from algosolve.linkedlist import add_two_numbers, build_list, list_values
from algosolve.numbers import int_to_roman, roman_to_int
from algosolve.strings import is_match
from algosolve.sum_pairs import FindSumPairs

int_to_roman(1994)        # 'MCMXCIV'
roman_to_int("LVIII")     # 58
is_match("aa", "a*")      # True

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list_values(total)        # [7, 0, 8]

pairs = FindSumPairs([1, 1, 2, 2, 2, 3], [1, 4, 5, 2, 5, 4])
pairs.count(7)            # 8
pairs.add(3, 2)
pairs.count(8)            # 2
```

## What it does not do

The package is a library only: it has no command-line program and reads no
input files. Call the functions from your own code.