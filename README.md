# algodrills

Classic binary-search algorithms and a few string algorithms, each written as
a plain function. The functions take Python lists and strings and return
ordinary values. The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Functions |
| --- | --- |
| `algodrills.bounds` | `binary_search`, `binary_search_recursive`, `lower_bound`, `upper_bound`, `search_insert`, `floor_value`, `ceil_value`, `floor_and_ceil`, `floor_and_ceil_bisect`, `first_occurrence`, `last_occurrence`, `search_range`, `search_range_bisect` |
| `algodrills.rotated` | `count_rotations`, `count_rotations_with_duplicates`, `find_min`, `find_min_with_duplicates`, `search_rotated`, `search_rotated_with_duplicates` |
| `algodrills.peaks` | `find_peak_element`, `single_non_duplicate` |
| `algodrills.rates` | `min_eating_speed`, `smallest_divisor`, `min_days` |
| `algodrills.partitions` | `count_groups`, `allocate_books`, `painter_partition`, `split_array`, `ship_within_days`, `aggressive_cows` |
| `algodrills.roots` | `nth_root`, `integer_sqrt` |
| `algodrills.sorted_pairs` | `kth_element`, `median_of_two`, `kth_missing_linear`, `kth_missing_binary` |
| `algodrills.gas_stations` | `minimise_max_distance_greedy`, `minimise_max_distance_heap`, `minimise_max_distance` |
| `algodrills.palindromes` | `is_palindrome_span`, `longest_palindrome_brute`, `longest_palindrome` |
| `algodrills.parentheses` | `max_depth`, `remove_outer_parentheses` |
| `algodrills.substring_beauty` | `beauty_sum` |

Some problems are solved more than one way. One function might be a plain scan
and another a binary search, or one a hand-written search and another built on
`bisect` or `heapq`. Each way is its own function, and the versions give the
same answers.

## Examples

```python
from algodrills.bounds import lower_bound, search_range
from algodrills.rates import min_eating_speed
from algodrills.partitions import split_array, aggressive_cows
from algodrills.roots import integer_sqrt, nth_root
from algodrills.sorted_pairs import median_of_two, kth_missing_binary
from algodrills.gas_stations import minimise_max_distance_heap
from algodrills.palindromes import longest_palindrome
from algodrills.parentheses import max_depth, remove_outer_parentheses
from algodrills.substring_beauty import beauty_sum

lower_bound([1, 2, 2, 3], 2)                  # 1
search_range([5, 7, 7, 8, 8, 10], 8)          # (3, 4)
min_eating_speed([3, 6, 7, 11], 8)            # 4
split_array([7, 2, 5, 10, 8], 2)              # 18
aggressive_cows([0, 3, 4, 7, 10, 9], 4)       # 3
integer_sqrt(8)                               # 2
nth_root(3, 27)                               # 3
median_of_two([1, 3], [2])                    # 2.0
kth_missing_binary([2, 3, 4, 7, 11], 5)       # 9
minimise_max_distance_heap([1, 2, 3, 4, 5], 4)  # 0.5
longest_palindrome("babad")                   # "bab"
max_depth("(1+(2*3)+((8)/4))+1")              # 3
remove_outer_parentheses("(()())(())")        # "()()()"
beauty_sum("aabcb")                           # 5
```

## Conventions

- A search that finds nothing returns `-1`. This holds for indices and also
  for the floor and ceiling values in `algodrills.bounds`.
  `search_range` returns `(-1, -1)`.
- `lower_bound`, `upper_bound` and `search_insert` return `len(nums)` when no
  element qualifies.
- Some inputs are rejected with an exception:
  - `find_min`, `find_min_with_duplicates`, `find_peak_element` and
    `single_non_duplicate` raise `ValueError` on an empty sequence.
  - The `gas_stations` functions raise `ValueError` when given fewer than two
    stations.
  - `kth_element` raises `IndexError` when `k` is out of range.
  - `median_of_two` raises `ValueError` when both sequences are empty.
  - `kth_element` and `median_of_two` also raise `ValueError` when the input
    is not sorted.
- `minimise_max_distance` finds its answer by binary search on real numbers,
  to within `1e-7`.
- `aggressive_cows` sorts a copy of the stall positions. Inputs are never
  modified.

## What it does not do

This is a library of functions only. It has no command-line program, and it
does not read test cases from standard input or print reports. To run a
function on your data, call it from Python.

The string algorithms are limited to palindromic substrings, parenthesis
nesting and substring beauty.