# algosolve

Solutions to well-known algorithm problems, written as plain Python
functions. Nothing beyond the standard library is required.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algosolve.structures` | `TreeNode`, `ListNode` (with `ListNode.from_values` and `to_values`), `build_tree`, `tree_to_list` |
| `algosolve.trees` | `lowest_common_ancestor`, `binary_tree_paths`, `is_valid_serialization`, `diameter_of_binary_tree`, `insert_into_bst`, `bst_insert`, `prune_tree`, `distribute_coins`, `is_valid_bst`, `top_view` |
| `algosolve.linked_lists` | `merge_two_lists`, `merge_k_lists` |
| `algosolve.heaps` | `find_kth_largest`, `top_k_frequent`, `k_smallest_pairs`, `least_interval`, `most_booked` |
| `algosolve.windows` | `max_sliding_window`, `shortest_subarray` |
| `algosolve.greedy` | `candies`, `fair_rations`, `pylons`, `minimum_flower_cost`, `highest_value_palindrome`, `luck_balance`, `truck_tour` |
| `algosolve.counting` | `acm_team`, `count_divisible_subarrays`, `running_median`, `stones`, `non_divisible_subset`, `queens_attack`, `substrings`, `sansa_xor`, `special_multiple`, `first_primes`, `waiter` |
| `algosolve.cli` | the `algosolve` command |

Tree and list nodes compare by identity, so `lowest_common_ancestor` takes
and returns the node objects themselves. Trees are built from level-order
lists where `None` marks a missing child, and `tree_to_list` turns a tree
back into that form without trailing `None` entries.

A few behaviours worth knowing:

- `insert_into_bst` sends equal values to the right subtree, `bst_insert`
  sends them to the left.
- `top_view` returns the left spine from the bottom up, followed by the root
  and its right spine.
- `k_smallest_pairs` returns `(a, b)` tuples with the largest of the kept sums
  first.
- `most_booked` returns the lowest-numbered room among those with the most
  meetings.
- Functions that return "no answer" values keep them as such: `-1` from
  `shortest_subarray`, `pylons` and `truck_tour`, `"NO"` from `fair_rations`,
  `"-1"` from `highest_value_palindrome`. Inputs that make no sense (for
  example `k` out of range in `find_kth_largest`, a non-positive window size,
  or a task that is not an uppercase letter) raise `ValueError`.

## Examples

```python
from algosolve.heaps import find_kth_largest
from algosolve.windows import max_sliding_window
from algosolve.greedy import candies
from algosolve.trees import is_valid_serialization, binary_tree_paths
from algosolve.structures import build_tree, ListNode
from algosolve.linked_lists import merge_k_lists

find_kth_largest([3, 2, 1, 5, 6, 4], 2)              # 5
max_sliding_window([1, 3, -1, -3, 5, 3, 6, 7], 3)    # [3, 3, 5, 5, 6, 7]
candies([1, 2, 2])                                   # 4
is_valid_serialization("9,3,4,#,#,1,#,#,2,#,6,#,#")  # True

root = build_tree([1, 2, 3, None, 5])
binary_tree_paths(root)                              # ['1->2->5', '1->3']

merged = merge_k_lists([
    ListNode.from_values([1, 4, 5]),
    ListNode.from_values([1, 3, 4]),
    ListNode.from_values([2, 6]),
])
merged.to_values()                                   # [1, 1, 2, 3, 4, 4, 5, 6]
```

## Command line

The `algosolve` command solves one of four puzzles, reading its input as
whitespace-separated integers from standard input and printing the answer:

| Problem | Input |
| --- | --- |
| `candies` | `n`, then `n` ratings |
| `waiter` | `n q`, then `n` plate numbers (the last is the top of the stack); prints one plate per line |
| `pylons` | `n k`, then `n` town flags (1 holds a plant) |
| `queens-attack` | `n k`, then the queen's row and column, then `k` obstacle pairs |

```
printf '3\n1\n2\n2\n' | algosolve candies
algosolve --help
```

Malformed input (a missing value, a non-integer, a negative count) is
reported on standard error with exit status 1.

## Limitations

Only the four puzzles above are available from the command line; every
other solution is used by importing it from its module.