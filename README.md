# dsakit

A collection of classic data structures and algorithms in plain Python, for
study and practice. Each function is short, does one well-known job and
depends on nothing outside the standard library.

## Installation

```
pip install dsakit
```

Python 3.10 or later is required.

## Contents

| Module | What it holds |
| --- | --- |
| `dsakit.matrix` | `add_matrix`, `format_matrix`, `largest_row_sum`, `contains`, `transpose`, `rotate_90`, `spiral_order`, `wave_order` |
| `dsakit.search` | `binary_search`, `binary_search_recursive`, `linear_search`, `peak_index`, `single_element`, `largest`, `second_largest`, `find_unique` |
| `dsakit.numbers` | `is_palindrome_number`, `plus_one`, `int_sqrt`, `power`, `reverse_digits`, `product`, `total`, `factorial`, `fibonacci` |
| `dsakit.array_algos` | `three_sum`, `four_sum`, `pair_sum`, `max_water`, `max_subarray`, `majority_element`, `product_except_self`, `sorted_union`, `merge_sorted`, `rotate_right`, `move_zeros`, `remove_duplicates`, `sort_binary`, `sort_012`, `max_score` |
| `dsakit.sorting` | `bubble_sort`, `merge_sort`, `quick_sort` |
| `dsakit.linked_list` | singly linked lists of `ListNode`: building, searching, insertion, deletion, adding digit lists, middle, odd/even split, reversal, rotation, 0/1/2 sort |
| `dsakit.list_algorithms` | `reverse_k_group`, `merge_sorted_lists`, `merge_sort`, `has_cycle`, `cycle_length`, `cycle_start` |
| `dsakit.doubly_linked_list` | doubly linked lists of `DNode`: building, insertion, deletion, `remove_all` |
| `dsakit.tree` | binary trees of `TreeNode`: building from sorted values, from traversals, level by level or in pre-order; traversals, level averages, left view, Morris in-order, flattening, size |
| `dsakit.stacks` | `ArrayStack`, `MinStack`, `LinkedStack`, `QueueStack`, `eval_rpn`, `is_valid_parentheses` |
| `dsakit.backtracking` | `combination_sum`, `n_queens`, `permutations`, `subsets`, `subset_sums`, `solve_sudoku`, `hanoi_moves` |
| `dsakit.strings` | `first_occurrence`, `is_subsequence`, `remove_all_occurrences`, `reverse_string`, `reverse_words`, `is_alphanumeric`, `is_valid_palindrome` |
| `dsakit.containers` | `Product`, `Student` and a doubling `DynamicArray` |

The array, matrix and sorting functions return new lists and leave their
input alone. The linked-list functions take a head node (or `None` for an
empty list), relink the nodes in place and return the new head.

## Examples

```python
from dsakit import matrix, sorting, array_algos, linked_list, tree

matrix.spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
# [1, 2, 3, 6, 9, 8, 7, 4, 5]

sorting.merge_sort([38, 27, 43, 3, 9, 82, 10])
# [3, 9, 10, 27, 38, 43, 82]

array_algos.three_sum([-1, 0, 1, 2, -1, -4])
# [[-1, -1, 2], [-1, 0, 1]]

head = linked_list.from_iterable([1, 2, 3, 4])
linked_list.to_list(linked_list.reverse(head))
# [4, 3, 2, 1]

root = tree.from_sorted([-10, -3, 0, 5, 9])
tree.preorder(root)
# [0, -10, -3, 5, 9]
```

```python
from dsakit.stacks import MinStack, eval_rpn, is_valid_parentheses

stack = MinStack()
for value in (12, 15, 10, 8, 9):
    stack.push(value)
stack.get_min()          # 8

eval_rpn(["2", "1", "+", "3", "*"])   # 9
is_valid_parentheses("[{()}]")        # True
```

```python
from dsakit.backtracking import n_queens, hanoi_moves

len(n_queens(4))                      # 2
hanoi_moves(2, "A", "B", "C")
# [('A', 'B'), ('A', 'C'), ('B', 'C')]
```

## Errors

Where an answer does not exist the functions raise rather than return a
sentinel: for example `largest([])` and `solve_sudoku` on an unsolvable board
raise `ValueError`, popping an empty stack raises `IndexError`, and pushing
onto a full `ArrayStack` raises `OverflowError`. Searches that report a
position (`binary_search`, `linear_search`, `peak_index`, `first_occurrence`)
return `-1` when nothing is found.

## What it does not do

dsakit is a library only. It has no command-line program and reads no input
from the terminal; to build a tree from values typed by a user, collect them
yourself and pass them to `tree.build_level_order` or `tree.build_preorder`.
Nothing is printed: every function returns its result.

## Running the tests

```
pip install "dsakit[test]"
pytest
```