# dsakit

A small collection of classic data-structure and algorithm routines in plain
Python: singly linked lists, circular lists, binary trees, binary search trees,
a weighted directed acyclic graph, a stack with constant-time middle access and
a few numeric helpers. It has no dependencies outside the standard library.

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

- `dsakit.linked`: the `Node` class (iterable from a node to the end of its
  list) and the helpers `from_iterable`, `to_list`, `append`, `length`,
  `is_equal`.
- `dsakit.reorder`: `k_reverse`, `k_alt_reverse`, `pair_swap`,
  `pair_swap_iterative`, `pair_swap_values`, `rotate_counter_clockwise`,
  `swap_kth`, `merge_alternate`, `separate_even_odd`. Functions that relink
  nodes return the new head; `merge_alternate` returns the head of the first
  list and whatever is left of the second. A group size below 1 for
  `k_reverse` / `k_alt_reverse`, or an out-of-range `k` for `swap_kth`,
  raises `ValueError`.
- `dsakit.sorting`: `split_half`, `sorted_merge`, `merge_sort`, `sort_012`
  (raises `ValueError` on values other than 0, 1 and 2), `reverse_list`.
- `dsakit.setops`: `contains`, `sorted_intersection`, `intersection_nested`,
  `union`, `intersection`, `hashed_union`, `hashed_intersection`,
  `remove_sorted_duplicates`, `remove_duplicates`, and `find_triplet`, which
  returns a tuple of one value from each list summing to the target, or `None`.
- `dsakit.tree`: the `TreeNode` class with `inorder`, `preorder`,
  `level_order`, `postorder`, `height`, `is_balanced`, `count_leaves`,
  `spiral_order`, `max_width`, `mirror`, `double_tree`, `root_to_leaf_paths`,
  `has_path_sum`.
- `dsakit.bst`: `is_bst`, `contains`, `lca`, `binary_tree_to_bst`,
  `build_tree` (from inorder and preorder sequences), `has_children_sum_property`,
  `convert_to_children_sum`, `sorted_list_to_bst`, `dll_from_iterable`,
  `sorted_dll_to_bst`.
- `dsakit.numbers`: the `SubArray` dataclass (`lo`, `hi`, `sum`) and
  `majority_element`, `max_subarray`, `sqrt_approx`, `factorial`,
  `trailing_zeros`.
- `dsakit.graph`: `Graph` with `add_edge`, `format`, `topological_order`,
  `shortest_paths`.
- `dsakit.circular`: `make_circular`, `circular_to_list`, `split_circular`.
- `dsakit.stacks`: `MiddleStack` (`push`, `pop`, `find_middle`,
  `delete_middle`; the last three raise `IndexError` on an empty stack) and
  `is_palindrome`.
- `dsakit.singleton`: `Singleton` and `get_instance`, which always returns the
  instance created by its first call.

## Example

```python
from dsakit.linked import from_iterable, to_list
from dsakit.reorder import k_reverse
from dsakit.sorting import merge_sort

head = from_iterable([1, 2, 3, 4, 5, 6, 7, 8])
print(to_list(k_reverse(head, 3)))       # [3, 2, 1, 6, 5, 4, 8, 7]

print(to_list(merge_sort(from_iterable([1, 3, 0, 11, 2, 6, 7]))))
# [0, 1, 2, 3, 6, 7, 11]
```

```python
from dsakit.graph import Graph

g = Graph(6)
for u, v, w in [(0, 1, 5), (0, 2, 3), (1, 3, 6), (1, 2, 2), (2, 4, 4),
                (2, 5, 2), (2, 3, 7), (3, 4, -1), (4, 5, -2)]:
    g.add_edge(u, v, w)
print(g.shortest_paths(1))   # [inf, 0, 2, 6, 5, 3]
```

Unreachable vertices are reported as `math.inf`.

## What it does not do

dsakit is a library only: it has no command-line program, and nothing reads
input files or prints results. Call the functions from your own code.