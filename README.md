# dsakit

`dsakit` is a set of small, readable implementations of classic data
structures and algorithms. It has no runtime dependencies and needs
Python 3.10 or later.

## Installation

```
pip install dsakit
```

To run the test suite, install the test extra and then run pytest:

```
pip install "dsakit[test]"
pytest
```

## Modules

- `dsakit.arrays`: `reversed_copy` returns a reversed new list;
  `reverse_in_place` and `reverse_range(items, left, right)` reverse a
  sequence (or an inclusive slice of it) in place; `swap_alternate` swaps
  neighbouring pairs; `unique_element` returns the one value that is not
  paired and raises `ValueError` when every value is paired.
- `dsakit.recursion`: `factorial`, `power`, `is_palindrome`, and the
  generators `count_up(n)` (1 to n) and `count_down(n)` (n to 1). Negative
  arguments raise `ValueError`.
- `dsakit.bits`: `to_binary(num, width=11)`, `is_bit_set`, `set_bit`,
  `clear_bit`, `toggle_bit`, and `count_set_bits`, which counts the 1 bits
  in the low 32 bits of a number.
- `dsakit.graphs`: `UndirectedGraph(vertex_count)` with `add_edge`,
  `neighbours` and `format`; `DirectedGraph` over any hashable vertices, with
  `add_edge`, `bfs` and `dfs`, which return lists of the reachable vertices;
  and `adjacency_matrix(n, edges)`, which builds an `(n + 1) x (n + 1)`
  symmetric 0/1 matrix.
- `dsakit.stacks`: `BoundedStack(capacity)` with `push`, `pop` and `peek`,
  which raise `StackOverflow` or `StackUnderflow`. The functions
  `delete_middle`, `insert_at_bottom` and `sort_stack` work on plain lists
  with the top at the end. `reverse_string` reverses text.
- `dsakit.trees`: `Node`, `BinarySearchTree` (with `insert`, `inorder`,
  `in`, `len` and iteration in key order), the builders `build_preorder` and
  `build_level_order` (where `-1` marks a missing child), the traversals
  `inorder`, `preorder`, `postorder`, `level_order` and `levels`, and the
  measures `count_nodes` and `height`.

## Examples

```python
from dsakit.graphs import DirectedGraph
from dsakit.stacks import reverse_string
from dsakit.trees import build_level_order, levels

g = DirectedGraph()
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.bfs(2)                # [2, 0, 3, 1]
g.dfs(2)                # [2, 0, 1, 3]

reverse_string("Aditya")  # "aytidA"

root = build_level_order([1, 3, 5, 7, 11, 17, -1, -1, -1, -1, -1, -1, -1])
levels(root)            # [[1], [3, 5], [7, 11, 17]]
```

## What it does not do

`dsakit` is a library only: it has no command-line tool. It has no queue
types of its own; `collections.deque` from the standard library serves
that purpose.