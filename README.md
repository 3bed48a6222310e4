# dsakit

Small, dependency-free implementations of classic data structures and
algorithms, written in plain Python with no dependencies outside the standard
library.

## Installation

```
pip install dsakit
```

To run the test suite, install the test extra with `pip install "dsakit[test]"`
and then run `pytest`.

## What is inside

### `dsakit.sorting`

- `sort_ascending(values)` returns a new list in ascending order.
- `selection_sort(values)` returns a new list sorted by selection sort; the
  input is not modified.

### `dsakit.graphs`

Graphs are square matrices indexed by vertex number.

- `adjacency_matrix(vertices, edges, directed=False)` builds a 0/1 matrix from
  vertex pairs.
- `weight_matrix(vertices, edges, directed=False)` builds a weight matrix from
  `(start, end, weight)` triples; a weight of 0 means "no edge".
  Both raise `ValueError` for a vertex outside the matrix.
- `bfs_level(adjacency, source, target)` returns the position (source = 0) at
  which a breadth-first search from `source` takes `target` off the queue, or
  `None` if it is unreachable.
- `connected_components(adjacency)` returns each component as a list of
  vertices in depth-first visiting order.
- `dijkstra(weights, source, destination)` returns a `ShortestPath` with
  `path` (a tuple of vertices) and `distance`, or `None` when there is no
  path. `str()` of a `ShortestPath` gives `"0 -> 1 -> 2"`.
- `prim_mst(weights)` returns minimum spanning tree edges grown from vertex 0
  as `(parent, vertex, weight)`, listed by vertex; it raises `ValueError` if
  the graph is not connected.
- `mst_edges_by_weight(weights)` returns the same edges ordered by weight.

### `dsakit.queues`

- `CircularQueue(capacity=10)`: a ring-buffer FIFO queue.
- `LinearQueue(capacity=5)`: a linear FIFO queue whose slots are only
  reclaimed once it has been emptied completely.
- `Deque()`: `push_front`, `push_back`, `pop_front`, `pop_back`.

All three support `len()` and iteration from front to rear. Adding to a full
queue raises `QueueOverflow`; taking from an empty one raises
`QueueUnderflow`. A capacity below 1 raises `ValueError`.

### `dsakit.expressions`

- `infix_to_postfix(expression)` and `infix_to_prefix(expression)` convert
  expressions of single-character operands with the operators `+ - * / ^`.
  Unbalanced parentheses raise `ValueError`.
- `hanoi_moves(disks, source="A", via="B", target="C")` returns the list of
  `(disk, from_peg, to_peg)` moves; disk 1 is the smallest.

### `dsakit.trees`

- `Node(value, left=None, right=None)`: a binary tree node.
- `BinarySearchTree(values=())`: `insert`, `delete`, `successor` (the
  smallest stored value greater than the argument, or `None`), in-order
  iteration and `in`. Duplicate values are ignored.
- `level_insert(root, value)` adds a node at the first free slot in level
  order and returns the root.
- `tree_from_level_order(values)` builds a complete binary tree.
- `inorder(root)` and `level_order(root)` return the values as lists.

## Examples

```python
from dsakit.sorting import selection_sort
from dsakit.graphs import weight_matrix, dijkstra
from dsakit.expressions import infix_to_postfix
from dsakit.trees import BinarySearchTree

selection_sort([12, 23, 12, 44, 34, 65, 2, 3])
# [2, 3, 12, 12, 23, 34, 44, 65]

weights = weight_matrix(3, [(0, 1, 4), (1, 2, 1), (0, 2, 7)], directed=True)
result = dijkstra(weights, 0, 2)
str(result), result.distance
# ('0 -> 1 -> 2', 5)

infix_to_postfix("a+b*c")
# 'abc*+'

tree = BinarySearchTree([50, 30, 70, 20, 40])
tree.delete(30)
list(tree)
# [20, 40, 50, 70]
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus for reading input or printing results; callers pass values in and get
Python objects back.