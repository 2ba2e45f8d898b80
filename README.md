# dsakit

Classic data structures and algorithms in plain Python, using only the
standard library. Each structure keeps the limits of the textbook version it
models (fixed capacities, distinct keys, single-digit operands), and misuse
raises an exception instead of returning a sentinel value.

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

### Trees

- `dsakit.avl` — `AVLTree(keys=())`, a self-balancing search tree of distinct
  keys. `insert(key)` ignores a key already present, `delete(key)` ignores an
  absent one, `inorder()` returns the keys ascending, `height()` returns the
  tree height (0 when empty). The tree also supports `len()`, `in` and
  iteration.
- `dsakit.bst` — `TreeNode` with `insert_left(value)` / `insert_right(value)`,
  which attach and return a new child; `BinarySearchTree(keys=())` with
  `insert(key)` and `inorder()`; and the generators `preorder(root)`,
  `inorder(root)` and `postorder(root)`, all stack-based rather than recursive.

### Queues and stacks

- `dsakit.queues`
  - `CircularQueue(capacity=3)` — ring buffer with `enqueue`, `dequeue`,
    `is_full`, `is_empty`.
  - `BoundedDeque(capacity=10)` — `push_front`, `push_back`, `pop_front`,
    `pop_back`, `is_empty`.
  - `LinearQueue(capacity=5)` — array-backed queue whose slots are only
    reclaimed once it is completely emptied.
  - `LinkedQueue()` — unbounded queue of linked nodes.
  - `PriorityQueue(capacity=10)` — min-heap; `enqueue(data, priority)` and
    `dequeue()` returning `(data, priority)` for the lowest priority value.
  - A full queue raises `QueueFullError`, an empty one `QueueEmptyError`.
- `dsakit.stacks`
  - `BoundedStack(capacity=20)` with `push`, `pop`, `peek`, `is_empty`.
  - `LinkedStack()` with `push`, `pop`, `is_empty`.
  - `sort_stack(values)` sorts a stack (given bottom to top) using one
    auxiliary stack and returns it bottom to top, largest on top.
  - Overflow raises `StackOverflowError`, underflow `StackUnderflowError`.

### Lists and arrays

- `dsakit.linked_lists`
  - `SinglyLinkedList(values=())` — `push_front`, `push_back`,
    `insert_at(index, value)`, `pop_front`, `pop_back`, `delete_at(index)`,
    `reverse`, `sort`. Bad positions and empty lists raise `IndexError`.
  - `DoublyLinkedList(values=())` — `push_front`, `push_back`,
    `remove(value)` (raises `ValueError` if absent), `reverse`, and
    `backwards()` to walk from tail to head.
- `dsakit.arrays` — `insert_element(values, position, element, capacity=100)`
  and `delete_element(values, position)` return new lists (raising
  `OverflowError` or `IndexError`); `min_max(values)` returns
  `(smallest, largest)`.

### Sorting, searching and hashing

- `dsakit.sorting` — `heap_sort`, `insertion_sort`, `merge_sort` (stable),
  `quick_sort` (last element as pivot). Each takes an iterable and returns a
  new ascending list.
- `dsakit.searching` — `linear_search`, `binary_search`,
  `interpolation_search`; each returns an index or `None`.
- `dsakit.hashing` — `LinearProbingTable(size=10)` maps integer keys with
  linear probing. `insert(key, value)` returns the slot used and raises
  `TableFullError` when no slot is free; `search(key)` raises `KeyError` for
  an absent key.

### Other algorithms

- `dsakit.hanoi` — `tower_of_hanoi(disks, source="A", target="C", auxiliary="B")`
  yields `Move(disk, source, target)` records.
- `dsakit.polynomials` — `add_coefficients` and `multiply_coefficients` on
  lowest-degree-first lists, `horner(coefficients, x)` on
  highest-degree-first lists, `add_terms` on sparse `Term(coefficient, exponent)`
  lists in descending exponent order, and `format_terms` rendering them as
  `c(x^e)+...`.
- `dsakit.graphs` — vertices are `0 .. n - 1`, unreachable distances are
  `math.inf`.
  - `Graph(vertex_count)` — undirected adjacency lists with `add_edge`,
    `neighbours` and `bfs(start)`.
  - `bfs_matrix(matrix, start)` and `dfs(adjacency, start)`.
  - `bellman_ford(vertex_count, edges, source)` raises `NegativeCycleError`.
  - `dijkstra(matrix, source)` and `floyd_warshall(matrix)`.
  - `kruskal(vertex_count, edges)` and `prim(matrix)` return lists of
    `Edge(source, destination, weight)`.
- `dsakit.matching` — `stable_marriage(men_preferences, women_preferences)`
  returns the man-optimal stable matching as a `{woman: man}` dict.
- `dsakit.notation` — `infix_to_postfix`, `prefix_to_postfix` and
  `evaluate_postfix` (single-digit operands, division truncating toward zero).
  Malformed input raises `ExpressionError`.
- `dsakit.expression_tree` — `build_expression_tree(postfix)` returns an
  `ExpressionNode` whose `evaluate()` computes its value.

## Examples

```python
from dsakit.avl import AVLTree

tree = AVLTree([10, 20, 30, 40, 50, 25])
print(tree.inorder())   # [10, 20, 25, 30, 40, 50]
tree.delete(30)
print(30 in tree)       # False
```

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search

values = merge_sort([12, 11, 13, 5, 6, 7])
print(values)                      # [5, 6, 7, 11, 12, 13]
print(binary_search(values, 11))   # 3
```

```python
from dsakit.queues import CircularQueue

queue = CircularQueue()
queue.enqueue(1)
queue.enqueue(2)
print(queue.dequeue())   # 1
```

```python
from dsakit.notation import infix_to_postfix, evaluate_postfix
from dsakit.expression_tree import build_expression_tree

postfix = infix_to_postfix("1+2*3")
print(postfix)                                   # 123*+
print(evaluate_postfix(postfix))                 # 7
print(build_expression_tree(postfix).evaluate()) # 7
```

```python
from dsakit.hanoi import tower_of_hanoi

for move in tower_of_hanoi(2):
    print(move)
# Move disk 1 from rod A to rod B
# Move disk 2 from rod A to rod C
# Move disk 1 from rod B to rod C
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus for reading values from the keyboard; build structures and call the
functions from your own code.