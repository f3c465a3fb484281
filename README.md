# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no third-party dependencies. Requires Python 3.10 or later.

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

| Module | Contents |
| --- | --- |
| `dsakit.arrays` | `majority_element`, `max_identical_square`, `prime_factors`, `reverse_in_place`, `rotate_left`, `rotate_left_by_reversal`, `pair_sums` |
| `dsakit.matrix` | `Matrix` (with `*`, `str`, `rows`, `shape`), `multiply`, `ShapeError` |
| `dsakit.numbers` | `roman_to_int`, `int_to_roman`, `to_binary_digits`, `greatest` |
| `dsakit.strings` | `subsequences`, `remove_consecutive_duplicates`, `replace_pi`, `reverse_string`, `sort_string`, `min_language_cost` |
| `dsakit.sorting` | `bubble_sort`, `cyclic_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `selection_sort`, `is_strictly_increasing` |
| `dsakit.heap` | `heapify`, `build_heap`, `build_heap_top_down`, `MaxHeap` |
| `dsakit.dp` | `binomial`, `climb_stairs`, `climb_stairs_memo`, `min_coin_change`, `fibonacci`, `fibonacci_memo`, `fibonacci_naive`, `greedy_coins`, `DENOMINATIONS` |
| `dsakit.avl` | `AVLTree`, `AVLNode` |
| `dsakit.binary_tree` | `TreeNode`, `build_preorder`, `build_level_order`, `level_order`, `inorder`, `preorder`, `postorder`, `height`, `leaf_count`, `size`, `tree_sum` |
| `dsakit.linked_list` | `LinkedList` |
| `dsakit.queues` | `BoundedDeque`, `BoundedQueue`, `LinkedQueue`, `reverse_queue` |
| `dsakit.stacks` | `BoundedStack`, `LinkedStack`, `TwoStackQueue`, `QueueStack`, `reverse_stack`, `sort_stack`, `stacks_equal` |
| `dsakit.expressions` | `evaluate_postfix`, `precedence`, `infix_to_postfix`, `next_greater`, `next_smaller` |
| `dsakit.graphs` | `adjacency_list`, `weighted_adjacency_list`, `adjacency_matrix`, `weighted_adjacency_matrix`, `is_bipartite_bfs`, `is_bipartite_dfs`, `bfs`, `spread_time`, `grid_spread_time`, `prim_mst` |
| `dsakit.maze` | `find_paths` |
| `dsakit.trie` | `Trie` |
| `dsakit.errors` | `CapacityError`, `EmptyError` |

A few behaviours worth knowing:

- The sorts in `dsakit.sorting` return a new list and leave their argument
  untouched; `reverse_in_place`, `rotate_left_by_reversal`, `build_heap`,
  `build_heap_top_down`, `reverse_stack`, `sort_stack` and `reverse_queue`
  work in place.
- Bounded containers (`MaxHeap`, `BoundedDeque`, `BoundedQueue`,
  `BoundedStack`) raise `CapacityError` (a subclass of `OverflowError`) when
  full. Reading or removing from any empty container raises `EmptyError`
  (a subclass of `IndexError`).
- `BoundedQueue` does not reuse slots freed by `pop`: after `capacity` pushes
  it refuses more until it has been emptied completely.
- `int_to_roman` writes purely additive numerals (`4` is `IIII`), while
  `roman_to_int` understands subtractive pairs such as `IV`.
- Functions that can fail to find an answer return `None`: `majority_element`,
  `min_coin_change`, `spread_time` and `grid_spread_time`.
- In the value streams read by `build_preorder` and `build_level_order`,
  `-1` or `None` stands for a missing child.
- Graphs are lists of neighbour lists indexed by vertex number; weighted
  graphs hold `(neighbour, weight)` pairs.

## Examples

```python
from dsakit.avl import AVLTree
from dsakit.expressions import infix_to_postfix
from dsakit.maze import find_paths
from dsakit.numbers import int_to_roman, roman_to_int

tree = AVLTree()
for key in (10, 20, 30, 40, 50, 25):
    tree.insert(key)
print(tree.preorder())          # [30, 20, 10, 25, 40, 50]

print(roman_to_int("MCMXCIV"))  # 1994
print(int_to_roman(8))          # VIII

print(infix_to_postfix("a+b*c"))  # abc*+

maze = [
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [1, 1, 0, 0],
    [0, 1, 1, 1],
]
print(find_paths(maze))         # ['DDRDRR', 'DRDDRR']
```

```python
from dsakit.heap import MaxHeap
from dsakit.trie import Trie

heap = MaxHeap(6)
for value in (10, 20, 5, 30, 15, 67):
    heap.push(value)
print(heap.pop())               # 67

trie = Trie()
trie.insert("apple")
trie.insert("app")
trie.remove("apple")
print(trie.search("apple"), trie.search("app"))  # False True
```

## What it does not do

This is a library only. It installs no commands and does not read input from
the terminal or print results: every algorithm takes ordinary Python values
as arguments and returns its answer. Nothing is stored between runs.