# algokit

A collection of classic algorithms and data structures in plain Python,
written to be read, studied and experimented with. It needs nothing beyond
the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | Bubble (`bubble_sort`, `bubble_sort_early_exit`, `bubble_sort_last_swap`), cocktail, selection, insertion, shell, merge (top-down and bottom-up, with or without a shared buffer), quick (one-, two- and three-way partition) and heap sort |
| `algokit.sorthelper` | `generate_random_array`, `generate_nearly_ordered_array`, `is_sorted`, `format_array`, `time_sort` |
| `algokit.sortbench` | `run_benchmark`: times `sorted` and four sorts on copies of an array |
| `algokit.heap` | `MaxHeap`, `IndexMaxHeap`, `heap_sort_using_max_heap`, `heap_sort_using_index_max_heap` |
| `algokit.heapview` | `render_heap`, a text drawing of a heap as a tree (up to six levels) |
| `algokit.search` | `order_search`, `binary_search`, `binary_search_recursive`, `insertion_search` (interpolation); all return the position or -1 |
| `algokit.unionfind` | `QuickFind`, `QuickUnion`, `SizedUnionFind`, `RankedUnionFind`, `PathHalvingUnionFind`, `PathCompressionUnionFind`, `benchmark_union_find` |
| `algokit.sequence_table` | `SequenceTable`, a linked-list symbol table |
| `algokit.bst` | `BinarySearchTree` with traversals, `minimum`/`maximum` and deletion |
| `algokit.wordfile` | `split_words`, `read_words`, `first_character_index` |
| `algokit.wordfreq` | `count_frequencies` over any table with `insert`/`search` |
| `algokit.numeric` | `fibonacci`, `fibonacci_iterative`, `hailstone`, `hanoi_moves`, `integral` (trapezoid rule) |
| `algokit.selection` | `find_second`, `find_second_linear`, `find_second_divide`, `number_of_order` (k-th smallest) |
| `algokit.inversions` | `inversions` with three `InversionMethod` strategies |
| `algokit.edge` | `Edge`, a weighted edge compared by weight |
| `algokit.graphs` | `DenseGraph` (adjacency matrix), `SparseGraph` (adjacency lists), `read_graph` |
| `algokit.traversal` | `Component`, `Path` (depth-first) and `ShortestPath` (breadth-first) |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

Sorting functions reorder the list they are given and return `None`. The
quick sorts take an optional random number generator for pivot choice:

```python
import random
from algokit.sorting import heap_sort, quick_sort_three_ways

data = [5, 3, 9, 1, 7]
heap_sort(data)

data = [4, 4, 2, 8, 0]
quick_sort_three_ways(data, random.Random(1))
```

Heaps have a fixed capacity; inserting into a full heap raises
`OverflowError`, and taking from an empty one raises `IndexError`:

```python
from algokit.heap import MaxHeap, IndexMaxHeap

heap = MaxHeap.from_iterable([3, 8, 1, 6])
heap.extract_max()        # 8
len(heap)                 # 3
print(heap.render())

indexed = IndexMaxHeap(4)
indexed.insert(0, 10)
indexed.insert(2, 30)
indexed.peek_max_index()  # 2
indexed.change(0, 50)
indexed.extract_max()     # 50
```

Union-find:

```python
from algokit.unionfind import PathCompressionUnionFind

uf = PathCompressionUnionFind(10)
uf.union(1, 2)
uf.union(2, 5)
uf.is_connected(1, 5)     # True
```

Symbol tables return `None` from `search` for an absent key:

```python
from algokit.bst import BinarySearchTree

tree = BinarySearchTree()
tree.insert("b", 2)
tree.insert("a", 1)
tree.search("a")          # 1
tree.minimum()            # "a"
list(tree.in_order())     # ["a", "b"]
```

Inversions:

```python
from algokit.inversions import inversions, InversionMethod

inversions([3, 1, 2])                             # 2
inversions([3, 1, 2], InversionMethod.INSERTION)  # 2
```

Graphs:

```python
from algokit.graphs import SparseGraph
from algokit.traversal import Component, ShortestPath

g = SparseGraph(4, False)
g.add_edge(0, 1, 1.0)
g.add_edge(1, 2, 1.0)

Component(g).count()        # 2
ShortestPath(g, 0).path(2)  # [0, 1, 2]
ShortestPath(g, 0).length(3)  # -1
```

`read_graph(graph, filename)` fills a graph from a text file whose first line
holds the vertex and edge counts and each further line `a b weight`.

## Commands

Installing the package provides these demonstration commands:

- `algokit-sortbench [--size N] [--swap-times K] [--seed S]`: time shell,
  bottom-up merge, three-way quick and heap sort against `sorted` on a random
  array, a nearly ordered array and an array of values in [0, 10].
- `algokit-heap [--size N] [--seed S]`: time heap sort through `MaxHeap` and
  `IndexMaxHeap` on a random array.
- `algokit-search [TARGET]`: time sequential, interpolation and binary search
  for TARGET in 3..100002; TARGET is read from standard input if absent.
- `algokit-unionfind [--size N] [--seed S]`: time the six union-find variants.
- `algokit-wordfreq [FILENAME] [--word WORD]`: count word frequencies in a
  text file (default `communist.txt`) with a binary search tree, a sequence
  table, and a tree fed sorted words, and print the count of WORD (default
  `unite`).
- `algokit-numeric [hailstone|hanoi|fibonacci|integral] [N]`: print a
  hailstone sequence (the default), the Tower of Hanoi moves and their count,
  the first N Fibonacci terms, or three trapezoid integrals over [0, π].
  N is read from standard input if absent.
- `algokit-graphs [FILENAME] [--vertices V]`: read a graph file (default
  `testG1.txt`, 8 vertices) into both graph representations and print them.

## What it does not do

- No sample data files are included: `algokit-wordfreq` and `algokit-graphs`
  need a text file or graph file that you supply.
- The graph modules cover storage, components and unweighted paths only;
  there are no weighted-graph algorithms such as minimum spanning trees or
  weighted shortest paths, even though `Edge` carries a weight.
- The binary search tree is not self-balancing.