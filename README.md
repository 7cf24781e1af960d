# algobox

A small collection of classic algorithms and data structures in plain Python.
It has no runtime dependencies.

## Modules

- `algobox.graph` works on adjacency matrices, where `graph[u][v]` is
  non-zero when there is an edge from `u` to `v`. Neighbours are visited in
  index order.
  - `bfs(graph, start)` and `dfs(graph, start)` return the reachable vertices
    in breadth-first and depth-first order.
  - `floyd_warshall(graph)` returns a new matrix of shortest path lengths. Use
    `math.inf` for a missing edge.
  - `count_components(graph)` and `has_cycle(graph)` work on undirected graphs.
  - `has_path(graph, a, b)` tells whether `b` can be reached from `a`.
  - `degrees(graph)` returns a `Degrees` tuple of `in_degree` and
    `out_degree` lists.
  - `find_hub(graph)` returns the vertex whose row holds the most entries equal
    to 1. On a tie the lowest index wins, and it returns 0 if no row holds such
    an entry.
  - `DisjointSet(n)` is a union–find with `find`, `union` and `same_set`.
- `algobox.sorting`
  - `bubble_sort`, `insertion_sort`, `selection_sort` and `heap_sort` return
    new sorted lists.
  - `counting_sort` takes non-negative integers only.
  - `partition(items, left, right)` partitions a slice in place around
    `items[left]`.
  - `quick_select(items, k)` returns the `k`-th smallest item, counting from 1.
  - `MaxHeap` provides `push`, `pop`, `peek` and `len()`.
- `algobox.search`
  - `binary_search(items, target)` returns an index of `target` in a sorted
    sequence, or -1 if it is absent.
- `algobox.tree` works on the binary `TreeNode(value, left, right)`.
  - `copy_tree` and `trees_equal` copy and compare trees.
  - `count_external_nodes` counts leaves, and `count_internal_nodes` counts
    nodes with at least one child.
  - `kth_smallest(node, k)` returns the `k`-th value of an inorder walk.
  - `mirror` swaps children in place.
- `algobox.linked_list` provides the singly linked `ListNode` and the circular
  doubly linked `DoubleNode`.
  - `from_values`, `to_values`, `circular_from_values` and
    `circular_to_values` build lists and read them back.
  - `count_circular` and `delete_circular` work on circular lists.
  - `delete_value`, `delete_tail`, `insert_at`, `insert_at_tail`,
    `has_cycle`, `merge_sorted` and `reverse` work on singly linked lists.
- `algobox.matrix`
  - `add`, `multiply` and `transpose` work on nested lists. They raise
    `ValueError` on mismatched shapes.
- `algobox.dynamic`
  - `lcs_length(a, b)` returns the length of the longest common subsequence.
  - `matrix_chain_cost(dims)` returns the fewest scalar multiplications needed
    for a chain of matrices.

## Examples

```python
from algobox.graph import bfs, DisjointSet
from algobox.sorting import heap_sort, quick_select
from algobox.search import binary_search
from algobox.linked_list import from_values, reverse, to_values
from algobox.dynamic import lcs_length

graph = [
    [0, 1, 1, 0, 0],
    [1, 0, 0, 1, 0],
    [1, 0, 0, 0, 1],
    [0, 1, 0, 0, 0],
    [0, 0, 1, 0, 0],
]
print(bfs(graph, 0))                  # [0, 1, 2, 3, 4]

sets = DisjointSet(4)
sets.union(0, 1)
print(sets.same_set(0, 1))            # True

print(heap_sort([7, 5, 2, 3, 6]))     # [2, 3, 5, 6, 7]
print(quick_select([7, 5, 2, 3, 6], 5))  # 7
print(binary_search([1, 3, 5, 9, 11, 34], 10))  # -1

print(to_values(reverse(from_values([1, 2, 3]))))  # [3, 2, 1]
print(lcs_length("ABCBDAB", "BDCABA"))  # 4
```

## What it does not do

This is a library only. It has no command-line tool.

## Running the tests

Install the package with its `test` extra, then run `pytest`:

```
pip install -e ".[test]"
pytest
```