"""Graph algorithms on adjacency matrices.

A graph is a square matrix: ``graph[u][v]`` is non-zero when there is an
edge from ``u`` to ``v``. Neighbours are always visited in index order.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence
from typing import NamedTuple

Matrix = Sequence[Sequence[float]]


class Degrees(NamedTuple):
    """In- and out-degree of every vertex of a directed graph."""

    in_degree: list[int]
    out_degree: list[int]


def _size(graph: Matrix) -> int:
    n = len(graph)
    if any(len(row) != n for row in graph):
        raise ValueError("adjacency matrix must be square")
    return n


def _check_vertex(vertex: int, n: int) -> None:
    if not 0 <= vertex < n:
        raise IndexError(f"vertex {vertex} out of range for {n} vertices")


def _neighbours(graph: Matrix, vertex: int) -> Iterator[int]:
    return (i for i, weight in enumerate(graph[vertex]) if weight)


def _dfs_order(graph: Matrix, start: int, visited: set[int]) -> Iterator[int]:
    """Yield vertices reachable from ``start`` in depth-first preorder."""
    visited.add(start)
    yield start
    stack = [_neighbours(graph, start)]
    while stack:
        for i in stack[-1]:
            if i not in visited:
                visited.add(i)
                yield i
                stack.append(_neighbours(graph, i))
                break
        else:
            stack.pop()


def bfs(graph: Matrix, start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in breadth-first order."""
    n = _size(graph)
    _check_vertex(start, n)
    visited = {start}
    order: list[int] = []
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for i in _neighbours(graph, vertex):
            if i not in visited:
                visited.add(i)
                queue.append(i)
    return order


def dfs(graph: Matrix, start: int) -> list[int]:
    """Return the vertices reachable from ``start`` in depth-first preorder."""
    n = _size(graph)
    _check_vertex(start, n)
    return list(_dfs_order(graph, start, set()))


def floyd_warshall(graph: Matrix) -> list[list[float]]:
    """Return the matrix of shortest path lengths.

    The input holds edge weights (use ``math.inf`` for a missing edge) and is
    left unchanged.
    """
    n = _size(graph)
    dist = [list(row) for row in graph]
    for k in range(n):
        via = dist[k]
        for row in dist:
            through = row[k]
            for j in range(n):
                candidate = through + via[j]
                if row[j] > candidate:
                    row[j] = candidate
    return dist


def count_components(graph: Matrix) -> int:
    """Count the connected components of an undirected graph."""
    n = _size(graph)
    visited: set[int] = set()
    count = 0
    for vertex in range(n):
        if vertex not in visited:
            for _ in _dfs_order(graph, vertex, visited):
                pass
            count += 1
    return count


def has_cycle(graph: Matrix) -> bool:
    """Tell whether an undirected graph contains a cycle.

    A cycle is found when a visited neighbour is reached that is not the
    vertex we came from.
    """
    n = _size(graph)
    visited: set[int] = set()
    for root in range(n):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, -1, _neighbours(graph, root))]
        while stack:
            vertex, parent, pending = stack[-1]
            for i in pending:
                if i not in visited:
                    visited.add(i)
                    stack.append((i, vertex, _neighbours(graph, i)))
                    break
                if i != parent:
                    return True
            else:
                stack.pop()
    return False


def has_path(graph: Matrix, a: int, b: int) -> bool:
    """Tell whether ``b`` can be reached from ``a``."""
    n = _size(graph)
    _check_vertex(a, n)
    _check_vertex(b, n)
    return any(vertex == b for vertex in _dfs_order(graph, a, set()))


def degrees(graph: Matrix) -> Degrees:
    """Return the in- and out-degree of every vertex of a directed graph."""
    n = _size(graph)
    in_degree = [0] * n
    out_degree = [0] * n
    for i, row in enumerate(graph):
        for j, weight in enumerate(row):
            if weight:
                out_degree[i] += 1
                in_degree[j] += 1
    return Degrees(in_degree, out_degree)


def find_hub(graph: Matrix) -> int:
    """Return the vertex whose row holds the most entries equal to 1.

    Ties go to the lowest index; a graph without such entries gives 0.
    """
    _size(graph)
    best_count = 0
    hub = 0
    for i, row in enumerate(graph):
        connections = sum(1 for weight in row if weight == 1)
        if connections > best_count:
            best_count = connections
            hub = i
    return hub


class DisjointSet:
    """Union-find over the integers ``0 .. n-1`` with path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(n))

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets holding ``x`` and ``y``."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x != root_y:
            self._parent[root_x] = root_y

    def same_set(self, x: int, y: int) -> bool:
        """Tell whether ``x`` and ``y`` are in the same set.

        Adding an edge between two such vertices would close a cycle.
        """
        return self.find(x) == self.find(y)