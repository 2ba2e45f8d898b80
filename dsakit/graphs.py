"""Graph traversals, shortest paths and minimum spanning trees.

Vertices are the integers ``0 .. n - 1``. Distances to vertices that
cannot be reached are reported as ``math.inf``.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``source`` to ``destination``."""

    source: int
    destination: int
    weight: int = 1


class NegativeCycleError(Exception):
    """Raised when a graph holds a cycle of negative total weight."""


def _as_edges(edges: Iterable) -> list[Edge]:
    return [edge if isinstance(edge, Edge) else Edge(*edge) for edge in edges]


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise IndexError(f"vertex {vertex} out of range 0..{vertex_count - 1}")


def _check_square(matrix: Sequence[Sequence]) -> int:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    return size


class Graph:
    """An undirected graph stored as adjacency lists.

    Each new edge is placed at the front of both endpoints' lists, so
    neighbours are listed from the most recently added edge back.
    """

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[deque[int]] = [deque() for _ in range(vertex_count)]

    @property
    def vertex_count(self) -> int:
        return len(self._adjacency)

    def add_edge(self, source: int, destination: int) -> None:
        """Connect ``source`` and ``destination`` in both directions."""
        _check_vertex(source, self.vertex_count)
        _check_vertex(destination, self.vertex_count)
        self._adjacency[source].appendleft(destination)
        self._adjacency[destination].appendleft(source)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex`` in adjacency-list order."""
        _check_vertex(vertex, self.vertex_count)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        _check_vertex(start, self.vertex_count)
        visited = {start}
        pending = deque([start])
        order: list[int] = []
        while pending:
            current = pending.popleft()
            order.append(current)
            for neighbour in self._adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    pending.append(neighbour)
        return order


def bfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first order from ``start``; ``matrix[u][v] == 1`` marks an edge."""
    size = _check_square(matrix)
    _check_vertex(start, size)
    visited = {start}
    pending = deque([start])
    order: list[int] = []
    while pending:
        current = pending.popleft()
        order.append(current)
        for vertex, cell in enumerate(matrix[current]):
            if cell == 1 and vertex not in visited:
                visited.add(vertex)
                pending.append(vertex)
    return order


def dfs(adjacency, start: int) -> list[int]:
    """Depth-first order from ``start``.

    ``adjacency`` is a sequence or mapping giving each vertex's neighbours
    in the order they are to be tried.
    """

    def neighbours_of(vertex: int) -> Iterable[int]:
        if isinstance(adjacency, Mapping):
            return adjacency.get(vertex, ())
        return adjacency[vertex]

    order = [start]
    visited = {start}
    stack = [iter(neighbours_of(start))]
    while stack:
        for vertex in stack[-1]:
            if vertex not in visited:
                visited.add(vertex)
                order.append(vertex)
                stack.append(iter(neighbours_of(vertex)))
                break
        else:
            stack.pop()
    return order


def bellman_ford(vertex_count: int, edges: Iterable, source: int) -> list:
    """Shortest distances from ``source`` over directed, possibly negative edges."""
    _check_vertex(source, vertex_count)
    edge_list = _as_edges(edges)
    distance: list = [math.inf] * vertex_count
    distance[source] = 0
    for _ in range(vertex_count - 1):
        for edge in edge_list:
            if distance[edge.source] + edge.weight < distance[edge.destination]:
                distance[edge.destination] = distance[edge.source] + edge.weight
    for edge in edge_list:
        if distance[edge.source] + edge.weight < distance[edge.destination]:
            raise NegativeCycleError("graph contains a negative weight cycle")
    return distance


def dijkstra(matrix: Sequence[Sequence[int]], source: int) -> list:
    """Shortest distances from ``source``; a zero entry means no edge."""
    size = _check_square(matrix)
    if size == 0:
        raise ValueError("graph has no vertices")
    if not 0 <= source < size:
        raise ValueError(f"invalid source vertex {source}")
    distance: list = [math.inf] * size
    distance[source] = 0
    settled = [False] * size
    for _ in range(size - 1):
        candidates = [v for v in range(size) if not settled[v] and distance[v] < math.inf]
        if not candidates:
            break
        current = min(candidates, key=lambda v: distance[v])
        settled[current] = True
        for vertex, weight in enumerate(matrix[current]):
            if not settled[vertex] and weight and distance[current] + weight < distance[vertex]:
                distance[vertex] = distance[current] + weight
    return distance


def floyd_warshall(matrix: Sequence[Sequence[Optional[float]]]) -> list[list]:
    """All-pairs shortest distances; ``None`` or ``math.inf`` means no edge."""
    size = _check_square(matrix)
    dist = [[math.inf if cell is None else cell for cell in row] for row in matrix]
    for middle in range(size):
        through = dist[middle]
        for row in dist:
            to_middle = row[middle]
            if to_middle == math.inf:
                continue
            for target in range(size):
                candidate = to_middle + through[target]
                if candidate < row[target]:
                    row[target] = candidate
    return dist


def kruskal(vertex_count: int, edges: Iterable) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    edge_list = sorted(_as_edges(edges), key=lambda edge: edge.weight)
    parent = list(range(vertex_count))
    rank = [0] * vertex_count

    def find(vertex: int) -> int:
        root = vertex
        while parent[root] != root:
            root = parent[root]
        while parent[vertex] != root:
            parent[vertex], vertex = root, parent[vertex]
        return root

    chosen: list[Edge] = []
    for edge in edge_list:
        if len(chosen) >= vertex_count - 1:
            break
        _check_vertex(edge.source, vertex_count)
        _check_vertex(edge.destination, vertex_count)
        x, y = find(edge.source), find(edge.destination)
        if x == y:
            continue
        chosen.append(edge)
        if rank[x] < rank[y]:
            parent[x] = y
        elif rank[x] > rank[y]:
            parent[y] = x
        else:
            parent[y] = x
            rank[x] += 1
    return chosen


def prim(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Return a minimum spanning tree grown from vertex 0.

    A zero entry means no edge. Edge ``i`` of the result joins vertex
    ``i + 1`` to its parent in the tree.
    """
    size = _check_square(matrix)
    if size == 0:
        return []
    key: list = [math.inf] * size
    key[0] = 0
    parent: list[Optional[int]] = [None] * size
    in_tree = [False] * size
    for _ in range(size - 1):
        candidates = [v for v in range(size) if not in_tree[v] and key[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        current = min(candidates, key=lambda v: key[v])
        in_tree[current] = True
        for vertex, weight in enumerate(matrix[current]):
            if weight and not in_tree[vertex] and weight < key[vertex]:
                parent[vertex] = current
                key[vertex] = weight
    if any(parent[v] is None for v in range(1, size)):
        raise ValueError("graph is not connected")
    return [Edge(parent[v], v, matrix[v][parent[v]]) for v in range(1, size)]