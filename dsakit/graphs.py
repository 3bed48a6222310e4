"""Graph algorithms over adjacency and weight matrices."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Matrix = Sequence[Sequence[int]]


@dataclass(frozen=True)
class ShortestPath:
    """A route from a source vertex to a destination and its total weight."""

    path: tuple[int, ...]
    distance: int

    def __str__(self) -> str:
        return " -> ".join(str(vertex) for vertex in self.path)


def _check_vertex(count: int, vertex: int) -> None:
    if not 0 <= vertex < count:
        raise ValueError(f"vertex {vertex} is outside 0..{count - 1}")


def _empty_matrix(vertices: int) -> list[list[int]]:
    if vertices < 0:
        raise ValueError("number of vertices must not be negative")
    return [[0] * vertices for _ in range(vertices)]


def adjacency_matrix(
    vertices: int, edges: Iterable[tuple[int, int]], directed: bool = False
) -> list[list[int]]:
    """Build a 0/1 adjacency matrix from vertex pairs."""
    matrix = _empty_matrix(vertices)
    for start, end in edges:
        _check_vertex(vertices, start)
        _check_vertex(vertices, end)
        matrix[start][end] = 1
        if not directed:
            matrix[end][start] = 1
    return matrix


def weight_matrix(
    vertices: int, edges: Iterable[tuple[int, int, int]], directed: bool = False
) -> list[list[int]]:
    """Build a weight matrix from (start, end, weight) triples; 0 means no edge."""
    matrix = _empty_matrix(vertices)
    for start, end, weight in edges:
        _check_vertex(vertices, start)
        _check_vertex(vertices, end)
        matrix[start][end] = weight
        if not directed:
            matrix[end][start] = weight
    return matrix


def bfs_level(adjacency: Matrix, source: int, target: int) -> int | None:
    """Return the position at which a breadth-first search from source reaches target.

    The source itself is at position 0 and every vertex taken from the queue
    advances the count by one. Returns None when target is unreachable.
    """
    count = len(adjacency)
    _check_vertex(count, source)
    _check_vertex(count, target)
    visited = {source}
    queue = deque([source])
    position = -1
    while queue:
        node = queue.popleft()
        position += 1
        if node == target:
            return position
        for neighbour, linked in enumerate(adjacency[node]):
            if linked and neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)
    return None


def _depth_first(adjacency: Matrix, start: int, visited: list[bool]) -> list[int]:
    visited[start] = True
    order = [start]
    stack = [iter(enumerate(adjacency[start]))]
    while stack:
        for neighbour, linked in stack[-1]:
            if linked and not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                stack.append(iter(enumerate(adjacency[neighbour])))
                break
        else:
            stack.pop()
    return order


def connected_components(adjacency: Matrix) -> list[list[int]]:
    """Return the connected components, each in depth-first visiting order."""
    visited = [False] * len(adjacency)
    components = []
    for vertex in range(len(adjacency)):
        if not visited[vertex]:
            components.append(_depth_first(adjacency, vertex, visited))
    return components


def _closest_unvisited(distances: list[float], visited: list[bool]) -> int | None:
    candidates = [
        vertex
        for vertex, distance in enumerate(distances)
        if not visited[vertex] and distance < math.inf
    ]
    if not candidates:
        return None
    return min(candidates, key=distances.__getitem__)


def dijkstra(weights: Matrix, source: int, destination: int) -> ShortestPath | None:
    """Find the shortest path from source to destination, or None if there is none."""
    count = len(weights)
    _check_vertex(count, source)
    _check_vertex(count, destination)
    distances: list[float] = [math.inf] * count
    parents: list[int | None] = [None] * count
    visited = [False] * count
    distances[source] = 0
    for _ in range(count - 1):
        current = _closest_unvisited(distances, visited)
        if current is None:
            break
        visited[current] = True
        for neighbour, weight in enumerate(weights[current]):
            if weight and not visited[neighbour]:
                candidate = distances[current] + weight
                if candidate < distances[neighbour]:
                    distances[neighbour] = candidate
                    parents[neighbour] = current
    if distances[destination] == math.inf:
        return None
    path = []
    vertex: int | None = destination
    while vertex is not None:
        path.append(vertex)
        vertex = parents[vertex]
    return ShortestPath(tuple(reversed(path)), int(distances[destination]))


def prim_mst(weights: Matrix) -> list[tuple[int, int, int]]:
    """Return a minimum spanning tree grown from vertex 0.

    Each edge is (parent, vertex, weight), listed by vertex from 1 upwards.
    Raises ValueError when the graph is not connected.
    """
    count = len(weights)
    if count == 0:
        return []
    distances: list[float] = [math.inf] * count
    parents: list[int | None] = [None] * count
    visited = [False] * count
    distances[0] = 0
    for _ in range(count - 1):
        current = _closest_unvisited(distances, visited)
        if current is None:
            raise ValueError("graph is not connected")
        visited[current] = True
        for neighbour, weight in enumerate(weights[current]):
            if weight and not visited[neighbour] and weight < distances[neighbour]:
                distances[neighbour] = weight
                parents[neighbour] = current
    edges = []
    for vertex in range(1, count):
        parent = parents[vertex]
        if parent is None:
            raise ValueError("graph is not connected")
        edges.append((parent, vertex, weights[vertex][parent]))
    return edges


def mst_edges_by_weight(weights: Matrix) -> list[tuple[int, int, int]]:
    """Return the minimum spanning tree edges ordered by weight, ties kept in vertex order."""
    return sorted(prim_mst(weights), key=lambda edge: edge[2])