"""Graphs held as adjacency lists or matrices, with breadth- and depth-first traversal."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Hashable, Iterable, Iterator


class UndirectedGraph:
    """An undirected graph on the vertices ``0 .. vertex_count - 1``."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must be non-negative")
        self._adj: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adj)

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._adj):
            raise IndexError(f"vertex {v} outside 0..{len(self._adj) - 1}")

    def add_edge(self, u: int, v: int) -> None:
        """Connect ``u`` and ``v`` in both directions."""
        self._check(u)
        self._check(v)
        self._adj[u].append(v)
        self._adj[v].append(u)

    def neighbours(self, v: int) -> list[int]:
        """Return the vertices adjacent to ``v`` in the order their edges were added."""
        self._check(v)
        return list(self._adj[v])

    def format(self) -> str:
        """Render every vertex's adjacency list as text."""
        parts = []
        for v, adjacent in enumerate(self._adj):
            arrows = "".join(f"-> {x}" for x in adjacent)
            parts.append(f"\n Adjacency list of vertex {v}\n head {arrows}\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.format()


class DirectedGraph:
    """A directed graph whose vertices are any hashable values."""

    def __init__(self) -> None:
        self._adj: defaultdict[Hashable, list[Hashable]] = defaultdict(list)

    def add_edge(self, v: Hashable, w: Hashable) -> None:
        """Add an edge from ``v`` to ``w``."""
        self._adj[v].append(w)

    def _successors(self, v: Hashable) -> list[Hashable]:
        return self._adj.get(v, [])

    def bfs(self, start: Hashable) -> list[Hashable]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        visited = {start}
        order: list[Hashable] = []
        pending = deque([start])
        while pending:
            vertex = pending.popleft()
            order.append(vertex)
            for nxt in self._successors(vertex):
                if nxt not in visited:
                    visited.add(nxt)
                    pending.append(nxt)
        return order

    def dfs(self, start: Hashable) -> list[Hashable]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        visited = {start}
        order: list[Hashable] = [start]
        frames: list[Iterator[Hashable]] = [iter(self._successors(start))]
        while frames:
            for nxt in frames[-1]:
                if nxt not in visited:
                    visited.add(nxt)
                    order.append(nxt)
                    frames.append(iter(self._successors(nxt)))
                    break
            else:
                frames.pop()
        return order


def adjacency_matrix(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build an ``(n + 1) x (n + 1)`` symmetric 0/1 matrix for undirected ``edges``.

    Vertices run from 0 to ``n`` inclusive, so 1-based numbering fits too.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    matrix = [[0] * (n + 1) for _ in range(n + 1)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex <= n:
                raise IndexError(f"vertex {vertex} outside 0..{n}")
        matrix[u][v] = 1
        matrix[v][u] = 1
    return matrix