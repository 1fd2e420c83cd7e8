"""A directed, weighted graph with traversal and shortest-path algorithms."""

from __future__ import annotations

import math
from collections import deque
from typing import Sequence

INF = math.inf
"""Distance reported for a vertex that cannot be reached."""


class NegativeCycleError(ValueError):
    """Raised when a negative-weight cycle makes shortest paths undefined."""


class Graph:
    """Directed graph whose vertices are numbered ``0 .. len(graph) - 1``.

    Each vertex keeps its outgoing edges as ``(target, weight)`` pairs in
    the order they were added; traversals follow that order.
    """

    def __init__(self) -> None:
        self._adj: list[list[tuple[int, int]]] = []

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._adj):
            raise IndexError(f"node {node} out of range")

    def add_node(self) -> int:
        """Add a vertex and return its number."""
        self._adj.append([])
        return len(self._adj) - 1

    def add_edge(self, a: int, b: int, weight: int) -> None:
        """Add a directed edge from ``a`` to ``b``."""
        self._check(a)
        self._check(b)
        self._adj[a].append((b, weight))

    def neighbors(self, node: int) -> list[tuple[int, int]]:
        """Outgoing edges of ``node`` as ``(target, weight)`` pairs."""
        self._check(node)
        return list(self._adj[node])

    def __len__(self) -> int:
        return len(self._adj)

    # Traversals

    def bfs(self, src: int) -> list[int]:
        """Vertices reachable from ``src`` in breadth-first order."""
        self._check(src)
        visited = {src}
        order: list[int] = []
        queue = deque([src])
        while queue:
            node = queue.popleft()
            order.append(node)
            for child, _ in self._adj[node]:
                if child not in visited:
                    visited.add(child)
                    queue.append(child)
        return order

    def dfs(self, src: int) -> list[int]:
        """Vertices reachable from ``src`` in depth-first (pre-)order."""
        self._check(src)
        visited: set[int] = set()
        order: list[int] = []
        stack = [src]
        while stack:
            node = stack.pop()
            if node in visited:
                continue
            visited.add(node)
            order.append(node)
            stack.extend(
                child for child, _ in reversed(self._adj[node]) if child not in visited
            )
        return order

    def _reachable(self, src: int) -> set[int]:
        seen = {src}
        stack = [src]
        while stack:
            for child, _ in self._adj[stack.pop()]:
                if child not in seen:
                    seen.add(child)
                    stack.append(child)
        return seen

    def is_path(self, src: int, des: int) -> bool:
        """True when ``des`` can be reached from ``src``; a vertex reaches itself."""
        self._check(src)
        self._check(des)
        return des in self._reachable(src)

    def find_scc(self) -> list[list[int]]:
        """Strongly connected components, each led by its lowest vertex."""
        count = len(self._adj)
        assigned = [False] * count
        components: list[list[int]] = []
        for i in range(count):
            if assigned[i]:
                continue
            from_i = self._reachable(i)
            component = [i]
            for j in range(count):
                if (
                    j != i
                    and not assigned[j]
                    and j in from_i
                    and i in self._reachable(j)
                ):
                    assigned[j] = True
                    component.append(j)
            components.append(component)
        return components

    def topological_sort(self) -> list[int]:
        """Vertices in reverse order of depth-first completion."""
        visited = [False] * len(self._adj)
        finished: list[int] = []
        for start in range(len(self._adj)):
            if visited[start]:
                continue
            visited[start] = True
            stack = [(start, iter(self._adj[start]))]
            while stack:
                node, children = stack[-1]
                for child, _ in children:
                    if not visited[child]:
                        visited[child] = True
                        stack.append((child, iter(self._adj[child])))
                        break
                else:
                    stack.pop()
                    finished.append(node)
        finished.reverse()
        return finished

    # Shortest paths

    @staticmethod
    def _relax(u: int, v: int, weight: int, dist: list[float]) -> None:
        if dist[u] != INF and dist[u] + weight < dist[v]:
            dist[v] = dist[u] + weight

    def dijkstra(self, src: int) -> list[float]:
        """Distances from ``src``; unreachable vertices get ``INF``."""
        self._check(src)
        count = len(self._adj)
        dist: list[float] = [INF] * count
        dist[src] = 0
        done = [False] * count
        for _ in range(count - 1):
            u = min((i for i in range(count) if not done[i]), key=dist.__getitem__)
            done[u] = True
            for v, weight in self._adj[u]:
                self._relax(u, v, weight, dist)
        return dist

    def bellman_ford(self, src: int) -> list[float]:
        """Distances from ``src``, allowing negative edge weights.

        Raises ``NegativeCycleError`` when a negative cycle is reachable.
        """
        self._check(src)
        count = len(self._adj)
        dist: list[float] = [INF] * count
        dist[src] = 0
        for _ in range(count - 1):
            for u, edges in enumerate(self._adj):
                for v, weight in edges:
                    self._relax(u, v, weight, dist)
        for u, edges in enumerate(self._adj):
            for v, weight in edges:
                if dist[u] != INF and dist[u] + weight < dist[v]:
                    raise NegativeCycleError("graph contains negative weight cycle")
        return dist

    def floyd_warshall(self) -> list[list[float]]:
        """All-pairs distance matrix; unreachable pairs hold ``INF``."""
        count = len(self._adj)
        dist: list[list[float]] = [[INF] * count for _ in range(count)]
        for u, edges in enumerate(self._adj):
            dist[u][u] = 0
            for v, weight in edges:
                dist[u][v] = weight
        for k in range(count):
            row_k = dist[k]
            for row in dist:
                through = row[k]
                if through == INF:
                    continue
                for j, beyond in enumerate(row_k):
                    if beyond != INF and through + beyond < row[j]:
                        row[j] = through + beyond
        return dist


def format_distances(dist: Sequence[Sequence[float]]) -> str:
    """Render a distance matrix as a tab-separated table."""
    lines = ["Shortest distances (vertex number):"]
    lines.append("   " + "".join(f"{i}\t" for i in range(len(dist))))
    for i, row in enumerate(dist):
        cells = "".join("INF\t" if value == INF else f"{value}\t" for value in row)
        lines.append(f"{i}: {cells}")
    return "\n".join(lines) + "\n"