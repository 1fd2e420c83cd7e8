"""Union-find with path compression and union by rank, plus Kruskal's MST."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge; edges order by weight alone."""

    u: int
    v: int
    weight: int

    def __lt__(self, other: Edge) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight


class DisjointSet:
    """Disjoint sets over the elements ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [1] * size

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._parent):
            raise IndexError(f"element {i} out of range")

    def find(self, i: int) -> int:
        """Return the representative of ``i``'s set, compressing the path."""
        self._check(i)
        root = i
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[i] != root:
            self._parent[i], i = root, self._parent[i]
        return root

    def unite(self, x: int, y: int) -> None:
        s1 = self.find(x)
        s2 = self.find(y)
        if s1 == s2:
            return
        if self._rank[s1] < self._rank[s2]:
            self._parent[s1] = s2
        elif self._rank[s1] > self._rank[s2]:
            self._parent[s2] = s1
        else:
            self._parent[s2] = s1
            self._rank[s1] += 1


def kruskal_mst(edges: Iterable[Edge], vertex_count: int) -> list[Edge]:
    """Return the edges of a minimum spanning forest, lightest first."""
    sets = DisjointSet(vertex_count)
    result = []
    for edge in sorted(edges):
        if sets.find(edge.u) != sets.find(edge.v):
            result.append(edge)
            sets.unite(edge.u, edge.v)
    return result