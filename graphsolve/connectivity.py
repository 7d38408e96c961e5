"""Disjoint sets and the road problems built on them."""

from __future__ import annotations

from collections.abc import Hashable, Iterable

from graphsolve.undirected import NoSolutionError


class DisjointSet:
    """Union-find over hashable items, with path compression and union by size.

    Items are added on first use.
    """

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        for item in items:
            self.find(item)

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the set holding item."""
        parent = self._parent
        if item not in parent:
            parent[item] = item
            self._size[item] = 1
            return item
        root = item
        while parent[root] != root:
            root = parent[root]
        while parent[item] != root:
            parent[item], item = root, parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of a and b; return False if they were already one set."""
        first, second = self.find(a), self.find(b)
        if first == second:
            return False
        if self._size[first] < self._size[second]:
            first, second = second, first
        self._parent[second] = first
        self._size[first] += self._size[second]
        return True

    def size(self, item: Hashable) -> int:
        """Return the number of items in the set holding item."""
        return self._size[self.find(item)]


def road_reparation(n: int, edges: Iterable[tuple[int, int, int]]) -> int:
    """Return the least total cost of repairs that connects cities 1..n.

    Raises NoSolutionError if the cities cannot all be connected.
    """
    sets = DisjointSet(range(1, n + 1))
    total = 0
    for a, b, cost in sorted(edges, key=lambda edge: (edge[2], edge[0], edge[1])):
        if sets.union(a, b):
            total += cost
    root = sets.find(1)
    if any(sets.find(city) != root for city in range(1, n + 1)):
        raise NoSolutionError("the cities cannot all be connected")
    return total


def road_construction(n: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """After each new road, report (number of components, size of the largest one)."""
    sets = DisjointSet(range(1, n + 1))
    components = n
    largest = 1
    report: list[tuple[int, int]] = []
    for a, b in edges:
        if sets.union(a, b):
            components -= 1
        largest = max(largest, sets.size(a))
        report.append((components, largest))
    return report