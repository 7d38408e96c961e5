"""Problems on undirected graphs: components, two-colouring, routes and cycles."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable

Edge = tuple[int, int]


class NoSolutionError(ValueError):
    """Raised when a problem instance admits no solution."""


def _adjacency(edges: Iterable[Edge]) -> defaultdict[int, list[int]]:
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def building_roads(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the fewest new roads that connect all cities 1..n.

    Each road joins the smallest city of one component to the smallest
    city of the next component, in increasing order.
    """
    adjacency = _adjacency(edges)
    seen: set[int] = set()
    roots: list[int] = []
    for city in range(1, n + 1):
        if city in seen:
            continue
        roots.append(city)
        seen.add(city)
        stack = [city]
        while stack:
            for neighbour in adjacency[stack.pop()]:
                if neighbour not in seen:
                    seen.add(neighbour)
                    stack.append(neighbour)
    return list(zip(roots, roots[1:]))


def building_teams(n: int, edges: Iterable[Edge]) -> list[int]:
    """Split pupils 1..n into teams 1 and 2 so that friends are apart.

    Raises NoSolutionError if the friendship graph is not bipartite.
    """
    adjacency = _adjacency(edges)
    teams: dict[int, int] = {}
    for start in range(1, n + 1):
        if start in teams:
            continue
        teams[start] = 1
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbour in adjacency[current]:
                if neighbour in teams:
                    if teams[neighbour] == teams[current]:
                        raise NoSolutionError("the graph is not bipartite")
                    continue
                teams[neighbour] = 3 - teams[current]
                queue.append(neighbour)
    return [teams[pupil] for pupil in range(1, n + 1)]


def message_route(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a shortest route of computers from 1 to n.

    Raises NoSolutionError if n cannot be reached from 1.
    """
    adjacency = _adjacency(edges)
    parent: dict[int, int | None] = {1: None}
    queue = deque([1])
    while queue:
        current = queue.popleft()
        if current == n:
            route = []
            node: int | None = n
            while node is not None:
                route.append(node)
                node = parent[node]
            route.reverse()
            return route
        for neighbour in adjacency[current]:
            if neighbour not in parent:
                parent[neighbour] = current
                queue.append(neighbour)
    raise NoSolutionError(f"no route from 1 to {n}")


def round_trip(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a cycle of at least three distinct cities, first city repeated last.

    Raises NoSolutionError if the graph is a forest.
    """
    adjacency = _adjacency(edges)
    visited: set[int] = set()
    for start in range(1, n + 1):
        if start in visited:
            continue
        visited.add(start)
        path = [start]
        stack = [(start, None, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == parent:
                    continue
                if neighbour in visited:
                    path.append(neighbour)
                    cycle = [path.pop()]
                    while len(cycle) <= 2 or cycle[-1] != cycle[0]:
                        cycle.append(path.pop())
                    return cycle
                visited.add(neighbour)
                path.append(neighbour)
                stack.append((neighbour, node, iter(adjacency[neighbour])))
                break
            else:
                stack.pop()
                path.pop()
    raise NoSolutionError("the graph has no cycle")