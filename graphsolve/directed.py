"""Problems on directed graphs: ordering, cycles, longest routes and reachability."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator

from graphsolve.undirected import NoSolutionError

Edge = tuple[int, int]

MODULUS = 10**9 + 7

_GREY = 1
_BLACK = 2


def _adjacency(edges: Iterable[Edge], reverse: bool = False) -> defaultdict[int, list[int]]:
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        if reverse:
            adjacency[b].append(a)
        else:
            adjacency[a].append(b)
    return adjacency


def _finish_order(adjacency, root: int, seen: set[int]) -> Iterator[int]:
    """Yield nodes reachable from root that are not in seen, each after its descendants."""
    seen.add(root)
    stack = [(root, iter(adjacency[root]))]
    while stack:
        node, neighbours = stack[-1]
        for neighbour in neighbours:
            if neighbour not in seen:
                seen.add(neighbour)
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
        else:
            stack.pop()
            yield node


def _search(n: int, edges: Iterable[Edge]) -> tuple[list[int], list[int] | None]:
    """Depth-first search over 1..n: finishing order and the first cycle met, if any."""
    adjacency = _adjacency(edges)
    state: dict[int, int] = {}
    parent: dict[int, int] = {}
    order: list[int] = []
    for start in range(1, n + 1):
        if start in state:
            continue
        state[start] = _GREY
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for neighbour in neighbours:
                colour = state.get(neighbour)
                if colour == _BLACK:
                    continue
                if colour == _GREY:
                    cycle = [neighbour]
                    current = node
                    while current != neighbour:
                        cycle.append(current)
                        current = parent[current]
                    cycle.append(neighbour)
                    cycle.reverse()
                    return order, cycle
                parent[neighbour] = node
                state[neighbour] = _GREY
                stack.append((neighbour, iter(adjacency[neighbour])))
                break
            else:
                stack.pop()
                state[node] = _BLACK
                order.append(node)
    return order, None


def course_schedule(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return an order of courses 1..n in which every prerequisite comes first.

    Raises NoSolutionError if the requirements contain a cycle.
    """
    order, cycle = _search(n, edges)
    if cycle is not None:
        raise NoSolutionError("the requirements contain a cycle")
    return order[::-1]


def round_trip_ii(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a directed cycle, its first city repeated at the end.

    Raises NoSolutionError if the graph is acyclic.
    """
    _, cycle = _search(n, edges)
    if cycle is None:
        raise NoSolutionError("the graph has no cycle")
    return cycle


def longest_flight_route(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a route from 1 to n visiting as many cities as possible in an acyclic graph.

    Raises NoSolutionError if n cannot be reached from 1.
    """
    if n == 1:
        return [1]
    adjacency = _adjacency(edges)
    length: dict[int, int] = {n: 0}
    for node in _finish_order(adjacency, 1, {n}):
        best = -1
        for neighbour in adjacency[node]:
            reach = length.get(neighbour, -1)
            if reach != -1:
                best = max(best, reach + 1)
        length[node] = best
    if length[1] == -1:
        raise NoSolutionError(f"no route from 1 to {n}")
    route = [1]
    current = 1
    while current != n:
        current = max(adjacency[current], key=lambda v: length.get(v, -1))
        route.append(current)
    return route


def game_routes(n: int, edges: Iterable[Edge]) -> int:
    """Count routes from 1 to n in an acyclic graph, modulo 10**9 + 7."""
    if n == 1:
        return 1
    adjacency = _adjacency(edges)
    ways: dict[int, int] = {n: 1}
    for node in _finish_order(adjacency, 1, {n}):
        ways[node] = sum(ways.get(neighbour, 0) for neighbour in adjacency[node]) % MODULUS
    return ways[1]


def flight_routes_check(n: int, edges: Iterable[Edge]) -> Edge | None:
    """Return a pair (a, b) with no route from a to b, or None if every city reaches every other."""
    edges = list(edges)
    forward = set(_finish_order(_adjacency(edges), 1, set()))
    backward = set(_finish_order(_adjacency(edges, reverse=True), 1, set()))
    for city in range(1, n + 1):
        if city not in backward:
            return (city, 1)
        if city not in forward:
            return (1, city)
    return None