"""Maximum flow problems: capacities, disjoint routes, minimum cuts and matchings."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Mapping, Sequence

Edge = tuple[int, int]
WeightedEdge = tuple[int, int, int]


def _max_flow(
    adjacency: Mapping[int, Sequence[int]],
    capacity: defaultdict[Edge, int],
    source: int,
    sink: int,
) -> tuple[int, set[int]]:
    """Push augmenting paths found by breadth-first search until none is left.

    Updates capacity in place to the residual capacities and returns the
    total flow with the set of nodes still reachable from source.
    """
    if source == sink:
        raise ValueError("source and sink must differ")
    total = 0
    while True:
        parent: dict[int, int | None] = {source: None}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for neighbour in adjacency.get(node, ()):
                if neighbour in parent or capacity[node, neighbour] <= 0:
                    continue
                parent[neighbour] = node
                queue.append(neighbour)
        if sink not in parent:
            return total, set(parent)
        path: list[Edge] = []
        node = sink
        while node != source:
            previous = parent[node]
            path.append((previous, node))
            node = previous
        amount = min(capacity[edge] for edge in path)
        for u, v in path:
            capacity[u, v] -= amount
            capacity[v, u] += amount
        total += amount


def download_speed(n: int, edges: Iterable[WeightedEdge]) -> int:
    """Return the largest rate at which data can flow from computer 1 to computer n."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    capacity: defaultdict[Edge, int] = defaultdict(int)
    for a, b, c in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
        capacity[a, b] += c
    total, _ = _max_flow(adjacency, capacity, 1, n)
    return total


def _follow_saturated(
    graph: Mapping[int, Sequence[tuple[int, int]]],
    residual: defaultdict[Edge, int],
    n: int,
    used: set[int],
) -> list[int]:
    """Walk from 1 to n over saturated, not yet used edges; return the rooms visited."""
    path = [1]
    if n == 1:
        return path
    visited = {1}
    stack = [iter(graph.get(1, ()))]
    while stack:
        node = path[-1]
        for target, index in stack[-1]:
            if index in used or residual[node, target] != 0:
                continue
            used.add(index)
            if target in visited:
                continue
            visited.add(target)
            path.append(target)
            if target == n:
                return path
            stack.append(iter(graph.get(target, ())))
            break
        else:
            stack.pop()
            path.pop()
    return path


def distinct_routes(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Return as many routes from room 1 to room n as possible, no teleporter used twice."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    graph: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    capacity: defaultdict[Edge, int] = defaultdict(int)
    for index, (a, b) in enumerate(edges):
        adjacency[a].append(b)
        adjacency[b].append(a)
        graph[a].append((b, index))
        capacity[a, b] += 1
    total, _ = _max_flow(adjacency, capacity, 1, n)
    used: set[int] = set()
    routes = (_follow_saturated(graph, capacity, n, used) for _ in range(total))
    return [route for route in routes if route]


def police_chase(n: int, edges: Iterable[Edge]) -> list[Edge]:
    """Return the fewest two-way streets whose closing separates crossing 1 from crossing n."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    capacity: defaultdict[Edge, int] = defaultdict(int)
    for a, b in edges:
        if capacity[a, b] == 0:
            adjacency[a].append(b)
            adjacency[b].append(a)
        capacity[a, b] = 1
        capacity[b, a] = 1
    _, reached = _max_flow(adjacency, capacity, 1, n)
    return [
        (node, neighbour)
        for node in sorted(reached)
        for neighbour in adjacency[node]
        if neighbour not in reached
    ]


def school_dance(n_boys: int, n_girls: int, pairs: Iterable[Edge]) -> list[Edge]:
    """Return as many (boy, girl) dance pairs as possible, each pupil dancing at most once."""
    sink = n_boys + n_girls + 1
    neighbours: defaultdict[int, set[int]] = defaultdict(set)
    capacity: defaultdict[Edge, int] = defaultdict(int)

    def connect(a: int, b: int) -> None:
        neighbours[a].add(b)
        neighbours[b].add(a)
        capacity[a, b] = 1

    for boy, girl in pairs:
        if not 1 <= boy <= n_boys or not 1 <= girl <= n_girls:
            raise ValueError(f"pair ({boy}, {girl}) is out of range")
        connect(boy, n_boys + girl)
    for boy in range(1, n_boys + 1):
        connect(0, boy)
    for girl in range(n_boys + 1, sink):
        connect(girl, sink)

    adjacency = {node: sorted(others) for node, others in neighbours.items()}
    _max_flow(adjacency, capacity, 0, sink)
    return [
        (boy, partner - n_boys)
        for boy in range(1, n_boys + 1)
        for partner in adjacency.get(boy, ())
        if partner != 0 and capacity[boy, partner] == 0
    ]