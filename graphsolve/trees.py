"""Problems on trees: subordinates, diameter, eccentricities, distance sums, matching."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Edge = tuple[int, int]


def _adjacency(n: int, edges: Iterable[Edge]) -> list[list[int]]:
    """Adjacency lists of an undirected graph on nodes 1..n."""
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for a, b in edges:
        for node in (a, b):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is outside 1..{n}")
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def _rooted(adjacency: Sequence[Sequence[int]], root: int = 1) -> tuple[list[int], list[int]]:
    """Breadth-first order from root and the parent of every node (0 above the root).

    Raises ValueError if some node cannot be reached from root.
    """
    parent = [-1] * len(adjacency)
    parent[root] = 0
    order = [root]
    for node in order:
        for neighbour in adjacency[node]:
            if parent[neighbour] == -1:
                parent[neighbour] = node
                order.append(neighbour)
    if len(order) != len(adjacency) - 1:
        raise ValueError("the graph is not connected")
    return order, parent


def _distances(adjacency: Sequence[Sequence[int]], source: int) -> list[int]:
    order, parent = _rooted(adjacency, source)
    distance = [0] * len(adjacency)
    for node in order[1:]:
        distance[node] = distance[parent[node]] + 1
    return distance


def _farthest(distance: Sequence[int]) -> int:
    return max(range(1, len(distance)), key=distance.__getitem__)


def subordinates(bosses: Sequence[int]) -> list[int]:
    """Count the subordinates of each employee 1..n.

    bosses[i] is the boss of employee i + 2; employee 1 is the director.
    """
    n = len(bosses) + 1
    children: list[list[int]] = [[] for _ in range(n + 1)]
    for employee, boss in enumerate(bosses, start=2):
        if not 1 <= boss <= n:
            raise ValueError(f"boss {boss} is outside 1..{n}")
        children[boss].append(employee)
    order = [1]
    for employee in order:
        order.extend(children[employee])
    if len(order) != n:
        raise ValueError("the bosses do not form a tree")
    counts = [0] * (n + 1)
    for employee in reversed(order[1:]):
        counts[bosses[employee - 2]] += counts[employee] + 1
    return counts[1:]


def tree_diameter(n: int, edges: Iterable[Edge]) -> int:
    """Return the number of edges on the longest path of the tree."""
    adjacency = _adjacency(n, edges)
    end = _farthest(_distances(adjacency, 1))
    return max(_distances(adjacency, end))


def tree_distances(n: int, edges: Iterable[Edge]) -> list[int]:
    """For each node 1..n, return the largest distance to any other node."""
    adjacency = _adjacency(n, edges)
    first = _farthest(_distances(adjacency, 1))
    from_first = _distances(adjacency, first)
    second = _farthest(from_first)
    from_second = _distances(adjacency, second)
    return [max(a, b) for a, b in zip(from_first[1:], from_second[1:])]


def tree_distance_sums(n: int, edges: Iterable[Edge]) -> list[int]:
    """For each node 1..n, return the sum of its distances to all other nodes."""
    adjacency = _adjacency(n, edges)
    order, parent = _rooted(adjacency)
    size = [1] * (n + 1)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
    depth = [0] * (n + 1)
    for node in order[1:]:
        depth[node] = depth[parent[node]] + 1
    total = [0] * (n + 1)
    total[1] = sum(depth)
    for node in order[1:]:
        total[node] = total[parent[node]] + n - 2 * size[node]
    return total[1:]


def tree_matching(n: int, edges: Iterable[Edge]) -> int:
    """Return the largest number of node-disjoint edges that can be chosen."""
    adjacency = _adjacency(n, edges)
    order, parent = _rooted(adjacency)
    free = [0] * (n + 1)
    matched = [0] * (n + 1)
    for node in reversed(order):
        children = [child for child in adjacency[node] if child != parent[node]]
        free[node] = sum(max(free[child], matched[child]) for child in children)
        matched[node] = max(
            (
                free[child] + 1 + free[node] - max(matched[child], free[child])
                for child in children
            ),
            default=0,
        )
    return max(matched[1], free[1])