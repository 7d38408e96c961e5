"""Subtree sums and root-path sums on a tree with changing node values."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from graphsolve.segment_trees import LazySegmentTree, SegmentTree
from graphsolve.trees import _adjacency

Edge = tuple[int, int]


@dataclass
class _Tour:
    order: list[int]
    parent: list[int]
    position: list[int]
    size: list[int]


def _euler_tour(n: int, edges: Iterable[Edge]) -> _Tour:
    """Preorder from node 1 in which every subtree occupies a contiguous block."""
    adjacency = _adjacency(n, edges)
    parent = [0] * (n + 1)
    position = [-1] * (n + 1)
    order: list[int] = []
    stack = [1]
    while stack:
        node = stack.pop()
        if position[node] != -1:
            raise ValueError("the graph is not a tree")
        position[node] = len(order)
        order.append(node)
        for neighbour in reversed(adjacency[node]):
            if neighbour != parent[node] and position[neighbour] == -1:
                parent[neighbour] = node
                stack.append(neighbour)
    if len(order) != n:
        raise ValueError("the graph is not connected")
    size = [1] * (n + 1)
    for node in reversed(order[1:]):
        size[parent[node]] += size[node]
    return _Tour(order, parent, position, size)


def _node(query: Sequence[int], n: int) -> int:
    node = query[1]
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")
    return node


def subtree_queries(
    values: Sequence[int], edges: Iterable[Edge], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer queries on a tree rooted at node 1; values[i] belongs to node i + 1.

    A query (1, s, x) sets the value of node s to x; a query (2, s) asks for
    the sum of values in the subtree of s. Returns the answers in order.
    """
    n = len(values)
    tour = _euler_tour(n, edges)
    tree = SegmentTree([values[node - 1] for node in tour.order])
    answers = []
    for query in queries:
        kind = query[0]
        node = _node(query, n)
        start = tour.position[node]
        if kind == 1:
            tree.update(start, query[2])
        elif kind == 2:
            answers.append(tree.query(start, start + tour.size[node]))
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers


def path_queries(
    values: Sequence[int], edges: Iterable[Edge], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer queries on a tree rooted at node 1; values[i] belongs to node i + 1.

    A query (1, s, x) sets the value of node s to x; a query (2, s) asks for
    the sum of values on the path from node 1 to s. Returns the answers in order.
    """
    n = len(values)
    tour = _euler_tour(n, edges)
    current = [0, *values]
    path_sum = [0] * (n + 1)
    for node in tour.order:
        path_sum[node] = path_sum[tour.parent[node]] + current[node]
    tree = LazySegmentTree([path_sum[node] for node in tour.order])
    answers = []
    for query in queries:
        kind = query[0]
        node = _node(query, n)
        start = tour.position[node]
        if kind == 1:
            value = query[2]
            difference = value - current[node]
            current[node] = value
            tree.add(start, start + tour.size[node] - 1, difference)
        elif kind == 2:
            answers.append(tree.range_sum(start, start))
        else:
            raise ValueError(f"unknown query type {kind}")
    return answers