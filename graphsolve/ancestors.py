"""Tree queries answered by jumping up ancestors: bosses, common bosses, distances."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from graphsolve.functional import _Lifting


def _parents(bosses: Sequence[int]) -> list[int]:
    """Parent table for employees 1..n, with 0 standing above the root."""
    n = len(bosses) + 1
    for boss in bosses:
        if not 1 <= boss <= n:
            raise ValueError(f"boss {boss} is outside 1..{n}")
    return [0, 0, *bosses]


def _depths(parents: Sequence[int]) -> list[int]:
    depth = {1: 0}
    for start in range(2, len(parents)):
        chain: list[int] = []
        on_chain: set[int] = set()
        node = start
        while node not in depth:
            if node in on_chain:
                raise ValueError("the bosses do not form a tree")
            chain.append(node)
            on_chain.add(node)
            node = parents[node]
        level = depth[node]
        for member in reversed(chain):
            level += 1
            depth[member] = level
    return [depth.get(node, -1) for node in range(len(parents))]


def _common_ancestor(lifting: _Lifting, depth: Sequence[int], a: int, b: int) -> int:
    if depth[a] < depth[b]:
        a, b = b, a
    a = lifting.advance(a, depth[a] - depth[b])
    if a == b:
        return a
    for index in reversed(range(depth[a].bit_length())):
        table = lifting.level(index)
        if table[a] != table[b]:
            a, b = table[a], table[b]
    return lifting.level(0)[a]


def _check(node: int, n: int) -> None:
    if not 1 <= node <= n:
        raise ValueError(f"node {node} is outside 1..{n}")


def company_queries(bosses: Sequence[int], queries: Iterable[tuple[int, int]]) -> list[int]:
    """Answer queries (x, k): the boss k levels above employee x, or -1.

    bosses[i] is the boss of employee i + 2; employee 1 is the director.
    """
    parents = _parents(bosses)
    lifting = _Lifting(parents)
    answers = []
    for employee, levels in queries:
        _check(employee, len(parents) - 1)
        boss = lifting.advance(employee, levels)
        answers.append(-1 if boss == 0 else boss)
    return answers


def company_queries_ii(
    bosses: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer queries (a, b): the lowest boss common to employees a and b."""
    parents = _parents(bosses)
    depth = _depths(parents)
    lifting = _Lifting(parents)
    answers = []
    for a, b in queries:
        _check(a, len(parents) - 1)
        _check(b, len(parents) - 1)
        answers.append(_common_ancestor(lifting, depth, a, b))
    return answers


def distance_queries(
    n: int, edges: Iterable[tuple[int, int]], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer queries (a, b): the number of edges between nodes a and b of a tree."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    parents = [0] * (n + 1)
    depth = [-1] * (n + 1)
    depth[1] = 0
    stack = [1]
    while stack:
        node = stack.pop()
        for neighbour in adjacency[node]:
            if depth[neighbour] == -1 and neighbour != 0:
                parents[neighbour] = node
                depth[neighbour] = depth[node] + 1
                stack.append(neighbour)
    lifting = _Lifting(parents)
    answers = []
    for a, b in queries:
        _check(a, n)
        _check(b, n)
        if depth[a] == -1 or depth[b] == -1:
            raise ValueError("the nodes are not connected to node 1")
        common = _common_ancestor(lifting, depth, a, b)
        answers.append(depth[a] + depth[b] - 2 * depth[common])
    return answers