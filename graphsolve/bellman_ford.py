"""Bellman-Ford problems: best score with positive cycles, and negative cycle search."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from graphsolve.undirected import NoSolutionError

WeightedEdge = tuple[int, int, int]


def _reaches(target: int, edges: list[WeightedEdge]) -> set[int]:
    """Return every node from which target can be reached."""
    reverse: defaultdict[int, list[int]] = defaultdict(list)
    for a, b, _ in edges:
        reverse[b].append(a)
    seen = {target}
    stack = [target]
    while stack:
        for previous in reverse[stack.pop()]:
            if previous not in seen:
                seen.add(previous)
                stack.append(previous)
    return seen


def high_score(n: int, edges: Iterable[WeightedEdge]) -> int:
    """Return the largest score of a walk from room 1 to room n.

    Raises NoSolutionError if the score can grow without bound or n cannot be reached.
    """
    negated = [(a, b, -c) for a, b, c in edges]
    distance = {1: 0}
    for _ in range(n - 1):
        changed = False
        for a, b, c in negated:
            if a in distance and (b not in distance or distance[a] + c < distance[b]):
                distance[b] = distance[a] + c
                changed = True
        if not changed:
            break
    marked: set[int] = set()
    for a, b, c in negated:
        if a in distance and (b not in distance or distance[a] + c < distance[b]):
            marked.update((a, b))
    if marked and marked & _reaches(n, negated):
        raise NoSolutionError("the score can be arbitrarily large")
    if n not in distance:
        raise NoSolutionError(f"no route from 1 to {n}")
    return -distance[n]


def find_negative_cycle(n: int, edges: Iterable[WeightedEdge]) -> list[int] | None:
    """Return a cycle of negative total weight, first node repeated last, or None."""
    edges = list(edges)
    distance: defaultdict[int, int] = defaultdict(int)
    for _ in range(n - 1):
        for a, b, c in edges:
            if distance[a] + c < distance[b]:
                distance[b] = distance[a] + c
    parent: dict[int, int] = {}
    for _ in range(n):
        for a, b, c in edges:
            if distance[a] + c < distance[b]:
                distance[b] = distance[a] + c
                parent[b] = a
    if not parent:
        return None
    start = min(parent)
    chain = [start]
    seen = {start}
    current = parent[start]
    while current not in seen:
        chain.append(current)
        seen.add(current)
        current = parent[current]
    chain.append(current)
    chain.reverse()
    cycle = [chain[0]]
    for node in chain[1:]:
        cycle.append(node)
        if node == chain[0]:
            break
    return cycle