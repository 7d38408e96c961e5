"""Strongly connected components and the problems built on them."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from graphsolve.directed import _adjacency, _finish_order
from graphsolve.undirected import NoSolutionError

Edge = tuple[int, int]


def strongly_connected_components(n: int, edges: Iterable[Edge]) -> list[int]:
    """Label nodes 1..n by strongly connected component, counting labels from 1.

    Labels follow a topological order of the component graph: every edge
    leads from a component to one with the same or a larger label.
    """
    edges = list(edges)
    forward = _adjacency(edges)
    backward = _adjacency(edges, reverse=True)

    seen: set[int] = set()
    order: list[int] = []
    for node in range(1, n + 1):
        if node not in seen:
            order.extend(_finish_order(forward, node, seen))

    label: dict[int, int] = {}
    assigned: set[int] = set()
    count = 0
    for node in reversed(order):
        if node in assigned:
            continue
        count += 1
        for member in _finish_order(backward, node, assigned):
            label[member] = count
    return [label[node] for node in range(1, n + 1)]


def planets_and_kingdoms(n: int, edges: Iterable[Edge]) -> tuple[int, list[int]]:
    """Return the number of kingdoms and the kingdom of each planet 1..n."""
    labels = strongly_connected_components(n, edges)
    return max(labels, default=0), labels


def coin_collector(coins: list[int], edges: Iterable[Edge]) -> int:
    """Return the most coins collectable on a walk; coins[i] lies in room i + 1."""
    edges = list(edges)
    labels = strongly_connected_components(len(coins), edges)
    count = max(labels, default=0)

    totals = [0] * (count + 1)
    for label, amount in zip(labels, coins):
        totals[label] += amount

    successors: defaultdict[int, set[int]] = defaultdict(set)
    for a, b in edges:
        source, target = labels[a - 1], labels[b - 1]
        if source != target:
            successors[source].add(target)

    best = [0] * (count + 1)
    for label in range(count, 0, -1):
        best[label] = totals[label] + max((best[s] for s in successors[label]), default=0)
    return max(best)


def giant_pizza(m: int, wishes: Iterable[tuple[str, int, str, int]]) -> list[str]:
    """Choose '+' or '-' for toppings 1..m so that every wish holds.

    A wish (sign1, a, sign2, b) asks that topping a has sign1 or topping b
    has sign2. Raises NoSolutionError if no choice satisfies every wish.
    """

    def literal(sign: str, topping: int) -> int:
        if not 1 <= topping <= m:
            raise ValueError(f"topping {topping} is outside 1..{m}")
        if sign == "+":
            return topping
        if sign == "-":
            return topping + m
        raise ValueError(f"sign must be '+' or '-', not {sign!r}")

    def negate(node: int) -> int:
        return node - m if node > m else node + m

    edges: list[Edge] = []
    for first, a, second, b in wishes:
        x, y = literal(first, a), literal(second, b)
        edges.append((negate(x), y))
        edges.append((negate(y), x))

    labels = strongly_connected_components(2 * m, edges)
    if any(labels[t - 1] == labels[t + m - 1] for t in range(1, m + 1)):
        raise NoSolutionError("the wishes contradict each other")

    members: defaultdict[int, list[int]] = defaultdict(list)
    for node, label in enumerate(labels, start=1):
        members[label].append(node)

    successor_sets: defaultdict[int, set[int]] = defaultdict(set)
    for a, b in edges:
        source, target = labels[a - 1], labels[b - 1]
        if source != target:
            successor_sets[source].add(target)
    dag: defaultdict[int, list[int]] = defaultdict(list)
    for label, targets in successor_sets.items():
        dag[label] = sorted(targets)

    chosen: set[int] = set()
    seen: set[int] = set()
    for component in range(1, max(labels, default=0) + 1):
        if component in seen:
            continue
        for finished in _finish_order(dag, component, seen):
            for node in members[finished]:
                if node not in chosen and negate(node) not in chosen:
                    chosen.add(node)
    return ["+" if topping in chosen else "-" for topping in range(1, m + 1)]