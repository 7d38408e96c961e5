"""Shortest routes in weighted graphs: single source, all pairs, discounts and route counts."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable

from graphsolve.undirected import NoSolutionError

WeightedEdge = tuple[int, int, int]

MODULUS = 10**9 + 7


def _adjacency(
    edges: Iterable[WeightedEdge], reverse: bool = False
) -> defaultdict[int, list[tuple[int, int]]]:
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for a, b, cost in edges:
        if reverse:
            adjacency[b].append((a, cost))
        else:
            adjacency[a].append((b, cost))
    return adjacency


def _dijkstra(adjacency: defaultdict[int, list[tuple[int, int]]], source: int) -> dict[int, int]:
    """Return the distance from source to every node it reaches."""
    distance = {source: 0}
    done: set[int] = set()
    heap = [(0, source)]
    while heap:
        current, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        for neighbour, cost in adjacency[node]:
            if neighbour in done:
                continue
            candidate = current + cost
            if candidate < distance.get(neighbour, math.inf):
                distance[neighbour] = candidate
                heapq.heappush(heap, (candidate, neighbour))
    return distance


def shortest_path(n: int, edges: Iterable[WeightedEdge]) -> list[int | None]:
    """Return the shortest distance from city 1 to each city 1..n over directed flights.

    A city that cannot be reached gets None.
    """
    distance = _dijkstra(_adjacency(edges), 1)
    return [distance.get(city) for city in range(1, n + 1)]


def all_pairs_shortest_paths(
    n: int, edges: Iterable[WeightedEdge], queries: Iterable[tuple[int, int]]
) -> list[int | None]:
    """Answer shortest-distance queries between cities 1..n joined by two-way roads.

    A pair with no connecting route gets None.
    """
    table = [[math.inf] * (n + 1) for _ in range(n + 1)]
    for a, b, cost in edges:
        table[a][b] = min(table[a][b], cost)
        table[b][a] = min(table[b][a], cost)
    for city in range(1, n + 1):
        table[city][city] = 0
    for k in range(n + 1):
        via_row = table[k]
        for i in range(n + 1):
            to_via = table[i][k]
            if to_via == math.inf:
                continue
            table[i] = [min(old, to_via + onward) for old, onward in zip(table[i], via_row)]
    answers: list[int | None] = []
    for source, target in queries:
        value = table[source][target]
        answers.append(None if value == math.inf else int(value))
    return answers


def flight_discount(n: int, edges: Iterable[WeightedEdge]) -> int:
    """Return the cheapest price from city 1 to n when one flight may be taken at half price.

    Halving rounds down. Raises NoSolutionError if n cannot be reached from 1.
    """
    edges = list(edges)
    from_start = _dijkstra(_adjacency(edges), 1)
    to_end = _dijkstra(_adjacency(edges, reverse=True), n)
    best: int | None = None
    for a, b, cost in edges:
        if a not in from_start or b not in to_end:
            continue
        price = from_start[a] + to_end[b] + cost // 2
        if best is None or price < best:
            best = price
    if best is None:
        raise NoSolutionError(f"no route from 1 to {n}")
    return best


def flight_routes(n: int, edges: Iterable[WeightedEdge], k: int) -> list[int]:
    """Return the k cheapest route prices from city 1 to n, in increasing order.

    Routes may revisit cities. Fewer than k prices come back when fewer routes exist.
    """
    if k < 1:
        raise ValueError("k must be at least 1")
    adjacency = _adjacency(edges)
    found: defaultdict[int, list[int]] = defaultdict(list)
    heap = [(0, 1)]
    while heap:
        price, node = heapq.heappop(heap)
        prices = found[node]
        if len(prices) >= k:
            continue
        prices.append(price)
        for neighbour, cost in adjacency[node]:
            if len(found[neighbour]) < k:
                heapq.heappush(heap, (price + cost, neighbour))
    return list(found[n])


def investigation(n: int, edges: Iterable[WeightedEdge]) -> tuple[int, int, int, int]:
    """Study the cheapest routes from city 1 to n over directed flights.

    Returns (price, number of cheapest routes modulo 10**9 + 7,
    fewest flights on a cheapest route, most flights on a cheapest route).
    Raises NoSolutionError if n cannot be reached from 1.
    """
    adjacency = _adjacency(edges)
    distance = {1: 0}
    routes = {1: 1}
    fewest = {1: 0}
    most = {1: 0}
    done: set[int] = set()
    heap = [(0, 1)]
    while heap:
        _, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        for neighbour, cost in adjacency[node]:
            candidate = distance[node] + cost
            known = distance.get(neighbour)
            if known == candidate:
                routes[neighbour] = (routes[neighbour] + routes[node]) % MODULUS
                fewest[neighbour] = min(fewest[neighbour], fewest[node] + 1)
                most[neighbour] = max(most[neighbour], most[node] + 1)
            elif known is None or candidate < known:
                distance[neighbour] = candidate
                routes[neighbour] = routes[node]
                fewest[neighbour] = fewest[node] + 1
                most[neighbour] = most[node] + 1
                heapq.heappush(heap, (candidate, neighbour))
    if n not in distance:
        raise NoSolutionError(f"no route from 1 to {n}")
    return distance[n], routes[n] % MODULUS, fewest[n], most[n]