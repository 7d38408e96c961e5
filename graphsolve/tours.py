"""Tours and walks: knight's tours, Hamiltonian and Eulerian routes, de Bruijn strings."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from graphsolve.undirected import NoSolutionError

Edge = tuple[int, int]
Square = tuple[int, int]

MODULUS = 10**9 + 7

_KNIGHT_MOVES = ((2, 1), (2, -1), (1, 2), (1, -2), (-2, 1), (-2, -1), (-1, 2), (-1, -2))
_BOARD = range(1, 9)


def _knight_neighbours(square: Square) -> list[Square]:
    row, col = square
    return [
        (row + dr, col + dc)
        for dr, dc in _KNIGHT_MOVES
        if row + dr in _BOARD and col + dc in _BOARD
    ]


def knight_tour(x: int, y: int) -> list[list[int]]:
    """Return an 8x8 board of move numbers for a knight's tour starting at column x, row y.

    Rows and columns are numbered 1..8; the result is indexed [row - 1][column - 1].
    """
    if x not in _BOARD or y not in _BOARD:
        raise ValueError("the start square must lie on an 8x8 board")
    degree = {(r, c): len(_knight_neighbours((r, c))) for r in _BOARD for c in _BOARD}
    board: dict[Square, int] = {}

    def visit(square: Square, step: int) -> bool:
        if step == 65:
            return True
        if square in board:
            return False
        board[square] = step
        around = _knight_neighbours(square)
        for neighbour in around:
            degree[neighbour] -= 1
        ranked = sorted(around, key=lambda s: (degree[s], -s[0], -s[1]))
        if any(visit(neighbour, step + 1) for neighbour in ranked):
            return True
        del board[square]
        for neighbour in around:
            degree[neighbour] += 1
        return False

    if not visit((y, x), 1):
        raise NoSolutionError("no knight's tour from this square")
    return [[board[(r, c)] for c in _BOARD] for r in _BOARD]


def hamiltonian_flights(n: int, edges: Iterable[Edge]) -> int:
    """Count routes from 1 to n visiting every city exactly once, modulo 10**9 + 7."""
    incoming: list[list[int]] = [[] for _ in range(n)]
    for a, b in edges:
        incoming[b - 1].append(a - 1)
    full = (1 << n) - 1
    last = 1 << (n - 1)
    ways = [[0] * n for _ in range(full + 1)]
    ways[1][0] = 1
    for mask in range(2, full + 1):
        if not mask & 1:
            continue
        if mask & last and mask != full:
            continue
        row = ways[mask]
        for end, sources in enumerate(incoming):
            if not mask >> end & 1:
                continue
            previous = ways[mask ^ (1 << end)]
            total = row[end]
            for source in sources:
                if mask >> source & 1:
                    total = (total + previous[source]) % MODULUS
            row[end] = total
    return ways[full][n - 1]


def _eulerian_walk(
    adjacency: defaultdict[int, list[tuple[int, int]]], start: int, edge_count: int
) -> list[int]:
    """Return the nodes of a walk using each reachable edge once, in finishing order."""
    used = [False] * edge_count
    stack = [start]
    walk: list[int] = []
    while stack:
        outgoing = adjacency[stack[-1]]
        while outgoing and used[outgoing[-1][1]]:
            outgoing.pop()
        if outgoing:
            target, edge = outgoing.pop()
            used[edge] = True
            stack.append(target)
        else:
            walk.append(stack.pop())
    return walk


def de_bruijn(n: int) -> str:
    """Return a shortest bit string containing every n-bit string as a substring."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return "01"
    nodes = 1 << (n - 1)
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for node in range(nodes):
        adjacency[node].append((((node << 1) + 1) % nodes, 2 * node))
        adjacency[node].append(((node << 1) % nodes, 2 * node + 1))
    walk = _eulerian_walk(adjacency, 0, 2 * nodes)
    walk.reverse()
    bits = ("0" if (u << 1) % nodes == v else "1" for u, v in zip(walk, walk[1:]))
    return "0" * (n - 1) + "".join(bits)


def mail_delivery(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a circuit from city 1 using every two-way street exactly once.

    Raises NoSolutionError if no such circuit exists.
    """
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    degree = [0] * (n + 1)
    count = 0
    for index, (a, b) in enumerate(edges):
        adjacency[a].append((b, index))
        adjacency[b].append((a, index))
        degree[a] += 1
        degree[b] += 1
        count += 1
    if any(d % 2 for d in degree):
        raise NoSolutionError("some city has an odd number of streets")
    walk = _eulerian_walk(adjacency, 1, count)
    if len(walk) != count + 1:
        raise NoSolutionError("some streets cannot be reached from city 1")
    return walk


def teleporters_path(n: int, edges: Iterable[Edge]) -> list[int]:
    """Return a route from 1 to n using every one-way teleporter exactly once.

    Raises NoSolutionError if no such route exists.
    """
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    indegree = [0] * (n + 1)
    outdegree = [0] * (n + 1)
    count = 0
    for index, (a, b) in enumerate(edges):
        adjacency[a].append((b, index))
        outdegree[a] += 1
        indegree[b] += 1
        count += 1
    if outdegree[1] - indegree[1] != 1 or indegree[n] - outdegree[n] != 1:
        raise NoSolutionError("the route cannot start at 1 and end at n")
    if any(indegree[city] != outdegree[city] for city in range(2, n)):
        raise NoSolutionError("some city is unbalanced")
    walk = _eulerian_walk(adjacency, 1, count)
    if len(walk) != count + 1:
        raise NoSolutionError("some teleporters cannot be reached from city 1")
    walk.reverse()
    return walk