"""Problems on functional graphs, where each planet has exactly one teleporter."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class _Lifting:
    """Jump tables for following a successor function many steps at once."""

    def __init__(self, successor: Sequence[int]) -> None:
        self._levels = [list(successor)]

    def level(self, index: int) -> list[int]:
        """Return the table mapping each node to its successor 2**index steps on."""
        while len(self._levels) <= index:
            previous = self._levels[-1]
            self._levels.append([previous[node] for node in previous])
        return self._levels[index]

    def advance(self, node: int, steps: int) -> int:
        """Return the node reached after the given number of steps."""
        if steps < 0:
            raise ValueError("steps must not be negative")
        index = 0
        while steps:
            if steps & 1:
                node = self.level(index)[node]
            steps >>= 1
            index += 1
        return node


@dataclass
class _Structure:
    successor: list[int]
    cycle_of: list[int]
    position: list[int]
    depth: list[int]
    entry: list[int]
    lengths: list[int]


def _successors(destinations: Sequence[int]) -> list[int]:
    n = len(destinations)
    successor = []
    for destination in destinations:
        if not 1 <= destination <= n:
            raise ValueError(f"destination {destination} is outside 1..{n}")
        successor.append(destination - 1)
    return successor


def _analyse(destinations: Sequence[int]) -> _Structure:
    """Find the cycles and, for every node, how far it lies from its cycle."""
    successor = _successors(destinations)
    n = len(successor)
    cycle_of = [-1] * n
    position = [-1] * n
    lengths: list[int] = []
    done = [False] * n
    for start in range(n):
        if done[start]:
            continue
        path: list[int] = []
        index: dict[int, int] = {}
        node = start
        while not done[node] and node not in index:
            index[node] = len(path)
            path.append(node)
            node = successor[node]
        if node in index:
            cycle = path[index[node]:]
            for place, member in enumerate(cycle):
                cycle_of[member] = len(lengths)
                position[member] = place
            lengths.append(len(cycle))
        for member in path:
            done[member] = True

    depth = [0] * n
    entry = list(range(n))
    known = [c != -1 for c in cycle_of]
    for start in range(n):
        chain: list[int] = []
        node = start
        while not known[node]:
            chain.append(node)
            node = successor[node]
        for member in reversed(chain):
            depth[member] = depth[node] + 1
            entry[member] = entry[node]
            cycle_of[member] = cycle_of[node]
            known[member] = True
            node = member
    return _Structure(successor, cycle_of, position, depth, entry, lengths)


def planet_cycles(destinations: Sequence[int]) -> list[int]:
    """For each planet, count teleports made before some planet is reached a second time.

    destinations[i] is where the teleporter of planet i + 1 leads.
    """
    structure = _analyse(destinations)
    return [
        depth + structure.lengths[cycle]
        for depth, cycle in zip(structure.depth, structure.cycle_of)
    ]


def planet_queries(
    destinations: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer queries (x, k): the planet reached from planet x after k teleports."""
    successor = _successors(destinations)
    n = len(successor)
    lifting = _Lifting(successor)
    answers = []
    for planet, steps in queries:
        if not 1 <= planet <= n:
            raise ValueError(f"planet {planet} is outside 1..{n}")
        answers.append(lifting.advance(planet - 1, steps) + 1)
    return answers


def planet_queries_ii(
    destinations: Sequence[int], queries: Iterable[tuple[int, int]]
) -> list[int]:
    """Answer queries (a, b): the fewest teleports from planet a to planet b, or -1."""
    structure = _analyse(destinations)
    n = len(structure.successor)
    lifting = _Lifting(structure.successor)
    depth, cycle_of = structure.depth, structure.cycle_of

    def answer(a: int, b: int) -> int:
        if cycle_of[a] != cycle_of[b]:
            return -1
        if depth[b] == 0:
            length = structure.lengths[cycle_of[a]]
            around = structure.position[b] - structure.position[structure.entry[a]]
            return depth[a] + around % length
        if depth[a] == 0 or depth[b] > depth[a]:
            return -1
        difference = depth[a] - depth[b]
        return difference if lifting.advance(a, difference) == b else -1

    answers = []
    for a, b in queries:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"query ({a}, {b}) is outside 1..{n}")
        answers.append(answer(a - 1, b - 1))
    return answers