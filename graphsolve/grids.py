"""Problems on character grids where '#' marks a wall."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

from graphsolve.undirected import NoSolutionError

Cell = tuple[int, int]

_BFS_MOVES = (("U", -1, 0), ("D", 1, 0), ("R", 0, 1), ("L", 0, -1))
_ESCAPE_MOVES = (("L", 0, -1), ("R", 0, 1), ("D", 1, 0), ("U", -1, 0))


def _is_open(grid: Sequence[str], i: int, j: int) -> bool:
    return 0 <= i < len(grid) and 0 <= j < len(grid[i]) and grid[i][j] != "#"


def _neighbours(grid: Sequence[str], cell: Cell) -> Iterator[Cell]:
    i, j = cell
    for _, di, dj in _BFS_MOVES:
        if _is_open(grid, i + di, j + dj):
            yield (i + di, j + dj)


def _locate(grid: Sequence[str], mark: str) -> Cell | None:
    for i, row in enumerate(grid):
        j = row.find(mark)
        if j != -1:
            return (i, j)
    return None


def count_rooms(grid: Sequence[str]) -> int:
    """Count connected regions of non-wall cells."""
    seen: set[Cell] = set()
    rooms = 0
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char == "#" or (i, j) in seen:
                continue
            rooms += 1
            seen.add((i, j))
            stack = [(i, j)]
            while stack:
                for neighbour in _neighbours(grid, stack.pop()):
                    if neighbour not in seen:
                        seen.add(neighbour)
                        stack.append(neighbour)
    return rooms


def labyrinth(grid: Sequence[str]) -> str:
    """Return a shortest string of moves (U, D, L, R) leading from 'A' to 'B'.

    Raises NoSolutionError if 'B' cannot be reached.
    """
    start = _locate(grid, "A")
    if start is None:
        raise NoSolutionError("the grid has no start 'A'")
    came_from: dict[Cell, tuple[Cell, str] | None] = {start: None}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        i, j = cell
        if grid[i][j] == "B":
            moves = []
            step = came_from[cell]
            while step is not None:
                cell, move = step
                moves.append(move)
                step = came_from[cell]
            return "".join(reversed(moves))
        for move, di, dj in _BFS_MOVES:
            target = (i + di, j + dj)
            if _is_open(grid, *target) and target not in came_from:
                came_from[target] = (cell, move)
                queue.append(target)
    raise NoSolutionError("'B' cannot be reached from 'A'")


def _monster_distances(grid: Sequence[str]) -> dict[Cell, int]:
    distance: dict[Cell, int] = {}
    queue: deque[Cell] = deque()
    for i, row in enumerate(grid):
        for j, char in enumerate(row):
            if char == "M":
                distance[(i, j)] = 0
                queue.append((i, j))
    while queue:
        cell = queue.popleft()
        for neighbour in _neighbours(grid, cell):
            if neighbour not in distance:
                distance[neighbour] = distance[cell] + 1
                queue.append(neighbour)
    return distance


def monsters(grid: Sequence[str]) -> str:
    """Return moves (U, D, L, R) taking 'A' to the border ahead of every monster.

    Raises NoSolutionError if no such escape exists.
    """
    start = _locate(grid, "A")
    if start is None:
        raise ValueError("the grid has no start 'A'")
    distance = _monster_distances(grid)
    height = len(grid)
    visited: set[Cell] = set()

    def enterable(cell: Cell, steps: int) -> bool:
        if not _is_open(grid, *cell) or cell in visited:
            return False
        reach = distance.get(cell)
        return reach is None or reach > steps

    def on_border(cell: Cell) -> bool:
        i, j = cell
        return i in (0, height - 1) or j in (0, len(grid[i]) - 1)

    if not enterable(start, 0):
        raise NoSolutionError("a monster is already on the start")
    if on_border(start):
        return ""
    visited.add(start)
    path: list[str] = []
    stack: list[list] = [[start, 0]]
    while stack:
        frame = stack[-1]
        cell, tried = frame
        if tried == len(_ESCAPE_MOVES):
            visited.discard(cell)
            stack.pop()
            if path:
                path.pop()
            continue
        frame[1] += 1
        move, di, dj = _ESCAPE_MOVES[tried]
        target = (cell[0] + di, cell[1] + dj)
        if not enterable(target, len(stack)):
            continue
        path.append(move)
        if on_border(target):
            return "".join(path)
        visited.add(target)
        stack.append([target, 0])
    raise NoSolutionError("no escape from the monsters")