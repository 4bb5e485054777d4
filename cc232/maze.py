"""Grid maze and depth-first path search with explicit backtracking."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Sequence, Tuple

from .linear import Stack


class Status(Enum):
    AVAILABLE = 0
    ROUTE = 1
    BACKTRACKED = 2
    WALL = 3


class Direction(IntEnum):
    UNKNOWN = 0
    EAST = 1
    SOUTH = 2
    WEST = 3
    NORTH = 4
    NO_WAY = 5


_DELTAS = {
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
    Direction.NORTH: (-1, 0),
}

_OPPOSITE = {
    Direction.EAST: Direction.WEST,
    Direction.SOUTH: Direction.NORTH,
    Direction.WEST: Direction.EAST,
    Direction.NORTH: Direction.SOUTH,
}


def next_direction(direction: Direction) -> Direction:
    """The direction tried after the given one; NO_WAY has no successor."""
    return Direction(direction + 1)


@dataclass(eq=False)
class Cell:
    x: int = 0
    y: int = 0
    status: Status = Status.AVAILABLE
    incoming: Direction = Direction.UNKNOWN
    outgoing: Direction = Direction.UNKNOWN


class Maze:
    """Rectangular maze built from text rows where '#' marks a wall."""

    def __init__(self, layout: Sequence[str] = ()) -> None:
        self.rows = 0
        self.cols = 0
        self._cells: List[List[Cell]] = []
        if not layout:
            return
        width = len(layout[0])
        if any(len(row) != width for row in layout):
            raise ValueError("todas las filas del laberinto deben tener el mismo ancho")
        self.rows = len(layout)
        self.cols = width
        self._cells = [
            [
                Cell(i, j, Status.WALL if ch == "#" else Status.AVAILABLE)
                for j, ch in enumerate(row)
            ]
            for i, row in enumerate(layout)
        ]

    def at(self, x: int, y: int) -> Optional[Cell]:
        """The cell at (x, y), or None when outside the grid."""
        if 0 <= x < self.rows and 0 <= y < self.cols:
            return self._cells[x][y]
        return None

    def reset_search_state(self) -> None:
        for row in self._cells:
            for cell in row:
                if cell.status is not Status.WALL:
                    cell.status = Status.AVAILABLE
                cell.incoming = Direction.UNKNOWN
                cell.outgoing = Direction.UNKNOWN


def neighbor(maze: Maze, cell: Cell) -> Optional[Cell]:
    """The cell reached by leaving through cell.outgoing, if any."""
    delta = _DELTAS.get(cell.outgoing)
    if delta is None:
        return None
    return maze.at(cell.x + delta[0], cell.y + delta[1])


def advance(maze: Maze, cell: Cell) -> Optional[Cell]:
    """Step to the neighbour and record the direction it was entered from."""
    nxt = neighbor(maze, cell)
    if nxt is None:
        return None
    nxt.incoming = _OPPOSITE[cell.outgoing]
    return nxt


def _search(maze: Maze, start: Optional[Cell], target: Optional[Cell]) -> Optional[Stack[Cell]]:
    if start is None or target is None:
        return None
    if start.status is not Status.AVAILABLE or target.status is not Status.AVAILABLE:
        return None

    path: Stack[Cell] = Stack()
    start.incoming = Direction.UNKNOWN
    start.outgoing = Direction.UNKNOWN
    start.status = Status.ROUTE
    path.push(start)

    while not path.empty():
        current = path.top()
        if current is target:
            return path

        while True:
            current.outgoing = next_direction(current.outgoing)
            if current.outgoing >= Direction.NO_WAY:
                break
            candidate = neighbor(maze, current)
            if candidate is not None and candidate.status is Status.AVAILABLE:
                break

        nxt = None if current.outgoing >= Direction.NO_WAY else advance(maze, current)
        if nxt is None:
            current.status = Status.BACKTRACKED
            path.pop()
        else:
            nxt.outgoing = Direction.UNKNOWN
            nxt.status = Status.ROUTE
            path.push(nxt)

    return None


def labyrinth(maze: Maze, start: Optional[Cell], target: Optional[Cell]) -> bool:
    """True if a route from start to target exists; marks cells as it goes."""
    return _search(maze, start, target) is not None


def find_path(maze: Maze, sx: int, sy: int, tx: int, ty: int) -> List[Tuple[int, int]]:
    """Coordinates of a route from (sx, sy) to (tx, ty), or [] if none."""
    maze.reset_search_state()
    path = _search(maze, maze.at(sx, sy), maze.at(tx, ty))
    if path is None:
        return []
    return [(cell.x, cell.y) for cell in path]