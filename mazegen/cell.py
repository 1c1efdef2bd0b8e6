"""Cell wall state and grid adjacency helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Sequence, Tuple

Cells = List[List["Cell"]]


class Direction(Enum):
    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    @property
    def attr(self) -> str:
        """Name of the matching wall flag on :class:`Cell`."""

        return self.name.lower()

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

DIRECTIONS: Tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.SOUTH,
    Direction.EAST,
    Direction.WEST,
)


@dataclass
class Cell:
    """Wall flags for one grid position. ``True`` means the wall is present."""

    north: bool = True
    south: bool = True
    east: bool = True
    west: bool = True
    label: int = 0

    @property
    def walls(self) -> Tuple[bool, bool, bool, bool]:
        return (self.north, self.south, self.east, self.west)

    def has_wall(self, direction: Direction) -> bool:
        return getattr(self, direction.attr)

    def to_dict(self) -> dict:
        return {
            "north": self.north,
            "south": self.south,
            "east": self.east,
            "west": self.west,
        }


def new_cells(width: int, height: int) -> Cells:
    return [[Cell() for _ in range(width)] for _ in range(height)]


def in_bounds(row: int, col: int, width: int, height: int) -> bool:
    return 0 <= row < height and 0 <= col < width


def neighbors(
    row: int,
    col: int,
    width: int,
    height: int,
    directions: Sequence[Direction] = DIRECTIONS,
) -> Iterator[Tuple[Direction, int, int]]:
    """Yield ``(direction, row, col)`` for every in-grid neighbor, in ``directions`` order."""

    for direction in directions:
        nr, nc = row + direction.dr, col + direction.dc
        if 0 <= nr < height and 0 <= nc < width:
            yield direction, nr, nc


def _set_wall(cells: Cells, row: int, col: int, direction: Direction, present: bool) -> None:
    nr, nc = row + direction.dr, col + direction.dc
    if row < 0 or col < 0 or nr < 0 or nc < 0:
        # negative indices would silently wrap around
        raise IndexError(f"Wall {direction.name} of ({row}, {col}) is outside the grid")
    neighbor = cells[nr][nc]
    setattr(cells[row][col], direction.attr, present)
    setattr(neighbor, direction.opposite.attr, present)


def open_wall(cells: Cells, row: int, col: int, direction: Direction) -> None:
    """Open the wall between a cell and its neighbor, on both sides."""

    _set_wall(cells, row, col, direction, False)


def close_wall(cells: Cells, row: int, col: int, direction: Direction) -> None:
    _set_wall(cells, row, col, direction, True)


def open_sides(cells: Cells, row: int, col: int) -> int:
    """Count open sides, ignoring sides that face the outer boundary."""

    height = len(cells)
    width = len(cells[0]) if height else 0
    cell = cells[row][col]
    return sum(
        1 for direction, _, _ in neighbors(row, col, width, height) if not cell.has_wall(direction)
    )


__all__ = [
    "Cell",
    "Cells",
    "Direction",
    "DIRECTIONS",
    "new_cells",
    "in_bounds",
    "neighbors",
    "open_wall",
    "close_wall",
    "open_sides",
]
