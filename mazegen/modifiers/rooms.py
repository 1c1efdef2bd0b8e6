"""Room carving: open rectangular chambers inside an existing maze."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from ..base import AbstractMazeModifier
from ..cell import Cells, Direction, open_wall
from ..config import MazeConfiguration

logger = logging.getLogger(__name__)

ROOM_SEED_OFFSET = 2000
ATTEMPTS_PER_ROOM = 50


@dataclass(frozen=True)
class Room:
    """Axis-aligned rectangle of cells; ``row``/``col`` is the top-left corner."""

    row: int
    col: int
    width: int
    height: int

    @property
    def bottom(self) -> int:
        """Last row inside the room."""

        return self.row + self.height - 1

    @property
    def right(self) -> int:
        """Last column inside the room."""

        return self.col + self.width - 1

    def cells(self) -> Iterator[Tuple[int, int]]:
        for r in range(self.row, self.row + self.height):
            for c in range(self.col, self.col + self.width):
                yield r, c

    def contains(self, row: int, col: int) -> bool:
        return self.row <= row <= self.bottom and self.col <= col <= self.right

    def too_close(self, other: "Room") -> bool:
        """True when the rooms overlap or are separated by less than one cell."""

        return (
            self.col < other.col + other.width + 1
            and other.col < self.col + self.width + 1
            and self.row < other.row + other.height + 1
            and other.row < self.row + self.height + 1
        )

    def to_dict(self) -> dict:
        return {
            "row": self.row,
            "col": self.col,
            "width": self.width,
            "height": self.height,
        }


class RoomModifier(AbstractMazeModifier):
    """Place non-touching rectangular rooms and connect each through a doorway."""

    name = "Room Modifier"
    description = (
        "Adds rectangular open spaces (rooms) to the maze. Creates dungeon-style layouts "
        "with chambers connected by corridors."
    )
    seed_offset = ROOM_SEED_OFFSET

    def apply(self, cells: Cells, config: MazeConfiguration) -> List[Room]:
        """Carve rooms in place and return the ones that were accepted.

        Fewer than ``room_count`` rooms is a normal outcome when the grid is
        crowded; placement gives up after ``room_count * 50`` attempts.
        """

        if config.room_count <= 0:
            return []
        self._prepare(config)

        rooms: List[Room] = []
        attempts = 0
        max_attempts = config.room_count * ATTEMPTS_PER_ROOM
        while len(rooms) < config.room_count and attempts < max_attempts:
            attempts += 1
            room = self._random_room(config)
            if room is None or any(room.too_close(existing) for existing in rooms):
                continue
            rooms.append(room)
            self._carve(cells, room)
            self._connect(cells, room, config.width, config.height)

        logger.debug(
            "Placed %d of %d rooms in %d attempts", len(rooms), config.room_count, attempts
        )
        return rooms

    # ------------------------------------------------------------------

    def _random_room(self, config: MazeConfiguration) -> Optional[Room]:
        rng = self._rng
        width = rng.randint(config.min_room_size, config.max_room_size)
        height = rng.randint(config.min_room_size, config.max_room_size)
        # keep a one-cell margin against the outer boundary
        max_col = config.width - width - 1
        max_row = config.height - height - 1
        if max_col < 1 or max_row < 1:
            return None
        return Room(row=rng.randint(1, max_row), col=rng.randint(1, max_col), width=width, height=height)

    @staticmethod
    def _carve(cells: Cells, room: Room) -> None:
        for row, col in room.cells():
            if col < room.right:
                open_wall(cells, row, col, Direction.EAST)
            if row < room.bottom:
                open_wall(cells, row, col, Direction.SOUTH)

    def _connect(self, cells: Cells, room: Room, width: int, height: int) -> None:
        rng = self._rng
        side = rng.choice((Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST))
        if side is Direction.NORTH and room.row > 0:
            open_wall(cells, room.row, rng.randint(room.col, room.right), side)
        elif side is Direction.SOUTH and room.bottom < height - 1:
            open_wall(cells, room.bottom, rng.randint(room.col, room.right), side)
        elif side is Direction.WEST and room.col > 0:
            open_wall(cells, rng.randint(room.row, room.bottom), room.col, side)
        elif side is Direction.EAST and room.right < width - 1:
            open_wall(cells, rng.randint(room.row, room.bottom), room.right, side)


__all__ = ["Room", "RoomModifier", "ATTEMPTS_PER_ROOM"]
