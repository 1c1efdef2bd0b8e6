"""Recursive spatial division."""

from __future__ import annotations

from typing import List, Tuple

from ..base import AbstractMazeAlgorithm
from ..cell import Cells, Direction, close_wall, open_wall
from ..config import MazeConfiguration

# (row, col, width, height) of a chamber still to be divided
Chamber = Tuple[int, int, int, int]


class RecursiveDivisionAlgorithm(AbstractMazeAlgorithm):
    """Start from an open field and keep splitting chambers, leaving one gap per wall."""

    name = "Recursive Division"
    description = (
        "Creates chambers and corridors by recursively dividing space. "
        "Good for dungeon-style layouts."
    )

    def generate(self, cells: Cells, config: MazeConfiguration) -> None:
        rng = self._prepare(config)
        self._clear_interior(cells, config.width, config.height)

        stack: List[Chamber] = [(0, 0, config.width, config.height)]
        while stack:
            row, col, width, height = stack.pop()
            if width < 2 or height < 2:
                continue

            if width > height:
                horizontal = False
            elif height > width:
                horizontal = True
            else:
                horizontal = rng.randrange(2) == 0

            # children are pushed second-half first so the first half is divided first
            if horizontal:
                split = row + rng.randrange(height - 1)
                passage = col + rng.randrange(width)
                for c in range(col, col + width):
                    if c != passage:
                        close_wall(cells, split, c, Direction.SOUTH)
                top_height = split - row + 1
                stack.append((split + 1, col, width, height - top_height))
                stack.append((row, col, width, top_height))
            else:
                split = col + rng.randrange(width - 1)
                passage = row + rng.randrange(height)
                for r in range(row, row + height):
                    if r != passage:
                        close_wall(cells, r, split, Direction.EAST)
                left_width = split - col + 1
                stack.append((row, split + 1, width - left_width, height))
                stack.append((row, col, left_width, height))

    @staticmethod
    def _clear_interior(cells: Cells, width: int, height: int) -> None:
        for row in range(height):
            for col in range(width):
                if col < width - 1:
                    open_wall(cells, row, col, Direction.EAST)
                if row < height - 1:
                    open_wall(cells, row, col, Direction.SOUTH)


__all__ = ["RecursiveDivisionAlgorithm"]
