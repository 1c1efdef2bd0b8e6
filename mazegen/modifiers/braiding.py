"""Loop injection: turn dead ends into loops to braid a perfect maze."""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from ..base import AbstractMazeModifier
from ..cell import Cells, Direction, neighbors, open_sides, open_wall
from ..config import MazeConfiguration

logger = logging.getLogger(__name__)

BRAIDING_SEED_OFFSET = 1000


def find_dead_ends(cells: Cells) -> List[Tuple[int, int]]:
    """Cells with exactly one open side, in row-major order."""

    return [
        (row, col)
        for row in range(len(cells))
        for col in range(len(cells[row]))
        if open_sides(cells, row, col) == 1
    ]


class BraidingModifier(AbstractMazeModifier):
    """Open one extra wall on a share of the dead ends, creating loops."""

    name = "Braiding Modifier"
    description = (
        "Removes dead ends to create loops in the maze, providing multiple solution paths. "
        "Braiding factor controls how many dead ends to remove (0.0 = none, 1.0 = all)."
    )
    seed_offset = BRAIDING_SEED_OFFSET

    def apply(self, cells: Cells, config: MazeConfiguration) -> int:
        """Return the number of dead ends that were linked to a second neighbor."""

        if config.braiding_factor <= 0.0:
            return 0
        rng = self._prepare(config)

        dead_ends = find_dead_ends(cells)
        target = math.ceil(len(dead_ends) * config.braiding_factor)
        rng.shuffle(dead_ends)

        removed = 0
        for row, col in dead_ends:
            if removed >= target:
                break
            # an earlier removal may already have opened this cell up
            if open_sides(cells, row, col) != 1:
                continue
            if self._link_dead_end(cells, row, col):
                removed += 1

        logger.debug(
            "Braided %d of %d dead ends (factor %.2f)",
            removed,
            len(dead_ends),
            config.braiding_factor,
        )
        return removed

    def _link_dead_end(self, cells: Cells, row: int, col: int) -> bool:
        height = len(cells)
        width = len(cells[0])
        cell = cells[row][col]
        removable: List[Direction] = [
            direction
            for direction, _, _ in neighbors(row, col, width, height)
            if cell.has_wall(direction)
        ]
        if not removable:
            return False
        open_wall(cells, row, col, self._rng.choice(removable))
        return True


__all__ = ["BraidingModifier", "find_dead_ends"]
