"""Randomized depth-first carving (recursive backtracker)."""

from __future__ import annotations

from typing import List, Tuple

from ..base import AbstractMazeAlgorithm
from ..cell import DIRECTIONS, Cells, Direction, open_wall
from ..config import MazeConfiguration


class RecursiveBacktrackerAlgorithm(AbstractMazeAlgorithm):
    """Depth-first search with backtracking; produces long winding passages."""

    name = "Recursive Backtracker"
    description = "Creates long, winding passages using depth-first search with backtracking."

    def generate(self, cells: Cells, config: MazeConfiguration) -> None:
        rng = self._prepare(config)
        width, height = config.width, config.height
        visited = [[False] * width for _ in range(height)]

        start = (rng.randrange(height), rng.randrange(width))
        visited[start[0]][start[1]] = True
        # each frame holds a cell and the directions it has yet to try
        stack: List[Tuple[int, int, List[Direction]]] = [(start[0], start[1], self._shuffled())]

        while stack:
            row, col, pending = stack[-1]
            if not pending:
                stack.pop()
                continue
            direction = pending.pop()
            nr, nc = row + direction.dr, col + direction.dc
            if not (0 <= nr < height and 0 <= nc < width) or visited[nr][nc]:
                continue
            open_wall(cells, row, col, direction)
            visited[nr][nc] = True
            stack.append((nr, nc, self._shuffled()))

    def _shuffled(self) -> List[Direction]:
        directions = list(DIRECTIONS)
        self._rng.shuffle(directions)
        # popped from the end, so reverse to walk them in shuffled order
        directions.reverse()
        return directions


__all__ = ["RecursiveBacktrackerAlgorithm"]
