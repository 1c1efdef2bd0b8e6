"""Randomized frontier growth (Prim's algorithm)."""

from __future__ import annotations

from typing import List, Tuple

from ..base import AbstractMazeAlgorithm
from ..cell import Cells, Direction, neighbors, open_wall
from ..config import MazeConfiguration

Wall = Tuple[int, int, Direction]


class PrimAlgorithm(AbstractMazeAlgorithm):
    """Grow a random tree one frontier wall at a time."""

    name = "Prim's Algorithm"
    description = (
        "Creates mazes with many short dead ends by growing a random spanning tree "
        "from a frontier of candidate walls."
    )

    def generate(self, cells: Cells, config: MazeConfiguration) -> None:
        rng = self._prepare(config)
        width, height = config.width, config.height
        in_tree = [[False] * width for _ in range(height)]

        row, col = rng.randrange(height), rng.randrange(width)
        in_tree[row][col] = True
        frontier: List[Wall] = []
        self._extend_frontier(frontier, in_tree, row, col, width, height)

        while frontier:
            index = rng.randrange(len(frontier))
            frontier[index], frontier[-1] = frontier[-1], frontier[index]
            row, col, direction = frontier.pop()
            nr, nc = row + direction.dr, col + direction.dc
            # the inner cell is always in the tree; only walls to outside cells are opened
            if in_tree[nr][nc]:
                continue
            open_wall(cells, row, col, direction)
            in_tree[nr][nc] = True
            self._extend_frontier(frontier, in_tree, nr, nc, width, height)

    @staticmethod
    def _extend_frontier(
        frontier: List[Wall],
        in_tree: List[List[bool]],
        row: int,
        col: int,
        width: int,
        height: int,
    ) -> None:
        for direction, nr, nc in neighbors(row, col, width, height):
            if not in_tree[nr][nc]:
                frontier.append((row, col, direction))


__all__ = ["PrimAlgorithm"]
