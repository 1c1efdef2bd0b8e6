"""Random-walk generation of a uniform spanning tree (Aldous-Broder)."""

from __future__ import annotations

from ..base import AbstractMazeAlgorithm
from ..cell import Cells, neighbors, open_wall
from ..config import MazeConfiguration


class AldousBroderAlgorithm(AbstractMazeAlgorithm):
    """Walk at random and keep only the first entry into each cell.

    Every spanning tree is equally likely. The walk has to cover the whole
    grid, so running time grows faster than the cell count; callers that need
    a time bound on large grids must impose it themselves.
    """

    name = "Aldous-Broder Algorithm"
    description = (
        "Creates uniform spanning trees using a random walk. Slower than the other "
        "algorithms but unbiased."
    )

    def generate(self, cells: Cells, config: MazeConfiguration) -> None:
        rng = self._prepare(config)
        width, height = config.width, config.height
        visited = [[False] * width for _ in range(height)]

        row, col = rng.randrange(height), rng.randrange(width)
        visited[row][col] = True
        remaining = width * height - 1

        while remaining > 0:
            direction, nr, nc = rng.choice(list(neighbors(row, col, width, height)))
            if not visited[nr][nc]:
                open_wall(cells, row, col, direction)
                visited[nr][nc] = True
                remaining -= 1
            row, col = nr, nc


__all__ = ["AldousBroderAlgorithm"]
