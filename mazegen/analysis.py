"""Read-only structural checks over a finished maze."""

from __future__ import annotations

from collections import deque
from typing import Tuple, Union

import numpy as np

from .grid import MazeGrid

NORTH, SOUTH, EAST, WEST = range(4)

GridLike = Union[MazeGrid, np.ndarray]


def _walls(grid: GridLike) -> np.ndarray:
    walls = grid.to_array() if isinstance(grid, MazeGrid) else np.asarray(grid, dtype=bool)
    if walls.ndim != 3 or walls.shape[2] != 4:
        raise ValueError(f"Expected a (height, width, 4) wall array, got shape {walls.shape}")
    return walls


def open_edge_count(grid: GridLike) -> int:
    """Number of open passages between adjacent cells."""

    walls = _walls(grid)
    vertical = np.count_nonzero(~walls[:-1, :, SOUTH])
    horizontal = np.count_nonzero(~walls[:, :-1, EAST])
    return int(vertical + horizontal)


def boundary_closed(grid: GridLike) -> bool:
    walls = _walls(grid)
    return bool(
        walls[0, :, NORTH].all()
        and walls[-1, :, SOUTH].all()
        and walls[:, 0, WEST].all()
        and walls[:, -1, EAST].all()
    )


def dead_end_mask(grid: GridLike) -> np.ndarray:
    """Boolean ``(height, width)`` mask of cells with exactly one open interior side."""

    walls = _walls(grid)
    open_sides = np.zeros(walls.shape[:2], dtype=int)
    open_sides[1:, :] += ~walls[1:, :, NORTH]
    open_sides[:-1, :] += ~walls[:-1, :, SOUTH]
    open_sides[:, :-1] += ~walls[:, :-1, EAST]
    open_sides[:, 1:] += ~walls[:, 1:, WEST]
    return open_sides == 1


def dead_end_count(grid: GridLike) -> int:
    return int(np.count_nonzero(dead_end_mask(grid)))


def reachable_count(grid: GridLike, start: Tuple[int, int] = (0, 0)) -> int:
    """Cells reachable from ``start`` by breadth-first search through open walls."""

    walls = _walls(grid)
    height, width = walls.shape[:2]
    seen = np.zeros((height, width), dtype=bool)
    seen[start] = True
    queue: deque[Tuple[int, int]] = deque([start])
    steps = ((NORTH, -1, 0), (SOUTH, 1, 0), (EAST, 0, 1), (WEST, 0, -1))
    while queue:
        r, c = queue.popleft()
        for side, dr, dc in steps:
            if walls[r, c, side]:
                continue
            nr, nc = r + dr, c + dc
            if 0 <= nr < height and 0 <= nc < width and not seen[nr, nc]:
                seen[nr, nc] = True
                queue.append((nr, nc))
    return int(np.count_nonzero(seen))


def is_connected(grid: GridLike) -> bool:
    walls = _walls(grid)
    return reachable_count(walls) == walls.shape[0] * walls.shape[1]


def is_perfect(grid: GridLike) -> bool:
    """Connected with exactly one fewer passage than cells, so no loops."""

    walls = _walls(grid)
    cell_count = walls.shape[0] * walls.shape[1]
    return open_edge_count(walls) == cell_count - 1 and is_connected(walls)


__all__ = [
    "boundary_closed",
    "dead_end_count",
    "dead_end_mask",
    "is_connected",
    "is_perfect",
    "open_edge_count",
    "reachable_count",
]
