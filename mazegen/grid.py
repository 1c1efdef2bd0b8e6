"""Maze grid: owns the cell matrix and runs generation and modification."""

from __future__ import annotations

import logging
from typing import Iterator, Tuple

import numpy as np

from .algorithms import get_algorithm
from .cell import Cell, new_cells
from .config import MazeConfiguration, MazeType
from .modifiers import BraidingModifier, RoomModifier

logger = logging.getLogger(__name__)


class MazeGrid:
    """A generated maze of ``height`` rows by ``width`` columns.

    Construction validates the configuration, carves a spanning tree with the
    configured algorithm and then applies the modifier the maze type calls
    for. The grid is not mutated afterwards, so it can be shared by any number
    of readers.
    """

    def __init__(self, configuration: MazeConfiguration) -> None:
        configuration.validate()
        self._configuration = configuration
        self._cells = new_cells(configuration.width, configuration.height)

        algorithm = get_algorithm(configuration.algorithm)
        logger.debug(
            "Generating %dx%d maze with %s (seed=%s)",
            configuration.width,
            configuration.height,
            algorithm.name,
            configuration.seed,
        )
        algorithm.generate(self._cells, configuration)
        self._apply_modifiers(configuration)

    def _apply_modifiers(self, config: MazeConfiguration) -> None:
        if config.maze_type is MazeType.BRAIDED and config.braiding_factor > 0.0:
            BraidingModifier().apply(self._cells, config)
        elif config.maze_type is MazeType.WITH_ROOMS and config.room_count > 0:
            RoomModifier().apply(self._cells, config)

    @property
    def width(self) -> int:
        return self._configuration.width

    @property
    def height(self) -> int:
        return self._configuration.height

    @property
    def configuration(self) -> MazeConfiguration:
        return self._configuration

    @property
    def cells(self) -> Tuple[Tuple[Cell, ...], ...]:
        """Row-major read-only view of the cell matrix."""

        return tuple(tuple(row) for row in self._cells)

    def get_cell(self, row: int, column: int) -> Cell:
        if not 0 <= row < self.height:
            raise IndexError(f"row {row} is outside [0, {self.height})")
        if not 0 <= column < self.width:
            raise IndexError(f"column {column} is outside [0, {self.width})")
        return self._cells[row][column]

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for row, cells in enumerate(self._cells):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def to_array(self) -> np.ndarray:
        """Wall flags as a ``(height, width, 4)`` bool array in north/south/east/west order."""

        return np.array(
            [[cell.walls for cell in row] for row in self._cells],
            dtype=bool,
        ).reshape(self.height, self.width, 4)

    def __repr__(self) -> str:
        return (
            f"MazeGrid(width={self.width}, height={self.height}, "
            f"algorithm={self._configuration.algorithm.value}, "
            f"maze_type={self._configuration.maze_type.value})"
        )


__all__ = ["MazeGrid"]
