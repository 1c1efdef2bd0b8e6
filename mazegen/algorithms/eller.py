"""Row-by-row union-find generation (Eller's algorithm)."""

from __future__ import annotations

import random
from typing import Dict, List, Optional

from ..base import AbstractMazeAlgorithm
from ..cell import Cells, Direction, open_wall
from ..config import MazeConfiguration


class EllerAlgorithm(AbstractMazeAlgorithm):
    """Carve one row at a time, tracking which cells of the row are already joined."""

    name = "Eller's Algorithm"
    description = (
        "Generates perfect mazes row by row. Memory efficient and suitable for large mazes."
    )

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(rng)
        self._width = 0
        self._height = 0

    def generate(self, cells: Cells, config: MazeConfiguration) -> None:
        self._prepare(config)
        self._width = config.width
        self._height = config.height

        labels: List[int] = []
        for row in range(self._height):
            if row == 0:
                labels = list(range(self._width))
            else:
                labels = self._inherit_labels(cells, row, labels)
            members = self._group_members(labels)

            self._join_horizontally(cells, row, labels, members)
            if row == self._height - 1:
                self._join_last_row(cells, row, labels, members)
            else:
                self._open_downward(cells, row, labels, members)

            for col, label in enumerate(labels):
                cells[row][col].label = label

    # ------------------------------------------------------------------

    def _inherit_labels(self, cells: Cells, row: int, previous: List[int]) -> List[int]:
        above = cells[row - 1]
        # -1 marks a cell cut off from above; it gets the smallest label unused in this row
        labels = [-1 if above[col].south else previous[col] for col in range(self._width)]
        used = set(labels)
        fresh = 0
        for col, label in enumerate(labels):
            if label == -1:
                while fresh in used:
                    fresh += 1
                labels[col] = fresh
                used.add(fresh)
        return labels

    @staticmethod
    def _group_members(labels: List[int]) -> Dict[int, List[int]]:
        members: Dict[int, List[int]] = {}
        for col, label in enumerate(labels):
            members.setdefault(label, []).append(col)
        return members

    @staticmethod
    def _merge(labels: List[int], members: Dict[int, List[int]], left: int, right: int) -> None:
        keep, drop = labels[left], labels[right]
        if len(members[drop]) > len(members[keep]):
            keep, drop = drop, keep
        for col in members[drop]:
            labels[col] = keep
        members[keep].extend(members.pop(drop))

    def _join_horizontally(
        self,
        cells: Cells,
        row: int,
        labels: List[int],
        members: Dict[int, List[int]],
    ) -> None:
        for col in range(self._width - 1):
            if labels[col] == labels[col + 1] or self._rng.random() < 0.5:
                continue
            open_wall(cells, row, col, Direction.EAST)
            self._merge(labels, members, col, col + 1)

    def _open_downward(
        self,
        cells: Cells,
        row: int,
        labels: List[int],
        members: Dict[int, List[int]],
    ) -> None:
        # every group keeps at least one way down
        still_open = {label: len(cols) for label, cols in members.items()}
        for col in range(self._width):
            label = labels[col]
            if self._rng.random() < 0.5 and still_open[label] > 1:
                still_open[label] -= 1
                continue
            open_wall(cells, row, col, Direction.SOUTH)

    def _join_last_row(
        self,
        cells: Cells,
        row: int,
        labels: List[int],
        members: Dict[int, List[int]],
    ) -> None:
        for col in range(self._width - 1):
            if labels[col] != labels[col + 1]:
                open_wall(cells, row, col, Direction.EAST)
                self._merge(labels, members, col, col + 1)


__all__ = ["EllerAlgorithm"]
