"""Abstract interfaces for maze generation algorithms and modifiers."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Any, Optional

from .cell import Cells
from .config import MazeConfiguration


def make_rng(seed: Optional[int], offset: int = 0) -> random.Random:
    """Private generator for one generation phase; ``None`` seeds from the OS."""

    if seed is None:
        return random.Random()
    return random.Random(seed + offset)


class AbstractMazeAlgorithm(ABC):
    """Base class for algorithms that carve a spanning tree into a fresh cell matrix."""

    name: str = ""
    description: str = ""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._injected_rng = rng
        self._rng = rng

    def _prepare(self, config: MazeConfiguration) -> random.Random:
        self._rng = self._injected_rng if self._injected_rng is not None else make_rng(config.seed)
        return self._rng

    @abstractmethod
    def generate(self, cells: Cells, config: MazeConfiguration) -> None:
        """Mutate ``cells`` in place into an enclosed spanning tree."""


class AbstractMazeModifier(ABC):
    """Base class for post-generation passes over an existing spanning tree."""

    name: str = ""
    description: str = ""
    seed_offset: int = 0

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._injected_rng = rng
        self._rng = rng

    def _prepare(self, config: MazeConfiguration) -> random.Random:
        if self._injected_rng is not None:
            self._rng = self._injected_rng
        else:
            self._rng = make_rng(config.seed, self.seed_offset)
        return self._rng

    @abstractmethod
    def apply(self, cells: Cells, config: MazeConfiguration) -> Any:
        """Modify ``cells`` in place, keeping every cell reachable."""


__all__ = [
    "AbstractMazeAlgorithm",
    "AbstractMazeModifier",
    "make_rng",
]
