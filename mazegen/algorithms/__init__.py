"""Spanning-tree generation algorithms."""

__all__ = [
    "ALGORITHMS",
    "AldousBroderAlgorithm",
    "EllerAlgorithm",
    "PrimAlgorithm",
    "RecursiveBacktrackerAlgorithm",
    "RecursiveDivisionAlgorithm",
    "get_algorithm",
]

import random
from typing import Dict, Optional, Type

from ..base import AbstractMazeAlgorithm
from ..config import MazeAlgorithm
from .aldous_broder import AldousBroderAlgorithm
from .backtracker import RecursiveBacktrackerAlgorithm
from .division import RecursiveDivisionAlgorithm
from .eller import EllerAlgorithm
from .prim import PrimAlgorithm

ALGORITHMS: Dict[MazeAlgorithm, Type[AbstractMazeAlgorithm]] = {
    MazeAlgorithm.ELLER: EllerAlgorithm,
    MazeAlgorithm.RECURSIVE_BACKTRACKER: RecursiveBacktrackerAlgorithm,
    MazeAlgorithm.PRIM: PrimAlgorithm,
    MazeAlgorithm.RECURSIVE_DIVISION: RecursiveDivisionAlgorithm,
    MazeAlgorithm.ALDOUS_BRODER: AldousBroderAlgorithm,
}


def get_algorithm(
    kind: MazeAlgorithm, rng: Optional[random.Random] = None
) -> AbstractMazeAlgorithm:
    try:
        algorithm_cls = ALGORITHMS[kind]
    except KeyError as exc:
        raise ValueError(f"Unknown algorithm type: {kind!r}") from exc
    return algorithm_cls(rng)
