"""Maze generation parameters and their validation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

MAX_DIMENSION = 1000
MIN_ROOM_SIDE = 2


class ConfigurationError(ValueError):
    """Raised when a configuration field is outside its documented range."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class MazeAlgorithm(Enum):
    """Spanning-tree construction used to carve the maze."""

    ELLER = "eller"
    RECURSIVE_BACKTRACKER = "recursive_backtracker"
    PRIM = "prim"
    RECURSIVE_DIVISION = "recursive_division"
    ALDOUS_BRODER = "aldous_broder"


class MazeType(Enum):
    """Structure of the finished maze."""

    PERFECT = "perfect"
    BRAIDED = "braided"
    WITH_ROOMS = "with_rooms"


@dataclass(frozen=True)
class MazeConfiguration:
    width: int
    height: int
    seed: Optional[int] = None
    algorithm: MazeAlgorithm = MazeAlgorithm.ELLER
    maze_type: MazeType = MazeType.PERFECT
    braiding_factor: float = 0.5
    room_count: int = 5
    min_room_size: int = 3
    max_room_size: int = 7

    def validate(self) -> "MazeConfiguration":
        """Check every field and raise :class:`ConfigurationError` on the first bad one."""

        for field, value in (("width", self.width), ("height", self.height)):
            if not _is_int(value) or value <= 0:
                raise ConfigurationError(field, f"must be a positive integer, got {value!r}")
            if value > MAX_DIMENSION:
                raise ConfigurationError(field, f"cannot exceed {MAX_DIMENSION}, got {value}")
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigurationError("seed", f"must be an integer or None, got {self.seed!r}")
        if not isinstance(self.algorithm, MazeAlgorithm):
            raise ConfigurationError("algorithm", f"unknown algorithm {self.algorithm!r}")
        if not isinstance(self.maze_type, MazeType):
            raise ConfigurationError("maze_type", f"unknown maze type {self.maze_type!r}")
        if not isinstance(self.braiding_factor, (int, float)) or not 0.0 <= self.braiding_factor <= 1.0:
            raise ConfigurationError(
                "braiding_factor", f"must be between 0.0 and 1.0, got {self.braiding_factor}"
            )
        if not _is_int(self.room_count) or self.room_count < 0:
            raise ConfigurationError("room_count", f"must be non-negative, got {self.room_count!r}")
        if not _is_int(self.min_room_size) or self.min_room_size < MIN_ROOM_SIDE:
            raise ConfigurationError(
                "min_room_size", f"must be at least {MIN_ROOM_SIDE}, got {self.min_room_size!r}"
            )
        if not _is_int(self.max_room_size) or self.max_room_size < self.min_room_size:
            raise ConfigurationError(
                "max_room_size",
                f"must be at least min_room_size ({self.min_room_size}), got {self.max_room_size!r}",
            )
        return self

    def to_dict(self) -> dict:
        return {
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "algorithm": self.algorithm.value,
            "maze_type": self.maze_type.value,
            "braiding_factor": self.braiding_factor,
            "room_count": self.room_count,
            "min_room_size": self.min_room_size,
            "max_room_size": self.max_room_size,
        }


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


__all__ = [
    "ConfigurationError",
    "MazeAlgorithm",
    "MazeConfiguration",
    "MazeType",
    "MAX_DIMENSION",
]
