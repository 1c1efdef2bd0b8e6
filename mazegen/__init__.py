"""Procedural rectangular maze generation."""

__all__ = [
    "AbstractMazeAlgorithm",
    "AbstractMazeModifier",
    "Cell",
    "ConfigurationError",
    "Direction",
    "MazeAlgorithm",
    "MazeConfiguration",
    "MazeGrid",
    "MazeType",
]

from .base import AbstractMazeAlgorithm, AbstractMazeModifier
from .cell import Cell, Direction
from .config import ConfigurationError, MazeAlgorithm, MazeConfiguration, MazeType
from .grid import MazeGrid
