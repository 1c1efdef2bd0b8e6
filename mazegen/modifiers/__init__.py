"""Post-generation maze modifiers."""

__all__ = [
    "BraidingModifier",
    "Room",
    "RoomModifier",
    "find_dead_ends",
]

from .braiding import BraidingModifier, find_dead_ends
from .rooms import Room, RoomModifier
