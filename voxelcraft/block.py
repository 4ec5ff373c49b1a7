"""Block types that make up the voxel world."""

from __future__ import annotations

from enum import IntEnum

_DISPLAY_NAMES = {
    0: "Ar",
    1: "Grama",
    2: "Terra",
    3: "Pedra",
}

_UNKNOWN_NAME = "Desconhecido"


class BlockType(IntEnum):
    """The kinds of block a chunk cell can hold."""

    AIR = 0
    GRASS = 1
    DIRT = 2
    STONE = 3

    def is_transparent(self) -> bool:
        """Return True if light and sight pass through this block."""
        return self is BlockType.AIR

    def display_name(self) -> str:
        """Return the human-readable name of the block."""
        return _DISPLAY_NAMES.get(int(self), _UNKNOWN_NAME)