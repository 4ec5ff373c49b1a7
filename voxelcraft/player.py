"""The player and its movement through a chunk."""

from __future__ import annotations

import math
from dataclasses import dataclass

from voxelcraft.block import BlockType
from voxelcraft.chunk import Chunk, in_bounds


@dataclass
class Player:
    """Position in the world plus camera pitch and yaw."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    pitch: float = 0.0
    yaw: float = 0.0

    def move(self, dx: float, dy: float, dz: float, chunk: Chunk | None) -> bool:
        """Move by the offset if the target cell is air inside the chunk.

        Returns True if the player moved.
        """
        if chunk is None:
            return False
        new_x, new_y, new_z = self.x + dx, self.y + dy, self.z + dz
        cell = (math.floor(new_x), math.floor(new_y), math.floor(new_z))
        if not in_bounds(*cell):
            return False
        if chunk.block_at(*cell) is not BlockType.AIR:
            return False
        self.x, self.y, self.z = new_x, new_y, new_z
        return True