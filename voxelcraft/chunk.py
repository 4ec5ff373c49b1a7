"""A cubic chunk of blocks and the operations that edit it."""

from __future__ import annotations

from itertools import product

from voxelcraft.block import BlockType

CHUNK_SIZE = 16


def in_bounds(x: int, y: int, z: int) -> bool:
    """Return True if the coordinates lie inside a chunk."""
    return all(0 <= c < CHUNK_SIZE for c in (x, y, z))


def _index(x: int, y: int, z: int) -> int:
    return (x * CHUNK_SIZE + y) * CHUNK_SIZE + z


class Chunk:
    """A CHUNK_SIZE cube of blocks; every cell starts as air."""

    def __init__(self) -> None:
        self._blocks = [BlockType.AIR] * (CHUNK_SIZE ** 3)

    def block_at(self, x: int, y: int, z: int) -> BlockType:
        """Return the block at the given position.

        Raises IndexError when the position lies outside the chunk.
        """
        if not in_bounds(x, y, z):
            raise IndexError(f"position ({x}, {y}, {z}) is outside the chunk")
        return self._blocks[_index(x, y, z)]

    def generate(self) -> None:
        """Fill the chunk with the initial terrain layers."""
        for x, y, z in product(range(CHUNK_SIZE), repeat=3):
            if y == 0:
                block = BlockType.STONE
            elif y < 3:
                block = BlockType.DIRT
            elif y == 3:
                block = BlockType.GRASS
            else:
                block = BlockType.AIR
            self._blocks[_index(x, y, z)] = block

    def break_block(self, x: int, y: int, z: int) -> None:
        """Turn the block at the position into air; out-of-range positions are ignored."""
        self.place_block(x, y, z, BlockType.AIR)

    def place_block(self, x: int, y: int, z: int, block_type: BlockType) -> None:
        """Set the block at the position; out-of-range positions are ignored."""
        if in_bounds(x, y, z):
            self._blocks[_index(x, y, z)] = BlockType(block_type)