"""Visible-face culling and text rendering of chunks."""

from __future__ import annotations

import sys
from enum import Enum
from itertools import product
from typing import Iterator, TextIO

from voxelcraft.block import BlockType
from voxelcraft.chunk import CHUNK_SIZE, Chunk, in_bounds


class Face(Enum):
    """The six faces of a block, with the offset to the neighbour it faces."""

    TOP = (0, 1, 0)
    BOTTOM = (0, -1, 0)
    FRONT = (0, 0, 1)
    BACK = (0, 0, -1)
    LEFT = (-1, 0, 0)
    RIGHT = (1, 0, 0)

    @property
    def offset(self) -> tuple[int, int, int]:
        return self.value


def _exposed(chunk: Chunk, x: int, y: int, z: int) -> bool:
    return not in_bounds(x, y, z) or chunk.block_at(x, y, z) is BlockType.AIR


def visible_faces(chunk: Chunk) -> Iterator[tuple[int, int, int, Face]]:
    """Yield (x, y, z, face) for every solid block face next to air or the chunk edge."""
    for x, y, z in product(range(CHUNK_SIZE), repeat=3):
        if chunk.block_at(x, y, z) is BlockType.AIR:
            continue
        for face in Face:
            dx, dy, dz = face.offset
            if _exposed(chunk, x + dx, y + dy, z + dz):
                yield x, y, z, face


def draw_chunk(chunk: Chunk | None, stream: TextIO | None = None) -> None:
    """Write one line per visible face of the chunk to the stream (stdout by default)."""
    if chunk is None:
        return
    out = sys.stdout if stream is None else stream
    for x, y, z, face in visible_faces(chunk):
        out.write(f"Desenhando face {face.name} do bloco em ({x}, {y}, {z})\n")