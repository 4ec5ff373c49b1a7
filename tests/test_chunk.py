from itertools import product

import pytest

from voxelcraft.block import BlockType
from voxelcraft.chunk import CHUNK_SIZE, Chunk, in_bounds


def _snapshot(chunk):
    return [chunk.block_at(x, y, z) for x, y, z in product(range(CHUNK_SIZE), repeat=3)]


@pytest.mark.parametrize(
    "pos, expected",
    [
        ((0, 0, 0), True),
        ((15, 15, 15), True),
        ((-1, 0, 0), False),
        ((0, -1, 0), False),
        ((0, 0, -1), False),
        ((16, 0, 0), False),
        ((0, 16, 0), False),
        ((0, 0, 16), False),
    ],
)
def test_in_bounds(pos, expected):
    assert in_bounds(*pos) is expected


def test_new_chunk_is_all_air():
    chunk = Chunk()
    assert set(_snapshot(chunk)) == {BlockType.AIR}


def test_generate_layers():
    chunk = Chunk()
    chunk.generate()
    for x, y, z in product(range(CHUNK_SIZE), repeat=3):
        block = chunk.block_at(x, y, z)
        if y == 0:
            assert block is BlockType.STONE
        elif y < 3:
            assert block is BlockType.DIRT
        elif y == 3:
            assert block is BlockType.GRASS
        else:
            assert block is BlockType.AIR


def test_break_block_makes_air():
    chunk = Chunk()
    chunk.generate()
    chunk.break_block(2, 0, 7)
    assert chunk.block_at(2, 0, 7) is BlockType.AIR
    assert chunk.block_at(2, 1, 7) is BlockType.DIRT


def test_place_block_sets_type():
    chunk = Chunk()
    chunk.place_block(4, 10, 9, BlockType.STONE)
    assert chunk.block_at(4, 10, 9) is BlockType.STONE


def test_place_then_break_round_trip():
    chunk = Chunk()
    before = _snapshot(chunk)
    chunk.place_block(1, 2, 3, BlockType.GRASS)
    chunk.break_block(1, 2, 3)
    assert _snapshot(chunk) == before


@pytest.mark.parametrize("pos", [(-1, 0, 0), (0, CHUNK_SIZE, 0), (0, 0, 99)])
def test_out_of_bounds_edits_are_ignored(pos):
    chunk = Chunk()
    chunk.generate()
    before = _snapshot(chunk)
    chunk.place_block(*pos, BlockType.STONE)
    chunk.break_block(*pos)
    assert _snapshot(chunk) == before


@pytest.mark.parametrize("pos", [(-1, 0, 0), (CHUNK_SIZE, 0, 0), (0, 0, CHUNK_SIZE)])
def test_block_at_out_of_bounds_raises(pos):
    with pytest.raises(IndexError):
        Chunk().block_at(*pos)