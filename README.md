# voxelcraft

voxelcraft is a small model of a voxel world. It provides:

- block types
- fixed-size cubic chunks with simple layered terrain
- an immutable 3D vector type
- a player that moves only into air
- a culling pass that finds the visible block faces and writes them out as text

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `voxelcraft.block`

`BlockType` is an `IntEnum` with four members: `AIR` (0), `GRASS` (1), `DIRT` (2) and `STONE` (3).

- `BlockType.is_transparent()` returns `True` only for `AIR`.
- `BlockType.display_name()` returns the block's display name: `"Ar"`, `"Grama"`, `"Terra"` or `"Pedra"`.

### `voxelcraft.chunk`

- `CHUNK_SIZE` is 16.
- `in_bounds(x, y, z)` is true when every coordinate lies in `0 <= c < CHUNK_SIZE`.

`Chunk` is a 16×16×16 grid of blocks. Every cell starts as air.

- `Chunk.block_at(x, y, z)` returns the `BlockType` at a position. It raises `IndexError` when the position is outside the chunk.
- `Chunk.generate()` fills every column with the same layers:
  - stone at `y == 0`
  - dirt at `y` 1 and 2
  - grass at `y == 3`
  - air above that
- `Chunk.place_block(x, y, z, block_type)` sets a cell. The value is converted with `BlockType(...)`, so a plain integer that names a block type is accepted, and any other value raises `ValueError`.
- `Chunk.break_block(x, y, z)` turns a cell into air.

Both `place_block` and `break_block` do nothing when the position is outside the chunk.

### `voxelcraft.vector`

`Vec3` is a frozen dataclass with fields `x`, `y` and `z`, each defaulting to `0.0`. It supports:

- `+` and `-` with another `Vec3`
- `scale(s)`
- `dot(other)`
- `cross(other)`
- `length()`
- `normalized()`, which returns the zero vector for a zero-length input

The module also has `to_radians(degrees)` and `to_degrees(radians)`.

### `voxelcraft.player`

`Player` is a dataclass with fields `x`, `y`, `z`, `pitch` and `yaw`, all defaulting to `0.0`.

`Player.move(dx, dy, dz, chunk)` moves the player by the offset only when both of these hold for the target cell, found by flooring each coordinate:

- it lies inside the chunk
- it holds air

The method returns `True` when the player moved. It returns `False` otherwise, and also when `chunk` is `None`.

### `voxelcraft.renderer`

`Face` enumerates the six faces of a block: `TOP`, `BOTTOM`, `FRONT`, `BACK`, `LEFT` and `RIGHT`. Each face's `offset` property is the `(dx, dy, dz)` step to the neighbouring cell that the face looks at.

- `visible_faces(chunk)` yields `(x, y, z, face)` for every face of a solid block whose neighbour is air or lies outside the chunk. It goes through blocks in x, y, z order, and through faces in the order listed above.
- `draw_chunk(chunk, stream=None)` writes one line per visible face, such as `Desenhando face TOP do bloco em (0, 3, 0)`. It writes to standard output when no stream is given, and does nothing when `chunk` is `None`.

## Example

```python
import sys

from voxelcraft.block import BlockType
from voxelcraft.chunk import Chunk
from voxelcraft.player import Player
from voxelcraft.renderer import draw_chunk, visible_faces

chunk = Chunk()
chunk.generate()
chunk.break_block(0, 3, 0)
chunk.place_block(5, 4, 5, BlockType.STONE)

player = Player(x=8.5, y=5.0, z=8.5)
moved = player.move(1.0, 0.0, 0.0, chunk)   # True: (9, 5, 8) is air

print(sum(1 for _ in visible_faces(chunk)))
draw_chunk(chunk, sys.stdout)
```

## What this package does not do

There is no graphical output, window or game loop, and no command to run. Rendering stops at working out the visible faces and writing them as text lines. The world is a single chunk held in memory; nothing is saved to disk.