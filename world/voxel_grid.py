"""Voxel grid storage with fast indexed access."""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Sequence

from world.block_box import BlockBox, BlockPos
from world.directions import FACE_DIRECTIONS

logger = logging.getLogger(__name__)


def neighbors(x: int, y: int, z: int) -> Iterator[BlockPos]:
    """Yield face-adjacent neighbor coordinates for ``(x, y, z)``."""
    for dx, dy, dz in FACE_DIRECTIONS:
        yield BlockPos(x + dx, y + dy, z + dz)


class VoxelGrid:
    """Dense voxel storage optimized for tight loops."""

    __slots__ = ("size_x", "size_y", "size_z", "_default", "_data")

    def __init__(self, size_xyz: Sequence[int], default_block: int = 0) -> None:
        if len(size_xyz) != 3:
            raise ValueError("size_xyz must contain three integers")
        sx, sy, sz = (int(axis) for axis in size_xyz)
        if sx <= 0 or sy <= 0 or sz <= 0:
            raise ValueError("grid dimensions must be positive")

        self.size_x = sx
        self.size_y = sy
        self.size_z = sz
        self._default = int(default_block)
        self._data = [self._default] * (sx * sy * sz)

    # Internal utilities -------------------------------------------------
    def _index(self, x: int, y: int, z: int) -> int:
        if not (0 <= x < self.size_x and 0 <= y < self.size_y and 0 <= z < self.size_z):
            raise IndexError("voxel coordinates out of range")
        return (z * self.size_y + y) * self.size_x + x

    def _write(self, box: BlockBox, cells: Iterable[BlockPos], block_id: int) -> int:
        if not self.bounds().contains_box(box):
            raise IndexError(f"box {box} extends outside the grid")
        block_id = int(block_id)
        written = 0
        for x, y, z in cells:
            self._data[self._index(x, y, z)] = block_id
            written += 1
        logger.debug("wrote %d cells of block %d into %s", written, block_id, box)
        return written

    # API ----------------------------------------------------------------
    def get(self, x: int, y: int, z: int) -> int:
        return self._data[self._index(x, y, z)]

    def set(self, x: int, y: int, z: int, block_id: int) -> None:
        self._data[self._index(x, y, z)] = int(block_id)

    def is_air(self, x: int, y: int, z: int) -> bool:
        return self.get(x, y, z) == 0

    def bounds(self) -> BlockBox:
        return BlockBox(0, 0, 0, self.size_x - 1, self.size_y - 1, self.size_z - 1)

    def fill(self, box: BlockBox, block_id: int) -> int:
        """Set every cell of ``box``; returns the number of cells written."""
        return self._write(box, box.positions(), block_id)

    def fill_walls(self, box: BlockBox, block_id: int) -> int:
        """Set the hollow shell of ``box``."""
        return self._write(box, box.wall_positions(), block_id)

    def fill_edges(self, box: BlockBox, block_id: int) -> int:
        """Set only the edges and corners of ``box``, leaving faces open."""
        return self._write(box, box.edge_positions(), block_id)

    def count_solid(self, box: Optional[BlockBox] = None) -> int:
        region = self.bounds() if box is None else box
        return sum(1 for x, y, z in region.positions() if self.get(x, y, z) != 0)
