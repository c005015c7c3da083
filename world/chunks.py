"""Chunk indexing utilities for voxel grids."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence, Tuple

from engine import config
from world.block_box import BlockBox
from world.voxel_grid import VoxelGrid

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE: Tuple[int, int, int] = (16, 16, 16)


@dataclass(frozen=True)
class ChunkKey:
    x: int
    y: int
    z: int


class ChunkIndex:
    """Partition a voxel grid into axis-aligned chunks."""

    def __init__(self, grid: VoxelGrid, chunk_size: Optional[Sequence[int]] = None) -> None:
        if chunk_size is None:
            chunk_size = config.get("world.chunk_size", DEFAULT_CHUNK_SIZE)
        try:
            size = tuple(int(cs) for cs in chunk_size)
        except (TypeError, ValueError):
            raise ValueError("chunk_size must be a 3-tuple") from None
        if len(size) != 3:
            raise ValueError("chunk_size must be a 3-tuple")
        if any(cs <= 0 for cs in size):
            raise ValueError("chunk dimensions must be positive")
        self.grid = grid
        self.chunk_size = size
        self._chunks = self._build_index()
        logger.debug("chunk index %s over grid %s", self._chunks, grid.bounds())

    def _build_index(self) -> Tuple[int, int, int]:
        max_x = (self.grid.size_x + self.chunk_size[0] - 1) // self.chunk_size[0]
        max_y = (self.grid.size_y + self.chunk_size[1] - 1) // self.chunk_size[1]
        max_z = (self.grid.size_z + self.chunk_size[2] - 1) // self.chunk_size[2]
        return max_x, max_y, max_z

    def chunk_counts(self) -> Tuple[int, int, int]:
        return self._chunks

    def iter_chunk_keys(self) -> Iterator[ChunkKey]:
        max_x, max_y, max_z = self._chunks
        for cx in range(max_x):
            for cy in range(max_y):
                for cz in range(max_z):
                    yield ChunkKey(cx, cy, cz)

    def chunk_box(self, key: ChunkKey) -> BlockBox:
        """Inclusive cell box covered by ``key``, clipped to the grid."""
        cx, cy, cz = self.chunk_size
        return BlockBox(
            key.x * cx,
            key.y * cy,
            key.z * cz,
            min((key.x + 1) * cx, self.grid.size_x) - 1,
            min((key.y + 1) * cy, self.grid.size_y) - 1,
            min((key.z + 1) * cz, self.grid.size_z) - 1,
        )

    def iter_blocks_in_chunk(self, key: ChunkKey) -> Iterator[Tuple[int, int, int, int]]:
        for x, y, z in self.chunk_box(key).positions():
            block = self.grid.get(x, y, z)
            if block != 0:
                yield x, y, z, block
