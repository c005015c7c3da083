"""Conversions between block boxes and Panda3D bounding volumes."""
from __future__ import annotations

import math

from panda3d.core import BoundingBox, Point3

from world.block_box import BlockBox

# Guard against float drift around cell boundaries.
_EPS = 1e-6


def to_bounding_box(box: BlockBox, cube_size: float = 1.0) -> BoundingBox:
    """World-space volume covered by the cells of ``box``."""
    if cube_size <= 0.0:
        raise ValueError("cube_size must be positive")
    if box.is_empty():
        return BoundingBox()
    lo = Point3(box.min_x * cube_size, box.min_y * cube_size, box.min_z * cube_size)
    hi = Point3(
        (box.max_x + 1) * cube_size,
        (box.max_y + 1) * cube_size,
        (box.max_z + 1) * cube_size,
    )
    return BoundingBox(lo, hi)


def from_bounding_box(bounds: BoundingBox, cube_size: float = 1.0) -> BlockBox:
    """Smallest block box whose cells cover ``bounds``."""
    if cube_size <= 0.0:
        raise ValueError("cube_size must be positive")
    if bounds.isEmpty() or bounds.isInfinite():
        raise ValueError("bounding box has no finite volume")
    lo = bounds.getMin()
    hi = bounds.getMax()
    mins = [int(math.floor(lo[i] / cube_size + _EPS)) for i in range(3)]
    maxs = [int(math.ceil(hi[i] / cube_size - _EPS)) - 1 for i in range(3)]
    # A flat volume still touches one layer of cells.
    maxs = [max(mx, mn) for mn, mx in zip(mins, maxs)]
    return BlockBox(mins[0], mins[1], mins[2], maxs[0], maxs[1], maxs[2])
