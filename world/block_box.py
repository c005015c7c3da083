"""Inclusive integer block boxes with iteration helpers."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, NamedTuple, Sequence, Tuple, Union

from world.directions import Axis, Direction


class BlockPos(NamedTuple):
    x: int
    y: int
    z: int


class NoodleShapeError(ValueError):
    """Raised when a box is thicker than one cell on an axis that must be fixed."""

    def __init__(self, box: "BlockBox", axis: Axis) -> None:
        super().__init__(f"non-noodle bounding box on axis {axis.value}: {box}")
        self.box = box
        self.axis = axis


PositionVisitor = Callable[[BlockPos], None]
BoxVisitor = Callable[["BlockBox"], None]


@dataclass(frozen=True)
class BlockBox:
    """Axis-aligned box of cells with inclusive min/max corners.

    Bounds are not validated. An axis with ``min > max`` is simply empty, so
    every iteration helper produces nothing for it.
    """

    min_x: int
    min_y: int
    min_z: int
    max_x: int
    max_y: int
    max_z: int

    @classmethod
    def from_box(cls, box) -> "BlockBox":
        """Copy the bounds of any object exposing the six bound attributes."""
        return cls(box.min_x, box.min_y, box.min_z, box.max_x, box.max_y, box.max_z)

    @classmethod
    def from_corners(cls, a: Sequence[int], b: Sequence[int]) -> "BlockBox":
        """Smallest box containing both corner cells."""
        ax, ay, az = (int(v) for v in a)
        bx, by, bz = (int(v) for v in b)
        return cls(min(ax, bx), min(ay, by), min(az, bz), max(ax, bx), max(ay, by), max(az, bz))

    # Queries ------------------------------------------------------------
    def min_corner(self) -> BlockPos:
        return BlockPos(self.min_x, self.min_y, self.min_z)

    def max_corner(self) -> BlockPos:
        return BlockPos(self.max_x, self.max_y, self.max_z)

    def dimensions(self) -> Tuple[int, int, int]:
        return (
            self.max_x - self.min_x + 1,
            self.max_y - self.min_y + 1,
            self.max_z - self.min_z + 1,
        )

    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y or self.min_z > self.max_z

    def volume(self) -> int:
        if self.is_empty():
            return 0
        sx, sy, sz = self.dimensions()
        return sx * sy * sz

    def center(self) -> BlockPos:
        return BlockPos(
            self.min_x + (self.max_x - self.min_x + 1) // 2,
            self.min_y + (self.max_y - self.min_y + 1) // 2,
            self.min_z + (self.max_z - self.min_z + 1) // 2,
        )

    def contains(self, pos: Sequence[int]) -> bool:
        x, y, z = pos
        return (
            self.min_x <= x <= self.max_x
            and self.min_y <= y <= self.max_y
            and self.min_z <= z <= self.max_z
        )

    def contains_box(self, other: "BlockBox") -> bool:
        """True when every cell of ``other`` lies inside this box. Empty boxes fit anywhere."""
        if other.is_empty():
            return True
        return self.contains(other.min_corner()) and self.contains(other.max_corner())

    def intersects(self, other: "BlockBox") -> bool:
        """True when the boxes share at least one cell. Empty boxes share none."""
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.max_x >= other.min_x
            and self.min_x <= other.max_x
            and self.max_y >= other.min_y
            and self.min_y <= other.max_y
            and self.max_z >= other.min_z
            and self.min_z <= other.max_z
        )

    # Iteration ----------------------------------------------------------
    def positions(self) -> Iterator[BlockPos]:
        """Yield every cell, x outermost, then y, then z."""
        for x in range(self.min_x, self.max_x + 1):
            for y in range(self.min_y, self.max_y + 1):
                for z in range(self.min_z, self.max_z + 1):
                    yield BlockPos(x, y, z)

    def _boundary_hits(self, pos: BlockPos) -> int:
        hits = 0
        if pos.x == self.min_x or pos.x == self.max_x:
            hits += 1
        if pos.y == self.min_y or pos.y == self.max_y:
            hits += 1
        if pos.z == self.min_z or pos.z == self.max_z:
            hits += 1
        return hits

    def wall_positions(self) -> Iterator[BlockPos]:
        """Yield cells on the outer shell, in :meth:`positions` order."""
        for pos in self.positions():
            if self._boundary_hits(pos) >= 1:
                yield pos

    def edge_positions(self) -> Iterator[BlockPos]:
        """Yield cells lying on at least two boundary planes (edges and corners)."""
        for pos in self.positions():
            if self._boundary_hits(pos) >= 2:
                yield pos

    def slices(self, axis: Union[Axis, str]) -> Iterator["BlockBox"]:
        """Yield one-cell-thick tubes spanning the full range of ``axis``.

        Tubes along X are ordered by y then z, along Y by x then z, along Z by
        x then y.
        """
        axis = Axis(axis)
        if axis is Axis.X:
            for y in range(self.min_y, self.max_y + 1):
                for z in range(self.min_z, self.max_z + 1):
                    yield BlockBox(self.min_x, y, z, self.max_x, y, z)
        elif axis is Axis.Y:
            for x in range(self.min_x, self.max_x + 1):
                for z in range(self.min_z, self.max_z + 1):
                    yield BlockBox(x, self.min_y, z, x, self.max_y, z)
        else:
            for x in range(self.min_x, self.max_x + 1):
                for y in range(self.min_y, self.max_y + 1):
                    yield BlockBox(x, y, self.min_z, x, y, self.max_z)

    def for_each_position(self, visit: PositionVisitor) -> None:
        for pos in self.positions():
            visit(pos)

    def for_each_wall_position(self, visit: PositionVisitor) -> None:
        for pos in self.wall_positions():
            visit(pos)

    def for_each_edge_position(self, visit: PositionVisitor) -> None:
        for pos in self.edge_positions():
            visit(pos)

    def slice(self, axis: Union[Axis, str], visit: BoxVisitor) -> None:
        for tube in self.slices(axis):
            visit(tube)

    # Noodle boxes -------------------------------------------------------
    def fixed_x(self) -> int:
        """The x coordinate of a box one cell wide on x, e.g. a Y or Z slice."""
        if self.min_x != self.max_x:
            raise NoodleShapeError(self, Axis.X)
        return self.min_x

    def fixed_y(self) -> int:
        if self.min_y != self.max_y:
            raise NoodleShapeError(self, Axis.Y)
        return self.min_y

    def fixed_z(self) -> int:
        if self.min_z != self.max_z:
            raise NoodleShapeError(self, Axis.Z)
        return self.min_z

    def get_endpoint(self, direction: Union[Direction, Tuple[int, int, int]]) -> BlockPos:
        """Return the end cell of a noodle box in ``direction``.

        ``direction`` is a :class:`Direction` or its unit offset; anything else
        raises ``ValueError``. The box must be one cell thick on both axes
        perpendicular to the direction, otherwise :class:`NoodleShapeError` is
        raised.
        """
        direction = Direction(direction)
        if direction is Direction.WEST:
            return BlockPos(self.min_x, self.fixed_y(), self.fixed_z())
        if direction is Direction.EAST:
            return BlockPos(self.max_x, self.fixed_y(), self.fixed_z())
        if direction is Direction.DOWN:
            return BlockPos(self.fixed_x(), self.min_y, self.fixed_z())
        if direction is Direction.UP:
            return BlockPos(self.fixed_x(), self.max_y, self.fixed_z())
        if direction is Direction.NORTH:
            return BlockPos(self.fixed_x(), self.fixed_y(), self.min_z)
        if direction is Direction.SOUTH:
            return BlockPos(self.fixed_x(), self.fixed_y(), self.max_z)
        raise ValueError(f"unhandled direction {direction!r}")

    # Derived boxes ------------------------------------------------------
    def expand(self, offset: int) -> "BlockBox":
        """Grow every face by ``offset`` cells; negative offsets shrink and may invert axes."""
        return BlockBox(
            self.min_x - offset,
            self.min_y - offset,
            self.min_z - offset,
            self.max_x + offset,
            self.max_y + offset,
            self.max_z + offset,
        )

    def offset(self, dx: int, dy: int, dz: int) -> "BlockBox":
        return BlockBox(
            self.min_x + dx,
            self.min_y + dy,
            self.min_z + dz,
            self.max_x + dx,
            self.max_y + dy,
            self.max_z + dz,
        )

    def union(self, other: "BlockBox") -> "BlockBox":
        return BlockBox(
            min(self.min_x, other.min_x),
            min(self.min_y, other.min_y),
            min(self.min_z, other.min_z),
            max(self.max_x, other.max_x),
            max(self.max_y, other.max_y),
            max(self.max_z, other.max_z),
        )
