"""Axes and face directions in block-world coordinates (Y is up)."""
from __future__ import annotations

from enum import Enum
from typing import Tuple

Offset = Tuple[int, int, int]


class Axis(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"

    @property
    def component(self) -> int:
        """Position of this axis within an (x, y, z) triple."""
        return "xyz".index(self.value)


class Direction(Enum):
    """The six face directions, each a unit step along one axis."""

    DOWN = (0, -1, 0)
    UP = (0, 1, 0)
    NORTH = (0, 0, -1)
    SOUTH = (0, 0, 1)
    WEST = (-1, 0, 0)
    EAST = (1, 0, 0)

    @property
    def offset(self) -> Offset:
        return self.value

    @property
    def axis(self) -> Axis:
        dx, dy, _ = self.value
        if dx:
            return Axis.X
        if dy:
            return Axis.Y
        return Axis.Z

    @property
    def positive(self) -> bool:
        return sum(self.value) > 0

    @property
    def opposite(self) -> "Direction":
        dx, dy, dz = self.value
        return Direction((-dx, -dy, -dz))

    @classmethod
    def from_offset(cls, offset: Offset) -> "Direction":
        try:
            return cls(tuple(int(v) for v in offset))
        except ValueError:
            raise ValueError(f"not a unit face offset: {offset!r}") from None


FACE_DIRECTIONS: Tuple[Offset, ...] = tuple(d.offset for d in Direction)
