from world.directions import FACE_DIRECTIONS, Axis, Direction

import pytest


def test_axis_lookup():
    assert Axis("x") is Axis.X
    assert [a.component for a in Axis] == [0, 1, 2]
    with pytest.raises(ValueError):
        Axis("w")


def test_direction_axes_and_signs():
    assert Direction.EAST.axis is Axis.X and Direction.EAST.positive
    assert Direction.WEST.axis is Axis.X and not Direction.WEST.positive
    assert Direction.UP.axis is Axis.Y and Direction.UP.positive
    assert Direction.NORTH.axis is Axis.Z and not Direction.NORTH.positive
    assert Direction.SOUTH.offset == (0, 0, 1)


def test_opposites():
    for direction in Direction:
        assert direction.opposite.opposite is direction
        assert direction.opposite.axis is direction.axis
    assert Direction.DOWN.opposite is Direction.UP


def test_from_offset():
    assert Direction.from_offset([1, 0, 0]) is Direction.EAST
    with pytest.raises(ValueError):
        Direction.from_offset((1, 1, 0))


def test_face_directions_cover_all():
    assert len(set(FACE_DIRECTIONS)) == 6
    assert all(sum(abs(c) for c in offset) == 1 for offset in FACE_DIRECTIONS)
