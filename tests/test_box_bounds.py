from panda3d.core import Point3

from world.block_box import BlockBox
from world.box_bounds import from_bounding_box, to_bounding_box

import pytest


def test_box_to_bounds():
    bounds = to_bounding_box(BlockBox(0, 1, 2, 2, 1, 3), cube_size=2.0)
    assert not bounds.isEmpty()
    assert bounds.getMin() == Point3(0, 2, 4)
    assert bounds.getMax() == Point3(6, 4, 8)


def test_empty_box_gives_empty_bounds():
    assert to_bounding_box(BlockBox(0, 0, 0, 0, 0, 0).expand(-1)).isEmpty()


def test_bounds_back_to_box():
    box = BlockBox(-3, 0, 4, 1, 2, 4)
    assert from_bounding_box(to_bounding_box(box, 0.5), 0.5) == box


def test_invalid_inputs():
    with pytest.raises(ValueError):
        to_bounding_box(BlockBox(0, 0, 0, 1, 1, 1), cube_size=0)
    with pytest.raises(ValueError):
        from_bounding_box(to_bounding_box(BlockBox(1, 1, 1, 0, 0, 0)))
