import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src", "py")))

from data_types import (
    DIR_EAST,
    DIR_NORTH,
    DIR_SOUTH,
    DIR_WEST,
    Pose,
    increment,
    parse_direction,
    rotate,
)


def test_rotate_cycles_right_down_left_up():
    assert rotate(DIR_EAST) == DIR_SOUTH
    assert rotate(DIR_SOUTH) == DIR_WEST
    assert rotate(DIR_WEST) == DIR_NORTH
    assert rotate(DIR_NORTH) == DIR_EAST


def test_rotate_has_period_four():
    for d in (DIR_EAST, DIR_SOUTH, DIR_WEST, DIR_NORTH):
        assert rotate(rotate(rotate(rotate(d)))) == d


def test_increment_signs():
    assert increment(DIR_EAST) == 1
    assert increment(DIR_SOUTH) == 1
    assert increment(DIR_WEST) == -1
    assert increment(DIR_NORTH) == -1


def test_pose_advance_moves_along_heading():
    assert Pose((2, 2), DIR_EAST).advance() == Pose((3, 2), DIR_EAST)
    assert Pose((2, 2), DIR_SOUTH).advance() == Pose((2, 3), DIR_SOUTH)
    assert Pose((2, 2), DIR_WEST).advance() == Pose((1, 2), DIR_WEST)
    assert Pose((2, 2), DIR_NORTH).advance() == Pose((2, 1), DIR_NORTH)


def test_pose_rotate_keeps_position():
    pose = Pose((4, 1), DIR_NORTH).rotate()
    assert pose.pos == (4, 1)
    assert pose.facing == DIR_EAST


def test_parse_direction():
    assert parse_direction("R") == DIR_EAST
    assert parse_direction("d") == DIR_SOUTH
    assert parse_direction(" West ") == DIR_WEST
    assert parse_direction("north") == DIR_NORTH
    with pytest.raises(ValueError):
        parse_direction("NE")
