import math

import numpy as np
import pytest

from side_pose_matcher.entities.data.pose import Pose
from side_pose_matcher.entities.data.vector import Vector2D
from side_pose_matcher.entities.game.pose_table import PoseTable

# -----------------------------------------------------------------
# Vector2D
# -----------------------------------------------------------------


def test_vector2d_components_and_equality():
    v = Vector2D(3, 4)
    x, y = v
    assert (x, y) == (3.0, 4.0)
    assert (v[0], v[1]) == (v.x, v.y)
    assert v == Vector2D(3.0 + 1e-12, 4.0)
    assert v != Vector2D(3.0, 4.1)
    np.testing.assert_array_equal(np.asarray(v), [3.0, 4.0])
    with pytest.raises(IndexError):
        v[2]


@pytest.mark.parametrize("coords", [((1, 2),), ([1, 2],), (np.array([1, 2]),), (1, 2)])
def test_vector2d_accepts_pairs(coords):
    v = Vector2D(*coords)
    assert (v.x, v.y) == (1.0, 2.0)


def test_vector2d_rejects_bad_arguments():
    with pytest.raises(TypeError):
        Vector2D(1, 2, 3)
    with pytest.raises(TypeError):
        Vector2D(5)


def test_vector2d_distances():
    v1 = Vector2D(1, 1)
    assert v1.squared_distance_to(Vector2D(10, 10)) == 162
    assert v1.squared_distance_to((0, 0)) == 2


# -----------------------------------------------------------------
# Pose
# -----------------------------------------------------------------


def test_pose_from_degrees():
    pose = Pose.from_degrees(3.95, 2.81, 59.62)
    assert pose.x == 3.95 and pose.y == 2.81
    assert math.isclose(pose.heading, math.radians(59.62))


def test_pose_heading_not_normalised():
    pose = Pose(0.0, 0.0, 5 * math.pi)
    assert pose.heading == 5 * math.pi


def test_pose_position_and_immutability():
    pose = Pose(1.0, -2.0, 0.5)
    assert pose.position == Vector2D(1.0, -2.0)
    with pytest.raises(AttributeError):
        pose.x = 3.0


def test_pose_is_close():
    assert Pose(1.0, 2.0, 0.0).is_close(Pose(1.0 + 1e-12, 2.0, -1e-12))
    assert not Pose(1.0, 2.0, 0.0).is_close(Pose(1.1, 2.0, 0.0))


# -----------------------------------------------------------------
# PoseTable
# -----------------------------------------------------------------


def test_pose_table_keeps_order_and_positions():
    table = PoseTable([Pose(0, 0, 0), Pose(10, 10, 1.0), Pose(-1, 2, 2.0)], name="blue")
    assert len(table) == 3
    assert table[1] == Pose(10, 10, 1.0)
    assert list(table) == [Pose(0, 0, 0), Pose(10, 10, 1.0), Pose(-1, 2, 2.0)]
    np.testing.assert_array_equal(table.positions, [[0, 0], [10, 10], [-1, 2]])
    assert table.name == "blue"


def test_pose_table_positions_are_read_only():
    table = PoseTable([Pose(0, 0, 0)])
    with pytest.raises(ValueError):
        table.positions[0, 0] = 5.0


def test_pose_table_is_detached_from_source_list():
    source = [Pose(0, 0, 0)]
    table = PoseTable(source)
    source.append(Pose(1, 1, 0))
    assert len(table) == 1


def test_empty_pose_table():
    table = PoseTable([])
    assert table.is_empty()
    assert table.positions.shape == (0, 2)


def test_pose_table_rejects_non_poses():
    with pytest.raises(TypeError):
        PoseTable([(0, 0, 0)])


def test_pose_table_from_degrees():
    table = PoseTable.from_degrees([(0, 0, 90), (1, 1, -180)])
    assert math.isclose(table[0].heading, math.pi / 2)
    assert math.isclose(table[1].heading, -math.pi)
