import math

import numpy as np
import pytest

from game.bounds import BoundingVolume, bounding_volume_of
from game.scene import SceneNode, Transform

from conftest import box_node


def test_box_volume_in_world_space():
    node = box_node("crate", (1.0, 2.0, 3.0), (2.0, 4.0, 6.0))
    volume = bounding_volume_of(node)
    assert volume.minimum.tolist() == [0.0, 0.0, 0.0]
    assert volume.maximum.tolist() == [2.0, 4.0, 6.0]


def test_volume_encloses_all_descendants():
    root = SceneNode(name="root", transform=Transform(position=(10.0, 0.0, 0.0)))
    box_node("a", (-1.0, 0.0, 0.0), (1.0, 1.0, 1.0), parent=root)
    box_node("b", (2.0, 3.0, 0.0), (1.0, 1.0, 1.0), parent=root)
    volume = bounding_volume_of(root)
    assert volume.minimum.tolist() == [8.5, -0.5, -0.5]
    assert volume.maximum.tolist() == [12.5, 3.5, 0.5]


def test_volume_is_recomputed_after_the_node_moves():
    node = box_node("crate", (0.0, 0.0, 0.0), (1.0, 1.0, 1.0))
    before = bounding_volume_of(node)
    node.transform.position[0] = 5.0
    after = bounding_volume_of(node)
    assert before.center.tolist() == [0.0, 0.0, 0.0]
    assert after.center.tolist() == [5.0, 0.0, 0.0]


def test_rotated_child_swaps_extents():
    root = SceneNode(name="root")
    panel = box_node("panel", (0.0, 0.0, 0.0), (2.0, 1.0, 0.5), parent=root)
    panel.transform.yaw = math.pi / 2
    volume = bounding_volume_of(root)
    assert volume.size == pytest.approx(np.array([0.5, 1.0, 2.0]))


def test_node_without_geometry_is_degenerate_at_its_position():
    parent = SceneNode(transform=Transform(position=(1.0, 0.0, 0.0)))
    empty = SceneNode(name="empty", transform=Transform(position=(0.0, 2.0, 3.0)))
    parent.add(empty)
    volume = bounding_volume_of(empty)
    assert volume.minimum.tolist() == [1.0, 2.0, 3.0]
    assert volume.maximum.tolist() == [1.0, 2.0, 3.0]
    assert volume.size.tolist() == [0.0, 0.0, 0.0]


def test_touching_boxes_intersect():
    a = BoundingVolume(np.array([0.0, 0.0, 0.0]), np.array([1.0, 1.0, 1.0]))
    b = BoundingVolume(np.array([1.0, 0.0, 0.0]), np.array([2.0, 1.0, 1.0]))
    assert a.intersects(b)
    assert b.intersects(a)


def test_separated_on_one_axis_does_not_intersect():
    a = BoundingVolume(np.array([0.0, 0.0, 0.0]), np.array([1.0, 1.0, 1.0]))
    b = BoundingVolume(np.array([0.5, 0.5, 1.01]), np.array([2.0, 2.0, 2.0]))
    assert not a.intersects(b)


def test_contains_point():
    volume = BoundingVolume(np.array([0.0, 0.0, 0.0]), np.array([1.0, 1.0, 1.0]))
    assert volume.contains_point((0.5, 1.0, 0.0))
    assert not volume.contains_point((0.5, 1.5, 0.0))
