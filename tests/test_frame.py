import math

import pytest

from game.config import HOUSE_ASSET, AVATAR_ASSET
from game.assets import read_asset
from game.frame import FrameDriver
from game.movement import Direction, MovementController
from game.scene import SceneNode

from conftest import box_node


class _RecordingControls:
    def __init__(self, calls):
        self.calls = calls

    def update(self, camera):
        self.calls.append("controls")


def test_frame_runs_systems_in_order(make_world, monkeypatch):
    world = make_world()
    calls = []
    monkeypatch.setattr(world.door_trigger, "tick", lambda w: calls.append("proximity"))
    monkeypatch.setattr(world.tweens, "update", lambda dt: calls.append("tweens"))
    driver = FrameDriver(world, lambda w: calls.append("render"), controls=_RecordingControls(calls))

    driver.tick(16.0)

    assert calls == ["proximity", "tweens", "controls", "render"]
    assert driver.frame_count == 1


def test_new_door_animation_advances_in_the_same_frame(make_world):
    house = SceneNode(name="House")
    box_node("Door", (0.0, 0.0, 0.0), (1.0, 2.0, 0.1), parent=house)
    world = make_world(start=(1.0, 0.0, 0.0), house=house)
    driver = FrameDriver(world, lambda w: None)

    driver.tick(100.0)

    assert world.door.transform.yaw == pytest.approx(math.pi / 20)


def test_free_look_is_applied_after_follow_camera(make_world):
    house = SceneNode(name="House")
    box_node("Block", (20.0, 1.0, 20.0), (1.0, 1.0, 1.0), parent=house)
    world = make_world(house=house)
    MovementController(world).apply_directional_input(Direction.FORWARD)

    class _Nudge:
        def update(self, camera):
            camera.position = (camera.position[0] + 1.0, camera.position[1], camera.position[2])

    rendered = []
    driver = FrameDriver(world, lambda w: rendered.append(w.camera.position), controls=_Nudge())
    driver.tick(16.0)

    assert rendered[0] == pytest.approx((1.0, 1.6, 5.1))


def test_walking_into_the_default_house_opens_door_then_blocks(make_world):
    world = make_world(start=(0.0, 0.0, -5.0))
    world.attach_assets(read_asset(HOUSE_ASSET), read_asset(AVATAR_ASSET))
    controller = MovementController(world)
    driver = FrameDriver(world, lambda w: None)

    results = []
    for _ in range(40):
        results.append(controller.apply_directional_input(Direction.FORWARD))
        driver.tick(50.0)

    assert world.door_trigger.triggered
    assert world.door.transform.yaw == pytest.approx(math.pi / 2)
    assert results[-1] is False
    assert world.avatar.transform.position[2] == pytest.approx(-2.4, abs=1e-6)
