"""World context shared by the walkthrough's per-frame systems."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from rendering.wireframe_primitives import create_line_mesh

from .camera import Camera3D, derive_camera_transform
from .config import WalkthroughSettings
from .proximity import DoorTrigger
from .scene import SceneNode, Transform, build_name_index
from .tween import TweenGroup

logger = logging.getLogger(__name__)

CONTROLLER_RAY_COLOR = (1.0, 1.0, 1.0, 1.0)


@dataclass(eq=False)
class Avatar:
    """The user-driven walker; ``obstacle`` is borrowed, never owned."""

    node: SceneNode
    step: float
    obstacle: SceneNode

    @property
    def transform(self) -> Transform:
        return self.node.transform


def attach_controller_rays(scene: SceneNode, count: int = 2, ray_length: float = 5.0) -> List[SceneNode]:
    """Add hidden controller nodes with pointer rays for an XR pose source to drive."""

    controllers = []
    for index in range(count):
        controller = SceneNode(name=f"controller-{index}", visible=False)
        controller.add(
            SceneNode(
                name="line",
                mesh=create_line_mesh(ray_length),
                color=CONTROLLER_RAY_COLOR,
            )
        )
        scene.add(controller)
        controllers.append(controller)
    return controllers


@dataclass(eq=False)
class World:
    settings: WalkthroughSettings
    camera: Camera3D
    scene: SceneNode = field(default_factory=lambda: SceneNode(name="Scene"))
    tweens: TweenGroup = field(default_factory=TweenGroup)
    house: Optional[SceneNode] = None
    avatar: Optional[Avatar] = None
    door: Optional[SceneNode] = None
    nodes: Dict[str, SceneNode] = field(default_factory=dict, repr=False)
    door_trigger: DoorTrigger = field(init=False)
    controllers: List[SceneNode] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.door_trigger = DoorTrigger(
            threshold=self.settings.door_trigger_distance,
            open_angle=self.settings.door_open_angle,
            duration_ms=self.settings.door_open_duration_ms,
        )
        self.controllers = attach_controller_rays(self.scene)

    def attach_assets(self, house: SceneNode, avatar_node: SceneNode) -> None:
        """Place the loaded house and avatar into the scene and resolve the door."""

        self.scene.add(house)
        self.house = house
        self.nodes = build_name_index(house)
        self.door = self.nodes.get(self.settings.door_name)
        if self.door is None:
            logger.warning(
                f"No node named '{self.settings.door_name}' in house; door trigger disabled"
            )
        else:
            logger.info(f"Door '{self.door.name}' found at {self.door.world_position().tolist()}")

        avatar_node.transform.position[:] = self.settings.avatar_start
        self.scene.add(avatar_node)
        self.avatar = Avatar(node=avatar_node, step=self.settings.avatar_step, obstacle=house)
        self.follow_avatar()

    def follow_avatar(self) -> None:
        if self.avatar is None:
            return
        self.camera.apply(
            derive_camera_transform(self.avatar.transform.position, self.settings.camera_offset)
        )


def create_world(settings: WalkthroughSettings, viewport_size: Tuple[int, int]) -> World:
    """Return an empty world whose camera waits at the default vantage point."""

    camera = Camera3D(
        position=settings.camera_offset,
        target=(0.0, 0.0, 0.0),
        viewport_size=viewport_size,
        fov=settings.camera_fov,
        near_clip=settings.camera_near,
        far_clip=settings.camera_far,
    )
    return World(settings=settings, camera=camera)
