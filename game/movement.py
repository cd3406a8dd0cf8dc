"""Discrete directional movement with full rollback on collision."""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

from .bounds import bounding_volume_of
from .collision import resolve

if TYPE_CHECKING:  # pragma: no cover - circular import safe guard
    from .world import World


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"
    LEFT = "left"
    RIGHT = "right"


# Unit step per direction on the ground plane (x, y, z).
STEP_VECTORS: Dict[Direction, Tuple[float, float, float]] = {
    Direction.FORWARD: (0.0, 0.0, 1.0),
    Direction.BACKWARD: (0.0, 0.0, -1.0),
    Direction.LEFT: (-1.0, 0.0, 0.0),
    Direction.RIGHT: (1.0, 0.0, 0.0),
}


def coerce_direction(value: Any) -> Optional[Direction]:
    if isinstance(value, Direction):
        return value
    try:
        return Direction(value)
    except ValueError:
        return None


class MovementController:
    """Applies one fixed step per input event to the world's avatar."""

    def __init__(self, world: "World") -> None:
        self._world = world

    def apply_directional_input(self, direction: Any) -> Optional[bool]:
        """Try to move one step; return whether the move stuck.

        ``None`` means nothing happened: the avatar or house is not loaded yet,
        or ``direction`` is not a recognised direction.
        """

        world = self._world
        avatar = world.avatar
        house = world.house
        if avatar is None or house is None:
            return None
        resolved = coerce_direction(direction)
        if resolved is None:
            return None

        previous = avatar.transform.copy()
        dx, dy, dz = STEP_VECTORS[resolved]
        position = avatar.transform.position
        position[0] += dx * avatar.step
        position[1] += dy * avatar.step
        position[2] += dz * avatar.step

        accepted = resolve(
            previous,
            bounding_volume_of(avatar.node),
            bounding_volume_of(avatar.obstacle),
        )
        if not accepted:
            avatar.transform.restore(previous)

        world.follow_avatar()
        return accepted
