"""One-shot proximity trigger that swings the house door open."""
from __future__ import annotations

import logging
import math
from enum import Enum
from typing import Optional, TYPE_CHECKING

import numpy as np

from .tween import Tween, linear

if TYPE_CHECKING:  # pragma: no cover - circular import safe guard
    from .world import World

logger = logging.getLogger(__name__)


class TriggerState(Enum):
    IDLE = "idle"
    TRIGGERED = "triggered"


class DoorTrigger:
    """Starts the door-opening tween the first time the avatar comes close.

    There is no transition back to ``IDLE``; once fired the trigger stays
    inert for the rest of the session, so the animation is never restarted
    or stacked.
    """

    def __init__(
        self,
        threshold: float = 2.0,
        open_angle: float = math.pi / 2.0,
        duration_ms: float = 1000.0,
    ) -> None:
        self.threshold = threshold
        self.open_angle = open_angle
        self.duration_ms = duration_ms
        self.state = TriggerState.IDLE
        self.animation: Optional[Tween] = None

    @property
    def triggered(self) -> bool:
        return self.state is TriggerState.TRIGGERED

    def tick(self, world: "World") -> bool:
        """Evaluate proximity once; return ``True`` only when the door starts opening."""

        avatar = world.avatar
        door = world.door
        if avatar is None or door is None:
            return False
        if self.state is TriggerState.TRIGGERED:
            return False
        distance = float(
            np.linalg.norm(avatar.node.world_position() - door.world_position())
        )
        if distance >= self.threshold:
            return False
        self.state = TriggerState.TRIGGERED
        self.animation = (
            Tween(door.transform)
            .to({"yaw": self.open_angle}, self.duration_ms, easing=linear)
            .start(world.tweens)
        )
        logger.info(f"Avatar within {distance:.2f} of door; opening")
        return True
