"""Per-frame sequencing of the walkthrough systems."""
from __future__ import annotations

from typing import Callable, Optional

from .controls import FreeLookControls
from .world import World


class FrameDriver:
    """Runs one frame: proximity, tweens, free-look, then render.

    Proximity goes first so a freshly started door tween is advanced in the
    same frame; free-look goes after the tweens and the follow camera so a
    manual look adjustment is not overwritten before it is drawn.
    """

    def __init__(
        self,
        world: World,
        render: Callable[[World], None],
        controls: Optional[FreeLookControls] = None,
    ) -> None:
        self.world = world
        self.controls = controls
        self._render = render
        self.frame_count = 0

    def tick(self, dt_ms: float) -> None:
        world = self.world
        world.door_trigger.tick(world)
        world.tweens.update(dt_ms)
        if self.controls is not None:
            self.controls.update(world.camera)
        self._render(world)
        self.frame_count += 1
