"""Keyboard mapping and mouse free-look for the walkthrough."""
from __future__ import annotations

import math
from typing import Dict, Optional

import pygame

from .camera import Camera3D
from .movement import Direction

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_w: Direction.FORWARD,
    pygame.K_s: Direction.BACKWARD,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}


def direction_for_key(key: int) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key)


class FreeLookControls:
    """Left-drag orbits the camera around its target; the wheel zooms.

    Deltas accumulate between frames and are applied in :meth:`update`, after
    the follow camera has been placed, so manual look adjustments sit on top
    of the follow pose instead of being overwritten by it.
    """

    def __init__(
        self,
        sensitivity: float = 0.005,
        zoom_step: float = 0.9,
        pitch_limit: float = math.radians(85.0),
    ) -> None:
        self.sensitivity = sensitivity
        self.zoom_step = zoom_step
        self.pitch_limit = pitch_limit
        self.dragging = False
        self._yaw_delta = 0.0
        self._pitch_delta = 0.0
        self._zoom_factor = 1.0

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Consume mouse events; return ``True`` if the event was used."""

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.dragging = True
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
            return True
        if event.type == pygame.MOUSEMOTION and self.dragging:
            dx, dy = event.rel
            self._yaw_delta -= dx * self.sensitivity
            self._pitch_delta += dy * self.sensitivity
            return True
        if event.type == pygame.MOUSEWHEEL:
            if event.y > 0:
                self._zoom_factor *= self.zoom_step ** event.y
            elif event.y < 0:
                self._zoom_factor /= self.zoom_step ** (-event.y)
            return True
        return False

    def update(self, camera: Camera3D) -> None:
        if self._yaw_delta or self._pitch_delta:
            camera.orbit(self._yaw_delta, self._pitch_delta, self.pitch_limit)
        if self._zoom_factor != 1.0:
            camera.zoom(self._zoom_factor)
        self._yaw_delta = 0.0
        self._pitch_delta = 0.0
        self._zoom_factor = 1.0
