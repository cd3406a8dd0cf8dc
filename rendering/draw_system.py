"""Wireframe renderer for the house walkthrough scene."""
from __future__ import annotations

from typing import Sequence, Tuple

from OpenGL import GL as gl

import numpy as np
import pygame

from game.camera import Camera3D
from game.scene import SceneNode
from game.world import World
from .opengl_context import LINE_COLOR

HUD_TEXT_COLOR = (230, 230, 230)
HUD_HINT = "W/A/S/D move  |  drag to look  |  wheel to zoom  |  Esc quit"


class SceneRenderer:
    """Draws every visible node of the scene graph as colored line segments."""

    def __init__(self) -> None:
        pygame.font.init()
        self._overlay_font = pygame.font.SysFont("Consolas", 16)

    def draw_world(self, world: World) -> None:
        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self._apply_camera(world.camera)
        self._draw_node(world.scene, np.identity(4), visible=True)
        self._draw_hud(world.camera, [HUD_HINT, self._door_status(world)])

    def draw_placeholder(self, camera: Camera3D) -> None:
        """Frame shown while the house and avatar are still loading."""

        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self._draw_hud(camera, ["Loading house..."])

    def _draw_node(self, node: SceneNode, parent_matrix: np.ndarray, *, visible: bool) -> None:
        matrix = parent_matrix @ node.transform.matrix()
        visible = visible and node.visible
        if not visible:
            return
        if node.mesh is not None and not node.mesh.is_empty():
            self._draw_mesh(node, matrix)
        for child in node.children:
            self._draw_node(child, matrix, visible=visible)

    def _draw_mesh(self, node: SceneNode, matrix: np.ndarray) -> None:
        local = np.asarray(node.mesh.vertices, dtype=np.float64)
        homogeneous = np.hstack([local, np.ones((local.shape[0], 1))])
        transformed = (homogeneous @ matrix.T)[:, :3]

        gl.glColor4f(*(node.color or LINE_COLOR))
        gl.glBegin(gl.GL_LINES)
        for start_index, end_index in node.mesh.segments:
            gl.glVertex3f(*transformed[start_index])
            gl.glVertex3f(*transformed[end_index])
        gl.glEnd()

    def _apply_camera(self, camera: Camera3D) -> None:
        projection = camera.projection_matrix().astype(np.float32)
        view = camera.view_matrix().astype(np.float32)
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glLoadMatrixf(np.transpose(projection).flatten())
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glLoadMatrixf(np.transpose(view).flatten())

    @staticmethod
    def _door_status(world: World) -> str:
        if world.door is None:
            return "Door: none"
        if not world.door_trigger.triggered:
            return "Door: closed"
        animation = world.door_trigger.animation
        if animation is not None and not animation.finished:
            return "Door: opening"
        return "Door: open"

    def _draw_hud(self, camera: Camera3D, lines: Sequence[str]) -> None:
        if not self._begin_overlay(camera):
            return
        y = 24.0
        for text in lines:
            self._draw_overlay_text(12.0, y, text, HUD_TEXT_COLOR)
            y += 20.0
        self._end_overlay()

    def _begin_overlay(self, camera: Camera3D) -> bool:
        width, height = camera.viewport_size
        if width <= 0 or height <= 0:
            return False
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glPushMatrix()
        gl.glLoadIdentity()
        gl.glOrtho(0, width, height, 0, -1, 1)
        gl.glMatrixMode(gl.GL_MODELVIEW)
        gl.glPushMatrix()
        gl.glLoadIdentity()
        gl.glDisable(gl.GL_DEPTH_TEST)
        return True

    def _end_overlay(self) -> None:
        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glPopMatrix()
        gl.glMatrixMode(gl.GL_PROJECTION)
        gl.glPopMatrix()
        gl.glMatrixMode(gl.GL_MODELVIEW)

    def _draw_overlay_text(self, x: float, y: float, text: str, color: Tuple[int, int, int]) -> None:
        surface = self._overlay_font.render(text, True, color)
        data = pygame.image.tostring(surface, "RGBA", True)
        gl.glRasterPos2f(x, y)
        gl.glDrawPixels(
            surface.get_width(),
            surface.get_height(),
            gl.GL_RGBA,
            gl.GL_UNSIGNED_BYTE,
            data,
        )
