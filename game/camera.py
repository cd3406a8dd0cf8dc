"""Follow camera for the walkthrough avatar."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

Vec3 = Tuple[float, float, float]

CAMERA_OFFSET: Vec3 = (0.0, 1.6, 5.0)


def _normalize(vec: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(vec)
    if norm == 0:
        return vec
    return vec / norm


def _look_at_matrix(position: Vec3, target: Vec3, up: Vec3) -> np.ndarray:
    pos = np.array(position, dtype=np.float64)
    tgt = np.array(target, dtype=np.float64)
    up_vec = np.array(up, dtype=np.float64)

    forward = _normalize(tgt - pos)
    side = _normalize(np.cross(forward, up_vec))
    true_up = np.cross(side, forward)

    view = np.identity(4, dtype=np.float64)
    view[0, :3] = side
    view[1, :3] = true_up
    view[2, :3] = -forward
    view[0, 3] = -np.dot(side, pos)
    view[1, 3] = -np.dot(true_up, pos)
    view[2, 3] = np.dot(forward, pos)
    return view


def _perspective_matrix(fov_degrees: float, aspect: float, near: float, far: float) -> np.ndarray:
    perspective = np.zeros((4, 4), dtype=np.float64)
    f = 1.0 / math.tan(math.radians(fov_degrees) / 2.0)
    perspective[0, 0] = f / aspect
    perspective[1, 1] = f
    perspective[2, 2] = (far + near) / (near - far)
    perspective[2, 3] = (2 * far * near) / (near - far)
    perspective[3, 2] = -1.0
    return perspective


@dataclass(frozen=True)
class CameraTransform:
    """Camera pose: where it sits and the point it looks at."""

    position: Vec3
    target: Vec3


def derive_camera_transform(
    avatar_position: Sequence[float],
    offset: Sequence[float] = CAMERA_OFFSET,
) -> CameraTransform:
    """Place the camera at ``avatar_position + offset`` looking at the avatar."""

    ax, ay, az = (float(v) for v in avatar_position)
    ox, oy, oz = (float(v) for v in offset)
    return CameraTransform(position=(ax + ox, ay + oy, az + oz), target=(ax, ay, az))


@dataclass
class Camera3D:
    position: Vec3
    target: Vec3
    viewport_size: Tuple[int, int]
    fov: float = 75.0
    near_clip: float = 0.1
    far_clip: float = 1000.0
    up: Vec3 = (0.0, 1.0, 0.0)
    min_distance: float = 0.5
    max_distance: float = 50.0

    def apply(self, transform: CameraTransform) -> None:
        self.position = transform.position
        self.target = transform.target

    def orbit(self, yaw_delta: float, pitch_delta: float, pitch_limit: float) -> None:
        """Rotate the camera around its target by the given angles (radians)."""

        offset = np.array(self.position, dtype=np.float64) - np.array(self.target, dtype=np.float64)
        radius = float(np.linalg.norm(offset))
        if radius == 0.0:
            return
        yaw = math.atan2(offset[0], offset[2]) + yaw_delta
        pitch = math.asin(max(-1.0, min(1.0, offset[1] / radius))) + pitch_delta
        pitch = max(-pitch_limit, min(pitch_limit, pitch))
        self.position = (
            self.target[0] + radius * math.cos(pitch) * math.sin(yaw),
            self.target[1] + radius * math.sin(pitch),
            self.target[2] + radius * math.cos(pitch) * math.cos(yaw),
        )

    def zoom(self, factor: float) -> None:
        """Scale the distance to the target, clamped to the allowed range."""

        tgt = np.array(self.target, dtype=np.float64)
        offset = np.array(self.position, dtype=np.float64) - tgt
        distance = float(np.linalg.norm(offset))
        if distance == 0.0 or factor <= 0.0:
            return
        clamped = max(self.min_distance, min(self.max_distance, distance * factor))
        new_position = tgt + offset / distance * clamped
        self.position = (float(new_position[0]), float(new_position[1]), float(new_position[2]))

    def update_viewport(self, size: Tuple[int, int]) -> None:
        self.viewport_size = size

    @property
    def aspect(self) -> float:
        width, height = self.viewport_size
        return width / height if height > 0 else 1.0

    def view_matrix(self) -> np.ndarray:
        return _look_at_matrix(self.position, self.target, self.up)

    def projection_matrix(self) -> np.ndarray:
        return _perspective_matrix(self.fov, self.aspect, self.near_clip, self.far_clip)
