"""Axis-aligned bounding volumes computed from the scene graph."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .scene import SceneNode


@dataclass(frozen=True, eq=False)
class BoundingVolume:
    """Min/max corner pair of an axis-aligned box in world space."""

    minimum: np.ndarray
    maximum: np.ndarray

    @classmethod
    def from_points(cls, points: np.ndarray) -> "BoundingVolume":
        return cls(points.min(axis=0), points.max(axis=0))

    @classmethod
    def degenerate(cls, point: Sequence[float]) -> "BoundingVolume":
        corner = np.array(point, dtype=np.float64)
        return cls(corner.copy(), corner.copy())

    @property
    def center(self) -> np.ndarray:
        return (self.minimum + self.maximum) * 0.5

    @property
    def size(self) -> np.ndarray:
        return self.maximum - self.minimum

    def intersects(self, other: "BoundingVolume") -> bool:
        """Overlap on all three axes; touching faces count as intersecting."""

        return bool(
            np.all(self.minimum <= other.maximum) and np.all(self.maximum >= other.minimum)
        )

    def contains_point(self, point: Sequence[float]) -> bool:
        p = np.asarray(point, dtype=np.float64)
        return bool(np.all(self.minimum <= p) and np.all(p <= self.maximum))


def bounding_volume_of(node: SceneNode) -> BoundingVolume:
    """Return the world-space box enclosing every mesh vertex under ``node``.

    The result is recomputed from the current transforms on every call, so a
    node that moved (or a door that swung) since the last query is always
    measured where it is now. A subtree without geometry yields a zero-volume
    box at the node's world position.
    """

    chunks = []
    for child in node.traverse():
        mesh = child.mesh
        if mesh is None or mesh.is_empty():
            continue
        local = np.asarray(mesh.vertices, dtype=np.float64)
        homogeneous = np.hstack([local, np.ones((local.shape[0], 1))])
        world = homogeneous @ child.world_matrix().T
        chunks.append(world[:, :3])
    if not chunks:
        return BoundingVolume.degenerate(node.world_position())
    return BoundingVolume.from_points(np.vstack(chunks))
