"""Static wireframe meshes used by the house walkthrough."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple


Vec3 = Tuple[float, float, float]

_BOX_EDGES: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)


@dataclass(frozen=True)
class WireframeMesh:
    """Simple container for line segments connecting vertex indices."""

    vertices: Sequence[Vec3]
    segments: Sequence[Tuple[int, int]]

    def merged(self, other: "WireframeMesh") -> "WireframeMesh":
        """Concatenate two meshes, re-indexing the segments of ``other``."""

        base = len(self.vertices)
        vertices = list(self.vertices) + list(other.vertices)
        segments = list(self.segments) + [(a + base, b + base) for a, b in other.segments]
        return WireframeMesh(vertices, segments)

    def is_empty(self) -> bool:
        return len(self.vertices) == 0


def create_box_mesh(size: Vec3, offset: Vec3 = (0.0, 0.0, 0.0)) -> WireframeMesh:
    """Axis-aligned box of ``size`` centered on ``offset``."""

    hx, hy, hz = (size[0] / 2.0, size[1] / 2.0, size[2] / 2.0)
    ox, oy, oz = offset
    vertices: List[Vec3] = []
    for y in (-hy, hy):
        vertices.extend(
            [
                (ox - hx, oy + y, oz - hz),
                (ox + hx, oy + y, oz - hz),
                (ox + hx, oy + y, oz + hz),
                (ox - hx, oy + y, oz + hz),
            ]
        )
    return WireframeMesh(vertices, _BOX_EDGES)


def create_person_mesh(
    height: float = 1.8,
    width: float = 0.5,
    depth: float = 0.3,
) -> WireframeMesh:
    """Blocky walker figure standing on its origin (feet at y=0)."""

    leg_height = height * 0.45
    torso_height = height * 0.35
    head_size = height - leg_height - torso_height
    leg_width = width * 0.4

    left_leg = create_box_mesh(
        (leg_width, leg_height, depth),
        (-width / 4.0, leg_height / 2.0, 0.0),
    )
    right_leg = create_box_mesh(
        (leg_width, leg_height, depth),
        (width / 4.0, leg_height / 2.0, 0.0),
    )
    torso = create_box_mesh(
        (width, torso_height, depth),
        (0.0, leg_height + torso_height / 2.0, 0.0),
    )
    head = create_box_mesh(
        (head_size * 0.8, head_size, min(depth, head_size * 0.8)),
        (0.0, height - head_size / 2.0, 0.0),
    )
    return left_leg.merged(right_leg).merged(torso).merged(head)


def create_line_mesh(length: float = 1.0) -> WireframeMesh:
    """Single segment pointing down -Z, like a controller pointer ray."""

    return WireframeMesh([(0.0, 0.0, 0.0), (0.0, 0.0, -length)], [(0, 1)])
