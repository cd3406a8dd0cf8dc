"""Scene graph nodes and transforms for the walkthrough."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from rendering.wireframe_primitives import WireframeMesh

Vec3 = Tuple[float, float, float]
Color = Tuple[float, float, float, float]


def _vec3(values: Sequence[float]) -> np.ndarray:
    array = np.array(values, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError(f"Expected three components, got {list(values)!r}")
    return array


def _rotation_matrix(euler: np.ndarray) -> np.ndarray:
    """Rotation for XYZ-ordered Euler angles (radians)."""

    cx, cy, cz = (math.cos(a) for a in euler)
    sx, sy, sz = (math.sin(a) for a in euler)
    rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return rx @ ry @ rz


@dataclass(eq=False)
class Transform:
    """Mutable position / Euler rotation / scale triple owned by a node."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))

    def __post_init__(self) -> None:
        self.position = _vec3(self.position)
        self.rotation = _vec3(self.rotation)
        self.scale = _vec3(self.scale)

    @property
    def yaw(self) -> float:
        return float(self.rotation[1])

    @yaw.setter
    def yaw(self, value: float) -> None:
        self.rotation[1] = value

    def copy(self) -> "Transform":
        return Transform(self.position.copy(), self.rotation.copy(), self.scale.copy())

    def restore(self, snapshot: "Transform") -> None:
        """Overwrite every component in place with the values of ``snapshot``."""

        self.position[:] = snapshot.position
        self.rotation[:] = snapshot.rotation
        self.scale[:] = snapshot.scale

    def matrix(self) -> np.ndarray:
        local = np.identity(4)
        local[:3, :3] = _rotation_matrix(self.rotation) * self.scale
        local[:3, 3] = self.position
        return local


@dataclass(eq=False)
class SceneNode:
    """A named node in the scene tree, optionally carrying a wireframe mesh."""

    name: str = ""
    transform: Transform = field(default_factory=Transform)
    mesh: Optional[WireframeMesh] = None
    color: Optional[Color] = None
    visible: bool = True
    parent: Optional["SceneNode"] = field(default=None, repr=False)
    children: List["SceneNode"] = field(default_factory=list, repr=False)

    def add(self, child: "SceneNode") -> "SceneNode":
        if child.parent is not None:
            child.parent.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def remove(self, child: "SceneNode") -> None:
        if child in self.children:
            self.children.remove(child)
            child.parent = None

    def traverse(self) -> Iterator["SceneNode"]:
        """Yield this node and all descendants, depth first, parents first."""

        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def world_matrix(self) -> np.ndarray:
        matrix = self.transform.matrix()
        ancestor = self.parent
        while ancestor is not None:
            matrix = ancestor.transform.matrix() @ matrix
            ancestor = ancestor.parent
        return matrix

    def world_position(self) -> np.ndarray:
        return self.world_matrix()[:3, 3].copy()


def build_name_index(root: SceneNode) -> Dict[str, SceneNode]:
    """Map node names to nodes; on duplicates the last visited node wins."""

    index: Dict[str, SceneNode] = {}
    for node in root.traverse():
        if node.name:
            index[node.name] = node
    return index
