"""Background loading of JSON scene assets.

A scene asset is a JSON object describing one node and, recursively, its
children::

    {
        "name": "Door",
        "position": [0.5, 0.0, -4.0],
        "rotation": [0.0, 0.0, 0.0],
        "scale": [1.0, 1.0, 1.0],
        "color": [0.8, 0.55, 0.3, 1.0],
        "mesh": {"type": "box", "size": [1.0, 2.1, 0.1], "offset": [-0.5, 1.05, 0.0]},
        "children": []
    }

Every key is optional. Supported mesh types are ``box``, ``person`` and
``line``. Loads run on a worker pool and hand back futures; the caller joins
the house and avatar loads with :class:`AssetBarrier` before the frame loop
starts.
"""
from __future__ import annotations

import json
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from rendering.wireframe_primitives import (
    WireframeMesh,
    create_box_mesh,
    create_line_mesh,
    create_person_mesh,
)

from .scene import SceneNode, Transform

logger = logging.getLogger(__name__)


class AssetLoadError(RuntimeError):
    """Raised when an asset file is missing or does not describe a scene."""


def _floats(data: Mapping[str, Any], key: str, count: int, default: Tuple[float, ...]) -> Tuple[float, ...]:
    value = data.get(key, default)
    if not isinstance(value, (list, tuple)) or len(value) != count:
        raise ValueError(f"'{key}' must be a list of {count} numbers")
    return tuple(float(v) for v in value)


def _box_mesh(spec: Mapping[str, Any]) -> WireframeMesh:
    size = _floats(spec, "size", 3, (1.0, 1.0, 1.0))
    offset = _floats(spec, "offset", 3, (0.0, 0.0, 0.0))
    return create_box_mesh(size, offset)


def _person_mesh(spec: Mapping[str, Any]) -> WireframeMesh:
    return create_person_mesh(
        height=float(spec.get("height", 1.8)),
        width=float(spec.get("width", 0.5)),
        depth=float(spec.get("depth", 0.3)),
    )


def _line_mesh(spec: Mapping[str, Any]) -> WireframeMesh:
    return create_line_mesh(float(spec.get("length", 1.0)))


MESH_BUILDERS: Dict[str, Callable[[Mapping[str, Any]], WireframeMesh]] = {
    "box": _box_mesh,
    "person": _person_mesh,
    "line": _line_mesh,
}


def parse_node(data: Mapping[str, Any]) -> SceneNode:
    """Build a :class:`SceneNode` tree from its JSON description."""

    if not isinstance(data, Mapping):
        raise ValueError("Scene node must be a JSON object")
    transform = Transform(
        position=_floats(data, "position", 3, (0.0, 0.0, 0.0)),
        rotation=_floats(data, "rotation", 3, (0.0, 0.0, 0.0)),
        scale=_floats(data, "scale", 3, (1.0, 1.0, 1.0)),
    )
    mesh = None
    mesh_spec = data.get("mesh")
    if mesh_spec is not None:
        kind = mesh_spec.get("type")
        builder = MESH_BUILDERS.get(kind)
        if builder is None:
            raise ValueError(f"Unknown mesh type {kind!r}")
        mesh = builder(mesh_spec)
    color = None
    if "color" in data:
        color = _floats(data, "color", 4, (1.0, 1.0, 1.0, 1.0))
    node = SceneNode(
        name=str(data.get("name", "")),
        transform=transform,
        mesh=mesh,
        color=color,
        visible=bool(data.get("visible", True)),
    )
    for child in data.get("children", []):
        node.add(parse_node(child))
    return node


def read_asset(path: str) -> SceneNode:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError as exc:
        raise AssetLoadError(f"Asset not found: {path}") from exc
    except OSError as exc:
        raise AssetLoadError(f"Cannot read asset {path}: {exc}") from exc
    except ValueError as exc:
        raise AssetLoadError(f"Malformed asset {path}: {exc}") from exc
    try:
        node = parse_node(data)
    except (ValueError, TypeError, AttributeError) as exc:
        raise AssetLoadError(f"Malformed asset {path}: {exc}") from exc
    logger.info(f"Loaded asset: {path}")
    return node


class AssetLoader:
    """Loads scene assets on a small worker pool, one future per asset."""

    def __init__(self, executor: Optional[ThreadPoolExecutor] = None) -> None:
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=2, thread_name_prefix="asset")

    def load(self, path: str) -> "Future[SceneNode]":
        logger.debug(f"Queued asset load: {path}")
        return self._executor.submit(read_asset, path)

    def shutdown(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False)


class AssetBarrier:
    """Joins the house and avatar loads; neither completion order is assumed."""

    def __init__(self, house: "Future[SceneNode]", avatar: "Future[SceneNode]") -> None:
        self._house = house
        self._avatar = avatar

    def ready(self) -> bool:
        return self._house.done() and self._avatar.done()

    def result(self, timeout: Optional[float] = None) -> Tuple[SceneNode, SceneNode]:
        """Block until both loads finish; a failed load re-raises its error."""

        house = self._house.result(timeout=timeout)
        avatar = self._avatar.result(timeout=timeout)
        return house, avatar
