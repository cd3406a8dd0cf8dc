"""Configuration defaults, asset paths and logging setup for the walkthrough."""
from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple

Vec3 = Tuple[float, float, float]

SETTINGS_ENV_VAR = "WALKTHROUGH_SETTINGS"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_resource_path(relative_path: str) -> str:
    """Resolve ``relative_path`` against the project root (parent of ``game/``)."""

    project_root = Path(__file__).resolve().parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
HOUSE_ASSET: str = os.path.join(ASSETS_PATH, "old_house.json")
AVATAR_ASSET: str = os.path.join(ASSETS_PATH, "walkcoat.json")


_FLOAT_FIELDS = (
    "avatar_step",
    "door_trigger_distance",
    "door_open_angle",
    "door_open_duration_ms",
    "camera_fov",
    "camera_near",
    "camera_far",
)


def _number(name: str, value: Any, kind: type) -> Any:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")
    return kind(value)


def _vector(name: str, value: Any, count: int, kind: type) -> tuple:
    if not isinstance(value, (list, tuple)) or len(value) != count:
        raise ValueError(f"{name} must have {count} components, got {value!r}")
    return tuple(_number(name, v, kind) for v in value)


@dataclass(frozen=True)
class WalkthroughSettings:
    house_asset: str = HOUSE_ASSET
    avatar_asset: str = AVATAR_ASSET
    avatar_start: Vec3 = (0.0, 0.0, -5.0)
    avatar_step: float = 0.1
    door_name: str = "Door"
    door_trigger_distance: float = 2.0
    door_open_angle: float = math.pi / 2.0
    door_open_duration_ms: float = 1000.0
    camera_offset: Vec3 = (0.0, 1.6, 5.0)
    camera_fov: float = 75.0
    camera_near: float = 0.1
    camera_far: float = 1000.0
    window_size: Tuple[int, int] = (1280, 720)
    target_fps: int = 60
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        for name in _FLOAT_FIELDS:
            object.__setattr__(self, name, _number(name, getattr(self, name), float))
        for name in ("avatar_start", "camera_offset"):
            object.__setattr__(self, name, _vector(name, getattr(self, name), 3, float))
        object.__setattr__(self, "window_size", _vector("window_size", self.window_size, 2, int))
        object.__setattr__(self, "target_fps", _number("target_fps", self.target_fps, int))
        if self.avatar_step <= 0.0:
            raise ValueError("avatar_step must be positive")
        if self.door_trigger_distance <= 0.0:
            raise ValueError("door_trigger_distance must be positive")
        if self.door_open_duration_ms < 0.0:
            raise ValueError("door_open_duration_ms must be non-negative")
        if self.target_fps <= 0:
            raise ValueError("target_fps must be positive")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "WalkthroughSettings":
        """Build settings from ``data``, overriding defaults key by key."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown settings: {', '.join(unknown)}")
        overrides = {}
        for key, value in data.items():
            if isinstance(value, list):
                value = tuple(value)
            overrides[key] = value
        return replace(cls(), **overrides)


def load_settings(path: Optional[str] = None) -> WalkthroughSettings:
    """Read JSON overrides from ``path`` (or the settings env var) if present."""

    path = path or os.environ.get(SETTINGS_ENV_VAR)
    if not path:
        return WalkthroughSettings()
    with open(path, "r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")
    return WalkthroughSettings.from_mapping(data)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
