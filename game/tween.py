"""Minimal time-based tweening of numeric attributes."""
from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in_out_quad(t: float) -> float:
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


class Tween:
    """Interpolates attributes of ``target`` toward end values over time.

    Usage mirrors the fluent style common to tween libraries::

        Tween(door.transform).to({"yaw": math.pi / 2}, 1000.0).start(group)
    """

    def __init__(self, target: Any) -> None:
        self.target = target
        self.duration_ms = 0.0
        self.elapsed_ms = 0.0
        self.easing: Easing = linear
        self._end_values: Dict[str, float] = {}
        self._start_values: Dict[str, float] = {}
        self.started = False
        self.finished = False

    def to(self, values: Mapping[str, float], duration_ms: float, easing: Easing = linear) -> "Tween":
        if duration_ms < 0.0:
            raise ValueError("Tween duration must be non-negative")
        self._end_values = {name: float(value) for name, value in values.items()}
        self.duration_ms = float(duration_ms)
        self.easing = easing
        return self

    @property
    def end_values(self) -> Dict[str, float]:
        return dict(self._end_values)

    def start(self, group: "TweenGroup") -> "Tween":
        """Capture the current attribute values and register with ``group``."""

        self._start_values = {
            name: float(getattr(self.target, name)) for name in self._end_values
        }
        self.elapsed_ms = 0.0
        self.started = True
        self.finished = False
        group.add(self)
        return self

    def advance(self, dt_ms: float) -> bool:
        """Move forward by ``dt_ms``; return ``True`` while still running."""

        if not self.started or self.finished:
            return False
        self.elapsed_ms += max(0.0, dt_ms)
        if self.duration_ms <= 0.0:
            progress = 1.0
        else:
            progress = min(1.0, self.elapsed_ms / self.duration_ms)
        eased = self.easing(progress)
        for name, end in self._end_values.items():
            start = self._start_values[name]
            setattr(self.target, name, start + (end - start) * eased)
        if progress >= 1.0:
            for name, end in self._end_values.items():
                setattr(self.target, name, end)
            self.finished = True
        return not self.finished


class TweenGroup:
    """Holds running tweens and advances them once per frame."""

    def __init__(self) -> None:
        self._tweens: List[Tween] = []

    def add(self, tween: Tween) -> None:
        if tween not in self._tweens:
            self._tweens.append(tween)

    def remove(self, tween: Tween) -> None:
        if tween in self._tweens:
            self._tweens.remove(tween)

    def update(self, dt_ms: float) -> None:
        for tween in list(self._tweens):
            if not tween.advance(dt_ms):
                self.remove(tween)

    def __len__(self) -> int:
        return len(self._tweens)
