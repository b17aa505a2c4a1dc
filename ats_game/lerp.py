"""Time-based interpolation between keyed values."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Generic, Iterable, Optional, Protocol, TypeVar


class Lerpable(Protocol):
    """A value that can be blended towards another value of the same kind."""

    def lerp(self, stop, percentage: float): ...


T = TypeVar("T", bound=Lerpable)


@dataclass(frozen=True)
class Position:
    """A point in world space."""

    x: float = 0.0
    y: float = 0.0

    def lerp(self, stop: "Position", percentage: float) -> "Position":
        """Blend linearly from this position towards ``stop``."""
        keep = 1.0 - percentage
        return Position(
            self.x * keep + stop.x * percentage,
            self.y * keep + stop.y * percentage,
        )


@dataclass
class LerpPoint(Generic[T]):
    """A value that should be reached at a given time (in seconds)."""

    val: T
    time: float


class Lerp(Generic[T]):
    """A timeline of keyed values, sorted by increasing time."""

    def __init__(self, points: Iterable[LerpPoint[T]] = ()) -> None:
        self.points: Deque[LerpPoint[T]] = deque(points)

    def insert_point_delete_later(self, val: T, time: float) -> None:
        """Drop every point at or after ``time`` and append a new final point."""
        self.points = deque(p for p in self.points if p.time < time)
        self.points.append(LerpPoint(val, time))

    def current_value(self, current_time: float) -> Optional[T]:
        """Return the interpolated value, or None before the timeline starts."""
        if not self.points:
            raise RuntimeError("timeline has no points")
        first, last = self.points[0], self.points[-1]
        if current_time <= first.time:
            return None
        if current_time >= last.time:
            return last.val
        points = list(self.points)
        for start, stop in zip(points, points[1:]):
            if start.time <= current_time <= stop.time:
                full = stop.time - start.time
                percentage = (current_time - start.time) / full if full else 0.0
                return start.val.lerp(stop.val, min(percentage, 1.0))
        raise RuntimeError(
            f"time {current_time!r} not covered by points "
            f"{[p.time for p in points]!r}"
        )