"""Tracking of the cursor position in world coordinates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .lerp import Position


@dataclass
class Camera2d:
    """A 2D camera centred on ``position``; world y points up, viewport y down."""

    position: Position = field(default_factory=Position)
    viewport_width: float = 1280.0
    viewport_height: float = 720.0
    scale: float = 1.0

    def __post_init__(self) -> None:
        if self.viewport_width <= 0 or self.viewport_height <= 0:
            raise ValueError("viewport size must be positive")
        if self.scale <= 0:
            raise ValueError("scale must be positive")

    def viewport_to_world(self, viewport_pos: Tuple[float, float]) -> Position:
        """Convert viewport pixel coordinates to a world position."""
        vx, vy = viewport_pos
        return Position(
            self.position.x + (vx - self.viewport_width / 2) * self.scale,
            self.position.y + (self.viewport_height / 2 - vy) * self.scale,
        )

    def world_to_viewport(self, world_pos: Position) -> Tuple[float, float]:
        """Convert a world position to viewport pixel coordinates."""
        return (
            (world_pos.x - self.position.x) / self.scale + self.viewport_width / 2,
            self.viewport_height / 2 - (world_pos.y - self.position.y) / self.scale,
        )


@dataclass
class MouseWorldPosition:
    """The cursor's world position, or None when it cannot be known."""

    value: Optional[Position] = None

    def get(self) -> Optional[Position]:
        return self.value

    def update(
        self,
        cursor: Optional[Tuple[float, float]],
        camera: Optional[Camera2d],
    ) -> Optional[Position]:
        """Recompute from the cursor's viewport position and the camera."""
        if cursor is None or camera is None:
            self.value = None
        else:
            self.value = camera.viewport_to_world(cursor)
        return self.value