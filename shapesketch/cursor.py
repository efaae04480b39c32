"""Mapping between window pixels and the ground plane seen by a top-down camera."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .shapes import Vec3

DEFAULT_VIEWPORT_HEIGHT = 6.0


@dataclass(frozen=True)
class OrthographicCamera:
    """An orthographic camera looking straight down at the Y=0 plane.

    ``viewport_height`` world units fit the window vertically. ``right`` and
    ``up`` are the world directions of the screen's right and up.
    """

    width: float
    height: float
    viewport_height: float = DEFAULT_VIEWPORT_HEIGHT
    focus: Vec3 = Vec3()
    right: Vec3 = Vec3(0.0, 0.0, -1.0)
    up: Vec3 = Vec3(-1.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("window size must be positive")
        if self.viewport_height <= 0:
            raise ValueError("viewport height must be positive")

    @property
    def scale(self) -> float:
        """World units per pixel."""
        return self.viewport_height / self.height

    def screen_to_world(self, x: float, y: float) -> Optional[Vec3]:
        """The ground point under a pixel, or None if the pixel is outside the window."""
        if not (0 <= x <= self.width and 0 <= y <= self.height):
            return None
        dx = (x - self.width / 2) * self.scale
        dy = (self.height / 2 - y) * self.scale
        point = self.focus + self.right * dx + self.up * dy
        return Vec3(point.x, 0.0, point.z)

    def world_to_screen(self, point: Vec3) -> tuple[float, float]:
        """The pixel at which a world point appears."""
        offset = point - self.focus
        dx = offset.dot(self.right)
        dy = offset.dot(self.up)
        return (self.width / 2 + dx / self.scale, self.height / 2 - dy / self.scale)