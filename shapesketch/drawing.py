"""Interactive construction of shapes from mouse clicks."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .shapes import (
    DEFAULT_RESOLUTION,
    Arc,
    Circle,
    Dot,
    Line,
    Vec3,
    rectangle_corners,
    rectangle_edges,
)
from .world import ReloadLevel, World

__all__ = [
    "DEFAULT_RESOLUTION",
    "DrawMode",
    "MouseButton",
    "Sketcher",
    "mode_for_key",
]


class DrawMode(Enum):
    NONE = "none"
    DOT = "dot"
    LINE = "line"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    ARC = "arc"


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


_KEY_MODES = {
    "escape": DrawMode.NONE,
    "d": DrawMode.DOT,
    "s": DrawMode.LINE,
    "r": DrawMode.RECTANGLE,
    "c": DrawMode.CIRCLE,
    "a": DrawMode.ARC,
}


def mode_for_key(key: str) -> Optional[DrawMode]:
    """The drawing mode a key selects, or None if the key selects nothing."""
    return _KEY_MODES.get(key.lower())


class Sketcher:
    """Turns clicks into shapes spawned in a world, according to the current mode."""

    def __init__(self, world: World) -> None:
        self.world = world
        self.mode = DrawMode.NONE
        self.points: list[Optional[Vec3]] = [None, None, None]
        self.chain_count = 0

    def set_mode(self, mode: DrawMode) -> None:
        """Drop any shape in progress and switch mode."""
        self.reset()
        self.mode = mode

    def reset(self) -> None:
        """Forget the shape in progress and end any line chain."""
        self.reset_current()
        self.chain_count = 0

    def reset_current(self) -> None:
        """Forget the points of the shape in progress."""
        self.points = [None, None, None]

    def _spawn(self, shape) -> object:
        self.world.spawn(shape, ReloadLevel.HARD)
        return shape

    def _place(self, position: Vec3, slots: int) -> None:
        for index in range(slots):
            if self.points[index] is None:
                self.points[index] = position
                return

    def click(self, button: MouseButton, position: Vec3) -> list:
        """Handle a mouse press at a world position; return the shapes spawned."""
        handler = {
            DrawMode.DOT: self._click_dot,
            DrawMode.LINE: self._click_line,
            DrawMode.RECTANGLE: self._click_rectangle,
            DrawMode.CIRCLE: self._click_circle,
            DrawMode.ARC: self._click_arc,
        }.get(self.mode)
        if handler is None:
            return []
        return handler(button, position)

    def _click_dot(self, button: MouseButton, position: Vec3) -> list:
        if button is not MouseButton.LEFT:
            return []
        return [self._spawn(Dot(position))]

    def _click_line(self, button: MouseButton, position: Vec3) -> list:
        if button is MouseButton.RIGHT:
            self.reset()
            return []
        if button is not MouseButton.LEFT:
            return []
        self._place(position, 2)
        start, end = self.points[0], self.points[1]
        if start is None or end is None:
            return []
        spawned = []
        if self.chain_count == 0:
            spawned.append(self._spawn(Dot(start)))
        spawned.append(self._spawn(Dot(end)))
        spawned.append(self._spawn(Line(start, end)))
        self.points[0] = end
        self.points[1] = None
        self.chain_count += 1
        return spawned

    def _click_rectangle(self, button: MouseButton, position: Vec3) -> list:
        if button is MouseButton.RIGHT:
            self.reset_current()
            return []
        if button is not MouseButton.LEFT:
            return []
        self._place(position, 2)
        start, end = self.points[0], self.points[1]
        if start is None or end is None:
            return []
        spawned = []
        for corner, edge in zip(rectangle_corners(start, end), rectangle_edges(start, end)):
            spawned.append(self._spawn(Dot(corner)))
            spawned.append(self._spawn(edge))
        self.reset_current()
        return spawned

    def _click_circle(self, button: MouseButton, position: Vec3) -> list:
        if button is MouseButton.RIGHT:
            self.reset_current()
            return []
        if button is not MouseButton.LEFT:
            return []
        self._place(position, 2)
        center, end = self.points[0], self.points[1]
        if center is None or end is None:
            return []
        spawned = [
            self._spawn(Dot(center)),
            self._spawn(Circle(center, (end - center).length())),
        ]
        self.reset_current()
        return spawned

    def _click_arc(self, button: MouseButton, position: Vec3) -> list:
        if button is MouseButton.RIGHT:
            self.reset_current()
            return []
        if button is not MouseButton.LEFT:
            return []
        self._place(position, 3)
        center, start, end = self.points
        if center is None or start is None or end is None:
            return []
        spawned = [
            self._spawn(Dot(center)),
            self._spawn(Arc(center, start, end)),
        ]
        self.reset_current()
        return spawned

    def preview(self, cursor: Vec3) -> list:
        """Guide shapes for the shape in progress, given the cursor's world position."""
        first, second = self.points[0], self.points[1]
        if first is None:
            return []
        if self.mode is DrawMode.LINE:
            return [Line(first, cursor)]
        if self.mode is DrawMode.RECTANGLE:
            return rectangle_edges(first, cursor)
        if self.mode is DrawMode.CIRCLE:
            return [Circle(first, (cursor - first).length())]
        if self.mode is DrawMode.ARC:
            rim = second if second is not None else cursor
            guides: list = [Circle(first, (rim - first).length()), Line(first, rim)]
            if second is not None:
                guides.append(Line(first, cursor))
            return guides
        return []