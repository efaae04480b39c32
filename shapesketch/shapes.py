"""Geometric primitives and the shapes a sketch is made of."""

from __future__ import annotations

import math
from dataclasses import dataclass

DEFAULT_RESOLUTION = 64

_EPSILON = 1e-9


@dataclass(frozen=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vec3:
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec3:
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def distance(self, other: Vec3) -> float:
        return (self - other).length()

    def normalized(self) -> Vec3:
        """Return the unit vector in this direction; raises for a zero vector."""
        size = self.length()
        if size < _EPSILON:
            raise ValueError("cannot normalize a zero-length vector")
        return self / size


@dataclass(frozen=True)
class Dot:
    """A marker at a single point."""

    position: Vec3


@dataclass(frozen=True)
class Line:
    """A straight segment."""

    start: Vec3
    end: Vec3


@dataclass(frozen=True)
class Circle:
    """A circle lying in the horizontal (XZ) plane."""

    center: Vec3
    radius: float


@dataclass(frozen=True)
class Arc:
    """The short arc around ``center`` from ``start`` towards ``end``."""

    center: Vec3
    start: Vec3
    end: Vec3


def rectangle_corners(start: Vec3, end: Vec3) -> list[Vec3]:
    """Corners of the axis-aligned rectangle spanned by two opposite points."""
    return [
        start,
        Vec3(end.x, 0.0, start.z),
        end,
        Vec3(start.x, 0.0, end.z),
    ]


def rectangle_edges(start: Vec3, end: Vec3) -> list[Line]:
    """The four edges of the rectangle, each running from a corner to the one before it."""
    corners = rectangle_corners(start, end)
    return [Line(corner, corners[index - 1]) for index, corner in enumerate(corners)]


def circle_points(center: Vec3, radius: float, resolution: int = DEFAULT_RESOLUTION) -> list[Vec3]:
    """Evenly spaced points around a horizontal circle."""
    if resolution < 1:
        raise ValueError("resolution must be at least 1")
    step = math.tau / resolution
    return [
        Vec3(
            center.x + radius * math.cos(step * i),
            center.y,
            center.z + radius * math.sin(step * i),
        )
        for i in range(resolution)
    ]


def _perpendicular_axis(direction: Vec3) -> Vec3:
    candidate = Vec3(0.0, 1.0, 0.0)
    if direction.cross(candidate).length() < 1e-6:
        candidate = Vec3(1.0, 0.0, 0.0)
    return (candidate - direction * candidate.dot(direction)).normalized()


def arc_points(arc: Arc, resolution: int = DEFAULT_RESOLUTION) -> list[Vec3]:
    """Points along the short arc, ``resolution`` segments long.

    The radius is the distance from the center to the start point; the arc ends
    where the direction towards ``end`` meets that radius.
    """
    if resolution < 1:
        raise ValueError("resolution must be at least 1")
    offset = arc.start - arc.center
    radius = offset.length()
    if radius < _EPSILON or (arc.end - arc.center).length() < _EPSILON:
        return [arc.start] * (resolution + 1)

    origin = offset / radius
    target = (arc.end - arc.center).normalized()
    angle = math.acos(max(-1.0, min(1.0, origin.dot(target))))
    axis = origin.cross(target)
    if axis.length() < _EPSILON:
        if angle < 1e-6:
            return [arc.start] * (resolution + 1)
        axis = _perpendicular_axis(origin)
    else:
        axis = axis.normalized()
    binormal = axis.cross(origin)

    points = []
    for i in range(resolution + 1):
        theta = angle * i / resolution
        direction = origin * math.cos(theta) + binormal * math.sin(theta)
        points.append(arc.center + direction * radius)
    return points