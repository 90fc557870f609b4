"""Geometric value objects for stroke tracing."""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple for compatibility."""
        return (self.x, self.y)

    def to_dict(self) -> dict:
        """Convert to dict matching the stroke metadata JSON format."""
        return {'x': float(self.x), 'y': float(self.y)}

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> Point:
        """Create from tuple or list."""
        return cls(float(t[0]), float(t[1]))

    @classmethod
    def from_dict(cls, d: dict) -> Point:
        """Create from {'x': ..., 'y': ...} dict."""
        return cls(float(d['x']), float(d['y']))


PointLike = Union[Point, Sequence[float], dict]

# One pen-down to pen-up gesture: Points, (x, y) pairs or {'x', 'y'} dicts.
Stroke = Sequence[PointLike]


def as_point(p: PointLike) -> Point:
    """Coerce a Point, (x, y) pair or {'x', 'y'} dict to a Point."""
    if isinstance(p, Point):
        return p
    if isinstance(p, dict):
        return Point.from_dict(p)
    return Point.from_tuple(p)


def as_points(points: Sequence[PointLike]) -> List[Point]:
    """Coerce a sequence of point-likes to a list of Points."""
    return [as_point(p) for p in points]


@dataclass(frozen=True)
class BBox:
    """Immutable bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Point:
        return Point(
            (self.x_min + self.x_max) / 2,
            (self.y_min + self.y_max) / 2
        )

    def to_tuple(self) -> Tuple[float, float, float, float]:
        """Convert to tuple for compatibility."""
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_points(cls, points: Sequence[Point]) -> BBox:
        """Create bounding box containing all points.

        An empty input gives the unit box so callers never divide by zero.
        """
        if not points:
            return cls(0.0, 0.0, 1.0, 1.0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


