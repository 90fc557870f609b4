"""Geometric utility functions.

This module provides the coordinate-space-agnostic helpers shared by all
three scorers. They supplement the methods on the domain objects (Point,
BBox) and accept Points or (x, y) pairs interchangeably.

None of these functions know which coordinate space their input is in.
Callers keep raw canvas pixels and normalized 0-1 coordinates apart and
only mix them after an explicit normalize_to_unit_box call.

The module provides the following functions:
    distance: Euclidean distance between two points.
    path_length: Total length of a polyline.
    bounding_box: Bounding box with a unit-box fallback for empty input.
    axis_ranges: Box width and height with zero ranges replaced by 1.
    normalize_to_unit_box: Per-axis affine map onto [0, 1] x [0, 1].
    resample_path: Arc-length resampling to a fixed point count.
    centroid: Mean point of a polyline.
    avg_nearest_distance: Mean nearest-neighbour distance between two sets.

Example usage:
    Preparing two strokes for comparison::

        from tracing_lib.utils.geometry import normalize_to_unit_box, resample_path

        user = resample_path(normalize_to_unit_box(raw_points), 32)
        ref = resample_path(normalize_to_unit_box(ref_path), 32)
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from scipy.spatial import cKDTree

from ..domain.geometry import BBox, Point, PointLike, as_point, as_points


def distance(a: PointLike, b: PointLike) -> float:
    """Euclidean distance between two points."""
    a, b = as_point(a), as_point(b)
    return math.hypot(b.x - a.x, b.y - a.y)


def path_length(points: Sequence[PointLike]) -> float:
    """Sum of consecutive segment lengths; 0 for fewer than 2 points."""
    pts = as_points(points)
    total = 0.0
    for i in range(1, len(pts)):
        total += pts[i - 1].distance_to(pts[i])
    return total


def bounding_box(points: Sequence[PointLike]) -> BBox:
    """Bounding box of points.

    Returns the unit box BBox(0, 0, 1, 1) for an empty input so callers
    never divide by zero.
    """
    return BBox.from_points(as_points(points))


def axis_ranges(bbox: BBox) -> tuple[float, float]:
    """Width and height of a box, with a zero range treated as 1."""
    return (bbox.width or 1.0, bbox.height or 1.0)


def normalize_to_unit_box(points: Sequence[PointLike]) -> list[Point]:
    """Map points so their bounding box becomes [0, 1] x [0, 1].

    Each axis is scaled independently, so a correctly shaped stroke drawn
    with different x/y proportions still lines up with its reference. An
    axis with zero range keeps range 1, which maps a single repeated point
    to (0, 0).

    Args:
        points: Points or (x, y) pairs in any coordinate space.

    Returns:
        New list of Points in normalized 0-1 space.

    Example:
        >>> normalize_to_unit_box([(10, 10), (30, 20)])
        [Point(x=0.0, y=0.0), Point(x=1.0, y=1.0)]
    """
    pts = as_points(points)
    if not pts:
        return []
    box = BBox.from_points(pts)
    range_x, range_y = axis_ranges(box)
    return [Point((p.x - box.x_min) / range_x, (p.y - box.y_min) / range_y) for p in pts]


def resample_path(points: Sequence[PointLike], num_points: int) -> list[Point]:
    """Resample a path to a number of points evenly spaced by arc length.

    Walks the path by traveled distance rather than by index, so two
    strokes of the same shape drawn at different speeds or pointer polling
    rates resample to comparable point sets. The first and last output
    points are the original start and end.

    Args:
        points: Points or (x, y) pairs defining the path.
        num_points: Desired number of output points (at least 2).

    Returns:
        List of num_points Points. Inputs with fewer than 2 points are
        returned unchanged; a path of zero length returns its first
        num_points points without resampling.

    Example:
        >>> path = [(0, 0), (100, 0), (100, 100)]
        >>> len(resample_path(path, 5))
        5
    """
    pts = as_points(points)
    if len(pts) < 2:
        return pts

    total_length = path_length(pts)
    if total_length == 0:
        return pts[:num_points]

    result = []
    walked = 0.0
    seg_idx = 0
    seg_start, seg_end = pts[0], pts[1]
    seg_len = seg_start.distance_to(seg_end)

    for i in range(num_points):
        target = (i / (num_points - 1)) * total_length
        # Advance to the segment containing the target distance
        while seg_idx < len(pts) - 1 and walked + seg_len < target - 1e-6:
            walked += seg_len
            seg_idx += 1
            if seg_idx >= len(pts) - 1:
                break
            seg_start, seg_end = pts[seg_idx], pts[seg_idx + 1]
            seg_len = seg_start.distance_to(seg_end)

        if seg_idx >= len(pts) - 1:
            result.append(pts[-1])
            continue

        t = 0.0 if seg_len == 0 else (target - walked) / seg_len
        result.append(Point(
            seg_start.x + t * (seg_end.x - seg_start.x),
            seg_start.y + t * (seg_end.y - seg_start.y),
        ))

    return result


def centroid(points: Sequence[PointLike]) -> Point:
    """Mean of the points; (0.5, 0.5) for an empty input."""
    pts = as_points(points)
    if not pts:
        return Point(0.5, 0.5)
    return Point(
        sum(p.x for p in pts) / len(pts),
        sum(p.y for p in pts) / len(pts),
    )


def to_array(points: Sequence[PointLike]) -> np.ndarray:
    """Convert points to an Nx2 float array."""
    pts = as_points(points)
    if not pts:
        return np.empty((0, 2), dtype=float)
    return np.array([p.to_tuple() for p in pts], dtype=float)


def avg_nearest_distance(a: Sequence[PointLike], b: Sequence[PointLike]) -> float:
    """Average distance from each point in a to its nearest point in b.

    Args:
        a: Query points.
        b: Target points.

    Returns:
        Mean nearest-neighbour distance. 0.0 if a is empty, inf if b is
        empty while a is not.
    """
    arr_a = to_array(a)
    if len(arr_a) == 0:
        return 0.0
    arr_b = to_array(b)
    if len(arr_b) == 0:
        return math.inf
    dists, _ = cKDTree(arr_b).query(arr_a)
    return float(np.mean(dists))
