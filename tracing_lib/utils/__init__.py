"""Utility functions for stroke tracing.

Geometry utilities:
    distance, path_length, bounding_box, axis_ranges,
    normalize_to_unit_box, resample_path, centroid, avg_nearest_distance.

Rendering utilities:
    InkRasterizer, PillowRasterizer: ink-mask producers for the
        pixel-overlap scorer.
    get_ink_bbox: Bounding box of ink pixels in a mask.

Example usage:
    Geometric calculations::

        from tracing_lib.utils import normalize_to_unit_box, resample_path

        pts = resample_path(normalize_to_unit_box([(10, 10), (30, 20), (50, 10)]), 8)
"""

from .geometry import (
    avg_nearest_distance,
    axis_ranges,
    bounding_box,
    centroid,
    distance,
    normalize_to_unit_box,
    path_length,
    resample_path,
)
from .rendering import InkRasterizer, PillowRasterizer, get_ink_bbox

__all__ = [
    'distance', 'path_length', 'bounding_box', 'axis_ranges',
    'normalize_to_unit_box', 'resample_path', 'centroid', 'avg_nearest_distance',
    'InkRasterizer', 'PillowRasterizer', 'get_ink_bbox',
]
