"""Domain objects for stroke tracing.

This module provides the value objects used throughout the tracing
package. None of them carry identity or change after construction.

Geometry classes:
    Point: Immutable 2D point.
    BBox: Immutable bounding box.
    Stroke: Type alias for one pen-down to pen-up gesture, a sequence
        of Points, (x, y) pairs or {'x', 'y'} dicts.

Reference classes:
    ReferenceStroke: Authored stroke with 1-indexed stroke number.
    ReferenceGlyph: Ordered reference strokes and canvas size.
    LetterReference: Stroke count and optional normalized paths.
    Letter: Catalogue entry.

Example usage:
    Working with geometry::

        from tracing_lib.domain import BBox, Point, as_points

        box = BBox.from_points(as_points([(0, 0), {'x': 3, 'y': 4}]))
        print(f"Box: {box.width} x {box.height}")  # 3.0 x 4.0
        print(box.center == Point(1.5, 2.0))      # True
"""

from .geometry import BBox, Point, Stroke, as_point, as_points
from .glyph import Letter, LetterReference, ReferenceDataError, ReferenceGlyph, ReferenceStroke

__all__ = [
    'Point', 'BBox', 'Stroke', 'as_point', 'as_points',
    'ReferenceStroke', 'ReferenceGlyph', 'LetterReference', 'Letter',
    'ReferenceDataError',
]
