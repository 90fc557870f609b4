"""Telugu vowel tracing: stroke matching and scoring.

Scores how well strokes a learner draws match the reference strokes of a
Telugu vowel (achulu). The package is a pure computation layer: the
practice UI captures pointer input, segments it at pen-up and hands the
point lists (or the drawing surface) to these functions, then shows the
numbers they return.

Architecture Overview:
    - domain: Value objects (Point, BBox, Stroke, ReferenceGlyph, ...)
    - utils: Geometry helpers and the raster adapter
    - scoring: The three scorers
    - practice: Progressive stroke-by-stroke practice session
    - animation: Stroke-order replay step function and SVG paths
    - references: Letter catalogue, reference repository, metadata loader
    - api: Service facade returning JSON-ready dicts

The three scorers:
    compute_shape_similarity: Dice overlap of the whole drawing and the
        reference paths on a 128x128 raster. Position and size free.
    compute_stroke_order_accuracy: Matches strokes by centroid and counts
        stroke pairs drawn in the right order.
    stroke_match_score: One stroke against one reference stroke, used with
        is_stroke_accepted to gate progressive practice.

Example usage:
    Gate a stroke::

        from tracing_lib import stroke_match_score, is_stroke_accepted

        score = stroke_match_score(points, ref_stroke.path, user_size=300)
        if is_stroke_accepted(score):
            advance()

    Score the order of a multi-stroke attempt::

        from tracing_lib import compute_stroke_order_accuracy

        accuracy = compute_stroke_order_accuracy(user_strokes, ref_paths)

Attributes:
    __version__ (str): Package version string.
    __all__ (list): List of public symbols exported by this package.
"""

from .domain import BBox, Point, ReferenceGlyph, ReferenceStroke, Stroke
from .practice import PracticeSession, StrokeAttempt
from .scoring import (
    compute_shape_similarity,
    compute_stroke_order_accuracy,
    is_stroke_accepted,
    stroke_match_score,
)

__all__ = [
    # Domain objects
    'Point', 'BBox', 'Stroke', 'ReferenceStroke', 'ReferenceGlyph',
    # Scorers
    'compute_shape_similarity', 'compute_stroke_order_accuracy',
    'stroke_match_score', 'is_stroke_accepted',
    # Practice
    'PracticeSession', 'StrokeAttempt',
]

__version__ = '1.0.0'
