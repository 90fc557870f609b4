"""Scorers comparing user strokes with reference strokes.

Each scorer is a pure function of its inputs with its own distance model
and tuned constants:

    compute_shape_similarity: Dice overlap of rasterized ink (0-100 or None).
    compute_stroke_order_accuracy: Fraction of stroke pairs drawn in
        order (0-100 or None).
    stroke_match_score: Normalized nearest-point distance of one stroke
        (0-100), gated by is_stroke_accepted.
"""

from .match import bidirectional_distance, is_stroke_accepted, stroke_match_score
from .order import compute_stroke_order_accuracy, match_strokes_to_reference, normalize_strokes
from .similarity import compute_shape_similarity, overlap_score

__all__ = [
    'compute_shape_similarity', 'overlap_score',
    'compute_stroke_order_accuracy', 'match_strokes_to_reference', 'normalize_strokes',
    'stroke_match_score', 'is_stroke_accepted', 'bidirectional_distance',
]
