"""Single-stroke shape match for progressive practice.

Decides, as the user finishes one stroke, whether it matches the one
reference stroke being practiced. The practice flow advances to the next
stroke when the score reaches STROKE_MATCH_THRESHOLD and asks for a retry
otherwise.

Both paths are normalized to their own unit box (independently, since
only the one stroke is compared), resampled to SAMPLE_POINTS by arc
length, and compared with the bidirectional average nearest-point
distance. Averaging rather than taking the maximum keeps a single stray
point from dominating the result.

    score = clamp(100 - (avg_dist / MAX_ACCEPTABLE_DISTANCE) * 100, 0, 100)
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import (
    MAX_ACCEPTABLE_DISTANCE,
    MIN_REFERENCE_POINTS,
    MIN_USER_POINTS,
    SAMPLE_POINTS,
    STROKE_MATCH_THRESHOLD,
)
from ..domain.geometry import Point, PointLike, Stroke, as_points
from ..utils.geometry import avg_nearest_distance, normalize_to_unit_box, resample_path
from .base import clamp_score

logger = logging.getLogger(__name__)


def bidirectional_distance(a: Sequence[PointLike], b: Sequence[PointLike]) -> float:
    """Mean of the average nearest-point distances a->b and b->a."""
    return (avg_nearest_distance(a, b) + avg_nearest_distance(b, a)) / 2


def stroke_match_score(
    user_points: Stroke,
    ref_path: Stroke,
    user_size: float = 1.0,
    ref_width: Optional[float] = None,
    ref_height: Optional[float] = None,
) -> int:
    """Match score 0-100 of one user stroke against one reference stroke.

    Args:
        user_points: Captured points of the stroke, capture coordinates.
        ref_path: Reference stroke path.
        user_size: Side of the capture surface; user points are divided
            by it before normalization.
        ref_width: Reference canvas width. Accepted for callers that pass
            the glyph canvas size; normalization makes it unnecessary.
        ref_height: Reference canvas height, see ref_width.

    Returns:
        Integer score, 0 when the user stroke has fewer than 3 points or
        the reference path has fewer than 2.
    """
    if len(user_points) < MIN_USER_POINTS or len(ref_path) < MIN_REFERENCE_POINTS:
        return 0

    size = user_size or 1.0
    ref_norm = normalize_to_unit_box(ref_path)
    user_norm = normalize_to_unit_box([Point(p.x / size, p.y / size) for p in as_points(user_points)])

    ref_sampled = resample_path(ref_norm, SAMPLE_POINTS)
    user_sampled = resample_path(user_norm, SAMPLE_POINTS)

    avg_dist = bidirectional_distance(user_sampled, ref_sampled)
    score = clamp_score(100 - (avg_dist / MAX_ACCEPTABLE_DISTANCE) * 100)
    logger.debug("Stroke match: avg_dist=%.4f score=%d", avg_dist, score)
    return score


def is_stroke_accepted(score: Optional[int], threshold: int = STROKE_MATCH_THRESHOLD) -> bool:
    """True if a stroke score passes the acceptance gate."""
    return score is not None and score >= threshold
