"""Multi-stroke order accuracy.

Scores whether the strokes of a letter were drawn in the right relative
order, independent of their exact shape. The user's strokes arrive already
segmented at pen-up; the reference strokes are in writing order in
normalized 0-1 coordinates.

Each user stroke is assigned to a reference stroke by nearest centroid.
Matching is greedy: the first-drawn stroke picks the nearest reference
centroid, the second picks among the remaining ones, and so on, with no
backtracking. This is not a minimum-cost assignment and can mis-assign
strokes whose reference centroids are close together. Letters have at most
four strokes, so gross order errors still score low.

The score is the fraction of stroke pairs (i drawn before j) whose matched
reference indices are also in order.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..domain.geometry import Point, Stroke, as_points
from ..utils.geometry import axis_ranges, bounding_box, centroid
from .base import clamp_score

logger = logging.getLogger(__name__)


def normalize_strokes(strokes: Sequence[Stroke]) -> List[List[Point]]:
    """Normalize strokes jointly to the unit box.

    The bounding box is computed over all points of all strokes, so the
    strokes keep their positions relative to each other.
    """
    if not strokes:
        return []
    point_lists = [as_points(s) for s in strokes]
    box = bounding_box([p for pts in point_lists for p in pts])
    range_x, range_y = axis_ranges(box)
    return [
        [Point((p.x - box.x_min) / range_x, (p.y - box.y_min) / range_y) for p in pts]
        for pts in point_lists
    ]


def match_strokes_to_reference(
    user_strokes: Sequence[Stroke],
    ref_strokes: Sequence[Stroke],
) -> List[int]:
    """Greedily match each user stroke to the nearest unclaimed reference.

    Args:
        user_strokes: Normalized user strokes in drawing order.
        ref_strokes: Reference strokes in writing order.

    Returns:
        Reference index matched to each user stroke. A user stroke left
        without a free reference is assigned index 0.
    """
    user_centroids = [centroid(s) for s in user_strokes]
    ref_centroids = [centroid(s) for s in ref_strokes]
    matched = []
    used = set()

    for uc in user_centroids:
        best = -1
        best_dist = float('inf')
        for r, rc in enumerate(ref_centroids):
            if r in used:
                continue
            d = (uc.x - rc.x) ** 2 + (uc.y - rc.y) ** 2
            if d < best_dist:
                best_dist = d
                best = r
        matched.append(best if best >= 0 else 0)
        if best >= 0:
            used.add(best)

    return matched


def compute_stroke_order_accuracy(
    user_strokes: Sequence[Stroke],
    ref_strokes: Sequence[Stroke],
) -> Optional[int]:
    """Stroke order accuracy as an integer score 0-100.

    Args:
        user_strokes: User strokes in drawing order, capture coordinates.
        ref_strokes: Reference strokes in writing order, normalized
            reference coordinates.

    Returns:
        None if either list is empty. 0 if the stroke counts differ (the
        letter was segmented wrongly; there is no partial credit). 100 for
        a one-stroke letter drawn in one stroke. Otherwise
        round(100 * correct_pairs / total_pairs).
    """
    if not ref_strokes or not user_strokes:
        return None

    if len(user_strokes) != len(ref_strokes):
        logger.debug("Stroke count mismatch: drew %d, expected %d",
                     len(user_strokes), len(ref_strokes))
        return 0

    if len(ref_strokes) == 1:
        return 100

    matched = match_strokes_to_reference(normalize_strokes(user_strokes), ref_strokes)

    correct_pairs = 0
    total_pairs = 0
    for i in range(len(matched)):
        for j in range(i + 1, len(matched)):
            total_pairs += 1
            if matched[i] < matched[j]:
                correct_pairs += 1

    if total_pairs == 0:
        return 100
    logger.debug("Order match %s: %d/%d pairs in order", matched, correct_pairs, total_pairs)
    return clamp_score(100 * correct_pairs / total_pairs)
