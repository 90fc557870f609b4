"""Pixel-overlap shape similarity.

Compares a whole freehand drawing (possibly several strokes, any canvas
resolution, transparent background) against one or more reference stroke
paths, independent of position and scale.

Both inputs are rasterized onto the same fixed comparison raster by an
InkRasterizer (see tracing_lib.utils.rendering), and the ink pixels are
compared with the Dice coefficient:

    dice = 2 * |A & B| / (|A| + |B|)

Dice is symmetric and does not depend on how densely a shape is inked, so
it tolerates a brush that is thicker or thinner than the reference style
while still penalizing the wrong overall shape.

Key functions:
    - overlap_score: Dice score of two ink masks
    - compute_shape_similarity: Score a drawing against reference paths

Typical usage:
    from tracing_lib.scoring.similarity import compute_shape_similarity

    score = compute_shape_similarity(canvas, reference.paths())
    if score is None:
        show("Accuracy coming soon")
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from ..domain.geometry import Stroke
from ..utils.rendering import InkRasterizer, PillowRasterizer, canvas_to_image
from .base import clamp_score

logger = logging.getLogger(__name__)


def overlap_score(ref_mask: np.ndarray, user_mask: np.ndarray) -> int:
    """Dice overlap of two ink masks as an integer score 0-100.

    Args:
        ref_mask: Boolean ink mask of the reference.
        user_mask: Boolean ink mask of the drawing, same shape.

    Returns:
        round(100 * dice). 0 when both masks are empty.

    Raises:
        ValueError: If the masks have different shapes.
    """
    if ref_mask.shape != user_mask.shape:
        raise ValueError(f"Mask shapes differ: {ref_mask.shape} vs {user_mask.shape}")

    ref_ink = ref_mask.astype(bool)
    user_ink = user_mask.astype(bool)
    count_ref = int(np.count_nonzero(ref_ink))
    count_user = int(np.count_nonzero(user_ink))
    total = count_ref + count_user
    if total == 0:
        return 0

    intersection = int(np.count_nonzero(ref_ink & user_ink))
    dice = 2 * intersection / total
    return clamp_score(dice * 100)


def compute_shape_similarity(
    canvas,
    ref_strokes: Optional[Sequence[Stroke]],
    rasterizer: Optional[InkRasterizer] = None,
) -> Optional[int]:
    """Shape similarity 0-100 between a drawing and reference stroke paths.

    Args:
        canvas: The user's drawing surface, a PIL image or a numpy array
            (HxW, HxWx3 or HxWx4).
        ref_strokes: Reference polylines in reference coordinates.
        rasterizer: Producer of the two ink masks. Defaults to
            PillowRasterizer.

    Returns:
        Integer score 0-100, or None when it cannot be computed: no
        canvas, no reference strokes, or a canvas with a zero dimension.
        None means "not available", not "failed".
    """
    if canvas is None or not ref_strokes:
        return None
    if canvas_to_image(canvas) is None:
        return None

    rasterizer = rasterizer or PillowRasterizer()
    ref_mask = rasterizer.reference_mask(ref_strokes)
    user_mask = rasterizer.drawing_mask(canvas)
    score = overlap_score(ref_mask, user_mask)
    logger.debug("Shape similarity: %d (ref ink=%d, user ink=%d)",
                 score, int(ref_mask.sum()), int(user_mask.sum()))
    return score
