"""Service layer for tracing scores.

This module provides a service class that puts the scorers behind
dictionary-based interfaces suitable for JSON responses, looking up
reference data by letter id.

A letter the repository does not know, or one without stroke paths, is
reported with 'available': False and a None score, so the presentation
layer can show "coming soon" instead of a failing score.

Example usage:
    Scoring a practice attempt::

        from tracing_lib.api import ScoringService

        service = ScoringService()
        info = service.letter_info('a')
        result = service.order_accuracy('a', strokes)
        print(result['score'])
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence

from ..domain.geometry import Stroke
from ..domain.glyph import ReferenceGlyph
from ..references.catalogue import get_letter
from ..references.repository import ReferenceRepository
from ..scoring.match import is_stroke_accepted, stroke_match_score
from ..scoring.order import compute_stroke_order_accuracy
from ..scoring.similarity import compute_shape_similarity

_logger = logging.getLogger(__name__)


class ScoringService:
    """Scores drawings against the references of a repository.

    Attributes:
        repository: ReferenceRepository used to look up letters.

    Example:
        >>> service = ScoringService()
        >>> service.letter_info('a')['stroke_count']
        1
    """

    def __init__(self, repository: Optional[ReferenceRepository] = None):
        self.repository = repository or ReferenceRepository.default()

    def letter_info(self, letter_id: str) -> Dict:
        """Catalogue and reference summary for a letter.

        Returns:
            Dictionary with 'id', 'symbol', 'stroke_count' (None if
            unknown) and 'has_paths'.
        """
        letter = get_letter(letter_id)
        return {
            'id': letter_id,
            'symbol': letter.symbol if letter else None,
            'stroke_count': self.repository.stroke_count(letter_id),
            'has_paths': self.repository.has_paths(letter_id),
        }

    def _paths(self, letter_id: str):
        ref = self.repository.get(letter_id)
        if ref is None or not ref.has_paths:
            _logger.debug("No stroke paths for letter %r", letter_id)
            return None
        return ref.paths()

    def order_accuracy(self, letter_id: str,
                       strokes: Sequence[Stroke]) -> Dict:
        """Stroke order accuracy of user strokes for a letter.

        Returns:
            Dictionary with 'available', 'score' (None when not
            computable), 'strokes_drawn' and 'strokes_expected'.
        """
        paths = self._paths(letter_id)
        score = compute_stroke_order_accuracy(strokes, paths) if paths else None
        return {
            'available': paths is not None,
            'score': score,
            'strokes_drawn': len(strokes),
            'strokes_expected': self.repository.stroke_count(letter_id),
        }

    def shape_similarity(self, letter_id: str, canvas) -> Dict:
        """Pixel-overlap similarity of a drawing surface for a letter."""
        paths = self._paths(letter_id)
        score = compute_shape_similarity(canvas, paths) if paths else None
        return {'available': paths is not None, 'score': score}

    def check_stroke(self, glyph: ReferenceGlyph, stroke_number: int,
                     points: Stroke, user_size: float = 1.0) -> Dict:
        """Score one stroke against a numbered stroke of a glyph.

        Returns:
            Dictionary with 'available', 'stroke_number', 'score' and
            'accepted'. An out-of-range stroke number is not available.
        """
        ref_stroke = glyph.stroke(stroke_number)
        if ref_stroke is None:
            _logger.warning("Glyph %r has no stroke %d", glyph.character, stroke_number)
            return {'available': False, 'stroke_number': stroke_number,
                    'score': None, 'accepted': False}

        score = stroke_match_score(points, ref_stroke.path, user_size,
                                   glyph.canvas_width, glyph.canvas_height)
        return {
            'available': True,
            'stroke_number': stroke_number,
            'score': score,
            'accepted': is_stroke_accepted(score),
        }
