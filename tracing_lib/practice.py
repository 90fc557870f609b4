"""Progressive stroke practice session.

A session walks the user through a glyph one reference stroke at a time:

    awaiting stroke k --(score >= threshold)--> awaiting stroke k+1 ... --> complete
    awaiting stroke k --(score <  threshold)--> awaiting stroke k (canvas cleared)

Each submitted stroke is scored with stroke_match_score against the
reference stroke currently being practiced. The session only tracks the
stroke number; drawing, clearing the canvas and showing the dotted guide
stay with the presentation layer.

Example usage:
    Submitting strokes::

        from tracing_lib.practice import PracticeSession

        session = PracticeSession(glyph)
        attempt = session.submit(points, user_size=300)
        if not attempt.accepted:
            canvas.clear()
        print(session.progress_label)  # "Stroke 2 of 3"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import STROKE_MATCH_THRESHOLD
from .domain.geometry import Stroke
from .domain.glyph import ReferenceGlyph, ReferenceStroke
from .scoring.match import is_stroke_accepted, stroke_match_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrokeAttempt:
    """Result of submitting one stroke.

    Attributes:
        stroke_number: Stroke the attempt was scored against.
        score: Match score 0-100.
        accepted: True if the session advanced.
        complete: True if every stroke of the glyph is done.
    """
    stroke_number: int
    score: int
    accepted: bool
    complete: bool

    def to_dict(self) -> dict:
        return {
            'stroke_number': self.stroke_number,
            'score': self.score,
            'accepted': self.accepted,
            'complete': self.complete,
        }


class PracticeSession:
    """Step-by-step practice of a glyph's strokes in writing order."""

    def __init__(self, glyph: ReferenceGlyph, threshold: int = STROKE_MATCH_THRESHOLD):
        self.glyph = glyph
        self.threshold = threshold
        self.current_stroke_number = 1

    @property
    def is_complete(self) -> bool:
        return self.current_stroke_number > self.glyph.stroke_count

    @property
    def current_stroke(self) -> Optional[ReferenceStroke]:
        """Reference stroke being practiced, None once complete."""
        return self.glyph.stroke(self.current_stroke_number)

    @property
    def completed_strokes(self) -> List[ReferenceStroke]:
        """Strokes already accepted, to be shown solid."""
        return list(self.glyph.strokes[:self.current_stroke_number - 1])

    @property
    def progress_label(self) -> str:
        if self.is_complete:
            return 'Complete'
        return f"Stroke {self.current_stroke_number} of {self.glyph.stroke_count}"

    def submit(self, points: Stroke, user_size: float = 1.0) -> StrokeAttempt:
        """Score a finished stroke and advance if it is accepted.

        Args:
            points: Captured points of the stroke, capture coordinates.
            user_size: Side of the capture surface.

        Returns:
            StrokeAttempt for the stroke. Once the session is complete,
            submissions are not scored and return score 0.
        """
        if self.is_complete:
            logger.warning("Stroke submitted after %r was complete", self.glyph.character)
            return StrokeAttempt(self.current_stroke_number, 0, False, True)

        number = self.current_stroke_number
        score = stroke_match_score(
            points, self.current_stroke.path, user_size,
            self.glyph.canvas_width, self.glyph.canvas_height,
        )
        accepted = is_stroke_accepted(score, self.threshold)
        if accepted:
            self.current_stroke_number += 1
        logger.debug("Stroke %d of %r scored %d (%s)", number, self.glyph.character,
                     score, 'accepted' if accepted else 'retry')
        return StrokeAttempt(number, score, accepted, self.is_complete)

    def restart(self) -> None:
        """Go back to the first stroke."""
        self.current_stroke_number = 1
