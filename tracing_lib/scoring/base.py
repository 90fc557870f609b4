"""Score helpers shared by the tracing scorers."""

import math

MIN_SCORE = 0
MAX_SCORE = 100


def clamp_score(value: float) -> int:
    """Clamp to [0, 100] and round half up to an integer score."""
    return int(math.floor(min(MAX_SCORE, max(MIN_SCORE, value)) + 0.5))
