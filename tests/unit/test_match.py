"""Unit tests for the single-stroke shape match.

Tests tracing_lib.scoring.match:
    - stroke_match_score: Normalize, resample and score one stroke
    - is_stroke_accepted: Acceptance gate for progressive practice
    - bidirectional_distance: Symmetric mean nearest-point distance

Example:
    Run with pytest::

        $ python3 -m pytest tests/unit/test_match.py -v
"""

import unittest

import pytest

from tracing_lib.config import STROKE_MATCH_THRESHOLD
from tracing_lib.scoring.base import clamp_score
from tracing_lib.scoring.match import (
    bidirectional_distance,
    is_stroke_accepted,
    stroke_match_score,
)


class TestStrokeMatchScore:
    """Tests for stroke_match_score."""

    def test_identical_stroke_scores_100(self, make_circle):
        """A stroke traced exactly over its reference scores 100."""
        ref = make_circle()
        user = [(x * 300, y * 300) for x, y in ref]
        score = stroke_match_score(user, ref, user_size=300)
        assert score == 100
        assert is_stroke_accepted(score)

    def test_line_against_circle_rejected(self, make_circle):
        """A straight line does not pass for a loop."""
        user = [(x, 150) for x in range(0, 300, 10)]
        score = stroke_match_score(user, make_circle(), user_size=300)
        assert score < STROKE_MATCH_THRESHOLD
        assert not is_stroke_accepted(score)

    def test_scale_and_translation_invariant(self, make_square, unit_square):
        """Moving and enlarging a stroke does not change its score much."""
        user = make_square(n=200, scale=2.0, offset=(10.0, 10.0))
        assert stroke_match_score(user, unit_square) >= 90

    def test_independent_axis_scaling(self, unit_square):
        """A square drawn as a wide rectangle still matches a square."""
        user = [(0, 0), (200, 0), (200, 50), (0, 50), (0, 0)]
        assert stroke_match_score(user, unit_square) >= 90

    def test_accepts_point_dicts(self, make_circle):
        ref = [{'x': x * 100, 'y': y * 100} for x, y in make_circle()]
        user = [{'x': x * 300, 'y': y * 300} for x, y in make_circle()]
        assert stroke_match_score(user, ref, user_size=300) == 100

    @pytest.mark.parametrize("n_points", [0, 1, 2])
    def test_too_few_user_points(self, unit_square, n_points):
        """Fewer than 3 captured points is noise and scores 0."""
        user = [(0, 0), (1, 0), (1, 1)][:n_points]
        assert stroke_match_score(user, unit_square) == 0

    def test_too_few_reference_points(self):
        assert stroke_match_score([(0, 0), (1, 0), (1, 1)], [(0, 0)]) == 0

    def test_score_in_range(self, make_circle, make_square):
        score = stroke_match_score(make_square(n=50), make_circle())
        assert isinstance(score, int)
        assert 0 <= score <= 100


class TestIsStrokeAccepted(unittest.TestCase):
    """Tests for is_stroke_accepted."""

    def test_threshold_inclusive(self):
        self.assertTrue(is_stroke_accepted(45))
        self.assertFalse(is_stroke_accepted(44))

    def test_none_not_accepted(self):
        self.assertFalse(is_stroke_accepted(None))

    def test_custom_threshold(self):
        self.assertTrue(is_stroke_accepted(60, threshold=60))
        self.assertFalse(is_stroke_accepted(59, threshold=60))


class TestBidirectionalDistance(unittest.TestCase):
    """Tests for bidirectional_distance."""

    def test_zero_for_identical(self):
        pts = [(0, 0), (0.5, 0.5), (1, 1)]
        self.assertEqual(bidirectional_distance(pts, pts), 0.0)

    def test_symmetric(self):
        a = [(0, 0), (1, 0)]
        b = [(0, 1)]
        self.assertAlmostEqual(bidirectional_distance(a, b), bidirectional_distance(b, a))


class TestClampScore(unittest.TestCase):
    """Tests for clamp_score."""

    def test_clamps(self):
        self.assertEqual(clamp_score(-20.0), 0)
        self.assertEqual(clamp_score(140.0), 100)

    def test_rounds_half_up(self):
        self.assertEqual(clamp_score(66.5), 67)
        self.assertEqual(clamp_score(66.49), 66)
        self.assertEqual(clamp_score(2.5), 3)


if __name__ == '__main__':
    unittest.main()
