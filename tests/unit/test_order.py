"""Unit tests for multi-stroke order accuracy.

Tests tracing_lib.scoring.order:
    - normalize_strokes: Joint unit-box normalization
    - match_strokes_to_reference: Greedy nearest-centroid matching
    - compute_stroke_order_accuracy: Fraction of stroke pairs in order
"""

import unittest

from tracing_lib.domain.geometry import Point
from tracing_lib.scoring.order import (
    compute_stroke_order_accuracy,
    match_strokes_to_reference,
    normalize_strokes,
)

THREE_BARS = [
    [(0.1, 0.1), (0.9, 0.1)],
    [(0.1, 0.5), (0.9, 0.5)],
    [(0.1, 0.9), (0.9, 0.9)],
]


class TestComputeStrokeOrderAccuracy:
    """Tests for compute_stroke_order_accuracy."""

    def test_correct_order(self, two_stroke_reference):
        user = [[(20, 20), (80, 20)], [(50, 50), (50, 90)]]
        assert compute_stroke_order_accuracy(user, two_stroke_reference) == 100

    def test_reversed_order(self, two_stroke_reference):
        user = [[(50, 50), (50, 90)], [(20, 20), (80, 20)]]
        assert compute_stroke_order_accuracy(user, two_stroke_reference) == 0

    def test_position_and_size_free(self, two_stroke_reference):
        """The same drawing scaled and moved scores the same."""
        user = [[(520, 320), (1120, 320)], [(820, 620), (820, 1020)]]
        assert compute_stroke_order_accuracy(user, two_stroke_reference) == 100

    def test_count_mismatch_scores_zero(self, two_stroke_reference):
        user = [[(0, 0), (1, 0)], [(0, 1), (1, 1)], [(0, 2), (1, 2)]]
        assert compute_stroke_order_accuracy(user, two_stroke_reference) == 0

    def test_single_stroke_letter(self):
        assert compute_stroke_order_accuracy([[(5, 5), (9, 9)]], [[(0, 0), (1, 1)]]) == 100

    def test_empty_inputs_unavailable(self, two_stroke_reference):
        assert compute_stroke_order_accuracy([], two_stroke_reference) is None
        assert compute_stroke_order_accuracy([[(0, 0), (1, 1)]], []) is None

    def test_partial_credit(self):
        """Top, bottom, middle against top, middle, bottom: 2 of 3 pairs."""
        user = [
            [(10, 10), (90, 10)],
            [(10, 90), (90, 90)],
            [(10, 50), (90, 50)],
        ]
        assert compute_stroke_order_accuracy(user, THREE_BARS) == 67

    def test_fully_reversed_three_strokes(self):
        user = [
            [(10, 90), (90, 90)],
            [(10, 50), (90, 50)],
            [(10, 10), (90, 10)],
        ]
        assert compute_stroke_order_accuracy(user, THREE_BARS) == 0


class TestMatchStrokesToReference(unittest.TestCase):
    """Tests for match_strokes_to_reference."""

    def test_nearest_centroid(self):
        matched = match_strokes_to_reference(
            [[(0.9, 0.9)], [(0.1, 0.1)]],
            [[(0, 0)], [(1, 1)]],
        )
        self.assertEqual(matched, [1, 0])

    def test_greedy_first_come(self):
        """The first stroke claims its nearest reference even if a later one is closer."""
        matched = match_strokes_to_reference(
            [[(0.4, 0.4)], [(0.1, 0.1)]],
            [[(0, 0)], [(1, 1)]],
        )
        self.assertEqual(matched, [0, 1])

    def test_unmatched_stroke_gets_zero(self):
        matched = match_strokes_to_reference(
            [[(0.0, 0.0)], [(1.0, 1.0)], [(0.5, 0.5)]],
            [[(0, 0)], [(1, 1)]],
        )
        self.assertEqual(matched, [0, 1, 0])


class TestNormalizeStrokes(unittest.TestCase):
    """Tests for normalize_strokes."""

    def test_joint_bounding_box(self):
        """Strokes keep their positions relative to each other."""
        result = normalize_strokes([[(10, 10), (30, 10)], [(20, 20), (20, 50)]])
        self.assertEqual(result[0], [Point(0.0, 0.0), Point(1.0, 0.0)])
        self.assertEqual(result[1], [Point(0.5, 0.25), Point(0.5, 1.0)])

    def test_empty(self):
        self.assertEqual(normalize_strokes([]), [])


if __name__ == '__main__':
    unittest.main()
