"""Unit tests for the ScoringService facade."""

from PIL import Image

from tracing_lib.api import ScoringService
from tracing_lib.references import ReferenceRepository


class TestLetterInfo:
    """Tests for ScoringService.letter_info."""

    def test_letter_with_paths(self):
        info = ScoringService().letter_info('a')
        assert info == {'id': 'a', 'symbol': 'అ', 'stroke_count': 1, 'has_paths': True}

    def test_catalogue_letter_without_reference(self):
        info = ScoringService().letter_info('i')
        assert info['symbol'] == 'ఇ'
        assert info['stroke_count'] is None
        assert info['has_paths'] is False

    def test_unknown_letter(self):
        info = ScoringService().letter_info('zz')
        assert info['symbol'] is None


class TestOrderAccuracy:
    """Tests for ScoringService.order_accuracy."""

    def test_single_stroke_letter(self):
        result = ScoringService().order_accuracy('a', [[(0, 0), (5, 5), (9, 0)]])
        assert result == {
            'available': True, 'score': 100, 'strokes_drawn': 1, 'strokes_expected': 1,
        }

    def test_custom_repository(self, two_stroke_reference):
        repo = ReferenceRepository.from_dict({'u': {'strokes': two_stroke_reference}})
        service = ScoringService(repo)
        user = [[(50, 50), (50, 90)], [(20, 20), (80, 20)]]
        result = service.order_accuracy('u', user)
        assert result['available']
        assert result['score'] == 0
        assert result['strokes_expected'] == 2

    def test_letter_without_paths(self):
        repo = ReferenceRepository.from_dict({'i': {'stroke_count': 2}})
        result = ScoringService(repo).order_accuracy('i', [[(0, 0), (1, 1)]])
        assert result['available'] is False
        assert result['score'] is None
        assert result['strokes_expected'] == 2

    def test_no_strokes_drawn(self):
        result = ScoringService().order_accuracy('a', [])
        assert result['available']
        assert result['score'] is None


class TestShapeSimilarity:
    """Tests for ScoringService.shape_similarity."""

    def test_available_letter(self, circle_canvas):
        result = ScoringService().shape_similarity('a', circle_canvas)
        assert result['available']
        assert 0 < result['score'] <= 100

    def test_unknown_letter(self, circle_canvas):
        assert ScoringService().shape_similarity('ka', circle_canvas) == {
            'available': False, 'score': None,
        }

    def test_blank_canvas(self):
        blank = Image.new('RGBA', (100, 100), (0, 0, 0, 0))
        assert ScoringService().shape_similarity('a', blank)['score'] == 0


class TestCheckStroke:
    """Tests for ScoringService.check_stroke."""

    def test_matching_stroke(self, glyph, make_circle):
        points = [(x * 300, y * 300) for x, y in make_circle()]
        result = ScoringService().check_stroke(glyph, 1, points, user_size=300)
        assert result == {'available': True, 'stroke_number': 1, 'score': 100, 'accepted': True}

    def test_out_of_range_stroke(self, glyph):
        result = ScoringService().check_stroke(glyph, 3, [(0, 0), (1, 1), (2, 2)])
        assert result['available'] is False
        assert result['score'] is None
        assert result['accepted'] is False
