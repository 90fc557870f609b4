"""Shared pytest fixtures for the tracing_lib test suite.

Fixtures:
    make_circle: Factory for closed circular point lists
    make_square: Factory for densely sampled square outlines
    unit_square: Unit square corners traced clockwise (5 points)
    two_stroke_reference: Normalized reference with a top bar and a stem
    glyph_metadata: Character animation metadata dict with two strokes
    glyph: ReferenceGlyph built from glyph_metadata
    circle_canvas: 300x300 transparent RGBA image with a drawn ring
    bar_canvas: 300x300 transparent RGBA image with a vertical bar
"""

import math
import sys
from pathlib import Path

import pytest
from PIL import Image, ImageDraw

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tracing_lib.domain.glyph import ReferenceGlyph


def _circle(cx=0.5, cy=0.5, r=0.4, n=64):
    pts = [
        (cx + r * math.cos(2 * math.pi * i / n), cy + r * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]
    return pts + [pts[0]]


def _square(n=200, scale=1.0, offset=(0.0, 0.0)):
    """Points along the unit square perimeter, clockwise from (0, 0).

    The perimeter parameter runs from 0 to 4 inclusive in n samples.
    """
    corners = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.0, 0.0)]
    pts = []
    for i in range(n):
        t = 4.0 * i / (n - 1)
        edge = min(int(t), 3)
        f = t - edge
        (x0, y0), (x1, y1) = corners[edge], corners[edge + 1]
        x = x0 + f * (x1 - x0)
        y = y0 + f * (y1 - y0)
        pts.append((offset[0] + scale * x, offset[1] + scale * y))
    return pts


@pytest.fixture
def make_circle():
    """Factory: make_circle(cx, cy, r, n) -> closed list of (x, y)."""
    return _circle


@pytest.fixture
def make_square():
    """Factory: make_square(n, scale, offset) -> square outline points."""
    return _square


@pytest.fixture
def unit_square():
    """Unit square corners traced clockwise, closed."""
    return [(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]


@pytest.fixture
def two_stroke_reference():
    """Reference with a top bar (stroke 1) and a lower stem (stroke 2).

    Centroids are (0.5, 0.2) and (0.5, 0.7).
    """
    return [
        [(0.2, 0.2), (0.8, 0.2)],
        [(0.5, 0.5), (0.5, 0.9)],
    ]


@pytest.fixture
def glyph_metadata():
    """Character animation metadata with strokes listed out of order."""
    circle = [{'x': x * 100, 'y': y * 100} for x, y in _circle()]
    square = [{'x': 20 + x * 60, 'y': 20 + y * 60} for x, y in _square(n=40)]
    return {
        'character': 'అ',
        'canvas_width': 100,
        'canvas_height': 100,
        'frame_rate': 30,
        'stroke_count': 2,
        'strokes': [
            {
                'stroke_number': 2,
                'point_count': len(square),
                'color': '#0000ff',
                'brush_size': 4,
                'duration_ms': 500,
                'path': square,
            },
            {
                'stroke_number': 1,
                'point_count': len(circle),
                'color': '#ff0000',
                'brush_size': 6,
                'duration_ms': 1000,
                'path': circle,
            },
        ],
    }


@pytest.fixture
def glyph(glyph_metadata):
    """ReferenceGlyph: stroke 1 is a circle, stroke 2 a square."""
    return ReferenceGlyph.from_dict(glyph_metadata)


@pytest.fixture
def circle_canvas():
    """Transparent 300x300 canvas with a black ring, like a practice canvas."""
    img = Image.new('RGBA', (300, 300), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.ellipse([50, 50, 250, 250], outline=(0, 0, 0, 255), width=14)
    return img


@pytest.fixture
def bar_canvas():
    """Transparent 300x300 canvas with a single vertical bar."""
    img = Image.new('RGBA', (300, 300), (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    draw.rectangle([143, 50, 157, 250], fill=(0, 0, 0, 255))
    return img
