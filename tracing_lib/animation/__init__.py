"""Stroke-order replay and SVG conversion for reference glyphs."""

from .replay import (
    DrawCommand,
    ReplayFrame,
    ReplayState,
    advance,
    display_transform,
    start_replay,
)
from .svg import stroke_to_svg_path

__all__ = [
    'DrawCommand', 'ReplayFrame', 'ReplayState',
    'advance', 'display_transform', 'start_replay',
    'stroke_to_svg_path',
]
