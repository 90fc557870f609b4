"""SVG path conversion for reference strokes."""

from __future__ import annotations

from ..domain.glyph import ReferenceStroke


def stroke_to_svg_path(stroke: ReferenceStroke, source_width: float,
                       source_height: float, target_size: float) -> str:
    """Convert a stroke's path to an SVG path 'd' attribute.

    Scales each axis from the metadata canvas size to a square target.

    Args:
        stroke: Reference stroke to convert.
        source_width: Width of the canvas the path is expressed in.
        source_height: Height of that canvas.
        target_size: Side of the square target surface.

    Returns:
        Path string such as 'M 10.00 20.00 L 30.00 40.00', or '' for an
        empty path.

    Example:
        >>> stroke = ReferenceStroke(1, (Point(0, 0), Point(50, 100)))
        >>> stroke_to_svg_path(stroke, 100, 100, 200)
        'M 0.00 0.00 L 100.00 200.00'
    """
    if not stroke.path:
        return ''

    scale_x = target_size / source_width
    scale_y = target_size / source_height

    commands = []
    for i, point in enumerate(stroke.path):
        op = 'M' if i == 0 else 'L'
        commands.append(f"{op} {point.x * scale_x:.2f} {point.y * scale_y:.2f}")
    return ' '.join(commands)
