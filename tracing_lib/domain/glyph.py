"""Reference glyph domain objects.

This module provides the data structures that describe the ground truth a
user's drawing is scored against. Reference data is authored ahead of time,
loaded once and treated as immutable for the session.

The module provides the following classes:
    ReferenceDataError: Raised when a reference record is malformed.
    ReferenceStroke: One authored stroke with its 1-indexed position and
        the rendering metadata replay needs.
    ReferenceGlyph: The ordered strokes of one character plus the canvas
        size their coordinates are expressed in.
    LetterReference: Stroke count and optional normalized 0-1 paths for a
        letter identifier.
    Letter: One entry of the achulu catalogue.

Example usage:
    Loading glyph metadata::

        from tracing_lib.domain.glyph import ReferenceGlyph

        glyph = ReferenceGlyph.from_dict(json.loads(text))
        first = glyph.stroke(1)
        print(f"{glyph.character}: {glyph.stroke_count} strokes, "
              f"first has {len(first.path)} points")
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .geometry import Point, as_point


class ReferenceDataError(ValueError):
    """A reference record is missing fields or breaks stroke numbering."""


@dataclass(frozen=True)
class ReferenceStroke:
    """A ground-truth stroke for one position in a glyph's writing order.

    Attributes:
        stroke_number: 1-indexed position in the writing order.
        path: Ordered points in the glyph's canvas coordinates.
        color: CSS color used when replaying the stroke.
        brush_size: Line width in canvas units used when replaying.
        duration_ms: Replay duration of the stroke.
    """
    stroke_number: int
    path: Tuple[Point, ...]
    color: str = '#000000'
    brush_size: float = 8.0
    duration_ms: float = 1000.0

    @property
    def point_count(self) -> int:
        return len(self.path)

    def to_dict(self) -> dict:
        return {
            'stroke_number': self.stroke_number,
            'point_count': self.point_count,
            'color': self.color,
            'brush_size': self.brush_size,
            'duration_ms': self.duration_ms,
            'path': [p.to_dict() for p in self.path],
        }

    @classmethod
    def from_dict(cls, d: dict) -> ReferenceStroke:
        """Create from a stroke record of the metadata JSON.

        Raises:
            ReferenceDataError: If 'stroke_number' or 'path' is missing or
                a path point cannot be read.
        """
        try:
            number = int(d['stroke_number'])
            path = tuple(as_point(p) for p in d['path'])
        except (KeyError, TypeError, ValueError) as e:
            raise ReferenceDataError(f"Invalid stroke record: {e}") from e
        return cls(
            stroke_number=number,
            path=path,
            color=d.get('color', '#000000'),
            brush_size=float(d.get('brush_size', 8.0)),
            duration_ms=float(d.get('duration_ms', 1000.0)),
        )


@dataclass(frozen=True)
class ReferenceGlyph:
    """Authoritative stroke-by-stroke ground truth for one character.

    Strokes are kept sorted by stroke_number, and the numbering is the
    contiguous range 1..N.
    """
    character: str
    canvas_width: float
    canvas_height: float
    strokes: Tuple[ReferenceStroke, ...]
    frame_rate: Optional[float] = None
    frame_delay_ms: Optional[float] = None
    total_frames: Optional[int] = None

    def __post_init__(self):
        ordered = tuple(sorted(self.strokes, key=lambda s: s.stroke_number))
        numbers = [s.stroke_number for s in ordered]
        if numbers != list(range(1, len(ordered) + 1)):
            raise ReferenceDataError(
                f"Stroke numbers for {self.character!r} must be 1..{len(ordered)}, got {numbers}"
            )
        object.__setattr__(self, 'strokes', ordered)

    @property
    def stroke_count(self) -> int:
        return len(self.strokes)

    def stroke(self, stroke_number: int) -> Optional[ReferenceStroke]:
        """Reference stroke at a 1-indexed position, or None if out of range."""
        if 1 <= stroke_number <= len(self.strokes):
            return self.strokes[stroke_number - 1]
        return None

    def paths(self) -> List[List[Point]]:
        """Stroke paths in writing order."""
        return [list(s.path) for s in self.strokes]

    def to_dict(self) -> dict:
        d = {
            'character': self.character,
            'canvas_width': self.canvas_width,
            'canvas_height': self.canvas_height,
            'stroke_count': self.stroke_count,
            'strokes': [s.to_dict() for s in self.strokes],
        }
        if self.frame_rate is not None:
            d['frame_rate'] = self.frame_rate
        if self.frame_delay_ms is not None:
            d['frame_delay_ms'] = self.frame_delay_ms
        if self.total_frames is not None:
            d['total_frames'] = self.total_frames
        return d

    @classmethod
    def from_dict(cls, d: dict) -> ReferenceGlyph:
        """Create from character animation metadata.

        Raises:
            ReferenceDataError: If required fields are missing, the canvas
                size is not positive, or stroke numbering is not 1..N.
        """
        try:
            width = float(d['canvas_width'])
            height = float(d['canvas_height'])
            records = d['strokes']
        except (KeyError, TypeError, ValueError) as e:
            raise ReferenceDataError(f"Invalid glyph metadata: {e}") from e
        if not isinstance(records, list):
            raise ReferenceDataError("Glyph metadata 'strokes' must be a list")
        if width <= 0 or height <= 0:
            raise ReferenceDataError(f"Canvas size must be positive, got {width}x{height}")

        return cls(
            character=str(d.get('character', '')),
            canvas_width=width,
            canvas_height=height,
            strokes=tuple(ReferenceStroke.from_dict(r) for r in records),
            frame_rate=d.get('frame_rate'),
            frame_delay_ms=d.get('frame_delay_ms'),
            total_frames=d.get('total_frames'),
        )


@dataclass(frozen=True)
class LetterReference:
    """Stroke reference for a letter identifier.

    Attributes:
        letter_id: Catalogue id such as 'a' or 'aa'.
        stroke_count: Number of strokes in the correct writing order.
        strokes: Optional ordered stroke paths as (x, y) in normalized 0-1
            space. None means accuracy scoring is unavailable for the
            letter and only the stroke count can be shown.
    """
    letter_id: str
    stroke_count: int
    strokes: Optional[Tuple[Tuple[Tuple[float, float], ...], ...]] = None

    @property
    def has_paths(self) -> bool:
        return bool(self.strokes)

    def paths(self) -> List[List[Tuple[float, float]]]:
        return [list(s) for s in self.strokes or ()]

    @classmethod
    def from_dict(cls, letter_id: str, d: dict) -> LetterReference:
        try:
            strokes = d.get('strokes')
            if strokes is not None:
                strokes = tuple(
                    tuple((float(x), float(y)) for x, y in stroke)
                    for stroke in strokes
                )
            count = int(d.get('stroke_count', len(strokes) if strokes else 0))
        except (TypeError, ValueError) as e:
            raise ReferenceDataError(f"Invalid reference for {letter_id!r}: {e}") from e
        return cls(letter_id=letter_id, stroke_count=count, strokes=strokes)


@dataclass(frozen=True)
class Letter:
    """A letter of the practice catalogue."""
    id: str
    symbol: str
    name: str = field(default='')
