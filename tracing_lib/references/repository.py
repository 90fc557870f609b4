"""Reference repository for letter stroke data.

This module provides the ReferenceRepository class, the reference-data
source the scorers consume. For each letter id it holds the stroke count
and, where authored, the ordered stroke paths. A letter with a count but
no paths is valid: the stroke count can be shown, but accuracy scoring is
unavailable for it.

It also provides load_glyph_metadata for the per-character animation
metadata files (canvas size, per-stroke paths, colours and durations)
used by replay and progressive practice.

Example usage:
    Basic repository operations::

        from tracing_lib.references import ReferenceRepository

        repo = ReferenceRepository.default()
        repo.stroke_count('a')       # 1
        repo.has_paths('i')          # False
        paths = repo.get('a').paths()

    Bulk loading from dictionaries::

        repo = ReferenceRepository.from_dict({
            'i': {'stroke_count': 2},
            'u': {'strokes': [[[0.2, 0.2], [0.8, 0.2]], [[0.5, 0.3], [0.5, 0.9]]]},
        })
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from ..domain.glyph import LetterReference, ReferenceDataError, ReferenceGlyph
from .catalogue import DEFAULT_REFERENCES

logger = logging.getLogger(__name__)


class ReferenceRepository:
    """Repository of stroke references keyed by letter id.

    Example:
        >>> repo = ReferenceRepository()
        >>> repo.register(LetterReference('i', stroke_count=2))
        >>> repo.stroke_count('i')
        2
        >>> repo.has_paths('i')
        False
    """

    def __init__(self):
        self._references: dict[str, LetterReference] = {}

    def register(self, reference: LetterReference) -> None:
        """Register a reference, replacing any previous one for the letter."""
        self._references[reference.letter_id] = reference

    def get(self, letter_id: str) -> Optional[LetterReference]:
        """Reference for a letter, or None if unknown."""
        return self._references.get(letter_id)

    def stroke_count(self, letter_id: str) -> Optional[int]:
        """Stroke count for a letter, or None if unknown."""
        ref = self._references.get(letter_id)
        return ref.stroke_count if ref else None

    def has_paths(self, letter_id: str) -> bool:
        """True if the letter has stroke paths for accuracy scoring."""
        ref = self._references.get(letter_id)
        return ref is not None and ref.has_paths

    def list_letters(self) -> list[str]:
        """Sorted letter ids with a registered reference."""
        return sorted(self._references)

    def __contains__(self, letter_id: str) -> bool:
        return letter_id in self._references

    @classmethod
    def from_dict(cls, references: dict[str, dict]) -> ReferenceRepository:
        """Create repository from letter id -> reference record.

        Raises:
            ReferenceDataError: If a record cannot be read.
        """
        repo = cls()
        for letter_id, record in references.items():
            repo.register(LetterReference.from_dict(letter_id, record))
        return repo

    @classmethod
    def default(cls) -> ReferenceRepository:
        """Repository with the built-in references."""
        return cls.from_dict(DEFAULT_REFERENCES)


def load_glyph_metadata(path: Union[str, Path]) -> Optional[ReferenceGlyph]:
    """Load character animation metadata from a JSON file.

    Args:
        path: Path to a metadata file with 'canvas_width',
            'canvas_height' and a 'strokes' list.

    Returns:
        ReferenceGlyph, or None if the file cannot be read, is not valid
        JSON, breaks the stroke numbering, or has no strokes.
    """
    try:
        data = json.loads(Path(path).read_text(encoding='utf-8'))
        glyph = ReferenceGlyph.from_dict(data)
    except (OSError, json.JSONDecodeError, ReferenceDataError) as e:
        logger.warning("Failed to load glyph metadata %s: %s", path, e)
        return None

    if not glyph.strokes:
        logger.warning("Glyph metadata %s has no strokes", path)
        return None
    return glyph
