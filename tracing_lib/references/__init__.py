"""Reference data for the achulu letters.

Exports:
    ACHULU: The 16 Telugu vowels with their symbols.
    DEFAULT_REFERENCES: Built-in stroke references.
    ReferenceRepository: Letter id -> stroke count and optional paths.
    load_glyph_metadata: Read per-character animation metadata.
"""

from .catalogue import ACHULU, DEFAULT_REFERENCES, get_letter
from .repository import ReferenceRepository, load_glyph_metadata

__all__ = [
    'ACHULU', 'DEFAULT_REFERENCES', 'get_letter',
    'ReferenceRepository', 'load_glyph_metadata',
]
