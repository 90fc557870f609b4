"""Telugu vowel (achulu) catalogue and built-in stroke references."""

from __future__ import annotations

from ..domain.glyph import Letter

# Telugu vowels (achulu), 16 letters in teaching order
ACHULU = [
    Letter('a', 'అ', 'a'),
    Letter('aa', 'ఆ', 'aa'),
    Letter('i', 'ఇ', 'i'),
    Letter('ii', 'ఈ', 'ii'),
    Letter('u', 'ఉ', 'u'),
    Letter('uu', 'ఊ', 'uu'),
    Letter('ru', 'ఋ', 'ru'),
    Letter('ruu', 'ౠ', 'ruu'),
    Letter('e', 'ఎ', 'e'),
    Letter('ee', 'ఏ', 'ee'),
    Letter('ai', 'ఐ', 'ai'),
    Letter('o', 'ఒ', 'o'),
    Letter('oo', 'ఓ', 'oo'),
    Letter('au', 'ఔ', 'au'),
    Letter('am', 'అం', 'am'),
    Letter('ah', 'అః', 'ah'),
]

_LOOP = [
    (0.5, 0.2),     # start (top)
    (0.65, 0.25),
    (0.78, 0.4),
    (0.8, 0.55),
    (0.72, 0.72),
    (0.55, 0.8),
    (0.38, 0.75),
    (0.25, 0.6),
    (0.22, 0.45),
    (0.3, 0.3),
    (0.42, 0.22),
]

# letter id -> reference record, paths in normalized 0-1 space
DEFAULT_REFERENCES = {
    # One stroke, closed loop
    'a': {
        'stroke_count': 1,
        'strokes': [_LOOP + [(0.5, 0.2)]],
    },
    # Loop that runs into the tail without a pen lift
    'aa': {
        'stroke_count': 1,
        'strokes': [_LOOP + [
            (0.55, 0.25),
            (0.68, 0.32),
            (0.78, 0.42),
            (0.85, 0.55),
            (0.88, 0.7),
            (0.85, 0.9),
        ]],
    },
}


def get_letter(letter_id: str) -> Letter | None:
    """Catalogue entry for a letter id, or None."""
    for letter in ACHULU:
        if letter.id == letter_id:
            return letter
    return None
