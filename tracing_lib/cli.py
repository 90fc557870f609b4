#!/usr/bin/env python3
"""Command-line interface for offline tracing scores.

Scores saved drawings against letter references and renders the
comparison raster, for checking reference data and tuning thresholds
without the practice UI.

Usage:
    tracing-score similarity drawing.png --letter a
    tracing-score similarity drawing.png --metadata aa/character_metadata.json
    tracing-score render --letter aa --output aa_reference.png

Or run via the module:
    python -m tracing_lib.cli similarity drawing.png --letter a
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .config import configure_logging
from .references import ACHULU, ReferenceRepository, load_glyph_metadata
from .scoring.similarity import compute_shape_similarity
from .utils.rendering import render_reference_image


def _create_argument_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        description='Score Telugu vowel tracings against reference strokes'
    )
    parser.add_argument('--log-level', type=str, default='WARNING',
                        help='Log level (default: WARNING)')
    sub = parser.add_subparsers(dest='command', required=True)

    sim = sub.add_parser('similarity', help='Pixel-overlap score of a drawing')
    sim.add_argument('image', type=str, help='Path to the drawing (PNG)')
    sim.add_argument('--letter', '-l', type=str, default=None,
                     help='Letter id, e.g. a or aa')
    sim.add_argument('--metadata', '-m', type=str, default=None,
                     help='Glyph metadata JSON to use instead of the letter reference')

    render = sub.add_parser('render', help='Write the reference comparison raster')
    render.add_argument('--letter', '-l', type=str, default=None,
                        help='Letter id, e.g. a or aa')
    render.add_argument('--metadata', '-m', type=str, default=None,
                        help='Glyph metadata JSON to use instead of the letter reference')
    render.add_argument('--output', '-o', type=str, required=True,
                        help='Output PNG path')
    return parser


def _reference_paths(args, parser: argparse.ArgumentParser) -> list:
    """Reference paths selected by --metadata or --letter."""
    if args.metadata:
        glyph = load_glyph_metadata(args.metadata)
        if glyph is None:
            parser.error(f"could not load glyph metadata from {args.metadata}")
        return glyph.paths()

    if not args.letter:
        parser.error('one of --letter or --metadata is required')
    ref = ReferenceRepository.default().get(args.letter)
    if ref is None or not ref.has_paths:
        known = ', '.join(letter.id for letter in ACHULU)
        parser.error(f"no stroke paths for letter {args.letter!r} (letters: {known})")
    return ref.paths()


def _similarity_command(args, parser: argparse.ArgumentParser) -> int:
    paths = _reference_paths(args, parser)
    try:
        with Image.open(args.image) as img:
            canvas = img.convert('RGBA')
    except (OSError, UnidentifiedImageError) as e:
        print(f"Cannot open {args.image}: {e}", file=sys.stderr)
        return 1

    score = compute_shape_similarity(canvas, paths)
    if score is None:
        print("Similarity: not available")
        return 1
    print(f"Similarity: {score}")
    return 0


def _render_command(args, parser: argparse.ArgumentParser) -> int:
    paths = _reference_paths(args, parser)
    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    render_reference_image(paths).save(output)
    print(f"Saved to {output}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point.

    Returns:
        Process exit code.
    """
    parser = _create_argument_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    if args.command == 'similarity':
        return _similarity_command(args, parser)
    return _render_command(args, parser)


if __name__ == '__main__':
    sys.exit(main())
