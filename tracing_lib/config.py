"""Shared configuration for the tracing scorers.

This module centralizes the tuning constants used by:
    - scoring.similarity (pixel-overlap raster comparison)
    - scoring.match (single-stroke shape match and acceptance gate)
    - animation.replay (stroke-order replay display)

The three scorers were tuned independently, so each keeps its own
constants. They are not meant to be harmonized into one metric.
"""

from __future__ import annotations

import logging

# Module logger
logger = logging.getLogger(__name__)

# --- Pixel-overlap similarity ---
RASTER_SIZE = 128        # Square comparison raster (pixels)
RASTER_PAD = 8           # Margin around the drawable inner area
RASTER_STROKE_WIDTH = 8  # Line width used to draw reference paths
INK_THRESHOLD = 250      # Channel value below this counts as ink (0-255)
ALPHA_THRESHOLD = 64     # Alpha above this counts as visible (0-255)

# --- Single-stroke shape match ---
SAMPLE_POINTS = 32               # Resample count for both paths
MAX_ACCEPTABLE_DISTANCE = 0.25   # Normalized distance that maps to score 0
STROKE_MATCH_THRESHOLD = 45      # Minimum score for a stroke to be accepted
MIN_USER_POINTS = 3              # Fewer captured points is noise
MIN_REFERENCE_POINTS = 2

# --- Stroke-order replay ---
REPLAY_DISPLAY_SIZE = 200


def configure_logging(level: str = 'INFO', log_file: str | None = None) -> None:
    """Configure application-wide logging.

    Sets up logging with a consistent format across all modules. Library
    code only creates module loggers; call this once from an application
    entry point (the CLI does).

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.

    Example:
        Configure at startup::

            from tracing_lib.config import configure_logging
            configure_logging(level='DEBUG', log_file='tracing.log')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('PIL').setLevel(logging.WARNING)

    logger.info("Logging configured: level=%s, file=%s", level, log_file or 'stderr')
