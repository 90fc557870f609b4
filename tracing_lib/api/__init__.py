"""API layer for tracing scores.

Exports:
    ScoringService: Letter-id based scoring returning JSON-ready dicts.
"""

from .services import ScoringService

__all__ = ['ScoringService']
