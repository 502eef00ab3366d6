"""Learning adaptation: history pattern analysis and the directives derived from it."""

from .patterns import analyze_patterns
from .resolver import resolve_adaptation

__all__ = [
    "analyze_patterns",
    "resolve_adaptation",
]
