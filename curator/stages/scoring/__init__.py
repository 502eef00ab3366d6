"""
Per-item scorers: quality, personalization, and learning-path alignment.

Each scorer is a pure function of (item, profile); the ranker combines their outputs.
"""

from .path_alignment import score_path_alignment
from .personalization import score_personalization
from .quality import score_quality

__all__ = [
    "score_path_alignment",
    "score_personalization",
    "score_quality",
]
