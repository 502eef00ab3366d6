"""
Text matching helpers — lower-cased substring search over item text.
"""

from typing import Sequence


def item_text(*parts: str) -> str:
    """Join and lower-case the given text fields, skipping empty ones."""
    return " ".join(p.lower() for p in parts if p)


def count_matches(terms: Sequence[str], *texts: str) -> int:
    """Number of terms found as a substring of at least one of the texts."""
    lowered = [t.lower() for t in texts if t]
    count = 0
    for term in terms:
        if not term:
            continue
        needle = term.lower()
        if any(needle in text for text in lowered):
            count += 1
    return count
