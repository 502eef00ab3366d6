"""
Candidate pool — merge per-source batches and drop duplicate items.

Batches are concatenated in the configured source-priority order (unlisted sources after,
sorted by name), so the order in which fetches complete never affects the result.
Duplicates are detected by normalized URL; the first-seen copy wins.

The public entry points are gather_candidates and dedupe_items.
"""

import logging
from typing import Any, Dict, List, Mapping, Sequence, Union

from ..models.config import CurationConfig, DEFAULT_CONFIG
from ..models.content import ContentItem, ensure_items

logger = logging.getLogger(__name__)

RawItems = Union[Sequence[Union[Dict[str, Any], ContentItem]], Mapping[str, Sequence[Union[Dict[str, Any], ContentItem]]]]


def _ordered_sources(sources: Mapping[str, Sequence], priority: Sequence[str]) -> List[str]:
    """Source labels in priority order, then the remaining labels alphabetically."""
    listed = [s for s in priority if s in sources]
    rest = sorted(s for s in sources if s not in priority)
    return listed + rest


def dedupe_items(items: List[ContentItem]) -> List[ContentItem]:
    """Keep the first-seen item for every URL."""
    seen = set()
    unique: List[ContentItem] = []
    for item in items:
        key = item.dedup_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(item)
    if len(unique) < len(items):
        logger.debug("[candidate_pool] DUPLICATES_REMOVED count=%s", len(items) - len(unique))
    return unique


def gather_candidates(
    sources: Mapping[str, Sequence[Union[Dict[str, Any], ContentItem]]],
    config: CurationConfig = DEFAULT_CONFIG,
) -> List[ContentItem]:
    """
    Merge per-source batches into one list in source-priority order.

    Each item is stamped with its source label unless the adapter already set one.
    Duplicates are not removed here; see dedupe_items.
    """
    merged: List[ContentItem] = []
    for label in _ordered_sources(sources, config.source_priority):
        for item in ensure_items(list(sources[label] or [])):
            merged.append(item if item.source else item.model_copy(update={"source": label}))
    return merged


def build_candidate_pool(
    raw_items: RawItems,
    config: CurationConfig = DEFAULT_CONFIG,
) -> List[ContentItem]:
    """Typed, merged and deduplicated candidates from a flat list or per-source batches."""
    if isinstance(raw_items, Mapping):
        merged = gather_candidates(raw_items, config)
    else:
        merged = ensure_items(list(raw_items or []))
    return dedupe_items(merged)
