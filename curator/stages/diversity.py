"""
Diversity Selector — cap formats and platforms in the final list.

Greedy walk of the ranked list: an item is admitted while its format has fewer than
max_per_format admitted and its platform fewer than max_per_platform. If the caps leave
the list short of `limit`, the remaining items are appended in ranked order, ignoring caps.
Ranks are reassigned 1..k over the selected sequence.
"""

from collections import Counter
from typing import List

from ..models.config import CurationConfig, DEFAULT_CONFIG
from ..models.scoring import RecommendationResult


def select_diverse(
    ranked: List[RecommendationResult],
    limit: int,
    config: CurationConfig = DEFAULT_CONFIG,
) -> List[RecommendationResult]:
    """
    Select up to `limit` results under the format and platform caps.

    Args:
        ranked: Results sorted best first. Not mutated.
        limit: Maximum number of results to return.
        config: Supplies max_per_format and max_per_platform.

    Returns:
        New RecommendationResult copies with rank set 1..k and backfilled flagged.
    """
    if limit <= 0:
        return []

    selected: List[RecommendationResult] = []
    admitted = set()
    format_count: Counter = Counter()
    platform_count: Counter = Counter()

    for index, result in enumerate(ranked):
        if len(selected) >= limit:
            break
        fmt = result.item.format
        platform = result.item.platform
        if format_count[fmt] < config.max_per_format and platform_count[platform] < config.max_per_platform:
            selected.append(result.model_copy(update={"backfilled": False}))
            admitted.add(index)
            format_count[fmt] += 1
            platform_count[platform] += 1

    if len(selected) < limit:
        for index, result in enumerate(ranked):
            if len(selected) >= limit:
                break
            if index not in admitted:
                selected.append(result.model_copy(update={"backfilled": True}))

    return [r.model_copy(update={"rank": position}) for position, r in enumerate(selected, start=1)]
