"""
Insight Reporter — read-only summary of the final result set.

Quality bands, format / platform / difficulty distributions, learning-path alignment,
and advisory strings from threshold checks. Nothing here feeds back into ranking.
"""

from collections import Counter
from typing import Dict, List

from ..models.config import CurationConfig, DEFAULT_CONFIG
from ..models.curation import InsightSummary, PathAlignmentSummary
from ..models.profile import UserProfile
from ..models.scoring import RecommendationResult
from ..utils.scores import round_half_up


def quality_distribution(
    results: List[RecommendationResult],
    config: CurationConfig = DEFAULT_CONFIG,
) -> Dict[str, int]:
    bands = {"excellent": 0, "good": 0, "fair": 0, "poor": 0}
    for result in results:
        score = result.quality.score
        if score >= config.excellent_threshold:
            bands["excellent"] += 1
        elif score >= config.good_threshold:
            bands["good"] += 1
        elif score >= config.fair_threshold:
            bands["fair"] += 1
        else:
            bands["poor"] += 1
    return bands


def difficulty_distribution(results: List[RecommendationResult]) -> Dict[str, int]:
    """Counts per difficulty; items without a declared difficulty count as intermediate."""
    bands = {"beginner": 0, "intermediate": 0, "advanced": 0, "expert": 0}
    for result in results:
        label = result.item.difficulty_label
        if label in bands:
            bands[label] += 1
    return bands


def path_alignment_summary(
    results: List[RecommendationResult],
    profile: UserProfile,
) -> PathAlignmentSummary:
    """Share of results whose tags intersect the user's active roadmap skills."""
    roadmap_skills = [s.lower() for s in profile.active_path_skills]
    aligned = 0
    for result in results:
        tags = [t.lower() for t in result.item.tags]
        if any(skill in tag for tag in tags for skill in roadmap_skills):
            aligned += 1
    total = len(results)
    percentage = round_half_up(aligned / total * 100) if total else 0
    return PathAlignmentSummary(
        aligned_count=aligned,
        total_count=total,
        alignment_percentage=percentage,
    )


def advisories(
    results: List[RecommendationResult],
    profile: UserProfile,
    quality: Dict[str, int],
    formats: Dict[str, int],
    difficulties: Dict[str, int],
) -> List[str]:
    notes = []
    if quality["excellent"] < len(results) * 0.3:
        notes.append("Consider searching for higher quality content sources")
    if profile.learning_style == "visual" and formats.get("video", 0) < 3:
        notes.append("Add more video content to match your visual learning style")
    if profile.learning_style == "kinesthetic" and formats.get("project", 0) < 2:
        notes.append("Include more hands-on projects and exercises")
    if profile.level == 1 and difficulties["advanced"] > 2:
        notes.append("Consider focusing on beginner-friendly content first")
    if profile.level == 3 and difficulties["beginner"] > 3:
        notes.append("You might be ready for more challenging content")
    return notes


def summarize_insights(
    results: List[RecommendationResult],
    profile: UserProfile,
    config: CurationConfig = DEFAULT_CONFIG,
) -> InsightSummary:
    """Distributions and advisories for the final set; an empty set gets a zeroed summary."""
    if not results:
        return InsightSummary()
    quality = quality_distribution(results, config)
    formats = dict(Counter(r.item.format for r in results))
    platforms = dict(Counter(r.item.platform for r in results))
    difficulties = difficulty_distribution(results)
    return InsightSummary(
        quality_distribution=quality,
        format_distribution=formats,
        platform_distribution=platforms,
        difficulty_distribution=difficulties,
        path_alignment=path_alignment_summary(results, profile),
        advisories=advisories(results, profile, quality, formats, difficulties),
    )


def suggest_profile_updates(profile: UserProfile, insights: InsightSummary) -> UserProfile:
    """
    Profile copy whose preferences follow what the user was just shown.

    Preferred formats and platforms become the top three of their distributions and the
    preferred difficulty the most common one. Empty distributions leave the field unchanged.
    """
    update = {}
    if insights.format_distribution:
        update["preferred_formats"] = [
            name for name, _ in Counter(insights.format_distribution).most_common(3)
        ]
    if insights.platform_distribution:
        update["preferred_platforms"] = [
            name for name, _ in Counter(insights.platform_distribution).most_common(3)
        ]
    difficulties = Counter({k: v for k, v in insights.difficulty_distribution.items() if v})
    if difficulties:
        update["preferred_difficulty"] = difficulties.most_common(1)[0][0]
    return profile.model_copy(update=update)
