"""
Adaptation Resolver — turn a behavioral summary into score-adjustment directives.

Difficulty shift (decrease / increase / maintain), boosted and penalized formats,
pacing note, focus areas and plain-language advice.
"""

from typing import List, Optional

from ...models.adaptation import (
    AdaptationDirective,
    DifficultyAdjustment,
    FocusAreas,
    FormatAdjustment,
    PacingAdjustment,
    PatternSummary,
)
from ...models.config import CurationConfig, DEFAULT_CONFIG
from ...models.profile import UserProfile


def resolve_difficulty(summary: PatternSummary) -> DifficultyAdjustment:
    """First matching rule wins: low completion, ready for challenge, struggling, else maintain."""
    if summary.completion_rate < 0.3:
        return DifficultyAdjustment(direction="decrease", amount=0.2, reason="Low completion rate")
    if summary.completion_rate >= 0.8 and summary.difficulty_progression == "progressive":
        return DifficultyAdjustment(
            direction="increase", amount=0.15, reason="High completion rate, ready for challenge"
        )
    if summary.difficulty_progression == "struggling":
        return DifficultyAdjustment(
            direction="decrease", amount=0.1, reason="Struggling with current difficulty"
        )
    return DifficultyAdjustment()


def resolve_formats(summary: PatternSummary, config: CurationConfig) -> FormatAdjustment:
    """Boost the two most used formats; penalize the configured low-engagement set."""
    formats = ", ".join(summary.preferred_formats) or "no formats yet"
    return FormatAdjustment(
        boost=summary.preferred_formats[:2],
        penalty=list(config.low_engagement_formats),
        reason=f"Based on {summary.engagement_level} engagement with {formats}",
    )


def resolve_pacing(summary: PatternSummary) -> PacingAdjustment:
    if summary.average_time_spent < 30 and summary.completion_rate > 0.7:
        return PacingAdjustment(
            direction="increase", reason="Content likely too easy, increase pace"
        )
    if summary.average_time_spent > 120 and summary.completion_rate < 0.5:
        return PacingAdjustment(
            direction="decrease", reason="Content likely too hard, decrease pace"
        )
    return PacingAdjustment()


def resolve_focus_areas(summary: PatternSummary, goals: List[str]) -> FocusAreas:
    strong = [area.lower() for area in summary.strong_areas]
    explore = [g for g in goals if not any(g.lower() in area for area in strong)]
    return FocusAreas(
        strengthen=summary.struggling_areas[:3],
        leverage=summary.strong_areas[:2],
        explore=explore[:2],
    )


def adaptation_advice(summary: PatternSummary) -> List[str]:
    advice = []
    if summary.completion_rate < 0.4:
        advice.append("Consider breaking down complex topics into smaller, manageable chunks")
    if summary.engagement_level == "low":
        advice.append("Try different content formats like videos or hands-on projects")
    if summary.struggling_areas:
        advice.append(f"Focus on strengthening: {', '.join(summary.struggling_areas)}")
    if summary.strong_areas:
        advice.append(f"Leverage your strengths in: {', '.join(summary.strong_areas)}")
    return advice


def adaptation_confidence(summary: PatternSummary, saturation: int = 7) -> float:
    """Share of a full history window behind the directive, 0 (no history) to 1."""
    return round(min(summary.entry_count / saturation, 1.0), 2)


def resolve_adaptation(
    summary: PatternSummary,
    profile: Optional[UserProfile] = None,
    config: CurationConfig = DEFAULT_CONFIG,
) -> AdaptationDirective:
    """Build the full directive for one request."""
    goals = profile.goals if profile is not None else []
    return AdaptationDirective(
        difficulty=resolve_difficulty(summary),
        formats=resolve_formats(summary, config),
        pacing=resolve_pacing(summary),
        focus_areas=resolve_focus_areas(summary, goals),
        advice=adaptation_advice(summary),
        confidence=adaptation_confidence(summary),
    )
