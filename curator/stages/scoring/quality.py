"""
Quality Scorer — source-independent quality of one item for one user.

Seven sub-scores, each clamped to [0, 100], blended with the configured quality weights:
relevance, credibility, freshness, completeness, engagement, difficulty fit, accessibility.
Pure: the same (item, profile, reference time) always gives the same analysis.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from ...models.config import CurationConfig, DEFAULT_CONFIG
from ...models.content import ContentItem
from ...models.profile import UserProfile
from ...models.scoring import QualityAnalysis, quality_grade
from ...utils.levels import level_distance
from ...utils.scores import clamp_score, days_since, round_half_up
from ...utils.text import count_matches

# Platform reputation (0-1). Unknown platforms score 0.5.
PLATFORM_CREDIBILITY: Dict[str, float] = {
    "Coursera": 0.95,
    "edX": 0.93,
    "Udemy": 0.85,
    "YouTube": 0.70,
    "Medium": 0.75,
    "GitHub": 0.90,
    "Stack Overflow": 0.88,
    "Google Scholar": 0.95,
    "Khan Academy": 0.90,
    "freeCodeCamp": 0.85,
    "TED": 0.90,
    "MIT OpenCourseWare": 0.98,
    "Harvard Online": 0.97,
    "Stanford Online": 0.96,
}

# Format credibility (0-1). Unknown formats score 0.5.
FORMAT_CREDIBILITY: Dict[str, float] = {
    "course": 0.9,
    "tutorial": 0.8,
    "video": 0.7,
    "article": 0.6,
    "book": 0.85,
    "research": 0.9,
    "documentation": 0.8,
    "project": 0.75,
}

ACCESSIBLE_PLATFORMS = ("youtube", "khan", "freecodecamp")
RECENCY_WORDS = ("updated", "latest")
SOCIAL_PROOF_TITLE = ("popular", "trending")
SOCIAL_PROOF_DESCRIPTION = ("recommended", "best")

# (max age in days, score); older than the last band scores 30.
FRESHNESS_BANDS = ((30, 100), (90, 90), (365, 70), (730, 50))
DIFFICULTY_FIT = {0: 100, 1: 80, 2: 60}


def _fraction(matches: int, total: int) -> float:
    return matches / max(total, 1)


def relevance_score(item: ContentItem, profile: UserProfile) -> float:
    """Share of interests/skills/goals/domains mentioned in title or description (40/30/20/10)."""
    score = 0.0
    score += _fraction(count_matches(profile.interests, item.title, item.description), len(profile.interests)) * 40
    score += _fraction(count_matches(profile.skill_names, item.title, item.description), len(profile.skills)) * 30
    score += _fraction(count_matches(profile.goals, item.title, item.description), len(profile.goals)) * 20
    score += (
        _fraction(count_matches(profile.selected_domains, item.title, item.description), len(profile.selected_domains))
        * 10
    )
    return clamp_score(score)


def credibility_score(item: ContentItem) -> float:
    """Platform reputation, format weight, author presence, rating and review bonuses."""
    score = PLATFORM_CREDIBILITY.get(item.platform, 0.5) * 40
    score += FORMAT_CREDIBILITY.get(item.format, 0.5) * 30
    if item.author:
        score += 20
    if item.rating and item.rating > 0:
        score += min(item.rating * 4, 20)
    if item.review_count and item.review_count > 10:
        score += min(item.review_count / 10, 10)
    return clamp_score(score)


def freshness_score(item: ContentItem, now: Optional[datetime] = None) -> float:
    """Age banding from the publication date (neutral 50 when unknown) plus a recency-marker bonus."""
    now = now or datetime.now(timezone.utc)
    score = 50.0
    age = days_since(item.published_at, now)
    if age is not None:
        score = 30.0
        for max_age, band_score in FRESHNESS_BANDS:
            if age < max_age:
                score = float(band_score)
                break

    title = item.title.lower()
    description = item.description.lower()
    years = (str(now.year), str(now.year - 1))
    if any(y in title for y in years) or any(w in description for w in RECENCY_WORDS):
        score = min(score + 20, 100.0)
    return score


def completeness_score(item: ContentItem) -> float:
    """Required fields, text length thresholds, and optional metadata presence."""
    present = sum(1 for value in (item.title, item.description, item.url) if value)
    score = present / 3 * 30
    if len(item.title) > 20:
        score += 10
    if len(item.description) > 100:
        score += 20
    if len(item.description) > 500:
        score += 10
    if item.duration:
        score += 10
    if item.difficulty:
        score += 10
    if item.tags:
        score += 10
    return clamp_score(score)


def engagement_score(item: ContentItem) -> float:
    """Neutral 50 moved by rating, view-count bands and social-proof wording."""
    score = 50.0
    if item.rating and item.rating > 0:
        score += (item.rating - 2.5) * 20
    if item.view_count:
        if item.view_count > 10000:
            score += 20
        elif item.view_count > 1000:
            score += 10
    title = item.title.lower()
    description = item.description.lower()
    if any(w in title for w in SOCIAL_PROOF_TITLE) or any(w in description for w in SOCIAL_PROOF_DESCRIPTION):
        score += 10
    return clamp_score(score)


def difficulty_fit_score(item: ContentItem, profile: UserProfile) -> float:
    """Ordinal distance between user level and content difficulty: 0→100, 1→80, 2→60, else 40."""
    return float(DIFFICULTY_FIT.get(level_distance(profile.experience_level, item.difficulty), 40))


def accessibility_score(item: ContentItem) -> float:
    """Cost tier, language and platform reach."""
    score = 50.0
    if item.cost == "free":
        score += 30
    elif item.cost == "paid":
        score += 10
    if item.language in (None, "en", "english"):
        score += 10
    platform = item.platform.lower()
    if any(p in platform for p in ACCESSIBLE_PLATFORMS):
        score += 10
    return clamp_score(score)


def quality_hints(breakdown: Dict[str, float]) -> List[str]:
    """Plain-language improvement hints for weak sub-scores."""
    hints = []
    if breakdown.get("relevance", 100) < 60:
        hints.append("Content may not be highly relevant to your interests")
    if breakdown.get("credibility", 100) < 60:
        hints.append("Consider verifying the source credibility")
    if breakdown.get("freshness", 100) < 50:
        hints.append("Content may be outdated - look for newer resources")
    if breakdown.get("completeness", 100) < 60:
        hints.append("Content may lack comprehensive information")
    if breakdown.get("difficulty", 100) < 60:
        hints.append("Difficulty level may not match your current skills")
    return hints


def score_quality(
    item: ContentItem,
    profile: UserProfile,
    config: CurationConfig = DEFAULT_CONFIG,
    now: Optional[datetime] = None,
) -> QualityAnalysis:
    """Weighted blend of the seven quality sub-scores with grade and hints."""
    breakdown = {
        "relevance": relevance_score(item, profile),
        "credibility": credibility_score(item),
        "freshness": freshness_score(item, now),
        "completeness": completeness_score(item),
        "engagement": engagement_score(item),
        "difficulty": difficulty_fit_score(item, profile),
        "accessibility": accessibility_score(item),
    }
    total = sum(breakdown[name] * weight for name, weight in config.quality_weights.items())
    score = int(clamp_score(round_half_up(total)))
    return QualityAnalysis(
        score=score,
        grade=quality_grade(score),
        breakdown=breakdown,
        hints=quality_hints(breakdown),
    )
