"""
Personalization Scorer — fit of one item to the user's stated preferences.

Learning-style keywords, format preference, duration band and preferred platform.
"""

from typing import Dict, Optional, Tuple

from ...models.content import ContentItem
from ...models.profile import UserProfile
from ...models.scoring import PersonalizationScore
from ...utils.scores import clamp_score, parse_duration_minutes
from ...utils.text import item_text

# style → (weight, indicator keywords)
LEARNING_STYLES: Dict[str, Tuple[float, Tuple[str, ...]]] = {
    "visual": (0.3, ("video", "infographic", "diagram")),
    "auditory": (0.2, ("podcast", "audio", "lecture")),
    "kinesthetic": (0.3, ("hands-on", "project", "exercise")),
    "reading": (0.2, ("article", "book", "documentation")),
}

FORMAT_PREFERENCE: Dict[str, float] = {
    "video": 0.9,
    "course": 0.8,
    "tutorial": 0.7,
    "article": 0.6,
    "book": 0.7,
    "project": 0.8,
    "documentation": 0.5,
}

# (name, max minutes, weight), checked in order; longer content gets LONG_TAIL_WEIGHT.
DURATION_BANDS = (("short", 30, 0.4), ("medium", 120, 0.4), ("long", 480, 0.2))
LONG_TAIL_WEIGHT = 0.1


def duration_weight(minutes: int) -> float:
    """Weight of the first duration band whose ceiling the duration satisfies."""
    for _name, ceiling, weight in DURATION_BANDS:
        if minutes <= ceiling:
            return weight
    return LONG_TAIL_WEIGHT


def style_weight(item: ContentItem, learning_style: Optional[str]) -> float:
    """Style weight when any indicator of the user's style appears in title/description/format."""
    style = LEARNING_STYLES.get(learning_style or "visual")
    if style is None:
        return 0.0
    weight, indicators = style
    text = item_text(item.title, item.description, item.format)
    return weight if any(i in text for i in indicators) else 0.0


def score_personalization(item: ContentItem, profile: UserProfile) -> PersonalizationScore:
    """Score an item against learning style, format, duration and platform preferences."""
    breakdown = {
        "learning_style": style_weight(item, profile.learning_style) * 40,
        "format": FORMAT_PREFERENCE.get(item.format, 0.5) * 30,
        "duration": 0.0,
        "platform": 10.0 if item.platform in profile.preferred_platforms else 0.0,
    }
    minutes = parse_duration_minutes(item.duration)
    if minutes:
        breakdown["duration"] = duration_weight(minutes) * 20
    return PersonalizationScore(
        score=clamp_score(sum(breakdown.values())),
        breakdown=breakdown,
    )
