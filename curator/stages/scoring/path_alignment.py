"""
Path-Alignment Scorer: fit of one item to the user's active roadmaps and goals.
"""

from ...models.content import ContentItem
from ...models.profile import UserProfile
from ...models.scoring import PathAlignmentScore
from ...utils.scores import clamp_score
from ...utils.text import count_matches


def is_progression_step(current_level: int, content_level: int) -> bool:
    """Same level or one step up is a valid next step on the path."""
    return content_level <= current_level + 1


def _roadmap_skill_matches(item: ContentItem, skills) -> int:
    title = item.title.lower()
    description = item.description.lower()
    tags = [t.lower() for t in item.tags]
    matches = 0
    for skill in skills:
        needle = skill.lower()
        if needle in title or needle in description or any(needle in t for t in tags):
            matches += 1
    return matches


def score_path_alignment(item: ContentItem, profile: UserProfile) -> PathAlignmentScore:
    """Roadmap skill coverage (50), goal coverage (30), and progression fit (20)."""
    skills = profile.active_path_skills
    breakdown = {"roadmap_skills": 0.0, "goals": 0.0, "progression": 0.0}
    if skills:
        breakdown["roadmap_skills"] = _roadmap_skill_matches(item, skills) / len(skills) * 50
    goal_matches = count_matches(profile.goals, item.title, item.description)
    breakdown["goals"] = goal_matches / max(len(profile.goals), 1) * 30
    if is_progression_step(profile.progress_level, item.level):
        breakdown["progression"] = 20.0
    return PathAlignmentScore(
        score=clamp_score(sum(breakdown.values())),
        breakdown=breakdown,
    )
