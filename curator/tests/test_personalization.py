"""
Personalization and Path-Alignment Scorer Tests

Run:
----
    pytest curator/tests/test_personalization.py -v
"""

import pytest

from curator import UserProfile
from curator.stages.scoring.path_alignment import is_progression_step, score_path_alignment
from curator.stages.scoring.personalization import duration_weight, score_personalization
from curator.utils import parse_duration_minutes

from factories import make_item


class TestDurationParsing:
    @pytest.mark.parametrize(
        "text,minutes",
        [("45 minutes", 45), ("2 hours", 120), ("3 days", 4320), (90, 90), ("self-paced", None), (None, None)],
    )
    def test_parse(self, text, minutes):
        assert parse_duration_minutes(text) == minutes

    @pytest.mark.parametrize(
        "minutes,weight",
        [(10, 0.4), (30, 0.4), (31, 0.4), (120, 0.4), (121, 0.2), (480, 0.2), (481, 0.1)],
    )
    def test_band_weights(self, minutes, weight):
        assert duration_weight(minutes) == weight


class TestPersonalization:
    def test_visual_video_on_preferred_platform(self, profile):
        item = make_item(format="video", platform="Coursera", duration="45 minutes")
        result = score_personalization(item, profile)
        assert result.breakdown == pytest.approx(
            {"learning_style": 12.0, "format": 27.0, "duration": 8.0, "platform": 10.0}
        )
        assert result.score == pytest.approx(57.0)

    @pytest.mark.parametrize("duration,points", [("2 hours", 8.0), ("5 hours", 4.0), ("3 days", 2.0)])
    def test_duration_points(self, profile, duration, points):
        item = make_item(format="course", duration=duration)
        assert score_personalization(item, profile).breakdown["duration"] == pytest.approx(points)

    def test_kinesthetic_hands_on_project(self):
        profile = UserProfile(learning_style="kinesthetic")
        item = make_item(title="Hands-on data project", format="project")
        assert score_personalization(item, profile).score == pytest.approx(36.0)

    def test_style_indicator_must_appear(self):
        profile = UserProfile(learning_style="auditory")
        item = make_item(title="Reading list", format="book")
        assert score_personalization(item, profile).breakdown["learning_style"] == 0.0

    def test_unknown_format_is_neutral(self):
        item = make_item(format="podcast")
        assert score_personalization(item, UserProfile()).breakdown["format"] == pytest.approx(15.0)

    def test_unparseable_duration_contributes_nothing(self, profile):
        item = make_item(duration="self-paced")
        assert score_personalization(item, profile).breakdown["duration"] == 0.0


class TestPathAlignment:
    def test_fully_aligned_item(self, profile):
        item = make_item(
            title="Python and SQL for the aspiring data analyst",
            difficulty="beginner",
        )
        result = score_path_alignment(item, profile)
        assert result.breakdown == pytest.approx(
            {"roadmap_skills": 50.0, "goals": 30.0, "progression": 20.0}
        )
        assert result.score == 100

    def test_tags_count_as_skill_coverage(self, profile):
        item = make_item(title="Joins explained", tags=["SQL"], difficulty="advanced")
        result = score_path_alignment(item, profile)
        assert result.breakdown["roadmap_skills"] == pytest.approx(25.0)
        assert result.breakdown["progression"] == 0.0

    def test_no_roadmaps_means_no_skill_component(self):
        profile = UserProfile(goals=["web developer"])
        item = make_item(title="python", difficulty="intermediate")
        result = score_path_alignment(item, profile)
        assert result.breakdown["roadmap_skills"] == 0.0
        assert result.breakdown["progression"] == 20.0

    def test_path_skills_join_roadmap_skills(self):
        profile = UserProfile(path_skills=["docker"])
        item = make_item(title="Docker in practice")
        assert score_path_alignment(item, profile).breakdown["roadmap_skills"] == pytest.approx(50.0)

    def test_current_level_overrides_experience_for_progression(self):
        profile = UserProfile(experience_level="beginner", current_level="intermediate")
        item = make_item(difficulty="advanced")
        assert score_path_alignment(item, profile).breakdown["progression"] == 20.0

    @pytest.mark.parametrize(
        "current,content,expected",
        [(1, 1, True), (1, 2, True), (1, 3, False), (3, 1, True), (4, 4, True)],
    )
    def test_progression_step(self, current, content, expected):
        assert is_progression_step(current, content) is expected
