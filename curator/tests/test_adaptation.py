"""
Pattern Analyzer and Adaptation Resolver Tests

History snapshots → PatternSummary → AdaptationDirective.

Run:
----
    pytest curator/tests/test_adaptation.py -v
"""

import pytest

from curator import UserProfile, analyze_patterns, resolve_adaptation
from curator.models import PatternSummary
from curator.stages.adaptation.patterns import classify_progression
from curator.stages.adaptation.resolver import (
    resolve_difficulty,
    resolve_focus_areas,
    resolve_pacing,
)

from factories import make_history


class TestAnalyzePatterns:
    def test_empty_history_is_neutral(self):
        summary = analyze_patterns([])
        assert summary.completion_rate == 0.5
        assert summary.average_time_spent == 0.0
        assert summary.difficulty_progression == "stable"
        assert summary.engagement_level == "medium"
        assert summary.preferred_formats == []
        assert summary.entry_count == 0

    def test_completion_rate_and_mean_time(self):
        history = make_history(["completed"] * 8 + ["incomplete"] * 2, time_spent=45)
        summary = analyze_patterns(history)
        assert summary.completion_rate == pytest.approx(0.8)
        assert summary.average_time_spent == pytest.approx(45.0)
        assert summary.engagement_level == "high"

    def test_other_statuses_count_against_completion_only(self):
        history = make_history(["completed", "in_progress", "in_progress", "incomplete"])
        summary = analyze_patterns(history)
        assert summary.completion_rate == pytest.approx(0.25)
        assert summary.difficulty_progression == "stable"
        assert summary.engagement_level == "low"

    def test_preferred_formats_top_three_by_frequency(self):
        history = [
            *make_history(["completed"] * 3, contentType="video"),
            *make_history(["completed"] * 2, contentType="project"),
            *make_history(["completed"], contentType="book"),
            *make_history(["completed"], contentType="article"),
        ]
        assert analyze_patterns(history).preferred_formats == ["video", "project", "book"]

    def test_struggling_and_strong_areas(self):
        history = [
            *make_history(["incomplete"], skills=["statistics", "sql"]),
            *make_history(["incomplete"], skills=["statistics"]),
            *make_history(["completed"], skills=["python"]),
        ]
        summary = analyze_patterns(history)
        assert summary.struggling_areas == ["statistics", "sql"]
        assert summary.strong_areas == ["python"]


class TestProgression:
    def test_more_than_half_incomplete_is_struggling(self):
        history = make_history(["incomplete", "incomplete", "completed"], ["beginner", "intermediate", "advanced"])
        assert classify_progression(history) == "struggling"

    def test_exactly_half_incomplete_is_not_struggling(self):
        history = make_history(["incomplete", "completed"], ["beginner", "intermediate"])
        assert classify_progression(history) == "progressive"

    def test_non_decreasing_difficulty_is_progressive(self):
        history = make_history(["completed"] * 3, ["beginner", "beginner", "advanced"])
        assert classify_progression(history) == "progressive"

    def test_step_down_is_stable(self):
        history = make_history(["completed"] * 3, ["intermediate", "beginner", "advanced"])
        assert classify_progression(history) == "stable"

    def test_single_declared_difficulty_is_stable(self):
        history = make_history(["completed"] * 3, ["beginner", None, None])
        assert classify_progression(history) == "stable"


class TestResolveDifficulty:
    def test_low_completion_decreases(self):
        adjustment = resolve_difficulty(PatternSummary(completion_rate=0.2))
        assert adjustment.direction == "decrease"
        assert adjustment.amount == pytest.approx(0.2)
        assert adjustment.reason == "Low completion rate"

    def test_eight_of_ten_progressive_increases(self):
        history = make_history(
            ["completed"] * 8 + ["incomplete"] * 2,
            ["beginner"] * 5 + ["intermediate"] * 5,
        )
        adjustment = resolve_difficulty(analyze_patterns(history))
        assert adjustment.direction == "increase"
        assert adjustment.amount == pytest.approx(0.15)

    def test_struggling_decreases(self):
        summary = PatternSummary(completion_rate=0.4, difficulty_progression="struggling")
        adjustment = resolve_difficulty(summary)
        assert adjustment.direction == "decrease"
        assert adjustment.amount == pytest.approx(0.1)

    def test_low_completion_rule_wins_over_struggling(self):
        summary = PatternSummary(completion_rate=0.1, difficulty_progression="struggling")
        assert resolve_difficulty(summary).amount == pytest.approx(0.2)

    def test_otherwise_maintain(self):
        adjustment = resolve_difficulty(PatternSummary(completion_rate=0.9))
        assert adjustment.direction == "maintain"
        assert adjustment.amount == 0.0


class TestResolveAdaptation:
    def test_format_boost_and_penalty(self):
        summary = PatternSummary(preferred_formats=["video", "project", "book"])
        directive = resolve_adaptation(summary)
        assert directive.formats.boost == ["video", "project"]
        assert directive.formats.penalty == ["article", "documentation"]

    def test_empty_history_penalizes_low_engagement_formats_only(self):
        directive = resolve_adaptation(analyze_patterns([]))
        assert directive.difficulty.direction == "maintain"
        assert directive.formats.boost == []
        assert directive.formats.penalty == ["article", "documentation"]

    @pytest.mark.parametrize(
        "minutes,rate,direction",
        [(20, 0.9, "increase"), (150, 0.3, "decrease"), (60, 0.6, "maintain"), (20, 0.7, "maintain")],
    )
    def test_pacing(self, minutes, rate, direction):
        summary = PatternSummary(average_time_spent=minutes, completion_rate=rate)
        assert resolve_pacing(summary).direction == direction

    def test_focus_areas_explore_unmet_goals(self):
        summary = PatternSummary(
            struggling_areas=["statistics", "sql", "excel", "r"],
            strong_areas=["python", "visualization", "pandas"],
        )
        focus = resolve_focus_areas(summary, ["python", "machine learning", "cloud", "devops"])
        assert focus.strengthen == ["statistics", "sql", "excel"]
        assert focus.leverage == ["python", "visualization"]
        assert focus.explore == ["machine learning", "cloud"]

    def test_advice_lines(self):
        summary = PatternSummary(
            completion_rate=0.2, engagement_level="low", struggling_areas=["sql"], strong_areas=["python"]
        )
        directive = resolve_adaptation(summary, UserProfile())
        assert directive.advice == [
            "Consider breaking down complex topics into smaller, manageable chunks",
            "Try different content formats like videos or hands-on projects",
            "Focus on strengthening: sql",
            "Leverage your strengths in: python",
        ]

    @pytest.mark.parametrize("entries,confidence", [(0, 0.0), (3, 0.43), (7, 1.0), (12, 1.0)])
    def test_confidence_grows_with_history(self, entries, confidence):
        summary = analyze_patterns(make_history(["completed"] * entries))
        assert resolve_adaptation(summary).confidence == confidence
