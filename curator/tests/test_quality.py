"""
Quality Scorer Tests

Each of the seven sub-scores against hand-computed values, the weighted blend,
grade thresholds, bounds, and rating monotonicity.

Run:
----
    pytest curator/tests/test_quality.py -v
"""

import pytest

from curator import UserProfile
from curator.models import quality_grade
from curator.stages.scoring.quality import (
    accessibility_score,
    completeness_score,
    credibility_score,
    difficulty_fit_score,
    engagement_score,
    freshness_score,
    relevance_score,
    score_quality,
)

from factories import REFERENCE_TIME, days_ago, make_item


class TestRelevance:
    """Interest/skill/goal/domain substring matching, weighted 40/30/20/10."""

    def test_empty_profile_scores_zero(self):
        item = make_item(title="Python basics", description="Intro to python")
        assert relevance_score(item, UserProfile()) == 0

    def test_full_match_caps_at_100(self, profile):
        item = make_item(
            title="Python and data with SQL and pandas",
            description="Become a data analyst in data science",
        )
        assert relevance_score(item, profile) == 100

    def test_partial_interest_match(self):
        profile = UserProfile(interests=["python", "rust"])
        item = make_item(title="PYTHON tricks")
        assert relevance_score(item, profile) == pytest.approx(20.0)


class TestCredibility:
    def test_unknown_platform_plain_article(self):
        item = make_item(platform="Some Blog", format="article")
        assert credibility_score(item) == pytest.approx(20 + 18)

    def test_trusted_course_with_author_rating_reviews_is_capped(self):
        item = make_item(
            platform="Coursera", format="course", author="Jane", rating=4.5, review_count=200
        )
        assert credibility_score(item) == 100

    def test_review_bonus_needs_more_than_ten_reviews(self):
        few = make_item(platform="Udemy", format="video", review_count=10)
        many = make_item(platform="Udemy", format="video", review_count=50)
        assert credibility_score(many) - credibility_score(few) == pytest.approx(5.0)


class TestFreshness:
    @pytest.mark.parametrize(
        "age_days,expected",
        [(10, 100), (60, 90), (200, 70), (500, 50), (1000, 30)],
    )
    def test_age_bands(self, age_days, expected):
        item = make_item(published_at=days_ago(age_days))
        assert freshness_score(item, REFERENCE_TIME) == expected

    def test_missing_or_unparseable_date_is_neutral(self):
        assert freshness_score(make_item(), REFERENCE_TIME) == 50
        assert freshness_score(make_item(published_at="last spring"), REFERENCE_TIME) == 50

    def test_recency_markers_add_twenty(self):
        updated = make_item(description="The latest edition of the guide")
        this_year = make_item(title="Guide 2026", published_at=days_ago(400))
        assert freshness_score(updated, REFERENCE_TIME) == 70
        assert freshness_score(this_year, REFERENCE_TIME) == 70

    def test_marker_bonus_is_capped(self):
        item = make_item(description="updated weekly", published_at=days_ago(5))
        assert freshness_score(item, REFERENCE_TIME) == 100


class TestCompleteness:
    def test_title_only(self):
        item = make_item(title="Short", url="")
        assert completeness_score(item) == pytest.approx(10.0)

    def test_everything_present(self):
        item = make_item(
            title="A sufficiently long descriptive title",
            description="x" * 600,
            duration="2 hours",
            difficulty="beginner",
            tags=["python"],
        )
        assert completeness_score(item) == 100


class TestEngagement:
    def test_rating_moves_score(self):
        assert engagement_score(make_item(rating=5)) == 100
        assert engagement_score(make_item(rating=1)) == pytest.approx(20.0)

    def test_view_bands(self):
        assert engagement_score(make_item(view_count=20000)) == 70
        assert engagement_score(make_item(view_count=5000)) == 60
        assert engagement_score(make_item(view_count=500)) == 50

    def test_social_proof_and_clamp(self):
        item = make_item(title="Popular course", rating=5, view_count=50000)
        assert engagement_score(item) == 100


class TestDifficultyFit:
    @pytest.mark.parametrize(
        "user_level,difficulty,expected",
        [
            ("beginner", "beginner", 100),
            ("beginner", "intermediate", 80),
            ("beginner", "advanced", 60),
            ("beginner", "expert", 40),
            ("expert", "beginner", 40),
            ("beginner", None, 80),
        ],
    )
    def test_ordinal_distance_table(self, user_level, difficulty, expected):
        profile = UserProfile(experience_level=user_level)
        assert difficulty_fit_score(make_item(difficulty=difficulty), profile) == expected


class TestAccessibility:
    def test_free_english_accessible_platform(self):
        assert accessibility_score(make_item(cost="free", platform="YouTube")) == 100

    def test_paid_foreign_language(self):
        assert accessibility_score(make_item(cost="paid", language="fr")) == 60

    def test_unknown_cost_unspecified_language(self):
        assert accessibility_score(make_item()) == 60


class TestScoreQuality:
    def test_score_is_rounded_weighted_blend(self, profile):
        item = make_item(
            title="Python for data analysts",
            description="Hands-on python with SQL",
            platform="Coursera",
            format="course",
            rating=4.0,
            difficulty="beginner",
            published_at=days_ago(45),
        )
        analysis = score_quality(item, profile, now=REFERENCE_TIME)
        weights = {
            "relevance": 0.25, "credibility": 0.20, "freshness": 0.15, "completeness": 0.15,
            "engagement": 0.10, "difficulty": 0.10, "accessibility": 0.05,
        }
        expected = sum(analysis.breakdown[k] * w for k, w in weights.items())
        assert abs(analysis.score - expected) <= 0.5
        assert analysis.grade == quality_grade(analysis.score)
        assert set(analysis.breakdown) == set(weights)

    def test_all_scores_within_bounds(self, profile):
        items = [
            make_item(),
            make_item(title="", url="", description=""),
            make_item(
                title="Popular trending 2026 python data course",
                description="best recommended latest " * 40,
                platform="MIT OpenCourseWare",
                format="course",
                rating=5,
                review_count=10**6,
                view_count=10**7,
                author="Prof",
                cost="free",
                duration="3 hours",
                difficulty="beginner",
                tags=["python"],
                published_at=days_ago(1),
            ),
        ]
        for item in items:
            analysis = score_quality(item, profile, now=REFERENCE_TIME)
            assert 0 <= analysis.score <= 100
            assert all(0 <= v <= 100 for v in analysis.breakdown.values())

    def test_higher_rating_never_lowers_quality(self, profile):
        low = make_item(title="Python course", rating=3.0, platform="Udemy")
        high = make_item(title="Python course", rating=5.0, platform="Udemy")
        assert (
            score_quality(high, profile, now=REFERENCE_TIME).score
            >= score_quality(low, profile, now=REFERENCE_TIME).score
        )

    def test_weak_factors_produce_hints(self):
        analysis = score_quality(
            make_item(title="x", difficulty="expert"), UserProfile(), now=REFERENCE_TIME
        )
        assert "Content may not be highly relevant to your interests" in analysis.hints
        assert "Difficulty level may not match your current skills" in analysis.hints


class TestGrades:
    @pytest.mark.parametrize(
        "score,grade",
        [(95, "A+"), (90, "A+"), (89, "A"), (75, "B+"), (60, "B"), (55, "C+"), (40, "C"), (39, "D")],
    )
    def test_thresholds(self, score, grade):
        assert quality_grade(score) == grade
