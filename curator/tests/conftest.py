"""Shared fixtures for curator tests: a pinned clock, a profile, items and histories."""

from typing import Dict, List

import pytest

from curator import UserProfile

from factories import REFERENCE_TIME, days_ago


@pytest.fixture
def reference_time():
    return REFERENCE_TIME


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile.model_validate(
        {
            "id": "user-42",
            "interests": ["python", "data"],
            "skills": [{"name": "sql", "level": "intermediate"}, "pandas"],
            "goals": ["data analyst"],
            "selected_domains": ["data science"],
            "experience_level": "beginner",
            "learning_style": "visual",
            "preferred_platforms": ["Coursera"],
            "selected_roadmaps": [{"id": "da", "title": "Data Analyst", "skills": ["python", "sql"]}],
        }
    )


@pytest.fixture
def catalog() -> List[Dict]:
    """A mixed batch as fetch adapters would return it (loose field names included)."""
    return [
        {
            "title": "Python for Data Analysis - Complete Course",
            "description": "Learn python and pandas to become a data analyst. Recommended by thousands.",
            "url": "https://www.coursera.org/learn/python-data",
            "platform": "Coursera",
            "type": "course",
            "difficulty": "beginner",
            "cost": "free",
            "rating": 4.8,
            "reviewCount": 1200,
            "duration": "6 hours",
            "skills": ["Python", "pandas"],
            "instructor": "Jane Doe",
            "publishedAt": days_ago(20),
        },
        {
            "title": "SQL Crash Course video",
            "description": "Quick video walkthrough of SQL joins.",
            "url": "https://www.youtube.com/watch?v=sql",
            "platform": "YouTube",
            "type": "video",
            "difficulty": "beginner",
            "duration": "25 min",
            "viewCount": 250000,
            "skills": ["SQL"],
        },
        {
            "title": "Advanced Distributed Systems",
            "description": "Consensus, replication and partitioning.",
            "url": "https://www.edx.org/distributed",
            "platform": "edX",
            "type": "course",
            "difficulty": "advanced",
            "cost": "paid",
            "rating": 4.2,
        },
        {
            "title": "Pandas documentation",
            "description": "Official reference for pandas.",
            "url": "https://pandas.pydata.org/docs",
            "platform": "pandas",
            "type": "documentation",
            "cost": "free",
        },
        {
            "title": "Build a data dashboard project",
            "description": "Hands-on project with python and SQL.",
            "url": "https://github.com/example/dashboard",
            "platform": "GitHub",
            "type": "project",
            "difficulty": "intermediate",
            "skills": ["python", "sql"],
        },
    ]
