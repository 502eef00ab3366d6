"""
Behavioral summary of a learning history and the directives derived from it.

Both are recomputed per request from the history snapshot and never persisted.
"""

from typing import List, Literal

from pydantic import BaseModel, Field

Direction = Literal["decrease", "increase", "maintain"]


class PatternSummary(BaseModel):
    """Compact summary of a user's learning behavior."""

    completion_rate: float = 0.5
    average_time_spent: float = 0.0
    difficulty_progression: Literal["struggling", "progressive", "stable"] = "stable"
    engagement_level: Literal["high", "medium", "low"] = "medium"
    preferred_formats: List[str] = Field(default_factory=list)
    struggling_areas: List[str] = Field(default_factory=list)
    strong_areas: List[str] = Field(default_factory=list)
    entry_count: int = 0


class DifficultyAdjustment(BaseModel):
    direction: Direction = "maintain"
    amount: float = 0.0
    reason: str = "Appropriate difficulty level"


class FormatAdjustment(BaseModel):
    boost: List[str] = Field(default_factory=list)
    penalty: List[str] = Field(default_factory=list)
    reason: str = ""


class PacingAdjustment(BaseModel):
    direction: Direction = "maintain"
    reason: str = "Appropriate pacing"


class FocusAreas(BaseModel):
    strengthen: List[str] = Field(default_factory=list)
    leverage: List[str] = Field(default_factory=list)
    explore: List[str] = Field(default_factory=list)


class AdaptationDirective(BaseModel):
    """Score-adjustment rules derived from a user's historical behavior."""

    difficulty: DifficultyAdjustment = Field(default_factory=DifficultyAdjustment)
    formats: FormatAdjustment = Field(default_factory=FormatAdjustment)
    pacing: PacingAdjustment = Field(default_factory=PacingAdjustment)
    focus_areas: FocusAreas = Field(default_factory=FocusAreas)
    advice: List[str] = Field(default_factory=list)
    confidence: float = 0.0
