"""
User profile model: the subject of personalization.

Built from API dicts via UserProfile.model_validate(d). Absent lists are empty lists, so
every scorer can treat them as length-zero.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ..utils.levels import user_level

LEARNING_STYLES = ("visual", "auditory", "kinesthetic", "reading")


class Skill(BaseModel):
    """A skill the user already has, with a self-reported level."""

    name: str
    level: str = "beginner"


class Roadmap(BaseModel):
    """A learning roadmap the user selected; only its skills matter for ranking."""

    model_config = ConfigDict(extra="allow")

    id: str = ""
    title: str = ""
    skills: List[str] = Field(default_factory=list)

    @field_validator("skills", mode="before")
    @classmethod
    def _skill_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, (list, tuple, set)):
            return value
        return [str(s).strip() for s in value if s is not None and str(s).strip()]


class UserProfile(BaseModel):
    """Stated preferences, skills and goals of the consuming user."""

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    version: str = "1.0"
    interests: List[str] = Field(default_factory=list)
    skills: List[Skill] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    selected_domains: List[str] = Field(default_factory=list)
    experience_level: str = "beginner"
    # Level reached on the active learning path; experience_level when unset.
    current_level: Optional[str] = None
    learning_style: str = "visual"
    preferred_formats: List[str] = Field(default_factory=list)
    preferred_platforms: List[str] = Field(default_factory=list)
    preferred_difficulty: Optional[str] = None
    selected_roadmaps: List[Roadmap] = Field(default_factory=list)
    path_skills: List[str] = Field(default_factory=list)

    @field_validator(
        "interests", "goals", "selected_domains", "preferred_formats",
        "preferred_platforms", "path_skills",
        mode="before",
    )
    @classmethod
    def _text_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set)):
            return value
        return [str(v).strip() for v in value if v is not None and str(v).strip()]

    @field_validator("selected_roadmaps", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("id", "current_level", "preferred_difficulty", mode="before")
    @classmethod
    def _optional_label(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("skills", mode="before")
    @classmethod
    def _skill_names(cls, value: Any) -> List[Union[Dict, Skill]]:
        if value is None:
            return []
        return [{"name": s} if isinstance(s, str) else s for s in value if s is not None]

    @field_validator("experience_level", "learning_style", "version", mode="before")
    @classmethod
    def _label_or_default(cls, value: Any, info: ValidationInfo) -> str:
        default = cls.model_fields[info.field_name].default
        text = str(value).strip() if value is not None else ""
        if not text:
            return default
        return text if info.field_name == "version" else text.lower()

    @property
    def skill_names(self) -> List[str]:
        return [s.name for s in self.skills]

    @property
    def level(self) -> int:
        """Experience level on the four-point ordinal scale."""
        return user_level(self.experience_level)

    @property
    def progress_level(self) -> int:
        """Current learning-path level, falling back to the experience level."""
        return user_level(self.current_level or self.experience_level)

    @property
    def active_path_skills(self) -> List[str]:
        """Skills of all selected roadmaps plus explicit path skills, first-seen order."""
        seen = set()
        flattened: List[str] = []
        for skill in [s for r in self.selected_roadmaps for s in r.skills] + self.path_skills:
            key = skill.lower()
            if skill and key not in seen:
                seen.add(key)
                flattened.append(skill)
        return flattened
