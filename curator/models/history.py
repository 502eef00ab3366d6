"""
Learning history model. One past interaction of the user with a piece of content.

Entries are append-only on the collaborator side; the pipeline reads a snapshot per request,
so the model is frozen.
"""

import logging
import math
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)


class LearningHistoryEntry(BaseModel):
    """
    A single completed or abandoned piece of content.

    time_spent: minutes spent on the item.
    content_format: format of the consumed item (video, course, ...).
    skills: skill tags of the consumed item, used for strong/struggling areas.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    status: str = "incomplete"
    time_spent: float = Field(0.0, validation_alias=AliasChoices("time_spent", "timeSpent"))
    content_format: Optional[str] = Field(
        None, validation_alias=AliasChoices("content_format", "contentType", "format", "type")
    )
    difficulty: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    occurred_at: Optional[str] = Field(
        None, validation_alias=AliasChoices("occurred_at", "timestamp")
    )

    @field_validator("status", mode="before")
    @classmethod
    def _status(cls, value: Any) -> str:
        text = str(value).strip().lower() if value is not None else ""
        return text or "incomplete"

    @field_validator("content_format", "difficulty", mode="before")
    @classmethod
    def _lower(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, bool):
            return None
        text = str(value).strip().lower()
        return text or None

    @field_validator("time_spent", mode="before")
    @classmethod
    def _minutes(cls, value: Any) -> float:
        try:
            minutes = float(value)
        except (TypeError, ValueError):
            return 0.0
        return minutes if math.isfinite(minutes) and minutes > 0 else 0.0

    @field_validator("occurred_at", mode="before")
    @classmethod
    def _timestamp_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        text = str(value).strip()
        return text or None

    @field_validator("skills", mode="before")
    @classmethod
    def _skill_list(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set)):
            return []
        return [str(s).strip() for s in value if s is not None and str(s).strip()]

    @property
    def completed(self) -> bool:
        return self.status == "completed"

    @property
    def incomplete(self) -> bool:
        return self.status == "incomplete"


def ensure_history(
    items: List[Union[Dict[str, Any], "LearningHistoryEntry"]],
) -> List["LearningHistoryEntry"]:
    """
    Convert list of dicts or entries to LearningHistoryEntry models for the pipeline.

    Entries that cannot be read at all are skipped with a warning.
    """
    typed: List[LearningHistoryEntry] = []
    for index, raw in enumerate(items or []):
        if isinstance(raw, LearningHistoryEntry):
            typed.append(raw)
            continue
        try:
            typed.append(LearningHistoryEntry.model_validate(raw))
        except ValidationError as e:
            logger.warning(
                "[patterns] ENTRY_SKIPPED_INVALID index=%s errors=%s",
                index, e.error_count(),
            )
    return typed
