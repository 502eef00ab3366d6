"""
Content item model — typed representation of one recommendable learning resource.

Fetch adapters (search, video catalog, book catalog, learning platforms) emit loose dicts;
ContentItem.model_validate(d) normalizes them once so the scorers never re-apply defaults.
Malformed optional fields are coerced to their unknown value instead of failing validation.
"""

import hashlib
import logging
import math
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..utils.levels import content_level

logger = logging.getLogger(__name__)

FORMATS = ("video", "course", "book", "article", "project", "research", "documentation", "tutorial")
COST_TIERS = ("free", "paid", "unknown")


def normalize_url(url: str) -> str:
    """Canonical form of a URL for identity and dedup (trimmed, no trailing slash)."""
    return (url or "").strip().rstrip("/")


def make_item_id(url: str, title: str = "", platform: str = "") -> str:
    """Stable identity derived from the URL (falls back to title + platform)."""
    basis = normalize_url(url) or f"{(title or '').strip().lower()}|{(platform or '').strip().lower()}"
    return hashlib.sha1(basis.encode("utf-8")).hexdigest()[:16]


class ContentItem(BaseModel):
    """
    One candidate piece of learning content from any source.

    Only title, url and platform are expected from adapters; every other field is optional
    and scored through the documented defaults when absent.
    """

    model_config = ConfigDict(extra="allow")

    id: str = ""
    url: str = Field("", validation_alias=AliasChoices("url", "link"))
    title: str = ""
    description: str = ""
    platform: str = Field("unknown", validation_alias=AliasChoices("platform", "provider"))
    source: str = ""
    format: str = Field(
        "article", validation_alias=AliasChoices("format", "type", "content_type", "contentType")
    )
    difficulty: Optional[str] = None
    cost: str = "unknown"
    rating: Optional[float] = None
    review_count: Optional[int] = Field(
        None, validation_alias=AliasChoices("review_count", "reviewCount")
    )
    view_count: Optional[int] = Field(
        None, validation_alias=AliasChoices("view_count", "viewCount")
    )
    duration: Optional[str] = None
    tags: List[str] = Field(default_factory=list, validation_alias=AliasChoices("tags", "skills"))
    published_at: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("published_at", "publishedAt", "publishedDate", "published_date"),
    )
    author: Optional[str] = Field(None, validation_alias=AliasChoices("author", "instructor"))
    language: Optional[str] = None

    @field_validator("id", "url", "title", "description", "source", mode="before")
    @classmethod
    def _text_or_empty(cls, value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("platform", mode="before")
    @classmethod
    def _platform_or_unknown(cls, value: Any) -> str:
        text = str(value).strip() if value is not None else ""
        return text or "unknown"

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, value: Any) -> str:
        text = str(value).strip().lower() if value is not None else ""
        return text or "article"

    @field_validator("difficulty", "language", mode="before")
    @classmethod
    def _lower_or_none(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip().lower()
        return text or None

    @field_validator("cost", mode="before")
    @classmethod
    def _normalize_cost(cls, value: Any) -> str:
        if isinstance(value, bool) or value is None:
            return "unknown"
        if isinstance(value, (int, float)):
            if value == 0:
                return "free"
            return "paid" if value > 0 else "unknown"
        text = str(value).strip().lower()
        if text in ("free", "0", "0.0"):
            return "free"
        if text == "paid":
            return "paid"
        return "unknown"

    @field_validator("rating", mode="before")
    @classmethod
    def _rating_in_range(cls, value: Any) -> Optional[float]:
        if value is None or isinstance(value, bool):
            return None
        try:
            rating = float(value)
        except (TypeError, ValueError):
            return None
        if math.isnan(rating) or rating < 0 or rating > 5:
            return None
        return rating

    @field_validator("review_count", "view_count", mode="before")
    @classmethod
    def _non_negative_count(cls, value: Any) -> Optional[int]:
        if value is None or isinstance(value, bool):
            return None
        try:
            count = int(str(value).replace(",", "").strip()) if isinstance(value, str) else int(value)
        except (TypeError, ValueError, OverflowError):
            return None
        return count if count >= 0 else None

    @field_validator("duration", mode="before")
    @classmethod
    def _duration_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, bool):
            return None
        text = str(value).strip()
        return text or None

    @field_validator("tags", mode="before")
    @classmethod
    def _tag_list(cls, value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set)):
            return []
        return [str(tag).strip() for tag in value if tag is not None and str(tag).strip()]

    @field_validator("published_at", "author", mode="before")
    @classmethod
    def _optional_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        text = str(value).strip()
        return text or None

    @model_validator(mode="after")
    def _derive_identity(self):
        if not self.id:
            self.id = make_item_id(self.url, self.title, self.platform)
        return self

    @property
    def dedup_key(self) -> str:
        """Key used for duplicate detection: the normalized URL, else the identity."""
        return normalize_url(self.url) or self.id

    @property
    def level(self) -> int:
        """Difficulty on the four-point ordinal scale (unknown → intermediate)."""
        return content_level(self.difficulty)

    @property
    def difficulty_label(self) -> str:
        """Declared difficulty, or "intermediate" when the adapter did not supply one."""
        return self.difficulty or "intermediate"


def ensure_items(items: List[Union[Dict[str, Any], "ContentItem"]]) -> List["ContentItem"]:
    """
    Convert list of dicts or ContentItems to ContentItem models for the pipeline.

    Entries that cannot be read as an item at all are skipped with a warning.
    """
    typed: List[ContentItem] = []
    for index, raw in enumerate(items or []):
        if isinstance(raw, ContentItem):
            typed.append(raw)
            continue
        try:
            typed.append(ContentItem.model_validate(raw))
        except ValidationError as e:
            logger.warning(
                "[candidate_pool] ITEM_SKIPPED_INVALID index=%s errors=%s",
                index, e.error_count(),
            )
    return typed
