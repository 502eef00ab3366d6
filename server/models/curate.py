"""Curation request Pydantic models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from curator import UserProfile


class CurateRequest(BaseModel):
    profile: UserProfile = Field(default_factory=UserProfile)
    # History entries stay loose; unreadable ones are skipped by the pipeline, not rejected here.
    history: List[Any] = []
    # Flat list already in source-priority order...
    items: List[Dict[str, Any]] = []
    # ...or per-source batches merged in the configured source priority.
    sources: Optional[Dict[str, List[Dict[str, Any]]]] = None
    limit: int = Field(20, ge=0, le=100)
    domain: str = "software_engineering"
    category: str = "foundation"
    difficulty: str = "beginner"
    content_type: str = "all"
