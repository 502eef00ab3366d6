"""
Curation cache — optional short-circuit for repeated requests.

The pipeline only needs get/set; any store honoring CurationCache can be injected.
TTLCache is the in-process default: entries are never mutated, they simply expire.
"""

import hashlib
import threading
import time
from typing import Any, Callable, Dict, Optional, Protocol, Sequence, Tuple

from .models.content import ContentItem
from .models.curation import CurationRequest
from .models.history import LearningHistoryEntry
from .models.profile import UserProfile


class CurationCache(Protocol):
    """Minimal cache interface used by curate()."""

    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class TTLCache:
    """
    In-memory cache with a fixed time-to-live.

    Usage:
        cache = TTLCache(ttl_seconds=1800)
        cache.set("user_1.0_python_foundation", result)
        cache.get("user_1.0_python_foundation")  # None once expired
    """

    def __init__(
        self,
        ttl_seconds: float = 30 * 60,
        max_entries: int = 100,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> Optional[Any]:
        """Cached value, or None when missing or expired (expired entries are dropped)."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, value = entry
            if self._clock() - stored_at >= self.ttl_seconds:
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = (self._clock(), value)
            if len(self._entries) > self.max_entries:
                self._sweep()

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _sweep(self) -> None:
        """Drop expired entries, then the oldest ones while over max_entries. Caller holds the lock."""
        now = self._clock()
        expired = [k for k, (stored_at, _) in self._entries.items() if now - stored_at >= self.ttl_seconds]
        for key in expired:
            del self._entries[key]
        overflow = len(self._entries) - self.max_entries
        if overflow > 0:
            oldest = sorted(self._entries, key=lambda k: self._entries[k][0])[:overflow]
            for key in oldest:
                del self._entries[key]


def inputs_digest(
    profile: UserProfile,
    candidates: Sequence[ContentItem] = (),
    history: Sequence[LearningHistoryEntry] = (),
) -> str:
    """Short sha1 over the profile, the deduplicated candidates (in order) and the history snapshot."""
    digest = hashlib.sha1(profile.model_dump_json().encode("utf-8"))
    for item in candidates:
        digest.update(b"\x1eitem")
        digest.update(item.model_dump_json().encode("utf-8"))
    for entry in history:
        digest.update(b"\x1eentry")
        digest.update(entry.model_dump_json().encode("utf-8"))
    return digest.hexdigest()[:16]


def build_cache_key(
    profile: UserProfile,
    request: CurationRequest,
    candidates: Sequence[ContentItem] = (),
    history: Sequence[LearningHistoryEntry] = (),
) -> Optional[str]:
    """
    Key for one curation call; None for anonymous profiles, which are never cached.

    The request fields stay readable in the key; the items, history and profile body
    enter through inputs_digest so different inputs never share an entry.
    """
    if not profile.id:
        return None
    return "_".join(
        [
            profile.id,
            profile.version,
            request.domain,
            request.category,
            request.difficulty,
            request.content_type,
            str(request.limit),
            inputs_digest(profile, candidates, history),
        ]
    )
