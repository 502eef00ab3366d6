"""Pydantic request/response models for the API."""

from .curate import CurateRequest

__all__ = [
    "CurateRequest",
]
