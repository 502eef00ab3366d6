"""Root and health endpoints."""

from fastapi import APIRouter

from curator import __version__

from ..state import get_state

router = APIRouter()


@router.get("/")
def root():
    return {
        "name": "Content Curator API",
        "version": __version__,
        "status": "ready",
        "endpoints": {
            "curate": ["/api/curate"],
            "config": ["/api/config", "/api/config/cache/clear"],
        },
    }


@router.get("/api/health")
def health():
    state = get_state()
    return {
        "status": "healthy",
        "cache_entries": len(state.cache),
    }
