"""Curation config endpoints."""

from fastapi import APIRouter

from ..state import get_state

router = APIRouter()


@router.get("")
def get_curation_config():
    """Active curation config (weights, multipliers, caps)."""
    state = get_state()
    return {
        "source": str(state.config.curation_config_path) if state.config.curation_config_path else "defaults",
        "config": state.curation_config.model_dump(),
    }


@router.post("/cache/clear")
def clear_cache():
    """Drop all cached curation results."""
    state = get_state()
    cleared = len(state.cache)
    state.cache.clear()
    return {"success": True, "cleared": cleared}
