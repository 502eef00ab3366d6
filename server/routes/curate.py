"""Curation endpoint."""

from fastapi import APIRouter

from curator import CurationRequest, CurationResult, curate

from ..models.curate import CurateRequest
from ..state import get_state

router = APIRouter()


@router.post("/curate", response_model=CurationResult)
def curate_content(request: CurateRequest):
    """Rank and select learning content for one user."""
    state = get_state()
    raw_items = request.sources if request.sources else request.items
    return curate(
        request.profile,
        request.history,
        raw_items,
        limit=request.limit,
        config=state.curation_config,
        request=CurationRequest(
            domain=request.domain,
            category=request.category,
            difficulty=request.difficulty,
            content_type=request.content_type,
            limit=request.limit,
        ),
        cache=state.cache,
    )
