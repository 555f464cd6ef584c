"""Route searching a property."""

from fastapi import APIRouter, Depends

from reactor_insight.application.use_cases.search import search_property as search_property_uc
from reactor_insight.domain.exceptions import ReactorInsightError
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.interfaces.api.dependencies import get_reactor_client
from reactor_insight.interfaces.api.routes_helpers import (
    search_outcome_to_response,
    to_http_exception,
)
from reactor_insight.interfaces.api.schemas import SearchRequest, SearchResponse

router = APIRouter(prefix="/reactor", tags=["search"])


@router.post("/search", response_model=SearchResponse)
async def search(
    payload: SearchRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> SearchResponse:
    """Search a property; matching rule components are reported as their rules."""

    try:
        outcome = await search_property_uc(
            client,
            mode=payload.mode,
            property_id=payload.property_id,
            value=payload.value,
            include_revision_history=payload.include_revision_history,
            include_deleted=payload.include_deleted_items,
        )
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return search_outcome_to_response(outcome)


__all__ = ["router"]
