"""Routes listing the per-property collections."""

from fastapi import APIRouter, Depends

from reactor_insight.application.use_cases.data_elements import (
    list_data_elements as list_data_elements_uc,
)
from reactor_insight.application.use_cases.libraries import (
    list_publish_history as list_publish_history_uc,
)
from reactor_insight.application.use_cases.property_resources import (
    list_callbacks as list_callbacks_uc,
    list_environments as list_environments_uc,
    list_extensions as list_extensions_uc,
)
from reactor_insight.domain.exceptions import ReactorInsightError
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.interfaces.api.dependencies import get_reactor_client
from reactor_insight.interfaces.api.routes_helpers import (
    resources_to_read_models,
    to_http_exception,
)
from reactor_insight.interfaces.api.schemas import (
    DataElementListRequest,
    LibraryHistoryRequest,
    PropertyRequest,
    ResourceItemRead,
)

router = APIRouter(prefix="/reactor", tags=["properties"])


@router.post("/data-elements", response_model=list[ResourceItemRead])
async def list_data_elements(
    payload: DataElementListRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    """Return the data elements of a property, sorted by name."""

    try:
        items = await list_data_elements_uc(
            client,
            property_id=payload.property_id,
            include_deleted=payload.include_deleted,
        )
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(items)


@router.post("/extensions", response_model=list[ResourceItemRead])
async def list_extensions(
    payload: PropertyRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    try:
        items = await list_extensions_uc(client, property_id=payload.property_id)
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(items)


@router.post("/environments", response_model=list[ResourceItemRead])
async def list_environments(
    payload: PropertyRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    try:
        items = await list_environments_uc(client, property_id=payload.property_id)
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(items)


@router.post("/callbacks", response_model=list[ResourceItemRead])
async def list_callbacks(
    payload: PropertyRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    try:
        items = await list_callbacks_uc(client, property_id=payload.property_id)
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(items)


@router.post("/libraries", response_model=list[ResourceItemRead])
async def list_libraries(
    payload: LibraryHistoryRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    """Return the publish history of a property, most recent first."""

    try:
        items = await list_publish_history_uc(
            client,
            property_id=payload.property_id,
            state=payload.state,
            timezone=payload.timezone,
        )
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(items)


__all__ = ["router"]
