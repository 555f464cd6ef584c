"""Routes listing companies and properties."""

from fastapi import APIRouter, Depends

from reactor_insight.application.use_cases.catalog import (
    list_companies as list_companies_uc,
    list_properties as list_properties_uc,
)
from reactor_insight.domain.exceptions import ReactorInsightError
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.interfaces.api.dependencies import get_reactor_client
from reactor_insight.interfaces.api.routes_helpers import (
    resources_to_read_models,
    to_http_exception,
)
from reactor_insight.interfaces.api.schemas import CompanyRequest, ResourceItemRead

router = APIRouter(prefix="/reactor", tags=["catalog"])


@router.post("/companies", response_model=list[ResourceItemRead])
async def list_companies(
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    """Return the companies the credentials can access, sorted by name."""

    try:
        companies = await list_companies_uc(client)
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(companies)


@router.post("/properties", response_model=list[ResourceItemRead])
async def list_properties(
    payload: CompanyRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    """Return the properties of a company, sorted by name."""

    try:
        properties = await list_properties_uc(client, company_id=payload.company_id)
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(properties)


__all__ = ["router"]
