"""Use case for listing the properties of a company."""

from functools import partial

from reactor_insight.application.use_cases.pagination import fetch_all_pages
from reactor_insight.application.use_cases.shaping import truncate_all
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import ResourceItem
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.utils import sort_by_name


async def list_properties(client: ReactorClient, *, company_id: str) -> list[ResourceItem]:
    """Return every property of ``company_id`` sorted by name."""

    company_id = require_identifier(company_id, "company ID")
    properties = await fetch_all_pages(
        partial(client.list_properties_for_company, company_id),
        page_size=client.settings.default_page_size,
    )
    return sort_by_name(truncate_all(properties))


__all__ = ["list_properties"]
