"""Use case for listing the companies visible to the caller."""

from reactor_insight.application.use_cases.pagination import fetch_all_pages
from reactor_insight.application.use_cases.shaping import truncate_all
from reactor_insight.domain.entities import ResourceItem
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.utils import sort_by_name


async def list_companies(client: ReactorClient) -> list[ResourceItem]:
    """Return every company sorted by name."""

    companies = await fetch_all_pages(
        client.list_companies, page_size=client.settings.default_page_size
    )
    return sort_by_name(truncate_all(companies))


__all__ = ["list_companies"]
