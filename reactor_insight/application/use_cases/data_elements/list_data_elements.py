"""Use case for listing the data elements of a property."""

from functools import partial

from reactor_insight.application.use_cases.pagination import fetch_all_pages
from reactor_insight.application.use_cases.shaping import truncate_all
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import ResourceItem
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.utils import sort_by_name


async def list_data_elements(
    client: ReactorClient, *, property_id: str, include_deleted: bool = False
) -> list[ResourceItem]:
    """Return the data elements of ``property_id`` sorted by name."""

    property_id = require_identifier(property_id, "property ID")
    data_elements = truncate_all(
        await fetch_all_pages(
            partial(client.list_data_elements_for_property, property_id),
            page_size=client.settings.default_page_size,
        )
    )
    if not include_deleted:
        data_elements = [item for item in data_elements if not item.is_deleted]
    return sort_by_name(data_elements)


__all__ = ["list_data_elements"]
