"""Use case for listing the rules of a property."""

from functools import partial

from reactor_insight.application.use_cases.pagination import fetch_all_pages
from reactor_insight.application.use_cases.shaping import truncate_all
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import ResourceItem
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.utils import sort_by_name


async def list_rules(
    client: ReactorClient,
    *,
    property_id: str,
    page_size: int | None = None,
    sort: bool = True,
) -> list[ResourceItem]:
    """Return every rule of ``property_id``, sorted by name unless ``sort`` is off."""

    property_id = require_identifier(property_id, "property ID")
    rules = truncate_all(
        await fetch_all_pages(
            partial(client.list_rules_for_property, property_id),
            page_size=page_size or client.settings.default_page_size,
        )
    )
    return sort_by_name(rules) if sort else rules


__all__ = ["list_rules"]
