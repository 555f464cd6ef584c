"""Use cases for the smaller per-property collections."""

from collections.abc import Awaitable, Callable
from functools import partial

from reactor_insight.application.use_cases.pagination import fetch_all_pages
from reactor_insight.application.use_cases.shaping import truncate_all
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import Page, ResourceItem
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.utils import sort_by_name


async def _list_for_property(
    lister: Callable[..., Awaitable[Page]], property_id: str, page_size: int
) -> list[ResourceItem]:
    property_id = require_identifier(property_id, "property ID")
    items = await fetch_all_pages(partial(lister, property_id), page_size=page_size)
    return truncate_all(items)


async def list_extensions(client: ReactorClient, *, property_id: str) -> list[ResourceItem]:
    """Return the extensions installed on ``property_id`` sorted by name."""

    extensions = await _list_for_property(
        client.list_extensions_for_property, property_id, client.settings.default_page_size
    )
    return sort_by_name(extensions)


async def list_environments(client: ReactorClient, *, property_id: str) -> list[ResourceItem]:
    """Return the environments of ``property_id`` sorted by name."""

    environments = await _list_for_property(
        client.list_environments_for_property, property_id, client.settings.default_page_size
    )
    return sort_by_name(environments)


async def list_callbacks(client: ReactorClient, *, property_id: str) -> list[ResourceItem]:
    """Return the callbacks registered on ``property_id`` in service order."""

    return await _list_for_property(
        client.list_callbacks_for_property, property_id, client.settings.default_page_size
    )


__all__ = ["list_callbacks", "list_environments", "list_extensions"]
