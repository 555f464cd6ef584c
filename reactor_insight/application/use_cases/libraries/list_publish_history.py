"""Use case for reconstructing the publish history of a property."""

from dataclasses import replace
from functools import partial

from reactor_insight.application.use_cases.pagination import fetch_all_pages
from reactor_insight.application.use_cases.shaping import truncate_all
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import ResourceItem
from reactor_insight.domain.exceptions import ValidationError
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.utils import localize_timestamp, resolve_timezone, sort_by_published_at_desc


async def list_publish_history(
    client: ReactorClient,
    *,
    property_id: str,
    state: str | None = None,
    timezone: str | None = None,
) -> list[ResourceItem]:
    """Return the libraries of ``property_id``, most recently published first.

    Libraries never published sort last. ``state`` keeps only libraries in
    that state (e.g. ``"published"``). ``timezone`` re-expresses
    ``published_at`` in the given zone.
    """

    property_id = require_identifier(property_id, "property ID")
    tz = None
    if timezone:
        try:
            tz = resolve_timezone(timezone)
        except ValueError as exc:
            raise ValidationError(str(exc)) from exc

    libraries = sort_by_published_at_desc(
        truncate_all(
            await fetch_all_pages(
                partial(client.list_libraries_for_property, property_id),
                page_size=client.settings.default_page_size,
            )
        )
    )

    if state:
        libraries = [item for item in libraries if item.attributes.get("state") == state]

    if tz is not None:
        libraries = [
            replace(
                item,
                attributes={
                    **item.attributes,
                    "published_at": localize_timestamp(item.attributes.get("published_at"), tz),
                },
            )
            for item in libraries
        ]
    return libraries


__all__ = ["list_publish_history"]
