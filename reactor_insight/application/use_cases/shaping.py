"""Normalize raw Reactor records into the ``{id, type, attributes}`` shape."""

from collections.abc import Iterable, Mapping
from typing import Any

from reactor_insight.domain.entities import ResourceItem


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def truncate(resource: Any) -> ResourceItem:
    """Project ``resource`` onto ``ResourceItem``, dropping links and relationships.

    Total over its input: anything that is not a mapping becomes an empty item.
    """

    if isinstance(resource, ResourceItem):
        return resource
    if not isinstance(resource, Mapping):
        return ResourceItem(id="", type="", attributes={})

    attributes = resource.get("attributes")
    return ResourceItem(
        id=_as_text(resource.get("id")),
        type=_as_text(resource.get("type")),
        attributes=dict(attributes) if isinstance(attributes, Mapping) else {},
    )


def truncate_all(resources: Iterable[Any]) -> list[ResourceItem]:
    """Shape every record of ``resources`` preserving order."""

    return [truncate(resource) for resource in resources]


__all__ = ["truncate", "truncate_all"]
