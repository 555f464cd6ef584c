"""Builders for Reactor ``/search`` request bodies."""

from collections.abc import Mapping, Sequence
from typing import Any

PROPERTY_FIELD = "relationships.property.data.id"
REVISION_FIELD = "attributes.revision_number"
SETTINGS_FIELD = "attributes.settings"
DELEGATE_FIELD = "attributes.delegate_descriptor_id"
ANY_ATTRIBUTE_FIELD = "attributes.*"
CURRENT_REVISION = 0


def build_search_query(
    filters: Mapping[str, Any], resource_types: Sequence[str]
) -> dict[str, Any]:
    """Return the ``data`` member of a search request.

    Every filter value is matched literally: ``{"field": {"value": value}}``.
    """

    return {
        "query": {field: {"value": value} for field, value in filters.items()},
        "resource_types": list(resource_types),
    }


def percent_reference_query(property_id: str, data_element_name: str) -> dict[str, Any]:
    """Rule components whose settings reference ``%NAME%``."""

    return build_search_query(
        {
            SETTINGS_FIELD: f"%{data_element_name}%",
            REVISION_FIELD: CURRENT_REVISION,
            PROPERTY_FIELD: property_id,
        },
        ["rule_components"],
    )


def satellite_reference_query(property_id: str, data_element_name: str) -> dict[str, Any]:
    """Rule components whose settings call ``_satellite.getVar("NAME")``."""

    return build_search_query(
        {
            SETTINGS_FIELD: f'_satellite.getVar("{data_element_name}")',
            REVISION_FIELD: CURRENT_REVISION,
            PROPERTY_FIELD: property_id,
        },
        ["rule_components"],
    )


__all__ = [
    "ANY_ATTRIBUTE_FIELD",
    "CURRENT_REVISION",
    "DELEGATE_FIELD",
    "PROPERTY_FIELD",
    "REVISION_FIELD",
    "SETTINGS_FIELD",
    "build_search_query",
    "percent_reference_query",
    "satellite_reference_query",
]
