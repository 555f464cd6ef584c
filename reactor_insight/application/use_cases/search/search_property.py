"""Use case running a free-text or delegate-filter search within a property."""

from __future__ import annotations

import logging
from typing import Any

from reactor_insight.application.use_cases.relationships.resolution import (
    deduplicate_by_id,
    resolve_component_owners,
)
from reactor_insight.application.use_cases.shaping import truncate_all
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import SearchOutcome
from reactor_insight.domain.exceptions import ValidationError
from reactor_insight.infrastructure import ReactorClient

from .queries import (
    ANY_ATTRIBUTE_FIELD,
    CURRENT_REVISION,
    DELEGATE_FIELD,
    PROPERTY_FIELD,
    REVISION_FIELD,
    build_search_query,
)

SEARCH_MODE_TEXT = "text"
SEARCH_MODE_DELEGATE = "delegate"
SEARCH_MODES = (SEARCH_MODE_TEXT, SEARCH_MODE_DELEGATE)

TEXT_RESOURCE_TYPES = ("rules", "rule_components", "data_elements", "extensions")
DELEGATE_RESOURCE_TYPES = ("rule_components", "data_elements")

logger = logging.getLogger(__name__)


def build_property_search(
    mode: str,
    property_id: str,
    value: str,
    *,
    include_revision_history: bool = False,
) -> dict[str, Any]:
    """Return the search request body for ``mode``.

    Delegate searches are always limited to the current revision; text
    searches only when revision history is not requested.
    """

    if mode == SEARCH_MODE_TEXT:
        filters: dict[str, Any] = {ANY_ATTRIBUTE_FIELD: value, PROPERTY_FIELD: property_id}
        if not include_revision_history:
            filters[REVISION_FIELD] = CURRENT_REVISION
        return build_search_query(filters, TEXT_RESOURCE_TYPES)

    if mode == SEARCH_MODE_DELEGATE:
        return build_search_query(
            {
                DELEGATE_FIELD: value,
                REVISION_FIELD: CURRENT_REVISION,
                PROPERTY_FIELD: property_id,
            },
            DELEGATE_RESOURCE_TYPES,
        )

    raise ValidationError(f"Unsupported search mode: {mode}")


async def search_property(
    client: ReactorClient,
    *,
    mode: str,
    property_id: str,
    value: str,
    include_revision_history: bool = False,
    include_deleted: bool = False,
) -> SearchOutcome:
    """Search ``property_id`` and return rules in place of matching rule components."""

    property_id = require_identifier(property_id, "property ID")
    value = require_identifier(value, "search value")
    query = build_property_search(
        mode, property_id, value, include_revision_history=include_revision_history
    )

    payload = await client.search(query)
    hits = truncate_all(payload.get("data") or [])
    if not hits:
        return SearchOutcome()

    if not include_deleted:
        hits = [item for item in hits if not item.is_deleted]

    resolution = await resolve_component_owners(hits, client.list_rules_for_rule_component)
    outcome = SearchOutcome(
        items=deduplicate_by_id(resolution.items),
        failures=resolution.failures,
    )
    logger.info(
        "Search (%s) in property %s returned %s items", mode, property_id, outcome.total_hits
    )
    return outcome


__all__ = [
    "DELEGATE_RESOURCE_TYPES",
    "SEARCH_MODES",
    "SEARCH_MODE_DELEGATE",
    "SEARCH_MODE_TEXT",
    "TEXT_RESOURCE_TYPES",
    "build_property_search",
    "search_property",
]
