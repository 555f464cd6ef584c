"""Use case for retrieving a single rule within a property."""

import logging
from collections.abc import Mapping
from typing import Any

from reactor_insight.application.use_cases.search.queries import (
    PROPERTY_FIELD,
    build_search_query,
)
from reactor_insight.application.use_cases.shaping import truncate, truncate_all
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import APPROACH_DIRECT_GET, APPROACH_SEARCH, RuleLookup
from reactor_insight.domain.exceptions import NotFoundError
from reactor_insight.infrastructure import ReactorClient

logger = logging.getLogger(__name__)


def _owning_property_id(rule: Mapping[str, Any]) -> str | None:
    relationships = rule.get("relationships")
    if not isinstance(relationships, Mapping):
        return None
    property_link = relationships.get("property")
    data = property_link.get("data") if isinstance(property_link, Mapping) else None
    value = data.get("id") if isinstance(data, Mapping) else None
    return value if isinstance(value, str) else None


async def get_rule_by_id(
    client: ReactorClient,
    *,
    rule_id: str,
    property_id: str,
    include_revisions: bool = False,
) -> RuleLookup:
    """Return the rule identified by ``rule_id`` if it belongs to ``property_id``.

    A direct GET is tried first. When the service reports the rule as missing
    (for instance an id copied from an older revision) a ``rules`` search by
    id within the property is used instead. Any other failure propagates.
    """

    rule_id = require_identifier(rule_id, "rule ID")
    property_id = require_identifier(property_id, "property ID")

    try:
        document = await client.get_rule(
            rule_id, include="revisions" if include_revisions else None
        )
    except NotFoundError:
        logger.info("Rule %s not found by direct GET; searching property %s", rule_id, property_id)
        payload = await client.search(
            build_search_query({"id": rule_id, PROPERTY_FIELD: property_id}, ["rules"])
        )
        return RuleLookup(
            items=truncate_all(payload.get("data") or []),
            approach=APPROACH_SEARCH,
            property_id=property_id,
        )

    rule = document["data"]
    owner = _owning_property_id(rule)
    if owner != property_id:
        logger.info(
            "Rule %s belongs to property %s, not %s", rule_id, owner, property_id
        )
        return RuleLookup(items=[], approach=APPROACH_DIRECT_GET, property_id=property_id)

    included = document.get("included")
    revisions = [
        truncate(item)
        for item in (included if isinstance(included, list) else [])
        if isinstance(item, Mapping) and item.get("type") == "rules"
    ]
    return RuleLookup(
        items=[truncate(rule)],
        approach=APPROACH_DIRECT_GET,
        revisions=revisions,
        property_id=property_id,
    )


__all__ = ["get_rule_by_id"]
