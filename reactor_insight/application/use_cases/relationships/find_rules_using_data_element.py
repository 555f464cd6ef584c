"""Use case finding the rules that reference a data element by name."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from reactor_insight.application.use_cases.search.queries import (
    percent_reference_query,
    satellite_reference_query,
)
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import SearchOutcome
from reactor_insight.infrastructure import ReactorClient

from .resolution import deduplicate_by_id, discard_deleted, resolve_component_owners

logger = logging.getLogger(__name__)


def _merge_hits(payloads: list[dict[str, Any]]) -> tuple[list[Any], int]:
    hits: list[Any] = []
    total_hits = 0
    for payload in payloads:
        hits.extend(payload.get("data") or [])
        meta = payload.get("meta")
        reported = meta.get("total_hits") if isinstance(meta, dict) else None
        if isinstance(reported, int):
            total_hits += reported
    return hits, total_hits


async def _search_all(
    client: ReactorClient, queries: list[dict[str, Any]]
) -> list[dict[str, Any]]:
    """Run ``queries`` concurrently; if one fails the others are cancelled."""

    tasks = [asyncio.ensure_future(client.search(query)) for query in queries]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def find_rules_using_data_element(
    client: ReactorClient, *, property_id: str, data_element_name: str
) -> SearchOutcome:
    """Return the current-revision rules of ``property_id`` referencing ``data_element_name``.

    Both reference syntaxes (``%NAME%`` and ``_satellite.getVar("NAME")``) are
    searched concurrently. The result holds each rule at most once; its order
    is the order of first appearance and carries no other meaning.
    """

    property_id = require_identifier(property_id, "property ID")
    data_element_name = require_identifier(data_element_name, "data element name")

    payloads = await _search_all(
        client,
        [
            percent_reference_query(property_id, data_element_name),
            satellite_reference_query(property_id, data_element_name),
        ],
    )
    hits, reported_total = _merge_hits(payloads)
    logger.debug(
        "Data element %s: %s hits reported for property %s",
        data_element_name,
        reported_total,
        property_id,
    )
    if reported_total == 0 and not hits:
        return SearchOutcome()

    resolution = await resolve_component_owners(
        discard_deleted(hits), client.list_rules_for_rule_component
    )
    return SearchOutcome(
        items=deduplicate_by_id(resolution.items),
        failures=resolution.failures,
    )


__all__ = ["find_rules_using_data_element"]
