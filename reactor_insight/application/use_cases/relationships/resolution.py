"""Promotion of rule component search hits to the rules that own them.

The pipeline has two phases that can be exercised independently:

* search phase: raw hits are shaped and soft-deleted records dropped
  (``discard_deleted``), since the search endpoint cannot exclude them;
* resolve phase: each ``rule_components`` hit is replaced by its owning rule
  (``resolve_component_owners``). Lookups run one after another; a failed
  lookup keeps the component and is recorded in ``Resolution.failures``.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from reactor_insight.application.use_cases.shaping import truncate, truncate_all
from reactor_insight.domain.entities import ResourceItem
from reactor_insight.domain.exceptions import PartialResolutionFailure

RULE_COMPONENT_TYPE = "rule_components"

ComponentOwnerLookup = Callable[[str], Awaitable[list[Any]]]

logger = logging.getLogger(__name__)


@dataclass
class Resolution:
    """Items produced by the resolve phase and the lookups that failed."""

    items: list[ResourceItem] = field(default_factory=list)
    failures: list[PartialResolutionFailure] = field(default_factory=list)
    dropped: list[str] = field(default_factory=list)


def discard_deleted(hits: Iterable[Any]) -> list[ResourceItem]:
    """Shape ``hits`` and drop those with a truthy ``deleted_at``."""

    return [item for item in truncate_all(hits) if not item.is_deleted]


async def resolve_component_owners(
    items: Iterable[ResourceItem], lookup: ComponentOwnerLookup
) -> Resolution:
    """Replace every rule component in ``items`` with the first rule owning it.

    Non-component items pass through. A component with no owning rule is
    dropped (its id lands in ``dropped``).
    """

    resolution = Resolution()
    for item in items:
        if item.type != RULE_COMPONENT_TYPE:
            resolution.items.append(item)
            continue

        try:
            owners = await lookup(item.id)
        except Exception as exc:
            failure = PartialResolutionFailure(item.id, exc)
            logger.exception("Keeping rule component %s unresolved", item.id)
            resolution.failures.append(failure)
            resolution.items.append(item)
            continue

        if not owners:
            logger.info("Rule component %s has no owning rule; dropping it", item.id)
            resolution.dropped.append(item.id)
            continue
        resolution.items.append(truncate(owners[0]))

    return resolution


def deduplicate_by_id(items: Iterable[ResourceItem]) -> list[ResourceItem]:
    """Return ``items`` with repeated ids removed, keeping the first occurrence."""

    seen: set[str] = set()
    unique: list[ResourceItem] = []
    for item in items:
        if item.id in seen:
            continue
        seen.add(item.id)
        unique.append(item)
    return unique


__all__ = [
    "ComponentOwnerLookup",
    "RULE_COMPONENT_TYPE",
    "Resolution",
    "deduplicate_by_id",
    "discard_deleted",
    "resolve_component_owners",
]
