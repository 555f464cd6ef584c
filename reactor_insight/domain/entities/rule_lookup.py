"""Domain entity returned by a single-rule lookup."""

from dataclasses import dataclass, field

from .resource import ResourceItem

APPROACH_DIRECT_GET = "direct-get"
APPROACH_SEARCH = "search"


@dataclass
class RuleLookup:
    """Result of looking a rule up by id within a property.

    ``items`` is empty when the rule exists but belongs to another property.
    """

    items: list[ResourceItem] = field(default_factory=list)
    approach: str | None = None
    revisions: list[ResourceItem] = field(default_factory=list)
    property_id: str | None = None

    @property
    def total_hits(self) -> int:
        return len(self.items)


__all__ = ["APPROACH_DIRECT_GET", "APPROACH_SEARCH", "RuleLookup"]
