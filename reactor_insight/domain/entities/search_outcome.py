"""Domain entity returned by searches that promote components to rules."""

from dataclasses import dataclass, field

from ..exceptions import PartialResolutionFailure
from .resource import ResourceItem


@dataclass
class SearchOutcome:
    """Deduplicated search hits plus the per-item failures met on the way."""

    items: list[ResourceItem] = field(default_factory=list)
    failures: list[PartialResolutionFailure] = field(default_factory=list)

    @property
    def total_hits(self) -> int:
        return len(self.items)


__all__ = ["SearchOutcome"]
