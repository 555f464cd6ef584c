"""Domain entity returned by a property scan."""

from dataclasses import dataclass, field
from datetime import datetime

from .execution_order import ExecutionOrder
from .resource import ResourceItem


@dataclass
class PropertyScan:
    """Point-in-time snapshot of a property's rules and data elements."""

    property_id: str
    execution_order: ExecutionOrder
    scanned_at: datetime
    data_elements: list[ResourceItem] | None = None
    failed_rule_ids: list[str] = field(default_factory=list)
    property_name: str | None = None

    @property
    def total_rules(self) -> int:
        return len(self.execution_order.all)


__all__ = ["PropertyScan"]
