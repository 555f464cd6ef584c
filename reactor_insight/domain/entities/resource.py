"""Domain entity representing a shaped Reactor resource."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ResourceItem:
    """Minimal ``{id, type, attributes}`` projection of a Reactor record."""

    id: str
    type: str
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str:
        value = self.attributes.get("name")
        return value if isinstance(value, str) else ""

    @property
    def is_deleted(self) -> bool:
        return bool(self.attributes.get("deleted_at"))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "attributes": self.attributes}


__all__ = ["ResourceItem"]
