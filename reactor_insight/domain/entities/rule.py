"""Domain entity pairing a rule with its rule components."""

from dataclasses import dataclass, field
from typing import Any

from .resource import ResourceItem


@dataclass
class RuleWithComponents:
    """A shaped rule plus the components fetched for it.

    ``components`` is ``None`` when components were not requested, and an
    empty list when they were requested but could not be fetched.
    """

    rule: ResourceItem
    components: list[ResourceItem] | None = None

    @property
    def id(self) -> str:
        return self.rule.id

    @property
    def name(self) -> str:
        return self.rule.name

    @property
    def enabled(self) -> bool:
        return self.rule.attributes.get("enabled") is not False

    def to_dict(self) -> dict[str, Any]:
        payload = self.rule.to_dict()
        if self.components is not None:
            payload["components"] = [component.to_dict() for component in self.components]
        return payload


__all__ = ["RuleWithComponents"]
