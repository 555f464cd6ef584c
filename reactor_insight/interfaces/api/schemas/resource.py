"""Schemas shared by the listing endpoints."""

from typing import Any

from pydantic import Field

from .base import CamelModel


class ResourceItemRead(CamelModel):
    """A Reactor record reduced to ``{id, type, attributes}``."""

    id: str
    type: str
    attributes: dict[str, Any] = Field(default_factory=dict)


class RuleWithComponentsRead(ResourceItemRead):
    components: list[ResourceItemRead] | None = None


class CompanyRequest(CamelModel):
    company_id: str


class PropertyRequest(CamelModel):
    property_id: str


class RuleRequest(CamelModel):
    rule_id: str


class RuleComponentRequest(CamelModel):
    rule_component_id: str


class DataElementListRequest(PropertyRequest):
    include_deleted: bool = False


class LibraryHistoryRequest(PropertyRequest):
    """Publish history request; ``timezone`` accepts IANA names or ``UTC+hh:mm``."""

    state: str | None = None
    timezone: str | None = None


__all__ = [
    "CompanyRequest",
    "DataElementListRequest",
    "LibraryHistoryRequest",
    "PropertyRequest",
    "ResourceItemRead",
    "RuleComponentRequest",
    "RuleRequest",
    "RuleWithComponentsRead",
]
