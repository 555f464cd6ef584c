"""Schemas for the single rule lookup endpoint."""

from pydantic import BaseModel, Field

from .base import CamelModel
from .resource import ResourceItemRead


class RuleLookupRequest(CamelModel):
    rule_id: str
    property_id: str
    include_revisions: bool = False


class RuleLookupMeta(BaseModel):
    total_hits: int
    approach: str | None = None
    property_id: str | None = None


class RuleLookupResponse(BaseModel):
    data: list[ResourceItemRead] = Field(default_factory=list)
    revisions: list[ResourceItemRead] = Field(default_factory=list)
    meta: RuleLookupMeta


__all__ = ["RuleLookupMeta", "RuleLookupRequest", "RuleLookupResponse"]
