"""Schemas for the relationship and search endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

from .base import CamelModel
from .resource import ResourceItemRead


class DataElementUsageRequest(CamelModel):
    property_id: str
    data_element_name: str


class ReferenceRead(CamelModel):
    component_id: str
    match_name: str
    type_name: str
    delegate_descriptor_id: str


class UnresolvedItemRead(BaseModel):
    """A rule component whose owning rule could not be looked up."""

    id: str
    reason: str


class SearchMeta(BaseModel):
    total_hits: int
    unresolved: list[UnresolvedItemRead] = Field(default_factory=list)


class SearchResponse(BaseModel):
    data: list[ResourceItemRead] = Field(default_factory=list)
    meta: SearchMeta


class SearchRequest(CamelModel):
    mode: Literal["text", "delegate"] = "text"
    property_id: str
    value: str
    include_revision_history: bool = False
    include_deleted_items: bool = False


__all__ = [
    "DataElementUsageRequest",
    "ReferenceRead",
    "SearchMeta",
    "SearchRequest",
    "SearchResponse",
    "UnresolvedItemRead",
]
