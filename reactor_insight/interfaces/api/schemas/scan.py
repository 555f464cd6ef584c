"""Schemas for the property scan endpoint."""

from datetime import datetime

from pydantic import Field

from .base import CamelModel
from .resource import ResourceItemRead, RuleWithComponentsRead


class ScanPropertyRequest(CamelModel):
    property_id: str
    include_data_elements: bool = True
    include_rule_components: bool = True


class PageLoadRead(CamelModel):
    library_loaded: list[RuleWithComponentsRead] = Field(default_factory=list)
    page_bottom: list[RuleWithComponentsRead] = Field(default_factory=list)
    window_loaded: list[RuleWithComponentsRead] = Field(default_factory=list)
    dom_ready: list[RuleWithComponentsRead] = Field(default_factory=list)


class ExecutionOrderRead(CamelModel):
    page_load: PageLoadRead
    direct_call: list[RuleWithComponentsRead] = Field(default_factory=list)
    # Keys are event categories and are emitted verbatim.
    custom_events: dict[str, list[RuleWithComponentsRead]] = Field(default_factory=dict)


class ScannedPropertyRead(CamelModel):
    id: str
    name: str | None = None


class ScannedRulesRead(CamelModel):
    total: int
    by_execution_order: ExecutionOrderRead
    all: list[RuleWithComponentsRead] = Field(default_factory=list)


class ScannedDataElementsRead(CamelModel):
    total: int
    items: list[ResourceItemRead] = Field(default_factory=list)


class PropertyScanResponse(CamelModel):
    property: ScannedPropertyRead
    rules: ScannedRulesRead
    data_elements: ScannedDataElementsRead | None = None
    scan_timestamp: datetime
    failed_rule_ids: list[str] = Field(default_factory=list)


__all__ = [
    "ExecutionOrderRead",
    "PageLoadRead",
    "PropertyScanResponse",
    "ScanPropertyRequest",
    "ScannedDataElementsRead",
    "ScannedPropertyRead",
    "ScannedRulesRead",
]
