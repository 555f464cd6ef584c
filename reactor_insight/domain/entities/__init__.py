"""Domain entities exposed by the application."""

from .credentials import ApiCredentials
from .execution_order import (
    CUSTOM_EVENT,
    DIRECT_CALL,
    OTHER_EVENT,
    PAGE_LOAD_DOM_READY,
    PAGE_LOAD_LIBRARY_LOADED,
    PAGE_LOAD_PAGE_BOTTOM,
    PAGE_LOAD_WINDOW_LOADED,
    UNCATEGORIZED_EVENT,
    ExecutionOrder,
    PageLoadBuckets,
)
from .page import Page
from .property_scan import PropertyScan
from .reference import Reference
from .resource import ResourceItem
from .rule import RuleWithComponents
from .rule_lookup import APPROACH_DIRECT_GET, APPROACH_SEARCH, RuleLookup
from .search_outcome import SearchOutcome

__all__ = [
    "APPROACH_DIRECT_GET",
    "APPROACH_SEARCH",
    "ApiCredentials",
    "CUSTOM_EVENT",
    "DIRECT_CALL",
    "ExecutionOrder",
    "OTHER_EVENT",
    "PAGE_LOAD_DOM_READY",
    "PAGE_LOAD_LIBRARY_LOADED",
    "PAGE_LOAD_PAGE_BOTTOM",
    "PAGE_LOAD_WINDOW_LOADED",
    "Page",
    "PageLoadBuckets",
    "PropertyScan",
    "Reference",
    "ResourceItem",
    "RuleLookup",
    "RuleWithComponents",
    "SearchOutcome",
    "UNCATEGORIZED_EVENT",
]
