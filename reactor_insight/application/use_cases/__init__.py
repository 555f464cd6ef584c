"""Aggregate application use cases."""

from .catalog import list_companies, list_properties
from .data_elements import list_data_elements
from .execution_order import classify_rules
from .libraries import list_publish_history
from .property_resources import list_callbacks, list_environments, list_extensions
from .references import extract_references, find_data_elements_used_in_rule
from .relationships import find_rules_using_data_element
from .rules import (
    get_rule_by_id,
    list_rule_components,
    list_rules,
    list_rules_for_rule_component,
)
from .scans import scan_property
from .search import search_property

__all__ = [
    "classify_rules",
    "extract_references",
    "find_data_elements_used_in_rule",
    "find_rules_using_data_element",
    "get_rule_by_id",
    "list_callbacks",
    "list_companies",
    "list_data_elements",
    "list_environments",
    "list_extensions",
    "list_properties",
    "list_publish_history",
    "list_rule_components",
    "list_rules",
    "list_rules_for_rule_component",
    "scan_property",
    "search_property",
]
