"""Use cases for reading rules and their components."""

from .get_rule_by_id import get_rule_by_id
from .list_rule_components import list_rule_components
from .list_rules import list_rules
from .list_rules_for_rule_component import list_rules_for_rule_component

__all__ = [
    "get_rule_by_id",
    "list_rule_components",
    "list_rules",
    "list_rules_for_rule_component",
]
