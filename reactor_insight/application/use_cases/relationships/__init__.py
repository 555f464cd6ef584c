"""Use cases resolving relationships between rules and data elements."""

from .find_rules_using_data_element import find_rules_using_data_element
from .resolution import (
    ComponentOwnerLookup,
    Resolution,
    deduplicate_by_id,
    discard_deleted,
    resolve_component_owners,
)

__all__ = [
    "ComponentOwnerLookup",
    "Resolution",
    "deduplicate_by_id",
    "discard_deleted",
    "find_rules_using_data_element",
    "resolve_component_owners",
]
