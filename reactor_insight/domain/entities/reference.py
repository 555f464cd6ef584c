"""Domain entity for a data element reference found in rule component settings."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Reference:
    """A data element name referenced by a rule component.

    The name is free text: it may not correspond to any existing data element.
    """

    component_id: str
    match_name: str
    type_name: str
    delegate_descriptor_id: str


__all__ = ["Reference"]
