"""Use cases listing the extensions, environments and callbacks of a property."""

from .list_property_resources import list_callbacks, list_environments, list_extensions

__all__ = ["list_callbacks", "list_environments", "list_extensions"]
