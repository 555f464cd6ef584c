"""Use cases listing companies and their properties."""

from .list_companies import list_companies
from .list_properties import list_properties

__all__ = ["list_companies", "list_properties"]
