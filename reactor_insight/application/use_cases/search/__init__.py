"""Use cases running Reactor searches."""

from .queries import (
    build_search_query,
    percent_reference_query,
    satellite_reference_query,
)
from .search_property import (
    SEARCH_MODE_DELEGATE,
    SEARCH_MODE_TEXT,
    SEARCH_MODES,
    build_property_search,
    search_property,
)

__all__ = [
    "SEARCH_MODES",
    "SEARCH_MODE_DELEGATE",
    "SEARCH_MODE_TEXT",
    "build_property_search",
    "build_search_query",
    "percent_reference_query",
    "satellite_reference_query",
    "search_property",
]
