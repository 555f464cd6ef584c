"""Use cases scanning a whole property."""

from .scan_property import scan_property

__all__ = ["scan_property"]
