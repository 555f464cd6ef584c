"""Use cases for reading data elements."""

from .list_data_elements import list_data_elements

__all__ = ["list_data_elements"]
