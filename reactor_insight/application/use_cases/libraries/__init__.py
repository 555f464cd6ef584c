"""Use cases for reading library publish history."""

from .list_publish_history import list_publish_history

__all__ = ["list_publish_history"]
