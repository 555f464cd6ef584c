"""Domain entity describing one page of a paginated listing."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Page:
    """Items returned by a single page request and the cursor to the next one."""

    items: list[Any] = field(default_factory=list)
    next_page: int | None = None


__all__ = ["Page"]
