"""Domain entities describing the execution-order model of a property."""

from collections.abc import Iterator
from dataclasses import dataclass, field

from .rule import RuleWithComponents

PAGE_LOAD_LIBRARY_LOADED = "library_loaded"
PAGE_LOAD_PAGE_BOTTOM = "page_bottom"
PAGE_LOAD_WINDOW_LOADED = "window_loaded"
PAGE_LOAD_DOM_READY = "dom_ready"
DIRECT_CALL = "direct_call"
CUSTOM_EVENT = "custom_event"

UNCATEGORIZED_EVENT = "uncategorized"
OTHER_EVENT = "other"


@dataclass
class PageLoadBuckets:
    """Rules triggered during page load, one list per phase."""

    library_loaded: list[RuleWithComponents] = field(default_factory=list)
    page_bottom: list[RuleWithComponents] = field(default_factory=list)
    window_loaded: list[RuleWithComponents] = field(default_factory=list)
    dom_ready: list[RuleWithComponents] = field(default_factory=list)


@dataclass
class ExecutionOrder:
    """Enabled rules bucketed by inferred trigger, plus every rule sorted by name."""

    page_load: PageLoadBuckets = field(default_factory=PageLoadBuckets)
    direct_call: list[RuleWithComponents] = field(default_factory=list)
    custom_events: dict[str, list[RuleWithComponents]] = field(default_factory=dict)
    all: list[RuleWithComponents] = field(default_factory=list)

    def bucket(self, name: str, category: str | None = None) -> list[RuleWithComponents]:
        """Return the list backing ``name`` (and ``category`` for custom events)."""

        if name == DIRECT_CALL:
            return self.direct_call
        if name == CUSTOM_EVENT:
            return self.custom_events.setdefault(category or OTHER_EVENT, [])
        return getattr(self.page_load, name)

    def iter_buckets(self) -> Iterator[list[RuleWithComponents]]:
        yield self.page_load.library_loaded
        yield self.page_load.page_bottom
        yield self.page_load.window_loaded
        yield self.page_load.dom_ready
        yield self.direct_call
        yield from self.custom_events.values()


__all__ = [
    "CUSTOM_EVENT",
    "DIRECT_CALL",
    "ExecutionOrder",
    "OTHER_EVENT",
    "PAGE_LOAD_DOM_READY",
    "PAGE_LOAD_LIBRARY_LOADED",
    "PAGE_LOAD_PAGE_BOTTOM",
    "PAGE_LOAD_WINDOW_LOADED",
    "PageLoadBuckets",
    "UNCATEGORIZED_EVENT",
]
