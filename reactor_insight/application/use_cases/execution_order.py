"""Bucket rules by the trigger that makes them run.

Classification is table driven: ``TRIGGER_RULES`` is evaluated top to bottom
for every event component of a rule and the first matching entry wins. When
none matches, ``CUSTOM_EVENT_RULES`` picks the custom-event category.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from reactor_insight.domain.entities import (
    CUSTOM_EVENT,
    DIRECT_CALL,
    OTHER_EVENT,
    PAGE_LOAD_DOM_READY,
    PAGE_LOAD_LIBRARY_LOADED,
    PAGE_LOAD_PAGE_BOTTOM,
    PAGE_LOAD_WINDOW_LOADED,
    UNCATEGORIZED_EVENT,
    ExecutionOrder,
    ResourceItem,
    RuleWithComponents,
)
from reactor_insight.utils import sort_by_name

EVENT_MARKER = "::events::"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TriggerRule:
    """Maps a descriptor containing any of ``markers`` to ``bucket``."""

    markers: tuple[str, ...]
    bucket: str

    def matches(self, descriptor: str) -> bool:
        return any(marker in descriptor for marker in self.markers)


TRIGGER_RULES: tuple[TriggerRule, ...] = (
    TriggerRule(("library-loaded", "library_loaded"), PAGE_LOAD_LIBRARY_LOADED),
    TriggerRule(("page-bottom", "page_bottom"), PAGE_LOAD_PAGE_BOTTOM),
    TriggerRule(("window-loaded", "window_loaded", "window.loaded"), PAGE_LOAD_WINDOW_LOADED),
    TriggerRule(("dom-ready", "dom_ready", "domready"), PAGE_LOAD_DOM_READY),
    TriggerRule(("direct-call", "direct_call"), DIRECT_CALL),
)

# Here ``bucket`` holds the custom-event category.
CUSTOM_EVENT_RULES: tuple[TriggerRule, ...] = (
    TriggerRule(("click",), "click"),
    TriggerRule(("hover",), "hover"),
    TriggerRule(("change",), "change"),
    TriggerRule(("submit",), "submit"),
    TriggerRule(("keypress", "keydown", "keyup"), "keyboard"),
    TriggerRule(("focus", "blur"), "focus"),
    TriggerRule(("scroll",), "scroll"),
    TriggerRule(("media",), "media"),
    TriggerRule(("custom",), "custom"),
    TriggerRule(("time",), "time-based"),
    TriggerRule(("enters-viewport", "element-exists"), "element-based"),
)

Placement = tuple[str, str | None]
FallbackStrategy = Callable[[RuleWithComponents], Placement]


def page_name_fallback(rule: RuleWithComponents) -> Placement:
    """Place a rule without event components by looking at its name.

    Names mentioning "page" are assumed to be page-load rules; everything else
    is reported as an uncategorized custom event.
    """

    if "page" in rule.name.lower():
        return PAGE_LOAD_PAGE_BOTTOM, None
    return CUSTOM_EVENT, UNCATEGORIZED_EVENT


def _descriptor(component: ResourceItem) -> str:
    value = component.attributes.get("delegate_descriptor_id")
    return value if isinstance(value, str) else ""


def event_descriptors(rule: RuleWithComponents) -> list[str]:
    """Return the descriptor ids of the rule's event (trigger) components."""

    descriptors: list[str] = []
    for component in rule.components or ():
        descriptor = _descriptor(component)
        if EVENT_MARKER in descriptor:
            descriptors.append(descriptor)
    return descriptors


def classify_descriptor(descriptor: str) -> Placement:
    """Return the ``(bucket, category)`` an event descriptor belongs to."""

    for trigger in TRIGGER_RULES:
        if trigger.matches(descriptor):
            return trigger.bucket, None
    for trigger in CUSTOM_EVENT_RULES:
        if trigger.matches(descriptor):
            return CUSTOM_EVENT, trigger.bucket
    return CUSTOM_EVENT, OTHER_EVENT


def _place(order: ExecutionOrder, rule: RuleWithComponents, placement: Placement) -> None:
    bucket = order.bucket(*placement)
    if any(existing.id == rule.id for existing in bucket):
        return
    bucket.append(rule)


def classify_rules(
    rules: Iterable[RuleWithComponents],
    *,
    fallback: FallbackStrategy = page_name_fallback,
) -> ExecutionOrder:
    """Group enabled ``rules`` by execution trigger.

    A rule with several event components may land in several buckets, but
    never twice in the same one. Disabled rules are left out of the buckets
    and kept in ``all``.
    """

    rules = list(rules)
    order = ExecutionOrder()

    for rule in rules:
        if not rule.enabled:
            continue

        descriptors = event_descriptors(rule)
        if not descriptors:
            _place(order, rule, fallback(rule))
            continue

        for descriptor in descriptors:
            _place(order, rule, classify_descriptor(descriptor))

    order.page_load.library_loaded = sort_by_name(order.page_load.library_loaded)
    order.page_load.page_bottom = sort_by_name(order.page_load.page_bottom)
    order.page_load.window_loaded = sort_by_name(order.page_load.window_loaded)
    order.page_load.dom_ready = sort_by_name(order.page_load.dom_ready)
    order.direct_call = sort_by_name(order.direct_call)
    order.custom_events = {
        category: sort_by_name(members) for category, members in order.custom_events.items()
    }
    order.all = sort_by_name(rules)

    logger.debug(
        "Classified %s rules into %s custom event categories",
        len(rules),
        len(order.custom_events),
    )
    return order


__all__ = [
    "CUSTOM_EVENT_RULES",
    "EVENT_MARKER",
    "FallbackStrategy",
    "TRIGGER_RULES",
    "TriggerRule",
    "classify_descriptor",
    "classify_rules",
    "event_descriptors",
    "page_name_fallback",
]
