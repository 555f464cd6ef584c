"""Tests for the execution-order classifier."""

from __future__ import annotations

import pytest

from reactor_insight.application.use_cases.execution_order import (
    TRIGGER_RULES,
    classify_descriptor,
    classify_rules,
    page_name_fallback,
)
from reactor_insight.domain.entities import (
    CUSTOM_EVENT,
    DIRECT_CALL,
    PAGE_LOAD_DOM_READY,
    PAGE_LOAD_LIBRARY_LOADED,
    PAGE_LOAD_PAGE_BOTTOM,
    PAGE_LOAD_WINDOW_LOADED,
    ResourceItem,
    RuleWithComponents,
)


def _rule(rule_id: str, name, *descriptors: str, enabled=True, components=True):
    attributes = {"name": name}
    if enabled is not None:
        attributes["enabled"] = enabled
    rule_components = None
    if components:
        rule_components = [
            ResourceItem(
                id=f"{rule_id}-C{index}",
                type="rule_components",
                attributes={"delegate_descriptor_id": descriptor},
            )
            for index, descriptor in enumerate(descriptors)
        ]
    return RuleWithComponents(
        rule=ResourceItem(id=rule_id, type="rules", attributes=attributes),
        components=rule_components,
    )


def _ids(rules) -> list[str]:
    return [rule.id for rule in rules]


def test_rule_without_event_component_named_page_goes_to_page_bottom() -> None:
    order = classify_rules([_rule("RL1", "Page View Tracker", "core::actions::custom-code")])

    assert _ids(order.page_load.page_bottom) == ["RL1"]
    assert order.custom_events == {}


def test_rule_without_event_component_is_uncategorized() -> None:
    order = classify_rules([_rule("RL1", "Newsletter")])

    assert _ids(order.custom_events["uncategorized"]) == ["RL1"]


def test_click_descriptor_lands_in_click_category() -> None:
    order = classify_rules([_rule("RL1", "CTA", "core::events::click")])

    assert _ids(order.custom_events["click"]) == ["RL1"]


@pytest.mark.parametrize(
    ("descriptor", "expected"),
    [
        ("core::events::library-loaded", (PAGE_LOAD_LIBRARY_LOADED, None)),
        ("core::events::page_bottom", (PAGE_LOAD_PAGE_BOTTOM, None)),
        ("core::events::window.loaded", (PAGE_LOAD_WINDOW_LOADED, None)),
        ("core::events::domready", (PAGE_LOAD_DOM_READY, None)),
        ("core::events::direct-call", (DIRECT_CALL, None)),
        ("core::events::hover", (CUSTOM_EVENT, "hover")),
        ("core::events::change", (CUSTOM_EVENT, "change")),
        ("core::events::submit", (CUSTOM_EVENT, "submit")),
        ("core::events::keyup", (CUSTOM_EVENT, "keyboard")),
        ("core::events::blur", (CUSTOM_EVENT, "focus")),
        ("core::events::scroll", (CUSTOM_EVENT, "scroll")),
        ("core::events::media-play", (CUSTOM_EVENT, "media")),
        ("core::events::custom-event", (CUSTOM_EVENT, "custom")),
        ("core::events::time-on-page", (CUSTOM_EVENT, "time-based")),
        ("core::events::enters-viewport", (CUSTOM_EVENT, "element-based")),
        ("core::events::history-change-x", (CUSTOM_EVENT, "change")),
        ("core::events::orientation", (CUSTOM_EVENT, "other")),
    ],
)
def test_classify_descriptor(descriptor: str, expected) -> None:
    assert classify_descriptor(descriptor) == expected


def test_first_matching_trigger_rule_wins() -> None:
    # Matches both the library-loaded and the direct-call markers.
    descriptor = "core::events::library-loaded-direct-call"

    assert classify_descriptor(descriptor) == (TRIGGER_RULES[0].bucket, None)
    assert classify_descriptor("core::events::click-time") == (CUSTOM_EVENT, "click")


def test_disabled_rules_are_skipped_but_listed_in_all() -> None:
    order = classify_rules(
        [
            _rule("RL1", "Disabled page rule", "core::events::dom-ready", enabled=False),
            _rule("RL2", "Implicitly enabled", "core::events::dom-ready", enabled=None),
        ]
    )

    assert _ids(order.page_load.dom_ready) == ["RL2"]
    assert _ids(order.all) == ["RL1", "RL2"]


def test_each_event_component_is_classified_independently() -> None:
    order = classify_rules(
        [
            _rule(
                "RL1",
                "Multi trigger",
                "core::events::click",
                "core::events::click",
                "core::events::direct-call",
                "core::actions::custom-code",
            )
        ]
    )

    assert _ids(order.custom_events["click"]) == ["RL1"]
    assert _ids(order.direct_call) == ["RL1"]
    assert order.page_load.page_bottom == []


def test_buckets_and_all_are_sorted_by_name() -> None:
    order = classify_rules(
        [
            _rule("RL1", "zeta", "core::events::click"),
            _rule("RL2", "Alpha", "core::events::click"),
            _rule("RL3", "émile", "core::events::click"),
        ]
    )

    assert _ids(order.custom_events["click"]) == ["RL2", "RL3", "RL1"]
    assert _ids(order.all) == ["RL2", "RL3", "RL1"]


def test_rules_with_missing_attributes_fall_back() -> None:
    rules = [
        _rule("RL1", None, components=False),
        RuleWithComponents(
            rule=ResourceItem(id="RL2", type="rules", attributes={"name": "Homepage"}),
            components=[ResourceItem(id="C", type="rule_components", attributes={})],
        ),
    ]

    order = classify_rules(rules)

    assert _ids(order.custom_events["uncategorized"]) == ["RL1"]
    assert _ids(order.page_load.page_bottom) == ["RL2"]


def test_every_enabled_rule_is_placed_somewhere() -> None:
    rules = [
        _rule("RL1", "Page load", "core::events::library-loaded"),
        _rule("RL2", "Direct", "core::events::direct-call"),
        _rule("RL3", "Clicks", "core::events::click", "core::events::scroll"),
        _rule("RL4", "Nothing"),
        _rule("RL5", "Off", "core::events::click", enabled=False),
    ]

    order = classify_rules(rules)

    placed = {rule.id for bucket in order.iter_buckets() for rule in bucket}
    assert placed == {"RL1", "RL2", "RL3", "RL4"}
    assert _ids(order.custom_events["scroll"]) == ["RL3"]


def test_fallback_strategy_can_be_replaced() -> None:
    order = classify_rules(
        [_rule("RL1", "Page View Tracker")],
        fallback=lambda rule: (CUSTOM_EVENT, "unclassified"),
    )

    assert order.page_load.page_bottom == []
    assert _ids(order.custom_events["unclassified"]) == ["RL1"]


def test_page_name_fallback_is_case_insensitive() -> None:
    assert page_name_fallback(_rule("RL1", "LANDING PAGE")) == (PAGE_LOAD_PAGE_BOTTOM, None)
