"""Tests for the Reactor analysis endpoints."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[4]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

from conftest import FakeReactorClient, make_record  # noqa: E402
from main import create_app  # noqa: E402
from reactor_insight.domain.exceptions import (  # noqa: E402
    ExhaustedPaginationError,
    UpstreamError,
)
from reactor_insight.interfaces.api.dependencies import get_reactor_client  # noqa: E402


@pytest.fixture()
def reactor() -> FakeReactorClient:
    return FakeReactorClient(
        rules=[
            make_record("RL2", name="Checkout click", enabled=True),
            make_record("RL1", name="Analytics page view", enabled=True),
            make_record("RL3", name="Old rule", enabled=False),
        ],
        components={
            "RL1": [
                make_record(
                    "RC1",
                    "rule_components",
                    name="Library Loaded",
                    delegate_descriptor_id="core::events::library-loaded",
                    settings="{}",
                )
            ],
            "RL2": [
                make_record(
                    "RC2",
                    "rule_components",
                    name="Click",
                    delegate_descriptor_id="core::events::click",
                    settings=None,
                ),
                make_record(
                    "RC3",
                    "rule_components",
                    name="Custom Code",
                    delegate_descriptor_id="core::actions::custom-code",
                    settings="_satellite.getVar('cartTotal'); %userId%",
                ),
            ],
        },
        data_elements=[make_record("DE1", "data_elements", name="cartTotal")],
        property_record={"id": "PR1", "attributes": {"name": "Main site"}},
    )


@pytest.fixture()
def client(reactor: FakeReactorClient):
    app = create_app()
    app.dependency_overrides[get_reactor_client] = lambda: reactor
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_list_rules_returns_shaped_items_sorted_by_name(client: TestClient) -> None:
    response = client.post("/reactor/rules", json={"propertyId": "PR1"})

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body] == ["RL1", "RL2", "RL3"]
    assert set(body[0]) == {"id", "type", "attributes"}


def test_blank_identifier_is_a_bad_request(client: TestClient) -> None:
    response = client.post("/reactor/rules", json={"propertyId": ""})

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing required property ID"


def test_missing_body_field_is_a_validation_error(client: TestClient) -> None:
    response = client.post("/reactor/rules", json={})

    assert response.status_code == 422


def test_scan_property_reports_execution_order(client: TestClient) -> None:
    response = client.post("/reactor/scan-property", json={"propertyId": "PR1"})

    assert response.status_code == 200
    body = response.json()
    assert body["property"] == {"id": "PR1", "name": "Main site"}
    by_order = body["rules"]["byExecutionOrder"]
    assert [rule["id"] for rule in by_order["pageLoad"]["libraryLoaded"]] == ["RL1"]
    assert [rule["id"] for rule in by_order["customEvents"]["click"]] == ["RL2"]
    assert by_order["directCall"] == []
    assert body["rules"]["total"] == 3
    assert [rule["id"] for rule in body["rules"]["all"]] == ["RL1", "RL2", "RL3"]
    assert body["rules"]["all"][0]["components"][0]["id"] == "RC1"
    assert body["dataElements"]["total"] == 1
    assert body["failedRuleIds"] == []
    assert body["scanTimestamp"]


def test_data_elements_in_rule_returns_references(client: TestClient) -> None:
    response = client.post(
        "/reactor/relationships/data-elements-in-rule", json={"ruleId": "RL2"}
    )

    assert response.status_code == 200
    assert response.json() == [
        {
            "componentId": "RC3",
            "matchName": "cartTotal",
            "typeName": "Custom Code",
            "delegateDescriptorId": "core::actions::custom-code",
        },
        {
            "componentId": "RC3",
            "matchName": "userId",
            "typeName": "Custom Code",
            "delegateDescriptorId": "core::actions::custom-code",
        },
    ]


def test_rules_using_data_element_reports_total_hits(
    client: TestClient, reactor: FakeReactorClient
) -> None:
    reactor.search_results = [
        {"data": [make_record("RC3", "rule_components")], "meta": {"total_hits": 1}},
        {"data": [make_record("RC3", "rule_components")], "meta": {"total_hits": 1}},
    ]
    reactor.owners = {"RC3": [make_record("RL2", name="Checkout click")]}

    response = client.post(
        "/reactor/relationships/rules-using-data-element",
        json={"propertyId": "PR1", "dataElementName": "cartTotal"},
    )

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["data"]] == ["RL2"]
    assert body["meta"] == {"total_hits": 1, "unresolved": []}


def test_search_route_reports_unresolved_components(
    client: TestClient, reactor: FakeReactorClient
) -> None:
    reactor.search_results = [
        {"data": [make_record("RC9", "rule_components")], "meta": {"total_hits": 1}}
    ]
    reactor.owners = {"RC9": UpstreamError("secret detail")}

    response = client.post(
        "/reactor/search",
        json={"mode": "text", "propertyId": "PR1", "value": "cart"},
    )

    assert response.status_code == 200
    meta = response.json()["meta"]
    assert meta["total_hits"] == 1
    assert meta["unresolved"][0]["id"] == "RC9"
    assert "secret detail" not in response.text


def test_search_route_rejects_unknown_mode(client: TestClient) -> None:
    response = client.post(
        "/reactor/search", json={"mode": "regex", "propertyId": "PR1", "value": "x"}
    )

    assert response.status_code == 422


def test_upstream_failures_surface_as_bad_gateway(
    client: TestClient, reactor: FakeReactorClient
) -> None:
    reactor.extensions = UpstreamError("token abc leaked", status_code=500)

    response = client.post("/reactor/extensions", json={"propertyId": "PR1"})

    assert response.status_code == 502
    assert "abc" not in response.text


def test_exhausted_pagination_surfaces_as_bad_gateway(
    client: TestClient, reactor: FakeReactorClient
) -> None:
    reactor.environments = ExhaustedPaginationError(10)

    response = client.post("/reactor/environments", json={"propertyId": "PR1"})

    assert response.status_code == 502


def test_rule_lookup_returns_meta(client: TestClient, reactor: FakeReactorClient) -> None:
    record = make_record("RL1", name="Analytics page view")
    reactor.rule_documents = {"RL1": {"data": record}}

    response = client.post("/reactor/rules/get", json={"ruleId": "RL1", "propertyId": "PR1"})

    assert response.status_code == 200
    body = response.json()
    assert [item["id"] for item in body["data"]] == ["RL1"]
    assert body["meta"]["approach"] == "direct-get"
    assert body["meta"]["total_hits"] == 1


def test_libraries_route_rejects_unknown_timezone(client: TestClient) -> None:
    response = client.post(
        "/reactor/libraries", json={"propertyId": "PR1", "timezone": "Nowhere/City"}
    )

    assert response.status_code == 400
