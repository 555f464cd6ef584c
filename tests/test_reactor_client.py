"""Tests for the httpx-based Reactor client and IMS token exchange."""

from __future__ import annotations

import json

import httpx
import pytest

from reactor_insight.config import Settings
from reactor_insight.domain.entities import ApiCredentials
from reactor_insight.domain.exceptions import CredentialsError, NotFoundError, UpstreamError
from reactor_insight.infrastructure import ReactorClient, fetch_access_token

CREDENTIALS = ApiCredentials(client_id="client-123", client_secret="s3cret", org_id="ORG@AdobeOrg")
SETTINGS = Settings(reactor_url="https://reactor.test/", ims_token_url="https://ims.test/token")


def _client(handler) -> ReactorClient:
    return ReactorClient(
        "token-abc", CREDENTIALS, settings=SETTINGS, transport=httpx.MockTransport(handler)
    )


@pytest.mark.asyncio
async def test_list_page_sends_auth_headers_and_page_params() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={"data": [{"id": "RL1"}], "meta": {"pagination": {"next_page": 2}}},
        )

    async with _client(handler) as client:
        page = await client.list_rules_for_property("PR1", 1, 50)

    assert page.items == [{"id": "RL1"}]
    assert page.next_page == 2
    request = seen[0]
    assert request.url.path == "/properties/PR1/rules"
    assert request.url.params["page[size]"] == "50"
    assert request.url.params["page[number]"] == "1"
    assert request.headers["Authorization"] == "Bearer token-abc"
    assert request.headers["x-api-key"] == "client-123"
    assert request.headers["x-gw-ims-org-id"] == "ORG@AdobeOrg"
    assert request.headers["Accept"] == "application/vnd.api+json;revision=1"


@pytest.mark.asyncio
async def test_first_page_request_omits_page_number() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    async with _client(handler) as client:
        await client.list_libraries_for_property("PR1", None, 100)

    assert "page[number]" not in seen[0].url.params


@pytest.mark.asyncio
async def test_search_posts_json_api_body() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": [], "meta": {"total_hits": 0}})

    query = {"query": {"id": {"value": "RL1"}}, "resource_types": ["rules"]}
    async with _client(handler) as client:
        payload = await client.search(query)

    assert payload["meta"]["total_hits"] == 0
    assert seen[0].method == "POST"
    assert seen[0].url.path == "/search"
    assert seen[0].headers["Content-Type"] == "application/vnd.api+json"
    assert json.loads(seen[0].content) == {"data": query}


@pytest.mark.asyncio
async def test_not_found_maps_to_not_found_error() -> None:
    async with _client(lambda request: httpx.Response(404, json={"errors": []})) as client:
        with pytest.raises(NotFoundError):
            await client.get_rule("RL404")


@pytest.mark.asyncio
async def test_error_detail_is_redacted_and_kept_out_of_message(caplog) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            500, json={"errors": [{"title": "Oops", "detail": "key client-123 rejected"}]}
        )

    async with _client(handler) as client:
        with caplog.at_level("ERROR"), pytest.raises(UpstreamError) as exc_info:
            await client.list_companies()

    error = exc_info.value
    assert error.status_code == 500
    assert "client-123" not in str(error)
    assert "client-123" not in (error.detail or "")
    assert "[REDACTED]" in error.detail
    assert "client-123" not in caplog.text


@pytest.mark.asyncio
async def test_transport_errors_become_upstream_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(UpstreamError):
            await client.list_companies()


@pytest.mark.asyncio
async def test_malformed_payloads_are_rejected() -> None:
    async with _client(lambda request: httpx.Response(200, text="<html>")) as client:
        with pytest.raises(UpstreamError):
            await client.list_companies()

    async with _client(lambda request: httpx.Response(200, json={"data": {}})) as client:
        with pytest.raises(UpstreamError):
            await client.search({"query": {}, "resource_types": []})


@pytest.mark.asyncio
async def test_fetch_access_token_posts_client_credentials() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"access_token": "token-xyz", "expires_in": 86399})

    token = await fetch_access_token(
        CREDENTIALS, settings=SETTINGS, transport=httpx.MockTransport(handler)
    )

    assert token == "token-xyz"
    form = dict(httpx.QueryParams(seen[0].content.decode()))
    assert form["grant_type"] == "client_credentials"
    assert form["client_id"] == "client-123"
    assert form["scope"] == SETTINGS.ims_scope
    assert str(seen[0].url) == "https://ims.test/token"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 401])
async def test_rejected_credentials_raise_credentials_error(status_code: int) -> None:
    transport = httpx.MockTransport(
        lambda request: httpx.Response(status_code, json={"error": "invalid_client"})
    )

    with pytest.raises(CredentialsError):
        await fetch_access_token(CREDENTIALS, settings=SETTINGS, transport=transport)


@pytest.mark.asyncio
async def test_missing_token_is_an_upstream_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))

    with pytest.raises(UpstreamError):
        await fetch_access_token(CREDENTIALS, settings=SETTINGS, transport=transport)


@pytest.mark.asyncio
async def test_blank_credentials_are_rejected_without_a_request() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError("no request expected")

    with pytest.raises(CredentialsError):
        await fetch_access_token(
            ApiCredentials(client_id="", client_secret="", org_id="ORG"),
            settings=SETTINGS,
            transport=httpx.MockTransport(handler),
        )
