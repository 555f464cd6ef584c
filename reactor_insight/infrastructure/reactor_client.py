"""Async client for the Reactor JSON:API service."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from reactor_insight.config import Settings, get_settings
from reactor_insight.domain.entities import ApiCredentials, Page
from reactor_insight.domain.exceptions import NotFoundError, UpstreamError
from reactor_insight.utils import redact_sensitive, redact_text

logger = logging.getLogger(__name__)

JSON_API_ACCEPT = "application/vnd.api+json;revision=1"
JSON_API_CONTENT_TYPE = "application/vnd.api+json"


def _page_params(page_number: int | None, page_size: int | None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if page_size is not None:
        params["page[size]"] = page_size
    if page_number is not None:
        params["page[number]"] = page_number
    return params


def page_from_payload(payload: Any) -> Page:
    """Build a ``Page`` from a JSON:API list payload.

    Raises ``UpstreamError`` when the payload is not a list response.
    """

    if not isinstance(payload, Mapping):
        raise UpstreamError(f"Expected a JSON object, received {type(payload).__name__}")

    data = payload.get("data")
    if not isinstance(data, list):
        raise UpstreamError("List response is missing its 'data' array")

    meta = payload.get("meta")
    pagination = meta.get("pagination") if isinstance(meta, Mapping) else None
    next_page = pagination.get("next_page") if isinstance(pagination, Mapping) else None
    if next_page is not None and not isinstance(next_page, int):
        try:
            next_page = int(next_page)
        except (TypeError, ValueError) as exc:
            raise UpstreamError(f"Invalid next_page cursor: {next_page!r}") from exc

    return Page(items=list(data), next_page=next_page or None)


def _describe_error_body(response: httpx.Response) -> str:
    """Return a loggable, credential-free description of an error response."""

    try:
        body = response.json()
    except ValueError:
        return response.text[:500]

    errors = body.get("errors") if isinstance(body, Mapping) else None
    if isinstance(errors, list):
        messages: list[str] = []
        for item in errors:
            if not isinstance(item, Mapping):
                continue
            title = item.get("title")
            detail = item.get("detail")
            if title and detail:
                messages.append(f"{title}: {detail}")
            elif title or detail:
                messages.append(str(title or detail))
        if messages:
            return "; ".join(messages)
    return json.dumps(redact_sensitive(body))[:500]


class ReactorClient:
    """Thin wrapper around ``httpx.AsyncClient`` speaking the Reactor API."""

    def __init__(
        self,
        access_token: str,
        credentials: ApiCredentials,
        *,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._secrets = (access_token, credentials.client_id, credentials.client_secret)
        self._http = httpx.AsyncClient(
            base_url=self.settings.reactor_url,
            timeout=self.settings.request_timeout_seconds,
            transport=transport,
            headers={
                "Authorization": f"Bearer {access_token}",
                "x-api-key": credentials.client_id,
                "x-gw-ims-org-id": credentials.org_id,
                "Accept": JSON_API_ACCEPT,
            },
        )

    async def __aenter__(self) -> "ReactorClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        headers = {"Content-Type": JSON_API_CONTENT_TYPE} if body is not None else None
        try:
            response = await self._http.request(
                method,
                path,
                params=params,
                content=json.dumps(body) if body is not None else None,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            detail = redact_text(f"{type(exc).__name__}: {exc}", self._secrets)
            logger.error("Reactor request %s %s failed: %s", method, path, detail)
            raise UpstreamError(detail) from exc

        if response.status_code == httpx.codes.NOT_FOUND:
            logger.info("Reactor reported %s %s as not found", method, path)
            raise NotFoundError(f"{method} {path}", status_code=response.status_code)

        if not response.is_success:
            detail = redact_text(_describe_error_body(response), self._secrets)
            logger.error(
                "Reactor request %s %s responded with status %s: %s",
                method,
                path,
                response.status_code,
                detail,
            )
            raise UpstreamError(detail, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Reactor request %s %s returned a non-JSON body", method, path)
            raise UpstreamError("Response body is not valid JSON") from exc

    async def _list_page(
        self, path: str, page_number: int | None, page_size: int | None
    ) -> Page:
        payload = await self._request("GET", path, params=_page_params(page_number, page_size))
        return page_from_payload(payload)

    async def _list_data(self, path: str) -> list[Any]:
        return (await self._list_page(path, None, None)).items

    async def list_companies(
        self, page_number: int | None = None, page_size: int | None = None
    ) -> Page:
        return await self._list_page("/companies", page_number, page_size)

    async def list_properties_for_company(
        self, company_id: str, page_number: int | None = None, page_size: int | None = None
    ) -> Page:
        return await self._list_page(f"/companies/{company_id}/properties", page_number, page_size)

    async def list_rules_for_property(
        self, property_id: str, page_number: int | None = None, page_size: int | None = None
    ) -> Page:
        return await self._list_page(f"/properties/{property_id}/rules", page_number, page_size)

    async def list_data_elements_for_property(
        self, property_id: str, page_number: int | None = None, page_size: int | None = None
    ) -> Page:
        return await self._list_page(
            f"/properties/{property_id}/data_elements", page_number, page_size
        )

    async def list_libraries_for_property(
        self, property_id: str, page_number: int | None = None, page_size: int | None = None
    ) -> Page:
        return await self._list_page(f"/properties/{property_id}/libraries", page_number, page_size)

    async def list_extensions_for_property(
        self, property_id: str, page_number: int | None = None, page_size: int | None = None
    ) -> Page:
        return await self._list_page(f"/properties/{property_id}/extensions", page_number, page_size)

    async def list_environments_for_property(
        self, property_id: str, page_number: int | None = None, page_size: int | None = None
    ) -> Page:
        return await self._list_page(
            f"/properties/{property_id}/environments", page_number, page_size
        )

    async def list_callbacks_for_property(
        self, property_id: str, page_number: int | None = None, page_size: int | None = None
    ) -> Page:
        return await self._list_page(f"/properties/{property_id}/callbacks", page_number, page_size)

    async def list_rule_components_for_rule(
        self, rule_id: str, page_number: int | None = None, page_size: int | None = None
    ) -> Page:
        return await self._list_page(f"/rules/{rule_id}/rule_components", page_number, page_size)

    async def list_rules_for_rule_component(self, rule_component_id: str) -> list[Any]:
        """Return the rules owning ``rule_component_id`` (normally exactly one)."""

        return await self._list_data(f"/rule_components/{rule_component_id}/rules")

    async def _get_data(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        payload = await self._request("GET", path, params=params)
        data = payload.get("data") if isinstance(payload, Mapping) else None
        if not isinstance(data, Mapping):
            raise UpstreamError(f"Response for {path} has no 'data' object")
        return dict(data)

    async def get_property(self, property_id: str) -> dict[str, Any]:
        return await self._get_data(f"/properties/{property_id}")

    async def get_rule(self, rule_id: str, *, include: str | None = None) -> dict[str, Any]:
        """Return the rule document: its ``data`` object plus any ``included`` records."""

        params = {"include": include} if include else None
        payload = await self._request("GET", f"/rules/{rule_id}", params=params)
        if not isinstance(payload, Mapping) or not isinstance(payload.get("data"), Mapping):
            raise UpstreamError(f"Response for rule {rule_id} has no 'data' object")
        return dict(payload)

    async def search(self, query: Mapping[str, Any]) -> dict[str, Any]:
        """Run a full-text search; ``query`` is the ``data`` member of the request."""

        payload = await self._request("POST", "/search", body={"data": query})
        if not isinstance(payload, Mapping) or not isinstance(payload.get("data"), list):
            raise UpstreamError("Search response is missing its 'data' array")
        return dict(payload)


__all__ = ["JSON_API_ACCEPT", "ReactorClient", "page_from_payload"]
