"""FastAPI dependency utilities."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from collections.abc import AsyncIterator
from typing import Any

from fastapi import Depends, Header, HTTPException, status

from reactor_insight.config import Settings, get_settings
from reactor_insight.domain.entities import ApiCredentials
from reactor_insight.domain.exceptions import ReactorInsightError
from reactor_insight.infrastructure import ReactorClient, fetch_access_token
from reactor_insight.interfaces.api.routes_helpers import to_http_exception

API_KEYS_HEADER = "x-api-keys"

logger = logging.getLogger(__name__)


def _load_header_json(raw: str) -> Any:
    """Decode the header value, accepting base64-encoded or plain JSON."""

    candidate = raw.strip()
    if not candidate.startswith("{"):
        try:
            candidate = base64.b64decode(candidate, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ValueError("API keys header is neither JSON nor base64") from exc
    return json.loads(candidate)


def decode_api_keys(raw: str | None) -> ApiCredentials:
    """Return the credentials carried by the ``x-api-keys`` header."""

    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API keys header",
        )

    try:
        payload = _load_header_json(raw)
    except ValueError as exc:
        logger.info("Rejected malformed %s header", API_KEYS_HEADER)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid API keys format",
        ) from exc

    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid API keys format",
        )

    values = [payload.get(key) for key in ("clientId", "clientSecret", "orgId")]
    if not all(isinstance(value, str) and value.strip() for value in values):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="API keys must include clientId, clientSecret and orgId",
        )

    client_id, client_secret, org_id = (value.strip() for value in values)
    return ApiCredentials(client_id=client_id, client_secret=client_secret, org_id=org_id)


def get_api_credentials(
    x_api_keys: str | None = Header(default=None, alias=API_KEYS_HEADER),
) -> ApiCredentials:
    """Return the caller's Reactor credentials from the request headers."""

    return decode_api_keys(x_api_keys)


async def get_reactor_client(
    credentials: ApiCredentials = Depends(get_api_credentials),
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[ReactorClient]:
    """Yield a ``ReactorClient`` authenticated for the caller, closed after the request."""

    try:
        access_token = await fetch_access_token(credentials, settings=settings)
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc

    client = ReactorClient(access_token, credentials, settings=settings)
    try:
        yield client
    finally:
        await client.aclose()


__all__ = [
    "API_KEYS_HEADER",
    "decode_api_keys",
    "get_api_credentials",
    "get_reactor_client",
]
