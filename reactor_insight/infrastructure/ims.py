"""Client-credentials token exchange against Adobe IMS."""

from __future__ import annotations

import logging

import httpx

from reactor_insight.config import Settings, get_settings
from reactor_insight.domain.entities import ApiCredentials
from reactor_insight.domain.exceptions import CredentialsError, UpstreamError
from reactor_insight.utils import redact_text

logger = logging.getLogger(__name__)


async def fetch_access_token(
    credentials: ApiCredentials,
    *,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Exchange ``credentials`` for a bearer token usable with the Reactor API."""

    if not (credentials.client_id and credentials.client_secret):
        raise CredentialsError("Missing client credentials")

    settings = settings or get_settings()
    form = {
        "grant_type": "client_credentials",
        "client_id": credentials.client_id,
        "client_secret": credentials.client_secret,
        "scope": settings.ims_scope,
    }
    secrets = (credentials.client_id, credentials.client_secret)

    async with httpx.AsyncClient(
        timeout=settings.request_timeout_seconds, transport=transport
    ) as client:
        try:
            response = await client.post(settings.ims_token_url, data=form)
        except httpx.HTTPError as exc:
            detail = redact_text(f"{type(exc).__name__}: {exc}", secrets)
            logger.error("IMS token request failed: %s", detail)
            raise UpstreamError(detail) from exc

    if response.status_code in (httpx.codes.BAD_REQUEST, httpx.codes.UNAUTHORIZED):
        logger.warning("IMS rejected the supplied client credentials (status %s)", response.status_code)
        raise CredentialsError("The supplied API credentials were rejected")

    if not response.is_success:
        detail = redact_text(response.text[:500], secrets)
        logger.error("IMS token request responded with status %s: %s", response.status_code, detail)
        raise UpstreamError(detail, status_code=response.status_code)

    try:
        token = response.json().get("access_token")
    except (ValueError, AttributeError) as exc:
        raise UpstreamError("IMS token response is not a JSON object") from exc

    if not isinstance(token, str) or not token:
        raise UpstreamError("IMS token response has no access_token")
    return token


__all__ = ["fetch_access_token"]
