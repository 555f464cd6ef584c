"""Helpers that keep credentials out of log output."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Final

REDACTED: Final[str] = "[REDACTED]"
SENSITIVE_KEYS: Final[tuple[str, ...]] = (
    "clientid",
    "client_id",
    "clientsecret",
    "client_secret",
    "apikey",
    "api_key",
    "x-api-key",
    "authorization",
    "access_token",
)


def _is_sensitive(key: Any, sensitive_keys: Sequence[str]) -> bool:
    if not isinstance(key, str):
        return False
    lowered = key.lower()
    return any(sensitive in lowered for sensitive in sensitive_keys)


def redact_sensitive(data: Any, sensitive_keys: Sequence[str] = SENSITIVE_KEYS) -> Any:
    """Return a copy of ``data`` with values under sensitive keys replaced."""

    if isinstance(data, Mapping):
        return {
            key: REDACTED if _is_sensitive(key, sensitive_keys) else redact_sensitive(value, sensitive_keys)
            for key, value in data.items()
        }
    if isinstance(data, Sequence) and not isinstance(data, (str, bytes)):
        return [redact_sensitive(entry, sensitive_keys) for entry in data]
    return data


def redact_text(text: str, secrets: Sequence[str | None]) -> str:
    """Replace every occurrence of the given secret values inside ``text``."""

    for secret in secrets:
        if secret:
            text = text.replace(secret, REDACTED)
    return text


__all__ = ["REDACTED", "redact_sensitive", "redact_text"]
