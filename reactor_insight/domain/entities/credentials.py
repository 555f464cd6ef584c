"""Domain entity holding the caller's Reactor API credentials."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiCredentials:
    """Client credentials used to obtain an access token for the Reactor API."""

    client_id: str
    client_secret: str
    org_id: str

    def __repr__(self) -> str:
        return f"ApiCredentials(client_id='[REDACTED]', org_id={self.org_id!r})"


__all__ = ["ApiCredentials"]
