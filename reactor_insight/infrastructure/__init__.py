"""Infrastructure adapters: HTTP clients for the Reactor and IMS services."""

from .ims import fetch_access_token
from .reactor_client import ReactorClient, page_from_payload

__all__ = ["ReactorClient", "fetch_access_token", "page_from_payload"]
