"""Utility helpers for reusable functionality."""

from .datetime import localize_timestamp, parse_timestamp, resolve_timezone, utc_now
from .redaction import REDACTED, redact_sensitive, redact_text
from .sorting import collation_key, sort_by_name, sort_by_published_at_desc

__all__ = [
    "REDACTED",
    "collation_key",
    "localize_timestamp",
    "parse_timestamp",
    "redact_sensitive",
    "redact_text",
    "resolve_timezone",
    "sort_by_name",
    "sort_by_published_at_desc",
    "utc_now",
]
