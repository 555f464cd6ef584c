"""Validation helpers shared by the use cases."""

from typing import Any

from reactor_insight.domain.exceptions import ValidationError


def require_identifier(value: Any, label: str) -> str:
    """Return ``value`` stripped, or raise when it is missing or blank."""

    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Missing required {label}")
    return value.strip()


__all__ = ["require_identifier"]
