"""Errors raised by the analysis engine."""

from __future__ import annotations


class ReactorInsightError(Exception):
    """Base class for every error raised by the application."""


class ValidationError(ReactorInsightError):
    """Raised when required input is missing or malformed."""


class CredentialsError(ValidationError):
    """Raised when the API credentials supplied by the caller are unusable."""


class UpstreamError(ReactorInsightError):
    """Raised when the Reactor service answers with an error or a malformed payload.

    ``detail`` may echo request data (including credentials), so it is meant
    for logs only. ``str(exc)`` is always the generic ``public_message``.
    """

    public_message = "The Reactor service could not complete the request"

    def __init__(self, detail: str | None = None, *, status_code: int | None = None) -> None:
        super().__init__(self.public_message)
        self.detail = detail
        self.status_code = status_code


class NotFoundError(UpstreamError):
    """Raised when the Reactor service reports the requested resource as missing."""

    public_message = "The requested resource was not found"


class ExhaustedPaginationError(ReactorInsightError):
    """Raised when a paginated listing keeps returning a next page past the cap."""

    def __init__(self, max_pages: int) -> None:
        super().__init__(f"Pagination did not terminate within {max_pages} pages")
        self.max_pages = max_pages


class PartialResolutionFailure(ReactorInsightError):
    """A single item of a batch could not be resolved.

    Collected by batch operations instead of being raised, so the batch can
    finish with the remaining items.
    """

    def __init__(self, item_id: str, cause: BaseException) -> None:
        super().__init__(f"Could not resolve {item_id}: {cause}")
        self.item_id = item_id
        self.cause = cause


__all__ = [
    "CredentialsError",
    "ExhaustedPaginationError",
    "NotFoundError",
    "PartialResolutionFailure",
    "ReactorInsightError",
    "UpstreamError",
    "ValidationError",
]
