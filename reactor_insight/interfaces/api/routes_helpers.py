"""Helper utilities shared across API route handlers."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from fastapi import HTTPException, status

from reactor_insight.domain.entities import ResourceItem, RuleWithComponents, SearchOutcome
from reactor_insight.domain.exceptions import (
    CredentialsError,
    ExhaustedPaginationError,
    NotFoundError,
    ReactorInsightError,
    UpstreamError,
    ValidationError,
)
from reactor_insight.interfaces.api.schemas import (
    ResourceItemRead,
    RuleWithComponentsRead,
    SearchMeta,
    SearchResponse,
    UnresolvedItemRead,
)

GENERIC_UPSTREAM_MESSAGE = "The Reactor service could not complete the request"

logger = logging.getLogger(__name__)


def to_http_exception(exc: ReactorInsightError) -> HTTPException:
    """Translate a domain error into the ``HTTPException`` returned to the caller.

    Upstream details are logged here and never forwarded, since they may echo
    credentials.
    """

    if isinstance(exc, CredentialsError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc))
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    if isinstance(exc, NotFoundError):
        logger.info("Upstream resource not found: %s", exc.detail)
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, UpstreamError):
        logger.error("Upstream failure (status %s): %s", exc.status_code, exc.detail)
        return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc))
    if isinstance(exc, ExhaustedPaginationError):
        logger.error("Aborted aggregation: %s", exc)
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=GENERIC_UPSTREAM_MESSAGE
        )

    logger.exception("Unhandled application error", exc_info=exc)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Internal server error"
    )


def resource_to_read_model(item: ResourceItem) -> ResourceItemRead:
    return ResourceItemRead(id=item.id, type=item.type, attributes=item.attributes)


def resources_to_read_models(items: Iterable[ResourceItem]) -> list[ResourceItemRead]:
    return [resource_to_read_model(item) for item in items]


def rule_to_read_model(rule: RuleWithComponents) -> RuleWithComponentsRead:
    components = (
        resources_to_read_models(rule.components) if rule.components is not None else None
    )
    return RuleWithComponentsRead(
        id=rule.rule.id,
        type=rule.rule.type,
        attributes=rule.rule.attributes,
        components=components,
    )


def search_outcome_to_response(outcome: SearchOutcome) -> SearchResponse:
    """Render a search outcome as ``{data, meta: {total_hits, unresolved}}``."""

    return SearchResponse(
        data=resources_to_read_models(outcome.items),
        meta=SearchMeta(
            total_hits=outcome.total_hits,
            unresolved=[
                UnresolvedItemRead(id=failure.item_id, reason=str(failure.cause))
                for failure in outcome.failures
            ],
        ),
    )


__all__ = [
    "GENERIC_UPSTREAM_MESSAGE",
    "resource_to_read_model",
    "resources_to_read_models",
    "rule_to_read_model",
    "search_outcome_to_response",
    "to_http_exception",
]
