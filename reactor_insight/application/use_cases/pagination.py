"""Cursor-following aggregation over paginated Reactor listings."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from reactor_insight.config import get_settings
from reactor_insight.domain.entities import Page
from reactor_insight.domain.exceptions import ExhaustedPaginationError

PageFetcher = Callable[[int | None, int], Awaitable[Page]]

logger = logging.getLogger(__name__)


async def fetch_all_pages(
    fetcher: PageFetcher,
    *,
    page_size: int,
    max_pages: int | None = None,
) -> list[Any]:
    """Collect the items of every page produced by ``fetcher`` in page order.

    The first request omits the page number; each following request passes
    the previous page's ``next_page``. Stops as soon as ``next_page`` is
    falsy. Errors raised by ``fetcher`` abort the aggregation.
    """

    limit = max_pages if max_pages is not None else get_settings().max_pages
    items: list[Any] = []
    page_number: int | None = None
    requests = 0

    while True:
        if requests >= limit:
            logger.error(
                "Pagination still reported a next page (%s) after %s requests",
                page_number,
                requests,
            )
            raise ExhaustedPaginationError(limit)

        page = await fetcher(page_number, page_size)
        requests += 1
        items.extend(page.items)

        if not page.next_page:
            break
        page_number = page.next_page

    logger.debug("Aggregated %s items over %s pages", len(items), requests)
    return items


__all__ = ["PageFetcher", "fetch_all_pages"]
