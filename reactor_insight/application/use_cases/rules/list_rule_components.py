"""Use case for listing the components attached to a rule."""

from functools import partial

from reactor_insight.application.use_cases.pagination import fetch_all_pages
from reactor_insight.application.use_cases.shaping import truncate_all
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import ResourceItem
from reactor_insight.infrastructure import ReactorClient


async def list_rule_components(client: ReactorClient, *, rule_id: str) -> list[ResourceItem]:
    """Return the components of ``rule_id`` in the order the service returns them."""

    rule_id = require_identifier(rule_id, "rule ID")
    components = await fetch_all_pages(
        partial(client.list_rule_components_for_rule, rule_id),
        page_size=client.settings.default_page_size,
    )
    return truncate_all(components)


__all__ = ["list_rule_components"]
