"""Use case for resolving the rule that owns a rule component."""

from reactor_insight.application.use_cases.shaping import truncate_all
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import ResourceItem
from reactor_insight.infrastructure import ReactorClient


async def list_rules_for_rule_component(
    client: ReactorClient, *, rule_component_id: str
) -> list[ResourceItem]:
    """Return the rules owning ``rule_component_id``."""

    rule_component_id = require_identifier(rule_component_id, "rule component ID")
    return truncate_all(await client.list_rules_for_rule_component(rule_component_id))


__all__ = ["list_rules_for_rule_component"]
