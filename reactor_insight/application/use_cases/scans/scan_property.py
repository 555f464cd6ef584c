"""Use case taking an execution-order snapshot of a property."""

import logging

from reactor_insight.application.use_cases.data_elements import list_data_elements
from reactor_insight.application.use_cases.execution_order import classify_rules
from reactor_insight.application.use_cases.rules import list_rule_components, list_rules
from reactor_insight.application.use_cases.validators import require_identifier
from reactor_insight.domain.entities import PropertyScan, RuleWithComponents
from reactor_insight.domain.exceptions import ReactorInsightError
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.utils import utc_now

logger = logging.getLogger(__name__)


async def _property_name(client: ReactorClient, property_id: str) -> str | None:
    try:
        record = await client.get_property(property_id)
    except ReactorInsightError as exc:
        logger.info("Could not read the name of property %s: %s", property_id, exc)
        return None
    attributes = record.get("attributes")
    name = attributes.get("name") if isinstance(attributes, dict) else None
    return name if isinstance(name, str) else None


async def scan_property(
    client: ReactorClient,
    *,
    property_id: str,
    include_data_elements: bool = True,
    include_rule_components: bool = True,
) -> PropertyScan:
    """Scan ``property_id`` and bucket its rules by execution order.

    Components are fetched one rule at a time. A rule whose components cannot
    be fetched is kept with an empty component list and its id is reported in
    ``failed_rule_ids``; the scan itself carries on.
    """

    property_id = require_identifier(property_id, "property ID")
    rules = await list_rules(
        client,
        property_id=property_id,
        page_size=client.settings.rule_scan_page_size,
        sort=False,
    )
    logger.info("Scanning %s rules of property %s", len(rules), property_id)

    failed_rule_ids: list[str] = []
    rules_with_components: list[RuleWithComponents] = []
    for rule in rules:
        if not include_rule_components:
            rules_with_components.append(RuleWithComponents(rule=rule))
            continue
        try:
            components = await list_rule_components(client, rule_id=rule.id)
        except ReactorInsightError as exc:
            logger.warning("Could not fetch components of rule %s: %s", rule.id, exc)
            failed_rule_ids.append(rule.id)
            components = []
        rules_with_components.append(RuleWithComponents(rule=rule, components=components))

    data_elements = None
    if include_data_elements:
        data_elements = await list_data_elements(client, property_id=property_id)

    return PropertyScan(
        property_id=property_id,
        property_name=await _property_name(client, property_id),
        execution_order=classify_rules(rules_with_components),
        scanned_at=utc_now(),
        data_elements=data_elements,
        failed_rule_ids=failed_rule_ids,
    )


__all__ = ["scan_property"]
