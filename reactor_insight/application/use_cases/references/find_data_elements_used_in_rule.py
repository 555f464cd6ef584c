"""Use case listing the data elements a rule refers to."""

from reactor_insight.application.use_cases.rules import list_rule_components
from reactor_insight.domain.entities import Reference
from reactor_insight.infrastructure import ReactorClient

from .extract_references import extract_references


async def find_data_elements_used_in_rule(
    client: ReactorClient, *, rule_id: str
) -> list[Reference]:
    """Return the data element references found in the components of ``rule_id``."""

    components = await list_rule_components(client, rule_id=rule_id)
    return extract_references(components)


__all__ = ["find_data_elements_used_in_rule"]
