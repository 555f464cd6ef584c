"""Routes cross-referencing rules and data elements."""

from fastapi import APIRouter, Depends

from reactor_insight.application.use_cases.references import (
    find_data_elements_used_in_rule as find_data_elements_used_in_rule_uc,
)
from reactor_insight.application.use_cases.relationships import (
    find_rules_using_data_element as find_rules_using_data_element_uc,
)
from reactor_insight.domain.entities import Reference
from reactor_insight.domain.exceptions import ReactorInsightError
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.interfaces.api.dependencies import get_reactor_client
from reactor_insight.interfaces.api.routes_helpers import (
    search_outcome_to_response,
    to_http_exception,
)
from reactor_insight.interfaces.api.schemas import (
    DataElementUsageRequest,
    ReferenceRead,
    RuleRequest,
    SearchResponse,
)

router = APIRouter(prefix="/reactor/relationships", tags=["relationships"])


def _reference_to_read_model(reference: Reference) -> ReferenceRead:
    return ReferenceRead(
        component_id=reference.component_id,
        match_name=reference.match_name,
        type_name=reference.type_name,
        delegate_descriptor_id=reference.delegate_descriptor_id,
    )


@router.post("/data-elements-in-rule", response_model=list[ReferenceRead])
async def data_elements_in_rule(
    payload: RuleRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ReferenceRead]:
    """Return the data element names referenced by the rule's components."""

    try:
        references = await find_data_elements_used_in_rule_uc(client, rule_id=payload.rule_id)
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return [_reference_to_read_model(reference) for reference in references]


@router.post("/rules-using-data-element", response_model=SearchResponse)
async def rules_using_data_element(
    payload: DataElementUsageRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> SearchResponse:
    """Return the rules whose components reference the data element."""

    try:
        outcome = await find_rules_using_data_element_uc(
            client,
            property_id=payload.property_id,
            data_element_name=payload.data_element_name,
        )
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return search_outcome_to_response(outcome)


__all__ = ["router"]
