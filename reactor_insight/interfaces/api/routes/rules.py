"""Routes reading rules and rule components."""

from fastapi import APIRouter, Depends

from reactor_insight.application.use_cases.rules import (
    get_rule_by_id as get_rule_by_id_uc,
    list_rule_components as list_rule_components_uc,
    list_rules as list_rules_uc,
    list_rules_for_rule_component as list_rules_for_rule_component_uc,
)
from reactor_insight.domain.exceptions import ReactorInsightError
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.interfaces.api.dependencies import get_reactor_client
from reactor_insight.interfaces.api.routes_helpers import (
    resources_to_read_models,
    to_http_exception,
)
from reactor_insight.interfaces.api.schemas import (
    PropertyRequest,
    ResourceItemRead,
    RuleComponentRequest,
    RuleLookupMeta,
    RuleLookupRequest,
    RuleLookupResponse,
    RuleRequest,
)

router = APIRouter(prefix="/reactor", tags=["rules"])


@router.post("/rules", response_model=list[ResourceItemRead])
async def list_rules(
    payload: PropertyRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    """Return every rule of a property, sorted by name."""

    try:
        rules = await list_rules_uc(client, property_id=payload.property_id)
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(rules)


@router.post("/rule-components", response_model=list[ResourceItemRead])
async def list_rule_components(
    payload: RuleRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    try:
        components = await list_rule_components_uc(client, rule_id=payload.rule_id)
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(components)


@router.post("/rules/for-component", response_model=list[ResourceItemRead])
async def list_rules_for_rule_component(
    payload: RuleComponentRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> list[ResourceItemRead]:
    """Return the rule(s) owning a rule component."""

    try:
        rules = await list_rules_for_rule_component_uc(
            client, rule_component_id=payload.rule_component_id
        )
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return resources_to_read_models(rules)


@router.post("/rules/get", response_model=RuleLookupResponse)
async def get_rule(
    payload: RuleLookupRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> RuleLookupResponse:
    """Return a rule by id when it belongs to the given property."""

    try:
        lookup = await get_rule_by_id_uc(
            client,
            rule_id=payload.rule_id,
            property_id=payload.property_id,
            include_revisions=payload.include_revisions,
        )
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc

    return RuleLookupResponse(
        data=resources_to_read_models(lookup.items),
        revisions=resources_to_read_models(lookup.revisions),
        meta=RuleLookupMeta(
            total_hits=lookup.total_hits,
            approach=lookup.approach,
            property_id=lookup.property_id,
        ),
    )


__all__ = ["router"]
