"""Route scanning a property's execution order."""

from fastapi import APIRouter, Depends

from reactor_insight.application.use_cases.scans import scan_property as scan_property_uc
from reactor_insight.domain.entities import PropertyScan
from reactor_insight.domain.exceptions import ReactorInsightError
from reactor_insight.infrastructure import ReactorClient
from reactor_insight.interfaces.api.dependencies import get_reactor_client
from reactor_insight.interfaces.api.routes_helpers import (
    resources_to_read_models,
    rule_to_read_model,
    to_http_exception,
)
from reactor_insight.interfaces.api.schemas import (
    ExecutionOrderRead,
    PageLoadRead,
    PropertyScanResponse,
    ScannedDataElementsRead,
    ScannedPropertyRead,
    ScannedRulesRead,
    ScanPropertyRequest,
)

router = APIRouter(prefix="/reactor", tags=["scans"])


def _scan_to_response(scan: PropertyScan) -> PropertyScanResponse:
    order = scan.execution_order
    page_load = order.page_load
    data_elements = None
    if scan.data_elements is not None:
        data_elements = ScannedDataElementsRead(
            total=len(scan.data_elements),
            items=resources_to_read_models(scan.data_elements),
        )

    return PropertyScanResponse(
        property=ScannedPropertyRead(id=scan.property_id, name=scan.property_name),
        rules=ScannedRulesRead(
            total=scan.total_rules,
            by_execution_order=ExecutionOrderRead(
                page_load=PageLoadRead(
                    library_loaded=[rule_to_read_model(r) for r in page_load.library_loaded],
                    page_bottom=[rule_to_read_model(r) for r in page_load.page_bottom],
                    window_loaded=[rule_to_read_model(r) for r in page_load.window_loaded],
                    dom_ready=[rule_to_read_model(r) for r in page_load.dom_ready],
                ),
                direct_call=[rule_to_read_model(r) for r in order.direct_call],
                custom_events={
                    category: [rule_to_read_model(r) for r in rules]
                    for category, rules in order.custom_events.items()
                },
            ),
            all=[rule_to_read_model(r) for r in order.all],
        ),
        data_elements=data_elements,
        scan_timestamp=scan.scanned_at,
        failed_rule_ids=scan.failed_rule_ids,
    )


@router.post("/scan-property", response_model=PropertyScanResponse)
async def scan_property(
    payload: ScanPropertyRequest,
    client: ReactorClient = Depends(get_reactor_client),
) -> PropertyScanResponse:
    """Return the property's rules grouped by the trigger that runs them."""

    try:
        scan = await scan_property_uc(
            client,
            property_id=payload.property_id,
            include_data_elements=payload.include_data_elements,
            include_rule_components=payload.include_rule_components,
        )
    except ReactorInsightError as exc:
        raise to_http_exception(exc) from exc
    return _scan_to_response(scan)


__all__ = ["router"]
