from .relationship import (
    DataElementUsageRequest,
    ReferenceRead,
    SearchMeta,
    SearchRequest,
    SearchResponse,
    UnresolvedItemRead,
)
from .resource import (
    CompanyRequest,
    DataElementListRequest,
    LibraryHistoryRequest,
    PropertyRequest,
    ResourceItemRead,
    RuleComponentRequest,
    RuleRequest,
    RuleWithComponentsRead,
)
from .rule import RuleLookupMeta, RuleLookupRequest, RuleLookupResponse
from .scan import (
    ExecutionOrderRead,
    PageLoadRead,
    PropertyScanResponse,
    ScannedDataElementsRead,
    ScannedPropertyRead,
    ScannedRulesRead,
    ScanPropertyRequest,
)

__all__ = [
    "CompanyRequest",
    "DataElementListRequest",
    "DataElementUsageRequest",
    "ExecutionOrderRead",
    "LibraryHistoryRequest",
    "PageLoadRead",
    "PropertyRequest",
    "PropertyScanResponse",
    "ReferenceRead",
    "ResourceItemRead",
    "RuleComponentRequest",
    "RuleLookupMeta",
    "RuleLookupRequest",
    "RuleLookupResponse",
    "RuleRequest",
    "RuleWithComponentsRead",
    "ScanPropertyRequest",
    "ScannedDataElementsRead",
    "ScannedPropertyRead",
    "ScannedRulesRead",
    "SearchMeta",
    "SearchRequest",
    "SearchResponse",
    "UnresolvedItemRead",
]
