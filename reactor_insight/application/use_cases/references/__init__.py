"""Use cases extracting data element references from rule components."""

from .extract_references import REFERENCE_PATTERN, extract_references
from .find_data_elements_used_in_rule import find_data_elements_used_in_rule

__all__ = ["REFERENCE_PATTERN", "extract_references", "find_data_elements_used_in_rule"]
