"""Contract field extraction for the Contract Validation System."""

from .field_extractor import ContractFieldExtractor
from .contract_patterns import (
    extract_contract_dates,
    extract_contract_number,
    extract_customer_name,
    extract_locations,
    extract_shifts,
    isolate_clause,
)
from .holiday_patterns import extract_public_holidays, extract_tet_holidays

__all__ = [
    "ContractFieldExtractor",
    "extract_contract_dates",
    "extract_contract_number",
    "extract_customer_name",
    "extract_locations",
    "extract_shifts",
    "extract_public_holidays",
    "extract_tet_holidays",
    "isolate_clause",
]
