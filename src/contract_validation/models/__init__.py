"""Data models and enums for the Contract Validation System."""

from .enums import (
    DifferenceType,
    DocumentType,
    Severity,
    ValidationErrorType,
    ValidationSection,
)
from .records import (
    ContractRecord,
    ContractSnapshot,
    CounterpartyRecord,
    HolidayRecord,
    LocationRequirement,
    ShiftScheduleRecord,
)
from .extraction import (
    ExtractedContractInfo,
    ExtractedHoliday,
    ExtractedLocation,
    ExtractedShift,
)
from .validation import (
    FieldComparison,
    SectionComparison,
    ValidateContractResult,
    ValidationDifference,
    ValidationSummary,
)

__all__ = [
    # Enums
    "DifferenceType",
    "DocumentType",
    "Severity",
    "ValidationErrorType",
    "ValidationSection",
    # Stored records
    "ContractRecord",
    "ContractSnapshot",
    "CounterpartyRecord",
    "HolidayRecord",
    "LocationRequirement",
    "ShiftScheduleRecord",
    # Extraction models
    "ExtractedContractInfo",
    "ExtractedHoliday",
    "ExtractedLocation",
    "ExtractedShift",
    # Validation models
    "FieldComparison",
    "SectionComparison",
    "ValidateContractResult",
    "ValidationDifference",
    "ValidationSummary",
]
