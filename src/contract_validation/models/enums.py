"""Enumerations for the Contract Validation System."""

from enum import Enum


class DocumentType(Enum):
    """Document format types supported by the text extractor."""
    WORD = "docx"


class DifferenceType(Enum):
    """Kinds of discrepancy between stored records and a document."""
    MISMATCH = "mismatch"
    MISSING = "missing"
    EXTRA = "extra"


class Severity(Enum):
    """
    Severity of a validation difference.

    Differences are ordered by ``rank``, not by the string values.
    """
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {
    Severity.LOW: 1,
    Severity.MEDIUM: 2,
    Severity.HIGH: 3,
}


class ValidationSection(Enum):
    """Logical sections of a contract that are compared."""
    CONTRACT_INFO = "Contract Info"
    LOCATIONS = "Locations"
    SHIFT_SCHEDULES = "Shift Schedules"
    PUBLIC_HOLIDAYS = "Public Holidays"
    WORKING_CONDITIONS = "Working Conditions"


class ValidationErrorType(Enum):
    """Failure classes reported by the validator instead of raising."""
    NOT_FOUND = "not_found"
    INVALID_INPUT = "invalid_input"
    UNSUPPORTED_FORMAT = "unsupported_format"
    EXTRACTION_FAILED = "extraction_failed"
    EMPTY_DOCUMENT = "empty_document"
    VALIDATION_ERROR = "validation_error"
