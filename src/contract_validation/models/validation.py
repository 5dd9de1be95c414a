"""Validation result models for the Contract Validation System."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from .enums import DifferenceType, Severity, ValidationErrorType


@dataclass
class FieldComparison:
    """One compared data point between the stored record and the document."""
    field_name: str
    database_value: Optional[str]
    document_value: Optional[str]
    is_match: bool
    difference: Optional[str] = None


@dataclass
class ValidationDifference:
    """
    A reportable discrepancy between stored data and the document.

    Differences are independent of FieldComparison rows: extra entities
    found only in the document produce a difference with no field.
    """
    category: str
    field: str
    type: DifferenceType
    database_value: Optional[str]
    document_value: Optional[str]
    description: str
    severity: Severity = Severity.MEDIUM


@dataclass
class SectionComparison:
    """Aggregate of field comparisons for one logical section."""
    section_name: str = ""
    match_percentage: Decimal = Decimal("0")
    total_fields: int = 0
    matched_fields: int = 0
    fields: List[FieldComparison] = field(default_factory=list)


@dataclass
class ValidationSummary:
    """
    Top-level outcome of validating a document against a stored contract.

    ``match_percentage`` is computed over the grand totals, never as an
    average of section percentages.
    """
    match_percentage: Decimal = Decimal("0")
    total_fields_checked: int = 0
    matched_fields: int = 0
    mismatched_fields: int = 0
    missing_in_document: int = 0
    extra_in_document: int = 0
    contract_info: SectionComparison = field(default_factory=SectionComparison)
    locations: SectionComparison = field(default_factory=SectionComparison)
    shift_schedules: SectionComparison = field(default_factory=SectionComparison)
    public_holidays: SectionComparison = field(default_factory=SectionComparison)
    working_conditions: SectionComparison = field(default_factory=SectionComparison)
    differences: List[ValidationDifference] = field(default_factory=list)

    @property
    def sections(self) -> List[SectionComparison]:
        """Sections in reporting order."""
        return [
            self.contract_info,
            self.locations,
            self.shift_schedules,
            self.public_holidays,
            self.working_conditions,
        ]


@dataclass
class ValidateContractResult:
    """Outcome of a validation call: either a summary or an error message."""
    success: bool
    error_message: Optional[str] = None
    summary: Optional[ValidationSummary] = None
    error_type: Optional[ValidationErrorType] = None

    @classmethod
    def failure(
        cls, error_type: ValidationErrorType, message: str
    ) -> "ValidateContractResult":
        return cls(success=False, error_message=message, error_type=error_type)
