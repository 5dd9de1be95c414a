"""JSON serialization of validation results.

Keys use the camelCase wire names of the contracts API. Decimals are
emitted as floats and enums by value.
"""

import json
from typing import Any, Dict, Optional

from .models.validation import (
    FieldComparison,
    SectionComparison,
    ValidateContractResult,
    ValidationDifference,
    ValidationSummary,
)


def field_to_dict(comparison: FieldComparison) -> Dict[str, Any]:
    return {
        "fieldName": comparison.field_name,
        "databaseValue": comparison.database_value,
        "documentValue": comparison.document_value,
        "isMatch": comparison.is_match,
        "difference": comparison.difference,
    }


def section_to_dict(section: SectionComparison) -> Dict[str, Any]:
    return {
        "sectionName": section.section_name,
        "matchPercentage": float(section.match_percentage),
        "totalFields": section.total_fields,
        "matchedFields": section.matched_fields,
        "fields": [field_to_dict(f) for f in section.fields],
    }


def difference_to_dict(difference: ValidationDifference) -> Dict[str, Any]:
    return {
        "category": difference.category,
        "field": difference.field,
        "type": difference.type.value,
        "databaseValue": difference.database_value,
        "documentValue": difference.document_value,
        "description": difference.description,
        "severity": difference.severity.value,
    }


def summary_to_dict(summary: ValidationSummary) -> Dict[str, Any]:
    """Convert a ValidationSummary to a JSON-ready dictionary."""
    return {
        "matchPercentage": float(summary.match_percentage),
        "totalFieldsChecked": summary.total_fields_checked,
        "matchedFields": summary.matched_fields,
        "mismatchedFields": summary.mismatched_fields,
        "missingInDocument": summary.missing_in_document,
        "extraInDocument": summary.extra_in_document,
        "contractInfo": section_to_dict(summary.contract_info),
        "locations": section_to_dict(summary.locations),
        "shiftSchedules": section_to_dict(summary.shift_schedules),
        "publicHolidays": section_to_dict(summary.public_holidays),
        "workingConditions": section_to_dict(summary.working_conditions),
        "differences": [difference_to_dict(d) for d in summary.differences],
    }


def result_to_dict(result: ValidateContractResult) -> Dict[str, Any]:
    """
    Convert a ValidateContractResult to a JSON-ready dictionary.

    ``errorType`` is null on success.
    """
    summary: Optional[Dict[str, Any]] = None
    if result.summary is not None:
        summary = summary_to_dict(result.summary)
    return {
        "success": result.success,
        "errorMessage": result.error_message,
        "errorType": result.error_type.value if result.error_type else None,
        "summary": summary,
    }


def serialize_result(result: ValidateContractResult, indent: Optional[int] = 2) -> str:
    """Serialize a ValidateContractResult to a JSON string."""
    return json.dumps(result_to_dict(result), ensure_ascii=False, indent=indent)
