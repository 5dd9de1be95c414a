"""Unit tests for the validation aggregator."""

from decimal import Decimal

import pytest

from contract_validation.comparison import ScoringContext, ValidationAggregator
from contract_validation.models.enums import DifferenceType, Severity, ValidationSection
from contract_validation.models.validation import SectionComparison, ValidationDifference


def _difference(category, field, type_, severity):
    return ValidationDifference(
        category=category,
        field=field,
        type=type_,
        database_value=None,
        document_value=None,
        description=f"{category} {field}",
        severity=severity,
    )


class TestValidationAggregator:
    """Tests for ValidationAggregator.build_summary."""

    @pytest.fixture
    def aggregator(self):
        return ValidationAggregator()

    def test_empty_sections(self, aggregator):
        """No fields at all gives zero percent and empty sections."""
        summary = aggregator.build_summary({}, ScoringContext())

        assert summary.match_percentage == Decimal("0")
        assert summary.total_fields_checked == 0
        assert summary.differences == []
        assert [s.section_name for s in summary.sections] == [
            "Contract Info",
            "Locations",
            "Shift Schedules",
            "Public Holidays",
            "Working Conditions",
        ]
        assert all(s.total_fields == 0 for s in summary.sections)

    def test_overall_percentage_uses_grand_totals(self, aggregator):
        """The overall percentage is not an average of section percentages."""
        ctx = ScoringContext(total_fields=4, matched_fields=1)
        sections = {
            ValidationSection.CONTRACT_INFO: SectionComparison(
                "Contract Info", Decimal("100.00"), 1, 1
            ),
            ValidationSection.LOCATIONS: SectionComparison("Locations", Decimal("0.00"), 3, 0),
        }

        summary = aggregator.build_summary(sections, ctx)

        assert summary.match_percentage == Decimal("25.00")
        assert summary.contract_info is sections[ValidationSection.CONTRACT_INFO]

    def test_overall_percentage_rounds_half_to_even(self, aggregator):
        """An exact midpoint such as 1/32 rounds to the even hundredth."""
        summary = aggregator.build_summary({}, ScoringContext(total_fields=32, matched_fields=1))

        assert summary.match_percentage == Decimal("3.12")

    def test_counts_by_difference_type(self, aggregator):
        """Mismatched, missing and extra counts come from the differences."""
        ctx = ScoringContext(differences=[
            _difference("Locations", "Kho A", DifferenceType.MISSING, Severity.HIGH),
            _difference("Contract Info", "End Date", DifferenceType.MISMATCH, Severity.HIGH),
            _difference("Public Holidays", "Quốc khánh", DifferenceType.EXTRA, Severity.LOW),
            _difference("Locations", "Kho B", DifferenceType.EXTRA, Severity.MEDIUM),
        ])

        summary = aggregator.build_summary({}, ctx)

        assert summary.mismatched_fields == 1
        assert summary.missing_in_document == 1
        assert summary.extra_in_document == 2

    def test_differences_sorted_by_severity_then_category_then_field(self, aggregator):
        """High severity first, then category and field alphabetically."""
        ctx = ScoringContext(differences=[
            _difference("Public Holidays", "Quốc khánh", DifferenceType.EXTRA, Severity.LOW),
            _difference("Locations", "Kho B", DifferenceType.EXTRA, Severity.MEDIUM),
            _difference("Locations", "Kho A", DifferenceType.MISSING, Severity.HIGH),
            _difference("Contract Info", "Start Date", DifferenceType.MISMATCH, Severity.HIGH),
            _difference("Contract Info", "End Date", DifferenceType.MISMATCH, Severity.HIGH),
        ])

        summary = aggregator.build_summary({}, ctx)

        assert [(d.severity, d.category, d.field) for d in summary.differences] == [
            (Severity.HIGH, "Contract Info", "End Date"),
            (Severity.HIGH, "Contract Info", "Start Date"),
            (Severity.HIGH, "Locations", "Kho A"),
            (Severity.MEDIUM, "Locations", "Kho B"),
            (Severity.LOW, "Public Holidays", "Quốc khánh"),
        ]

    def test_working_conditions_is_always_empty(self, aggregator):
        """The working conditions section is present but has no fields."""
        summary = aggregator.build_summary({}, ScoringContext(total_fields=2, matched_fields=2))

        assert summary.working_conditions.section_name == "Working Conditions"
        assert summary.working_conditions.fields == []
        assert summary.match_percentage == Decimal("100.00")
