"""Validation aggregator for the Contract Validation System."""

from typing import Dict

from ..models.enums import DifferenceType, ValidationSection
from ..models.validation import SectionComparison, ValidationSummary
from .record_comparator import ScoringContext
from .text_utils import percentage


class ValidationAggregator:
    """
    Combines section comparisons into a single ValidationSummary.

    The overall percentage is taken from the grand totals in the scoring
    context, not averaged over sections.
    """

    def build_summary(
        self,
        sections: Dict[ValidationSection, SectionComparison],
        ctx: ScoringContext,
    ) -> ValidationSummary:
        """
        Build the summary for one validation call.

        Args:
            sections: Section comparisons keyed by section.
            ctx: Scoring context the sections were computed with.

        Returns:
            ValidationSummary with counts, sections and sorted differences.
        """
        differences = sorted(
            ctx.differences,
            key=lambda d: (-d.severity.rank, d.category, d.field),
        )

        def section(name: ValidationSection) -> SectionComparison:
            return sections.get(name) or SectionComparison(section_name=name.value)

        return ValidationSummary(
            match_percentage=percentage(ctx.matched_fields, ctx.total_fields),
            total_fields_checked=ctx.total_fields,
            matched_fields=ctx.matched_fields,
            mismatched_fields=_count(differences, DifferenceType.MISMATCH),
            missing_in_document=_count(differences, DifferenceType.MISSING),
            extra_in_document=_count(differences, DifferenceType.EXTRA),
            contract_info=section(ValidationSection.CONTRACT_INFO),
            locations=section(ValidationSection.LOCATIONS),
            shift_schedules=section(ValidationSection.SHIFT_SCHEDULES),
            public_holidays=section(ValidationSection.PUBLIC_HOLIDAYS),
            working_conditions=section(ValidationSection.WORKING_CONDITIONS),
            differences=differences,
        )


def _count(differences, difference_type: DifferenceType) -> int:
    return sum(1 for d in differences if d.type == difference_type)
