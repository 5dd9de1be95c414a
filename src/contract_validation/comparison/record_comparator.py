"""Record comparator for the Contract Validation System.

This module compares stored contract records with the values extracted
from a document, one section at a time. Every comparison call appends
its field comparisons to the section it returns and its discrepancies to
the shared ScoringContext.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional

from ..config.models import ValidatorConfig
from ..models.enums import DifferenceType, Severity, ValidationSection
from ..models.extraction import (
    ExtractedContractInfo,
    ExtractedHoliday,
    ExtractedLocation,
    ExtractedShift,
)
from ..models.records import (
    ContractRecord,
    CounterpartyRecord,
    HolidayRecord,
    LocationRequirement,
    ShiftScheduleRecord,
)
from ..models.validation import (
    FieldComparison,
    SectionComparison,
    ValidationDifference,
)
from .text_utils import contains_either, fold, percentage


MISSING_IN_DOCUMENT = "Missing in document"
TET_MARKER = "Tết"
SOLAR_NEW_YEAR_MARKER = "Tết Dương lịch"


@dataclass
class ScoringContext:
    """Running totals and differences for a single validation call."""
    total_fields: int = 0
    matched_fields: int = 0
    differences: List[ValidationDifference] = field(default_factory=list)

    def record(self, comparison: FieldComparison) -> FieldComparison:
        """Count a field comparison towards the grand totals."""
        self.total_fields += 1
        if comparison.is_match:
            self.matched_fields += 1
        return comparison

    def add_difference(self, difference: ValidationDifference) -> None:
        self.differences.append(difference)


def _iso(value: Optional[date]) -> Optional[str]:
    return value.strftime("%Y-%m-%d") if value else None


def _day_first(value: Optional[date]) -> Optional[str]:
    return value.strftime("%d/%m/%Y") if value else None


def _clock(value: time) -> str:
    return value.strftime("%H:%M")


def _as_date(value) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    return value


def _section(name: ValidationSection, fields: List[FieldComparison]) -> SectionComparison:
    matched = sum(1 for f in fields if f.is_match)
    return SectionComparison(
        section_name=name.value,
        match_percentage=percentage(matched, len(fields)),
        total_fields=len(fields),
        matched_fields=matched,
        fields=fields,
    )


class RecordComparator:
    """
    Compares stored contract data with extracted document values.

    Matching is deliberately lenient: a value that could not be extracted
    does not count against the document, and names match on containment.
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or ValidatorConfig()

    # =========================================================================
    # Contract info
    # =========================================================================

    def compare_contract_info(
        self,
        contract: ContractRecord,
        counterparty: Optional[CounterpartyRecord],
        extracted: ExtractedContractInfo,
        ctx: ScoringContext,
    ) -> SectionComparison:
        """
        Compare contract number, period dates and customer name.

        The customer name is only compared when both sides have one.
        """
        category = ValidationSection.CONTRACT_INFO.value
        fields: List[FieldComparison] = []

        doc_number = extracted.contract_number
        number_match = (
            not doc_number
            or contract.contract_number.casefold() == doc_number.casefold()
        )
        fields.append(ctx.record(FieldComparison(
            field_name="Contract Number",
            database_value=contract.contract_number,
            document_value=doc_number,
            is_match=number_match,
            difference=None if number_match else f"DB: {contract.contract_number}, Doc: {doc_number}",
        )))
        if not number_match:
            ctx.add_difference(ValidationDifference(
                category=category,
                field="Contract Number",
                type=DifferenceType.MISMATCH,
                database_value=contract.contract_number,
                document_value=doc_number,
                description=f"Contract number mismatch: DB={contract.contract_number} vs Doc={doc_number}",
                severity=Severity.HIGH,
            ))

        for label, db_value, doc_value in (
            ("Start Date", contract.start_date, extracted.start_date),
            ("End Date", contract.end_date, extracted.end_date),
        ):
            fields.append(self._compare_date(category, label, db_value, doc_value, ctx))

        if counterparty is not None and extracted.customer_name:
            db_name = counterparty.company_name
            doc_name = extracted.customer_name
            name_match = contains_either(db_name, doc_name)
            fields.append(ctx.record(FieldComparison(
                field_name="Customer Name",
                database_value=db_name,
                document_value=doc_name,
                is_match=name_match,
                difference=None if name_match else f"DB: {db_name}, Doc: {doc_name}",
            )))
            if not name_match:
                ctx.add_difference(ValidationDifference(
                    category=category,
                    field="Customer Name",
                    type=DifferenceType.MISMATCH,
                    database_value=db_name,
                    document_value=doc_name,
                    description=f"Customer name mismatch: DB={db_name} vs Doc={doc_name}",
                    severity=Severity.MEDIUM,
                ))

        return _section(ValidationSection.CONTRACT_INFO, fields)

    def _compare_date(
        self,
        category: str,
        label: str,
        db_value,
        doc_value: Optional[date],
        ctx: ScoringContext,
    ) -> FieldComparison:
        db_date = _as_date(db_value)
        doc_date = _as_date(doc_value)
        is_match = doc_date is None or db_date == doc_date

        comparison = ctx.record(FieldComparison(
            field_name=label,
            database_value=_iso(db_date),
            document_value=_iso(doc_date),
            is_match=is_match,
            difference=None if is_match else f"DB: {_iso(db_date)}, Doc: {_iso(doc_date)}",
        ))
        if not is_match:
            ctx.add_difference(ValidationDifference(
                category=category,
                field=label,
                type=DifferenceType.MISMATCH,
                database_value=_iso(db_date),
                document_value=_iso(doc_date),
                description=f"{label.capitalize()} mismatch: DB={_iso(db_date)} vs Doc={_iso(doc_date)}",
                severity=Severity.HIGH,
            ))
        return comparison

    # =========================================================================
    # Locations
    # =========================================================================

    def compare_locations(
        self,
        requirements: List[LocationRequirement],
        extracted: List[ExtractedLocation],
        ctx: ScoringContext,
    ) -> SectionComparison:
        """
        Match each stored location to a document location by name.

        A matched location contributes a name field and a guard count field.
        Document locations with no stored counterpart are reported as extra
        without adding fields.
        """
        category = ValidationSection.LOCATIONS.value
        fields: List[FieldComparison] = []

        for requirement in requirements:
            db_name = requirement.location_name
            db_guards = requirement.guards_required
            doc_location = next(
                (l for l in extracted if contains_either(l.location_name, db_name)),
                None,
            )

            if doc_location is None:
                fields.append(ctx.record(FieldComparison(
                    field_name=f"Location Name: {db_name}",
                    database_value=db_name,
                    document_value=None,
                    is_match=False,
                    difference=MISSING_IN_DOCUMENT,
                )))
                ctx.add_difference(ValidationDifference(
                    category=category,
                    field=db_name,
                    type=DifferenceType.MISSING,
                    database_value=db_name,
                    document_value=None,
                    description=f"Location '{db_name}' found in DB but not in document",
                    severity=Severity.HIGH,
                ))
                continue

            fields.append(ctx.record(FieldComparison(
                field_name=f"Location Name: {db_name}",
                database_value=db_name,
                document_value=doc_location.location_name,
                is_match=True,
            )))

            doc_guards = doc_location.guards_required
            guards_match = db_guards == doc_guards
            fields.append(ctx.record(FieldComparison(
                field_name=f"Guards at {db_name}",
                database_value=f"{db_guards} guards",
                document_value=f"{doc_guards} guards",
                is_match=guards_match,
                difference=None if guards_match else f"DB: {db_guards}, Doc: {doc_guards}",
            )))
            if not guards_match:
                ctx.add_difference(ValidationDifference(
                    category=category,
                    field=f"{db_name} - Guards Required",
                    type=DifferenceType.MISMATCH,
                    database_value=str(db_guards),
                    document_value=str(doc_guards),
                    description=f"Guards count mismatch at '{db_name}': DB={db_guards} vs Doc={doc_guards}",
                    severity=Severity.MEDIUM,
                ))

        for doc_location in extracted:
            known = any(
                contains_either(r.location_name, doc_location.location_name)
                for r in requirements
            )
            if not known:
                ctx.add_difference(ValidationDifference(
                    category=category,
                    field=doc_location.location_name,
                    type=DifferenceType.EXTRA,
                    database_value=None,
                    document_value=f"{doc_location.location_name} ({doc_location.guards_required} guards)",
                    description=f"Location '{doc_location.location_name}' found in document but not in DB",
                    severity=Severity.MEDIUM,
                ))

        return _section(ValidationSection.LOCATIONS, fields)

    # =========================================================================
    # Shift schedules
    # =========================================================================

    def compare_shift_schedules(
        self,
        schedules: List[ShiftScheduleRecord],
        extracted: List[ExtractedShift],
        ctx: ScoringContext,
    ) -> SectionComparison:
        """Match each stored shift schedule to a document shift by time window."""
        category = ValidationSection.SHIFT_SCHEDULES.value
        fields: List[FieldComparison] = []

        for schedule in schedules:
            db_window = f"{_clock(schedule.shift_start_time)}-{_clock(schedule.shift_end_time)}"
            doc_shift = next(
                (s for s in extracted if self._shift_matches(schedule, s)),
                None,
            )

            if doc_shift is None:
                fields.append(ctx.record(FieldComparison(
                    field_name=f"Shift: {schedule.schedule_name}",
                    database_value=db_window,
                    document_value=None,
                    is_match=False,
                    difference=MISSING_IN_DOCUMENT,
                )))
                ctx.add_difference(ValidationDifference(
                    category=category,
                    field=schedule.schedule_name,
                    type=DifferenceType.MISSING,
                    database_value=db_window,
                    document_value=None,
                    description=(
                        f"Shift '{schedule.schedule_name}' ({db_window}) "
                        f"found in DB but not in document"
                    ),
                    severity=Severity.MEDIUM,
                ))
                continue

            if doc_shift.has_exact_times:
                doc_window = f"{_clock(doc_shift.start_time)}-{_clock(doc_shift.end_time)}"
            else:
                doc_window = f"{doc_shift.start_hour:02d}:00-{doc_shift.end_hour:02d}:00"

            fields.append(ctx.record(FieldComparison(
                field_name=f"Shift: {schedule.schedule_name}",
                database_value=db_window,
                document_value=doc_window,
                is_match=True,
            )))

        return _section(ValidationSection.SHIFT_SCHEDULES, fields)

    def _shift_matches(self, schedule: ShiftScheduleRecord, shift: ExtractedShift) -> bool:
        """
        Check whether a document shift covers a stored schedule.

        Exact times must agree within the minute tolerance at both ends;
        hour-only shifts within the hour tolerance. Differences are taken
        on the clock without wrapping around midnight.
        """
        if shift.has_exact_times:
            tolerance = self.config.shift_minutes_tolerance
            start_diff = abs(_minutes(shift.start_time) - _minutes(schedule.shift_start_time))
            end_diff = abs(_minutes(shift.end_time) - _minutes(schedule.shift_end_time))
            return start_diff <= tolerance and end_diff <= tolerance

        tolerance = self.config.shift_hours_tolerance
        return (
            abs(shift.start_hour - schedule.shift_start_time.hour) <= tolerance
            and abs(shift.end_hour - schedule.shift_end_time.hour) <= tolerance
        )

    # =========================================================================
    # Public holidays
    # =========================================================================

    def compare_public_holidays(
        self,
        holidays: List[HolidayRecord],
        extracted: List[ExtractedHoliday],
        ctx: ScoringContext,
    ) -> SectionComparison:
        """
        Match stored holidays in the contract period to document holidays.

        A document holiday on the same date is preferred; otherwise the
        first one matching by Tết flag or folded name is used. Stored solar
        new year entries that are not Tết days are not compared, but they
        still count as known when looking for extra document holidays.
        """
        category = ValidationSection.PUBLIC_HOLIDAYS.value
        fields: List[FieldComparison] = []

        for holiday in holidays:
            if SOLAR_NEW_YEAR_MARKER in holiday.holiday_name and not holiday.is_tet_holiday:
                continue

            db_date = _day_first(_as_date(holiday.holiday_date))
            doc_holiday = next(
                (h for h in extracted if h.holiday_date == _as_date(holiday.holiday_date)),
                None,
            )
            if doc_holiday is None:
                doc_holiday = next(
                    (h for h in extracted if _holiday_matches(holiday, h)),
                    None,
                )

            if doc_holiday is None:
                fields.append(ctx.record(FieldComparison(
                    field_name=f"Holiday: {holiday.holiday_name}",
                    database_value=db_date,
                    document_value=None,
                    is_match=False,
                    difference=MISSING_IN_DOCUMENT,
                )))
                ctx.add_difference(ValidationDifference(
                    category=category,
                    field=holiday.holiday_name,
                    type=DifferenceType.MISSING,
                    database_value=db_date,
                    document_value=None,
                    description=f"Holiday '{holiday.holiday_name}' ({db_date}) found in DB but not in document",
                    severity=Severity.HIGH if holiday.is_tet_holiday else Severity.MEDIUM,
                ))
                continue

            doc_date = _day_first(doc_holiday.holiday_date)
            dates_match = _as_date(holiday.holiday_date) == doc_holiday.holiday_date
            fields.append(ctx.record(FieldComparison(
                field_name=f"Holiday: {holiday.holiday_name}",
                database_value=db_date,
                document_value=doc_date,
                is_match=dates_match,
                difference=None if dates_match else f"DB: {db_date}, Doc: {doc_date}",
            )))
            if not dates_match:
                ctx.add_difference(ValidationDifference(
                    category=category,
                    field=holiday.holiday_name,
                    type=DifferenceType.MISMATCH,
                    database_value=db_date,
                    document_value=doc_date,
                    description=(
                        f"Holiday date mismatch for '{holiday.holiday_name}': "
                        f"DB={db_date} vs Doc={doc_date}"
                    ),
                    severity=Severity.MEDIUM,
                ))

        for doc_holiday in extracted:
            known = any(
                _as_date(h.holiday_date) == doc_holiday.holiday_date
                or contains_either(h.holiday_name, doc_holiday.holiday_name, fold=fold)
                for h in holidays
            )
            if not known:
                doc_date = _day_first(doc_holiday.holiday_date)
                ctx.add_difference(ValidationDifference(
                    category=category,
                    field=doc_holiday.holiday_name,
                    type=DifferenceType.EXTRA,
                    database_value=None,
                    document_value=doc_date,
                    description=f"Holiday '{doc_holiday.holiday_name}' ({doc_date}) found in document but not in DB",
                    severity=Severity.LOW,
                ))

        return _section(ValidationSection.PUBLIC_HOLIDAYS, fields)


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


def _holiday_matches(stored: HolidayRecord, document: ExtractedHoliday) -> bool:
    if (
        stored.is_tet_holiday
        and TET_MARKER in stored.holiday_name
        and TET_MARKER in document.holiday_name
    ):
        return True
    return contains_either(stored.holiday_name, document.holiday_name, fold=fold)
