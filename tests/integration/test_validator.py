"""Integration tests for end-to-end contract validation."""

import io
import uuid
from datetime import date
from decimal import ROUND_HALF_EVEN, Decimal
from unittest.mock import Mock

import pytest

from contract_validation import ContractValidator, InMemoryContractRepository
from contract_validation.config import ValidatorConfig
from contract_validation.models.enums import DifferenceType, Severity, ValidationErrorType
from contract_validation.models.extraction import ExtractedContractInfo
from contract_validation.models.records import ContractRecord

from conftest import SAMPLE_CONTRACT_LINES, build_docx


def _replace(lines, old, new):
    return [new if line == old else line for line in lines]


def _without(lines, unwanted):
    return [line for line in lines if line != unwanted]


class TrackingStream(io.BytesIO):
    """BytesIO that records whether close() was called."""

    closed_by_caller = False

    def close(self):
        self.closed_by_caller = True
        super().close()


def _tracking(stream):
    return TrackingStream(stream.getvalue())


@pytest.fixture
def repository(contract, customer, locations, shift_schedules, holidays):
    repo = InMemoryContractRepository()
    repo.add_contract(contract, customer, locations, shift_schedules)
    repo.add_holidays(holidays)
    return repo


@pytest.fixture
def validator(repository):
    return ContractValidator(repository)


@pytest.fixture
def bare_contract():
    """A contract with no customer, locations, shifts or holidays."""
    return ContractRecord(
        id=uuid.uuid4(),
        contract_number="05/HĐLĐ/2025",
        start_date=date(2025, 1, 1),
        end_date=date(2025, 12, 31),
    )


@pytest.fixture
def bare_validator(bare_contract):
    repo = InMemoryContractRepository()
    repo.add_contract(bare_contract)
    return ContractValidator(repo)


def _assert_consistent_totals(summary):
    sections = summary.sections
    assert Decimal("0") <= summary.match_percentage <= Decimal("100")
    if summary.total_fields_checked:
        expected = (
            Decimal(summary.matched_fields) * 100 / Decimal(summary.total_fields_checked)
        ).quantize(Decimal("0.01"), rounding=ROUND_HALF_EVEN)
        assert summary.match_percentage == expected
    else:
        assert summary.match_percentage == Decimal("0")
    for section in sections:
        assert section.matched_fields <= section.total_fields
        assert section.total_fields == len(section.fields)
    assert sum(s.total_fields for s in sections) == summary.total_fields_checked
    assert sum(s.matched_fields for s in sections) == summary.matched_fields


class TestScenarios:
    """End-to-end validation scenarios."""

    def test_perfect_match(self, validator, contract, sample_docx):
        """A document agreeing with the stored contract matches fully."""
        result = validator.validate(contract.id, sample_docx, "contract.docx")

        assert result.success
        assert result.error_message is None
        summary = result.summary
        assert summary.contract_info.matched_fields == summary.contract_info.total_fields == 4
        assert summary.locations.matched_fields == 2
        assert summary.shift_schedules.matched_fields == 2
        assert summary.public_holidays.matched_fields == 8
        assert summary.total_fields_checked == summary.matched_fields == 16
        assert summary.match_percentage == Decimal("100.00")
        assert summary.differences == []
        _assert_consistent_totals(summary)

    def test_contract_number_mismatch(self, validator, contract):
        """A different contract number gives exactly one high mismatch."""
        lines = _replace(SAMPLE_CONTRACT_LINES, "Số 05/HĐLĐ/2025", "Số 06/HĐLĐ/2025")

        result = validator.validate(contract.id, build_docx(lines), "contract.docx")

        differences = result.summary.differences
        assert len(differences) == 1
        assert differences[0].category == "Contract Info"
        assert differences[0].type == DifferenceType.MISMATCH
        assert differences[0].severity == Severity.HIGH
        assert result.summary.mismatched_fields == 1
        _assert_consistent_totals(result.summary)

    def test_missing_location(self, validator, contract):
        """A stored location absent from the document is reported missing."""
        lines = _without(SAMPLE_CONTRACT_LINES, "Địa điểm: Kho A")

        result = validator.validate(contract.id, build_docx(lines), "contract.docx")

        summary = result.summary
        location_fields = summary.locations.fields
        assert len(location_fields) == 1
        assert not location_fields[0].is_match
        assert [(d.type, d.severity, d.field) for d in summary.differences] == [
            (DifferenceType.MISSING, Severity.HIGH, "Kho A"),
        ]
        assert summary.missing_in_document == 1
        assert summary.matched_fields == 14
        assert summary.total_fields_checked == 15
        _assert_consistent_totals(summary)

    def test_extra_holiday_only(self, bare_validator, bare_contract):
        """A document-only National Day is one low extra and no field."""
        lines = [
            "Số 05/HĐLĐ/2025",
            "ĐIỀU 2: THỜI HẠN",
            "Từ 01/01/2025 đến 31/12/2025",
            "ĐIỀU 3: NGÀY NGHỈ",
            "3.4 Ngày lễ",
            "Ngày Quốc khánh 02/09/2025",
        ]

        result = bare_validator.validate(bare_contract.id, build_docx(lines), "contract.docx")

        summary = result.summary
        assert [(d.type, d.severity) for d in summary.differences] == [
            (DifferenceType.EXTRA, Severity.LOW),
        ]
        assert summary.extra_in_document == 1
        assert summary.public_holidays.fields == []
        assert summary.total_fields_checked == summary.matched_fields == 3
        _assert_consistent_totals(summary)

    def test_unsupported_extension(self, validator, contract, sample_docx):
        """A .pdf upload is rejected without a summary."""
        result = validator.validate(contract.id, sample_docx, "contract.pdf")

        assert not result.success
        assert result.error_type == ValidationErrorType.UNSUPPORTED_FORMAT
        assert result.summary is None
        assert ".pdf" in result.error_message


class TestBoundaries:
    """Boundary behaviour of the validator."""

    def test_empty_sections(self, bare_validator, bare_contract):
        """No stored locations, shifts or holidays give empty sections."""
        lines = ["Số 05/HĐLĐ/2025", "ĐIỀU 2: từ 01/01/2025 đến 31/12/2025"]

        result = bare_validator.validate(bare_contract.id, build_docx(lines), "contract.docx")

        summary = result.summary
        for section in (summary.locations, summary.shift_schedules, summary.public_holidays):
            assert section.total_fields == 0
            assert section.match_percentage == Decimal("0")
        assert summary.differences == []
        assert summary.match_percentage == Decimal("100.00")

    def test_low_match_is_still_success(self, validator, contract):
        """A document matching nothing is a successful 0% validation."""
        result = validator.validate(
            contract.id, build_docx(["Số 99/XX/2030", "ĐIỀU 2: 01/01/2030 - 02/02/2031"]), "a.docx"
        )

        assert result.success
        assert result.summary.match_percentage < Decimal("50")
        _assert_consistent_totals(result.summary)

    def test_idempotent(self, validator, contract, sample_docx):
        """Validating the same bytes twice yields the same summary."""
        content = sample_docx.getvalue()

        first = validator.validate(contract.id, io.BytesIO(content), "contract.docx")
        second = validator.validate(contract.id, io.BytesIO(content), "contract.docx")

        assert first.summary == second.summary

    def test_stricter_config_changes_shift_matching(self, repository, contract):
        """Configured tolerances reach the comparator."""
        lines = _replace(SAMPLE_CONTRACT_LINES, "Ca sáng: 06:00 - 14:00", "Ca sáng: 06:15 - 14:00")
        validator = ContractValidator(repository, config=ValidatorConfig(shift_minutes_tolerance=10))

        result = validator.validate(contract.id, build_docx(lines), "contract.docx")

        assert [d.field for d in result.summary.differences] == ["Ca sáng"]


class TestFailures:
    """Failures are returned as results, never raised."""

    def test_missing_stream(self, validator, contract):
        result = validator.validate(contract.id, None, "contract.docx")

        assert result.error_type == ValidationErrorType.INVALID_INPUT
        assert result.error_message == "Document file is required for validation"

    def test_missing_filename(self, validator, contract, sample_docx):
        result = validator.validate(contract.id, sample_docx, "")

        assert result.error_type == ValidationErrorType.INVALID_INPUT

    def test_unknown_contract(self, validator, sample_docx):
        """An unknown id is reported as not found."""
        contract_id = uuid.uuid4()

        result = validator.validate(contract_id, sample_docx, "contract.docx")

        assert result.error_type == ValidationErrorType.NOT_FOUND
        assert result.error_message == f"Contract with ID {contract_id} not found"

    def test_corrupted_document(self, validator, contract):
        """Unreadable bytes are an extraction failure."""
        result = validator.validate(contract.id, io.BytesIO(b"garbage"), "contract.docx")

        assert result.error_type == ValidationErrorType.EXTRACTION_FAILED
        assert result.error_message.startswith("Failed to extract text from document: ")

    def test_empty_document(self, validator, contract):
        """A document with only blank paragraphs is reported empty."""
        result = validator.validate(contract.id, build_docx(["", "   "]), "contract.docx")

        assert result.error_type == ValidationErrorType.EMPTY_DOCUMENT
        assert result.error_message == "Document appears to be empty or unreadable"

    def test_unexpected_error(self, contract, sample_docx):
        """Repository failures become validation errors."""
        repository = Mock()
        repository.load_snapshot.side_effect = RuntimeError("connection refused")
        validator = ContractValidator(repository)

        result = validator.validate(contract.id, sample_docx, "contract.docx")

        assert not result.success
        assert result.error_type == ValidationErrorType.VALIDATION_ERROR
        assert result.error_message == "Validation error: connection refused"

    def test_field_extractor_failure(self, repository, contract, sample_docx):
        """Errors from a custom field extractor are caught."""
        field_extractor = Mock()
        field_extractor.extract.side_effect = ValueError("bad pattern")
        validator = ContractValidator(repository, field_extractor=field_extractor)

        result = validator.validate(contract.id, sample_docx, "contract.docx")

        assert result.error_message == "Validation error: bad pattern"

    @pytest.mark.parametrize("filename", ["contract.docx", "contract.pdf"])
    def test_stream_is_closed(self, validator, contract, sample_docx, filename):
        """The document stream is closed on success and on failure."""
        stream = _tracking(sample_docx)

        validator.validate(contract.id, stream, filename)

        assert stream.closed_by_caller

    def test_stream_closed_for_unknown_contract(self, validator, sample_docx):
        stream = _tracking(sample_docx)

        validator.validate(uuid.uuid4(), stream, "contract.docx")

        assert stream.closed_by_caller

    def test_custom_field_extractor_is_used(self, repository, contract, sample_docx):
        """An injected field extractor replaces the default."""
        field_extractor = Mock()
        field_extractor.extract.return_value = ExtractedContractInfo(contract_number="05/HĐLĐ/2025")
        validator = ContractValidator(repository, field_extractor=field_extractor)

        result = validator.validate(contract.id, sample_docx, "contract.docx")

        field_extractor.extract.assert_called_once()
        assert result.summary.locations.fields[0].difference == "Missing in document"
        assert result.summary.contract_info.matched_fields == 3
