"""Contract validation entry point for the Contract Validation System.

This module wires the text extractor, field extractor, record comparator and
aggregator together to validate an uploaded contract document against the
stored contract.
"""

import logging
import time
import uuid
from typing import BinaryIO, Optional

from .comparison.aggregator import ValidationAggregator
from .comparison.record_comparator import RecordComparator, ScoringContext
from .config.models import ValidatorConfig
from .extractors.field_extractor import ContractFieldExtractor
from .interfaces.extractor import IDocumentTextExtractor, IFieldExtractor
from .interfaces.repository import IContractRepository
from .models.enums import ValidationErrorType, ValidationSection
from .models.validation import ValidateContractResult
from .parsers.exceptions import ParseError, UnsupportedFormatError
from .parsers.word_parser import DocxTextExtractor


logger = logging.getLogger(__name__)


class ContractValidator:
    """
    Validates contract documents against stored contract data.

    A validation never raises: every failure is reported through the
    returned ValidateContractResult. The validator closes the document
    stream it is given.
    """

    def __init__(
        self,
        repository: IContractRepository,
        text_extractor: Optional[IDocumentTextExtractor] = None,
        field_extractor: Optional[IFieldExtractor] = None,
        config: Optional[ValidatorConfig] = None,
    ):
        """
        Initialize the validator.

        Args:
            repository: Source of stored contract snapshots.
            text_extractor: Document text extractor. Defaults to DocxTextExtractor.
            field_extractor: Field extractor. Defaults to ContractFieldExtractor.
            config: Validator settings. Defaults to ValidatorConfig().
        """
        self.config = config or ValidatorConfig()
        self.repository = repository
        self.text_extractor = text_extractor or DocxTextExtractor(
            supported_extensions=self.config.supported_extensions
        )
        self.field_extractor = field_extractor or ContractFieldExtractor(
            holiday_window_chars=self.config.holiday_window_chars
        )
        self.comparator = RecordComparator(self.config)
        self.aggregator = ValidationAggregator()

    def validate(
        self,
        contract_id: uuid.UUID,
        document_stream: Optional[BinaryIO],
        filename: Optional[str],
    ) -> ValidateContractResult:
        """
        Validate a contract document against the stored contract.

        Args:
            contract_id: Identifier of the stored contract.
            document_stream: Binary stream of the uploaded document.
            filename: Original file name; its extension selects the format.

        Returns:
            ValidateContractResult with a summary on success, or an error
            type and message on failure.
        """
        start_time = time.time()
        try:
            if document_stream is None or not filename:
                return ValidateContractResult.failure(
                    ValidationErrorType.INVALID_INPUT,
                    "Document file is required for validation",
                )

            logger.info(f"Validating contract {contract_id} with document: {filename}")

            snapshot = self.repository.load_snapshot(contract_id)
            if snapshot is None:
                return ValidateContractResult.failure(
                    ValidationErrorType.NOT_FOUND,
                    f"Contract with ID {contract_id} not found",
                )

            try:
                text = self.text_extractor.extract(document_stream, filename)
            except UnsupportedFormatError as e:
                logger.warning(f"Unsupported document format: {e.message}")
                return ValidateContractResult.failure(
                    ValidationErrorType.UNSUPPORTED_FORMAT, e.message
                )
            except ParseError as e:
                logger.error(f"Failed to extract text from {filename}: {e}")
                return ValidateContractResult.failure(
                    ValidationErrorType.EXTRACTION_FAILED,
                    f"Failed to extract text from document: {e.message}",
                )

            if not text or not text.strip():
                return ValidateContractResult.failure(
                    ValidationErrorType.EMPTY_DOCUMENT,
                    "Document appears to be empty or unreadable",
                )

            extracted = self.field_extractor.extract(text)

            ctx = ScoringContext()
            sections = {
                ValidationSection.CONTRACT_INFO: self.comparator.compare_contract_info(
                    snapshot.contract, snapshot.counterparty, extracted, ctx
                ),
                ValidationSection.LOCATIONS: self.comparator.compare_locations(
                    snapshot.locations, extracted.locations, ctx
                ),
                ValidationSection.SHIFT_SCHEDULES: self.comparator.compare_shift_schedules(
                    snapshot.shift_schedules, extracted.shifts, ctx
                ),
                ValidationSection.PUBLIC_HOLIDAYS: self.comparator.compare_public_holidays(
                    snapshot.holidays, extracted.holidays, ctx
                ),
            }
            summary = self.aggregator.build_summary(sections, ctx)

            logger.info(
                f"Validation completed for contract {contract_id}: "
                f"{summary.match_percentage}% match "
                f"({summary.matched_fields}/{summary.total_fields_checked}), "
                f"{len(summary.differences)} differences in {time.time() - start_time:.2f}s"
            )
            return ValidateContractResult(success=True, summary=summary)

        except Exception as e:
            logger.exception(f"Error validating contract {contract_id}")
            return ValidateContractResult.failure(
                ValidationErrorType.VALIDATION_ERROR, f"Validation error: {e}"
            )

        finally:
            if document_stream is not None:
                document_stream.close()
