"""Contract field extractor for the Contract Validation System.

This module implements the IFieldExtractor interface by composing the
pattern rules in a fixed order over the full document text.
"""

import logging
import unicodedata
from typing import Optional

from ..interfaces.extractor import IFieldExtractor
from ..models.extraction import ExtractedContractInfo
from .contract_patterns import (
    extract_contract_dates,
    extract_contract_number,
    extract_customer_name,
    extract_locations,
    extract_shifts,
)
from .holiday_patterns import DEFAULT_WINDOW_CHARS, extract_public_holidays


logger = logging.getLogger(__name__)


class ContractFieldExtractor(IFieldExtractor):
    """
    Rule-based extractor for Vietnamese security service contracts.

    Recovers the contract number, contract period, party A name, guarded
    location, shift windows and public holidays. Extraction is
    best-effort; fields that cannot be found are left empty.
    """

    def __init__(self, holiday_window_chars: Optional[int] = None):
        """
        Initialize the extractor.

        Args:
            holiday_window_chars: How many characters after the start of
                clause 3.4 are searched for holidays.
        """
        self._holiday_window_chars = holiday_window_chars or DEFAULT_WINDOW_CHARS

    def extract(self, text: str) -> ExtractedContractInfo:
        """
        Extract structured contract fields from document text.

        Args:
            text: Full plain text of the contract document.

        Returns:
            ExtractedContractInfo with whatever fields were recognized.
        """
        text = unicodedata.normalize("NFC", text or "")
        extracted = ExtractedContractInfo()

        extracted.contract_number = extract_contract_number(text)
        logger.info(f"Extracted Contract Number: {extracted.contract_number or 'N/A'}")

        start_date, end_date = extract_contract_dates(text)
        extracted.start_date = start_date
        extracted.end_date = end_date
        logger.info(
            f"Extracted Dates: {_format_date(start_date)} to {_format_date(end_date)}"
        )

        extracted.customer_name = extract_customer_name(text)
        logger.info(f"Extracted Customer Name: {extracted.customer_name or 'N/A'}")

        extracted.locations = extract_locations(text)
        logger.info(f"Extracted {len(extracted.locations)} locations")

        extracted.shifts = extract_shifts(text)
        logger.info(f"Extracted {len(extracted.shifts)} shifts")

        extracted.holidays = extract_public_holidays(text, self._holiday_window_chars)
        logger.info(f"Extracted {len(extracted.holidays)} holidays")

        return extracted


def _format_date(value) -> str:
    return value.strftime("%d/%m/%Y") if value else "N/A"
