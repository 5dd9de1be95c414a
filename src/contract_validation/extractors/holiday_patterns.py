"""Public holiday pattern matching for the holiday clause (3.4) of ĐIỀU 3.

Tết Nguyên Đán is stated as a date range and expands to one holiday per
day. The other national holidays are stated as single dates.
"""

import logging
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import List, Optional

from ..models.extraction import ExtractedHoliday
from .contract_patterns import isolate_clause, parse_date_token


logger = logging.getLogger(__name__)


TET_HOLIDAY_NAME = "Tết Nguyên Đán"
DEFAULT_WINDOW_CHARS = 3000

HOLIDAY_SECTION_PATTERN = re.compile(
    r"3\.4\.?\s+[^\r\n]*(?:Ngày\s*lễ|Tết)", re.IGNORECASE
)

# Ordered fallbacks; the first one yielding at least two dates wins.
TET_RANGE_PATTERNS = [
    re.compile(p, re.IGNORECASE | re.DOTALL)
    for p in (
        r"Tết\s+Nguy[eê]n\s+[ĐđDd][áaA]n\s+(\d{4})[:\s,]*.*?(\d{1,2}/\d{1,2}/\d{4})"
        r".*?(?:đến|[-–])\s*(?:hết\s+)?.*?(\d{1,2}/\d{1,2}/\d{4})",
        r"Tết\s+Nguy[eê]n\s+[ĐđDd][áaA]n[:\s,]*.*?(\d{1,2}/01/\d{4}|\d{1,2}/02/\d{4})"
        r".*?(?:đến|[-–])\s*(?:hết\s+)?.*?(\d{1,2}/01/\d{4}|\d{1,2}/02/\d{4})",
        r"Tết\s+(?:âm\s+lịch|Nguy[eê]n\s+[ĐđDd][áaA]n)[:\s,]*.*?(\d{1,2}/\d{1,2}/\d{4})"
        r".*?(?:đến|[-–]).*?(\d{1,2}/\d{1,2}/\d{4})",
    )
]


@dataclass
class HolidayPattern:
    """Pattern definition for a single-date national holiday."""
    holiday_name: str
    pattern: re.Pattern

    def extract(self, text: str) -> Optional[ExtractedHoliday]:
        """Return the holiday if the pattern finds a valid date in text."""
        match = self.pattern.search(text)
        if not match:
            return None
        holiday_date = parse_date_token(match.group(1))
        if holiday_date is None:
            return None
        return ExtractedHoliday(holiday_date=holiday_date, holiday_name=self.holiday_name)


SINGLE_DATE_HOLIDAYS = [
    HolidayPattern(
        holiday_name="Giỗ Tổ Hùng Vương",
        pattern=re.compile(r"Giỗ\s+Tổ\s+Hùng\s+Vương.*?(\d{1,2}/\d{1,2}/\d{4})", re.IGNORECASE),
    ),
    HolidayPattern(
        holiday_name="Ngày Giải phóng miền Nam",
        pattern=re.compile(r"(?:30/4|Giải\s*phóng).*?(\d{1,2}/04/\d{4})", re.IGNORECASE),
    ),
    HolidayPattern(
        holiday_name="Ngày Quốc tế Lao động",
        pattern=re.compile(r"(?:01/5|1/5|Lao\s*động).*?(\d{1,2}/05/\d{4})", re.IGNORECASE),
    ),
    HolidayPattern(
        holiday_name="Ngày Quốc khánh",
        pattern=re.compile(r"Quốc\s*khánh.*?(\d{1,2}/09/\d{4})", re.IGNORECASE),
    ),
    HolidayPattern(
        holiday_name="Tết Dương lịch",
        pattern=re.compile(r"Tết\s+Dương\s+lịch.*?(\d{1,2}/01/\d{4})", re.IGNORECASE),
    ),
]


def isolate_holiday_section(text: str, window_chars: int = DEFAULT_WINDOW_CHARS) -> Optional[str]:
    """
    Return up to ``window_chars`` characters of ĐIỀU 3 starting at clause 3.4.

    Returns None when ĐIỀU 3 or its holiday clause is absent.
    """
    clause = isolate_clause(text, 3)
    if clause is None:
        logger.warning("ĐIỀU 3 not found for holiday extraction")
        return None

    match = HOLIDAY_SECTION_PATTERN.search(clause)
    if not match:
        logger.warning("Section 3.4 (holidays) not found")
        return None

    return clause[match.start():match.start() + window_chars]


def extract_tet_holidays(section: str) -> List[ExtractedHoliday]:
    """
    Expand the Tết date range into one holiday per calendar day.

    Only the first pattern that yields at least two parseable dates is
    used; later patterns are skipped.
    """
    for pattern in TET_RANGE_PATTERNS:
        match = pattern.search(section)
        if not match:
            continue

        tet_dates = []
        for group in match.groups():
            value = (group or "").strip()
            if "/" not in value:
                continue
            parsed = parse_date_token(value)
            if parsed is not None:
                tet_dates.append(parsed)

        if len(tet_dates) < 2:
            continue

        tet_dates.sort()
        tet_start, tet_end = tet_dates[0], tet_dates[-1]
        total_days = (tet_end - tet_start).days + 1

        holidays = []
        for offset in range(total_days):
            day_number = offset + 1
            holidays.append(ExtractedHoliday(
                holiday_date=tet_start + timedelta(days=offset),
                holiday_name=(
                    TET_HOLIDAY_NAME if day_number == 1
                    else f"{TET_HOLIDAY_NAME} (Ngày {day_number})"
                ),
                is_tet_period=True,
                is_tet_holiday=True,
                tet_day_number=day_number,
                holiday_start_date=tet_start,
                holiday_end_date=tet_end,
                total_holiday_days=total_days,
            ))

        logger.info(
            f"Extracted Tết: {total_days} days "
            f"({tet_start:%d/%m/%Y} - {tet_end:%d/%m/%Y})"
        )
        return holidays

    return []


def extract_public_holidays(
    text: str, window_chars: int = DEFAULT_WINDOW_CHARS
) -> List[ExtractedHoliday]:
    """Extract Tết days and the single-date national holidays from ĐIỀU 3."""
    section = isolate_holiday_section(text, window_chars)
    if section is None:
        return []

    holidays = extract_tet_holidays(section)
    for holiday_pattern in SINGLE_DATE_HOLIDAYS:
        holiday = holiday_pattern.extract(section)
        if holiday is not None:
            holidays.append(holiday)

    return holidays

