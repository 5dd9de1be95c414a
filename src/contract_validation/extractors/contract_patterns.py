"""Pattern rules for extracting contract fields from Vietnamese contract text.

Each rule is a pure function ``text -> value or None`` so it can be used and
tested on its own. Rules that depend on a numbered clause (ĐIỀU n) isolate
that clause first and only search inside it.
"""

import logging
import re
from datetime import date, time
from functools import lru_cache
from typing import List, Optional, Tuple

from ..models.extraction import ExtractedLocation, ExtractedShift


logger = logging.getLogger(__name__)


# Clause boundaries: "ĐIỀU n" up to the next "ĐIỀU n+1" or end of text.
_CLAUSE_TEMPLATE = r"ĐIỀU\s*{n}[:\.\s]+(.*?)(?=ĐIỀU\s*{next}|$)"

CONTRACT_NUMBER_PATTERN = re.compile(
    r"Số[\s:：]+([^\s]+(?:\s*/\s*[^\s]+)*)", re.IGNORECASE
)
CONTRACT_NUMBER_FALLBACK_PATTERN = re.compile(
    r"Hợp\s*đồng\s*(?:số|number)[\s:：]+([^\s]+)", re.IGNORECASE
)
_TRAILING_PUNCTUATION = re.compile(r"[,.\s]+$")

DATE_TOKEN_PATTERN = re.compile(r"\b(\d{1,2})([/\-])(\d{1,2})([/\-])(\d{4})\b")

# Uppercase Vietnamese letters allowed in a party name.
_VN_UPPER = (
    "A-ZÀÁẠẢÃÂẦẤẬẨẪĂẰẮẶẲẴÈÉẸẺẼÊỀẾỆỂỄÌÍỊỈĨÒÓỌỎÕÔỒỐỘỔỖƠỜỚỢỞỠ"
    "ÙÚỤỦŨƯỪỨỰỬỮỲÝỴỶỸĐ"
)
_PARTY_STOP = r"(?=\n|Địa\s*chỉ|Mã\s*số|Đại\s*diện|Điện\s*thoại|$)"
CUSTOMER_NAME_PATTERNS = [
    re.compile(rf"Bên\s+A[\s:：\-–]+([{_VN_UPPER}\s\.]+?){_PARTY_STOP}", re.MULTILINE),
    re.compile(rf"BÊN\s+A[\s:：\-–]+([{_VN_UPPER}\s\.]+?){_PARTY_STOP}", re.MULTILINE),
]

LOCATION_PATTERN = re.compile(r"Địa\s*điểm[:\s]+([^\n]+?)(?=\n|$)", re.IGNORECASE)
_LOCATION_TRAILER = re.compile(r"[\-,\s]+$")

# Most specific first; the first pattern that yields an integer wins.
GUARD_COUNT_PATTERNS = [
    re.compile(p, re.IGNORECASE)
    for p in (
        r"Số\s*lượng\s*[:\s]*(\d+)\s*\([^\)]+\)\s*(?:nhân\s*viên\s*)?\s*bảo\s*vệ",
        r"Số\s*lượng\s*(?:nhân\s*viên\s*)?\s*bảo\s*vệ\s*[:\s]*(\d+)",
        r"Số\s*lượng\s*[:\s]*(\d+)\s*(?:nhân\s*viên\s*)?\s*bảo\s*vệ",
        r"(\d+)\s*(?:nhân\s*viên\s*)?\s*bảo\s*vệ",
        r"bảo\s*vệ\s*[:\s]*(\d+)",
        r"(?:Guards|Guard)\s*(?:Required)?\s*[:\s]*(\d+)",
        r"(\d+)\s*(?:guards?|Guards?)",
    )
]

SHIFT_PATTERN = re.compile(
    r"Ca\s+(sáng|chiều|tối|đêm|[1-3])[:\s]*(\d{1,2})[:h](\d{2})\s*[-–]\s*(\d{1,2})[:h](\d{2})",
    re.IGNORECASE,
)


@lru_cache(maxsize=None)
def _clause_pattern(number: int) -> re.Pattern:
    return re.compile(
        _CLAUSE_TEMPLATE.format(n=number, next=number + 1),
        re.IGNORECASE | re.DOTALL,
    )


def isolate_clause(text: str, number: int) -> Optional[str]:
    """
    Return the text of clause ``ĐIỀU <number>`` including its marker.

    The clause ends right before ``ĐIỀU <number + 1>`` or at the end of the
    text. Returns None if the marker is absent.
    """
    match = _clause_pattern(number).search(text)
    return match.group(0) if match else None


def parse_day_first(day: str, month: str, year: str) -> Optional[date]:
    """Build a date from day/month/year strings, or None if it is impossible."""
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def parse_date_token(token: str) -> Optional[date]:
    """
    Parse ``d/M/yyyy`` or ``d-M-yyyy`` (one or two digit day and month).

    Both separators must be the same character.
    """
    match = DATE_TOKEN_PATTERN.fullmatch(token.strip())
    if not match or match.group(2) != match.group(4):
        return None
    return parse_day_first(match.group(1), match.group(3), match.group(5))


def extract_contract_number(text: str) -> Optional[str]:
    """
    Extract the contract number.

    "Số <value>" is accepted only when the value contains a slash, so that
    street numbers like "Số 5 Điện Biên Phủ" are not mistaken for contract
    numbers. Otherwise falls back to "Hợp đồng số <value>".
    """
    match = CONTRACT_NUMBER_PATTERN.search(text)
    if match and "/" in match.group(1):
        return _TRAILING_PUNCTUATION.sub("", match.group(1).strip())

    match = CONTRACT_NUMBER_FALLBACK_PATTERN.search(text)
    if match:
        return _TRAILING_PUNCTUATION.sub("", match.group(1).strip())

    return None


def extract_contract_dates(text: str) -> Tuple[Optional[date], Optional[date]]:
    """
    Extract the contract start and end dates from ĐIỀU 2.

    All date tokens in the clause (or the whole text when the clause is
    absent) are collected without de-duplication and sorted. The earliest
    is the start date, the latest the end date; a single date only sets
    the start date.
    """
    clause = isolate_clause(text, 2)
    if clause is not None:
        logger.info(f"Found ĐIỀU 2 section ({len(clause)} chars)")
    search_text = clause if clause is not None else text

    all_dates: List[date] = []
    for match in DATE_TOKEN_PATTERN.finditer(search_text):
        if match.group(2) != match.group(4):
            continue
        parsed = parse_day_first(match.group(1), match.group(3), match.group(5))
        if parsed is not None:
            all_dates.append(parsed)

    if len(all_dates) >= 2:
        all_dates.sort()
        return all_dates[0], all_dates[-1]
    if len(all_dates) == 1:
        return all_dates[0], None
    return None, None


def extract_customer_name(text: str) -> Optional[str]:
    """Extract the name of party A (Bên A) from ĐIỀU 1."""
    clause = isolate_clause(text, 1)
    search_text = clause if clause is not None else text

    for pattern in CUSTOMER_NAME_PATTERNS:
        match = pattern.search(search_text)
        if match:
            name = match.group(1).strip()
            name = re.sub(r"\s{2,}", " ", name)
            return name.rstrip(":").strip()

    return None


def extract_guard_count(text: str) -> int:
    """Return the first guard count found by the ordered patterns, else 0."""
    for pattern in GUARD_COUNT_PATTERNS:
        match = pattern.search(text)
        if match:
            try:
                count = int(match.group(1))
            except ValueError:
                continue
            logger.info(f"Found guards count: {count} using pattern: {pattern.pattern}")
            return count
    return 0


def extract_locations(text: str) -> List[ExtractedLocation]:
    """
    Extract the guarded location and its guard count from ĐIỀU 1.

    At most one location is produced, and only when a location name was
    found.
    """
    clause = isolate_clause(text, 1)
    if clause is None:
        logger.warning("ĐIỀU 1 not found for location extraction")
        return []

    location_name = ""
    match = LOCATION_PATTERN.search(clause)
    if match:
        location_name = _LOCATION_TRAILER.sub("", match.group(1).strip()).strip()
        logger.info(f"Found location: {location_name}")

    guards = extract_guard_count(clause)
    if guards == 0:
        logger.warning(f"Guards count not found or = 0. ĐIỀU 1 text sample:\n{clause[:500]}")

    if not location_name.strip():
        return []
    return [ExtractedLocation(location_name=location_name, guards_required=guards)]


def extract_shifts(text: str) -> List[ExtractedShift]:
    """Extract every "Ca <name> HH:MM - HH:MM" shift window from ĐIỀU 3."""
    clause = isolate_clause(text, 3)
    if clause is None:
        logger.warning("ĐIỀU 3 not found for shift extraction")
        return []

    shifts: List[ExtractedShift] = []
    for match in SHIFT_PATTERN.finditer(clause):
        shift_type = match.group(1)
        start_hour, start_min, end_hour, end_min = (
            int(match.group(i)) for i in range(2, 6)
        )
        try:
            start_time = time(start_hour, start_min)
            end_time = time(end_hour, end_min)
        except ValueError:
            logger.warning(f"Skipping shift with invalid clock time: {match.group(0)}")
            continue

        shifts.append(ExtractedShift(
            shift_name=f"Ca {shift_type}",
            start_hour=start_hour,
            end_hour=end_hour,
            start_time=start_time,
            end_time=end_time,
        ))

    return shifts
