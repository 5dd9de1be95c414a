"""Contract fields recovered from document text."""

from dataclasses import dataclass, field
from datetime import date, time
from typing import List, Optional


@dataclass
class ExtractedLocation:
    """Location named in ĐIỀU 1 with its guard count (0 when not stated)."""
    location_name: str
    guards_required: int = 0


@dataclass
class ExtractedShift:
    """
    Shift window found in ĐIỀU 3.

    Hours are always populated; exact times may be absent when only the
    hour granularity could be recovered.
    """
    shift_name: str
    start_hour: int
    end_hour: int
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    @property
    def has_exact_times(self) -> bool:
        return self.start_time is not None and self.end_time is not None


@dataclass
class ExtractedHoliday:
    """
    Public holiday found in the holiday clause (3.4) of ĐIỀU 3.

    Tết days carry the bookkeeping of the full range they belong to.
    """
    holiday_date: date
    holiday_name: str
    is_tet_period: bool = False
    is_tet_holiday: bool = False
    tet_day_number: Optional[int] = None
    holiday_start_date: Optional[date] = None
    holiday_end_date: Optional[date] = None
    total_holiday_days: Optional[int] = None


@dataclass
class ExtractedContractInfo:
    """
    Result of field extraction over one document.

    Every field is optional: anything the extractor cannot find is left
    as ``None`` or an empty list.
    """
    contract_number: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    customer_name: Optional[str] = None
    locations: List[ExtractedLocation] = field(default_factory=list)
    shifts: List[ExtractedShift] = field(default_factory=list)
    holidays: List[ExtractedHoliday] = field(default_factory=list)

    def __post_init__(self):
        if self.locations is None:
            self.locations = []
        if self.shifts is None:
            self.shifts = []
        if self.holidays is None:
            self.holidays = []
