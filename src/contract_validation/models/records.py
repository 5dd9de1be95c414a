"""Stored record snapshots read from the system of record.

These are plain typed values populated by a repository. They are treated
as immutable for the duration of one validation call.
"""

import uuid
from dataclasses import dataclass, field
from datetime import date, time
from typing import List, Optional


@dataclass(frozen=True)
class ContractRecord:
    """Stored contract fields relevant to document validation."""
    id: uuid.UUID
    contract_number: str
    start_date: date
    end_date: date
    customer_id: Optional[uuid.UUID] = None
    status: str = "draft"


@dataclass(frozen=True)
class CounterpartyRecord:
    """Customer (party A) of a contract."""
    id: uuid.UUID
    company_name: str


@dataclass(frozen=True)
class LocationRequirement:
    """A guarded location and how many guards the contract requires there."""
    location_name: str
    guards_required: int
    location_id: Optional[uuid.UUID] = None


@dataclass(frozen=True)
class ShiftScheduleRecord:
    """A named recurring time-of-day window for a contract."""
    schedule_name: str
    shift_start_time: time
    shift_end_time: time


@dataclass(frozen=True)
class HolidayRecord:
    """A public holiday falling within a contract's period."""
    holiday_date: date
    holiday_name: str
    is_tet_period: bool = False
    is_tet_holiday: bool = False
    tet_day_number: Optional[int] = None


@dataclass
class ContractSnapshot:
    """
    Everything the validator needs from the store for one contract.

    Loaded once per validation call so comparison runs without further
    database access.
    """
    contract: ContractRecord
    counterparty: Optional[CounterpartyRecord] = None
    locations: List[LocationRequirement] = field(default_factory=list)
    shift_schedules: List[ShiftScheduleRecord] = field(default_factory=list)
    holidays: List[HolidayRecord] = field(default_factory=list)
