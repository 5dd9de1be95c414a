"""Shared fixtures for the contract validation tests."""

import io
import uuid
from datetime import date, time, timedelta

import pytest
from docx import Document

from contract_validation.models.records import (
    ContractRecord,
    CounterpartyRecord,
    HolidayRecord,
    LocationRequirement,
    ShiftScheduleRecord,
)


SAMPLE_CONTRACT_LINES = [
    "HỢP ĐỒNG DỊCH VỤ BẢO VỆ",
    "Số 05/HĐLĐ/2025",
    "ĐIỀU 1: ĐỐI TƯỢNG HỢP ĐỒNG",
    "Bên A: CÔNG TY TNHH ABC",
    "Địa chỉ: 12 Lê Lợi, Quận 1",
    "Địa điểm: Kho A",
    "Số lượng: 4 (bốn) nhân viên bảo vệ",
    "ĐIỀU 2: THỜI HẠN HỢP ĐỒNG",
    "Hợp đồng có hiệu lực từ ngày 01/01/2025 đến ngày 31/12/2025.",
    "ĐIỀU 3: THỜI GIAN LÀM VIỆC",
    "Ca sáng: 06:00 - 14:00",
    "Ca chiều: 14:00 - 22:00",
    "3.4 Ngày lễ, Tết",
    "Tết Nguyên Đán 2025: nghỉ từ 28/01/2025 đến hết 03/02/2025",
    "Ngày Quốc khánh 02/09/2025",
    "ĐIỀU 4: THANH TOÁN",
    "Thanh toán hàng tháng.",
]

SAMPLE_CONTRACT_TEXT = "\n".join(SAMPLE_CONTRACT_LINES) + "\n"

TET_START = date(2025, 1, 28)
TET_DAYS = 7


def build_docx(lines) -> io.BytesIO:
    """Build a .docx in memory with one paragraph per line."""
    document = Document()
    for line in lines:
        document.add_paragraph(line)
    stream = io.BytesIO()
    document.save(stream)
    stream.seek(0)
    return stream


def tet_holidays():
    """Stored Tết days matching the sample contract."""
    return [
        HolidayRecord(
            holiday_date=TET_START + timedelta(days=offset),
            holiday_name="Tết Nguyên Đán",
            is_tet_period=True,
            is_tet_holiday=True,
            tet_day_number=offset + 1,
        )
        for offset in range(TET_DAYS)
    ]


@pytest.fixture
def sample_docx():
    return build_docx(SAMPLE_CONTRACT_LINES)


@pytest.fixture
def customer():
    return CounterpartyRecord(id=uuid.uuid4(), company_name="Công ty TNHH ABC")


@pytest.fixture
def contract(customer):
    return ContractRecord(
        id=uuid.uuid4(),
        contract_number="05/HĐLĐ/2025",
        start_date=date(2025, 1, 1),
        end_date=date(2025, 12, 31),
        customer_id=customer.id,
        status="active",
    )


@pytest.fixture
def locations():
    return [LocationRequirement(location_name="Kho A", guards_required=4)]


@pytest.fixture
def shift_schedules():
    return [
        ShiftScheduleRecord("Ca sáng", time(6, 0), time(14, 0)),
        ShiftScheduleRecord("Ca chiều", time(14, 0), time(22, 0)),
    ]


@pytest.fixture
def holidays():
    return tet_holidays() + [
        HolidayRecord(holiday_date=date(2025, 9, 2), holiday_name="Ngày Quốc khánh"),
    ]
