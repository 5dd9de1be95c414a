"""SQLAlchemy models for the stored contract data."""

from datetime import datetime
import uuid

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Time,
    Uuid,
)
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class CustomerModel(Base):
    """Customer (party A) table model."""
    __tablename__ = "customers"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    company_name = Column(String(255), nullable=False)
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)


class CustomerLocationModel(Base):
    """Customer location table model."""
    __tablename__ = "customer_locations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    customer_id = Column(Uuid, ForeignKey("customers.id"), nullable=True)
    location_name = Column(String(255), nullable=False)
    address = Column(String(500))
    city = Column(String(100))
    district = Column(String(100))
    is_deleted = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("idx_customer_locations_customer_id", "customer_id"),
    )


class ContractModel(Base):
    """Contract table model."""
    __tablename__ = "contracts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    contract_number = Column(String(100), nullable=False)
    customer_id = Column(Uuid, ForeignKey("customers.id"), nullable=True)
    start_date = Column(Date, nullable=False)
    end_date = Column(Date, nullable=False)
    status = Column(String(50), nullable=False, default="draft")
    is_deleted = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow)
    updated_at = Column(DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("idx_contracts_contract_number", "contract_number"),
        Index("idx_contracts_customer_id", "customer_id"),
    )


class ContractLocationModel(Base):
    """Guarded location requirement of a contract."""
    __tablename__ = "contract_locations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    contract_id = Column(Uuid, ForeignKey("contracts.id", ondelete="CASCADE"), nullable=False)
    location_id = Column(Uuid, ForeignKey("customer_locations.id"), nullable=False)
    guards_required = Column(Integer, nullable=False, default=0)
    is_deleted = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("idx_contract_locations_contract_id", "contract_id"),
    )


class ContractShiftScheduleModel(Base):
    """Recurring shift window of a contract."""
    __tablename__ = "contract_shift_schedules"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    contract_id = Column(Uuid, ForeignKey("contracts.id", ondelete="CASCADE"), nullable=False)
    schedule_name = Column(String(100), nullable=False)
    shift_start_time = Column(Time, nullable=False)
    shift_end_time = Column(Time, nullable=False)
    is_deleted = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("idx_contract_shift_schedules_contract_id", "contract_id"),
    )


class PublicHolidayModel(Base):
    """National public holiday table model."""
    __tablename__ = "public_holidays"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    holiday_date = Column(Date, nullable=False)
    holiday_name = Column(String(255), nullable=False)
    is_tet_period = Column(Boolean, nullable=False, default=False)
    is_tet_holiday = Column(Boolean, nullable=False, default=False)
    tet_day_number = Column(Integer)
    year = Column(Integer)

    __table_args__ = (
        Index("idx_public_holidays_holiday_date", "holiday_date"),
    )
