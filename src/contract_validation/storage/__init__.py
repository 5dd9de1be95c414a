"""Contract store access for the Contract Validation System."""

from .database import DatabaseManager, get_database_url
from .models import (
    Base,
    ContractLocationModel,
    ContractModel,
    ContractShiftScheduleModel,
    CustomerLocationModel,
    CustomerModel,
    PublicHolidayModel,
)
from .repository import InMemoryContractRepository, SqlContractRepository

__all__ = [
    "DatabaseManager",
    "get_database_url",
    "Base",
    "ContractLocationModel",
    "ContractModel",
    "ContractShiftScheduleModel",
    "CustomerLocationModel",
    "CustomerModel",
    "PublicHolidayModel",
    "InMemoryContractRepository",
    "SqlContractRepository",
]
