"""Contract repository interface for the Contract Validation System."""

import uuid
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from ..models.records import (
    ContractRecord,
    ContractSnapshot,
    CounterpartyRecord,
    HolidayRecord,
    LocationRequirement,
    ShiftScheduleRecord,
)


class IContractRepository(ABC):
    """
    Abstract interface for reading the stored contract data.

    Implementations return typed records; callers never see the store's
    row shapes.
    """

    @abstractmethod
    def get_contract(self, contract_id: uuid.UUID) -> Optional[ContractRecord]:
        """Return the non-deleted contract with this id, or None."""
        pass

    @abstractmethod
    def get_counterparty(self, customer_id: uuid.UUID) -> Optional[CounterpartyRecord]:
        """Return the customer with this id, or None."""
        pass

    @abstractmethod
    def get_locations(self, contract_id: uuid.UUID) -> List[LocationRequirement]:
        """Return the active location requirements of a contract."""
        pass

    @abstractmethod
    def get_shift_schedules(self, contract_id: uuid.UUID) -> List[ShiftScheduleRecord]:
        """Return the active shift schedules of a contract."""
        pass

    @abstractmethod
    def get_holidays(self, start_date: date, end_date: date) -> List[HolidayRecord]:
        """Return holidays dated within [start_date, end_date], ordered by date."""
        pass

    def load_snapshot(self, contract_id: uuid.UUID) -> Optional[ContractSnapshot]:
        """
        Load everything needed to validate one contract.

        Args:
            contract_id: Identifier of the contract.

        Returns:
            ContractSnapshot, or None if the contract does not exist.
        """
        contract = self.get_contract(contract_id)
        if contract is None:
            return None

        counterparty = None
        if contract.customer_id is not None:
            counterparty = self.get_counterparty(contract.customer_id)

        return ContractSnapshot(
            contract=contract,
            counterparty=counterparty,
            locations=self.get_locations(contract.id),
            shift_schedules=self.get_shift_schedules(contract.id),
            holidays=self.get_holidays(contract.start_date, contract.end_date),
        )
