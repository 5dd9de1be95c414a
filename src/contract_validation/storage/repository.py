"""Contract repositories for the Contract Validation System.

SqlContractRepository reads the contract store through SQLAlchemy and maps
rows into typed records. InMemoryContractRepository holds records in
memory for tests and offline use.
"""

import logging
import uuid
from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import and_, select
from sqlalchemy.orm import Session

from ..interfaces.repository import IContractRepository
from ..models.records import (
    ContractRecord,
    ContractSnapshot,
    CounterpartyRecord,
    HolidayRecord,
    LocationRequirement,
    ShiftScheduleRecord,
)
from .database import DatabaseManager
from .models import (
    ContractLocationModel,
    ContractModel,
    ContractShiftScheduleModel,
    CustomerLocationModel,
    CustomerModel,
    PublicHolidayModel,
)


logger = logging.getLogger(__name__)


class SqlContractRepository(IContractRepository):
    """
    Repository backed by the relational contract store.

    Each public call uses its own session from the DatabaseManager;
    load_snapshot reads everything within a single session.
    """

    def __init__(self, db_manager: DatabaseManager):
        self._db_manager = db_manager

    def get_contract(self, contract_id: uuid.UUID) -> Optional[ContractRecord]:
        with self._db_manager.get_session() as session:
            return self._get_contract(session, contract_id)

    def get_counterparty(self, customer_id: uuid.UUID) -> Optional[CounterpartyRecord]:
        with self._db_manager.get_session() as session:
            return self._get_counterparty(session, customer_id)

    def get_locations(self, contract_id: uuid.UUID) -> List[LocationRequirement]:
        with self._db_manager.get_session() as session:
            return self._get_locations(session, contract_id)

    def get_shift_schedules(self, contract_id: uuid.UUID) -> List[ShiftScheduleRecord]:
        with self._db_manager.get_session() as session:
            return self._get_shift_schedules(session, contract_id)

    def get_holidays(self, start_date: date, end_date: date) -> List[HolidayRecord]:
        with self._db_manager.get_session() as session:
            return self._get_holidays(session, start_date, end_date)

    def load_snapshot(self, contract_id: uuid.UUID) -> Optional[ContractSnapshot]:
        """Load the contract and its related data in one session."""
        with self._db_manager.get_session() as session:
            contract = self._get_contract(session, contract_id)
            if contract is None:
                logger.info(f"Contract {contract_id} not found")
                return None

            counterparty = None
            if contract.customer_id is not None:
                counterparty = self._get_counterparty(session, contract.customer_id)

            snapshot = ContractSnapshot(
                contract=contract,
                counterparty=counterparty,
                locations=self._get_locations(session, contract.id),
                shift_schedules=self._get_shift_schedules(session, contract.id),
                holidays=self._get_holidays(session, contract.start_date, contract.end_date),
            )

        logger.info(
            f"Loaded contract {contract.contract_number}: "
            f"{len(snapshot.locations)} locations, "
            f"{len(snapshot.shift_schedules)} shift schedules, "
            f"{len(snapshot.holidays)} holidays"
        )
        return snapshot

    def _get_contract(self, session: Session, contract_id: uuid.UUID) -> Optional[ContractRecord]:
        query = select(ContractModel).where(
            and_(ContractModel.id == contract_id, ContractModel.is_deleted.is_(False))
        )
        row = session.execute(query).scalar_one_or_none()
        if row is None:
            return None
        return ContractRecord(
            id=row.id,
            contract_number=row.contract_number,
            start_date=row.start_date,
            end_date=row.end_date,
            customer_id=row.customer_id,
            status=row.status,
        )

    def _get_counterparty(self, session: Session, customer_id: uuid.UUID) -> Optional[CounterpartyRecord]:
        row = session.get(CustomerModel, customer_id)
        if row is None:
            return None
        return CounterpartyRecord(id=row.id, company_name=row.company_name)

    def _get_locations(self, session: Session, contract_id: uuid.UUID) -> List[LocationRequirement]:
        query = (
            select(ContractLocationModel, CustomerLocationModel)
            .join(CustomerLocationModel, ContractLocationModel.location_id == CustomerLocationModel.id)
            .where(
                and_(
                    ContractLocationModel.contract_id == contract_id,
                    ContractLocationModel.is_deleted.is_(False),
                )
            )
        )
        return [
            LocationRequirement(
                location_name=location.location_name,
                guards_required=requirement.guards_required,
                location_id=location.id,
            )
            for requirement, location in session.execute(query).all()
        ]

    def _get_shift_schedules(self, session: Session, contract_id: uuid.UUID) -> List[ShiftScheduleRecord]:
        query = select(ContractShiftScheduleModel).where(
            and_(
                ContractShiftScheduleModel.contract_id == contract_id,
                ContractShiftScheduleModel.is_deleted.is_(False),
            )
        )
        return [
            ShiftScheduleRecord(
                schedule_name=row.schedule_name,
                shift_start_time=row.shift_start_time,
                shift_end_time=row.shift_end_time,
            )
            for row in session.execute(query).scalars()
        ]

    def _get_holidays(self, session: Session, start_date: date, end_date: date) -> List[HolidayRecord]:
        query = (
            select(PublicHolidayModel)
            .where(
                and_(
                    PublicHolidayModel.holiday_date >= start_date,
                    PublicHolidayModel.holiday_date <= end_date,
                )
            )
            .order_by(PublicHolidayModel.holiday_date)
        )
        return [
            HolidayRecord(
                holiday_date=row.holiday_date,
                holiday_name=row.holiday_name,
                is_tet_period=row.is_tet_period,
                is_tet_holiday=row.is_tet_holiday,
                tet_day_number=row.tet_day_number,
            )
            for row in session.execute(query).scalars()
        ]


class InMemoryContractRepository(IContractRepository):
    """Repository holding records in dictionaries."""

    def __init__(self):
        self._contracts: Dict[uuid.UUID, ContractRecord] = {}
        self._counterparties: Dict[uuid.UUID, CounterpartyRecord] = {}
        self._locations: Dict[uuid.UUID, List[LocationRequirement]] = {}
        self._shift_schedules: Dict[uuid.UUID, List[ShiftScheduleRecord]] = {}
        self._holidays: List[HolidayRecord] = []

    def add_contract(
        self,
        contract: ContractRecord,
        counterparty: Optional[CounterpartyRecord] = None,
        locations: Optional[List[LocationRequirement]] = None,
        shift_schedules: Optional[List[ShiftScheduleRecord]] = None,
    ) -> None:
        """Register a contract together with its related records."""
        self._contracts[contract.id] = contract
        if counterparty is not None:
            self._counterparties[counterparty.id] = counterparty
        self._locations[contract.id] = list(locations or [])
        self._shift_schedules[contract.id] = list(shift_schedules or [])

    def add_holidays(self, holidays: List[HolidayRecord]) -> None:
        self._holidays.extend(holidays)

    def get_contract(self, contract_id: uuid.UUID) -> Optional[ContractRecord]:
        return self._contracts.get(contract_id)

    def get_counterparty(self, customer_id: uuid.UUID) -> Optional[CounterpartyRecord]:
        return self._counterparties.get(customer_id)

    def get_locations(self, contract_id: uuid.UUID) -> List[LocationRequirement]:
        return list(self._locations.get(contract_id, []))

    def get_shift_schedules(self, contract_id: uuid.UUID) -> List[ShiftScheduleRecord]:
        return list(self._shift_schedules.get(contract_id, []))

    def get_holidays(self, start_date: date, end_date: date) -> List[HolidayRecord]:
        return sorted(
            (h for h in self._holidays if start_date <= h.holiday_date <= end_date),
            key=lambda h: h.holiday_date,
        )
