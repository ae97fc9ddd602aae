from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import date
from decimal import Decimal
from typing import Any, Generic, Iterable, Iterator, List, Mapping, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ledger.core.errors import NotFound, PersistenceError
from ledger.models import Account, Expense, ExpenseCategory, Revenue, RevenueCategory

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", Account, Expense, Revenue)


class LedgerStore(Generic[RecordT]):
    """CRUD and query access to one record kind over a SQLAlchemy session."""

    model: Type[RecordT]
    entity: str

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def _guard(self, action: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Failed to {action} {self.entity}: {exc}")
            raise PersistenceError(f"Failed to {action} {self.entity}") from exc

    def save(self, record: RecordT) -> RecordT:
        with self._guard("save"):
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        logger.info(f"Saved {self.entity} {record.id}")
        return record

    def find_by_id(self, record_id: int) -> Optional[RecordT]:
        with self._guard("load"):
            return self.db.get(self.model, record_id)

    def get(self, record_id: int) -> RecordT:
        record = self.find_by_id(record_id)
        if record is None:
            raise NotFound(self.entity, record_id)
        return record

    def find_all(self) -> List[RecordT]:
        return self.find_where()

    def find_where(self, *criteria: Any) -> List[RecordT]:
        query = select(self.model)
        if criteria:
            query = query.where(*criteria)
        query = query.order_by(self.model.id.asc())
        with self._guard("query"):
            return list(self.db.execute(query).scalars().all())

    def replace(self, record_id: int, fields: Mapping[str, Any]) -> RecordT:
        """Overwrite every given field of an existing record.

        Callers pass the complete validated payload; fields are never merged
        with what was stored before.
        """
        record = self.get(record_id)
        for key, value in fields.items():
            setattr(record, key, value)
        return self.save(record)

    def delete_by_id(self, record_id: int) -> None:
        record = self.get(record_id)
        with self._guard("delete"):
            self.db.delete(record)
            self.db.commit()
        logger.info(f"Deleted {self.entity} {record_id}")

    def sum(self, column: Any) -> Optional[Decimal]:
        """Native SUM over all rows; NULL when there are none."""
        with self._guard("sum"):
            return self.db.execute(select(func.sum(column))).scalar()


class AccountStore(LedgerStore[Account]):
    model = Account
    entity = "Account"

    def lock_for_update(self, account_ids: Iterable[int]) -> dict[int, Account]:
        # Ascending id order keeps concurrent transfers from deadlocking
        query = (
            select(Account)
            .where(Account.id.in_(set(account_ids)))
            .order_by(Account.id.asc())
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return {account.id: account for account in self.db.execute(query).scalars().all()}


class ExpenseStore(LedgerStore[Expense]):
    model = Expense
    entity = "Expense"

    def find_by_date_range(self, start: date, end: date) -> List[Expense]:
        return self.find_where(Expense.occurred.between(start, end))

    def find_by_category(self, category: ExpenseCategory) -> List[Expense]:
        return self.find_where(Expense.category == category)


class RevenueStore(LedgerStore[Revenue]):
    model = Revenue
    entity = "Revenue"

    def find_by_date_range(self, start: date, end: date) -> List[Revenue]:
        return self.find_where(Revenue.occurred.between(start, end))

    def find_by_category(self, category: RevenueCategory) -> List[Revenue]:
        return self.find_where(Revenue.category == category)
