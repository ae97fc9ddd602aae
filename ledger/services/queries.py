"""Totals and filtered listings over the ledger.

The store's native SUM yields NULL over an empty table; every total here
reports that as zero instead.
"""
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from ledger.models import Account, Expense, ExpenseCategory, Revenue, RevenueCategory
from ledger.services.store import AccountStore, ExpenseStore, RevenueStore

ZERO = Decimal("0")


def _or_zero(total: Optional[Decimal]) -> Decimal:
    return ZERO if total is None else Decimal(total)


def total_balance(db: Session) -> Decimal:
    return _or_zero(AccountStore(db).sum(Account.balance))


def total_expenses(db: Session) -> Decimal:
    return _or_zero(ExpenseStore(db).sum(Expense.value))


def total_revenue(db: Session) -> Decimal:
    return _or_zero(RevenueStore(db).sum(Revenue.value))


def expenses_between(db: Session, start: date, end: date) -> List[Expense]:
    return ExpenseStore(db).find_by_date_range(start, end)


def expenses_by_category(db: Session, category: ExpenseCategory) -> List[Expense]:
    return ExpenseStore(db).find_by_category(category)


def revenues_between(db: Session, start: date, end: date) -> List[Revenue]:
    return RevenueStore(db).find_by_date_range(start, end)


def revenues_by_category(db: Session, category: RevenueCategory) -> List[Revenue]:
    return RevenueStore(db).find_by_category(category)
