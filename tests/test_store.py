"""LedgerStore CRUD over SQLite"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.orm.exc import StaleDataError

from ledger.core.errors import NotFound, PersistenceError
from ledger.models import Account, AccountType, Expense, ExpenseCategory, Revenue, RevenueCategory
from ledger.services.store import AccountStore, ExpenseStore, RevenueStore
from ledger.services.validation import validate_account, validate_expense, validate_revenue


class TestRoundTrip:
    def test_account(self, db) -> None:
        payload = validate_account(
            {"balance": "100.00", "accountType": "CHECKING", "financialInstitution": "BANK A"}
        )
        saved = AccountStore(db).save(Account(**payload.model_dump()))
        db.expire_all()

        loaded = AccountStore(db).find_by_id(saved.id)

        assert loaded is not None
        assert loaded.id == saved.id
        assert loaded.balance == payload.balance
        assert loaded.account_type is AccountType.CHECKING
        assert loaded.financial_institution == "BANK A"

    def test_expense(self, db) -> None:
        payload = validate_expense(
            {
                "value": "42.90",
                "occurred": "05-01-2024",
                "expected": "07-01-2024",
                "account": 1,
                "category": "FOOD",
            }
        )
        saved = ExpenseStore(db).save(Expense(**payload.model_dump()))
        db.expire_all()

        loaded = ExpenseStore(db).find_by_id(saved.id)

        assert loaded.value == Decimal("42.90")
        assert loaded.occurred == date(2024, 1, 5)
        assert loaded.expected == date(2024, 1, 7)
        assert loaded.account == 1
        assert loaded.category is ExpenseCategory.FOOD

    def test_revenue(self, db) -> None:
        payload = validate_revenue(
            {
                "value": "3000",
                "occurred": "01-02-2024",
                "expected": "01-02-2024",
                "description": "February salary",
                "account": 999,
                "category": "SALARY",
            }
        )
        saved = RevenueStore(db).save(Revenue(**payload.model_dump()))
        db.expire_all()

        loaded = RevenueStore(db).find_by_id(saved.id)

        assert loaded.value == Decimal("3000")
        assert loaded.description == "February salary"
        assert loaded.account == 999
        assert loaded.category is RevenueCategory.SALARY


class TestLookupAndDelete:
    def test_find_by_id_missing_returns_none(self, db) -> None:
        assert AccountStore(db).find_by_id(42) is None

    def test_get_missing_raises_not_found(self, db) -> None:
        with pytest.raises(NotFound) as exc_info:
            ExpenseStore(db).get(42)

        assert exc_info.value.entity == "Expense"

    def test_find_all_is_ordered_by_id(self, db, make_account) -> None:
        first = make_account(1)
        second = make_account(2)

        assert [a.id for a in AccountStore(db).find_all()] == [first.id, second.id]

    def test_delete_by_id(self, db, make_account) -> None:
        account = make_account(10)
        store = AccountStore(db)

        store.delete_by_id(account.id)

        assert store.find_by_id(account.id) is None
        assert store.find_all() == []

    def test_delete_missing_raises_not_found(self, db) -> None:
        with pytest.raises(NotFound):
            RevenueStore(db).delete_by_id(7)


class TestReplace:
    def test_replace_overwrites_every_field(self, db, make_account) -> None:
        account = make_account(10, AccountType.WALLET, "CASH")

        replaced = AccountStore(db).replace(
            account.id,
            {
                "balance": Decimal("500"),
                "account_type": AccountType.SAVINGS,
                "financial_institution": "BANK B",
            },
        )

        assert replaced.id == account.id
        assert replaced.balance == Decimal("500")
        assert replaced.account_type is AccountType.SAVINGS
        assert replaced.financial_institution == "BANK B"

    def test_replace_missing_raises_not_found(self, db) -> None:
        with pytest.raises(NotFound):
            AccountStore(db).replace(3, {"balance": Decimal("1")})

    def test_concurrent_writer_is_detected(self, session_factory, make_account) -> None:
        """Two sessions edit the same account; the slower one loses"""
        account = make_account(100)
        first = session_factory()
        second = session_factory()
        try:
            mine = first.get(Account, account.id)
            theirs = second.get(Account, account.id)

            theirs.balance = Decimal("10")
            second.commit()

            mine.balance = Decimal("20")
            with pytest.raises(StaleDataError):
                first.commit()
        finally:
            first.close()
            second.close()

    def test_store_save_wraps_stale_write(self, session_factory, make_account) -> None:
        account = make_account(100)
        first = session_factory()
        second = session_factory()
        try:
            mine = first.get(Account, account.id)
            theirs = second.get(Account, account.id)
            theirs.balance = Decimal("10")
            second.commit()

            mine.balance = Decimal("20")
            with pytest.raises(PersistenceError):
                AccountStore(first).save(mine)
        finally:
            first.close()
            second.close()


class TestSum:
    def test_sum_over_empty_table_is_null(self, db) -> None:
        assert AccountStore(db).sum(Account.balance) is None

    def test_sum(self, db, make_account) -> None:
        make_account(100)
        make_account("0.50")

        assert AccountStore(db).sum(Account.balance) == Decimal("100.50")
