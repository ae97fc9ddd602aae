"""Totals and filters"""

from datetime import date
from decimal import Decimal

import pytest

from ledger.models import Expense, ExpenseCategory, Revenue, RevenueCategory
from ledger.services import queries


def _expense(db, value, occurred, category=ExpenseCategory.FOOD):
    expense = Expense(value=Decimal(value), occurred=occurred, expected=occurred, account=1, category=category)
    db.add(expense)
    db.commit()
    return expense


def _revenue(db, value, occurred, category=RevenueCategory.SALARY):
    revenue = Revenue(
        value=Decimal(value),
        occurred=occurred,
        expected=occurred,
        description="income",
        account=1,
        category=category,
    )
    db.add(revenue)
    db.commit()
    return revenue


class TestTotals:
    def test_total_balance(self, db, make_account) -> None:
        for balance in (100, 50, -20):
            make_account(balance)

        assert queries.total_balance(db) == Decimal("130")

    @pytest.mark.parametrize("total", [queries.total_balance, queries.total_expenses, queries.total_revenue])
    def test_empty_ledger_totals_zero(self, db, total) -> None:
        result = total(db)

        assert result == Decimal("0")
        assert isinstance(result, Decimal)

    def test_total_expenses(self, db) -> None:
        _expense(db, "10.25", date(2024, 1, 1))
        _expense(db, "4.75", date(2024, 2, 1))

        assert queries.total_expenses(db) == Decimal("15.00")

    def test_total_revenue(self, db) -> None:
        _revenue(db, "3000", date(2024, 1, 1))
        _revenue(db, "150", date(2024, 1, 15), RevenueCategory.GIFT)

        assert queries.total_revenue(db) == Decimal("3150")


class TestFilters:
    def test_expenses_between_is_inclusive(self, db) -> None:
        _expense(db, "1", date(2023, 12, 31))
        first = _expense(db, "2", date(2024, 1, 1))
        last = _expense(db, "3", date(2024, 1, 31))
        _expense(db, "4", date(2024, 2, 1))

        found = queries.expenses_between(db, date(2024, 1, 1), date(2024, 1, 31))

        assert [e.id for e in found] == [first.id, last.id]

    def test_reversed_range_matches_nothing(self, db) -> None:
        _expense(db, "2", date(2024, 1, 10))

        assert queries.expenses_between(db, date(2024, 1, 31), date(2024, 1, 1)) == []

    def test_expenses_by_category(self, db) -> None:
        food = _expense(db, "1", date(2024, 1, 1), ExpenseCategory.FOOD)
        _expense(db, "2", date(2024, 1, 1), ExpenseCategory.HEALTH)

        found = queries.expenses_by_category(db, ExpenseCategory.FOOD)

        assert [e.id for e in found] == [food.id]
        assert queries.expenses_by_category(db, ExpenseCategory.LEISURE) == []

    def test_revenues_between_and_by_category(self, db) -> None:
        salary = _revenue(db, "3000", date(2024, 3, 1))
        prize = _revenue(db, "200", date(2024, 4, 1), RevenueCategory.PRIZE)

        assert [r.id for r in queries.revenues_between(db, date(2024, 3, 1), date(2024, 3, 31))] == [salary.id]
        assert [r.id for r in queries.revenues_by_category(db, RevenueCategory.PRIZE)] == [prize.id]
