"""Seed a fresh ledger with a few accounts and records for local development.

Usage: python seed_ledger.py
"""
from ledger.db import SessionLocal, init_db
from ledger.models import Account, Expense, Revenue
from ledger.services.store import AccountStore, ExpenseStore, RevenueStore
from ledger.services.validation import validate_account, validate_expense, validate_revenue

ACCOUNTS = [
    {"balance": "100.00", "accountType": "CHECKING", "financialInstitution": "BANK A"},
    {"balance": "50.00", "accountType": "CHECKING", "financialInstitution": "BANK A"},
    {"balance": "0.00", "accountType": "WALLET", "financialInstitution": "CASH"},
]

EXPENSES = [
    {"value": "42.90", "occurred": "05-01-2024", "expected": "05-01-2024", "account": 1, "category": "FOOD"},
    {"value": "120.00", "occurred": "10-01-2024", "expected": "08-01-2024", "account": 1, "category": "HOUSING"},
]

REVENUES = [
    {
        "value": "3000.00",
        "occurred": "01-01-2024",
        "expected": "01-01-2024",
        "description": "January salary",
        "account": 1,
        "category": "SALARY",
    },
]


def seed_ledger():
    print("Creating ledger tables...")
    init_db()
    db = SessionLocal()
    try:
        accounts = AccountStore(db)
        for row in ACCOUNTS:
            account = accounts.save(Account(**validate_account(row).model_dump()))
            print(f"Account {account.id}: {account.balance} at {account.financial_institution}")

        expenses = ExpenseStore(db)
        for row in EXPENSES:
            expense = expenses.save(Expense(**validate_expense(row).model_dump()))
            print(f"Expense {expense.id}: {expense.value} ({expense.category.value})")

        revenues = RevenueStore(db)
        for row in REVENUES:
            revenue = revenues.save(Revenue(**validate_revenue(row).model_dump()))
            print(f"Revenue {revenue.id}: {revenue.value} ({revenue.category.value})")
    finally:
        db.close()
    print("Done.")


if __name__ == "__main__":
    seed_ledger()
