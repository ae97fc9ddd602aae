from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ledger.db import get_db
from ledger.models import Expense, ExpenseCategory
from ledger.schemas.common import make_success_response
from ledger.schemas.expense import (
    ExpenseIn,
    ExpenseListResponse,
    ExpenseOut,
    ExpenseResponse,
    ExpenseTotal,
    ExpenseTotalResponse,
)
from ledger.schemas.records import CreatedData, CreatedResponse, DateRange, DeletedResponse
from ledger.services import queries
from ledger.services.store import ExpenseStore
from ledger.services.validation import validate_model

router = APIRouter(
    prefix="/api/v1/expenses",
    tags=["Expenses"],
)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_expense(payload: ExpenseIn, db: Session = Depends(get_db)):
    expense = ExpenseStore(db).save(Expense(**payload.model_dump()))
    return make_success_response(CreatedData(id=expense.id))


@router.get("", response_model=ExpenseListResponse)
def list_expenses(
    start: Optional[str] = Query(None, description="dd-mm-yyyy, inclusive"),
    end: Optional[str] = Query(None, description="dd-mm-yyyy, inclusive"),
    db: Session = Depends(get_db),
):
    if start is None and end is None:
        expenses = ExpenseStore(db).find_all()
    else:
        date_range = validate_model(DateRange, {"start": start, "end": end})
        expenses = queries.expenses_between(db, date_range.start, date_range.end)
    return make_success_response([ExpenseOut.model_validate(e) for e in expenses])


@router.get("/total", response_model=ExpenseTotalResponse)
def read_total_expenses(db: Session = Depends(get_db)):
    return make_success_response(ExpenseTotal(total=queries.total_expenses(db)))


@router.get("/category/{category}", response_model=ExpenseListResponse)
def list_expenses_by_category(category: ExpenseCategory, db: Session = Depends(get_db)):
    expenses = queries.expenses_by_category(db, category)
    return make_success_response([ExpenseOut.model_validate(e) for e in expenses])


@router.get("/{expense_id}", response_model=ExpenseResponse)
def read_expense(expense_id: int, db: Session = Depends(get_db)):
    expense = ExpenseStore(db).get(expense_id)
    return make_success_response(ExpenseOut.model_validate(expense))


@router.put("/{expense_id}", response_model=ExpenseResponse)
def replace_expense(expense_id: int, payload: ExpenseIn, db: Session = Depends(get_db)):
    expense = ExpenseStore(db).replace(expense_id, payload.model_dump())
    return make_success_response(ExpenseOut.model_validate(expense))


@router.delete("/{expense_id}", response_model=DeletedResponse)
def delete_expense(expense_id: int, db: Session = Depends(get_db)):
    ExpenseStore(db).delete_by_id(expense_id)
    return make_success_response(CreatedData(id=expense_id))
