from decimal import Decimal

from pydantic import ConfigDict, Field

from ledger.models import ExpenseCategory
from ledger.schemas.common import LedgerDate, LedgerModel, ResponseEnvelope


class ExpenseIn(LedgerModel):
    value: Decimal = Field(..., max_digits=18, decimal_places=2)
    occurred: LedgerDate
    expected: LedgerDate
    account: int = Field(..., ge=1, le=999)
    category: ExpenseCategory


class ExpenseOut(LedgerModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    value: Decimal
    occurred: LedgerDate
    expected: LedgerDate
    account: int
    category: ExpenseCategory


class ExpenseTotal(LedgerModel):
    total: Decimal


class ExpenseResponse(ResponseEnvelope):
    data: ExpenseOut


class ExpenseListResponse(ResponseEnvelope):
    data: list[ExpenseOut]


class ExpenseTotalResponse(ResponseEnvelope):
    data: ExpenseTotal
