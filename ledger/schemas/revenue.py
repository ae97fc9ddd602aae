from decimal import Decimal

from pydantic import ConfigDict, Field

from ledger.models import RevenueCategory
from ledger.schemas.common import LedgerDate, LedgerModel, NonBlankStr, ResponseEnvelope


class RevenueIn(LedgerModel):
    value: Decimal = Field(..., max_digits=18, decimal_places=2)
    occurred: LedgerDate
    expected: LedgerDate
    description: NonBlankStr
    account: int = Field(..., ge=1, le=999)
    category: RevenueCategory


class RevenueOut(LedgerModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    value: Decimal
    occurred: LedgerDate
    expected: LedgerDate
    description: str
    account: int
    category: RevenueCategory


class RevenueTotal(LedgerModel):
    total: Decimal


class RevenueResponse(ResponseEnvelope):
    data: RevenueOut


class RevenueListResponse(ResponseEnvelope):
    data: list[RevenueOut]


class RevenueTotalResponse(ResponseEnvelope):
    data: RevenueTotal
