from decimal import Decimal

from pydantic import ConfigDict, Field

from ledger.models import AccountType
from ledger.schemas.common import LedgerModel, NonBlankStr, ResponseEnvelope


class AccountIn(LedgerModel):
    """Full account payload, used for both create and replace."""

    balance: Decimal = Field(..., max_digits=18, decimal_places=2)
    account_type: AccountType
    financial_institution: NonBlankStr


class AccountOut(LedgerModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    balance: Decimal
    account_type: AccountType
    financial_institution: str


class BalanceTotal(LedgerModel):
    balance: Decimal


class AccountResponse(ResponseEnvelope):
    data: AccountOut


class AccountListResponse(ResponseEnvelope):
    data: list[AccountOut]


class BalanceTotalResponse(ResponseEnvelope):
    data: BalanceTotal
