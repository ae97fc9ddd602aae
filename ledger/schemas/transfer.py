from decimal import Decimal

from pydantic import Field

from ledger.schemas.common import LedgerModel, ResponseEnvelope


class TransferRequest(LedgerModel):
    from_id: int
    to_id: int
    amount: Decimal = Field(..., gt=0, max_digits=18, decimal_places=2)


class TransferResult(LedgerModel):
    from_id: int
    from_balance: Decimal
    to_id: int
    to_balance: Decimal


class TransferResponse(ResponseEnvelope):
    data: TransferResult
