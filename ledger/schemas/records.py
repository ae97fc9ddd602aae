from typing import Optional

from ledger.schemas.common import LedgerDate, LedgerModel, ResponseEnvelope


class CreatedData(LedgerModel):
    id: int


class CreatedResponse(ResponseEnvelope):
    data: CreatedData


class DeletedResponse(ResponseEnvelope):
    data: Optional[CreatedData] = None


class DateRange(LedgerModel):
    """Inclusive bounds on the `occurred` date. A reversed range matches nothing."""

    start: LedgerDate
    end: LedgerDate
