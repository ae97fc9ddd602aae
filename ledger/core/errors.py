from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional


class LedgerError(Exception):
    """Base class for errors the API turns into an error envelope."""

    status_code: int = 500
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(LedgerError):
    status_code = 400
    code = "VALIDATION_ERROR"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, {"field": field})
        self.field = field


class NotFound(LedgerError):
    status_code = 404
    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id: Any) -> None:
        super().__init__(f"{entity} {entity_id} not found", {"entity": entity, "id": entity_id})
        self.entity = entity
        self.entity_id = entity_id


class InsufficientFunds(LedgerError):
    status_code = 400
    code = "INSUFFICIENT_FUNDS"

    def __init__(self, account_id: int, balance: Decimal, amount: Decimal) -> None:
        super().__init__(
            f"Account {account_id} has insufficient funds",
            {"account_id": account_id, "balance": str(balance), "amount": str(amount)},
        )
        self.account_id = account_id
        self.balance = balance
        self.amount = amount


class PersistenceError(LedgerError):
    """Store-layer failure. Not retried by callers."""

    status_code = 500
    code = "PERSISTENCE_ERROR"
