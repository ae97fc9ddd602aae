"""Account-to-account transfers.

A transfer debits the source and credits the destination inside a single
database transaction. Both rows are locked with ``SELECT ... FOR UPDATE``
before the balance check, and the account ``version`` column catches any
lost update the lock could not (SQLite ignores ``FOR UPDATE``). A stale
version rolls the whole transfer back and it is retried from scratch.
"""
from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from ledger.core.errors import InsufficientFunds, LedgerError, NotFound, PersistenceError, ValidationError
from ledger.core.settings import settings
from ledger.schemas.transfer import TransferResult
from ledger.services.store import AccountStore

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")


def transfer(
    db: Session,
    from_id: int,
    to_id: int,
    amount: Union[Decimal, int, str],
    max_attempts: Optional[int] = None,
) -> TransferResult:
    """Move ``amount`` from account ``from_id`` to account ``to_id``.

    Raises ``NotFound`` if either account is missing, ``InsufficientFunds`` if
    the source would go negative, ``ValidationError`` for an amount that is
    not a positive number of whole cents and ``PersistenceError`` if the
    store fails. In every failure case no balance is changed.

    Transferring to the same account is allowed and leaves its balance as is.
    """
    amount = _to_amount(amount)

    attempts = settings.TRANSFER_MAX_RETRIES if max_attempts is None else max_attempts
    if attempts < 1:
        raise ValueError("max_attempts must be at least 1")
    store = AccountStore(db)

    for attempt in range(1, attempts + 1):
        try:
            result = _apply(store, from_id, to_id, amount)
            db.commit()
        except StaleDataError:
            db.rollback()
            logger.warning(
                f"Transfer {from_id}->{to_id} lost a race on account version "
                f"(attempt {attempt}/{attempts})"
            )
            continue
        except SQLAlchemyError as exc:
            db.rollback()
            logger.error(f"Transfer {from_id}->{to_id} failed: {exc}")
            raise PersistenceError("Failed to apply transfer", {"from_id": from_id, "to_id": to_id}) from exc
        except LedgerError:
            # Releases the row locks taken by _apply
            db.rollback()
            raise

        logger.info(
            f"Transferred {amount} from account {from_id} to {to_id}: "
            f"balances {result.from_balance} / {result.to_balance}"
        )
        return result

    raise PersistenceError(
        "Transfer aborted after repeated concurrent updates",
        {"from_id": from_id, "to_id": to_id, "attempts": attempts},
    )


def _to_amount(value: Union[Decimal, int, str]) -> Decimal:
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
        if not amount.is_finite():
            raise InvalidOperation
        # Balances are stored with two decimal places
        whole_cents = amount == amount.quantize(CENT)
    except InvalidOperation:
        raise ValidationError("amount", "amount must be a decimal number") from None
    if amount <= 0:
        raise ValidationError("amount", "amount must be greater than zero")
    if not whole_cents:
        raise ValidationError("amount", "amount must not have more than two decimal places")
    return amount


def _apply(store: AccountStore, from_id: int, to_id: int, amount: Decimal) -> TransferResult:
    accounts = store.lock_for_update((from_id, to_id))
    source = accounts.get(from_id)
    if source is None:
        raise NotFound("Account", from_id)
    destination = accounts.get(to_id)
    if destination is None:
        raise NotFound("Account", to_id)

    if source.balance - amount < 0:
        raise InsufficientFunds(source.id, source.balance, amount)

    source.balance = source.balance - amount
    destination.balance = destination.balance + amount
    # Both UPDATEs go out in one flush, inside the caller's transaction
    store.db.flush()

    return TransferResult(
        from_id=source.id,
        from_balance=source.balance,
        to_id=destination.id,
        to_balance=destination.balance,
    )
