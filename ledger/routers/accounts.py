from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ledger.db import get_db
from ledger.models import Account
from ledger.schemas.account import (
    AccountIn,
    AccountListResponse,
    AccountOut,
    AccountResponse,
    BalanceTotal,
    BalanceTotalResponse,
)
from ledger.schemas.common import make_success_response
from ledger.schemas.records import CreatedData, CreatedResponse, DeletedResponse
from ledger.schemas.transfer import TransferRequest, TransferResponse
from ledger.services import queries
from ledger.services.store import AccountStore
from ledger.services.transfer import transfer

router = APIRouter(
    prefix="/api/v1/accounts",
    tags=["Accounts"],
)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_account(payload: AccountIn, db: Session = Depends(get_db)):
    account = AccountStore(db).save(Account(**payload.model_dump()))
    return make_success_response(CreatedData(id=account.id))


@router.get("", response_model=AccountListResponse)
def list_accounts(db: Session = Depends(get_db)):
    accounts = AccountStore(db).find_all()
    return make_success_response([AccountOut.model_validate(a) for a in accounts])


@router.get("/total", response_model=BalanceTotalResponse)
def read_total_balance(db: Session = Depends(get_db)):
    return make_success_response(BalanceTotal(balance=queries.total_balance(db)))


@router.put("/transfer", response_model=TransferResponse)
def transfer_between_accounts(payload: TransferRequest, db: Session = Depends(get_db)):
    result = transfer(db, payload.from_id, payload.to_id, payload.amount)
    return make_success_response(result)


@router.get("/{account_id}", response_model=AccountResponse)
def read_account(account_id: int, db: Session = Depends(get_db)):
    account = AccountStore(db).get(account_id)
    return make_success_response(AccountOut.model_validate(account))


@router.put("/{account_id}", response_model=AccountResponse)
def replace_account(account_id: int, payload: AccountIn, db: Session = Depends(get_db)):
    # Whole-record replace: the payload carries every field
    account = AccountStore(db).replace(account_id, payload.model_dump())
    return make_success_response(AccountOut.model_validate(account))


@router.delete("/{account_id}", response_model=DeletedResponse)
def delete_account(account_id: int, db: Session = Depends(get_db)):
    AccountStore(db).delete_by_id(account_id)
    return make_success_response(CreatedData(id=account_id))
