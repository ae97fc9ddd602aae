from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from ledger.db import get_db
from ledger.models import Revenue, RevenueCategory
from ledger.schemas.common import make_success_response
from ledger.schemas.revenue import (
    RevenueIn,
    RevenueListResponse,
    RevenueOut,
    RevenueResponse,
    RevenueTotal,
    RevenueTotalResponse,
)
from ledger.schemas.records import CreatedData, CreatedResponse, DateRange, DeletedResponse
from ledger.services import queries
from ledger.services.store import RevenueStore
from ledger.services.validation import validate_model

router = APIRouter(
    prefix="/api/v1/revenues",
    tags=["Revenues"],
)


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_revenue(payload: RevenueIn, db: Session = Depends(get_db)):
    revenue = RevenueStore(db).save(Revenue(**payload.model_dump()))
    return make_success_response(CreatedData(id=revenue.id))


@router.get("", response_model=RevenueListResponse)
def list_revenues(
    start: Optional[str] = Query(None, description="dd-mm-yyyy, inclusive"),
    end: Optional[str] = Query(None, description="dd-mm-yyyy, inclusive"),
    db: Session = Depends(get_db),
):
    if start is None and end is None:
        revenues = RevenueStore(db).find_all()
    else:
        date_range = validate_model(DateRange, {"start": start, "end": end})
        revenues = queries.revenues_between(db, date_range.start, date_range.end)
    return make_success_response([RevenueOut.model_validate(r) for r in revenues])


@router.get("/total", response_model=RevenueTotalResponse)
def read_total_revenue(db: Session = Depends(get_db)):
    return make_success_response(RevenueTotal(total=queries.total_revenue(db)))


@router.get("/category/{category}", response_model=RevenueListResponse)
def list_revenues_by_category(category: RevenueCategory, db: Session = Depends(get_db)):
    revenues = queries.revenues_by_category(db, category)
    return make_success_response([RevenueOut.model_validate(r) for r in revenues])


@router.get("/{revenue_id}", response_model=RevenueResponse)
def read_revenue(revenue_id: int, db: Session = Depends(get_db)):
    revenue = RevenueStore(db).get(revenue_id)
    return make_success_response(RevenueOut.model_validate(revenue))


@router.put("/{revenue_id}", response_model=RevenueResponse)
def replace_revenue(revenue_id: int, payload: RevenueIn, db: Session = Depends(get_db)):
    revenue = RevenueStore(db).replace(revenue_id, payload.model_dump())
    return make_success_response(RevenueOut.model_validate(revenue))


@router.delete("/{revenue_id}", response_model=DeletedResponse)
def delete_revenue(revenue_id: int, db: Session = Depends(get_db)):
    RevenueStore(db).delete_by_id(revenue_id)
    return make_success_response(CreatedData(id=revenue_id))
