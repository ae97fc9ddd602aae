"""Shared fixtures: an in-memory SQLite ledger and an API client bound to it."""

from decimal import Decimal
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ledger.db import get_db
from ledger.main import app
from ledger.models import Account, AccountType, Base


@pytest.fixture
def engine() -> Iterator[Engine]:
    """One shared in-memory connection per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory: sessionmaker) -> Iterator[TestClient]:
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_account(db: Session) -> Callable[..., Account]:
    """Persist an account directly, bypassing the API"""

    def _make(
        balance,
        account_type: AccountType = AccountType.CHECKING,
        financial_institution: str = "BANK A",
    ) -> Account:
        account = Account(
            balance=Decimal(str(balance)),
            account_type=account_type,
            financial_institution=financial_institution,
        )
        db.add(account)
        db.commit()
        db.refresh(account)
        return account

    return _make
