from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ledgerapi.models import Base
from ledgerapi.providers.transactions.base import TransactionSource
from ledgerapi.schemas.transaction import TransactionApiResponse, TransactionItem


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(
        autocommit=False, autoflush=False, bind=engine, expire_on_commit=False
    )


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


def make_item(
    transaction_id: str,
    user_id: str,
    type: str,
    amount,
    created_at: str = "2024-01-01T00:00:00Z",
) -> TransactionItem:
    return TransactionItem.model_validate(
        {
            "id": transaction_id,
            "userId": user_id,
            "createdAt": created_at,
            "type": type,
            "amount": amount,
        }
    )


class StubSource(TransactionSource):
    """Returns queued batches (or raises queued exceptions) in order."""

    def __init__(self, *batches):
        self.batches = list(batches)
        self.calls: List[tuple] = []

    def fetch(self, start: datetime, end: datetime) -> TransactionApiResponse:
        self.calls.append((start, end))
        batch = self.batches.pop(0) if self.batches else []
        if isinstance(batch, Exception):
            raise batch
        return TransactionApiResponse.single_page(batch)


class FixedClock:
    def __init__(self, start: Optional[datetime] = None):
        self.now = start or datetime(2024, 1, 2, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def tick(self, **kwargs) -> datetime:
        self.now = self.now + timedelta(**kwargs)
        return self.now
