"""
거래 원장 모델

업스트림 API에서 수집한 거래를 저장합니다. 한번 저장된 거래는 수정/삭제되지
않으며, 동일한 id는 한 번만 저장됩니다 (id 기준 멱등 수집).
"""

import enum
from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Enum, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from ledgerapi.models.base import Base


class TransactionType(str, enum.Enum):
    EARNED = "earned"
    SPENT = "spent"
    PAYOUT = "payout"


class Transaction(Base):
    """
    Immutable ledger entry mirrored from the upstream transaction API.

    `created_at` is the upstream creation time, not the ingestion time;
    `synced_at` records when this service first stored the row.
    """

    __tablename__ = "transactions"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    type: Mapped[TransactionType] = mapped_column(
        Enum(
            TransactionType,
            name="transaction_type",
            native_enum=False,
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)
    synced_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
