from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from ledgerapi.models.base import BaseModel


class UserSummary(BaseModel):
    """
    사용자별 집계 테이블

    transactions 테이블에서 언제든 재계산 가능한 materialized view 입니다.
    정산 시 전체 거래 내역으로 다섯 개 금액 필드를 모두 덮어씁니다.
    """

    __tablename__ = "user_summaries"

    user_id: Mapped[str] = mapped_column(String, primary_key=True)
    balance: Mapped[Decimal] = mapped_column(
        Numeric(18, 2), nullable=False, default=Decimal("0")
    )
    earned: Mapped[Decimal] = mapped_column(
        Numeric(18, 2), nullable=False, default=Decimal("0")
    )
    spent: Mapped[Decimal] = mapped_column(
        Numeric(18, 2), nullable=False, default=Decimal("0")
    )
    payout: Mapped[Decimal] = mapped_column(
        Numeric(18, 2), nullable=False, default=Decimal("0")
    )
    # 지급 요청은 즉시 전액 지급된 것으로 간주 (paid_out == payout)
    paid_out: Mapped[Decimal] = mapped_column(
        Numeric(18, 2), nullable=False, default=Decimal("0")
    )

    # created_at, updated_at inherited from BaseModel's TimestampMixin
