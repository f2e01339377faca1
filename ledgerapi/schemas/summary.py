from decimal import Decimal

from pydantic import BaseModel

from ledgerapi.schemas.common import CamelModel, Money


class UserSummarySchema(CamelModel):
    """사용자 집계 응답 (GET /api/users/{userId}/summary)"""

    user_id: str
    balance: Money = Decimal("0.00")
    earned: Money = Decimal("0.00")
    spent: Money = Decimal("0.00")
    payout: Money = Decimal("0.00")
    paid_out: Money = Decimal("0.00")


class PayoutSummarySchema(CamelModel):
    """지급 목록 항목 (GET /api/payouts)"""

    user_id: str
    payout_amount: Money


class SummaryTotals(BaseModel):
    """Aggregate computed from one user's complete transaction history."""

    earned: Money
    spent: Money
    payout: Money
    paid_out: Money
    balance: Money
