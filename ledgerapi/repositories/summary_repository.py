"""
User Summary Repository

읽기 경로(조회 API)와 정산 경로(upsert)가 모두 이 리포지토리를 사용합니다.
"""

from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from ledgerapi.models.user_summary import UserSummary
from ledgerapi.repositories.base import BaseRepository
from ledgerapi.schemas.summary import (
    PayoutSummarySchema,
    SummaryTotals,
    UserSummarySchema,
)


class UserSummaryRepository(BaseRepository[UserSummary, UserSummarySchema]):
    def __init__(self, db: Session):
        super().__init__(UserSummary, UserSummarySchema, db)

    def get_by_user_id(self, user_id: str) -> Optional[UserSummarySchema]:
        """사용자 집계 조회, 없으면 None"""
        return self.get_by_id(user_id)

    def upsert(
        self, user_id: str, totals: SummaryTotals, commit: bool = False
    ) -> UserSummarySchema:
        """
        Fetch-or-create the user's row and overwrite all five amounts.

        Args:
            user_id: 사용자 ID
            totals: 전체 거래 내역으로 계산한 집계값
            commit: True면 즉시 커밋, 아니면 flush만 수행

        Returns:
            UserSummarySchema: 저장된 집계
        """
        summary = self.db.get(UserSummary, user_id)
        if summary is None:
            summary = UserSummary(
                user_id=user_id,
                balance=Decimal("0"),
                earned=Decimal("0"),
                spent=Decimal("0"),
                payout=Decimal("0"),
                paid_out=Decimal("0"),
            )

        summary.earned = totals.earned
        summary.spent = totals.spent
        summary.payout = totals.payout
        summary.paid_out = totals.paid_out
        summary.balance = totals.balance

        self._persist(summary, commit)
        return self.schema_class.model_validate(summary)

    def list_positive_payouts(self) -> List[PayoutSummarySchema]:
        """payout > 0 인 사용자만 (user_id, payout) 으로 조회"""
        rows = (
            self.db.query(UserSummary.user_id, UserSummary.payout)
            .filter(UserSummary.payout > 0)
            .order_by(UserSummary.user_id.asc())
            .all()
        )
        return [
            PayoutSummarySchema(user_id=row.user_id, payout_amount=row.payout)
            for row in rows
        ]
