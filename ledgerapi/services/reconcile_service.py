"""
정산 서비스

사용자의 전체 거래 내역으로 집계를 다시 계산하여 user_summaries 에 덮어씁니다.
증분 반영이 아닌 전체 재계산이므로, 잘못된 집계는 해당 사용자가 다음 동기화에
포함될 때 자동으로 복구됩니다.
"""

import logging
from decimal import Decimal
from typing import Iterable

from sqlalchemy.orm import Session

from ledgerapi.models.transaction import TransactionType
from ledgerapi.repositories.summary_repository import UserSummaryRepository
from ledgerapi.repositories.transaction_repository import TransactionRepository
from ledgerapi.schemas.summary import SummaryTotals, UserSummarySchema
from ledgerapi.schemas.transaction import TransactionSchema

logger = logging.getLogger(__name__)


def summarize_transactions(transactions: Iterable[TransactionSchema]) -> SummaryTotals:
    """
    Sum amounts per transaction type.

    Payout requests are treated as immediately and fully paid out, so
    paid_out always equals payout.
    """
    totals = {
        TransactionType.EARNED: Decimal("0"),
        TransactionType.SPENT: Decimal("0"),
        TransactionType.PAYOUT: Decimal("0"),
    }
    for transaction in transactions:
        totals[transaction.type] += transaction.amount

    earned = totals[TransactionType.EARNED]
    spent = totals[TransactionType.SPENT]
    payout = totals[TransactionType.PAYOUT]
    paid_out = payout

    return SummaryTotals(
        earned=earned,
        spent=spent,
        payout=payout,
        paid_out=paid_out,
        balance=earned - spent - paid_out,
    )


class ReconcileService:
    """Recomputes one user's summary from their complete history"""

    def __init__(self, db: Session):
        self.db = db
        self.transaction_repo = TransactionRepository(db)
        self.summary_repo = UserSummaryRepository(db)

    def recalculate(self, user_id: str, commit: bool = False) -> UserSummarySchema:
        """
        Args:
            user_id: 사용자 ID
            commit: True면 즉시 커밋 (동기화 사이클 내에서는 False)

        Returns:
            UserSummarySchema: 갱신된 집계

        Storage errors propagate to the caller.
        """
        transactions = self.transaction_repo.find_by_user(user_id)
        totals = summarize_transactions(transactions)
        summary = self.summary_repo.upsert(user_id, totals, commit=commit)

        logger.debug(
            f"Updated summary for user {user_id} from {len(transactions)} transactions"
        )
        return summary
