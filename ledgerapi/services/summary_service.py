"""
Summary Service

Read-only query surface over the materialized user summaries, plus the
on-demand sync trigger.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from ledgerapi.core.exceptions import BadRequestError, NotFoundError
from ledgerapi.repositories.summary_repository import UserSummaryRepository
from ledgerapi.schemas.summary import PayoutSummarySchema, UserSummarySchema
from ledgerapi.schemas.sync import SyncResult
from ledgerapi.services.sync_service import SyncCoordinator

logger = logging.getLogger(__name__)


class SummaryService:
    def __init__(self, db: Session, coordinator: Optional[SyncCoordinator] = None):
        self.db = db
        self.coordinator = coordinator
        self.summary_repo = UserSummaryRepository(db)

    def get_user_summary(self, user_id: Optional[str]) -> UserSummarySchema:
        """
        Get a user's summary.

        Raises:
            BadRequestError: user_id 가 비어있는 경우 (저장소 접근 전 거절)
            NotFoundError: 집계가 존재하지 않는 경우
        """
        if not user_id or not user_id.strip():
            raise BadRequestError("User ID is required")

        summary = self.summary_repo.get_by_user_id(user_id)
        if summary is None:
            raise NotFoundError("User not found", details={"userId": user_id})
        return summary

    def list_payout_summaries(self) -> List[PayoutSummarySchema]:
        """All users with payout > 0, as (userId, payoutAmount) pairs."""
        return self.summary_repo.list_positive_payouts()

    def force_sync(self) -> SyncResult:
        """Run a sync cycle synchronously (waits for an in-flight cycle)."""
        if self.coordinator is None:
            raise RuntimeError("Sync coordinator is not configured")

        logger.info("Force syncing transactions...")
        return self.coordinator.sync(wait=True)
