"""
Summary Router

Thin read endpoints over the materialized user summaries, plus the
on-demand sync trigger.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from ledgerapi.deps import get_summary_service
from ledgerapi.schemas.summary import PayoutSummarySchema, UserSummarySchema
from ledgerapi.schemas.sync import SyncResponse, SyncStatus
from ledgerapi.services.summary_service import SummaryService

router = APIRouter(prefix="/api", tags=["summaries"])
logger = logging.getLogger(__name__)

SYNC_MESSAGES = {
    SyncStatus.COMPLETED: "Transaction sync completed",
    SyncStatus.EMPTY: "Transaction sync completed",
    SyncStatus.FAILED: "Transaction sync failed, the window will be retried",
    SyncStatus.SKIPPED: "Transaction sync already in progress",
}


@router.get("/users/{user_id}/summary", response_model=UserSummarySchema)
def get_user_summary(
    user_id: str,
    summary_service: SummaryService = Depends(get_summary_service),
) -> UserSummarySchema:
    """
    Get a user's balance summary.

    400 if the user id is blank, 404 if no summary exists yet.
    """
    return summary_service.get_user_summary(user_id)


@router.get("/payouts", response_model=List[PayoutSummarySchema])
def get_payout_summaries(
    summary_service: SummaryService = Depends(get_summary_service),
) -> List[PayoutSummarySchema]:
    """Users with a positive payout total."""
    return summary_service.list_payout_summaries()


@router.post("/sync", response_model=SyncResponse)
def force_sync_transactions(
    summary_service: SummaryService = Depends(get_summary_service),
) -> SyncResponse:
    """Run a sync cycle now and wait for it to finish."""
    result = summary_service.force_sync()
    return SyncResponse(message=SYNC_MESSAGES[result.status], result=result)
