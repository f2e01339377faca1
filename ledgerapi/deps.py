from fastapi import Depends, Request
from sqlalchemy.orm import Session

from ledgerapi.database.session import get_db
from ledgerapi.services.summary_service import SummaryService
from ledgerapi.services.sync_service import SyncCoordinator


def get_sync_coordinator(request: Request) -> SyncCoordinator:
    return request.app.container.sync.sync_coordinator()


def get_summary_service(
    db: Session = Depends(get_db),
    coordinator: SyncCoordinator = Depends(get_sync_coordinator),
) -> SummaryService:
    return SummaryService(db=db, coordinator=coordinator)
