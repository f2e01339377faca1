from fastapi import APIRouter, Depends

from ledgerapi.deps import get_sync_coordinator
from ledgerapi.schemas.health import HealthCheckResponse
from ledgerapi.services.sync_service import SyncCoordinator

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
def health_check(
    coordinator: SyncCoordinator = Depends(get_sync_coordinator),
) -> HealthCheckResponse:
    """Health check endpoint."""

    return HealthCheckResponse(last_synced_at=coordinator.cursor.last_synced_at)
