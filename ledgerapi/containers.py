from dependency_injector import containers, providers

from ledgerapi.config import Settings, get_settings
from ledgerapi.database.connection import SessionLocal
from ledgerapi.providers.transactions import (
    FallbackTransactionSource,
    TransactionApiClient,
    TransactionSource,
)
from ledgerapi.scheduler import SyncScheduler
from ledgerapi.services.sync_service import SyncCoordinator


def create_transaction_source(settings: Settings) -> TransactionSource:
    """Build the upstream source, wrapped in the sample-data fallback when enabled."""
    client = TransactionApiClient(
        base_url=settings.TRANSACTION_API_BASE_URL,
        timeout=settings.TRANSACTION_API_TIMEOUT_SECONDS,
        max_pages=settings.TRANSACTION_API_MAX_PAGES,
    )
    if settings.TRANSACTION_SOURCE_FALLBACK_ENABLED:
        return FallbackTransactionSource(client)
    return client


class ConfigModule(containers.DeclarativeContainer):
    """Application configuration."""

    config = providers.Singleton(get_settings)


class SyncModule(containers.DeclarativeContainer):
    """Long-lived sync components (one per process)."""

    config = providers.DependenciesContainer()

    session_factory = providers.Object(SessionLocal)
    transaction_source = providers.Singleton(
        create_transaction_source, settings=config.config
    )
    sync_coordinator = providers.Singleton(
        SyncCoordinator,
        source=transaction_source,
        session_factory=session_factory,
        lookback_hours=config.config.provided.SYNC_INITIAL_LOOKBACK_HOURS,
    )
    sync_scheduler = providers.Singleton(
        SyncScheduler,
        coordinator=sync_coordinator,
        interval_seconds=config.config.provided.SYNC_INTERVAL_SECONDS,
    )


class Container(containers.DeclarativeContainer):
    """Application container."""

    config = providers.Container(ConfigModule)
    sync = providers.Container(SyncModule, config=config)
