import asyncio
from unittest.mock import Mock

from ledgerapi.config import Settings
from ledgerapi.containers import Container, create_transaction_source
from ledgerapi.providers.transactions import FallbackTransactionSource, TransactionApiClient
from ledgerapi.scheduler import SyncScheduler
from ledgerapi.services.sync_service import SyncCoordinator


class TestSyncScheduler:
    """주기 실행 스케줄러 테스트"""

    def test_tick_runs_non_blocking_sync(self):
        coordinator = Mock()
        scheduler = SyncScheduler(coordinator, interval_seconds=60)

        asyncio.run(scheduler.tick())

        coordinator.sync.assert_called_once_with(False)
        assert scheduler.run_count == 1

    def test_start_runs_immediately_and_stop_cancels(self):
        coordinator = Mock()
        scheduler = SyncScheduler(coordinator, interval_seconds=3600)

        async def scenario():
            scheduler.start()
            await asyncio.sleep(0.2)
            await scheduler.stop()

        asyncio.run(scenario())

        coordinator.sync.assert_called_once_with(False)
        assert scheduler.running is False

    def test_loop_survives_sync_errors(self):
        calls = []

        def sync(wait):
            calls.append(wait)
            if len(calls) == 1:
                raise RuntimeError("boom")

        coordinator = Mock()
        coordinator.sync.side_effect = sync
        scheduler = SyncScheduler(coordinator, interval_seconds=0.01)

        async def scenario():
            scheduler.start()
            await asyncio.sleep(0.2)
            await scheduler.stop()

        asyncio.run(scenario())

        assert len(calls) >= 2


class TestContainer:
    def test_fallback_enabled_wraps_client(self):
        source = create_transaction_source(
            Settings(TRANSACTION_SOURCE_FALLBACK_ENABLED=True)
        )

        assert isinstance(source, FallbackTransactionSource)
        assert isinstance(source.primary, TransactionApiClient)
        source.close()

    def test_fallback_disabled_uses_client_directly(self):
        source = create_transaction_source(
            Settings(
                TRANSACTION_SOURCE_FALLBACK_ENABLED=False,
                TRANSACTION_API_MAX_PAGES=7,
            )
        )

        assert isinstance(source, TransactionApiClient)
        assert source.max_pages == 7
        source.close()

    def test_coordinator_is_a_singleton(self):
        container = Container()

        first = container.sync.sync_coordinator()
        second = container.sync.sync_coordinator()

        assert isinstance(first, SyncCoordinator)
        assert first is second
        container.sync.transaction_source().close()
