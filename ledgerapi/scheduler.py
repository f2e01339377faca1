"""
주기적 동기화 스케줄러

FastAPI lifespan 에서 시작되며, SYNC_INTERVAL_SECONDS 마다 동기화 사이클을
워커 스레드에서 실행합니다 (DB/HTTP 호출이 동기 방식이므로 이벤트 루프 차단 방지).
"""

import asyncio
import logging
from typing import Optional

from ledgerapi.services.sync_service import SyncCoordinator

logger = logging.getLogger(__name__)


class SyncScheduler:
    """Runs SyncCoordinator.sync() on a fixed interval."""

    def __init__(
        self,
        coordinator: SyncCoordinator,
        interval_seconds: int = 60,
        run_immediately: bool = True,
    ):
        self.coordinator = coordinator
        self.interval_seconds = interval_seconds
        self.run_immediately = run_immediately
        self.running = False
        self.run_count = 0
        self._task: Optional[asyncio.Task] = None

    async def tick(self) -> None:
        # 진행 중인 사이클이 있으면 이번 실행은 건너뜀
        await asyncio.to_thread(self.coordinator.sync, False)
        self.run_count += 1

    async def _loop(self) -> None:
        if not self.run_immediately:
            await asyncio.sleep(self.interval_seconds)

        while self.running:
            try:
                await self.tick()
            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error(f"Sync scheduler loop error: {e}")

            try:
                await asyncio.sleep(self.interval_seconds)
            except asyncio.CancelledError:
                break

        logger.info("Sync scheduler stopped")

    def start(self) -> None:
        if self.running:
            return
        logger.info(f"Starting sync scheduler (interval: {self.interval_seconds}s)")
        self.running = True
        self._task = asyncio.create_task(self._loop())

    async def stop(self) -> None:
        self.running = False
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
