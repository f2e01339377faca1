"""
거래 동기화 서비스

한 번의 동기화 사이클:
1. [last_synced_at, now) 윈도우의 거래를 업스트림에서 조회
2. 처음 보는 거래 id만 저장 (이미 저장된 id는 건너뜀, 멱등성 보장)
3. 새 거래가 생긴 사용자별로 집계를 전체 재계산
4. 모든 쓰기를 하나의 DB 트랜잭션으로 커밋한 뒤에만 커서를 전진

사이클 중 오류가 발생하면 롤백하고 커서를 유지하므로 같은 윈도우가 다음
사이클에서 통째로 다시 처리됩니다.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Callable, Iterable, List, Optional, Set, Tuple

from sqlalchemy.orm import Session, sessionmaker

from ledgerapi.database.session import get_db_context
from ledgerapi.providers.transactions.base import TransactionSource
from ledgerapi.repositories.transaction_repository import TransactionRepository
from ledgerapi.schemas.sync import SyncResult, SyncStatus
from ledgerapi.schemas.transaction import TransactionItem
from ledgerapi.services.reconcile_service import ReconcileService

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SyncCursor:
    """Start of the next sync window"""

    last_synced_at: datetime

    @classmethod
    def initial(cls, lookback_hours: int, now: Optional[datetime] = None) -> "SyncCursor":
        now = now or utc_now()
        return cls(last_synced_at=now - timedelta(hours=lookback_hours))

    def advance(self, to: datetime) -> "SyncCursor":
        return SyncCursor(last_synced_at=to)


@dataclass
class IngestResult:
    inserted: int = 0
    duplicates: int = 0
    affected_users: Set[str] = field(default_factory=set)


class SyncService:
    """Stores unseen transactions and reconciles the users they belong to"""

    def __init__(self, db: Session):
        self.db = db
        self.transaction_repo = TransactionRepository(db)
        self.reconcile_service = ReconcileService(db)

    def ingest(self, items: Iterable[TransactionItem]) -> IngestResult:
        """
        Insert every transaction whose id is not stored yet, in input order,
        then recalculate each affected user exactly once.

        Writes are flushed, not committed; the caller owns the transaction.
        """
        result = IngestResult()

        for item in items:
            if self.transaction_repo.exists_by_id(item.id):
                # 재전송된 거래는 무시 (이중 반영 방지)
                result.duplicates += 1
                continue

            self.transaction_repo.insert(item)
            result.inserted += 1
            result.affected_users.add(item.user_id)

        if result.inserted:
            logger.debug(f"Saved {result.inserted} new transactions")

        for user_id in result.affected_users:
            self.reconcile_service.recalculate(user_id)

        return result


def run_sync_cycle(
    cursor: SyncCursor,
    source: TransactionSource,
    session_factory: Callable[[], Session],
    now: Optional[datetime] = None,
) -> Tuple[SyncCursor, SyncResult]:
    """
    Run one fetch -> ingest -> reconcile cycle for [cursor, now).

    Returns the cursor to use next time together with the cycle outcome.
    Failures never raise: they are logged and the input cursor is returned
    unchanged so that the same window is retried.
    """
    window_start = cursor.last_synced_at
    window_end = now or utc_now()

    logger.debug("Starting transaction sync...")

    try:
        batch = source.fetch(window_start, window_end)

        if not batch.items:
            logger.debug("No new transactions to sync")
            return cursor.advance(window_end), SyncResult(
                status=SyncStatus.EMPTY,
                window_start=window_start,
                window_end=window_end,
            )

        with get_db_context(session_factory) as db:
            ingest = SyncService(db).ingest(batch.items)
    except Exception as e:
        logger.exception(f"Failed to sync transactions: {e}")
        return cursor, SyncResult(
            status=SyncStatus.FAILED,
            window_start=window_start,
            window_end=window_end,
            error=str(e),
        )

    affected: List[str] = sorted(ingest.affected_users)
    logger.info(
        f"Sync completed: fetched={len(batch.items)} inserted={ingest.inserted} "
        f"duplicates={ingest.duplicates} users={len(affected)}"
    )
    return cursor.advance(window_end), SyncResult(
        status=SyncStatus.COMPLETED,
        window_start=window_start,
        window_end=window_end,
        fetched=len(batch.items),
        inserted=ingest.inserted,
        duplicates=ingest.duplicates,
        affected_users=affected,
    )


class SyncCoordinator:
    """
    Owns the sync cursor and makes sure only one cycle runs at a time.

    Overlapping cycles could both see "id X not stored" and insert it twice,
    so every cycle holds a non-reentrant lock. Scheduled runs pass
    ``wait=False`` and are skipped while another cycle is in flight; forced
    runs wait for the lock.
    """

    def __init__(
        self,
        source: TransactionSource,
        session_factory: sessionmaker,
        lookback_hours: int = 24,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.source = source
        self.session_factory = session_factory
        self.clock = clock
        self._cursor = SyncCursor.initial(lookback_hours, now=clock())
        self._lock = threading.Lock()
        self.last_result: Optional[SyncResult] = None

    @property
    def cursor(self) -> SyncCursor:
        return self._cursor

    def sync(self, wait: bool = True) -> SyncResult:
        if not self._lock.acquire(blocking=wait):
            logger.info("Sync already in progress, skipping this run")
            return SyncResult(status=SyncStatus.SKIPPED)

        try:
            self._cursor, result = run_sync_cycle(
                self._cursor, self.source, self.session_factory, now=self.clock()
            )
            self.last_result = result
            return result
        finally:
            self._lock.release()
