from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from ledgerapi.schemas.common import CamelModel


class SyncStatus(str, Enum):
    COMPLETED = "completed"  # 새 거래 반영 완료
    EMPTY = "empty"  # 윈도우에 거래 없음 (커서는 전진)
    FAILED = "failed"  # 사이클 실패, 커서 유지
    SKIPPED = "skipped"  # 다른 사이클 진행 중


class SyncResult(CamelModel):
    """Outcome of a single sync cycle"""

    status: SyncStatus
    window_start: Optional[datetime] = None
    window_end: Optional[datetime] = None
    fetched: int = 0
    inserted: int = 0
    duplicates: int = 0
    affected_users: List[str] = Field(default_factory=list)
    error: Optional[str] = None


class SyncResponse(CamelModel):
    message: str
    result: SyncResult
