from abc import ABC, abstractmethod
from datetime import datetime

from ledgerapi.schemas.transaction import TransactionApiResponse


class TransactionSourceError(Exception):
    """Upstream transaction API could not be reached or returned an unusable payload"""

    def __init__(self, message: str, reason: str = "unknown"):
        super().__init__(message)
        self.reason = reason


class TransactionSource(ABC):
    """Anything that can produce all transactions created inside a time window"""

    @abstractmethod
    def fetch(self, start: datetime, end: datetime) -> TransactionApiResponse:
        """Return every transaction in [start, end) flattened into one batch."""

    def close(self) -> None:
        pass
