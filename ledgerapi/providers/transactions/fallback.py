import logging
from datetime import datetime

from ledgerapi.providers.transactions.base import (
    TransactionSource,
    TransactionSourceError,
)
from ledgerapi.providers.transactions.sample_data import sample_page
from ledgerapi.schemas.transaction import TransactionApiResponse

logger = logging.getLogger(__name__)


class FallbackTransactionSource(TransactionSource):
    """
    Development policy: degrade to the built-in sample dataset when the
    primary source fails.

    Only the first sample page is returned, as if the real API had answered
    page 1. This masks real outages, so production settings disable it.
    """

    def __init__(self, primary: TransactionSource):
        self.primary = primary

    def fetch(self, start: datetime, end: datetime) -> TransactionApiResponse:
        try:
            return self.primary.fetch(start, end)
        except TransactionSourceError as exc:
            logger.warning(
                f"External API unavailable, using mock data. Reason: {exc.reason}"
            )
            return sample_page(1)

    def close(self) -> None:
        self.primary.close()
