# Schemas package - Pydantic models for API and repository layers

from .summary import PayoutSummarySchema, SummaryTotals, UserSummarySchema
from .sync import SyncResponse, SyncResult, SyncStatus
from .transaction import (
    PageMeta,
    TransactionApiResponse,
    TransactionItem,
    TransactionSchema,
)
