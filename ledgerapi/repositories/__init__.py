# Repository layer - Data access with Pydantic responses

from .base import BaseRepository
from .summary_repository import UserSummaryRepository
from .transaction_repository import TransactionRepository

__all__ = [
    "BaseRepository",
    "TransactionRepository",
    "UserSummaryRepository",
]
