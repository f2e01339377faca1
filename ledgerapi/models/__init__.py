from .base import Base
from .transaction import Transaction, TransactionType
from .user_summary import UserSummary

__all__ = ["Base", "Transaction", "TransactionType", "UserSummary"]
