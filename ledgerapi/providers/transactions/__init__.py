from .base import TransactionSource, TransactionSourceError
from .client import TransactionApiClient
from .fallback import FallbackTransactionSource
from .sample_data import SAMPLE_TRANSACTIONS, sample_page

__all__ = [
    "FallbackTransactionSource",
    "SAMPLE_TRANSACTIONS",
    "TransactionApiClient",
    "TransactionSource",
    "TransactionSourceError",
    "sample_page",
]
