"""
Transaction Repository

All methods return Pydantic schemas, never SQLAlchemy models.
Stored transactions are immutable: there is no update or delete method.
"""

from typing import List

from sqlalchemy.orm import Session

from ledgerapi.models.transaction import Transaction
from ledgerapi.repositories.base import BaseRepository
from ledgerapi.schemas.transaction import TransactionItem, TransactionSchema


class TransactionRepository(BaseRepository[Transaction, TransactionSchema]):
    """Durable set of transactions keyed by upstream id"""

    def __init__(self, db: Session):
        super().__init__(model_class=Transaction, schema_class=TransactionSchema, db=db)

    def exists_by_id(self, transaction_id: str) -> bool:
        """
        Check whether a transaction id has already been stored.

        Pending rows flushed earlier in the same session are visible.
        """
        return self.db.get(Transaction, transaction_id) is not None

    def insert(self, item: TransactionItem, commit: bool = False) -> TransactionSchema:
        """
        Store a new transaction.

        Returns: TransactionSchema (Pydantic schema)
        """
        return self.create(
            commit=commit,
            id=item.id,
            user_id=item.user_id,
            created_at=item.created_at,
            type=item.type,
            amount=item.amount,
        )

    def find_by_user(self, user_id: str) -> List[TransactionSchema]:
        """
        Get the complete transaction history of a user, oldest first.

        Returns: List of TransactionSchema (Pydantic schema)
        """
        rows = (
            self.db.query(Transaction)
            .filter(Transaction.user_id == user_id)
            .order_by(Transaction.created_at.asc(), Transaction.id.asc())
            .all()
        )
        return self._to_schemas(rows)
