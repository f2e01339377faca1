"""
Transaction Schemas

Pydantic models for the upstream transaction API payload and for
repository-layer conversions of stored transactions.
"""

from datetime import datetime
from typing import List

from pydantic import Field

from ledgerapi.models.transaction import TransactionType
from ledgerapi.schemas.common import CamelModel, Money


class TransactionItem(CamelModel):
    """Single transaction as delivered by the upstream API"""

    id: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    created_at: datetime
    type: TransactionType
    amount: Money = Field(..., ge=0)


class PageMeta(CamelModel):
    total_items: int
    item_count: int
    items_per_page: int
    total_pages: int
    current_page: int


class TransactionApiResponse(CamelModel):
    """
    One page of the upstream response.

    Also used for the flattened batch returned by a transaction source,
    in which case `meta` describes a single page holding every item.
    """

    items: List[TransactionItem] = Field(default_factory=list)
    meta: PageMeta

    @classmethod
    def single_page(cls, items: List[TransactionItem]) -> "TransactionApiResponse":
        return cls(
            items=items,
            meta=PageMeta(
                total_items=len(items),
                item_count=len(items),
                items_per_page=len(items),
                total_pages=1,
                current_page=1,
            ),
        )


class TransactionSchema(CamelModel):
    """
    Stored transaction matching database model.
    Used for repository layer conversions.
    """

    id: str
    user_id: str
    created_at: datetime
    type: TransactionType
    amount: Money
