"""Built-in sample transactions served when the upstream API is unreachable."""

from ledgerapi.schemas.transaction import PageMeta, TransactionApiResponse, TransactionItem

SAMPLE_ITEMS_PER_PAGE = 5

SAMPLE_TRANSACTIONS = [
    {
        "id": "41bbdf81-735c-4aea-beb3-3e5f433a30c5",
        "userId": "074092",
        "createdAt": "2023-03-16T12:33:11.000Z",
        "type": "payout",
        "amount": 30,
    },
    {
        "id": "41bbdf81-735c-4aea-beb3-3e5fasfsdfef",
        "userId": "074092",
        "createdAt": "2023-03-12T12:33:11.000Z",
        "type": "spent",
        "amount": 12,
    },
    {
        "id": "41bbdf81-735c-4aea-beb3-342jhj234nj234",
        "userId": "074092",
        "createdAt": "2023-03-15T12:33:11.000Z",
        "type": "earned",
        "amount": 1.2,
    },
    {
        "id": "41bbdf81-735c-4aea-beb3-3e5f433a30c6",
        "userId": "074093",
        "createdAt": "2023-03-16T12:33:11.000Z",
        "type": "earned",
        "amount": 50,
    },
    {
        "id": "41bbdf81-735c-4aea-beb3-3e5f433a30c7",
        "userId": "074093",
        "createdAt": "2023-03-17T12:33:11.000Z",
        "type": "payout",
        "amount": 25,
    },
    {
        "id": "41bbdf81-735c-4aea-beb3-3e5f433a30c8",
        "userId": "074094",
        "createdAt": "2023-03-18T12:33:11.000Z",
        "type": "earned",
        "amount": 100,
    },
    {
        "id": "41bbdf81-735c-4aea-beb3-3e5f433a30c9",
        "userId": "074094",
        "createdAt": "2023-03-19T12:33:11.000Z",
        "type": "spent",
        "amount": 25,
    },
]


def sample_page(page: int = 1) -> TransactionApiResponse:
    """Slice the sample set the same way the real API paginates it."""
    total_items = len(SAMPLE_TRANSACTIONS)
    start_index = (page - 1) * SAMPLE_ITEMS_PER_PAGE
    end_index = start_index + SAMPLE_ITEMS_PER_PAGE
    page_items = SAMPLE_TRANSACTIONS[start_index:end_index]

    return TransactionApiResponse(
        items=[TransactionItem.model_validate(item) for item in page_items],
        meta=PageMeta(
            total_items=total_items,
            item_count=len(page_items),
            items_per_page=SAMPLE_ITEMS_PER_PAGE,
            total_pages=-(-total_items // SAMPLE_ITEMS_PER_PAGE),
            current_page=page,
        ),
    )
