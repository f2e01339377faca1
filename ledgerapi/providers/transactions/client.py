"""
업스트림 거래 API 클라이언트

GET {base}/transactions?startDate=...&endDate=...&page=N 를 1페이지부터 순차적으로
호출하여 모든 페이지를 하나의 배치로 합칩니다. 잘못 동작하는 업스트림에 대비해
최대 페이지 수(기본 100)를 넘지 않습니다.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

import httpx
from pydantic import ValidationError

from ledgerapi.providers.transactions.base import (
    TransactionSource,
    TransactionSourceError,
)
from ledgerapi.schemas.transaction import TransactionApiResponse, TransactionItem

logger = logging.getLogger(__name__)

DEFAULT_MAX_PAGES = 100


def to_iso8601(value: datetime) -> str:
    """UTC ISO8601 문자열 (예: 2024-01-01T00:00:00.000Z)"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TransactionApiClient(TransactionSource):
    """HTTP client for the upstream paginated transaction API"""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        max_pages: int = DEFAULT_MAX_PAGES,
        http_client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.max_pages = max_pages
        # HTTP 클라이언트 재사용 (연결 풀 유지)
        self._client = http_client or httpx.Client(
            timeout=httpx.Timeout(timeout, connect=min(timeout, 5.0))
        )

    def fetch(self, start: datetime, end: datetime) -> TransactionApiResponse:
        start_date = to_iso8601(start)
        end_date = to_iso8601(end)
        url = f"{self.base_url}/transactions"

        logger.debug(f"Fetching transactions from {start_date} to {end_date}")

        items: List[TransactionItem] = []
        current_page = 1
        total_pages = 1

        while True:
            page = self._fetch_page(url, start_date, end_date, current_page)
            items.extend(page.items)
            total_pages = page.meta.total_pages

            logger.debug(
                f"Retrieved page {current_page}/{total_pages} with {len(page.items)} transactions"
            )

            current_page += 1
            if current_page > self.max_pages:
                if current_page <= total_pages:
                    logger.warning(
                        f"Reached maximum page limit ({self.max_pages}), stopping pagination"
                    )
                break
            if current_page > total_pages:
                break

        logger.debug(
            f"Retrieved total of {len(items)} transactions across "
            f"{min(current_page - 1, self.max_pages)} pages"
        )
        return TransactionApiResponse.single_page(items)

    def _fetch_page(
        self, url: str, start_date: str, end_date: str, page: int
    ) -> TransactionApiResponse:
        params = {"startDate": start_date, "endDate": end_date, "page": str(page)}
        try:
            response = self._client.get(url, params=params)
            response.raise_for_status()
            return TransactionApiResponse.model_validate(response.json())
        except httpx.HTTPStatusError as exc:
            raise TransactionSourceError(
                f"Transaction API returned {exc.response.status_code} for page {page}",
                reason=f"HTTP {exc.response.status_code}",
            ) from exc
        except httpx.HTTPError as exc:
            raise TransactionSourceError(
                f"Transaction API request failed for page {page}: {exc}",
                reason=type(exc).__name__,
            ) from exc
        except (ValueError, ValidationError) as exc:
            raise TransactionSourceError(
                f"Transaction API returned an invalid payload for page {page}",
                reason="invalid payload",
            ) from exc

    def close(self) -> None:
        """Close underlying HTTP client (call on application shutdown)."""
        self._client.close()
