from decimal import Decimal
from unittest.mock import Mock, patch

import pytest

from ledgerapi.core.exceptions import BadRequestError, NotFoundError
from ledgerapi.schemas.summary import PayoutSummarySchema, UserSummarySchema
from ledgerapi.schemas.sync import SyncResult, SyncStatus
from ledgerapi.services.summary_service import SummaryService


@pytest.fixture
def mock_db():
    return Mock()


@pytest.fixture
def mock_coordinator():
    return Mock()


@pytest.fixture
def summary_service(mock_db, mock_coordinator):
    with patch("ledgerapi.services.summary_service.UserSummaryRepository") as mock_repo_class:
        mock_repo = Mock()
        mock_repo_class.return_value = mock_repo

        service = SummaryService(mock_db, coordinator=mock_coordinator)
        service.summary_repo = mock_repo
        return service


class TestSummaryService:
    """SummaryService 테스트"""

    def test_get_user_summary(self, summary_service):
        # Arrange
        expected = UserSummarySchema(
            user_id="test-user-id",
            balance=Decimal("100.50"),
            earned=Decimal("200.75"),
            spent=Decimal("50.25"),
            payout=Decimal("50"),
            paid_out=Decimal("50"),
        )
        summary_service.summary_repo.get_by_user_id.return_value = expected

        # Act
        result = summary_service.get_user_summary("test-user-id")

        # Assert
        assert result == expected
        summary_service.summary_repo.get_by_user_id.assert_called_once_with("test-user-id")

    def test_get_user_summary_not_found(self, summary_service):
        summary_service.summary_repo.get_by_user_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            summary_service.get_user_summary("non-existent-user")

        assert exc_info.value.status_code == 404

    @pytest.mark.parametrize("user_id", ["", "   ", None])
    def test_blank_user_id_rejected_before_store_access(self, summary_service, user_id):
        with pytest.raises(BadRequestError) as exc_info:
            summary_service.get_user_summary(user_id)

        assert exc_info.value.status_code == 400
        summary_service.summary_repo.get_by_user_id.assert_not_called()

    def test_list_payout_summaries(self, summary_service):
        payouts = [
            PayoutSummarySchema(user_id="user1", payout_amount=Decimal("100")),
            PayoutSummarySchema(user_id="user2", payout_amount=Decimal("200")),
        ]
        summary_service.summary_repo.list_positive_payouts.return_value = payouts

        assert summary_service.list_payout_summaries() == payouts

    def test_list_payout_summaries_empty(self, summary_service):
        summary_service.summary_repo.list_positive_payouts.return_value = []

        assert summary_service.list_payout_summaries() == []

    def test_force_sync_waits_for_coordinator(self, summary_service, mock_coordinator):
        mock_coordinator.sync.return_value = SyncResult(status=SyncStatus.EMPTY)

        result = summary_service.force_sync()

        assert result.status == SyncStatus.EMPTY
        mock_coordinator.sync.assert_called_once_with(wait=True)
