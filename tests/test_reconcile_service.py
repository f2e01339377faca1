from decimal import Decimal

import pytest

from conftest import make_item
from ledgerapi.models import Transaction, UserSummary
from ledgerapi.repositories.summary_repository import UserSummaryRepository
from ledgerapi.repositories.transaction_repository import TransactionRepository
from ledgerapi.schemas.summary import SummaryTotals
from ledgerapi.schemas.transaction import TransactionSchema
from ledgerapi.services.reconcile_service import ReconcileService, summarize_transactions


def as_schema(item) -> TransactionSchema:
    return TransactionSchema.model_validate(item.model_dump())


class TestSummarizeTransactions:
    """집계 계산 테스트"""

    def test_balance_for_mixed_types(self):
        transactions = [
            as_schema(make_item("t1", "user1", "earned", 500)),
            as_schema(make_item("t2", "user1", "spent", 100)),
            as_schema(make_item("t3", "user1", "payout", 200)),
        ]

        totals = summarize_transactions(transactions)

        assert totals.earned == Decimal("500")
        assert totals.spent == Decimal("100")
        assert totals.payout == Decimal("200")
        assert totals.paid_out == Decimal("200")
        assert totals.balance == Decimal("200")

    def test_no_transactions_is_all_zero(self):
        totals = summarize_transactions([])

        assert totals.model_dump() == {
            "earned": Decimal("0"),
            "spent": Decimal("0"),
            "payout": Decimal("0"),
            "paid_out": Decimal("0"),
            "balance": Decimal("0"),
        }

    def test_fractional_amounts_are_exact(self):
        transactions = [
            as_schema(make_item("t1", "u", "earned", 0.1)),
            as_schema(make_item("t2", "u", "earned", 0.2)),
            as_schema(make_item("t3", "u", "spent", 0.3)),
        ]

        totals = summarize_transactions(transactions)

        assert totals.earned == Decimal("0.30")
        assert totals.balance == Decimal("0.00")


class TestReconcileService:
    """ReconcileService 테스트 (SQLite)"""

    @pytest.fixture
    def service(self, db):
        return ReconcileService(db)

    def _store(self, db, *items):
        repo = TransactionRepository(db)
        for item in items:
            repo.insert(item)
        db.commit()

    def test_creates_summary_on_first_reconciliation(self, db, service):
        self._store(
            db,
            make_item("t1", "user1", "earned", 500),
            make_item("t2", "user1", "spent", 100),
            make_item("t3", "user1", "payout", 200),
        )

        summary = service.recalculate("user1", commit=True)

        assert summary.user_id == "user1"
        assert summary.earned == Decimal("500")
        assert summary.spent == Decimal("100")
        assert summary.payout == Decimal("200")
        assert summary.paid_out == Decimal("200")
        assert summary.balance == Decimal("200")

        stored = UserSummaryRepository(db).get_by_user_id("user1")
        assert stored == summary

    def test_earned_only_user(self, db, service):
        self._store(db, make_item("t1", "user1", "earned", 300))

        summary = service.recalculate("user1", commit=True)

        assert summary.earned == Decimal("300")
        assert summary.spent == Decimal("0")
        assert summary.payout == Decimal("0")
        assert summary.paid_out == Decimal("0")
        assert summary.balance == Decimal("300")

    def test_recalculate_twice_is_identical(self, db, service):
        self._store(
            db,
            make_item("t1", "user1", "earned", 42.5),
            make_item("t2", "user1", "payout", 2.25),
        )

        first = service.recalculate("user1", commit=True)
        second = service.recalculate("user1", commit=True)

        assert first.model_dump() == second.model_dump()
        assert db.query(UserSummary).count() == 1

    def test_overwrites_corrupted_summary(self, db, service):
        self._store(db, make_item("t1", "user1", "earned", 10))
        service.recalculate("user1", commit=True)

        repo = UserSummaryRepository(db)
        repo.upsert(
            "user1",
            SummaryTotals(earned=999, spent=0, payout=0, paid_out=0, balance=999),
            commit=True,
        )

        healed = service.recalculate("user1", commit=True)

        assert healed.earned == Decimal("10")
        assert healed.balance == Decimal("10")

    def test_only_reads_that_users_history(self, db, service):
        self._store(
            db,
            make_item("t1", "user1", "earned", 10),
            make_item("t2", "user2", "earned", 99),
        )

        summary = service.recalculate("user1", commit=True)

        assert summary.earned == Decimal("10")
        assert UserSummaryRepository(db).get_by_user_id("user2") is None

    def test_totals_above_one_hundred_million(self, db, service):
        self._store(
            db,
            make_item("t1", "user1", "earned", "60000000.00"),
            make_item("t2", "user1", "earned", "60000000.00"),
        )

        summary = service.recalculate("user1", commit=True)

        assert summary.earned == Decimal("120000000.00")
        assert summary.balance == Decimal("120000000.00")
        for column in ("balance", "earned", "spent", "payout", "paid_out"):
            assert UserSummary.__table__.c[column].type.precision == 18
        assert Transaction.__table__.c.amount.type.precision == 18
