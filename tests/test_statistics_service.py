"""Tests for StatisticsService."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from fintrack.domain.entities import Direction, TransactionStatus
from builders import no_banks


@pytest.fixture
def ledger(transaction_service):
    """Income of 1000.00 and expenses of 250.50 + 49.50 for alice, plus bob's expense."""
    salary = transaction_service.create_transaction(
        no_banks(amount="1000.00", direction=Direction.DEBIT, category="Salary"), "alice"
    )
    groceries = transaction_service.create_transaction(
        no_banks(amount="250.50", category="Groceries"), "alice"
    )
    more_groceries = transaction_service.create_transaction(
        no_banks(amount="49.50", category="Groceries"), "alice"
    )
    transaction_service.create_transaction(no_banks(amount="999.00", category="Transport"), "bob")
    return {"salary": salary, "groceries": groceries, "more_groceries": more_groceries}


def test_general_statistics(statistics_service, ledger):
    stats = statistics_service.general_statistics("alice")

    assert stats.total_income == Decimal("1000.00")
    assert stats.total_expense == Decimal("300.00")
    assert stats.balance == Decimal("700.00")
    assert stats.transaction_count == 3


def test_unknown_user_has_empty_statistics(statistics_service, ledger):
    stats = statistics_service.general_statistics("nobody")

    assert stats.transaction_count == 0
    assert stats.balance == Decimal("0")
    assert statistics_service.statistics_by_category("nobody") == []
    assert statistics_service.statistics_by_period("nobody") == []


def test_deleted_transactions_are_excluded(statistics_service, transaction_service, ledger):
    transaction_service.mark_as_deleted(ledger["groceries"].id)

    stats = statistics_service.general_statistics("alice")

    assert stats.total_expense == Decimal("49.50")
    assert stats.transaction_count == 2


def test_other_statuses_still_count(statistics_service, temp_db, ledger):
    temp_db.update_transaction(ledger["groceries"].id, status=TransactionStatus.PAYMENT_COMPLETED)

    assert statistics_service.general_statistics("alice").total_expense == Decimal("300.00")


def test_statistics_by_category(statistics_service, ledger):
    results = statistics_service.statistics_by_category("alice")

    assert [r.category_name for r in results] == ["Groceries", "Salary"]
    groceries, salary = results
    assert groceries.total == Decimal("300.00")
    assert groceries.count == 2
    assert groceries.direction == Direction.CREDIT
    assert salary.total == Decimal("1000.00")
    assert salary.direction == Direction.DEBIT


def test_statistics_by_period(statistics_service, ledger):
    today = ledger["salary"].date_time.date()

    results = statistics_service.statistics_by_period("alice", start_date=today, end_date=today)

    assert len(results) == 1
    day = results[0]
    assert day.period == today
    assert day.income == Decimal("1000.00")
    assert day.expenses == Decimal("300.00")
    assert day.balance == Decimal("700.00")
    assert day.transaction_count == 3


def test_statistics_by_period_outside_range(statistics_service, ledger):
    tomorrow = ledger["salary"].date_time.date() + timedelta(days=1)

    assert statistics_service.statistics_by_period("alice", start_date=tomorrow) == []
    assert statistics_service.statistics_by_period("alice", end_date=date(2000, 1, 1)) == []
