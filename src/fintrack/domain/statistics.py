"""Statistics domain service."""

import logging
from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import (
    CategoryStatistic,
    Direction,
    GeneralStatistics,
    PeriodStatistic,
    Transaction,
    TransactionStatus,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


class StatisticsService:
    """Service for income and expense figures of a user.

    Deleted payments never count towards any figure.
    """

    def __init__(self, db: Database):
        """Initialize statistics service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_counted_transactions(
        self,
        username: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[Transaction]:
        """Get the transactions of a user that statistics are built from."""
        user = self.db.get_user_by_username(username)
        if user is None:
            logger.info("No user %r, statistics are empty", username)
            return []
        return self.db.list_transactions(
            user_id=user.id,
            exclude_status=TransactionStatus.PAYMENT_DELETED,
            start_date=start_date,
            end_date=end_date,
        )

    def general_statistics(self, username: str) -> GeneralStatistics:
        """Compute total income, total expense and balance.

        Args:
            username: Owner of the transactions

        Returns:
            GeneralStatistics for every counted transaction
        """
        transactions = self.get_counted_transactions(username)

        income = sum(
            (t.amount for t in transactions if t.direction == Direction.DEBIT), ZERO
        )
        expense = sum(
            (t.amount for t in transactions if t.direction == Direction.CREDIT), ZERO
        )
        return GeneralStatistics(
            total_income=income,
            total_expense=expense,
            balance=income - expense,
            transaction_count=len(transactions),
        )

    def statistics_by_category(self, username: str) -> list[CategoryStatistic]:
        """Sum amounts per category.

        Returns:
            One entry per category used, sorted by category name
        """
        totals: dict[int, Decimal] = defaultdict(lambda: ZERO)
        counts: dict[int, int] = defaultdict(int)
        categories = {}

        for transaction in self.get_counted_transactions(username):
            category = transaction.category
            categories[category.id] = category
            totals[category.id] += transaction.amount
            counts[category.id] += 1

        results = [
            CategoryStatistic(
                category_name=category.name,
                direction=category.direction,
                total=totals[category_id],
                count=counts[category_id],
            )
            for category_id, category in categories.items()
        ]
        results.sort(key=lambda s: s.category_name.lower())
        return results

    def statistics_by_period(
        self,
        username: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[PeriodStatistic]:
        """Sum income and expenses per day.

        Args:
            username: Owner of the transactions
            start_date: Optional first day (inclusive)
            end_date: Optional last day (inclusive)

        Returns:
            One entry per day with transactions, sorted by day
        """
        income: dict[date, Decimal] = defaultdict(lambda: ZERO)
        expenses: dict[date, Decimal] = defaultdict(lambda: ZERO)
        counts: dict[date, int] = defaultdict(int)

        transactions = self.get_counted_transactions(
            username, start_date=start_date, end_date=end_date
        )
        for transaction in transactions:
            day = transaction.date_time.date()
            counts[day] += 1
            if transaction.direction == Direction.DEBIT:
                income[day] += transaction.amount
            else:
                expenses[day] += transaction.amount

        return [
            PeriodStatistic(
                period=day,
                income=income[day],
                expenses=expenses[day],
                balance=income[day] - expenses[day],
                transaction_count=counts[day],
            )
            for day in sorted(counts)
        ]
