"""Accumulation register service (income/expense amounts)."""

import logging
from decimal import Decimal

from fintrack.database.base import Database
from fintrack.domain.entities import Direction, RegisterEntry, Transaction

logger = logging.getLogger(__name__)


class RegisterService:
    """Service for the register entries attached to transactions."""

    def __init__(self, db: Database):
        """Initialize register service.

        Args:
            db: Database instance
        """
        self.db = db

    def update_entry(
        self, transaction: Transaction, amount: Decimal, direction: Direction
    ) -> RegisterEntry:
        """Overwrite amount and direction of a transaction's register entry in place."""
        before = transaction.register
        self.db.update_register_entry(before.id, amount=amount, direction=direction)
        logger.info(
            "Register entry %s updated: amount %s -> %s, direction %s -> %s",
            before.id,
            before.amount,
            amount,
            before.direction.value,
            direction.value,
        )
        return RegisterEntry(
            id=before.id,
            direction=direction,
            amount=amount,
            entry_date=before.entry_date,
        )
