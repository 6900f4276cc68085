"""Bank account domain service."""

import logging
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import BankAccount, BankPatch, Subject, is_supplied
from fintrack.domain.errors import ConflictError, ValidationError, duplicate_account_number

logger = logging.getLogger(__name__)


class BankService:
    """Service for managing subjects' bank accounts."""

    def __init__(self, db: Database):
        """Initialize bank service.

        Args:
            db: Database instance
        """
        self.db = db

    def find_bank(self, account_number: str) -> Optional[BankAccount]:
        """Find a bank account by its primary account number."""
        return self.db.get_bank_by_account_number(account_number.strip())

    def list_banks(self, subject_id: Optional[int] = None) -> list[BankAccount]:
        """List bank accounts, optionally only those of one subject."""
        return self.db.list_banks(subject_id=subject_id)

    def create_bank(
        self,
        bank_name: Optional[str],
        correspondent_account: Optional[str],
        account_number: str,
        owner: Subject,
    ) -> BankAccount:
        """Create a new bank account linked to a subject.

        No lookup is done: an account number that is already registered is
        rejected rather than reused.

        Args:
            bank_name: Bank name
            correspondent_account: Secondary (correspondent) account number
            account_number: Primary account number
            owner: Owning subject

        Returns:
            The new bank account

        Raises:
            ValidationError: If the account number is blank
            ConflictError: If either account number is already registered
        """
        if not is_supplied(account_number):
            raise ValidationError("Account number is required")
        account_number = account_number.strip()
        correspondent_account = (
            correspondent_account.strip() if is_supplied(correspondent_account) else None
        )

        if self.db.get_bank_by_account_number(account_number) is not None:
            raise ConflictError(duplicate_account_number(account_number))
        if (
            correspondent_account is not None
            and self.db.get_bank_by_correspondent_account(correspondent_account) is not None
        ):
            raise ConflictError(duplicate_account_number(correspondent_account))

        bank_id = self.db.create_bank(
            account_number=account_number,
            subject_id=owner.id,
            bank_name=bank_name,
            correspondent_account=correspondent_account,
        )
        logger.info("Created bank account %s for subject %s", account_number, owner.tax_id)
        return self.db.get_bank(bank_id)

    def update_or_create_bank(self, patch: BankPatch, owner: Subject) -> Optional[BankAccount]:
        """Update a bank account found by account number, or create it.

        Args:
            patch: Bank fields; the account number is the lookup key
            owner: Subject that owns a newly created account

        Returns:
            The stored bank account, or None when no account number was supplied
        """
        if not is_supplied(patch.account_number):
            logger.warning("No account number supplied for subject %s, bank left as is", owner.tax_id)
            return None

        account_number = patch.account_number.strip()
        bank = self.db.get_bank_by_account_number(account_number)
        if bank is None:
            logger.info("No bank account %s, creating a new one", account_number)
            return self.create_bank(
                bank_name=patch.bank_name if is_supplied(patch.bank_name) else None,
                correspondent_account=(
                    patch.correspondent_account if is_supplied(patch.correspondent_account) else None
                ),
                account_number=account_number,
                owner=owner,
            )

        logger.info("Found bank account %s", account_number)
        correspondent_account = None
        if is_supplied(patch.correspondent_account):
            correspondent_account = patch.correspondent_account.strip()
            holder = self.db.get_bank_by_correspondent_account(correspondent_account)
            if holder is not None and holder.id != bank.id:
                raise ConflictError(duplicate_account_number(correspondent_account))

        self.db.update_bank(
            bank.id,
            bank_name=patch.bank_name if is_supplied(patch.bank_name) else None,
            correspondent_account=correspondent_account,
        )
        logger.info("Bank account %s updated", account_number)
        return self.db.get_bank(bank.id)
