"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from datetime import datetime, date
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from fintrack.domain.entities import (
    BankAccount,
    Category,
    Direction,
    PersonType,
    Subject,
    Transaction,
    TransactionStatus,
    User,
)


class Database(ABC):
    """Abstract database interface for fintrack."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Run the enclosed writes as one unit: commit on success, roll back on error.

        Nested calls join the outermost scope.
        """
        pass

    # User operations
    @abstractmethod
    def create_user(self, username: str) -> int:
        """Create a user. Returns user ID."""
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    # Subject operations
    @abstractmethod
    def create_subject(
        self,
        tax_id: str,
        person_type: PersonType,
        name: Optional[str] = None,
        address: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> int:
        """Create a subject. Returns subject ID."""
        pass

    @abstractmethod
    def get_subject(self, subject_id: int) -> Optional[Subject]:
        """Get subject by ID."""
        pass

    @abstractmethod
    def get_subject_by_tax_id(self, tax_id: str) -> Optional[Subject]:
        """Get subject by tax ID."""
        pass

    @abstractmethod
    def list_subjects(self) -> list[Subject]:
        """List all subjects."""
        pass

    @abstractmethod
    def overwrite_subject(
        self,
        subject_id: int,
        person_type: PersonType,
        name: Optional[str],
        address: Optional[str],
        phone: Optional[str],
    ) -> None:
        """Replace name, person type, address and phone of a subject."""
        pass

    @abstractmethod
    def update_subject(
        self,
        subject_id: int,
        name: Optional[str] = None,
        person_type: Optional[PersonType] = None,
        tax_id: Optional[str] = None,
        address: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> None:
        """Update subject fields. None leaves a field unchanged."""
        pass

    # Bank operations
    @abstractmethod
    def create_bank(
        self,
        account_number: str,
        subject_id: int,
        bank_name: Optional[str] = None,
        correspondent_account: Optional[str] = None,
    ) -> int:
        """Create a bank account. Returns bank ID."""
        pass

    @abstractmethod
    def get_bank(self, bank_id: int) -> Optional[BankAccount]:
        """Get bank account by ID."""
        pass

    @abstractmethod
    def get_bank_by_account_number(self, account_number: str) -> Optional[BankAccount]:
        """Get bank account by primary account number."""
        pass

    @abstractmethod
    def get_bank_by_correspondent_account(
        self, correspondent_account: str
    ) -> Optional[BankAccount]:
        """Get bank account by correspondent account number."""
        pass

    @abstractmethod
    def list_banks(self, subject_id: Optional[int] = None) -> list[BankAccount]:
        """List bank accounts, optionally filtered by owner."""
        pass

    @abstractmethod
    def update_bank(
        self,
        bank_id: int,
        bank_name: Optional[str] = None,
        correspondent_account: Optional[str] = None,
    ) -> None:
        """Update bank account fields. None leaves a field unchanged."""
        pass

    # Category operations
    @abstractmethod
    def create_category(self, name: str, direction: Direction) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by name, ignoring case."""
        pass

    @abstractmethod
    def list_categories(self, direction: Optional[Direction] = None) -> list[Category]:
        """List categories, optionally filtered by direction."""
        pass

    @abstractmethod
    def update_category(
        self,
        category_id: int,
        name: Optional[str] = None,
        direction: Optional[Direction] = None,
    ) -> None:
        """Update category fields. None leaves a field unchanged."""
        pass

    @abstractmethod
    def delete_category(self, category_id: int) -> None:
        """Delete a category."""
        pass

    @abstractmethod
    def get_category_transaction_count(self, category_id: int) -> int:
        """Get count of transactions referencing a category."""
        pass

    # Register operations
    @abstractmethod
    def update_register_entry(
        self, entry_id: int, amount: Decimal, direction: Direction
    ) -> None:
        """Update amount and direction of a register entry."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        user_id: int,
        category_id: int,
        sender_id: int,
        recipient_id: int,
        amount: Decimal,
        direction: Direction,
        date_time: datetime,
        status: TransactionStatus = TransactionStatus.NEW,
        comment: Optional[str] = None,
        sender_bank_id: Optional[int] = None,
        recipient_bank_id: Optional[int] = None,
    ) -> int:
        """Create a transaction together with its register entry. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def update_transaction(
        self,
        transaction_id: int,
        status: Optional[TransactionStatus] = None,
        comment: Optional[str] = None,
        category_id: Optional[int] = None,
        sender_id: Optional[int] = None,
        recipient_id: Optional[int] = None,
        sender_bank_id: Optional[int] = None,
        recipient_bank_id: Optional[int] = None,
        clear_sender_bank: bool = False,
        clear_recipient_bank: bool = False,
    ) -> None:
        """Update transaction fields. None leaves a field unchanged.

        The clear flags set the matching bank reference to NULL.
        """
        pass

    @abstractmethod
    def list_transactions(
        self,
        user_id: Optional[int] = None,
        status: Optional[TransactionStatus] = None,
        exclude_status: Optional[TransactionStatus] = None,
        recipient_tax_id: Optional[str] = None,
        direction: Optional[Direction] = None,
        category_id: Optional[int] = None,
        sender_bank_name: Optional[str] = None,
        recipient_bank_name: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        min_amount: Optional[Decimal] = None,
        max_amount: Optional[Decimal] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters.

        Args:
            user_id: Only transactions owned by this user
            status: Only transactions in this status
            exclude_status: Skip transactions in this status
            recipient_tax_id: Recipient subject tax ID
            direction: Register entry direction
            category_id: Category ID
            sender_bank_name: Sender bank name (exact)
            recipient_bank_name: Recipient bank name (exact)
            start_date: Inclusive lower bound on the transaction day
            end_date: Inclusive upper bound on the transaction day
            min_amount: Inclusive lower bound on the amount
            max_amount: Inclusive upper bound on the amount
        """
        pass
