"""Transaction domain service.

Creating and editing a transaction touches five kinds of records: the two
parties (subjects), their bank accounts, the category and the register entry
holding the amount. Each workflow runs inside a single database transaction so
a failure at any step leaves nothing behind.
"""

import logging
from datetime import datetime, date, UTC
from decimal import Decimal
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.bank import BankService
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import (
    NON_EDITABLE_STATUSES,
    BankAccount,
    Direction,
    PartyDetails,
    Subject,
    Transaction,
    TransactionRequest,
    TransactionStatus,
    is_supplied,
)
from fintrack.domain.errors import (
    IllegalStateError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
    invalid_phone,
    invalid_tax_id,
    transaction_not_deletable,
    transaction_not_editable,
    transaction_not_found,
)
from fintrack.domain.register import RegisterService
from fintrack.domain.subject import SubjectService, is_valid_phone, is_valid_tax_id
from fintrack.domain.user import UserService
from fintrack.utils.amount_parser import CENT as MIN_AMOUNT, MAX_AMOUNT

logger = logging.getLogger(__name__)


def validate_amount(amount: Decimal) -> None:
    """Check that an amount is positive, bounded and has at most two decimals.

    Raises:
        ValidationError: If the amount is out of range or too precise
    """
    if not isinstance(amount, Decimal) or not amount.is_finite():
        raise ValidationError(f"Invalid amount: {amount!r}")
    if amount < MIN_AMOUNT or amount > MAX_AMOUNT:
        raise ValidationError(f"Amount must be between {MIN_AMOUNT} and {MAX_AMOUNT}, got {amount}")
    if amount != amount.quantize(MIN_AMOUNT):
        raise ValidationError(f"Amount {amount} has more than two decimal places")


def validate_party(party: PartyDetails, role: str) -> None:
    """Check the identity fields of one side of a transaction request."""
    if not is_supplied(party.tax_id):
        raise ValidationError(f"{role} tax ID is required")
    if not is_valid_tax_id(party.tax_id.strip()):
        raise ValidationError(f"{role}: {invalid_tax_id(party.tax_id.strip())}")
    if party.person_type is None:
        raise ValidationError(f"{role} person type is required")
    if is_supplied(party.phone) and not is_valid_phone(party.phone.strip()):
        raise ValidationError(f"{role}: {invalid_phone(party.phone.strip())}")


class TransactionService:
    """Service for managing transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db
        self.subject_service = SubjectService(db)
        self.bank_service = BankService(db)
        self.category_service = CategoryService(db)
        self.register_service = RegisterService(db)
        self.user_service = UserService(db)

    def validate_request(self, request: TransactionRequest) -> None:
        """Validate a transaction request before anything is written.

        Raises:
            ValidationError: If any field is missing or malformed
        """
        validate_party(request.sender, "Sender")
        validate_party(request.recipient, "Recipient")
        if not is_supplied(request.category):
            raise ValidationError("Category is required")
        if request.direction is None:
            raise ValidationError("Direction is required")
        validate_amount(request.amount)

    def _resolve_subject(self, party: PartyDetails) -> Subject:
        return self.subject_service.get_or_create_subject(
            tax_id=party.tax_id,
            name=party.name,
            person_type=party.person_type,
            address=party.address,
            phone=party.phone,
        )

    def _create_bank(self, party: PartyDetails, owner: Subject) -> Optional[BankAccount]:
        if not is_supplied(party.account_number):
            return None
        return self.bank_service.create_bank(
            bank_name=party.bank_name,
            correspondent_account=party.correspondent_account,
            account_number=party.account_number,
            owner=owner,
        )

    @staticmethod
    def _bank_belongs_to(bank: Optional[BankAccount], owner: Subject) -> bool:
        return bank is None or bank.subject_id == owner.id

    def create_transaction(self, request: TransactionRequest, username: str) -> Transaction:
        """Create a transaction.

        The status of a new transaction is always NEW and its timestamp is the
        current time; a status in the request is ignored.

        Args:
            request: Transaction payload
            username: Owner of the transaction (created on first use)

        Returns:
            The stored transaction with every reference resolved

        Raises:
            ValidationError: If the request is malformed
            ConflictError: If a bank account number is already registered
        """
        self.validate_request(request)

        with self.db.transaction():
            user = self.user_service.get_or_create_user(username)

            logger.info("Resolving sender subject")
            sender = self._resolve_subject(request.sender)
            logger.info("Resolving recipient subject")
            recipient = self._resolve_subject(request.recipient)

            logger.info("Creating bank accounts for both parties")
            sender_bank = self._create_bank(request.sender, sender)
            recipient_bank = self._create_bank(request.recipient, recipient)

            category = self.category_service.find_or_create_category(
                request.category, request.direction
            )

            transaction_id = self.db.create_transaction(
                user_id=user.id,
                category_id=category.id,
                sender_id=sender.id,
                recipient_id=recipient.id,
                sender_bank_id=sender_bank.id if sender_bank else None,
                recipient_bank_id=recipient_bank.id if recipient_bank else None,
                amount=request.amount,
                direction=request.direction,
                date_time=datetime.now(UTC),
                status=TransactionStatus.NEW,
                comment=request.comment,
            )

        logger.info("Transaction %s created", transaction_id)
        return self.require_transaction(transaction_id)

    def update_transaction(self, transaction_id: int, request: TransactionRequest) -> Transaction:
        """Edit a transaction that is still NEW.

        Both parties are re-resolved by tax ID (existing ones get their
        details overwritten), bank accounts are looked up by account number
        and updated or created, the category is resolved or created, and the
        register entry is updated in place. The status changes only when the
        request carries one. A stored bank account that does not belong to
        the resolved party is detached when the request names no account.

        Args:
            transaction_id: Transaction ID
            request: New transaction payload

        Returns:
            The updated transaction

        Raises:
            NotFoundError: If the transaction doesn't exist
            PermissionDeniedError: If the transaction is no longer NEW
            ValidationError: If the request is malformed
        """
        transaction = self.require_transaction(transaction_id)
        if not transaction.is_editable():
            raise PermissionDeniedError(
                transaction_not_editable(status.value for status in NON_EDITABLE_STATUSES)
            )
        self.validate_request(request)

        with self.db.transaction():
            category = self.category_service.find_or_create_category(
                request.category, request.direction
            )

            sender = self._resolve_subject(request.sender)
            recipient = self._resolve_subject(request.recipient)
            sender = self.subject_service.update_subject(sender.id, request.sender.subject_patch())
            recipient = self.subject_service.update_subject(
                recipient.id, request.recipient.subject_patch()
            )

            sender_bank = self.bank_service.update_or_create_bank(request.sender.bank_patch(), sender)
            recipient_bank = self.bank_service.update_or_create_bank(
                request.recipient.bank_patch(), recipient
            )

            self.register_service.update_entry(transaction, request.amount, request.direction)

            if request.status is not None:
                logger.info(
                    "Transaction %s status %s -> %s",
                    transaction_id,
                    transaction.status.value,
                    request.status.value,
                )

            self.db.update_transaction(
                transaction_id,
                status=request.status,
                comment=request.comment,
                category_id=category.id,
                sender_id=sender.id,
                recipient_id=recipient.id,
                sender_bank_id=sender_bank.id if sender_bank else None,
                recipient_bank_id=recipient_bank.id if recipient_bank else None,
                clear_sender_bank=sender_bank is None
                and not self._bank_belongs_to(transaction.sender_bank, sender),
                clear_recipient_bank=recipient_bank is None
                and not self._bank_belongs_to(transaction.recipient_bank, recipient),
            )

        logger.info("Transaction %s updated", transaction_id)
        return self.require_transaction(transaction_id)

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> Transaction:
        """Get transaction by ID or raise NotFoundError."""
        transaction = self.db.get_transaction(transaction_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return transaction

    def mark_as_deleted(self, transaction_id: int) -> Transaction:
        """Mark a transaction as deleted; rows are never removed.

        Args:
            transaction_id: Transaction ID

        Returns:
            The transaction in PAYMENT_DELETED status

        Raises:
            NotFoundError: If the transaction doesn't exist
            IllegalStateError: If the status forbids deletion
        """
        transaction = self.require_transaction(transaction_id)
        if not transaction.is_deletable():
            raise IllegalStateError(transaction_not_deletable(transaction.status.value))

        self.db.update_transaction(transaction_id, status=TransactionStatus.PAYMENT_DELETED)
        logger.info("Transaction %s marked as deleted", transaction_id)
        return self.require_transaction(transaction_id)

    def list_transactions(
        self,
        username: Optional[str] = None,
        status: Optional[TransactionStatus] = None,
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
        """List transactions with filters.

        Args:
            username: Optional owner filter; an unknown user has no transactions
            status: Optional status filter
            recipient_tax_id: Optional recipient tax ID filter
            direction: Optional direction filter
            category_id: Optional category ID filter
            sender_bank_name: Optional sender bank name filter
            recipient_bank_name: Optional recipient bank name filter
            start_date: Optional start date filter
            end_date: Optional end date filter
            min_amount: Optional minimum amount
            max_amount: Optional maximum amount

        Returns:
            List of transaction entities, newest first
        """
        user_id = None
        if username is not None:
            user = self.db.get_user_by_username(username)
            if user is None:
                return []
            user_id = user.id

        return self.db.list_transactions(
            user_id=user_id,
            status=status,
            recipient_tax_id=recipient_tax_id.strip() if recipient_tax_id else None,
            direction=direction,
            category_id=category_id,
            sender_bank_name=sender_bank_name,
            recipient_bank_name=recipient_bank_name,
            start_date=start_date,
            end_date=end_date,
            min_amount=min_amount,
            max_amount=max_amount,
        )
