"""Domain model entities for fintrack.

These are pure data classes representing business concepts, independent of
database schema. Services receive and return these, never ORM rows.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class TransactionStatus(str, Enum):
    """Lifecycle status of a transaction."""

    NEW = "NEW"
    ACCEPTED = "ACCEPTED"
    PROCESSING = "PROCESSING"
    CANCELED = "CANCELED"
    PAYMENT_COMPLETED = "PAYMENT_COMPLETED"
    PAYMENT_DELETED = "PAYMENT_DELETED"
    RETURN = "RETURN"

    @property
    def description(self) -> str:
        return _STATUS_DESCRIPTIONS[self]


_STATUS_DESCRIPTIONS = {
    TransactionStatus.NEW: "New",
    TransactionStatus.ACCEPTED: "Accepted",
    TransactionStatus.PROCESSING: "Processing",
    TransactionStatus.CANCELED: "Canceled",
    TransactionStatus.PAYMENT_COMPLETED: "Payment completed",
    TransactionStatus.PAYMENT_DELETED: "Payment deleted",
    TransactionStatus.RETURN: "Return",
}

# Order matters for error messages.
NON_EDITABLE_STATUSES = (
    TransactionStatus.ACCEPTED,
    TransactionStatus.PROCESSING,
    TransactionStatus.CANCELED,
    TransactionStatus.PAYMENT_COMPLETED,
    TransactionStatus.PAYMENT_DELETED,
    TransactionStatus.RETURN,
)

NON_DELETABLE_STATUSES = (
    TransactionStatus.ACCEPTED,
    TransactionStatus.PROCESSING,
    TransactionStatus.CANCELED,
    TransactionStatus.PAYMENT_COMPLETED,
    TransactionStatus.RETURN,
)


class Direction(str, Enum):
    """Direction of money movement.

    DEBIT is money coming in (income), CREDIT is money going out (expense).
    """

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"

    @property
    def description(self) -> str:
        return "Income" if self is Direction.DEBIT else "Expense"


class PersonType(str, Enum):
    """Kind of party: a private individual or an organization."""

    INDIVIDUAL = "INDIVIDUAL"
    LEGAL_ENTITY = "LEGAL_ENTITY"

    @property
    def description(self) -> str:
        return "Individual" if self is PersonType.INDIVIDUAL else "Legal entity"


class Unset(Enum):
    """Marker for a patch field that was not supplied."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


def is_supplied(value: object) -> bool:
    """Return True if a patch value is present and, for strings, non-blank."""
    if value is UNSET or value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


@dataclass(frozen=True)
class User:
    """Owner of transactions."""

    id: int
    username: str
    created_at: datetime


@dataclass(frozen=True)
class Subject:
    """A party (sender or recipient) of a transaction."""

    id: int
    name: Optional[str]
    tax_id: str
    address: Optional[str]
    phone: Optional[str]
    person_type: PersonType


@dataclass(frozen=True)
class BankAccount:
    """Bank account owned by a subject."""

    id: int
    bank_name: Optional[str]
    account_number: str
    correspondent_account: Optional[str]
    subject_id: int


@dataclass(frozen=True)
class Category:
    """Transaction category, tagged with the direction it applies to."""

    id: int
    name: str
    direction: Direction


@dataclass(frozen=True)
class RegisterEntry:
    """Amount and direction payload of a single transaction."""

    id: int
    direction: Direction
    amount: Decimal
    entry_date: date


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity with every reference resolved."""

    id: int
    status: TransactionStatus
    date_time: datetime
    comment: Optional[str]
    register: RegisterEntry
    category: Category
    sender: Subject
    recipient: Subject
    sender_bank: Optional[BankAccount]
    recipient_bank: Optional[BankAccount]
    user_id: int

    @property
    def amount(self) -> Decimal:
        return self.register.amount

    @property
    def direction(self) -> Direction:
        return self.register.direction

    def is_editable(self) -> bool:
        """Only NEW transactions can be edited."""
        return self.status == TransactionStatus.NEW

    def is_deletable(self) -> bool:
        """Accepted, in-flight, canceled, completed and returned payments are kept."""
        return self.status not in NON_DELETABLE_STATUSES


@dataclass(frozen=True)
class SubjectPatch:
    """Partial update for a subject; only supplied, non-blank fields apply."""

    name: Union[str, Unset] = UNSET
    person_type: Union[PersonType, Unset] = UNSET
    tax_id: Union[str, Unset] = UNSET
    address: Union[str, Unset] = UNSET
    phone: Union[str, Unset] = UNSET


@dataclass(frozen=True)
class BankPatch:
    """Bank account fields for update-or-create."""

    bank_name: Union[str, Unset] = UNSET
    account_number: Union[str, Unset] = UNSET
    correspondent_account: Union[str, Unset] = UNSET


@dataclass(frozen=True)
class CategoryPatch:
    """Partial update for a category."""

    name: Union[str, Unset] = UNSET
    direction: Union[Direction, Unset] = UNSET


@dataclass(frozen=True)
class PartyDetails:
    """Identity and bank fields of one side of a transaction request."""

    tax_id: str
    person_type: PersonType
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    bank_name: Optional[str] = None
    account_number: Optional[str] = None
    correspondent_account: Optional[str] = None

    def subject_patch(self) -> SubjectPatch:
        return SubjectPatch(
            name=self.name if self.name is not None else UNSET,
            person_type=self.person_type,
            tax_id=self.tax_id,
            address=self.address if self.address is not None else UNSET,
            phone=self.phone if self.phone is not None else UNSET,
        )

    def bank_patch(self) -> BankPatch:
        return BankPatch(
            bank_name=self.bank_name if self.bank_name is not None else UNSET,
            account_number=self.account_number if self.account_number is not None else UNSET,
            correspondent_account=(
                self.correspondent_account if self.correspondent_account is not None else UNSET
            ),
        )


@dataclass(frozen=True)
class TransactionRequest:
    """Payload for creating or editing a transaction."""

    sender: PartyDetails
    recipient: PartyDetails
    category: str
    direction: Direction
    amount: Decimal
    comment: Optional[str] = None
    status: Optional[TransactionStatus] = None


@dataclass(frozen=True)
class GeneralStatistics:
    """Totals across a user's transactions."""

    total_income: Decimal
    total_expense: Decimal
    balance: Decimal
    transaction_count: int


@dataclass(frozen=True)
class CategoryStatistic:
    """Summed amount for one category."""

    category_name: str
    direction: Direction
    total: Decimal
    count: int


@dataclass(frozen=True)
class PeriodStatistic:
    """Income and expenses for a single day."""

    period: date
    income: Decimal
    expenses: Decimal
    balance: Decimal
    transaction_count: int
