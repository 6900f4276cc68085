"""Mapper functions to convert SQLAlchemy models into domain entities.

Services never see ORM rows; everything leaving the database layer goes
through one of these functions.
"""

from decimal import Decimal
from typing import Optional

from fintrack.domain import entities as domain
from fintrack.database.models import (
    User as ORMUser,
    Subject as ORMSubject,
    Bank as ORMBank,
    Category as ORMCategory,
    RegTransaction as ORMRegTransaction,
    Transaction as ORMTransaction,
)


def user_to_domain(orm_user: ORMUser) -> domain.User:
    """Convert SQLAlchemy User model to domain User entity."""
    return domain.User(
        id=orm_user.id,
        username=orm_user.username,
        created_at=orm_user.created_at,
    )


def subject_to_domain(orm_subject: ORMSubject) -> domain.Subject:
    """Convert SQLAlchemy Subject model to domain Subject entity."""
    return domain.Subject(
        id=orm_subject.id,
        name=orm_subject.name,
        tax_id=orm_subject.tax_id,
        address=orm_subject.address,
        phone=orm_subject.phone,
        person_type=orm_subject.person_type,
    )


def bank_to_domain(orm_bank: Optional[ORMBank]) -> Optional[domain.BankAccount]:
    """Convert SQLAlchemy Bank model to domain BankAccount entity."""
    if orm_bank is None:
        return None
    return domain.BankAccount(
        id=orm_bank.id,
        bank_name=orm_bank.bank_name,
        account_number=orm_bank.account_number,
        correspondent_account=orm_bank.correspondent_account,
        subject_id=orm_bank.subject_id,
    )


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        direction=orm_category.direction,
    )


def register_to_domain(orm_register: ORMRegTransaction) -> domain.RegisterEntry:
    """Convert SQLAlchemy RegTransaction model to domain RegisterEntry entity."""
    return domain.RegisterEntry(
        id=orm_register.id,
        direction=orm_register.direction,
        amount=Decimal(orm_register.amount),
        entry_date=orm_register.entry_date,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        status=orm_transaction.status,
        date_time=orm_transaction.date_time,
        comment=orm_transaction.comment,
        register=register_to_domain(orm_transaction.register),
        category=category_to_domain(orm_transaction.category),
        sender=subject_to_domain(orm_transaction.sender),
        recipient=subject_to_domain(orm_transaction.recipient),
        sender_bank=bank_to_domain(orm_transaction.sender_bank),
        recipient_bank=bank_to_domain(orm_transaction.recipient_bank),
        user_id=orm_transaction.user_id,
    )
