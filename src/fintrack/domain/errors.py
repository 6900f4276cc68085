"""Shared domain error messages and error types."""

from typing import Iterable


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class PermissionDeniedError(DomainError):
    """Operation is not allowed for the entity in its current state."""


class IllegalStateError(DomainError):
    """Entity is in a state that forbids the requested transition."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category {category_id} not found"


def subject_not_found(tax_id: str) -> str:
    """Return message for missing subject by tax ID."""
    return f"Subject with tax ID '{tax_id}' not found"


def user_not_found(username: str) -> str:
    """Return message for missing user."""
    return f"User '{username}' not found"


def duplicate_category_name(name: str) -> str:
    """Return message for a category name that is already taken."""
    return f"Category with name '{name}' already exists"


def duplicate_account_number(account_number: str) -> str:
    """Return message for an account number that is already registered."""
    return f"Bank account '{account_number}' already exists"


def duplicate_tax_id(tax_id: str) -> str:
    """Return message for a tax ID that belongs to another subject."""
    return f"Subject with tax ID '{tax_id}' already exists"


def invalid_tax_id(tax_id: str) -> str:
    """Return message for a malformed tax ID."""
    return f"Invalid tax ID '{tax_id}': expected 10 or 12 digits"


def invalid_phone(phone: str) -> str:
    """Return message for a malformed phone number."""
    return f"Invalid phone '{phone}': expected +7 or 8 followed by 10 digits"


def transaction_not_editable(status_names: Iterable[str]) -> str:
    """Return message when an update hits a locked transaction."""
    return (
        "Editing is not allowed for transactions with status "
        f"{', '.join(status_names)}"
    )


def transaction_not_deletable(status_name: str) -> str:
    """Return message when a delete hits a protected transaction."""
    return f"Deletion is not allowed for transactions with status {status_name}"


def category_delete_blocked(category_id: int, transaction_count: int) -> str:
    """Return message when a category still has transactions."""
    return (
        f"Cannot delete category {category_id}: it has "
        f"{transaction_count} transaction{'s' if transaction_count != 1 else ''}. "
        "Please reassign them first."
    )
