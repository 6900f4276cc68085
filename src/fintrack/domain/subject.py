"""Subject domain service."""

import logging
import re
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import PersonType, Subject, SubjectPatch, is_supplied
from fintrack.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    duplicate_tax_id,
    invalid_phone,
    invalid_tax_id,
    subject_not_found,
)

logger = logging.getLogger(__name__)

# 10 digits for organizations, 12 for individuals.
TAX_ID_PATTERN = re.compile(r"\d{10}|\d{12}")


def is_valid_tax_id(tax_id: str) -> bool:
    """Return True if the tax ID has exactly 10 or 12 digits."""
    return TAX_ID_PATTERN.fullmatch(tax_id) is not None


PHONE_PATTERN = re.compile(r"(\+7|8)\d{10}")


def is_valid_phone(phone: str) -> bool:
    """Return True if the phone is +7 or 8 followed by 10 digits."""
    return PHONE_PATTERN.fullmatch(phone) is not None


class SubjectService:
    """Service for resolving and editing transaction parties."""

    def __init__(self, db: Database):
        """Initialize subject service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_subject(self, subject_id: int) -> Optional[Subject]:
        """Get subject by ID."""
        return self.db.get_subject(subject_id)

    def get_subject_by_tax_id(self, tax_id: str) -> Optional[Subject]:
        """Get subject by tax ID (surrounding whitespace ignored).

        Args:
            tax_id: Tax ID

        Returns:
            Subject entity or None if not found
        """
        return self.db.get_subject_by_tax_id(tax_id.strip())

    def require_subject_by_tax_id(self, tax_id: str) -> Subject:
        """Get subject by tax ID or raise NotFoundError."""
        subject = self.get_subject_by_tax_id(tax_id)
        if subject is None:
            raise NotFoundError(subject_not_found(tax_id.strip()))
        return subject

    def list_subjects(self) -> list[Subject]:
        """List all subjects."""
        return self.db.list_subjects()

    def get_or_create_subject(
        self,
        tax_id: str,
        name: Optional[str],
        person_type: PersonType,
        address: Optional[str],
        phone: Optional[str],
    ) -> Subject:
        """Resolve a subject by tax ID, overwriting or creating it.

        An existing subject gets its name, address, phone and person type
        replaced with the supplied values; prior values are discarded.

        Args:
            tax_id: Tax ID (business key)
            name: Subject name
            person_type: Individual or legal entity
            address: Postal address
            phone: Phone number

        Returns:
            The stored subject
        """
        tax_id = tax_id.strip()
        existing = self.db.get_subject_by_tax_id(tax_id)

        if existing is not None:
            logger.info("Found subject by tax ID %s, overwriting its details", tax_id)
            self.db.overwrite_subject(
                existing.id,
                person_type=person_type,
                name=name,
                address=address,
                phone=phone,
            )
            return self.db.get_subject(existing.id)

        logger.info("No subject with tax ID %s, creating one", tax_id)
        subject_id = self.db.create_subject(
            tax_id=tax_id,
            person_type=person_type,
            name=name,
            address=address,
            phone=phone,
        )
        logger.info("Created subject %r (ID: %s)", name, subject_id)
        return self.db.get_subject(subject_id)

    def update_subject(self, subject_id: int, patch: SubjectPatch) -> Subject:
        """Apply a partial update to a subject.

        Only fields that are supplied and non-blank are written. The tax ID is
        validated before anything is written, as is the phone.

        Args:
            subject_id: Subject ID
            patch: Fields to change

        Returns:
            The updated subject

        Raises:
            NotFoundError: If the subject doesn't exist
            ValidationError: If the tax ID is not 10 or 12 digits or the phone
                is malformed
            ConflictError: If the tax ID belongs to another subject
        """
        subject = self.db.get_subject(subject_id)
        if subject is None:
            raise NotFoundError(f"Subject {subject_id} not found")

        tax_id = None
        if is_supplied(patch.tax_id):
            tax_id = patch.tax_id.strip()
            if not is_valid_tax_id(tax_id):
                logger.warning("Rejected tax ID %r for subject %s", tax_id, subject_id)
                raise ValidationError(invalid_tax_id(tax_id))
            owner = self.db.get_subject_by_tax_id(tax_id)
            if owner is not None and owner.id != subject_id:
                raise ConflictError(duplicate_tax_id(tax_id))

        phone = None
        if is_supplied(patch.phone):
            phone = patch.phone.strip()
            if not is_valid_phone(phone):
                logger.warning("Rejected phone %r for subject %s", phone, subject_id)
                raise ValidationError(invalid_phone(phone))

        self.db.update_subject(
            subject_id,
            name=patch.name if is_supplied(patch.name) else None,
            person_type=patch.person_type if is_supplied(patch.person_type) else None,
            tax_id=tax_id,
            address=patch.address if is_supplied(patch.address) else None,
            phone=phone,
        )
        updated = self.db.get_subject(subject_id)
        logger.info("Subject %r updated", updated.name)
        return updated
