"""Category domain service."""

import logging
from typing import Optional

from fintrack.database.base import Database
from fintrack.domain.entities import Category, CategoryPatch, Direction, is_supplied
from fintrack.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    category_delete_blocked,
    category_not_found,
    duplicate_category_name,
)

logger = logging.getLogger(__name__)


DEFAULT_CATEGORIES = [
    # Expenses
    ("Groceries", Direction.CREDIT),
    ("Utilities", Direction.CREDIT),
    ("Transport", Direction.CREDIT),
    ("Entertainment", Direction.CREDIT),
    ("Health", Direction.CREDIT),
    ("Clothing", Direction.CREDIT),
    ("Education", Direction.CREDIT),
    ("Other Expenses", Direction.CREDIT),
    # Income
    ("Salary", Direction.DEBIT),
    ("Side Income", Direction.DEBIT),
    ("Investments", Direction.DEBIT),
    ("Gifts", Direction.DEBIT),
    ("Other Income", Direction.DEBIT),
]


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category entity or None if not found
        """
        return self.db.get_category(category_id)

    def require_category(self, category_id: int) -> Category:
        """Get category by ID or raise NotFoundError."""
        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get category by name, ignoring case."""
        return self.db.get_category_by_name(name.strip())

    def list_categories(self, direction: Optional[Direction] = None) -> list[Category]:
        """List categories.

        Args:
            direction: Optional direction to filter by

        Returns:
            List of category entities
        """
        return self.db.list_categories(direction=direction)

    def find_or_create_category(self, token: str, direction: Direction) -> Category:
        """Resolve a category from an ID or a name, creating it if unknown.

        A numeric token is tried as an ID first. If that fails, the token is
        looked up as a name (ignoring case); if that fails too, a category with
        that name is created for the given direction.

        Args:
            token: Category ID as a string, or a category name
            direction: Direction for a newly created category

        Returns:
            The resolved category

        Raises:
            ValidationError: If the token is blank
        """
        if not is_supplied(token):
            raise ValidationError("Category is required")
        token = token.strip()

        try:
            category_id = int(token)
        except ValueError:
            logger.debug("Category token %r is not an ID, looking up by name", token)
        else:
            category = self.db.get_category(category_id)
            if category is not None:
                logger.info("Found category by ID: %s", category_id)
                return category
            logger.warning("Category with ID %s not found, falling back to name", category_id)

        category = self.db.get_category_by_name(token)
        if category is not None:
            return category

        logger.info("Category not found, creating %r", token)
        category_id = self.db.create_category(name=token, direction=direction)
        return self.db.get_category(category_id)

    def create_category(self, name: str, direction: Direction) -> int:
        """Create a category.

        Args:
            name: Category name
            direction: Direction the category applies to

        Returns:
            Category ID

        Raises:
            ValidationError: If the name is blank or already taken
        """
        if not is_supplied(name):
            raise ValidationError("Category name is required")
        name = name.strip()
        if self.db.get_category_by_name(name) is not None:
            raise ValidationError(duplicate_category_name(name))
        return self.db.create_category(name=name, direction=direction)

    def update_category(self, category_id: int, patch: CategoryPatch) -> Category:
        """Rename a category and/or change its direction.

        Renaming onto a name held by another category fails before anything
        is written. Keeping the category's own name is allowed.

        Raises:
            NotFoundError: If the category doesn't exist
            ValidationError: If the new name belongs to another category
        """
        existing = self.require_category(category_id)

        name = None
        if is_supplied(patch.name):
            name = patch.name.strip()
            duplicate = self.db.get_category_by_name(name)
            if duplicate is not None and duplicate.id != existing.id:
                raise ValidationError(duplicate_category_name(name))

        self.db.update_category(
            category_id,
            name=name,
            direction=patch.direction if is_supplied(patch.direction) else None,
        )
        logger.info("Category %s saved", category_id)
        return self.db.get_category(category_id)

    def delete_category(self, category_id: int) -> None:
        """Delete a category that no transaction uses.

        Raises:
            NotFoundError: If the category doesn't exist
            DependencyError: If transactions still reference it
        """
        self.require_category(category_id)
        transaction_count = self.db.get_category_transaction_count(category_id)
        if transaction_count > 0:
            raise DependencyError(category_delete_blocked(category_id, transaction_count))
        self.db.delete_category(category_id)

    def create_default_categories(self) -> int:
        """Create the default income and expense categories that are missing.

        Returns:
            Number of categories created
        """
        created = 0
        for name, direction in DEFAULT_CATEGORIES:
            if self.db.get_category_by_name(name) is None:
                self.db.create_category(name=name, direction=direction)
                created += 1
        return created
