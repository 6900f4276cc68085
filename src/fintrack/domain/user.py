"""User domain service."""

import logging

from fintrack.database.base import Database
from fintrack.domain.entities import User
from fintrack.domain.errors import NotFoundError, ValidationError, user_not_found

logger = logging.getLogger(__name__)


class UserService:
    """Service for transaction owners."""

    def __init__(self, db: Database):
        self.db = db

    def require_user(self, username: str) -> User:
        """Get user by username or raise NotFoundError."""
        user = self.db.get_user_by_username(username)
        if user is None:
            raise NotFoundError(user_not_found(username))
        return user

    def get_or_create_user(self, username: str) -> User:
        """Get user by username, creating it on first use."""
        if not username or not username.strip():
            raise ValidationError("Username is required")
        username = username.strip()
        user = self.db.get_user_by_username(username)
        if user is not None:
            return user
        self.db.create_user(username)
        logger.info("Created user %r", username)
        return self.db.get_user_by_username(username)
