"""Startup routine that prepares reference data."""

import logging

from fintrack.domain.category import CategoryService

logger = logging.getLogger(__name__)


class DataSeeder:
    """Seeds default data once, before any command is handled."""

    def __init__(self, category_service: CategoryService):
        self.category_service = category_service

    def run(self) -> None:
        logger.info("Creating default categories")
        created = self.category_service.create_default_categories()
        if created:
            logger.info("Created %d default categories", created)
