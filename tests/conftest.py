"""Shared pytest fixtures for fintrack tests."""

import tempfile
import os
import pytest

from builders import build_request
from fintrack.database.factories import create_sqlite_database
from fintrack.domain.bank import BankService
from fintrack.domain.category import CategoryService
from fintrack.domain.statistics import StatisticsService
from fintrack.domain.subject import SubjectService
from fintrack.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def subject_service(temp_db):
    """Create a SubjectService with a temporary database."""
    return SubjectService(temp_db)


@pytest.fixture
def bank_service(temp_db):
    """Create a BankService with a temporary database."""
    return BankService(temp_db)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def statistics_service(temp_db):
    """Create a StatisticsService with a temporary database."""
    return StatisticsService(temp_db)


@pytest.fixture
def sample_transaction(transaction_service):
    """Create a NEW transaction owned by 'alice'."""
    return transaction_service.create_transaction(build_request(), "alice")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
