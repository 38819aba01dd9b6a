"""Shared pytest fixtures for ledgerload tests."""

import tempfile
import os
from decimal import Decimal
from pathlib import Path
import pytest

from ledgerload.database.factories import create_sqlite_database
from ledgerload.domain.account import AccountService
from ledgerload.domain.csv_import import CSVImportService
from ledgerload.domain.reconciliation import ReconciliationService
from ledgerload.domain.transaction import TransactionService


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

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def import_service(temp_db):
    """Create a CSVImportService with a temporary database."""
    return CSVImportService(temp_db)


@pytest.fixture
def reconciliation_service(temp_db):
    """Create a ReconciliationService with a temporary database."""
    return ReconciliationService(temp_db)


@pytest.fixture
def sample_account(account_service):
    """Create account ACC001 with an opening balance of 1000.00."""
    account_id = account_service.create_account(
        name="Checking", account_number="ACC001", balance=Decimal("1000.00")
    )
    return account_service.get_account(account_id)


@pytest.fixture
def second_account(account_service):
    """Create account ACC002 with an opening balance of 500.00."""
    account_id = account_service.create_account(
        name="Savings", account_number="ACC002", balance=Decimal("500.00")
    )
    return account_service.get_account(account_id)


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def upload_file(fixtures_dir):
    """Return a helper that reads a fixture as (bytes, file name)."""

    def _read(name: str) -> tuple[bytes, str]:
        path = fixtures_dir / name
        return path.read_bytes(), path.name

    return _read
