"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Services import this module, so only entity-level domain modules are imported here
from ledgerload.domain.entities import (
    Account,
    Transaction,
    NewTransaction,
    TransactionUpload,
    FailedTransactionImport,
)
from ledgerload.domain.batch import UploadBatch
from ledgerload.domain.duplicates import DuplicateKey


class Database(ABC):
    """Abstract database interface for ledgerload."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, name: str, account_number: str, balance: Decimal = Decimal("0.00")) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def get_account_by_number(self, account_number: str) -> Optional[Account]:
        """Get account by account number."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    @abstractmethod
    def update_account(self, account_id: int, name: str, account_number: str) -> None:
        """Update account name and number. The balance is left untouched."""
        pass

    @abstractmethod
    def get_account_transaction_count(self, account_id: int) -> int:
        """Get count of transactions owned by an account."""
        pass

    @abstractmethod
    def get_account_number_map(self) -> dict[str, int]:
        """Get the full account number to account ID table."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transactions(self, transactions: list[NewTransaction]) -> list[int]:
        """Insert transactions atomically with no balance side effects. Returns IDs."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        account_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        transaction_upload_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions with optional filters."""
        pass

    @abstractmethod
    def list_duplicate_keys(self) -> set[DuplicateKey]:
        """Get (account_id, amount, external_transaction_id) of stored transactions with an external ID."""
        pass

    # Upload operations
    @abstractmethod
    def write_upload_batch(self, batch: UploadBatch) -> TransactionUpload:
        """Persist a whole upload batch as one atomic unit.

        Rejects rows whose duplicate key is already stored, inserts the
        survivors, applies net balance deltas, records the upload and its
        rejected rows, and back-fills the upload ID on the new transactions.
        The duplicate check and the writes run under one write lock. Nothing
        is kept if any step fails.
        """
        pass

    @abstractmethod
    def get_transaction_upload(self, upload_id: int) -> Optional[TransactionUpload]:
        """Get upload by ID."""
        pass

    @abstractmethod
    def list_transaction_uploads(self) -> list[TransactionUpload]:
        """List all uploads."""
        pass

    @abstractmethod
    def list_failed_imports(self, transaction_upload_id: Optional[int] = None) -> list[FailedTransactionImport]:
        """List rejected rows, optionally for a single upload."""
        pass
