"""Transaction domain service."""

from typing import Optional
from datetime import date

from ledgerload.database.base import Database
from ledgerload.domain.entities import NewTransaction, Transaction as TransactionEntity
from ledgerload.domain.errors import (
    NotFoundError,
    PersistenceError,
    ValidationError,
    account_not_found,
)
from ledgerload.utils.amount_parser import check_amount


class TransactionService:
    """Service for reading and bulk-creating transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def batch_create(self, transactions: list[NewTransaction]) -> list[int]:
        """Insert fully-formed transactions in one atomic unit.

        This is the low-level bulk path: balances are not touched and no
        duplicate suppression happens.

        Args:
            transactions: Transactions to insert

        Returns:
            IDs of the inserted transactions, in input order

        Raises:
            ValidationError: If an amount is negative, not finite, or has
                more than 2 decimal places
            NotFoundError: If an account does not exist
            PersistenceError: If the insert fails and was rolled back
        """
        known_accounts = {acc.id for acc in self.db.list_accounts()}
        for index, txn in enumerate(transactions, start=1):
            try:
                check_amount(txn.amount)
            except ValueError as e:
                raise ValidationError(f"Transaction {index}: {e}")
            if txn.amount < 0:
                raise ValidationError(
                    f"Transaction {index}: amount must be non-negative, got {txn.amount}"
                )
            if txn.account_id not in known_accounts:
                raise NotFoundError(f"Transaction {index}: {account_not_found(txn.account_id)}")

        try:
            return self.db.create_transactions(transactions)
        except Exception as e:
            raise PersistenceError(f"Error creating transactions: {e}") from e

    def get_transaction(self, transaction_id: int) -> Optional[TransactionEntity]:
        """Get transaction by ID.

        Args:
            transaction_id: Transaction ID

        Returns:
            Transaction entity or None if not found
        """
        return self.db.get_transaction(transaction_id)

    def list_transactions(
        self,
        account_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        transaction_upload_id: Optional[int] = None,
    ) -> list[TransactionEntity]:
        """List transactions with optional filters.

        Args:
            account_id: Optional account filter
            start_date: Optional inclusive lower date bound
            end_date: Optional inclusive upper date bound
            transaction_upload_id: Optional upload filter

        Returns:
            List of transaction entities
        """
        if start_date is not None and end_date is not None and start_date > end_date:
            raise ValidationError(f"Start date {start_date} is after end date {end_date}")
        return self.db.list_transactions(
            account_id=account_id,
            start_date=start_date,
            end_date=end_date,
            transaction_upload_id=transaction_upload_id,
        )
