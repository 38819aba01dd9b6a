"""Account domain service."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from ledgerload.database.base import Database
from ledgerload.domain.entities import Account as AccountEntity
from ledgerload.domain.errors import (
    AccountNumberLockedError,
    DuplicateAccountNumberError,
    NotFoundError,
    ValidationError,
    account_not_found,
)
from ledgerload.utils.amount_parser import check_amount

logger = logging.getLogger(__name__)


class AccountService:
    """Service for managing accounts."""

    def __init__(self, db: Database):
        """Initialize account service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self, name: str, account_number: str, balance: Decimal = Decimal("0.00")
    ) -> int:
        """Create a new account.

        Args:
            name: Account name
            account_number: Unique account number
            balance: Opening balance

        Returns:
            Account ID

        Raises:
            ValidationError: If name or account number is blank, or the
                balance is not a finite amount in cents within range
            DuplicateAccountNumberError: If the account number already exists
        """
        name, account_number = self._clean(name, account_number)
        try:
            opening_balance = check_amount(Decimal(balance))
        except (ValueError, InvalidOperation) as e:
            raise ValidationError(f"Invalid balance '{balance}': {e}")

        if self.db.get_account_by_number(account_number) is not None:
            raise DuplicateAccountNumberError(account_number)

        account_id = self.db.create_account(
            name=name, account_number=account_number, balance=opening_balance
        )
        logger.info("Created account %d (%s)", account_id, account_number)
        return account_id

    def get_account(self, account_id: int) -> Optional[AccountEntity]:
        """Get account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account entity or None if not found
        """
        return self.db.get_account(account_id)

    def get_account_by_number(self, account_number: str) -> Optional[AccountEntity]:
        return self.db.get_account_by_number(account_number)

    def list_accounts(self) -> list[AccountEntity]:
        """List all accounts.

        Returns:
            List of account entities
        """
        return self.db.list_accounts()

    def update_account(self, account_id: int, name: str, account_number: str) -> None:
        """Update an account's name and number.

        The number may only change while no transaction references the
        account. Setting it to its current value is always allowed. The
        balance is never touched.

        Args:
            account_id: Account ID to update
            name: New account name
            account_number: New account number

        Raises:
            NotFoundError: If account not found
            AccountNumberLockedError: If the number changes and transactions exist
            DuplicateAccountNumberError: If another account uses the number
        """
        name, account_number = self._clean(name, account_number)

        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))

        if account.account_number != account_number:
            if self.db.get_account_transaction_count(account_id) > 0:
                raise AccountNumberLockedError()

            existing = self.db.get_account_by_number(account_number)
            if existing is not None and existing.id != account_id:
                raise DuplicateAccountNumberError(account_number)

        self.db.update_account(account_id=account_id, name=name, account_number=account_number)

    @staticmethod
    def _clean(name: str, account_number: str) -> tuple[str, str]:
        name = (name or "").strip()
        account_number = (account_number or "").strip()
        if not name:
            raise ValidationError("Account name is required")
        if not account_number:
            raise ValidationError("Account number is required")
        return name, account_number
