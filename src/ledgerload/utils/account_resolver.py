"""Utilities for resolving account numbers to IDs."""

from typing import Iterable, Optional

from ledgerload.domain.entities import Account


class AccountResolver:
    """Account number to account ID lookup, loaded once per batch.

    Accounts are never created implicitly; an unknown number resolves to None.
    """

    def __init__(self, account_numbers: dict[str, int]):
        """Initialize resolver.

        Args:
            account_numbers: Mapping of account number to account ID
        """
        self._ids = dict(account_numbers)

    @classmethod
    def from_accounts(cls, accounts: Iterable[Account]) -> "AccountResolver":
        """Build a resolver from account entities."""
        return cls({acc.account_number: acc.id for acc in accounts})

    def resolve(self, account_number: str) -> Optional[int]:
        """Return the account ID for a number, or None if unknown."""
        return self._ids.get(account_number)


def resolve_account(accounts: Iterable[Account], account: str | int) -> int:
    """Resolve an account ID or account number to an account ID.

    Args:
        accounts: Known accounts
        account: Account ID (int or string representation of int) or account number

    Returns:
        Account ID

    Raises:
        ValueError: If account is not found
    """
    accounts = list(accounts)

    # Account numbers win over IDs so numeric account numbers stay reachable
    for acc in accounts:
        if acc.account_number == str(account):
            return acc.id

    try:
        account_id = int(account)
    except (ValueError, TypeError):
        raise ValueError(f"Account '{account}' not found")

    for acc in accounts:
        if acc.id == account_id:
            return account_id

    raise ValueError(f"Account ID {account_id} not found")
