"""Tests for account resolution."""

import pytest
from decimal import Decimal

from ledgerload.domain.entities import Account
from ledgerload.utils.account_resolver import AccountResolver, resolve_account

ACCOUNTS = [
    Account(id=1, name="Checking", account_number="ACC001", balance=Decimal("0.00")),
    Account(id=2, name="Savings", account_number="ACC002", balance=Decimal("0.00")),
    Account(id=3, name="Numeric", account_number="1", balance=Decimal("0.00")),
]


def test_resolver_lookup():
    """Test O(1) lookup of known and unknown numbers."""
    resolver = AccountResolver.from_accounts(ACCOUNTS)

    assert resolver.resolve("ACC002") == 2
    assert resolver.resolve("ACC999") is None
    assert resolver.resolve("1") == 3


def test_resolver_is_exact_match():
    """Test account numbers are matched exactly, without case folding."""
    resolver = AccountResolver({"ACC001": 1})

    assert resolver.resolve("acc001") is None


def test_resolve_account_by_number():
    assert resolve_account(ACCOUNTS, "ACC002") == 2


def test_resolve_account_by_id():
    assert resolve_account(ACCOUNTS, 2) == 2
    assert resolve_account(ACCOUNTS, "2") == 2


def test_resolve_account_prefers_number():
    """Test a numeric account number wins over an ID."""
    assert resolve_account(ACCOUNTS, "1") == 3


def test_resolve_account_not_found():
    with pytest.raises(ValueError, match="not found"):
        resolve_account(ACCOUNTS, "ACC404")
    with pytest.raises(ValueError, match="Account ID 42 not found"):
        resolve_account(ACCOUNTS, 42)
