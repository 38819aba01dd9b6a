"""Tests for domain entities."""

import pytest
from datetime import date
from decimal import Decimal

from ledgerload.domain.entities import (
    Account,
    Direction,
    MatchResult,
    NewTransaction,
    ValidatedTransaction,
)


class TestAccount:
    """Tests for Account entity."""

    def test_account_immutability(self):
        """Test that Account entities are immutable."""
        account = Account(id=1, name="Checking", account_number="ACC001", balance=Decimal("0.00"))

        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            account.balance = Decimal("1.00")

    def test_account_equality(self):
        account1 = Account(id=1, name="Checking", account_number="ACC001", balance=Decimal("1.0"))
        account2 = Account(id=1, name="Checking", account_number="ACC001", balance=Decimal("1.00"))

        assert account1 == account2


class TestTransactions:
    """Tests for transaction entities."""

    def test_new_transaction_defaults(self):
        txn = NewTransaction(
            account_id=1,
            amount=Decimal("1.00"),
            transaction_date=date(2024, 1, 1),
            direction=Direction.INCOMING,
        )

        assert txn.external_transaction_id is None
        assert txn.transaction_upload_id is None

    def test_duplicate_key(self):
        txn = ValidatedTransaction(
            account_id=2,
            amount=Decimal("3.00"),
            transaction_date=date(2024, 1, 1),
            direction=Direction.OUTGOING,
            external_transaction_id="T3",
            csv_row_value="T3,ACC002,O,3,2024-01-01",
        )

        assert txn.duplicate_key == (2, Decimal("3.00"), "T3")


def test_match_result_defaults():
    result = MatchResult(
        transaction_date="2024-01-01",
        account="Checking",
        account_number="ACC001",
        external_transaction_id="T1",
        direction="I",
        amount="1.00",
    )

    assert result.perfect_match is False
    assert result.matching_transaction_ids == []
    assert result.near_matches == []
    assert result.near_match_fields == {}


def test_direction_values():
    assert Direction.INCOMING.value == "Incoming"
    assert Direction("Outgoing") is Direction.OUTGOING
