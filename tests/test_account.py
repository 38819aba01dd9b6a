"""Tests for account management."""

import pytest
from datetime import date
from decimal import Decimal

from ledgerload.cli.main import cli
from ledgerload.domain.entities import Direction, NewTransaction
from ledgerload.domain.errors import (
    AccountNumberLockedError,
    ConflictError,
    DependencyError,
    DuplicateAccountNumberError,
    NotFoundError,
    ValidationError,
)


class TestAccountService:
    """Tests for AccountService rules."""

    def test_create_and_get(self, account_service):
        account_id = account_service.create_account("Checking", "ACC001", Decimal("12.5"))

        account = account_service.get_account(account_id)
        assert account.name == "Checking"
        assert account.account_number == "ACC001"
        assert account.balance == Decimal("12.50")
        assert account_service.get_account_by_number("ACC001") == account

    def test_default_balance_is_zero(self, account_service):
        account_id = account_service.create_account("Checking", "ACC001")

        assert account_service.get_account(account_id).balance == Decimal("0.00")

    def test_duplicate_number_rejected(self, account_service, sample_account):
        with pytest.raises(DuplicateAccountNumberError) as excinfo:
            account_service.create_account("Other", "ACC001")

        assert isinstance(excinfo.value, ConflictError)
        assert str(excinfo.value) == (
            "An account with account number 'ACC001' already exists. Account numbers must be unique."
        )

    def test_blank_fields_rejected(self, account_service):
        with pytest.raises(ValidationError):
            account_service.create_account("  ", "ACC001")
        with pytest.raises(ValidationError):
            account_service.create_account("Checking", "")

    @pytest.mark.parametrize("balance", ["NaN", "-Infinity", "1e100", "12.345"])
    def test_unstorable_balance_rejected(self, account_service, balance):
        with pytest.raises(ValidationError, match="Invalid balance"):
            account_service.create_account("Checking", "ACC001", Decimal(balance))

        assert account_service.list_accounts() == []

    def test_list_accounts(self, account_service, sample_account, second_account):
        assert [a.account_number for a in account_service.list_accounts()] == ["ACC001", "ACC002"]

    def test_update_name_and_number_without_transactions(self, account_service, sample_account):
        account_service.update_account(sample_account.id, "Main", "ACC009")

        account = account_service.get_account(sample_account.id)
        assert account.name == "Main"
        assert account.account_number == "ACC009"
        assert account.balance == Decimal("1000.00")

    def test_number_locked_once_transactions_exist(self, account_service, import_service, sample_account):
        import_service.upload_csv(
            b"id,account_number,direction,amount,transaction_date\nT1,ACC001,I,1.00,2024-01-01\n",
            "one.csv",
        )

        with pytest.raises(AccountNumberLockedError) as excinfo:
            account_service.update_account(sample_account.id, "Checking", "ACC009")

        assert isinstance(excinfo.value, DependencyError)
        assert str(excinfo.value) == (
            "You may not update an account number for accounts with existing transactions."
        )
        assert account_service.get_account(sample_account.id).account_number == "ACC001"

    def test_unchanged_number_allowed_with_transactions(
        self, account_service, transaction_service, sample_account
    ):
        transaction_service.batch_create(
            [
                NewTransaction(
                    account_id=sample_account.id,
                    amount=Decimal("1.00"),
                    transaction_date=date(2024, 1, 1),
                    direction=Direction.INCOMING,
                )
            ]
        )

        account_service.update_account(sample_account.id, "Renamed", "ACC001")

        assert account_service.get_account(sample_account.id).name == "Renamed"

    def test_update_to_taken_number(self, account_service, sample_account, second_account):
        with pytest.raises(DuplicateAccountNumberError):
            account_service.update_account(second_account.id, "Savings", "ACC001")

    def test_update_missing_account(self, account_service):
        with pytest.raises(NotFoundError, match="Account 42 not found"):
            account_service.update_account(42, "Ghost", "ACC042")


def test_account_create(cli_runner, temp_db):
    """Test creating an account from the CLI."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "account", "create", "Checking", "ACC001", "--balance", "250"],
    )

    assert result.exit_code == 0
    assert "Created account 'Checking'" in result.output
    assert "number: ACC001" in result.output

    account = temp_db.get_account_by_number("ACC001")
    assert account.balance == Decimal("250.00")


def test_account_create_duplicate(cli_runner, temp_db, sample_account):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "create", "Other", "ACC001"]
    )

    assert result.exit_code == 1
    assert "Error: An account with account number 'ACC001' already exists" in result.output


def test_account_create_invalid_balance(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "account", "create", "Checking", "ACC001", "--balance", "lots"],
    )

    assert result.exit_code == 1
    assert "Invalid balance" in result.output


@pytest.mark.parametrize("balance", ["NaN", "1e100"])
def test_account_create_unstorable_balance(cli_runner, temp_db, balance):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "account", "create", "Checking", "ACC001", "--balance", balance],
    )

    assert result.exit_code == 1
    assert "Error: Invalid balance" in result.output
    assert temp_db.get_account_by_number("ACC001") is None


def test_account_list_empty(cli_runner, temp_db):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "list"])

    assert result.exit_code == 0
    assert "No accounts found." in result.output


def test_account_list_with_data(cli_runner, temp_db, sample_account):
    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "list"])

    assert result.exit_code == 0
    assert "Checking" in result.output
    assert "ACC001" in result.output
    assert "1000.00" in result.output


def test_account_update_by_number(cli_runner, temp_db, sample_account):
    result = cli_runner.invoke(
        cli,
        ["--db-path", temp_db.database_path, "account", "update", "ACC001", "Main", "ACC007"],
    )

    assert result.exit_code == 0
    assert f"Updated account {sample_account.id}" in result.output

    temp_db.disconnect()
    assert temp_db.get_account(sample_account.id).account_number == "ACC007"


def test_account_update_unknown(cli_runner, temp_db):
    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "account", "update", "ACC404", "X", "ACC404"]
    )

    assert result.exit_code == 1
    assert "Error: Account 'ACC404' not found" in result.output
