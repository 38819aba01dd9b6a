"""Account management commands."""

from decimal import Decimal, InvalidOperation

import click
from ledgerload.cli.account_resolution import resolve_account_or_exit
from ledgerload.cli.error_handling import handle_domain_error
from ledgerload.domain.account import AccountService
from ledgerload.domain.errors import DomainError


@click.group("account")
def account_group():
    """Manage accounts."""
    pass


@account_group.command("create")
@click.argument("name", metavar="ACCOUNT_NAME")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.option("--balance", default="0.00", help="Opening balance (default 0.00)")
@click.pass_context
def create_account(ctx, name: str, account_number: str, balance: str):
    """Create a new account.

    Examples:
        ledgerload account create "Checking" ACC001
        ledgerload account create "Savings" ACC002 --balance 1000.00
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        opening_balance = Decimal(balance)
    except InvalidOperation:
        click.echo(f"Error: Invalid balance '{balance}'", err=True)
        ctx.exit(1)

    try:
        account_id = service.create_account(
            name=name, account_number=account_number, balance=opening_balance
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account '{name}' (ID: {account_id}, number: {account_number})")


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 70)
    for acc in accounts:
        click.echo(
            f"ID: {acc.id:3d} | {acc.name:20s} | Number: {acc.account_number:12s} | Balance: {acc.balance}"
        )


@account_group.command("update")
@click.argument("account", metavar="ACCOUNT")
@click.argument("name", metavar="NAME")
@click.argument("account_number", metavar="ACCOUNT_NUMBER")
@click.pass_context
def update_account(ctx, account: str, name: str, account_number: str) -> None:
    """Update an account's name and number.

    ACCOUNT can be an account number or ID. The number cannot change once
    the account has transactions.

    Examples:
        ledgerload account update ACC001 "Main Checking" ACC001
        ledgerload account update 2 "Savings" ACC009
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    account_id = resolve_account_or_exit(ctx, service, account)

    try:
        service.update_account(account_id=account_id, name=name, account_number=account_number)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated account {account_id}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group)
