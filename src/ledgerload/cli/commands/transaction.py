"""Transaction commands."""

import json
from datetime import date
from decimal import Decimal, InvalidOperation

import click
from ledgerload.cli.account_resolution import resolve_account_or_exit
from ledgerload.cli.date_filters import resolve_cli_date_range
from ledgerload.cli.error_handling import handle_domain_error
from ledgerload.domain.account import AccountService
from ledgerload.domain.entities import Direction, NewTransaction
from ledgerload.domain.errors import DomainError
from ledgerload.domain.transaction import TransactionService


@click.group("transaction")
def transaction_group():
    """List and bulk-create transactions."""
    pass


@transaction_group.command("list")
@click.option("--account", help="Account number or ID")
@click.option("--start-date", help="Earliest transaction date (e.g. 2024-01-01, 'last month')")
@click.option("--end-date", help="Latest transaction date")
@click.option("--upload-id", type=int, help="Only transactions created by this upload")
@click.pass_context
def list_transactions(
    ctx,
    account: str | None,
    start_date: str | None,
    end_date: str | None,
    upload_id: int | None,
):
    """List stored transactions."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    account_id = None
    if account is not None:
        account_id = resolve_account_or_exit(ctx, AccountService(db), account)

    start, end = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date)

    transactions = service.list_transactions(
        account_id=account_id,
        start_date=start,
        end_date=end,
        transaction_upload_id=upload_id,
    )
    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\n{'ID':>5} {'Date':10} {'Account':>7} {'Direction':9} {'Amount':>12} {'Upload':>6}  External ID")
    click.echo("-" * 70)
    for txn in transactions:
        upload = str(txn.transaction_upload_id) if txn.transaction_upload_id is not None else "-"
        click.echo(
            f"{txn.id:5d} {txn.transaction_date.isoformat():10} {txn.account_id:7d} "
            f"{txn.direction.value:9} {txn.amount:12.2f} {upload:>6}  {txn.external_transaction_id or ''}"
        )


def _parse_batch_item(index: int, item: dict) -> NewTransaction:
    try:
        direction = Direction.parse(str(item["direction"]))
        if direction is None:
            raise ValueError(f"invalid direction '{item['direction']}'")
        return NewTransaction(
            account_id=int(item["account_id"]),
            amount=Decimal(str(item["amount"])),
            transaction_date=date.fromisoformat(item["transaction_date"]),
            direction=direction,
            external_transaction_id=item.get("external_transaction_id"),
            transaction_upload_id=item.get("transaction_upload_id"),
        )
    except KeyError as e:
        raise ValueError(f"Transaction {index}: missing field {e}")
    except (ValueError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Transaction {index}: {e}")


@transaction_group.command("batch-create")
@click.argument("json_file", type=click.File("r"))
@click.pass_context
def batch_create(ctx, json_file):
    """Insert transactions from a JSON list without touching balances.

    Each item needs account_id, amount, transaction_date (YYYY-MM-DD) and
    direction; external_transaction_id and transaction_upload_id are optional.
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        items = json.load(json_file)
    except json.JSONDecodeError as e:
        click.echo(f"Error: Invalid JSON: {e}", err=True)
        ctx.exit(1)

    if not isinstance(items, list):
        click.echo("Error: Expected a JSON list of transactions", err=True)
        ctx.exit(1)

    try:
        transactions = [_parse_batch_item(i, item) for i, item in enumerate(items, start=1)]
        ids = service.batch_create(transactions)
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Successfully created {len(ids)} transactions")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group)
