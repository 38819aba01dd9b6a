"""Reconciliation command."""

from pathlib import Path

import click
from ledgerload.cli.error_handling import handle_domain_error
from ledgerload.domain.errors import DomainError
from ledgerload.domain.reconciliation import ReconciliationService


@click.command("reconcile")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--unmatched-only", is_flag=True, help="Hide rows with a perfect match")
@click.pass_context
def reconcile(ctx, csv_file: str, unmatched_only: bool):
    """Compare a reference CSV with stored transactions.

    Each row is reported as a perfect match, a row with near matches
    (exactly one field differs), or unmatched.
    """
    db = ctx.obj["db"]
    service = ReconciliationService(db)

    try:
        results = service.compare_csv(Path(csv_file).read_bytes())
    except DomainError as e:
        handle_domain_error(ctx, e)

    perfect = sum(1 for r in results if r.perfect_match)
    click.echo(f"\nCompared {len(results)} rows: {perfect} perfect matches")
    click.echo("-" * 70)

    for result in results:
        if unmatched_only and result.perfect_match:
            continue

        row = (
            f"{result.transaction_date:10} | {result.account:15s} | "
            f"{result.external_transaction_id:10s} | {result.direction:8s} | {result.amount}"
        )
        if result.perfect_match:
            ids = ", ".join(str(i) for i in result.matching_transaction_ids)
            click.echo(f"MATCH    {row} -> {ids}")
        elif result.near_matches:
            click.echo(f"NEAR     {row}")
            for txn in result.near_matches:
                differs = result.near_match_fields[txn.id].value
                click.echo(f"           transaction {txn.id} differs on {differs}")
        else:
            click.echo(f"NO MATCH {row}")


def register_commands(cli):
    """Register reconcile command with main CLI."""
    cli.add_command(reconcile)
