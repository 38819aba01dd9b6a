"""CSV upload commands."""

from pathlib import Path

import click
from ledgerload.cli.error_handling import handle_domain_error
from ledgerload.domain.csv_import import CSVImportService
from ledgerload.domain.errors import DomainError


@click.group("upload")
def upload_group():
    """Upload bank statement CSV files and inspect past uploads."""
    pass


@upload_group.command("csv")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def upload_csv(ctx, csv_file: str):
    """Upload transactions from a CSV file.

    Required columns: id, account_number, direction, amount, transaction_date.
    """
    db = ctx.obj["db"]
    service = CSVImportService(db)
    path = Path(csv_file)

    try:
        summary = service.upload_csv(content=path.read_bytes(), file_name=path.name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(summary.message)
    click.echo(f"  Upload ID: {summary.transaction_upload_id}")
    click.echo(f"  Status: {summary.status}")
    if summary.error_message:
        click.echo(f"  {summary.error_message}")


@upload_group.command("list")
@click.pass_context
def list_uploads(ctx):
    """List all uploads."""
    db = ctx.obj["db"]
    service = CSVImportService(db)

    uploads = service.list_uploads()
    if not uploads:
        click.echo("No uploads found.")
        return

    click.echo("\nUploads:")
    click.echo("-" * 90)
    for upload in uploads:
        click.echo(
            f"ID: {upload.id:3d} | {upload.upload_date} | {upload.file_name:20s} | "
            f"{upload.file_size:7d} bytes | in: {upload.incoming_transaction_count} | "
            f"out: {upload.outgoing_transaction_count} | {upload.status}"
            + (f" | {upload.error_message}" if upload.error_message else "")
        )


@upload_group.command("failures")
@click.option("--upload-id", type=int, help="Only show rows rejected by this upload")
@click.pass_context
def list_failures(ctx, upload_id: int | None):
    """List rejected CSV rows."""
    db = ctx.obj["db"]
    service = CSVImportService(db)

    if upload_id is not None and service.get_upload(upload_id) is None:
        click.echo(f"Error: Upload {upload_id} not found", err=True)
        ctx.exit(1)

    failures = service.list_failed_imports(upload_id=upload_id)
    if not failures:
        click.echo("No failed imports found.")
        return

    click.echo("\nFailed imports:")
    click.echo("-" * 90)
    for failed in failures:
        click.echo(
            f"Upload {failed.transaction_upload_id:3d} | {failed.external_transaction_id:12s} | "
            f"{failed.error_message:28s} | {failed.csv_row_value}"
        )


def register_commands(cli):
    """Register upload commands with main CLI."""
    cli.add_command(upload_group)
