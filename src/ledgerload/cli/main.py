"""Main CLI entry point."""

import logging

import click
from ledgerload.database.factories import DB_PATH_ENV, create_sqlite_database

# Import and register all commands at module level
from ledgerload.cli.commands import (
    account,
    upload,
    transaction,
    reconcile,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides LEDGERLOAD_DB_PATH environment variable)",
    envvar=DB_PATH_ENV,
)
@click.option("-v", "--verbose", is_flag=True, help="Log engine activity to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Ledgerload - bank statement ingestion and reconciliation.

    Upload bank-statement CSV files into accounts, inspect rejected rows,
    and reconcile reference files against stored transactions.
    """
    ctx.ensure_object(dict)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
account.register_commands(cli)
upload.register_commands(cli)
transaction.register_commands(cli)
reconcile.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
