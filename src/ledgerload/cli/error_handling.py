"""CLI error handling helpers."""

import logging

import click

from ledgerload.domain.errors import DomainError

logger = logging.getLogger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print ``Error: <message>`` to stderr and exit 1.

    With --verbose the underlying cause chain (for example the database error
    behind a rolled back upload) is logged as well.
    """
    logger.debug("%s failed", ctx.command_path, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
