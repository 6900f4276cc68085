"""CLI error handling helpers."""

import click

from fintrack.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_parse_error(ctx: click.Context, what: str, error: ValueError) -> None:
    """Render an input parsing error and exit with failure."""
    click.echo(f"Error: Invalid {what}: {error}", err=True)
    ctx.exit(1)
