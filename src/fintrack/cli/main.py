"""Main CLI entry point."""

import logging

import click

from fintrack.database.factories import create_sqlite_database
from fintrack.domain.category import CategoryService
from fintrack.domain.seed import DataSeeder

# Import and register all commands at module level
from fintrack.cli.commands import category, stats, subject, transaction

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINTRACK_DB_PATH environment variable)",
    envvar="FINTRACK_DB_PATH",
)
@click.option(
    "--user",
    "username",
    default="default",
    show_default=True,
    help="User that owns created transactions",
    envvar="FINTRACK_USER",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging verbosity",
    envvar="FINTRACK_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, username: str, log_level: str):
    """Fintrack - personal finance transaction tracker.

    Record transactions between parties, move them through their status
    lifecycle and summarize income and expenses.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(level=getattr(logging, log_level.upper()), format=LOG_FORMAT)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        DataSeeder(CategoryService(db)).run()
        ctx.obj["db"] = db
        ctx.obj["username"] = username
        ctx.call_on_close(db.disconnect)


# Register all commands
transaction.register_commands(cli)
category.register_commands(cli)
subject.register_commands(cli)
stats.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
