"""Income and expense statistics commands."""

import click

from fintrack.cli.date_filters import period_options, pop_period_flags, resolve_cli_date_range
from fintrack.domain.statistics import StatisticsService


@click.group()
def stats_group():
    """Show income and expense statistics."""
    pass


@stats_group.command("summary")
@click.pass_context
def summary(ctx):
    """Show total income, total expense and balance."""
    service = StatisticsService(ctx.obj["db"])
    result = service.general_statistics(ctx.obj["username"])

    click.echo(f"Transactions: {result.transaction_count}")
    click.echo(f"Income:       {result.total_income:>14,.2f}")
    click.echo(f"Expenses:     {result.total_expense:>14,.2f}")
    click.echo(f"Balance:      {result.balance:>14,.2f}")


@stats_group.command("by-category")
@click.pass_context
def by_category(ctx):
    """Show totals per category."""
    service = StatisticsService(ctx.obj["db"])
    results = service.statistics_by_category(ctx.obj["username"])

    if not results:
        click.echo("No transactions found.")
        return

    click.echo(f"{'Category':<25}  {'Direction':<8}  {'Count':>5}  {'Total':>14}")
    click.echo("-" * 58)
    for stat in results:
        click.echo(
            f"{stat.category_name[:25]:<25}  {stat.direction.description:<8}  "
            f"{stat.count:>5}  {stat.total:>14,.2f}"
        )


@stats_group.command("by-period")
@period_options
@click.pass_context
def by_period(ctx, start_date: str | None, end_date: str | None, **kwargs):
    """Show income and expenses per day."""
    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=pop_period_flags(kwargs)
    )
    service = StatisticsService(ctx.obj["db"])
    results = service.statistics_by_period(ctx.obj["username"], start_date=start, end_date=end)

    if not results:
        click.echo("No transactions found.")
        return

    click.echo(f"{'Date':<10}  {'Count':>5}  {'Income':>14}  {'Expenses':>14}  {'Balance':>14}")
    click.echo("-" * 65)
    for stat in results:
        click.echo(
            f"{stat.period.isoformat():<10}  {stat.transaction_count:>5}  {stat.income:>14,.2f}  "
            f"{stat.expenses:>14,.2f}  {stat.balance:>14,.2f}"
        )


def register_commands(cli):
    """Register statistics commands with main CLI."""
    cli.add_command(stats_group, name="stats")
