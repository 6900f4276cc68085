"""CLI helpers for date range resolution."""

from datetime import date
from typing import Callable

import click

from fintrack.cli.error_handling import handle_parse_error
from fintrack.utils.date_parser import PERIODS, get_date_range, parse_date


def period_options(func: Callable) -> Callable:
    """Add --start-date/--end-date and one flag per named period."""
    for period in reversed(PERIODS):
        func = click.option(
            f"--{period}",
            f"period_{period.replace('-', '_')}",
            is_flag=True,
            help=f"Limit to {period.replace('-', ' ')}",
        )(func)
    func = click.option("--end-date", help="End date (YYYY-MM-DD or 'today', 'this month', ...)")(func)
    func = click.option("--start-date", help="Start date (YYYY-MM-DD or 'last month', 'this year', ...)")(func)
    return func


def pop_period_flags(kwargs: dict) -> dict[str, bool]:
    """Remove the period flags added by period_options from command kwargs."""
    return {period: kwargs.pop(f"period_{period.replace('-', '_')}", False) for period in PERIODS}


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date] | None = None,
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from period flags or explicit dates."""
    chosen = [period for period, is_set in period_flags.items() if is_set]

    if len(chosen) > 1:
        click.echo(
            f"Error: Only one period option ({', '.join('--' + p for p in PERIODS)}) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if chosen and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --last-year, etc.) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if chosen:
        return get_date_range(chosen[0])

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            handle_parse_error(ctx, "start date", e)
    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            handle_parse_error(ctx, "end date", e)

    if start is None and end is None and default_range is not None:
        start, end = default_range

    if start is not None and end is not None and start > end:
        click.echo(f"Error: Start date {start} is after end date {end}.", err=True)
        ctx.exit(1)

    return start, end
