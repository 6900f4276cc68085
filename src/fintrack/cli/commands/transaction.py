"""Transaction management commands."""

from decimal import Decimal
from typing import Callable, Optional

import click

from fintrack.cli.date_filters import period_options, pop_period_flags, resolve_cli_date_range
from fintrack.cli.error_handling import handle_domain_error, handle_parse_error
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import (
    Direction,
    PartyDetails,
    PersonType,
    Transaction,
    TransactionRequest,
    TransactionStatus,
)
from fintrack.domain.errors import DomainError
from fintrack.domain.transaction import TransactionService
from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.enum_parser import parse_direction, parse_person_type, parse_status

PARTY_FIELDS = (
    ("tax_id", "tax-id", "tax ID (10 or 12 digits)"),
    ("person_type", "type", "person type: individual or legal"),
    ("name", "name", "name"),
    ("address", "address", "address"),
    ("phone", "phone", "phone (+7XXXXXXXXXX or 8XXXXXXXXXX)"),
    ("bank_name", "bank", "bank name"),
    ("account_number", "account", "account number"),
    ("correspondent_account", "corr-account", "correspondent account number"),
)

STATUS_NAMES = [s.value.lower().replace("_", "-") for s in TransactionStatus]


def party_options(role: str) -> Callable:
    """Add one option per party field, e.g. --sender-tax-id."""

    def decorator(func: Callable) -> Callable:
        for field, flag, help_text in reversed(PARTY_FIELDS):
            func = click.option(
                f"--{role}-{flag}", f"{role}_{field}", help=f"{role.capitalize()} {help_text}"
            )(func)
        return func

    return decorator


def pop_party_values(role: str, kwargs: dict) -> dict[str, Optional[str]]:
    """Remove the options added by party_options from command kwargs."""
    return {field: kwargs.pop(f"{role}_{field}") for field, _, _ in PARTY_FIELDS}


def build_party(
    ctx: click.Context,
    role: str,
    values: dict[str, Optional[str]],
    current: Optional[PartyDetails] = None,
) -> PartyDetails:
    """Build party details from options, filling gaps from the current party.

    Gaps are only filled when the tax ID is unchanged; a new tax ID means a
    different party.
    """
    if current is not None and values["tax_id"] in (None, current.tax_id):
        values = {
            field: value if value is not None else getattr(current, field)
            for field, value in values.items()
        }

    if not values["tax_id"]:
        click.echo(f"Error: --{role}-tax-id is required", err=True)
        ctx.exit(1)

    person_type = values["person_type"]
    if person_type is None:
        person_type = PersonType.INDIVIDUAL
    elif not isinstance(person_type, PersonType):
        try:
            person_type = parse_person_type(person_type)
        except ValueError as e:
            handle_parse_error(ctx, f"{role} type", e)

    return PartyDetails(**{**values, "person_type": person_type})


def current_party(transaction: Transaction, role: str) -> PartyDetails:
    """Extract the party details of an existing transaction."""
    subject = getattr(transaction, role)
    bank = getattr(transaction, f"{role}_bank")
    return PartyDetails(
        tax_id=subject.tax_id,
        person_type=subject.person_type,
        name=subject.name,
        address=subject.address,
        phone=subject.phone,
        bank_name=bank.bank_name if bank else None,
        account_number=bank.account_number if bank else None,
        correspondent_account=bank.correspondent_account if bank else None,
    )


def parse_amount_option(ctx: click.Context, amount: str) -> Decimal:
    try:
        return parse_amount(amount)
    except ValueError as e:
        handle_parse_error(ctx, "amount", e)


def parse_direction_option(ctx: click.Context, direction: str) -> Direction:
    try:
        return parse_direction(direction)
    except ValueError as e:
        handle_parse_error(ctx, "direction", e)


def format_party(transaction: Transaction, role: str) -> str:
    subject = getattr(transaction, role)
    bank = getattr(transaction, f"{role}_bank")
    label = subject.name or "(unnamed)"
    text = f"{label} [{subject.tax_id}, {subject.person_type.description}]"
    if bank is not None:
        text += f" via {bank.bank_name or 'unknown bank'} {bank.account_number}"
    return text


def print_transaction(transaction: Transaction) -> None:
    """Print all details of a transaction."""
    click.echo(f"\nTransaction ID: {transaction.id}")
    click.echo(f"  Status: {transaction.status.value} ({transaction.status.description})")
    click.echo(f"  Date: {transaction.date_time:%Y-%m-%d %H:%M}")
    click.echo(f"  Amount: {transaction.amount:,.2f} ({transaction.direction.description})")
    click.echo(f"  Category: {transaction.category.name} (ID: {transaction.category.id})")
    click.echo(f"  Sender: {format_party(transaction, 'sender')}")
    click.echo(f"  Recipient: {format_party(transaction, 'recipient')}")
    if transaction.comment:
        click.echo(f"  Comment: {transaction.comment}")


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("create")
@party_options("sender")
@party_options("recipient")
@click.option("--amount", required=True, help="Transaction amount (e.g., 1500.00)")
@click.option("--direction", required=True, help="income or expense")
@click.option("--category", required=True, help="Category name or ID (created if unknown)")
@click.option("--comment", help="Free-form comment")
@click.pass_context
def create_transaction(ctx, amount: str, direction: str, category: str, comment: str | None, **kwargs):
    """Create a new transaction in NEW status.

    Parties are matched by tax ID; an existing party gets its details
    replaced by the ones given here. Bank accounts are always registered as
    new accounts.

    Examples:
        fintrack transaction create --sender-tax-id 7707083893 --sender-type legal \\
            --recipient-tax-id 500100732259 --amount 1500 --direction income --category Salary
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    sender = build_party(ctx, "sender", pop_party_values("sender", kwargs))
    recipient = build_party(ctx, "recipient", pop_party_values("recipient", kwargs))
    request = TransactionRequest(
        sender=sender,
        recipient=recipient,
        category=category,
        direction=parse_direction_option(ctx, direction),
        amount=parse_amount_option(ctx, amount),
        comment=comment,
    )

    try:
        transaction = service.create_transaction(request, ctx.obj["username"])
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction.id} ({transaction.amount:,.2f}, {transaction.status.value})")


@transaction_group.command("update")
@click.argument("transaction_id", type=int)
@party_options("sender")
@party_options("recipient")
@click.option("--amount", help="Transaction amount")
@click.option("--direction", help="income or expense")
@click.option("--category", help="Category name or ID (created if unknown)")
@click.option("--comment", help="Free-form comment")
@click.option("--status", type=click.Choice(STATUS_NAMES, case_sensitive=False), help="New status")
@click.pass_context
def update_transaction(
    ctx,
    transaction_id: int,
    amount: str | None,
    direction: str | None,
    category: str | None,
    comment: str | None,
    status: str | None,
    **kwargs,
):
    """Edit a transaction that is still NEW.

    Options that are left out keep their current values. Giving a party a
    new tax ID replaces that party entirely; its bank account is dropped
    unless new account options are given too. Use --status to move the
    transaction along its lifecycle; once it leaves NEW it can no longer be
    edited.

    Examples:
        fintrack transaction update 1 --amount 2000
        fintrack transaction update 1 --status accepted
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        existing = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    sender = build_party(
        ctx, "sender", pop_party_values("sender", kwargs), current_party(existing, "sender")
    )
    recipient = build_party(
        ctx, "recipient", pop_party_values("recipient", kwargs), current_party(existing, "recipient")
    )
    request = TransactionRequest(
        sender=sender,
        recipient=recipient,
        category=category if category is not None else str(existing.category.id),
        direction=parse_direction_option(ctx, direction) if direction else existing.direction,
        amount=parse_amount_option(ctx, amount) if amount else existing.amount,
        comment=comment,
        status=parse_status(status) if status else None,
    )

    try:
        transaction = service.update_transaction(transaction_id, request)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated transaction {transaction.id} ({transaction.status.value})")


@transaction_group.command("show")
@click.argument("transaction_id", type=int)
@click.pass_context
def show_transaction(ctx, transaction_id: int):
    """Show a single transaction."""
    service = TransactionService(ctx.obj["db"])
    try:
        transaction = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    print_transaction(transaction)


@transaction_group.command("list")
@click.option("--status", type=click.Choice(STATUS_NAMES, case_sensitive=False), help="Only this status")
@click.option("--direction", help="Only income or only expense")
@click.option("--category", help="Category name or ID")
@click.option("--recipient-tax-id", help="Recipient tax ID")
@click.option("--sender-bank", help="Sender bank name")
@click.option("--recipient-bank", help="Recipient bank name")
@click.option("--min-amount", help="Minimum amount")
@click.option("--max-amount", help="Maximum amount")
@period_options
@click.option("--verbose", "-v", is_flag=True, help="Show full details for each transaction")
@click.pass_context
def list_transactions(
    ctx,
    status: str | None,
    direction: str | None,
    category: str | None,
    recipient_tax_id: str | None,
    sender_bank: str | None,
    recipient_bank: str | None,
    min_amount: str | None,
    max_amount: str | None,
    start_date: str | None,
    end_date: str | None,
    verbose: bool,
    **kwargs,
):
    """List the current user's transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)
    category_service = CategoryService(db)

    start, end = resolve_cli_date_range(
        ctx, start_date=start_date, end_date=end_date, period_flags=pop_period_flags(kwargs)
    )

    category_id = None
    if category:
        category_obj = category_service.get_category_by_name(category)
        if category_obj is None and category.strip().isdigit():
            category_obj = category_service.get_category(int(category))
        if category_obj is None:
            click.echo(f"Error: Category '{category}' not found", err=True)
            ctx.exit(1)
        category_id = category_obj.id

    transactions = service.list_transactions(
        username=ctx.obj["username"],
        status=parse_status(status) if status else None,
        recipient_tax_id=recipient_tax_id,
        direction=parse_direction_option(ctx, direction) if direction else None,
        category_id=category_id,
        sender_bank_name=sender_bank,
        recipient_bank_name=recipient_bank,
        start_date=start,
        end_date=end,
        min_amount=parse_amount_option(ctx, min_amount) if min_amount else None,
        max_amount=parse_amount_option(ctx, max_amount) if max_amount else None,
    )

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    if verbose:
        for txn in transactions:
            print_transaction(txn)
        return

    click.echo(f"{'ID':>5}  {'Date':<10}  {'Status':<17}  {'Amount':>12}  {'Category':<20}  Recipient")
    click.echo("-" * 90)
    for txn in transactions:
        sign = "+" if txn.direction == Direction.DEBIT else "-"
        click.echo(
            f"{txn.id:>5}  {txn.date_time:%Y-%m-%d}  {txn.status.value:<17}  "
            f"{sign}{txn.amount:>11,.2f}  {txn.category.name[:20]:<20}  "
            f"{txn.recipient.name or txn.recipient.tax_id}"
        )


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool):
    """Mark a transaction as deleted.

    The transaction is kept with status PAYMENT_DELETED. Accepted, processing,
    canceled, completed and returned payments cannot be deleted.
    """
    service = TransactionService(ctx.obj["db"])

    if not yes and not click.confirm(f"Delete transaction {transaction_id}?"):
        click.echo("Aborted.")
        return

    try:
        transaction = service.mark_as_deleted(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Transaction {transaction.id} marked as {transaction.status.value}")


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
