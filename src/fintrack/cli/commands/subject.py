"""Commands for transaction parties (subjects)."""

import click

from fintrack.cli.error_handling import handle_domain_error, handle_parse_error
from fintrack.domain.bank import BankService
from fintrack.domain.entities import SubjectPatch, UNSET
from fintrack.domain.errors import DomainError
from fintrack.domain.subject import SubjectService
from fintrack.utils.enum_parser import parse_person_type


@click.group()
def subject_group():
    """Manage transaction parties."""
    pass


@subject_group.command("list")
@click.pass_context
def list_subjects(ctx):
    """List all known parties."""
    service = SubjectService(ctx.obj["db"])

    subjects = service.list_subjects()
    if not subjects:
        click.echo("No subjects found.")
        return

    for subj in subjects:
        click.echo(f"{subj.tax_id:<12}  {subj.person_type.description:<12}  {subj.name or ''}")


@subject_group.command("show")
@click.argument("tax_id")
@click.pass_context
def show_subject(ctx, tax_id: str):
    """Show a party and its bank accounts."""
    db = ctx.obj["db"]
    service = SubjectService(db)
    bank_service = BankService(db)

    try:
        subj = service.require_subject_by_tax_id(tax_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nSubject ID: {subj.id}")
    click.echo(f"  Tax ID: {subj.tax_id}")
    click.echo(f"  Type: {subj.person_type.description}")
    click.echo(f"  Name: {subj.name or ''}")
    click.echo(f"  Address: {subj.address or ''}")
    click.echo(f"  Phone: {subj.phone or ''}")

    banks = bank_service.list_banks(subject_id=subj.id)
    if banks:
        click.echo("  Bank accounts:")
        for bank in banks:
            corr = f" (corr. {bank.correspondent_account})" if bank.correspondent_account else ""
            click.echo(f"    {bank.bank_name or 'unknown bank'}: {bank.account_number}{corr}")


@subject_group.command("update")
@click.argument("tax_id")
@click.option("--name", help="New name")
@click.option("--type", "person_type", help="individual or legal")
@click.option("--new-tax-id", help="New tax ID (10 or 12 digits)")
@click.option("--address", help="New address")
@click.option("--phone", help="New phone")
@click.pass_context
def update_subject(
    ctx,
    tax_id: str,
    name: str | None,
    person_type: str | None,
    new_tax_id: str | None,
    address: str | None,
    phone: str | None,
):
    """Update a party's details; omitted fields stay as they are."""
    service = SubjectService(ctx.obj["db"])

    parsed_type = UNSET
    if person_type is not None:
        try:
            parsed_type = parse_person_type(person_type)
        except ValueError as e:
            handle_parse_error(ctx, "type", e)

    patch = SubjectPatch(
        name=name if name is not None else UNSET,
        person_type=parsed_type,
        tax_id=new_tax_id if new_tax_id is not None else UNSET,
        address=address if address is not None else UNSET,
        phone=phone if phone is not None else UNSET,
    )

    try:
        subj = service.require_subject_by_tax_id(tax_id)
        subj = service.update_subject(subj.id, patch)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated subject {subj.tax_id} ({subj.name or 'unnamed'})")


def register_commands(cli):
    """Register subject commands with main CLI."""
    cli.add_command(subject_group, name="subject")
