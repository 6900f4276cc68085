"""Category management commands."""

import click

from fintrack.cli.error_handling import handle_domain_error, handle_parse_error
from fintrack.domain.category import CategoryService
from fintrack.domain.entities import CategoryPatch, Direction, UNSET
from fintrack.domain.errors import DomainError
from fintrack.utils.enum_parser import parse_direction

DIRECTION_CHOICES = click.Choice(["income", "expense"], case_sensitive=False)


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.option("--direction", type=DIRECTION_CHOICES, help="Only income or only expense categories")
@click.pass_context
def list_categories(ctx, direction: str | None):
    """List categories grouped by direction."""
    service = CategoryService(ctx.obj["db"])

    categories = service.list_categories(direction=parse_direction(direction) if direction else None)
    if not categories:
        click.echo("No categories found.")
        return

    for group in (Direction.DEBIT, Direction.CREDIT):
        members = [c for c in categories if c.direction == group]
        if not members:
            continue
        click.echo(f"\n{group.description}:")
        for cat in members:
            click.echo(f"  {cat.name} (ID: {cat.id})")


@category_group.command("create")
@click.argument("name")
@click.option("--direction", type=DIRECTION_CHOICES, default="expense", help="Category direction (default: expense)")
@click.pass_context
def create_category(ctx, name: str, direction: str):
    """Create a new category."""
    service = CategoryService(ctx.obj["db"])

    try:
        category_id = service.create_category(name=name, direction=parse_direction(direction))
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created category '{name.strip()}' (ID: {category_id})")


@category_group.command("rename")
@click.argument("category_id", type=int)
@click.argument("new_name", required=False)
@click.option("--direction", type=DIRECTION_CHOICES, help="Change the category direction")
@click.pass_context
def rename_category(ctx, category_id: int, new_name: str | None, direction: str | None):
    """Rename a category and/or change its direction."""
    service = CategoryService(ctx.obj["db"])

    if new_name is None and direction is None:
        handle_parse_error(ctx, "arguments", ValueError("give a new name or --direction"))

    patch = CategoryPatch(
        name=new_name if new_name is not None else UNSET,
        direction=parse_direction(direction) if direction else UNSET,
    )
    try:
        category = service.update_category(category_id, patch)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated category {category.id}: {category.name} ({category.direction.description})")


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.pass_context
def delete_category(ctx, category_id: int):
    """Delete a category that no transaction uses."""
    service = CategoryService(ctx.obj["db"])

    try:
        service.delete_category(category_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted category {category_id}")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
