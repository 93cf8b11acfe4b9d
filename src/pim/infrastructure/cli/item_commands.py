"""CLI commands for the master catalog."""

from __future__ import annotations

import click

from pim.application.add_item import AddItemHandler
from pim.application.show_items import (
    ListItemsHandler,
    ShowItemAssignmentsHandler,
    ShowItemHandler,
)
from pim.application.update_item import UpdateItemHandler
from pim.domain.exceptions import DomainException
from pim.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--vendor", required=True, help="Vendor name.")
@click.option("--category", required=True, help="e.g. Furniture, Lighting, Decor.")
@click.option("--cost", required=True, help="Cost (e.g. 150.00).")
@click.option("--price", required=True, help="Client price (e.g. 285.00).")
@click.option("--bwd-price", default=None, help="Internal price (default 0.00).")
@click.option("--quantity", type=int, default=0, show_default=True, help="Units in stock.")
@click.option("--description", default=None, help="Description.")
@click.option("--image-url", default=None, help="Image reference.")
def item_add(
    name: str,
    vendor: str,
    category: str,
    cost: str,
    price: str,
    bwd_price: str | None,
    quantity: int,
    description: str | None,
    image_url: str | None,
) -> None:
    """Add a new item to the catalog."""
    handler = AddItemHandler(uow=unit_of_work())

    try:
        dto = handler.handle(
            name=name,
            vendor=vendor,
            category=category,
            cost=cost,
            price=price,
            bwd_price=bwd_price,
            quantity=quantity,
            description=description,
            image_url=image_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{dto.id} '{dto.name}' added ({dto.quantity} in stock)")


@click.command("list")
@click.option("--search", default=None, help="Filter by name, category or vendor.")
def item_list(search: str | None) -> None:
    """List catalog items, newest first."""
    items = ListItemsHandler(uow=unit_of_work()).handle(search)

    if not items:
        click.echo("No items found.")
        return

    click.echo(
        f"{'ID':<5} {'Name':<24} {'Vendor':<14} {'Category':<12} "
        f"{'Price':>10} {'Stock':>6}"
    )
    click.echo("-" * 76)
    for i in items:
        click.echo(
            f"{i.id:<5} {i.name:<24} {i.vendor:<14} {i.category:<12} "
            f"{i.price:>10} {i.quantity:>6}"
        )


@click.command("show")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
def item_show(item_id: int) -> None:
    """Show a catalog item."""
    try:
        dto = ShowItemHandler(uow=unit_of_work()).handle(item_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{dto.id}  {dto.name}")
    click.echo(f"Vendor:    {dto.vendor}")
    click.echo(f"Category:  {dto.category}")
    click.echo(f"Cost:      {dto.cost}")
    click.echo(f"Price:     {dto.price}  (BWD {dto.bwd_price})")
    click.echo(f"In stock:  {dto.quantity}")
    if dto.description:
        click.echo(f"\n{dto.description}")


@click.command("update")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", default=None)
@click.option("--vendor", default=None)
@click.option("--category", default=None)
@click.option("--cost", default=None)
@click.option("--price", default=None)
@click.option("--bwd-price", default=None)
@click.option("--quantity", type=int, default=None, help="Override units in stock.")
@click.option("--description", default=None)
@click.option("--image-url", default=None)
def item_update(item_id: int, **fields) -> None:
    """Edit a catalog item. Only the given fields change."""
    changes = {key: value for key, value in fields.items() if value is not None}
    if not changes:
        raise click.UsageError("Nothing to update")

    try:
        dto = UpdateItemHandler(uow=unit_of_work()).handle(item_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item #{dto.id} updated ({dto.quantity} in stock)")


@click.command("assignments")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
def item_assignments(item_id: int) -> None:
    """Show which projects currently hold units of an item."""
    rows = ShowItemAssignmentsHandler(uow=unit_of_work()).handle(item_id)

    if not rows:
        click.echo("Not assigned to any project.")
        return

    click.echo(f"{'Project':<32} {'Qty':>5} {'Status':<10} {'Added':<16}")
    click.echo("-" * 66)
    for row in rows:
        click.echo(
            f"{row.project_name:<32} {row.quantity:>5} {row.status:<10} "
            f"{row.added_at:%Y-%m-%d %H:%M}"
        )
