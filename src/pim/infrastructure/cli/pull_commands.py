"""CLI commands for pull-list lines (project items)."""

from __future__ import annotations

import click

from pim.application.add_project_item import AddProjectItemHandler
from pim.application.delete_project_item import DeleteProjectItemHandler
from pim.application.update_project_item import UpdateProjectItemHandler
from pim.domain.exceptions import DomainException
from pim.domain.model.project_item import PullStatus
from pim.infrastructure.bootstrap import unit_of_work

_STATUSES = click.Choice([s.value for s in PullStatus], case_sensitive=False)


@click.command("add")
@click.option("--project", "project_id", required=True, type=int, help="Project ID.")
@click.option("--item", "item_id", required=True, type=int, help="Catalog item ID.")
@click.option("--quantity", type=int, default=None, help="Units to pull (default 1).")
@click.option("--status", type=_STATUSES, default=None, help="Initial status (default pulled).")
@click.option("--notes", default=None, help="Free-form notes.")
def pull_add(
    project_id: int,
    item_id: int,
    quantity: int | None,
    status: str | None,
    notes: str | None,
) -> None:
    """Put a catalog item on a project's pull list (deducts stock)."""
    handler = AddProjectItemHandler(uow=unit_of_work())

    try:
        dto = handler.handle(
            project_id=project_id,
            item_id=item_id,
            quantity=quantity,
            status=status,
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Line #{dto.id} added to project #{dto.project_id}: "
        f"item #{dto.item_id} x{dto.quantity} ({dto.status})"
    )


@click.command("update")
@click.option("--id", "line_id", required=True, type=int, help="Pull-list line ID.")
@click.option("--project", "project_id", type=int, default=None, help="Owning project ID.")
@click.option("--quantity", type=int, default=None, help="New quantity.")
@click.option("--status", type=_STATUSES, default=None, help="New status.")
@click.option("--notes", default=None, help="Replace the notes.")
def pull_update(
    line_id: int,
    project_id: int | None,
    quantity: int | None,
    status: str | None,
    notes: str | None,
) -> None:
    """Change a line's quantity, status or notes (adjusts stock)."""
    changes: dict = {}
    if quantity is not None:
        changes["quantity"] = quantity
    if status is not None:
        changes["status"] = status
    if notes is not None:
        changes["notes"] = notes
    if not changes:
        raise click.UsageError("Nothing to update: pass --quantity, --status or --notes")

    handler = UpdateProjectItemHandler(uow=unit_of_work())

    try:
        dto = handler.handle(line_id, changes, project_id=project_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line #{dto.id} now x{dto.quantity} ({dto.status})")


@click.command("remove")
@click.option("--id", "line_id", required=True, type=int, help="Pull-list line ID.")
@click.option("--project", "project_id", type=int, default=None, help="Owning project ID.")
def pull_remove(line_id: int, project_id: int | None) -> None:
    """Take a line off its pull list (returns unreturned units to stock)."""
    handler = DeleteProjectItemHandler(uow=unit_of_work())

    try:
        handler.handle(line_id, project_id=project_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Line #{line_id} removed.")
