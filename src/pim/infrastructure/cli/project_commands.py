"""CLI commands for the Project aggregate."""

from __future__ import annotations

import click

from pim.application.create_project import CreateProjectHandler
from pim.application.delete_project import DeleteProjectHandler
from pim.application.show_projects import ListProjectsHandler, ShowProjectHandler
from pim.application.update_project import ArchiveProjectHandler, UpdateProjectHandler
from pim.domain.exceptions import DomainException
from pim.domain.model.project import ProjectStatus
from pim.infrastructure.bootstrap import unit_of_work

_STATUSES = click.Choice([s.value for s in ProjectStatus], case_sensitive=False)


@click.command("create")
@click.option("--name", required=True, help="Project name.")
@click.option("--client", "client_name", required=True, help="Client name.")
def project_create(name: str, client_name: str) -> None:
    """Create a new (active) project."""
    try:
        dto = CreateProjectHandler(uow=unit_of_work()).handle(name, client_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Project #{dto.id} '{dto.name}' created for {dto.client_name}")


@click.command("list")
def project_list() -> None:
    """List projects, newest first."""
    projects = ListProjectsHandler(uow=unit_of_work()).handle()

    if not projects:
        click.echo("No projects found.")
        return

    click.echo(f"{'ID':<5} {'Name':<32} {'Client':<20} {'Status':<9}")
    click.echo("-" * 68)
    for p in projects:
        click.echo(f"{p.id:<5} {p.name:<32} {p.client_name:<20} {p.status:<9}")


@click.command("show")
@click.option("--id", "project_id", required=True, type=int, help="Project ID.")
def project_show(project_id: int) -> None:
    """Show a project and its pull list."""
    try:
        dto = ShowProjectHandler(uow=unit_of_work()).handle(project_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Project #{dto.id}  {dto.name}  (status={dto.status})")
    click.echo(f"Client:  {dto.client_name}")
    click.echo(f"Created: {dto.created_at:%Y-%m-%d %H:%M UTC}")
    click.echo()

    if not dto.items:
        click.echo("  Pull list is empty.")
        return

    click.echo(f"  {'Line':<6} {'Item':<28} {'Qty':>5} {'Status':<10} {'Notes'}")
    click.echo(f"  {'-'*66}")
    for line in dto.items:
        item_name = line.item.name if line.item else f"#{line.item_id} (missing)"
        click.echo(
            f"  {line.id:<6} {item_name:<28} {line.quantity:>5} "
            f"{line.status:<10} {line.notes or ''}"
        )


@click.command("update")
@click.option("--id", "project_id", required=True, type=int, help="Project ID.")
@click.option("--name", default=None, help="New project name.")
@click.option("--client", "client_name", default=None, help="New client name.")
@click.option("--status", type=_STATUSES, default=None, help="New status.")
def project_update(
    project_id: int,
    name: str | None,
    client_name: str | None,
    status: str | None,
) -> None:
    """Edit a project's name, client or status."""
    changes = {
        key: value
        for key, value in (("name", name), ("client_name", client_name), ("status", status))
        if value is not None
    }
    if not changes:
        raise click.UsageError("Nothing to update")

    try:
        dto = UpdateProjectHandler(uow=unit_of_work()).handle(project_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Project #{dto.id} updated (status={dto.status})")


@click.command("archive")
@click.option("--id", "project_id", required=True, type=int, help="Project ID.")
def project_archive(project_id: int) -> None:
    """Archive a project."""
    try:
        ArchiveProjectHandler(uow=unit_of_work()).handle(project_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Project #{project_id} archived.")


@click.command("delete")
@click.option("--id", "project_id", required=True, type=int, help="Project ID.")
@click.option(
    "--release-stock",
    is_flag=True,
    default=False,
    help="Return units of pulled/installed lines to stock before deleting.",
)
@click.confirmation_option(prompt="Delete this project and its whole pull list?")
def project_delete(project_id: int, release_stock: bool) -> None:
    """Delete a project together with its pull list.

    Without --release-stock the lines are dropped and stock is NOT restored.
    """
    try:
        DeleteProjectHandler(uow=unit_of_work()).handle(
            project_id, release_stock=release_stock
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    suffix = " (stock released)" if release_stock else ""
    click.echo(f"Project #{project_id} deleted{suffix}.")
