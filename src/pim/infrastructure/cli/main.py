from __future__ import annotations

import click

from pim.application.seed_catalog import DEFAULT_STOCK, SeedCatalogHandler
from pim.infrastructure.bootstrap import unit_of_work
from pim.infrastructure.cli.expense_commands import (
    expense_add,
    expense_delete,
    expense_list,
    expense_summary,
    expense_update,
)
from pim.infrastructure.cli.item_commands import (
    item_add,
    item_assignments,
    item_list,
    item_show,
    item_update,
)
from pim.infrastructure.cli.project_commands import (
    project_archive,
    project_create,
    project_delete,
    project_list,
    project_show,
    project_update,
)
from pim.infrastructure.cli.pull_commands import pull_add, pull_remove, pull_update
from pim.infrastructure.config import get_settings
from pim.infrastructure.log_config import setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """PIM — Project Inventory Manager"""
    setup_logging("DEBUG" if verbose else get_settings().log_level)


@cli.group()
def item() -> None:
    """Manage the catalog."""


@cli.group()
def project() -> None:
    """Manage projects."""


@cli.group()
def pull() -> None:
    """Manage project pull lists (moves stock)."""


@cli.group()
def expense() -> None:
    """Manage the expense ledger."""


@cli.command("seed")
@click.option("--stock", type=int, default=DEFAULT_STOCK, show_default=True,
              help="Starting units for each sample item.")
def seed(stock: int) -> None:
    """Load sample catalog, projects and pull lists into an empty store."""
    if SeedCatalogHandler(uow=unit_of_work()).handle(stock=stock):
        click.echo("Sample data loaded.")
    else:
        click.echo("Catalog is not empty; nothing seeded.")


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from settings).")
@click.option("--port", type=int, default=None, help="Port (default from settings).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from pim.infrastructure.api.app import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=host or settings.api_host,
        port=port or settings.api_port,
    )


# Register subcommands
item.add_command(item_add)
item.add_command(item_assignments)
item.add_command(item_list)
item.add_command(item_show)
item.add_command(item_update)
project.add_command(project_archive)
project.add_command(project_create)
project.add_command(project_delete)
project.add_command(project_list)
project.add_command(project_show)
project.add_command(project_update)
pull.add_command(pull_add)
pull.add_command(pull_remove)
pull.add_command(pull_update)
expense.add_command(expense_add)
expense.add_command(expense_delete)
expense.add_command(expense_list)
expense.add_command(expense_summary)
expense.add_command(expense_update)
