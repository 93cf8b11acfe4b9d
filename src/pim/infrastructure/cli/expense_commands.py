"""CLI commands for the expense ledger."""

from __future__ import annotations

from datetime import datetime

import click

from pim.application.record_expense import (
    DeleteExpenseHandler,
    RecordExpenseHandler,
    UpdateExpenseHandler,
)
from pim.application.show_expenses import ExpenseSummaryHandler, ListExpensesHandler
from pim.domain.exceptions import DomainException
from pim.infrastructure.bootstrap import unit_of_work

_DATE = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"])


@click.command("add")
@click.option("--description", required=True)
@click.option("--vendor", required=True)
@click.option("--category", required=True)
@click.option("--unit-cost", required=True, help="Cost per unit (e.g. 45.00).")
@click.option("--quantity", type=int, default=1, show_default=True)
@click.option("--total-cost", default=None, help="Defaults to unit cost x quantity.")
@click.option("--date", "purchase_date", type=_DATE, required=True, help="Purchase date.")
@click.option("--invoice", "invoice_number", default=None, help="Invoice number.")
@click.option("--notes", default=None)
@click.option("--item", "item_id", type=int, default=None, help="Linked catalog item ID.")
@click.option("--project", "project_id", type=int, default=None, help="Linked project ID.")
def expense_add(
    description: str,
    vendor: str,
    category: str,
    unit_cost: str,
    quantity: int,
    total_cost: str | None,
    purchase_date: datetime,
    invoice_number: str | None,
    notes: str | None,
    item_id: int | None,
    project_id: int | None,
) -> None:
    """Record a purchase in the expense ledger."""
    try:
        dto = RecordExpenseHandler(uow=unit_of_work()).handle(
            description=description,
            vendor=vendor,
            category=category,
            unit_cost=unit_cost,
            purchase_date=purchase_date,
            quantity=quantity,
            total_cost=total_cost,
            invoice_number=invoice_number,
            notes=notes,
            item_id=item_id,
            project_id=project_id,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Expense #{dto.id} recorded: {dto.description} ${dto.total_cost}")


@click.command("list")
def expense_list() -> None:
    """List expenses, most recent purchase first."""
    expenses = ListExpensesHandler(uow=unit_of_work()).handle()

    if not expenses:
        click.echo("No expenses recorded.")
        return

    click.echo(
        f"{'ID':<5} {'Date':<11} {'Description':<28} {'Vendor':<14} "
        f"{'Qty':>4} {'Unit':>10} {'Total':>11}"
    )
    click.echo("-" * 89)
    for e in expenses:
        click.echo(
            f"{e.id:<5} {e.purchase_date:%Y-%m-%d} {e.description:<28} {e.vendor:<14} "
            f"{e.quantity:>4} {e.unit_cost:>10} {e.total_cost:>11}"
        )


@click.command("update")
@click.option("--id", "expense_id", required=True, type=int, help="Expense ID.")
@click.option("--description", default=None)
@click.option("--vendor", default=None)
@click.option("--category", default=None)
@click.option("--unit-cost", default=None)
@click.option("--quantity", type=int, default=None)
@click.option("--total-cost", default=None)
@click.option("--date", "purchase_date", type=_DATE, default=None)
@click.option("--invoice", "invoice_number", default=None)
@click.option("--notes", default=None)
def expense_update(expense_id: int, **fields) -> None:
    """Edit an expense. Only the given fields change."""
    changes = {key: value for key, value in fields.items() if value is not None}
    if not changes:
        raise click.UsageError("Nothing to update")

    try:
        dto = UpdateExpenseHandler(uow=unit_of_work()).handle(expense_id, changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Expense #{dto.id} updated.")


@click.command("delete")
@click.option("--id", "expense_id", required=True, type=int, help="Expense ID.")
def expense_delete(expense_id: int) -> None:
    """Delete an expense."""
    try:
        DeleteExpenseHandler(uow=unit_of_work()).handle(expense_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Expense #{expense_id} deleted.")


@click.command("summary")
def expense_summary() -> None:
    """Show total spend, number of expenses and average unit cost."""
    dto = ExpenseSummaryHandler(uow=unit_of_work()).handle()

    click.echo(f"Total spend:      ${dto.total_spend}")
    click.echo(f"Expenses:         {dto.expense_count}")
    click.echo(f"Avg. unit cost:   ${dto.avg_unit_cost}")
