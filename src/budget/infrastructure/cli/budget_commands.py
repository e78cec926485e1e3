"""CLI commands for the budget tree."""

from __future__ import annotations

import click

from budget.application.dto import BudgetDTO
from budget.application.get_total import GetTotalHandler
from budget.application.show_budget import ShowBudgetHandler
from budget.domain.exceptions import DomainException
from budget.infrastructure.bootstrap import house_budget


def _display_budget(dto: BudgetDTO) -> None:
    """Shared formatting for displaying a breakdown."""
    for line in dto.lines:
        click.echo(line.text)


@click.command("report")
def budget_report() -> None:
    """Print the house total followed by the full breakdown."""
    handler = ShowBudgetHandler(root=house_budget())
    dto = handler.handle()

    click.echo(f"Total house price: {dto.total}")
    _display_budget(dto)


@click.command("total")
@click.option("--part", "part_name", default=None, help="Name of a sub-tree to total.")
def budget_total(part_name: str | None) -> None:
    """Print the total price of the house or of one of its parts."""
    handler = GetTotalHandler(root=house_budget())

    try:
        dto = handler.handle(part_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total {dto.name} price: {dto.total}")


@click.command("show")
@click.option("--part", "part_name", default=None, help="Name of a sub-tree to show.")
def budget_show(part_name: str | None) -> None:
    """Print the indented breakdown of the house or of one of its parts."""
    handler = ShowBudgetHandler(root=house_budget())

    try:
        dto = handler.handle(part_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_budget(dto)
