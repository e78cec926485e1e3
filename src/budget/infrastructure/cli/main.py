import logging

import click

from budget.infrastructure.cli.budget_commands import (
    budget_report,
    budget_show,
    budget_total,
)


@click.group()
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Budget — construction budget breakdown"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(budget_report)
cli.add_command(budget_show)
cli.add_command(budget_total)
