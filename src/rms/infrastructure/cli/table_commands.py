"""CLI commands for restaurant tables."""

from __future__ import annotations

import click

from rms.application.add_table import AddTableHandler
from rms.domain.exceptions import DomainException
from rms.infrastructure.bootstrap import table_repository
from rms.infrastructure.cli.errors import DomainClickException


@click.command("add")
@click.option("--number", required=True, type=int, help="Table number shown in the room.")
@click.option("--capacity", required=True, type=int, help="Number of seats.")
@click.option("--location", default=None, help="Where the table is (e.g. 'patio').")
def table_add(number: int, capacity: int, location: str | None) -> None:
    """Add a table to the dining room."""
    handler = AddTableHandler(table_repo=table_repository())

    try:
        table = handler.handle(number=number, capacity=capacity, location=location)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Table #{table.id} (number {table.number}, {table.capacity} seats) added")


@click.command("list")
def table_list() -> None:
    """List all tables."""
    tables = table_repository().list_all()

    if not tables:
        click.echo("No tables found.")
        return

    click.echo(f"{'ID':<6} {'Number':>6} {'Seats':>6}  Location")
    click.echo("-" * 36)
    for t in tables:
        click.echo(f"{t.id:<6} {t.number:>6} {t.capacity:>6}  {t.location or ''}")
