"""CLI commands for the Order aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from rms.application.calculate_total import CalculateTotalHandler
from rms.application.create_order import CreateOrderHandler
from rms.application.delete_order import DeleteOrderHandler
from rms.application.dto import OrderDraft, OrderDTO, OrderItemSpec
from rms.application.list_orders import ListOrdersHandler
from rms.application.show_order import ShowOrderHandler
from rms.application.update_order import UpdateOrderHandler
from rms.application.update_order_status import UpdateOrderStatusHandler
from rms.domain.exceptions import DomainException
from rms.domain.model.order_status import OrderStatus
from rms.infrastructure.bootstrap import order_repository, table_repository
from rms.infrastructure.cli.errors import DomainClickException

_STATUS_CHOICE = click.Choice([s.value for s in OrderStatus], case_sensitive=False)


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '12:2:9.50,7:1:3.25' into OrderItemSpec list.

    A blank string yields an empty list, which validation rejects.
    """
    specs: list[OrderItemSpec] = []
    if not raw.strip():
        return specs
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":")
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'MenuItemId:Quantity:UnitPrice'."
            )
        menu_str, qty_str, price = (p.strip() for p in parts)
        try:
            menu_item_id = int(menu_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid menu item id or quantity in '{entry}'."
            ) from None
        specs.append(OrderItemSpec(menu_item_id=menu_item_id, quantity=qty, unit_price=price))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    if dto.table_id is not None:
        click.echo(f"Table:    #{dto.table_id}")
    if dto.customer_name:
        phone = f"  ({dto.customer_phone})" if dto.customer_phone else ""
        click.echo(f"Customer: {dto.customer_name}{phone}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Updated:  {dto.updated_at}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Menu item':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.menu_item_id:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


@click.command("create")
@click.option("--items", required=True, help="Items as 'MenuId:Qty:Price,MenuId:Qty:Price'.")
@click.option("--table", "table_id", type=int, default=None, help="Table ID (omit for takeout).")
@click.option("--user", "user_id", type=int, default=None, help="Staff user ID.")
@click.option("--customer", default=None, help="Customer name.")
@click.option("--phone", default=None, help="Customer phone.")
@click.option("--notes", default=None, help="Special instructions.")
def order_create(
    items: str,
    table_id: int | None,
    user_id: int | None,
    customer: str | None,
    phone: str | None,
    notes: str | None,
) -> None:
    """Create a new order."""
    draft = OrderDraft(
        items=_parse_items(items),
        table_id=table_id,
        user_id=user_id,
        notes=notes,
        customer_name=customer,
        customer_phone=phone,
    )
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        table_repo=table_repository(),
    )

    try:
        dto = handler.handle(draft)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Order #{dto.id} created  (status={dto.status})")
    click.echo()
    _display_order(dto)


@click.command("update")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--items", default=None, help="Replacement items as 'MenuId:Qty:Price,...'.")
@click.option("--customer", default=None, help="Customer name.")
@click.option("--phone", default=None, help="Customer phone.")
@click.option("--notes", default=None, help="Special instructions.")
def order_update(
    order_id: int,
    items: str | None,
    customer: str | None,
    phone: str | None,
    notes: str | None,
) -> None:
    """Replace the details of an order.

    Customer fields and notes not given are cleared.  Items are kept
    unless --items is given.
    """
    draft = OrderDraft(
        items=_parse_items(items) if items is not None else None,
        notes=notes,
        customer_name=customer,
        customer_phone=phone,
    )
    handler = UpdateOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, draft)
    except DomainException as exc:
        raise DomainClickException(exc)

    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID.")
@click.option("--to", "new_status", required=True, type=_STATUS_CHOICE, help="New status.")
def order_status(order_id: int, new_status: str) -> None:
    """Move an order to a new status."""
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, new_status)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("delete")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to delete.")
def order_delete(order_id: int) -> None:
    """Delete an order that has not been served yet."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Order #{order_id} deleted.")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise DomainClickException(exc)

    _display_order(dto)


@click.command("list")
@click.option("--status", default=None, type=_STATUS_CHOICE, help="Only orders in this status.")
@click.option("--table", "table_id", type=int, default=None, help="Only orders for this table.")
@click.option("--since", type=click.DateTime(), default=None, help="Created at or after (UTC).")
@click.option("--until", type=click.DateTime(), default=None, help="Created at or before (UTC).")
def order_list(
    status: str | None,
    table_id: int | None,
    since: datetime | None,
    until: datetime | None,
) -> None:
    """List orders, newest first."""
    filters = sum(x is not None for x in (status, table_id)) + (
        1 if since is not None or until is not None else 0
    )
    if filters > 1:
        raise click.UsageError("Use only one of --status, --table or --since/--until.")
    if (since is None) != (until is None):
        raise click.UsageError("--since and --until must be given together.")

    handler = ListOrdersHandler(
        order_repo=order_repository(),
        table_repo=table_repository(),
    )

    try:
        if status is not None:
            dtos = handler.by_status(status)
        elif table_id is not None:
            dtos = handler.by_table(table_id)
        elif since is not None and until is not None:
            dtos = handler.created_between(since, until)
        else:
            dtos = handler.all()
    except DomainException as exc:
        raise DomainClickException(exc)

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Table':>6} {'Items':>6} {'Total':>10}  Created")
    click.echo("-" * 64)
    for dto in dtos:
        table = f"#{dto.table_id}" if dto.table_id is not None else "-"
        click.echo(
            f"{dto.id:<6} {dto.status:<10} {table:>6} {len(dto.items):>6} {dto.total:>10}  {dto.created_at}"
        )


@click.command("total")
@click.option("--items", required=True, help="Items as 'MenuId:Qty:Price,MenuId:Qty:Price'.")
def order_total(items: str) -> None:
    """Preview the total of a set of items without creating an order."""
    handler = CalculateTotalHandler()

    try:
        total = handler.handle(_parse_items(items))
    except DomainException as exc:
        raise DomainClickException(exc)

    click.echo(f"Total: {total}")
