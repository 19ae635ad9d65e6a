"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the transport and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from rms.domain.model.order import Order, OrderItem
from rms.domain.model.value_objects import Money, Quantity

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S UTC"


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: one requested line (menu item, quantity, agreed unit price)."""

    menu_item_id: int
    quantity: int
    unit_price: str | Decimal


@dataclass(frozen=True)
class OrderDraft:
    """Input: the caller-supplied details of an order.

    ``items=None`` on update means "keep the current items".  ``status`` is
    accepted for symmetry with stored orders but never applied: new orders
    always start PENDING and updates never touch the status.
    """

    items: list[OrderItemSpec] | None = None
    table_id: int | None = None
    user_id: int | None = None
    notes: str | None = None
    customer_name: str | None = None
    customer_phone: str | None = None
    status: str | None = None


@dataclass(frozen=True)
class OrderItemDTO:
    """Output: a single order item as displayed to the user."""

    id: int | None
    menu_item_id: int
    quantity: int
    unit_price: str  # formatted, e.g. "$9.50"
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    status: str
    table_id: int | None
    user_id: int | None
    customer_name: str | None
    customer_phone: str | None
    notes: str | None
    items: list[OrderItemDTO]
    total: str
    created_at: str
    updated_at: str


# --- Mapping ------------------------------------------------------------------


def build_items(specs: list[OrderItemSpec]) -> list[OrderItem]:
    """Turn item specs into domain items; value objects validate each field."""
    return [
        OrderItem(
            menu_item_id=spec.menu_item_id,
            quantity=Quantity(spec.quantity),
            unit_price=Money.of(spec.unit_price),  # <-- price snapshot
        )
        for spec in specs
    ]


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        status=order.status.value,
        table_id=order.table_id,
        user_id=order.user_id,
        customer_name=order.customer_name,
        customer_phone=order.customer_phone,
        notes=order.notes,
        items=[
            OrderItemDTO(
                id=item.id,
                menu_item_id=item.menu_item_id,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.line_total),
            )
            for item in order.items
        ],
        total=str(order.total),
        created_at=order.created_at.strftime(TIMESTAMP_FORMAT),
        updated_at=order.updated_at.strftime(TIMESTAMP_FORMAT),
    )
