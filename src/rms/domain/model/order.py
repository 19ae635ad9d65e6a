"""Order aggregate — the core of the domain.

The Order is an aggregate root that owns its items.  Items are created,
replaced and destroyed together with their order and are never stored on
their own.  All business invariants are enforced here.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime, timezone

from rms.domain.exceptions import DeletionForbiddenError, ValidationError
from rms.domain.model.order_status import (
    UNDELETABLE_STATUSES,
    OrderStatus,
    validate_transition,
)
from rms.domain.model.value_objects import Money, Quantity
from rms.domain.service.order_total import calculate_total

# ---------------------------------------------------------------------------
# Constants for business rules
# ---------------------------------------------------------------------------
MAX_CUSTOMER_NAME_LENGTH = 100
MAX_CUSTOMER_PHONE_LENGTH = 20
MAX_NOTES_LENGTH = 500


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderItem:
    """One menu selection within an order.

    ``unit_price`` is the price captured when the item was ordered; later
    menu price changes never reach it.  ``id`` stays ``None`` until the
    repository persists the owning order.
    """

    menu_item_id: int
    quantity: Quantity
    unit_price: Money  # locked at order time
    id: int | None = None

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


def validate_order_details(
    items: Sequence[OrderItem] | None,
    customer_name: str | None = None,
    customer_phone: str | None = None,
    notes: str | None = None,
) -> None:
    """Structural checks shared by order creation and full update."""
    validate_order_items(items)
    validate_order_fields(customer_name, customer_phone, notes)


def validate_order_items(items: Sequence[OrderItem] | None) -> None:
    if not items:
        raise ValidationError("Order must have at least one item")

    for item in items:
        # Quantity enforces positivity itself; re-checked for reconstituted items.
        if item.quantity.value <= 0:
            raise ValidationError("Order item quantity must be greater than 0")
        if not item.unit_price.is_positive:
            raise ValidationError("Order item price must be greater than 0")


def validate_order_fields(
    customer_name: str | None,
    customer_phone: str | None,
    notes: str | None,
) -> None:
    _check_length("Customer name", customer_name, MAX_CUSTOMER_NAME_LENGTH)
    _check_length("Customer phone", customer_phone, MAX_CUSTOMER_PHONE_LENGTH)
    _check_length("Notes", notes, MAX_NOTES_LENGTH)


def _check_length(label: str, value: str | None, limit: int) -> None:
    if value is not None and len(value) > limit:
        raise ValidationError(f"{label} cannot exceed {limit} characters")


@dataclass
class Order:
    """Aggregate root for a customer order.

    Use the ``Order.create()`` factory for new orders — it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    items: list[OrderItem]
    status: OrderStatus = OrderStatus.PENDING
    table_id: int | None = None
    user_id: int | None = None
    notes: str | None = None
    customer_name: str | None = None
    customer_phone: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    version: int = 0

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        items: Sequence[OrderItem],
        table_id: int | None = None,
        user_id: int | None = None,
        notes: str | None = None,
        customer_name: str | None = None,
        customer_phone: str | None = None,
        now: datetime | None = None,
    ) -> Order:
        """Create a new PENDING order, enforcing all invariants."""
        validate_order_details(items, customer_name, customer_phone, notes)
        now = now or utcnow()
        return Order(
            id=None,
            items=list(items),
            status=OrderStatus.PENDING,
            table_id=table_id,
            user_id=user_id,
            notes=notes,
            customer_name=customer_name,
            customer_phone=customer_phone,
            created_at=now,
            updated_at=now,
        )

    # --- Mutations ------------------------------------------------------------

    def revise(
        self,
        notes: str | None,
        customer_name: str | None,
        customer_phone: str | None,
        items: Sequence[OrderItem] | None = None,
        now: datetime | None = None,
    ) -> None:
        """Replace the editable details of the order.

        Notes and customer fields are always replaced.  Items are replaced
        only when a new collection is given.  Status is left alone.
        """
        if self.status.is_terminal:
            raise ValidationError(
                f"Order #{self.id} is {self.status.value} and can no longer be modified"
            )
        new_items = list(items) if items is not None else self.items
        validate_order_details(new_items, customer_name, customer_phone, notes)

        self.notes = notes
        self.customer_name = customer_name
        self.customer_phone = customer_phone
        self.items = new_items
        self.updated_at = now or utcnow()

    def change_status(self, new_status: OrderStatus, now: datetime | None = None) -> None:
        """Move to *new_status* along a legal edge of the state machine."""
        validate_transition(self.status, new_status)
        self.status = new_status
        self.updated_at = now or utcnow()

    def ensure_deletable(self) -> None:
        if self.status in UNDELETABLE_STATUSES:
            raise DeletionForbiddenError(
                f"Cannot delete order #{self.id} in {self.status.value} status"
            )

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        return calculate_total(self.items)
