"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from rms.domain.exceptions import ConcurrencyError
from rms.domain.model.order import Order, OrderItem
from rms.domain.model.order_status import OrderStatus
from rms.domain.model.value_objects import Money, Quantity
from rms.domain.repository.order_repository import OrderRepository
from rms.infrastructure.persistence.json_store import (
    ensure_file,
    load_records,
    write_lock,
    write_records,
)

logger = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: int) -> Order | None:
        raw = self._find_raw(self._load_raw(), order_id)
        return self._to_domain(raw) if raw is not None else None

    def exists_by_id(self, order_id: int) -> bool:
        return self._find_raw(self._load_raw(), order_id) is not None

    def save(self, order: Order) -> Order:
        with write_lock(self._file_path):
            orders = self._load_raw()

            if order.id is None:
                order_id = max((o["id"] for o in orders), default=0) + 1
            else:
                order_id = order.id
                self._check_version(orders, order_id, order.version)

            next_item_id = max(
                (i["id"] for o in orders for i in o["items"]), default=0
            ) + 1
            items: list[OrderItem] = []
            for item in order.items:
                if item.id is None:
                    item = replace(item, id=next_item_id)
                    next_item_id += 1
                items.append(item)

            snapshot = replace(order, id=order_id, items=items, version=order.version + 1)

            # Upsert: replace if exists, otherwise append
            raw = self._to_raw(snapshot)
            for i, existing in enumerate(orders):
                if existing["id"] == order_id:
                    orders[i] = raw
                    break
            else:
                orders.append(raw)

            write_records(self._file_path, orders)

        order.id, order.items, order.version = snapshot.id, snapshot.items, snapshot.version
        return order

    def delete_by_id(self, order_id: int, expected_version: int) -> None:
        with write_lock(self._file_path):
            orders = self._load_raw()
            self._check_version(orders, order_id, expected_version)
            write_records(self._file_path, [o for o in orders if o["id"] != order_id])

    def list_all(self) -> list[Order]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        total = order.total
        return {
            "id": order.id,
            "version": order.version,
            "status": order.status.value,
            "table_id": order.table_id,
            "user_id": order.user_id,
            "notes": order.notes,
            "customer_name": order.customer_name,
            "customer_phone": order.customer_phone,
            "total_amount": str(total.amount),
            "currency": total.currency,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
            "items": [
                {
                    "id": item.id,
                    "menu_item_id": item.menu_item_id,
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        # total_amount is informational; the aggregate derives it from items.
        items = [
            OrderItem(
                id=i["id"],
                menu_item_id=i["menu_item_id"],
                quantity=Quantity(i["quantity"]),
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            items=items,
            status=OrderStatus(raw["status"]),
            table_id=raw.get("table_id"),
            user_id=raw.get("user_id"),
            notes=raw.get("notes"),
            customer_name=raw.get("customer_name"),
            customer_phone=raw.get("customer_phone"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
            version=raw["version"],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return load_records(self._file_path)

    @staticmethod
    def _find_raw(orders: list[dict], order_id: int) -> dict | None:
        for raw in orders:
            if raw["id"] == order_id:
                return raw
        return None

    def _check_version(self, orders: list[dict], order_id: int, expected: int) -> None:
        """Raise ``ConcurrencyError`` unless the stored order is at *expected*.

        Must be called while holding the write lock.
        """
        stored = self._find_raw(orders, order_id)
        if stored is None:
            raise ConcurrencyError(f"Order #{order_id} no longer exists")
        if stored["version"] != expected:
            logger.warning(
                "Version conflict on order #%s: stored %s, ours %s",
                order_id, stored["version"], expected,
            )
            raise ConcurrencyError(
                f"Order #{order_id} was modified concurrently; reload and retry"
            )
