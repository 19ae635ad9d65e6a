"""Application service: Update Order use case.

Replaces the editable details of an order: notes, customer name and
phone, and optionally the whole item collection.  The total follows the
items automatically; the status is never touched here.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from rms.application.dto import OrderDraft, OrderDTO, build_items, to_order_dto
from rms.application.persistence import guarded_write
from rms.domain.exceptions import EntityNotFoundError
from rms.domain.model.order import utcnow, validate_order_fields, validate_order_items
from rms.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def handle(self, order_id: int, draft: OrderDraft) -> OrderDTO:
        logger.info("Updating order #%s", order_id)

        # Structural validation first: nothing is read or written on failure.
        items = build_items(draft.items) if draft.items is not None else None
        if items is not None:
            validate_order_items(items)
        validate_order_fields(draft.customer_name, draft.customer_phone, draft.notes)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.revise(
            notes=draft.notes,
            customer_name=draft.customer_name,
            customer_phone=draft.customer_phone,
            items=items,
            now=self._clock(),
        )

        with guarded_write("update", order_id):
            order = self._order_repo.save(order)

        logger.info("Order #%s updated", order_id)
        return to_order_dto(order)
