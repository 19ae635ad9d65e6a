"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
Every structural check runs before the first repository call, so an
invalid order never reaches storage.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from rms.application.dto import OrderDraft, OrderDTO, build_items, to_order_dto
from rms.application.persistence import guarded_write
from rms.domain.exceptions import EntityNotFoundError
from rms.domain.model.order import Order, utcnow
from rms.domain.repository.order_repository import OrderRepository
from rms.domain.repository.table_repository import TableRepository

logger = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        table_repo: TableRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._order_repo = order_repo
        self._table_repo = table_repo
        self._clock = clock

    def handle(self, draft: OrderDraft) -> OrderDTO:
        """Create a new order.

        Steps:
        1. Build items from the specs (quantity and price are validated).
        2. Let the Order aggregate validate the remaining rules.
        3. Check that the referenced table exists, if any.
        4. Persist and return a DTO.

        Any status on the draft is ignored: new orders start PENDING.
        """
        logger.info("Creating new order for table: %s", draft.table_id)

        order = Order.create(
            items=build_items(draft.items or []),
            table_id=draft.table_id,
            user_id=draft.user_id,
            notes=draft.notes,
            customer_name=draft.customer_name,
            customer_phone=draft.customer_phone,
            now=self._clock(),
        )

        if draft.table_id is not None and not self._table_repo.exists_by_id(draft.table_id):
            raise EntityNotFoundError(f"Table #{draft.table_id} not found")

        with guarded_write("create"):
            order = self._order_repo.save(order)

        logger.info("Order #%s created with total %s", order.id, order.total)
        return to_order_dto(order)
