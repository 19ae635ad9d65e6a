"""Application service: Delete Order use case.

Served and completed orders are kept as a permanent record and cannot be
deleted.  Deleting an order removes its items with it.
"""

from __future__ import annotations

import logging

from rms.application.persistence import guarded_write
from rms.domain.exceptions import EntityNotFoundError
from rms.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class DeleteOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> None:
        logger.info("Deleting order #%s", order_id)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        order.ensure_deletable()

        with guarded_write("delete", order_id):
            self._order_repo.delete_by_id(order_id, expected_version=order.version)

        logger.info("Order #%s deleted", order_id)
