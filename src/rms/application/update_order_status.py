"""Application service: Update Order Status use case.

The Order aggregate consults the state machine before changing anything;
an illegal request leaves the stored order untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from rms.application.dto import OrderDTO, to_order_dto
from rms.application.persistence import guarded_write
from rms.domain.exceptions import EntityNotFoundError, InvalidStatusTransitionError
from rms.domain.model.order import utcnow
from rms.domain.model.order_status import OrderStatus
from rms.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._order_repo = order_repo
        self._clock = clock

    def handle(self, order_id: int, new_status: str | OrderStatus) -> OrderDTO:
        status = OrderStatus.parse(new_status)
        logger.info("Updating status of order #%s to %s", order_id, status.value)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        try:
            order.change_status(status, now=self._clock())
        except InvalidStatusTransitionError:
            logger.warning(
                "Rejected status change of order #%s from %s to %s",
                order_id, order.status.value, status.value,
            )
            raise

        with guarded_write("update status of", order_id):
            order = self._order_repo.save(order)

        logger.info("Order #%s is now %s", order_id, order.status.value)
        return to_order_dto(order)
