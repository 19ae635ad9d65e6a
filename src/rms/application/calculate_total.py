"""Application service: Calculate Total use case (query).

Lets callers preview what an order would cost before submitting it.
"""

from __future__ import annotations

from rms.application.dto import OrderItemSpec, build_items
from rms.domain.model.value_objects import Money
from rms.domain.service.order_total import calculate_total


class CalculateTotalHandler:

    def handle(self, item_specs: list[OrderItemSpec]) -> Money:
        return calculate_total(build_items(item_specs))
