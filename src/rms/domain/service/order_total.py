"""Order total calculation."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from rms.domain.model.value_objects import Money

if TYPE_CHECKING:
    from rms.domain.model.order import OrderItem


def calculate_total(items: Iterable[OrderItem]) -> Money:
    """Sum ``unit_price * quantity`` over *items*.

    Pure: reads the items and nothing else.  An empty collection totals
    exactly zero.  Quantities and prices are assumed to have been validated
    when the items were built.
    """
    total = Money.zero()
    for item in items:
        total = total + item.line_total
    return total
