"""Tests for the read-side use cases: show, list and total preview."""

from datetime import datetime, timedelta, timezone

import pytest

from rms.application.calculate_total import CalculateTotalHandler
from rms.application.create_order import CreateOrderHandler
from rms.application.dto import OrderDraft, OrderItemSpec
from rms.application.list_orders import ListOrdersHandler
from rms.application.show_order import ShowOrderHandler
from rms.application.update_order_status import UpdateOrderStatusHandler
from rms.domain.exceptions import EntityNotFoundError, ValidationError
from rms.domain.model.table import RestaurantTable
from rms.domain.model.value_objects import Money
from tests.fakes import FakeOrderRepository, FakeTableRepository

T0 = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def _setup():
    """Three orders, an hour apart: table 1, table 2, takeout."""
    order_repo = FakeOrderRepository()
    table_repo = FakeTableRepository([
        RestaurantTable(id=1, number=1, capacity=2),
        RestaurantTable(id=2, number=2, capacity=4),
        RestaurantTable(id=3, number=3, capacity=6),
    ])
    for hour, table_id in enumerate([1, 2, None]):
        CreateOrderHandler(
            order_repo, table_repo, clock=lambda h=hour: T0 + timedelta(hours=h)
        ).handle(OrderDraft(items=[OrderItemSpec(1, 1, "5.00")], table_id=table_id))
    return order_repo, table_repo, ListOrdersHandler(order_repo, table_repo)


class TestShowOrder:

    def test_returns_dto(self):
        order_repo, _, _ = _setup()
        dto = ShowOrderHandler(order_repo).handle(2)
        assert dto.id == 2
        assert dto.table_id == 2
        assert dto.created_at == "2026-03-01 13:00:00 UTC"

    def test_unknown_order(self):
        order_repo, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            ShowOrderHandler(order_repo).handle(99)


class TestListOrders:

    def test_all_newest_first(self):
        _, _, handler = _setup()
        assert [d.id for d in handler.all()] == [3, 2, 1]

    def test_by_status(self):
        order_repo, _, handler = _setup()
        UpdateOrderStatusHandler(order_repo).handle(2, "CONFIRMED")
        assert [d.id for d in handler.by_status("CONFIRMED")] == [2]
        assert [d.id for d in handler.by_status("pending")] == [3, 1]

    def test_by_table(self):
        _, _, handler = _setup()
        assert [d.id for d in handler.by_table(1)] == [1]
        assert handler.by_table(3) == []

    def test_by_unknown_table(self):
        _, _, handler = _setup()
        with pytest.raises(EntityNotFoundError, match="Table #9"):
            handler.by_table(9)

    def test_created_between_is_inclusive(self):
        _, _, handler = _setup()
        result = handler.created_between(T0, T0 + timedelta(hours=1))
        assert [d.id for d in result] == [2, 1]

    def test_created_between_accepts_naive_utc(self):
        _, _, handler = _setup()
        result = handler.created_between(datetime(2026, 3, 1, 13), datetime(2026, 3, 1, 14))
        assert [d.id for d in result] == [3, 2]

    def test_created_between_rejects_inverted_range(self):
        _, _, handler = _setup()
        with pytest.raises(ValidationError, match="Start date cannot be after end date"):
            handler.created_between(T0 + timedelta(hours=1), T0)


class TestCalculateTotal:

    def test_preview(self):
        total = CalculateTotalHandler().handle(
            [OrderItemSpec(1, 2, "9.50"), OrderItemSpec(2, 1, "3.25")]
        )
        assert total == Money.of("22.25")

    def test_preview_of_nothing_is_zero(self):
        assert CalculateTotalHandler().handle([]) == Money.zero()
