"""Integration tests for the DeleteOrder use case."""

import pytest

from rms.application.create_order import CreateOrderHandler
from rms.application.delete_order import DeleteOrderHandler
from rms.application.dto import OrderDraft, OrderItemSpec
from rms.application.update_order_status import UpdateOrderStatusHandler
from rms.domain.exceptions import (
    ConcurrencyError,
    DeletionForbiddenError,
    EntityNotFoundError,
    PersistenceError,
)
from rms.domain.model.order_status import OrderStatus
from tests.fakes import FakeOrderRepository, FakeTableRepository


class ServedMeanwhileRepository(FakeOrderRepository):
    """Another worker serves the order right after this one has read it."""

    def __init__(self) -> None:
        super().__init__()
        self.serve_after_read = False

    def get_by_id(self, order_id):
        order = super().get_by_id(order_id)
        if self.serve_after_read and order is not None:
            self.serve_after_read = False
            other = super().get_by_id(order_id)
            other.change_status(OrderStatus.SERVED)
            self.save(other)
        return order


def _order_in(*path: str):
    """Create an order and walk it through *path*."""
    order_repo = FakeOrderRepository()
    create = CreateOrderHandler(order_repo, FakeTableRepository())
    dto = create.handle(OrderDraft(items=[OrderItemSpec(1, 1, "5.00")]))
    status = UpdateOrderStatusHandler(order_repo)
    for s in path:
        status.handle(dto.id, s)
    return order_repo, DeleteOrderHandler(order_repo), dto.id


class TestDeleteOrder:

    def test_pending_order_deleted(self):
        order_repo, handler, order_id = _order_in()
        handler.handle(order_id)
        assert order_repo.get_by_id(order_id) is None
        assert not order_repo.exists_by_id(order_id)

    def test_cancelled_order_deleted(self):
        order_repo, handler, order_id = _order_in("CANCELLED")
        handler.handle(order_id)
        assert order_repo.get_by_id(order_id) is None

    def test_served_order_kept(self):
        order_repo, handler, order_id = _order_in("CONFIRMED", "PREPARING", "READY", "SERVED")
        with pytest.raises(DeletionForbiddenError) as excinfo:
            handler.handle(order_id)
        assert excinfo.value.error_code == "DELETION_FORBIDDEN"
        assert order_repo.get_by_id(order_id) is not None
        assert order_repo.delete_calls == 0

    def test_completed_order_kept(self):
        order_repo, handler, order_id = _order_in("CONFIRMED", "PREPARING", "READY", "COMPLETED")
        with pytest.raises(DeletionForbiddenError):
            handler.handle(order_id)
        assert order_repo.get_by_id(order_id) is not None

    def test_unknown_order_rejected(self):
        _, handler, _ = _order_in()
        with pytest.raises(EntityNotFoundError, match="Order #7 not found"):
            handler.handle(7)

    def test_storage_fault_wrapped(self):
        order_repo, handler, order_id = _order_in()
        order_repo.fail_writes_with = RuntimeError("connection reset")
        with pytest.raises(PersistenceError, match="Failed to delete order"):
            handler.handle(order_id)

    def test_order_served_between_check_and_delete_kept(self):
        order_repo = ServedMeanwhileRepository()
        create = CreateOrderHandler(order_repo, FakeTableRepository())
        dto = create.handle(OrderDraft(items=[OrderItemSpec(1, 1, "5.00")]))
        status = UpdateOrderStatusHandler(order_repo)
        for s in ("CONFIRMED", "PREPARING", "READY"):
            status.handle(dto.id, s)

        order_repo.serve_after_read = True
        with pytest.raises(ConcurrencyError):
            DeleteOrderHandler(order_repo).handle(dto.id)

        kept = order_repo.get_by_id(dto.id)
        assert kept is not None
        assert kept.status == OrderStatus.SERVED
