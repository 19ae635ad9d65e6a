"""Application service: List Orders use case (query).

Filters used by the kitchen board and by reporting.  Results are always
newest first.
"""

from __future__ import annotations

from datetime import datetime, timezone

from rms.application.dto import OrderDTO, to_order_dto
from rms.domain.exceptions import EntityNotFoundError, ValidationError
from rms.domain.model.order import Order
from rms.domain.model.order_status import OrderStatus
from rms.domain.repository.order_repository import OrderRepository
from rms.domain.repository.table_repository import TableRepository


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        table_repo: TableRepository,
    ) -> None:
        self._order_repo = order_repo
        self._table_repo = table_repo

    def all(self) -> list[OrderDTO]:
        return self._to_dtos(self._order_repo.list_all())

    def by_status(self, status: str | OrderStatus) -> list[OrderDTO]:
        wanted = OrderStatus.parse(status)
        return self._to_dtos(
            o for o in self._order_repo.list_all() if o.status == wanted
        )

    def by_table(self, table_id: int) -> list[OrderDTO]:
        if not self._table_repo.exists_by_id(table_id):
            raise EntityNotFoundError(f"Table #{table_id} not found")
        return self._to_dtos(
            o for o in self._order_repo.list_all() if o.table_id == table_id
        )

    def created_between(self, start: datetime, end: datetime) -> list[OrderDTO]:
        """Orders whose creation time falls within [start, end].

        Naive datetimes are taken to be UTC.
        """
        start, end = _as_utc(start), _as_utc(end)
        if start > end:
            raise ValidationError("Start date cannot be after end date")
        return self._to_dtos(
            o for o in self._order_repo.list_all() if start <= o.created_at <= end
        )

    @staticmethod
    def _to_dtos(orders) -> list[OrderDTO]:
        ordered: list[Order] = sorted(
            orders, key=lambda o: (o.created_at, o.id or 0), reverse=True
        )
        return [to_order_dto(o) for o in ordered]


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment
