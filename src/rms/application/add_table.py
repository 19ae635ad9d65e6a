"""Application service: Add Table use case."""

from __future__ import annotations

from rms.domain.exceptions import ValidationError
from rms.domain.model.table import RestaurantTable
from rms.domain.repository.table_repository import TableRepository


class AddTableHandler:

    def __init__(self, table_repo: TableRepository) -> None:
        self._table_repo = table_repo

    def handle(self, number: int, capacity: int, location: str | None = None) -> RestaurantTable:
        """Register a new table in the dining room."""
        if any(t.number == number for t in self._table_repo.list_all()):
            raise ValidationError(f"Table number {number} already exists")

        table = RestaurantTable.create(number=number, capacity=capacity, location=location)
        return self._table_repo.save(table)
