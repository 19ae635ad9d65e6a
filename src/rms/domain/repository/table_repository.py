"""Abstract repository for restaurant tables."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rms.domain.model.table import RestaurantTable


class TableRepository(ABC):

    @abstractmethod
    def exists_by_id(self, table_id: int) -> bool:
        """Return True if a table with this ID is stored."""

    @abstractmethod
    def list_all(self) -> list[RestaurantTable]:
        """Return every table."""

    @abstractmethod
    def save(self, table: RestaurantTable) -> RestaurantTable:
        """Persist a new or updated table, assigning an ID to new ones."""
