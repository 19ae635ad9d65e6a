"""JSON-file-backed implementation of TableRepository."""

from __future__ import annotations

from pathlib import Path

from rms.domain.model.table import RestaurantTable
from rms.domain.repository.table_repository import TableRepository
from rms.infrastructure.persistence.json_store import (
    ensure_file,
    load_records,
    write_lock,
    write_records,
)


class JsonTableRepository(TableRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        ensure_file(self._file_path)

    # --- TableRepository interface --------------------------------------------

    def exists_by_id(self, table_id: int) -> bool:
        return table_id in self._load()

    def list_all(self) -> list[RestaurantTable]:
        return sorted(self._load().values(), key=lambda t: t.number)

    def save(self, table: RestaurantTable) -> RestaurantTable:
        with write_lock(self._file_path):
            tables = self._load()
            if table.id is None:
                table.id = max(tables, default=0) + 1
            tables[table.id] = table
            self._persist(tables)
        return table

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, RestaurantTable]:
        return {
            item["id"]: RestaurantTable(
                id=item["id"],
                number=item["number"],
                capacity=item["capacity"],
                location=item.get("location"),
            )
            for item in load_records(self._file_path)
        }

    def _persist(self, tables: dict[int, RestaurantTable]) -> None:
        raw = [
            {
                "id": t.id,
                "number": t.number,
                "capacity": t.capacity,
                "location": t.location,
            }
            for t in tables.values()
        ]
        write_records(self._file_path, raw)
