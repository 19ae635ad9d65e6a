"""Abstract repository for the Order aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  An order and its items are always read and written
together.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rms.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def exists_by_id(self, order_id: int) -> bool:
        """Return True if an order with this ID is stored."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Insert or update an order together with its items.

        New orders (``id is None``) get an ID and start at version 1; items
        without an ID get one too.  Updating an existing order succeeds only
        if ``order.version`` matches the stored version, otherwise
        ``ConcurrencyError`` is raised and nothing is written.  On success
        the version is incremented.
        """

    @abstractmethod
    def delete_by_id(self, order_id: int, expected_version: int) -> None:
        """Remove an order and its items.

        Succeeds only if the stored order is still at *expected_version*, so
        the deletion applies to exactly the state the caller inspected.
        Otherwise ``ConcurrencyError`` is raised and nothing is removed.
        """

    @abstractmethod
    def list_all(self) -> list[Order]:
        """Return every stored order."""
