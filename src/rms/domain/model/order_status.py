"""Order status state machine.

The set of statuses and the edges between them live together here so the
legality rules can be read (and tested) in one place.  The table is a plain
mapping over every ``OrderStatus`` member; terminal statuses map to an empty
set.
"""

from __future__ import annotations

from enum import Enum

from rms.domain.exceptions import InvalidStatusTransitionError, ValidationError


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    PREPARING = "PREPARING"
    READY = "READY"
    SERVED = "SERVED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"

    @property
    def is_terminal(self) -> bool:
        return not _TRANSITIONS[self]

    @staticmethod
    def parse(raw: str | OrderStatus) -> OrderStatus:
        """Accept an enum member or a case-insensitive status name."""
        if isinstance(raw, OrderStatus):
            return raw
        try:
            return OrderStatus(str(raw).strip().upper())
        except ValueError as exc:
            valid = ", ".join(s.value for s in OrderStatus)
            raise ValidationError(
                f"Unknown order status {raw!r}; expected one of {valid}"
            ) from exc


_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.PREPARING, OrderStatus.CANCELLED}),
    OrderStatus.PREPARING: frozenset({OrderStatus.READY, OrderStatus.CANCELLED}),
    OrderStatus.READY: frozenset({OrderStatus.SERVED, OrderStatus.COMPLETED}),
    OrderStatus.SERVED: frozenset({OrderStatus.COMPLETED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}

# Statuses in which an order is kept as a permanent record.
UNDELETABLE_STATUSES = frozenset({OrderStatus.SERVED, OrderStatus.COMPLETED})


def allowed_transitions(current: OrderStatus) -> frozenset[OrderStatus]:
    return _TRANSITIONS[current]


def can_transition(current: OrderStatus, requested: OrderStatus) -> bool:
    return requested in _TRANSITIONS[current]


def validate_transition(current: OrderStatus, requested: OrderStatus) -> None:
    """Raise ``InvalidStatusTransitionError`` unless *requested* is reachable.

    Requesting the current status again is never legal.
    """
    if not can_transition(current, requested):
        raise InvalidStatusTransitionError(current, requested)
