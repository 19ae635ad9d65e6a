"""Guard for repository writes made by the use-case handlers."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from rms.domain.exceptions import DomainException, PersistenceError

logger = logging.getLogger(__name__)


@contextmanager
def guarded_write(action: str, order_id: int | None = None) -> Iterator[None]:
    """Report unexpected storage faults as ``PersistenceError``.

    Domain exceptions raised by the repository (e.g. a version conflict)
    pass through unchanged.
    """
    try:
        yield
    except DomainException:
        raise
    except Exception as exc:
        target = f"order #{order_id}" if order_id is not None else "new order"
        logger.exception("Error trying to %s %s", action, target)
        raise PersistenceError(f"Failed to {action} order") from exc
