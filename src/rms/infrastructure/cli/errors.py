"""Translation of domain failures into CLI errors.

Each failure kind gets its own exit code and its ``error_code`` in the
message, so scripts can tell them apart without parsing prose.
"""

from __future__ import annotations

import click

from rms.domain.exceptions import (
    ConcurrencyError,
    DeletionForbiddenError,
    DomainException,
    EntityNotFoundError,
    InvalidStatusTransitionError,
    PersistenceError,
    ValidationError,
)

EXIT_CODES: dict[type[DomainException], int] = {
    ValidationError: 3,
    EntityNotFoundError: 4,
    InvalidStatusTransitionError: 5,
    DeletionForbiddenError: 6,
    ConcurrencyError: 7,
    PersistenceError: 8,
}


class DomainClickException(click.ClickException):

    def __init__(self, exc: DomainException) -> None:
        super().__init__(f"[{exc.error_code}] {exc}")
        self.error_code = exc.error_code
        self.exit_code = EXIT_CODES.get(type(exc), 1)
