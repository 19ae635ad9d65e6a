"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the transport layer can catch them uniformly.  Each class carries a stable
``error_code`` that callers map to their own protocol-level responses.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    error_code = "GENERAL_ERROR"


class ValidationError(DomainException):
    """A business rule or structural invariant was violated."""

    error_code = "VALIDATION_ERROR"


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    error_code = "RESOURCE_NOT_FOUND"


class InvalidStatusTransitionError(DomainException):
    """The requested status is not reachable from the current one."""

    error_code = "INVALID_STATUS_TRANSITION"

    def __init__(self, current: object, requested: object) -> None:
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invalid status transition from {_name(current)} to {_name(requested)}"
        )


class DeletionForbiddenError(DomainException):
    """The order has progressed too far to be deleted."""

    error_code = "DELETION_FORBIDDEN"


class ConcurrencyError(DomainException):
    """The stored record changed between our read and our write."""

    error_code = "CONCURRENT_MODIFICATION"


class PersistenceError(DomainException):
    """An unexpected fault in the storage layer."""

    error_code = "INTERNAL_ERROR"


def _name(status: object) -> str:
    return getattr(status, "value", str(status))
