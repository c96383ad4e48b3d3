"""Common error classes shared by every component.

- ValidationError: input shape, time window and address format failures
- NotFoundError: a record the operation depends on is absent
- ConflictError: create-only resource already exists
- AuthorizationError: caller is not allowed to perform the operation

Usage:
    return Failure(error=ValidationError(
        code=ErrorCode.NAME_TOO_SHORT,
        message=EventError.NAME_TOO_SHORT,
        field="name",
    ))
"""

from dataclasses import dataclass

from poap.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Name of the offending input, if any.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Kind of record (EventRecord, ContractState).
        resource_id: Key that was looked up.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource already exists and may not be overwritten.

    Attributes:
        resource_type: Kind of record in conflict.
        conflicting_field: Key component that collided.
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Caller identity does not match the required identity.

    The expected identity is never included.
    """

    pass
