"""Application layer error types.

Failures of the dispatcher itself, as opposed to domain rule violations
which are returned unchanged from the handlers.
"""

from dataclasses import dataclass
from enum import Enum


class ApplicationErrorCode(Enum):
    """Application-level error codes."""

    COMMAND_NOT_SUPPORTED = "command_not_supported"
    QUERY_NOT_SUPPORTED = "query_not_supported"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message.
        details: Additional context as key-value pairs.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.COMMAND_NOT_SUPPORTED,
        ...     message="Unsupported command: Increment",
        ... )
    """

    code: ApplicationErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
