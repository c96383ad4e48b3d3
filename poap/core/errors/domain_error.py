"""Root of the registry's error values.

Rejections travel inside Failure, never as raised exceptions, so DomainError
is a plain frozen dataclass. Subclasses in common_errors add the context a
caller needs (offending field, missing resource, conflicting key).
"""

from dataclasses import dataclass

from poap.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """A rejected operation.

    Attributes:
        code: Stable identifier clients branch on.
        message: Text shown to the caller.
        details: Extra values, e.g. the rejected image URL.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
