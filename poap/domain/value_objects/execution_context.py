"""Execution context supplied by the host for a single request."""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Self


@dataclass(frozen=True, slots=True, kw_only=True)
class ExecutionContext:
    """Caller identity and current time for one request.

    The host builds one context per call and discards it afterwards. Nothing
    inside the registry reads the wall clock directly.

    Attributes:
        sender: Identity of the account issuing the request.
        block_time: Current time, whole seconds since the epoch.

    Example:
        >>> ctx = ExecutionContext(sender="owner", block_time=150)
        >>> ctx.occurred_at
        datetime.datetime(1970, 1, 1, 0, 2, 30, tzinfo=datetime.timezone.utc)
    """

    sender: str
    block_time: int

    def __post_init__(self) -> None:
        if self.block_time < 0:
            raise ValueError("block_time cannot be negative")

    @classmethod
    def now(cls, sender: str) -> Self:
        """Build a context stamped with the current wall-clock second."""
        return cls(sender=sender, block_time=int(datetime.now(UTC).timestamp()))

    @property
    def occurred_at(self) -> datetime:
        """Block time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.block_time, UTC)
