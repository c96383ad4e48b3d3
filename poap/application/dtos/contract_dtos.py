"""Response DTOs returned by command and query handlers."""

from dataclasses import dataclass
from typing import Any

from poap.domain.events import DomainEvent


@dataclass(frozen=True, kw_only=True)
class ContractResponse:
    """Outcome of a successful command.

    The host forwards attributes and events to external observers after it
    commits the request.

    Attributes:
        attributes: Top-level key/value pairs.
        events: Notifications emitted by the command, in emission order.
        data: Optional record produced by the command (e.g. the new EventRecord).
    """

    attributes: tuple[tuple[str, str], ...] = ()
    events: tuple[DomainEvent, ...] = ()
    data: Any = None


@dataclass(frozen=True, kw_only=True)
class GetCountResponse:
    """Result of GetCount.

    Attributes:
        count: Current counter value.
    """

    count: int
