"""Notification base class.

A notification records something the registry did (EventRegistered,
BadgeMinted) and is handed back to the host with the response, which
forwards it to off-chain observers.

Each subclass sets `notification_type` and reports its payload through
`attributes()` as ordered string pairs.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import ClassVar
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Past-tense fact emitted by a successful command.

    Attributes:
        event_id: Identifier of this notification.
        occurred_at: Handlers pass the block time so a replayed request
            yields the same timestamp.
    """

    notification_type: ClassVar[str] = "domain-event"

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def attributes(self) -> tuple[tuple[str, str], ...]:
        """Key/value pairs shown to external observers."""
        return ()
