"""Attendance domain events.

Events:
1. EventRegistered - a new event record was stored
2. BadgeMinted - a badge was written to both indexes

Both are emitted only after all writes of the request succeeded and are
attached to the response, never published on a side channel.
"""

from dataclasses import dataclass
from typing import ClassVar

from poap.core.constants import MINT_BADGE_EVENT_TYPE
from poap.domain.events.base_event import DomainEvent


@dataclass(frozen=True, kw_only=True, slots=True)
class EventRegistered(DomainEvent):
    """Emitted after an event record is created.

    Attributes:
        event_name: Name of the registered event.
        owner: Identity that registered it.
    """

    notification_type: ClassVar[str] = "register-event"

    event_name: str
    owner: str

    def attributes(self) -> tuple[tuple[str, str], ...]:
        return (("event", self.event_name), ("owner", self.owner))


@dataclass(frozen=True, kw_only=True, slots=True)
class BadgeMinted(DomainEvent):
    """Emitted after a badge is issued.

    Attributes:
        event_name: Event the badge belongs to.
        attendee: Validated attendee address.
    """

    notification_type: ClassVar[str] = MINT_BADGE_EVENT_TYPE

    event_name: str
    attendee: str

    def attributes(self) -> tuple[tuple[str, str], ...]:
        return (("event", self.event_name), ("attendee", self.attendee))
