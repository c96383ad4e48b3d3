"""EventRepository protocol for the EVENTS index (event name -> EventRecord)."""

from typing import Protocol

from poap.core.errors import NotFoundError
from poap.core.result import Result
from poap.domain.entities import EventRecord


class EventRepository(Protocol):
    """Event repository protocol (port).

    There is intentionally no update or delete: registration is append-only.
    """

    def exists(self, name: str) -> bool:
        """Check if an event with this name was ever registered."""
        ...

    def find_by_name(self, name: str) -> EventRecord | None:
        """Return the event, or None if absent."""
        ...

    def load(self, name: str) -> Result[EventRecord, NotFoundError]:
        """Return the event or a NotFoundError (EVENT_NOT_FOUND)."""
        ...

    def save(self, event: EventRecord) -> None:
        """Store the event under its name."""
        ...
