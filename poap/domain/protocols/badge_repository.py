"""BadgeRepository protocol over the ATTENDEES and BADGES indexes.

ATTENDEES: (event name, attendee) -> BadgeRecord (primary)
BADGES:    (attendee, event name) -> BadgeRecord (mirror)

The only write operation writes both indexes together.
"""

from typing import Protocol

from poap.domain.entities import BadgeRecord


class BadgeRepository(Protocol):
    """Badge repository protocol (port)."""

    def has_badge(self, event_name: str, attendee: str) -> bool:
        """Check the primary index for (event_name, attendee)."""
        ...

    def find_by_event(self, event_name: str, attendee: str) -> BadgeRecord | None:
        """Read ATTENDEES[(event_name, attendee)]."""
        ...

    def find_by_attendee(self, attendee: str, event_name: str) -> BadgeRecord | None:
        """Read BADGES[(attendee, event_name)]."""
        ...

    def issue(self, event_name: str, attendee: str, badge: BadgeRecord) -> None:
        """Write the badge to both indexes as one atomic unit."""
        ...
