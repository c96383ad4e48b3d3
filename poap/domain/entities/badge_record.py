"""BadgeRecord domain entity.

Proof that one attendee was present at one event. Identity is the composite
key (event_name, attendee) held by the storage indexes, not by the record.
A badge is immutable; there is no update or revocation path.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class BadgeRecord:
    """Issued badge.

    Attributes:
        was_late: Whether the attendee checked in after the nominal start.
    """

    was_late: bool
