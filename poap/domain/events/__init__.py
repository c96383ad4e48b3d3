"""Domain events module.

Notifications attached to successful responses for external observers.

Usage:
    >>> from poap.domain.events import BadgeMinted, EventRegistered
    >>> event = BadgeMinted(event_name="DevCon", attendee="attendee1")
    >>> event.attributes()
    (('event', 'DevCon'), ('attendee', 'attendee1'))
"""

from poap.domain.events.attendance_events import BadgeMinted, EventRegistered
from poap.domain.events.base_event import DomainEvent

__all__ = ["BadgeMinted", "DomainEvent", "EventRegistered"]
