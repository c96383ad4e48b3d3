"""Contract commands (CQRS write operations).

Commands represent caller intent to change state. They are immutable data
containers; handlers hold the logic. The caller identity and current time
travel separately in an ExecutionContext.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class Instantiate:
    """Initialize the contract singletons.

    Attributes:
        count: Initial value of the counter returned by GetCount.
    """

    count: int


@dataclass(frozen=True, kw_only=True)
class RegisterEvent:
    """Register a new event owned by the caller.

    Attributes:
        name: Unique event name (2-100 bytes).
        image: Image URL, must start with https://.
        description: Free-form text.
        start_time: Window start, seconds since epoch.
        end_time: Window end, seconds since epoch.

    Example:
        >>> command = RegisterEvent(
        ...     name="DevCon",
        ...     image="https://x/img.png",
        ...     description="Developer conference",
        ...     start_time=100,
        ...     end_time=200,
        ... )
        >>> result = handler.handle(ctx, command)
    """

    name: str
    image: str
    description: str
    start_time: int
    end_time: int


@dataclass(frozen=True, kw_only=True)
class MintBadge:
    """Issue a badge for an attendee of an event owned by the caller.

    Attributes:
        event: Name of a registered event.
        attendee: Attendee address (validated by the host capability).
        was_late: Whether the attendee checked in after the nominal start.
    """

    event: str
    attendee: str
    was_late: bool
