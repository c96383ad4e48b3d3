"""Event registry error messages.

Human-readable messages paired with ErrorCode values in ValidationError,
ConflictError and NotFoundError instances.

Usage:
    from poap.domain.errors import EventError

    return Failure(error=ValidationError(
        code=ErrorCode.NAME_TOO_SHORT,
        message=EventError.NAME_TOO_SHORT,
        field="name",
    ))
"""


class EventError:
    """Event error constants.

    Error Categories:
        - Conflict: ALREADY_REGISTERED
        - Input shape: NAME_TOO_SHORT, NAME_TOO_LONG, INVALID_NAME, INVALID_IMAGE_URL
        - Temporal: START_BEFORE_END, REGISTERED_IN_PAST
        - Resource: NOT_FOUND
    """

    ALREADY_REGISTERED = "Event name was already registered"
    """Registration is create-only; names are never reused."""

    NAME_TOO_SHORT = "Event name less than 2 characters"

    NAME_TOO_LONG = "Event name more than 100 characters"

    INVALID_NAME = "Event name is not valid UTF-8"

    INVALID_IMAGE_URL = "Image URL must be https://, was {url}"
    """Format with the rejected value: INVALID_IMAGE_URL.format(url=image)."""

    START_BEFORE_END = "Event start time before end time"
    """Raised when start_time >= end_time (the window is inverted or empty)."""

    REGISTERED_IN_PAST = "Cannot register an event in the past"

    NOT_FOUND = "Event not found"
