"""Badge issuer error messages."""


class BadgeError:
    """Badge error constants.

    Error Categories:
        - Conflict: ALREADY_ISSUED
        - Authorization: UNAUTHORIZED
        - Temporal: EVENT_NOT_STARTED, EVENT_ALREADY_OVER
    """

    ALREADY_ISSUED = "Badge was already issued"

    UNAUTHORIZED = "Unauthorized"
    """Only the event owner may mint. The owner is never named."""

    EVENT_NOT_STARTED = "Event has not started yet"

    EVENT_ALREADY_OVER = "Event is already over"
