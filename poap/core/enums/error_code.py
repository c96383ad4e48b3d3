"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_REASON naming.

Categories:
- Validation errors (input shape, time window, address format)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_*)
- Authorization errors
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Input-shape errors
    NAME_TOO_SHORT = "name_too_short"
    NAME_TOO_LONG = "name_too_long"
    INVALID_EVENT_NAME = "invalid_event_name"
    INVALID_IMAGE_URL = "invalid_image_url"
    INVALID_ADDRESS = "invalid_address"

    # Temporal errors
    START_BEFORE_END = "start_before_end"
    EVENT_ALREADY_OVER = "event_already_over"
    EVENT_NOT_STARTED = "event_not_started"

    # Resource errors
    EVENT_NOT_FOUND = "event_not_found"
    STATE_NOT_FOUND = "state_not_found"

    # Conflict errors
    EVENT_ALREADY_REGISTERED = "event_already_registered"
    BADGE_ALREADY_ISSUED = "badge_already_issued"

    # Authorization errors
    UNAUTHORIZED = "unauthorized"
