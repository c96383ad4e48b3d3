"""Event field rules.

Rules are applied by EventRecord.create in this order:
    1. validate_event_name  (length in UTF-8 bytes)
    2. validate_image_url   (literal https:// prefix)
    3. validate_event_window (start < end, end not in the past)
"""

from poap.core.constants import (
    EVENT_NAME_MAX_LENGTH,
    EVENT_NAME_MIN_LENGTH,
    SECURE_IMAGE_SCHEME,
)
from poap.core.enums import ErrorCode
from poap.core.errors import ValidationError
from poap.core.result import Failure, Result, Success
from poap.domain.errors import EventError


def validate_event_name(name: str) -> Result[str, ValidationError]:
    """Check the event name length.

    Length is measured in UTF-8 bytes, so a name of multibyte characters
    reaches the upper bound with fewer characters.

    Example:
        >>> validate_event_name("x")
        Failure(error=ValidationError(code=<ErrorCode.NAME_TOO_SHORT: ...>, ...))
    """
    try:
        length = len(name.encode("utf-8"))
    except UnicodeEncodeError:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_EVENT_NAME,
                message=EventError.INVALID_NAME,
                field="name",
            )
        )
    if length < EVENT_NAME_MIN_LENGTH:
        return Failure(
            error=ValidationError(
                code=ErrorCode.NAME_TOO_SHORT,
                message=EventError.NAME_TOO_SHORT,
                field="name",
            )
        )
    if length > EVENT_NAME_MAX_LENGTH:
        return Failure(
            error=ValidationError(
                code=ErrorCode.NAME_TOO_LONG,
                message=EventError.NAME_TOO_LONG,
                field="name",
            )
        )
    return Success(value=name)


def validate_image_url(image: str) -> Result[str, ValidationError]:
    """Require the literal secure scheme prefix (case-sensitive).

    The rejected value is carried in details["image"].
    """
    if not image.startswith(SECURE_IMAGE_SCHEME):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_IMAGE_URL,
                message=EventError.INVALID_IMAGE_URL.format(url=image),
                field="image",
                details={"image": image},
            )
        )
    return Success(value=image)


def validate_event_window(
    start_time: int, end_time: int, now: int
) -> Result[tuple[int, int], ValidationError]:
    """Check the registration window against the current time.

    An end time equal to now is accepted: the event is still mintable for
    that one second.
    """
    if start_time >= end_time:
        return Failure(
            error=ValidationError(
                code=ErrorCode.START_BEFORE_END,
                message=EventError.START_BEFORE_END,
                field="start_time",
                details={"start_time": str(start_time), "end_time": str(end_time)},
            )
        )
    if end_time < now:
        return Failure(
            error=ValidationError(
                code=ErrorCode.EVENT_ALREADY_OVER,
                message=EventError.REGISTERED_IN_PAST,
                field="end_time",
                details={"end_time": str(end_time), "now": str(now)},
            )
        )
    return Success(value=(start_time, end_time))
