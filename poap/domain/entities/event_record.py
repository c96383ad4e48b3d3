"""EventRecord domain entity.

A registered attendance-tracked event. Created exactly once by registration
and never mutated or deleted afterwards.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Factory `create` enforces field rules in a fixed order
    - Query methods answer ownership and window questions for minting

Usage:
    from poap.domain.entities import EventRecord

    result = EventRecord.create(
        owner="owner",
        name="DevCon",
        image="https://x/img.png",
        description="",
        start_time=100,
        end_time=200,
        now=50,
    )
"""

from dataclasses import dataclass
from typing import Self

from poap.core.enums import ErrorCode
from poap.core.errors import AuthorizationError, ValidationError
from poap.core.result import Failure, Result, Success
from poap.domain.errors import BadgeError
from poap.domain.validators import (
    validate_event_name,
    validate_event_window,
    validate_image_url,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class EventRecord:
    """Registered event with an owner and a closed validity window.

    Business Rules:
        - name is 2-100 UTF-8 bytes and is the primary key
        - image starts with https://
        - start_time < end_time
        - only owner may mint badges
        - minting allowed for start_time <= now <= end_time

    Attributes:
        owner: Identity that registered the event.
        name: Unique event name.
        image: Secure image URL.
        description: Free-form text.
        start_time: Window start, seconds since epoch.
        end_time: Window end, seconds since epoch.
    """

    owner: str
    name: str
    image: str
    description: str
    start_time: int
    end_time: int

    @classmethod
    def create(
        cls,
        *,
        owner: str,
        name: str,
        image: str,
        description: str,
        start_time: int,
        end_time: int,
        now: int,
    ) -> Result[Self, ValidationError]:
        """Validate fields and build a new record.

        Rules short-circuit in this order: name length, image scheme,
        window shape, window end against now.

        Returns:
            Success(EventRecord) or Failure(ValidationError) for the first
            violated rule.
        """
        match validate_event_name(name):
            case Failure(error=error):
                return Failure(error=error)
        match validate_image_url(image):
            case Failure(error=error):
                return Failure(error=error)
        match validate_event_window(start_time, end_time, now):
            case Failure(error=error):
                return Failure(error=error)

        return Success(
            value=cls(
                owner=owner,
                name=name,
                image=image,
                description=description,
                start_time=start_time,
                end_time=end_time,
            )
        )

    def is_owned_by(self, identity: str) -> bool:
        """Strict identity equality, no delegation."""
        return self.owner == identity

    def has_started(self, now: int) -> bool:
        return now >= self.start_time

    def is_over(self, now: int) -> bool:
        return now > self.end_time

    def authorize_minter(self, identity: str) -> Result[None, AuthorizationError]:
        """Check that identity may mint badges for this event."""
        if not self.is_owned_by(identity):
            return Failure(
                error=AuthorizationError(
                    code=ErrorCode.UNAUTHORIZED,
                    message=BadgeError.UNAUTHORIZED,
                )
            )
        return Success(value=None)

    def check_mint_window(self, now: int) -> Result[None, ValidationError]:
        """Check that now lies inside the closed window [start_time, end_time]."""
        if not self.has_started(now):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.EVENT_NOT_STARTED,
                    message=BadgeError.EVENT_NOT_STARTED,
                    details={"start_time": str(self.start_time), "now": str(now)},
                )
            )
        if self.is_over(now):
            return Failure(
                error=ValidationError(
                    code=ErrorCode.EVENT_ALREADY_OVER,
                    message=BadgeError.EVENT_ALREADY_OVER,
                    details={"end_time": str(self.end_time), "now": str(now)},
                )
            )
        return Success(value=None)
