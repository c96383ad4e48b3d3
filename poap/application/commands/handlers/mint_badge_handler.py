"""Mint handler for the Badge Issuer.

Per (event, attendee) the only transition is absent -> issued.

Flow (order is observable and must not change):
1. Load the event (EVENT_NOT_FOUND)
2. Caller must be the event owner (UNAUTHORIZED)
3. Block time must not precede start_time (EVENT_NOT_STARTED)
4. Block time must not exceed end_time (EVENT_ALREADY_OVER)
5. Attendee address must validate (INVALID_ADDRESS, propagated unchanged)
6. No badge may exist for (event, attendee) (BADGE_ALREADY_ISSUED)
7. Write the badge to ATTENDEES and BADGES in one batch
8. Return Success(ContractResponse) carrying a BadgeMinted notification

Nothing is written unless every check passes.
"""

from uuid_extensions import uuid7

from poap.application.commands.contract_commands import MintBadge
from poap.application.dtos import ContractResponse
from poap.core.enums import ErrorCode
from poap.core.errors import ConflictError, DomainError
from poap.core.result import Failure, Result, Success
from poap.domain.entities import BadgeRecord
from poap.domain.errors import BadgeError
from poap.domain.events import BadgeMinted
from poap.domain.protocols import (
    AddressValidatorProtocol,
    BadgeRepository,
    EventRepository,
    LoggerProtocol,
)
from poap.domain.value_objects import ExecutionContext


class MintBadgeHandler:
    """Handler for the MintBadge command."""

    def __init__(
        self,
        event_repo: EventRepository,
        badge_repo: BadgeRepository,
        address_validator: AddressValidatorProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize mint handler with dependencies.

        Args:
            event_repo: EVENTS index (read only here).
            badge_repo: ATTENDEES/BADGES indexes.
            address_validator: Host address validation capability.
            logger: Structured logger.
        """
        self._event_repo = event_repo
        self._badge_repo = badge_repo
        self._address_validator = address_validator
        self._logger = logger

    def handle(
        self, ctx: ExecutionContext, cmd: MintBadge
    ) -> Result[ContractResponse, DomainError]:
        """Handle badge minting.

        Args:
            ctx: Caller identity and block time.
            cmd: MintBadge command.

        Returns:
            Success(ContractResponse) with data=BadgeRecord on success.
            Failure(DomainError) for the first failed check.
        """
        match self._event_repo.load(cmd.event):
            case Failure(error=error):
                return self._reject(cmd, error)
            case Success(value=event):
                pass

        match event.authorize_minter(ctx.sender):
            case Failure(error=error):
                return self._reject(cmd, error)

        match event.check_mint_window(ctx.block_time):
            case Failure(error=error):
                return self._reject(cmd, error)

        match self._address_validator.validate(cmd.attendee):
            case Failure(error=error):
                return self._reject(cmd, error)
            case Success(value=attendee):
                pass

        if self._badge_repo.has_badge(event.name, attendee):
            return self._reject(
                cmd,
                ConflictError(
                    code=ErrorCode.BADGE_ALREADY_ISSUED,
                    message=BadgeError.ALREADY_ISSUED,
                    resource_type="BadgeRecord",
                    conflicting_field="attendee",
                ),
            )

        badge = BadgeRecord(was_late=cmd.was_late)
        self._badge_repo.issue(event.name, attendee, badge)

        self._logger.info(
            "badge_minted",
            event=event.name,
            attendee=attendee,
            was_late=badge.was_late,
        )
        return Success(
            value=ContractResponse(
                events=(
                    BadgeMinted(
                        event_id=uuid7(),
                        occurred_at=ctx.occurred_at,
                        event_name=event.name,
                        attendee=attendee,
                    ),
                ),
                data=badge,
            )
        )

    def _reject(self, cmd: MintBadge, error: DomainError) -> Failure[DomainError]:
        self._logger.info(
            "badge_mint_rejected",
            event=cmd.event,
            attendee=cmd.attendee,
            error_code=error.code.value,
        )
        return Failure(error=error)
