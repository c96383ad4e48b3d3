"""Registration handler for the Event Registry.

Flow:
1. Reject a name that already exists (create-only, never an upsert)
2. Validate fields through EventRecord.create (name, image, window)
3. Save the record with the caller as owner
4. Return Success(ContractResponse) carrying the record and an
   EventRegistered notification

On failure:
- Return Failure(error) for the first violated rule
- Nothing is written

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, events)
- Repositories are injected via protocols
"""

from uuid_extensions import uuid7

from poap.application.commands.contract_commands import RegisterEvent
from poap.application.dtos import ContractResponse
from poap.core.constants import REGISTER_EVENT_ATTRIBUTE
from poap.core.enums import ErrorCode
from poap.core.errors import ConflictError, DomainError
from poap.core.result import Failure, Result, Success
from poap.domain.entities import EventRecord
from poap.domain.errors import EventError
from poap.domain.events import EventRegistered
from poap.domain.protocols import EventRepository, LoggerProtocol
from poap.domain.value_objects import ExecutionContext


class RegisterEventHandler:
    """Handler for the RegisterEvent command."""

    def __init__(self, event_repo: EventRepository, logger: LoggerProtocol) -> None:
        """Initialize registration handler with dependencies.

        Args:
            event_repo: EVENTS index.
            logger: Structured logger.
        """
        self._event_repo = event_repo
        self._logger = logger

    def handle(
        self, ctx: ExecutionContext, cmd: RegisterEvent
    ) -> Result[ContractResponse, DomainError]:
        """Handle event registration.

        The existence check runs before any field validation, so a duplicate
        name is reported as EVENT_ALREADY_REGISTERED even when other fields
        are invalid too.

        Args:
            ctx: Caller identity and block time.
            cmd: RegisterEvent command.

        Returns:
            Success(ContractResponse) with data=EventRecord on success.
            Failure(ConflictError | ValidationError) otherwise.
        """
        if self._event_repo.exists(cmd.name):
            return self._reject(
                cmd,
                ConflictError(
                    code=ErrorCode.EVENT_ALREADY_REGISTERED,
                    message=EventError.ALREADY_REGISTERED,
                    resource_type="EventRecord",
                    conflicting_field="name",
                ),
            )

        match EventRecord.create(
            owner=ctx.sender,
            name=cmd.name,
            image=cmd.image,
            description=cmd.description,
            start_time=cmd.start_time,
            end_time=cmd.end_time,
            now=ctx.block_time,
        ):
            case Failure(error=error):
                return self._reject(cmd, error)
            case Success(value=event):
                pass

        self._event_repo.save(event)

        self._logger.info(
            "event_registered",
            event=event.name,
            owner=event.owner,
            start_time=event.start_time,
            end_time=event.end_time,
        )
        return Success(
            value=ContractResponse(
                attributes=((REGISTER_EVENT_ATTRIBUTE, event.name),),
                events=(
                    EventRegistered(
                        event_id=uuid7(),
                        occurred_at=ctx.occurred_at,
                        event_name=event.name,
                        owner=event.owner,
                    ),
                ),
                data=event,
            )
        )

    def _reject(
        self, cmd: RegisterEvent, error: DomainError
    ) -> Failure[DomainError]:
        self._logger.info(
            "event_registration_rejected",
            event=cmd.name,
            error_code=error.code.value,
        )
        return Failure(error=error)
