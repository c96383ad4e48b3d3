"""Contract entry points.

Maps inbound messages 1:1 onto handlers, the way a host dispatches
instantiate / execute / query calls:

    instantiate(ctx, Instantiate)      -> InstantiateHandler
    execute(ctx, RegisterEvent)        -> RegisterEventHandler
    execute(ctx, MintBadge)            -> MintBadgeHandler
    query(GetCount)                    -> GetCountHandler

Usage:
    from poap.core.container import get_contract

    contract = get_contract()
    result = contract.execute(
        ExecutionContext(sender="owner", block_time=150),
        MintBadge(event="DevCon", attendee="attendee1", was_late=False),
    )
"""

from poap.application.commands import Instantiate, MintBadge, RegisterEvent
from poap.application.commands.handlers import (
    InstantiateHandler,
    MintBadgeHandler,
    RegisterEventHandler,
)
from poap.application.dtos import ContractResponse, GetCountResponse
from poap.application.errors import ApplicationError, ApplicationErrorCode
from poap.application.queries import GetCount
from poap.application.queries.handlers import GetCountHandler
from poap.core.errors import DomainError
from poap.core.result import Failure, Result
from poap.domain.protocols import LoggerProtocol
from poap.domain.value_objects import ExecutionContext

type ExecuteMsg = RegisterEvent | MintBadge
type QueryMsg = GetCount


class PoapContract:
    """Dispatcher over the command and query handlers.

    Holds no state of its own; everything persistent lives in the store the
    handlers were built with.
    """

    def __init__(
        self,
        *,
        instantiate_handler: InstantiateHandler,
        register_event_handler: RegisterEventHandler,
        mint_badge_handler: MintBadgeHandler,
        get_count_handler: GetCountHandler,
        logger: LoggerProtocol,
    ) -> None:
        self._instantiate_handler = instantiate_handler
        self._register_event_handler = register_event_handler
        self._mint_badge_handler = mint_badge_handler
        self._get_count_handler = get_count_handler
        self._logger = logger

    def instantiate(
        self, ctx: ExecutionContext, msg: Instantiate
    ) -> Result[ContractResponse, DomainError]:
        return self._instantiate_handler.handle(ctx, msg)

    def execute(
        self, ctx: ExecutionContext, msg: ExecuteMsg
    ) -> Result[ContractResponse, DomainError | ApplicationError]:
        """Route an execute message to its handler."""
        match msg:
            case RegisterEvent():
                return self._register_event_handler.handle(ctx, msg)
            case MintBadge():
                return self._mint_badge_handler.handle(ctx, msg)
            case _:
                return self._unsupported(
                    ApplicationErrorCode.COMMAND_NOT_SUPPORTED, msg
                )

    def query(
        self, msg: QueryMsg
    ) -> Result[GetCountResponse, DomainError | ApplicationError]:
        """Route a read-only query to its handler."""
        match msg:
            case GetCount():
                return self._get_count_handler.handle(msg)
            case _:
                return self._unsupported(ApplicationErrorCode.QUERY_NOT_SUPPORTED, msg)

    def _unsupported(
        self, code: ApplicationErrorCode, msg: object
    ) -> Failure[ApplicationError]:
        message_type = type(msg).__name__
        self._logger.warning("message_not_supported", message_type=message_type)
        return Failure(
            error=ApplicationError(
                code=code,
                message=f"Unsupported message: {message_type}",
                details={"message_type": message_type},
            )
        )
