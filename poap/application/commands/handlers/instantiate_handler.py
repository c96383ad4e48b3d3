"""Instantiate handler: writes the contract version record and counter state."""

from poap.application.commands.contract_commands import Instantiate
from poap.application.dtos import ContractResponse
from poap.core.constants import CONTRACT_NAME, CONTRACT_VERSION
from poap.core.errors import DomainError
from poap.core.result import Result, Success
from poap.domain.entities import ContractInfo, ContractState
from poap.domain.protocols import ContractStateRepository, LoggerProtocol
from poap.domain.value_objects import ExecutionContext


class InstantiateHandler:
    """Handler for the Instantiate command.

    Emits no notifications. Running it again overwrites the counter, which
    mirrors a fresh deployment.
    """

    def __init__(
        self, state_repo: ContractStateRepository, logger: LoggerProtocol
    ) -> None:
        self._state_repo = state_repo
        self._logger = logger

    def handle(
        self, ctx: ExecutionContext, cmd: Instantiate
    ) -> Result[ContractResponse, DomainError]:
        info = ContractInfo(contract=CONTRACT_NAME, version=CONTRACT_VERSION)
        self._state_repo.initialize(
            ContractState(count=cmd.count, owner=ctx.sender), info
        )
        self._logger.info(
            "contract_instantiated",
            contract=info.contract,
            version=info.version,
            owner=ctx.sender,
        )
        return Success(value=ContractResponse(data=info))
