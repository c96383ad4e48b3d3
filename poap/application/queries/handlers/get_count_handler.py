"""GetCount query handler (read-only)."""

from poap.application.dtos import GetCountResponse
from poap.application.queries.contract_queries import GetCount
from poap.core.errors import NotFoundError
from poap.core.result import Failure, Result, Success
from poap.domain.protocols import ContractStateRepository


class GetCountHandler:
    """Return the counter without touching any write path."""

    def __init__(self, state_repo: ContractStateRepository) -> None:
        self._state_repo = state_repo

    def handle(self, query: GetCount) -> Result[GetCountResponse, NotFoundError]:
        match self._state_repo.load_state():
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=state):
                return Success(value=GetCountResponse(count=state.count))
