"""ContractStateRepository protocol for the contract singletons."""

from typing import Protocol

from poap.core.errors import NotFoundError
from poap.core.result import Result
from poap.domain.entities import ContractInfo, ContractState


class ContractStateRepository(Protocol):
    """Repository for the `state` and `contract_info` singletons."""

    def load_state(self) -> Result[ContractState, NotFoundError]:
        """Return the counter state or STATE_NOT_FOUND."""
        ...

    def find_info(self) -> ContractInfo | None:
        """Return the recorded contract name and version, if any."""
        ...

    def initialize(self, state: ContractState, info: ContractInfo) -> None:
        """Write both singletons together."""
        ...
