"""Contract singletons written at instantiation."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class ContractState:
    """Counter exposed by the count query.

    Attributes:
        count: Counter value set at instantiation.
        owner: Identity that instantiated the contract.
    """

    count: int
    owner: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ContractInfo:
    """Name and version of the deployed contract.

    Attributes:
        contract: Contract name (crates.io:dsrv-poap).
        version: Contract version.
    """

    contract: str
    version: str
