"""Handler factories.

`build_contract` wires every handler against one store; `get_contract` is the
process-wide instance built from settings. Tests call `build_contract` with
their own store and logger.
"""

from functools import lru_cache

from poap.application.commands.handlers import (
    InstantiateHandler,
    MintBadgeHandler,
    RegisterEventHandler,
)
from poap.application.contract import PoapContract
from poap.application.queries.handlers import GetCountHandler
from poap.core.container.infrastructure import (
    get_address_validator,
    get_logger,
    get_store,
)
from poap.domain.protocols import (
    AddressValidatorProtocol,
    KeyValueStoreProtocol,
    LoggerProtocol,
)
from poap.infrastructure.persistence.repositories import (
    StoreBadgeRepository,
    StoreContractStateRepository,
    StoreEventRepository,
)


def build_contract(
    store: KeyValueStoreProtocol,
    address_validator: AddressValidatorProtocol,
    logger: LoggerProtocol,
) -> PoapContract:
    """Create a contract whose repositories all share `store`."""
    event_repo = StoreEventRepository(store)
    badge_repo = StoreBadgeRepository(store)
    state_repo = StoreContractStateRepository(store)
    return PoapContract(
        instantiate_handler=InstantiateHandler(state_repo, logger),
        register_event_handler=RegisterEventHandler(event_repo, logger),
        mint_badge_handler=MintBadgeHandler(
            event_repo, badge_repo, address_validator, logger
        ),
        get_count_handler=GetCountHandler(state_repo),
        logger=logger,
    )


@lru_cache()
def get_contract() -> PoapContract:
    """Return the contract dispatcher wired to the configured adapters."""
    return build_contract(
        store=get_store(),
        address_validator=get_address_validator(),
        logger=get_logger(),
    )
