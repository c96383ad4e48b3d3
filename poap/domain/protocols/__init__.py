"""Domain protocols (ports).

Structural interfaces implemented by the infrastructure layer and injected
into handlers.

Usage:
    from poap.domain.protocols import EventRepository, KeyValueStoreProtocol
"""

from poap.domain.protocols.address_validator_protocol import AddressValidatorProtocol
from poap.domain.protocols.badge_repository import BadgeRepository
from poap.domain.protocols.contract_state_repository import ContractStateRepository
from poap.domain.protocols.event_repository import EventRepository
from poap.domain.protocols.key_value_store_protocol import KeyValueStoreProtocol
from poap.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AddressValidatorProtocol",
    "BadgeRepository",
    "ContractStateRepository",
    "EventRepository",
    "KeyValueStoreProtocol",
    "LoggerProtocol",
]
