"""Store-backed repositories.

Usage:
    from poap.infrastructure.persistence.repositories import (
        StoreBadgeRepository,
        StoreContractStateRepository,
        StoreEventRepository,
    )
"""

from poap.infrastructure.persistence.repositories.badge_repository import (
    StoreBadgeRepository,
)
from poap.infrastructure.persistence.repositories.contract_state_repository import (
    StoreContractStateRepository,
)
from poap.infrastructure.persistence.repositories.event_repository import (
    StoreEventRepository,
)

__all__ = [
    "StoreBadgeRepository",
    "StoreContractStateRepository",
    "StoreEventRepository",
]
