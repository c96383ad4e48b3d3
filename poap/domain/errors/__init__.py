"""Domain error message constants.

Usage:
    from poap.domain.errors import BadgeError, ContractError, EventError
"""

from poap.domain.errors.badge_error import BadgeError
from poap.domain.errors.contract_error import ContractError
from poap.domain.errors.event_error import EventError

__all__ = ["BadgeError", "ContractError", "EventError"]
