"""Domain entities.

Usage:
    from poap.domain.entities import BadgeRecord, EventRecord
"""

from poap.domain.entities.badge_record import BadgeRecord
from poap.domain.entities.contract_state import ContractInfo, ContractState
from poap.domain.entities.event_record import EventRecord

__all__ = ["BadgeRecord", "ContractInfo", "ContractState", "EventRecord"]
