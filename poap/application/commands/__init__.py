"""Commands (CQRS write operations).

Usage:
    from poap.application.commands import Instantiate, MintBadge, RegisterEvent
"""

from poap.application.commands.contract_commands import (
    Instantiate,
    MintBadge,
    RegisterEvent,
)

__all__ = ["Instantiate", "MintBadge", "RegisterEvent"]
