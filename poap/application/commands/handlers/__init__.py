"""Command handlers.

Usage:
    from poap.application.commands.handlers import MintBadgeHandler
"""

from poap.application.commands.handlers.instantiate_handler import InstantiateHandler
from poap.application.commands.handlers.mint_badge_handler import MintBadgeHandler
from poap.application.commands.handlers.register_event_handler import (
    RegisterEventHandler,
)

__all__ = ["InstantiateHandler", "MintBadgeHandler", "RegisterEventHandler"]
