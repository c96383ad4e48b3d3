"""Centralized constants for internal implementation details.

These are fixed rules of the registry, NOT environment-specific
configuration. For environment-specific settings use `poap/core/config.py`.

Example:
    >>> from poap.core.constants import EVENT_NAME_MIN_LENGTH
"""

# =============================================================================
# Contract Identity
# =============================================================================

CONTRACT_NAME: str = "crates.io:dsrv-poap"
"""Name recorded in the contract info singleton at instantiation."""

CONTRACT_VERSION: str = "0.1.0"
"""Version recorded in the contract info singleton at instantiation."""


# =============================================================================
# Event Rules
# =============================================================================

EVENT_NAME_MIN_LENGTH: int = 2
"""Shortest accepted event name, in UTF-8 bytes."""

EVENT_NAME_MAX_LENGTH: int = 100
"""Longest accepted event name, in UTF-8 bytes."""

SECURE_IMAGE_SCHEME: str = "https://"
"""Literal prefix every event image URL must start with."""


# =============================================================================
# Notifications
# =============================================================================

REGISTER_EVENT_ATTRIBUTE: str = "register_event"
"""Response attribute key carrying the registered event name."""

MINT_BADGE_EVENT_TYPE: str = "mint-badge"
"""Notification type attached to a successful mint."""


# =============================================================================
# Address Validation
# =============================================================================

ADDRESS_MIN_LENGTH: int = 3
"""Shortest accepted account address."""

ADDRESS_MAX_LENGTH: int = 90
"""Longest accepted account address (bech32 upper bound)."""
