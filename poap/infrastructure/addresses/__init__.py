"""Account address validators.

Usage:
    from poap.infrastructure.addresses import BasicAddressValidator
"""

from poap.infrastructure.addresses.address_validators import (
    BasicAddressValidator,
    Bech32AddressValidator,
)

__all__ = ["BasicAddressValidator", "Bech32AddressValidator"]
