"""Address validation capability supplied by the host."""

from typing import Protocol

from poap.core.errors import ValidationError
from poap.core.result import Result


class AddressValidatorProtocol(Protocol):
    """Validate a human-readable account address.

    Implementations:
        - BasicAddressValidator: length and normalization checks
        - Bech32AddressValidator: prefix and bech32 charset checks
    """

    def validate(self, address: str) -> Result[str, ValidationError]:
        """Return the validated address or an INVALID_ADDRESS error.

        The returned value is the canonical form stored in the indexes.
        """
        ...
