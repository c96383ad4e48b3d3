"""Address validators implementing AddressValidatorProtocol.

BasicAddressValidator accepts any normalized identifier of sensible length
and suits local hosts and tests. Bech32AddressValidator additionally pins
the chain prefix and the bech32 data charset.

Neither validator rewrites input: an address that is not already in
canonical (lowercase) form is rejected rather than normalized, so the same
attendee can never be indexed under two spellings.
"""

import re

from poap.core.constants import ADDRESS_MAX_LENGTH, ADDRESS_MIN_LENGTH
from poap.core.enums import ErrorCode
from poap.core.errors import ValidationError
from poap.core.result import Failure, Result, Success

BECH32_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"


def _invalid(address: str, reason: str) -> Failure[ValidationError]:
    return Failure(
        error=ValidationError(
            code=ErrorCode.INVALID_ADDRESS,
            message=f"Invalid input: {reason}",
            field="attendee",
            details={"address": address},
        )
    )


class BasicAddressValidator:
    """Length and normalization checks.

    Rules:
        - 3 to 90 characters
        - no whitespace
        - already lowercase
        - encodable as UTF-8 (no lone surrogates)

    Example:
        >>> BasicAddressValidator().validate("attendee1")
        Success(value='attendee1')
    """

    def validate(self, address: str) -> Result[str, ValidationError]:
        if len(address) < ADDRESS_MIN_LENGTH:
            return _invalid(address, "human address too short")
        if len(address) > ADDRESS_MAX_LENGTH:
            return _invalid(address, "human address too long")
        if any(char.isspace() for char in address):
            return _invalid(address, "address contains whitespace")
        if address != address.lower():
            return _invalid(address, "address not normalized")
        try:
            address.encode("utf-8")
        except UnicodeEncodeError:
            return _invalid(address, "address is not valid UTF-8")
        return Success(value=address)


class Bech32AddressValidator:
    """Prefix and charset checks for bech32 account addresses.

    The checksum is not verified; the host chain rejects transactions signed
    by malformed accounts long before they reach the registry.

    Args:
        prefix: Human-readable part, e.g. "juno".
    """

    def __init__(self, prefix: str) -> None:
        if not prefix:
            raise ValueError("Bech32 prefix cannot be empty")
        self._prefix = prefix.lower()
        self._basic = BasicAddressValidator()
        self._pattern = re.compile(
            rf"^{re.escape(self._prefix)}1[{BECH32_CHARSET}]{{38,58}}$"
        )

    @property
    def prefix(self) -> str:
        return self._prefix

    def validate(self, address: str) -> Result[str, ValidationError]:
        match self._basic.validate(address):
            case Failure() as failure:
                return failure
        if not address.startswith(f"{self._prefix}1"):
            return _invalid(address, f"address must start with '{self._prefix}1'")
        if not self._pattern.match(address):
            return _invalid(address, "invalid bech32 data")
        return Success(value=address)
