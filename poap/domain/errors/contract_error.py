"""Contract lifecycle error messages."""


class ContractError:
    """Contract error constants."""

    STATE_NOT_FOUND = "Contract state not found"
    """Count query before the contract was instantiated."""
