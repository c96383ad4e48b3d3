"""Container module - Centralized dependency injection.

Composition root. Selects adapters from settings and wires handlers.

- infrastructure: logger, store, address validator
- handlers: contract dispatcher and its wiring

Usage:
    from poap.core.container import get_contract, get_logger
"""

from poap.core.container.handlers import build_contract, get_contract
from poap.core.container.infrastructure import (
    get_address_validator,
    get_logger,
    get_store,
)

__all__ = [
    "build_contract",
    "get_address_validator",
    "get_contract",
    "get_logger",
    "get_store",
]
