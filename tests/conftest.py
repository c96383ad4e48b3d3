"""Pytest configuration and shared fixtures.

Every test gets its own store, so no state leaks between cases.
"""

from unittest.mock import Mock

import pytest

from poap.application.commands import RegisterEvent
from poap.application.contract import PoapContract
from poap.core.container import build_contract
from poap.core.result import Success
from poap.domain.value_objects import ExecutionContext
from poap.infrastructure.addresses import BasicAddressValidator
from poap.infrastructure.storage import InMemoryStore

OWNER = "owner"
STRANGER = "stranger"
ATTENDEE_A = "attendee_a"
ATTENDEE_B = "attendee_b"


def ctx(sender: str = OWNER, block_time: int = 150) -> ExecutionContext:
    """Build an execution context (defaults: owner, inside the DevCon window)."""
    return ExecutionContext(sender=sender, block_time=block_time)


def devcon(**overrides) -> RegisterEvent:
    """RegisterEvent for the reference event: window [100, 200]."""
    fields = {
        "name": "DevCon",
        "image": "https://x/img.png",
        "description": "Developer conference",
        "start_time": 100,
        "end_time": 200,
    }
    fields.update(overrides)
    return RegisterEvent(**fields)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def logger() -> Mock:
    return Mock()


@pytest.fixture
def contract(store, logger) -> PoapContract:
    return build_contract(
        store=store,
        address_validator=BasicAddressValidator(),
        logger=logger,
    )


@pytest.fixture
def registered_contract(contract) -> PoapContract:
    """Contract with DevCon registered by OWNER at time 50."""
    result = contract.execute(ctx(OWNER, 50), devcon())
    assert isinstance(result, Success)
    return contract
