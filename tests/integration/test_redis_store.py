"""Integration tests for RedisStore.

Runs against fakeredis, which implements the Redis wire semantics in-process.
"""

from unittest.mock import Mock

import fakeredis
import pytest

from poap.application.commands import MintBadge, RegisterEvent
from poap.core.container import build_contract
from poap.core.result import Failure, Success
from poap.domain.value_objects import ExecutionContext
from poap.infrastructure.addresses import BasicAddressValidator
from poap.infrastructure.storage import RedisStore, StorageKeys


@pytest.fixture
def redis_client():
    client = fakeredis.FakeRedis()
    yield client
    client.flushall()


@pytest.mark.integration
class TestRedisStore:
    """Test RedisStore primitives."""

    def test_get_put_exists(self, redis_client):
        store = RedisStore(redis_client)

        assert store.get(b"k") is None
        assert not store.exists(b"k")
        store.put(b"k", b"v")
        assert store.get(b"k") == b"v"
        assert store.exists(b"k")

    def test_put_many(self, redis_client):
        store = RedisStore(redis_client)

        store.put_many({b"a": b"1", b"b": b"2"})

        assert redis_client.mget([b"a", b"b"]) == [b"1", b"2"]

    def test_put_many_empty_is_noop(self, redis_client):
        RedisStore(redis_client).put_many({})

        assert redis_client.dbsize() == 0

    def test_key_prefix(self, redis_client):
        store = RedisStore(redis_client, key_prefix="poap:")

        store.put(b"state", b"{}")

        assert redis_client.get(b"poap:state") == b"{}"
        assert not RedisStore(redis_client).exists(b"state")
        assert store.exists(b"state")

    def test_binary_keys(self, redis_client):
        store = RedisStore(redis_client)
        key = StorageKeys().attendee("DevCon", "attendee_a")

        store.put(key, b'{"was_late":false}')

        assert store.get(key) == b'{"was_late":false}'


@pytest.mark.integration
class TestContractOverRedis:
    """Test the full contract against a Redis-backed store."""

    def test_register_and_mint(self, redis_client):
        contract = build_contract(
            store=RedisStore(redis_client, key_prefix="poap:"),
            address_validator=BasicAddressValidator(),
            logger=Mock(),
        )
        register = RegisterEvent(
            name="DevCon",
            image="https://x/img.png",
            description="Developer conference",
            start_time=100,
            end_time=200,
        )
        mint = MintBadge(event="DevCon", attendee="attendee_a", was_late=False)

        assert isinstance(
            contract.execute(ExecutionContext(sender="owner", block_time=50), register),
            Success,
        )
        assert isinstance(
            contract.execute(ExecutionContext(sender="owner", block_time=150), mint),
            Success,
        )
        duplicate = contract.execute(
            ExecutionContext(sender="owner", block_time=160), mint
        )

        assert isinstance(duplicate, Failure)
        assert duplicate.error.code.value == "badge_already_issued"
        assert redis_client.dbsize() == 3
        assert all(key.startswith(b"poap:") for key in redis_client.keys())
