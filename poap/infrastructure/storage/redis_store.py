"""Redis key-value store implementing KeyValueStoreProtocol.

Architecture:
- Implements KeyValueStoreProtocol without inheritance (structural typing)
- Batched writes use MSET, which Redis applies atomically
- Optional key prefix isolates deployments that share one Redis database
- RedisError propagates to the host, which aborts the request
"""

from collections.abc import Mapping

from redis import Redis


class RedisStore:
    """Redis implementation of KeyValueStoreProtocol.

    Attributes:
        _redis: Redis client. Must be created with decode_responses=False so
            values come back as bytes.
        _prefix: Bytes prepended to every key.
    """

    def __init__(self, redis_client: Redis, key_prefix: str = "") -> None:
        """Initialize Redis store.

        Args:
            redis_client: Synchronous Redis client instance.
            key_prefix: Optional namespace for every key (e.g. "poap:").
        """
        self._redis = redis_client
        self._prefix = key_prefix.encode("utf-8")

    @classmethod
    def from_url(cls, url: str, key_prefix: str = "") -> "RedisStore":
        """Build a store with its own connection pool."""
        return cls(Redis.from_url(url, decode_responses=False), key_prefix=key_prefix)

    def _key(self, key: bytes) -> bytes:
        return self._prefix + key

    def get(self, key: bytes) -> bytes | None:
        value = self._redis.get(self._key(key))
        if value is None:
            return None
        return bytes(value)

    def exists(self, key: bytes) -> bool:
        return bool(self._redis.exists(self._key(key)))

    def put(self, key: bytes, value: bytes) -> None:
        self._redis.set(self._key(key), value)

    def put_many(self, items: Mapping[bytes, bytes]) -> None:
        if not items:
            return
        self._redis.mset({self._key(key): value for key, value in items.items()})
