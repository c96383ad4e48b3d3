"""Persistent key-value store protocol (port).

The storage engine is owned by the host. Keys are byte strings compared
byte-wise; values are opaque bytes.

Implementations:
    - InMemoryStore: poap/infrastructure/storage/in_memory_store.py
    - RedisStore: poap/infrastructure/storage/redis_store.py
"""

from collections.abc import Mapping
from typing import Protocol


class KeyValueStoreProtocol(Protocol):
    """Protocol for key-value store backends.

    Backend failures are raised, never swallowed: the host aborts the request
    and discards any write of it.

    Methods:
        get: Read a value or None
        exists: Check whether a key is present
        put: Write one value
        put_many: Write several values as one atomic unit
    """

    def get(self, key: bytes) -> bytes | None:
        """Return the stored value, or None if the key is absent."""
        ...

    def exists(self, key: bytes) -> bool:
        """Check if a key is present."""
        ...

    def put(self, key: bytes, value: bytes) -> None:
        """Create or overwrite a single key."""
        ...

    def put_many(self, items: Mapping[bytes, bytes]) -> None:
        """Write every item or none of them.

        Used wherever two keys describe one logical record (the badge
        indexes) so a partial write can never be observed.
        """
        ...
