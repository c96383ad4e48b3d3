"""Key-value store adapters.

Usage:
    from poap.infrastructure.storage import InMemoryStore, RedisStore, StorageKeys
"""

from poap.infrastructure.storage.in_memory_store import InMemoryStore
from poap.infrastructure.storage.keys import StorageKeys
from poap.infrastructure.storage.redis_store import RedisStore

__all__ = ["InMemoryStore", "RedisStore", "StorageKeys"]
