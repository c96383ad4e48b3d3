"""In-memory key-value store.

Dictionary-backed implementation of KeyValueStoreProtocol for tests and
single-process hosts. State lives as long as the instance, so every test can
build an isolated store.
"""

from collections.abc import Mapping


class InMemoryStore:
    """Dictionary-backed key-value store.

    Thread Safety:
        NOT thread-safe. The host serializes requests.

    Example:
        >>> store = InMemoryStore()
        >>> store.put(b"k", b"v")
        >>> store.get(b"k")
        b'v'
    """

    def __init__(self, initial: Mapping[bytes, bytes] | None = None) -> None:
        self._data: dict[bytes, bytes] = dict(initial or {})

    def get(self, key: bytes) -> bytes | None:
        return self._data.get(key)

    def exists(self, key: bytes) -> bool:
        return key in self._data

    def put(self, key: bytes, value: bytes) -> None:
        self._data[key] = value

    def put_many(self, items: Mapping[bytes, bytes]) -> None:
        # dict.update applies the whole mapping before control returns
        self._data.update(items)

    def snapshot(self) -> dict[bytes, bytes]:
        """Copy of the current contents, for comparing before/after a request."""
        return dict(self._data)

    def __len__(self) -> int:
        return len(self._data)
