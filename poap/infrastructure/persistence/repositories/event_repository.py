"""Store-backed EventRepository (EVENTS index)."""

from poap.core.enums import ErrorCode
from poap.core.errors import NotFoundError
from poap.core.result import Failure, Result, Success
from poap.domain.entities import EventRecord
from poap.domain.errors import EventError
from poap.domain.protocols import KeyValueStoreProtocol
from poap.infrastructure.persistence.codec import decode_record, encode_record
from poap.infrastructure.storage.keys import StorageKeys


class StoreEventRepository:
    """EventRepository over a KeyValueStoreProtocol.

    Note: Does NOT inherit from EventRepository (structural typing).
    """

    def __init__(
        self, store: KeyValueStoreProtocol, keys: StorageKeys | None = None
    ) -> None:
        self._store = store
        self._keys = keys or StorageKeys()

    def exists(self, name: str) -> bool:
        return self._store.exists(self._keys.event(name))

    def find_by_name(self, name: str) -> EventRecord | None:
        raw = self._store.get(self._keys.event(name))
        if raw is None:
            return None
        return decode_record(EventRecord, raw)

    def load(self, name: str) -> Result[EventRecord, NotFoundError]:
        event = self.find_by_name(name)
        if event is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.EVENT_NOT_FOUND,
                    message=EventError.NOT_FOUND,
                    resource_type="EventRecord",
                    resource_id=name,
                )
            )
        return Success(value=event)

    def save(self, event: EventRecord) -> None:
        self._store.put(self._keys.event(event.name), encode_record(event))
