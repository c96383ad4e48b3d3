"""Store-backed BadgeRepository (ATTENDEES and BADGES indexes).

Both indexes hold the same logical badge. `issue` is the only write path
and always writes the pair through one `put_many` call.
"""

from poap.domain.entities import BadgeRecord
from poap.domain.protocols import KeyValueStoreProtocol
from poap.infrastructure.persistence.codec import decode_record, encode_record
from poap.infrastructure.storage.keys import StorageKeys


class StoreBadgeRepository:
    """BadgeRepository over a KeyValueStoreProtocol."""

    def __init__(
        self, store: KeyValueStoreProtocol, keys: StorageKeys | None = None
    ) -> None:
        self._store = store
        self._keys = keys or StorageKeys()

    def has_badge(self, event_name: str, attendee: str) -> bool:
        return self._store.exists(self._keys.attendee(event_name, attendee))

    def find_by_event(self, event_name: str, attendee: str) -> BadgeRecord | None:
        return self._read(self._keys.attendee(event_name, attendee))

    def find_by_attendee(self, attendee: str, event_name: str) -> BadgeRecord | None:
        return self._read(self._keys.badge(attendee, event_name))

    def issue(self, event_name: str, attendee: str, badge: BadgeRecord) -> None:
        value = encode_record(badge)
        self._store.put_many(
            {
                self._keys.attendee(event_name, attendee): value,
                self._keys.badge(attendee, event_name): value,
            }
        )

    def _read(self, key: bytes) -> BadgeRecord | None:
        raw = self._store.get(key)
        if raw is None:
            return None
        return decode_record(BadgeRecord, raw)
