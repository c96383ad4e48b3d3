"""Storage key construction.

Every key is a byte string so that keys of one index sort together and
composite keys compare component by component.

Layout:
    singleton:  {namespace}
    map key:    {len(namespace):u16be}{namespace}{components}

Every component except the last is prefixed with its own u16 big-endian
length; the last one is appended raw. The length prefixes keep
("ab", "c") and ("a", "bc") distinct.

Usage:
    keys = StorageKeys()
    keys.event("DevCon")                 # b"\\x00\\x06eventsDevCon"
    keys.attendee("DevCon", "attendee1")  # b"\\x00\\x09attendees\\x00\\x06DevConattendee1"
"""

from dataclasses import dataclass

EVENTS_NAMESPACE = b"events"
ATTENDEES_NAMESPACE = b"attendees"
BADGES_NAMESPACE = b"badges"
STATE_KEY = b"state"
CONTRACT_INFO_KEY = b"contract_info"

_MAX_SEGMENT_LENGTH = 0xFFFF


def _length_prefixed(segment: bytes) -> bytes:
    if len(segment) > _MAX_SEGMENT_LENGTH:
        raise ValueError(f"Key segment too long: {len(segment)} bytes")
    return len(segment).to_bytes(2, "big") + segment


def map_key(namespace: bytes, *components: str) -> bytes:
    """Build the key of one map entry.

    Args:
        namespace: Index namespace.
        *components: Key components, outermost first. At least one.

    Raises:
        ValueError: No component given, or a segment exceeds 65535 bytes.
    """
    if not components:
        raise ValueError("A map key needs at least one component")
    # surrogatepass: lookups with unencodable input must miss, not raise.
    encoded = [
        component.encode("utf-8", "surrogatepass") for component in components
    ]
    head = b"".join(_length_prefixed(part) for part in encoded[:-1])
    return _length_prefixed(namespace) + head + encoded[-1]


@dataclass(frozen=True)
class StorageKeys:
    """Key builders for the three indexes and the contract singletons."""

    def event(self, name: str) -> bytes:
        """EVENTS[name]."""
        return map_key(EVENTS_NAMESPACE, name)

    def attendee(self, event_name: str, attendee: str) -> bytes:
        """ATTENDEES[(event_name, attendee)]."""
        return map_key(ATTENDEES_NAMESPACE, event_name, attendee)

    def badge(self, attendee: str, event_name: str) -> bytes:
        """BADGES[(attendee, event_name)]."""
        return map_key(BADGES_NAMESPACE, attendee, event_name)

    def state(self) -> bytes:
        return STATE_KEY

    def contract_info(self) -> bytes:
        return CONTRACT_INFO_KEY
