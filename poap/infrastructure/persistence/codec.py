"""JSON encoding of stored records.

Records are frozen dataclasses; values are stored as compact UTF-8 JSON
objects whose keys are the dataclass field names.
"""

import json
from dataclasses import asdict
from typing import Any


def encode_record(record: Any) -> bytes:
    """Serialize a dataclass record to JSON bytes."""
    return json.dumps(asdict(record), separators=(",", ":")).encode("utf-8")


def decode_record[T](record_type: type[T], raw: bytes) -> T:
    """Rebuild a dataclass record from JSON bytes.

    Raises:
        ValueError: The bytes are not a JSON object (json.JSONDecodeError is a
            ValueError).
        TypeError: The object fields do not match record_type.
    """
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Stored {record_type.__name__} is not a JSON object")
    return record_type(**data)
