"""Ordered validation rules for event fields.

Every rule returns a Result so the first violated rule short-circuits the
chain and determines the reported error.
"""

from poap.domain.validators.event_rules import (
    validate_event_name,
    validate_event_window,
    validate_image_url,
)

__all__ = [
    "validate_event_name",
    "validate_event_window",
    "validate_image_url",
]
