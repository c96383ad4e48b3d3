"""Contract queries (CQRS read operations).

Queries never change state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetCount:
    """Read the counter set at instantiation."""
