"""Runtime environments.

- DEVELOPMENT: local work, human-readable logs
- TESTING: automated test runs
- CI: continuous integration
- PRODUCTION: deployed host
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
