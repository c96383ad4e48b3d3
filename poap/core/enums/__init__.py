"""Core enums package.

Usage:
    from poap.core.enums import ErrorCode, Environment
"""

from poap.core.enums.environment import Environment
from poap.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
