"""structlog-backed logger for the registry.

Every record goes to stdout with an ISO-8601 UTC timestamp and its level.
Local development gets colored key=value lines; every other environment
gets one JSON object per line so log shippers can index the event/attendee
fields without parsing.

ConsoleAdapter satisfies LoggerProtocol structurally; it does not subclass it.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def _level_number(level: str) -> int:
    """Unknown names fall back to INFO."""
    return getattr(logging, level.upper(), logging.INFO)


class ConsoleAdapter:
    """Structured stdout logger.

    Args:
        use_json (bool): Render JSON lines instead of colored console output.
        level (str): Lowest level that is emitted, e.g. "INFO".
    """

    def __init__(self, *, use_json: bool = False, level: str = "INFO") -> None:
        renderer = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer(colors=True)
        )
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso", utc=True),
                renderer,
            ],
            wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
            cache_logger_on_first_use=True,
        )
        self._logger = structlog.get_logger()

    @classmethod
    def _wrapping(cls, bound_logger: Any) -> ConsoleAdapter:
        adapter = cls.__new__(cls)
        adapter._logger = bound_logger
        return adapter

    def debug(self, message: str, /, **context: Any) -> None:
        self._logger.debug(message, **context)

    def info(self, message: str, /, **context: Any) -> None:
        self._logger.info(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        self._logger.warning(message, **context)

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log at ERROR, flattening an exception into error_type/error_message."""
        if error is not None:
            context.update(error_type=type(error).__name__, error_message=str(error))
        self._logger.error(message, **context)

    def bind(self, **context: Any) -> ConsoleAdapter:
        """Adapter whose records all carry `context` (e.g. app, environment)."""
        return self._wrapping(self._logger.bind(**context))
