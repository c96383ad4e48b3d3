"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (structlog console adapter)
- Key-value store (in-memory or Redis)
- Address validation (basic or bech32)

Call `cache_clear()` on a factory after changing settings in tests.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from poap.core.config import StoreBackend, get_settings

if TYPE_CHECKING:
    from poap.domain.protocols import (
        AddressValidatorProtocol,
        KeyValueStoreProtocol,
        LoggerProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    DEBUG=true lowers the level to DEBUG regardless of LOG_LEVEL.
    """
    from poap.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    logger = ConsoleAdapter(
        use_json=settings.uses_json_logs, level=settings.effective_log_level
    )
    return logger.bind(app=settings.app_name, environment=settings.environment.value)


@lru_cache()
def get_store() -> "KeyValueStoreProtocol":
    """Return the key-value store singleton selected by settings.store_backend.

    The in-memory store lives as long as the process.
    """
    settings = get_settings()

    if settings.store_backend == StoreBackend.REDIS:
        from poap.infrastructure.storage.redis_store import RedisStore

        if settings.redis_url is None:
            raise ValueError("redis_url is required when store_backend is 'redis'")
        return RedisStore.from_url(
            settings.redis_url, key_prefix=settings.storage_key_prefix
        )

    from poap.infrastructure.storage.in_memory_store import InMemoryStore

    return InMemoryStore()


@lru_cache()
def get_address_validator() -> "AddressValidatorProtocol":
    """Bech32 validation when address_prefix is configured, basic otherwise."""
    from poap.infrastructure.addresses import (
        BasicAddressValidator,
        Bech32AddressValidator,
    )

    settings = get_settings()
    if settings.address_prefix:
        return Bech32AddressValidator(settings.address_prefix)
    return BasicAddressValidator()
