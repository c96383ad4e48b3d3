"""Unit tests for Settings and get_settings."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from poap.core.config import Settings, StoreBackend, get_settings
from poap.core.enums import Environment


@pytest.mark.unit
class TestSettings:
    """Test Settings loading and validation."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.log_level == "INFO"
        assert settings.store_backend == StoreBackend.MEMORY
        assert settings.redis_url is None
        assert settings.address_prefix is None
        assert settings.is_development
        assert not settings.uses_json_logs

    def test_loads_from_environment(self):
        env = {
            "ENVIRONMENT": "production",
            "LOG_LEVEL": "debug",
            "STORE_BACKEND": "redis",
            "REDIS_URL": "redis://localhost:6379/0",
            "STORAGE_KEY_PREFIX": "poap:",
            "ADDRESS_PREFIX": "JUNO",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.environment == Environment.PRODUCTION
        assert settings.log_level == "DEBUG"
        assert settings.store_backend == StoreBackend.REDIS
        assert settings.storage_key_prefix == "poap:"
        assert settings.address_prefix == "juno"
        assert settings.uses_json_logs

    def test_invalid_log_level(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "verbose"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_redis_backend_requires_url(self):
        with patch.dict(os.environ, {"STORE_BACKEND": "redis"}, clear=True):
            with pytest.raises(ValidationError, match="redis_url"):
                Settings()

    def test_debug_forces_debug_level(self):
        env = {"DEBUG": "true", "LOG_LEVEL": "warning"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.log_level == "WARNING"
        assert settings.effective_log_level == "DEBUG"

    def test_log_level_used_without_debug(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "error"}, clear=True):
            assert Settings().effective_log_level == "ERROR"

    def test_empty_address_prefix_is_unset(self):
        with patch.dict(os.environ, {"ADDRESS_PREFIX": ""}, clear=True):
            assert Settings().address_prefix is None


@pytest.mark.unit
class TestGetSettings:
    """Test settings caching."""

    def test_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()
