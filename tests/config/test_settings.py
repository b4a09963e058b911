import pytest

from src.config.settings import (
    DEFAULT_API_BASE_URL,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_READ_TIMEOUT,
    DEFAULT_TOKEN_PATH,
    Settings,
)
from src.utils.errors import ConfigurationError


def test_from_env_defaults_to_disabled():
    settings = Settings.from_env({})

    assert settings.enabled is False
    assert settings.bridge_id is None
    assert settings.token_cache_ttl is None
    assert settings.api_base_url == DEFAULT_API_BASE_URL
    assert settings.token_path == DEFAULT_TOKEN_PATH
    assert settings.get_api_timeout() == (DEFAULT_CONNECT_TIMEOUT, DEFAULT_READ_TIMEOUT)


def test_from_env_reads_values():
    settings = Settings.from_env(
        {
            "OB_ENABLED": "True",
            "OB_KC_USER": "kc",
            "OB_KC_PASS": "secret",
            "OB_BRIDGE_UUID": "bridge-1",
            "OB_TOKEN_USER": "tok",
            "OB_TOKEN_PASS": "tok-secret",
            "OB_TOKEN_CACHE_TTL": "120",
            "OB_AUTH_BASE_URL": "http://kc.local/",
            "OB_API_BASE_URL": "http://api.local/",
            "OB_API_TIMEOUT": "45",
        }
    )

    assert settings.enabled is True
    assert settings.bridge_id == "bridge-1"
    assert settings.token_cache_ttl == 120.0
    assert settings.token_url == "http://kc.local" + DEFAULT_TOKEN_PATH
    assert settings.api_base_url == "http://api.local"
    assert settings.get_api_timeout() == (DEFAULT_CONNECT_TIMEOUT, 45.0)
    settings.validate()


def test_from_env_rejects_bad_number():
    with pytest.raises(ConfigurationError):
        Settings.from_env({"OB_TOKEN_CACHE_TTL": "soon"})


def test_validate_ignores_disabled_settings():
    Settings().validate()


def test_validate_requires_bridge_id_when_enabled():
    settings = Settings(
        enabled=True,
        kc_user="kc",
        kc_pass="p",
        token_user="t",
        token_pass="p",
        token_cache_ttl=60,
    )

    with pytest.raises(ConfigurationError) as exc_info:
        settings.validate()

    assert "bridge_id" in str(exc_info.value)


def test_validate_requires_token_ttl_when_enabled():
    settings = Settings(
        enabled=True,
        kc_user="kc",
        kc_pass="p",
        bridge_id="b",
        token_user="t",
        token_pass="p",
    )

    with pytest.raises(ConfigurationError) as exc_info:
        settings.validate()

    assert "OB_TOKEN_CACHE_TTL" in str(exc_info.value)


def test_setters_override_values():
    settings = Settings()

    settings.set_enabled(True)
    settings.set_bridge_id("other")

    assert settings.enabled is True
    assert settings.bridge_id == "other"
