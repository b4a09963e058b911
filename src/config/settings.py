"""Configuration for the bridge adapter.

Settings are read once from the environment at startup. ``enabled`` and
``bridge_id`` stay mutable through explicit setters so tests and operators
can flip the integration or point it at another bridge before the first
resolution.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from src.utils.errors import ConfigurationError

DEFAULT_AUTH_BASE_URL = "http://localhost:8180"
DEFAULT_API_BASE_URL = "http://localhost:8080"
DEFAULT_TOKEN_PATH = "/auth/realms/event-bridge-fm/protocol/openid-connect/token"
DEFAULT_CONNECT_TIMEOUT = 10
DEFAULT_READ_TIMEOUT = 30

_TRUE_VALUES = ("1", "true", "yes", "on")


def _as_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUE_VALUES


def _as_float(name: str, value: Optional[str]) -> Optional[float]:
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc


@dataclass
class Settings:
    """Runtime configuration of the bridge adapter.

    :param enabled: Whether the event-bridge integration is active
    :param kc_user: Username for the token endpoint's Basic-Auth header
    :param kc_pass: Password for the token endpoint's Basic-Auth header
    :param bridge_id: Identifier of the bridge to resolve
    :param token_user: Username sent in the password-grant body
    :param token_pass: Password sent in the password-grant body
    :param token_cache_ttl: Seconds a fetched token stays cached
    """

    enabled: bool = False
    kc_user: Optional[str] = None
    kc_pass: Optional[str] = None
    bridge_id: Optional[str] = None
    token_user: Optional[str] = None
    token_pass: Optional[str] = None
    token_cache_ttl: Optional[float] = None
    auth_base_url: str = DEFAULT_AUTH_BASE_URL
    token_path: str = DEFAULT_TOKEN_PATH
    api_base_url: str = DEFAULT_API_BASE_URL
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    read_timeout: float = DEFAULT_READ_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from ``OB_*`` environment variables."""
        env = os.environ if environ is None else environ

        connect_timeout = _as_float("OB_CONNECT_TIMEOUT", env.get("OB_CONNECT_TIMEOUT"))
        read_timeout = _as_float("OB_API_TIMEOUT", env.get("OB_API_TIMEOUT"))

        return cls(
            enabled=_as_bool(env.get("OB_ENABLED")),
            kc_user=env.get("OB_KC_USER"),
            kc_pass=env.get("OB_KC_PASS"),
            bridge_id=env.get("OB_BRIDGE_UUID"),
            token_user=env.get("OB_TOKEN_USER"),
            token_pass=env.get("OB_TOKEN_PASS"),
            token_cache_ttl=_as_float("OB_TOKEN_CACHE_TTL", env.get("OB_TOKEN_CACHE_TTL")),
            auth_base_url=env.get("OB_AUTH_BASE_URL", DEFAULT_AUTH_BASE_URL).rstrip("/"),
            token_path=env.get("OB_TOKEN_PATH", DEFAULT_TOKEN_PATH),
            api_base_url=env.get("OB_API_BASE_URL", DEFAULT_API_BASE_URL).rstrip("/"),
            connect_timeout=(
                DEFAULT_CONNECT_TIMEOUT if connect_timeout is None else connect_timeout
            ),
            read_timeout=DEFAULT_READ_TIMEOUT if read_timeout is None else read_timeout,
        )

    def validate(self) -> None:
        """Check that an enabled configuration can reach the bridge.

        :raises ConfigurationError: If a required value is missing
        """
        if not self.enabled:
            return

        missing = [
            name
            for name in ("bridge_id", "kc_user", "kc_pass", "token_user", "token_pass")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(
                f"Bridge integration enabled but not configured: {', '.join(missing)}"
            )
        if self.token_cache_ttl is None or self.token_cache_ttl < 0:
            raise ConfigurationError(
                "OB_TOKEN_CACHE_TTL must be set to a non-negative number of seconds"
            )

    @property
    def token_url(self) -> str:
        return f"{self.auth_base_url}{self.token_path}"

    def get_api_timeout(self) -> Tuple[float, float]:
        """Return the (connect, read) timeout tuple for bridge HTTP calls."""
        return self.connect_timeout, self.read_timeout

    def set_enabled(self, enabled: bool) -> None:
        self.enabled = enabled

    def set_bridge_id(self, bridge_id: str) -> None:
        self.bridge_id = bridge_id
