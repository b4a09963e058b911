"""Adapter exposing the current bridge and its auth token to callers."""

from __future__ import annotations

import threading
from typing import Optional

from src.auth.token_provider import TokenProvider
from src.bridge.resolver import BridgeResolver
from src.clients.bridge_api import BridgeApiService
from src.clients.bridge_auth import BridgeAuthService
from src.config.settings import Settings
from src.models import AuthToken, Bridge
from src.utils.cache import KeyedCache
from src.utils.logging import get_logger

logger = get_logger("bridge_helper")


class BridgeHelper:
    """Discovery and authentication against one event bridge.

    :param settings: Adapter configuration
    :param auth_service: Client for the token endpoint
    :param api_service: Client for the bridge management API
    :param cache: Token cache, a fresh ``KeyedCache`` when omitted
    """

    def __init__(
        self,
        settings: Settings,
        auth_service: BridgeAuthService,
        api_service: BridgeApiService,
        cache: Optional[KeyedCache] = None,
    ) -> None:
        self.settings = settings
        self.token_provider = TokenProvider(settings, auth_service, cache)
        self.resolver = BridgeResolver(settings, self.token_provider, api_service)

    def get_bridge(self) -> Bridge:
        """Return the bridge, resolving it on first use. May raise."""
        return self.resolver.resolve_bridge()

    def get_auth_token(self) -> AuthToken:
        """Return an auth token. Never raises."""
        return self.token_provider.get_cached_auth_token()

    def set_enabled(self, enabled: bool) -> None:
        self.settings.set_enabled(enabled)

    def set_bridge_id(self, bridge_id: str) -> None:
        """Point the adapter at another bridge.

        A bridge memoized for the previous id is dropped.
        """
        if bridge_id != self.settings.bridge_id:
            self.settings.set_bridge_id(bridge_id)
            self.resolver.reset()

    def reset(self) -> None:
        """Forget the resolved bridge and the cached token."""
        self.resolver.reset()
        self.token_provider.invalidate()


def create_bridge_helper(settings: Optional[Settings] = None) -> BridgeHelper:
    """Build a helper with HTTP clients for the given (or environment) settings."""
    settings = settings or Settings.from_env()
    settings.validate()
    if not settings.enabled:
        logger.info("Bridge integration disabled, serving placeholder values")
    return BridgeHelper(
        settings,
        BridgeAuthService(settings),
        BridgeApiService(settings),
    )


_HELPER_INSTANCE: Optional[BridgeHelper] = None
_HELPER_LOCK = threading.Lock()


def get_bridge_helper() -> BridgeHelper:
    """Return the shared ``BridgeHelper`` singleton."""
    global _HELPER_INSTANCE
    if _HELPER_INSTANCE is None:
        with _HELPER_LOCK:
            if _HELPER_INSTANCE is None:
                _HELPER_INSTANCE = create_bridge_helper()
    return _HELPER_INSTANCE
