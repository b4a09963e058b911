"""Bearer token provider for the event bridge."""

from __future__ import annotations

import base64
from typing import Optional
from urllib.parse import urlencode

from pydantic import ValidationError

from src.clients.bridge_auth import BridgeAuthService
from src.config.settings import Settings
from src.models import DISABLED_TOKEN, NO_TOKEN, AuthToken, TokenResponse
from src.utils.cache import KeyedCache
from src.utils.errors import ConfigurationError, UpstreamAuthError
from src.utils.logging import get_logger

logger = get_logger("token_provider")

TOKEN_CACHE_KEY = "kc-cache:fetch_token"


class TokenProvider:
    """Obtain a bearer token with the password grant and keep it cached.

    ``fetch_token`` raises on failure and is what bridge resolution uses.
    ``get_cached_auth_token`` always returns a value, degrading to a
    sentinel token when the integration is off or the fetch fails.
    """

    def __init__(
        self,
        settings: Settings,
        auth_service: BridgeAuthService,
        cache: Optional[KeyedCache] = None,
    ) -> None:
        self._settings = settings
        self._auth_service = auth_service
        self._cache = cache if cache is not None else KeyedCache()

    def _basic_auth_header(self) -> str:
        raw = f"{self._settings.kc_user}:{self._settings.kc_pass}"
        encoded = base64.b64encode(raw.encode("utf-8")).decode("utf-8")
        return f"Basic {encoded}"

    def _build_body(self) -> str:
        return urlencode(
            [
                ("username", self._settings.token_user or ""),
                ("password", self._settings.token_pass or ""),
                ("grant_type", "password"),
            ]
        )

    def _token_ttl(self) -> float:
        ttl = self._settings.token_cache_ttl
        if ttl is None:
            raise ConfigurationError("Token cache TTL is not configured")
        return ttl

    def _request_token(self) -> str:
        payload = self._auth_service.get_token_struct(
            self._build_body(), self._basic_auth_header()
        )
        try:
            token = TokenResponse.model_validate(payload)
        except ValidationError as exc:
            raise UpstreamAuthError(
                "Token response did not include an access_token"
            ) from exc

        logger.debug("Obtained a new bridge token")
        return f"Bearer {token.access_token}"

    def fetch_token(self) -> str:
        """Return ``"Bearer <access_token>"``, from cache when still valid.

        :raises UpstreamAuthError: If the token endpoint fails
        :raises ConfigurationError: If no cache TTL is configured
        """
        return self._cache.get_or_compute(
            TOKEN_CACHE_KEY, self._token_ttl(), self._request_token
        )

    def get_cached_auth_token(self) -> AuthToken:
        """Return a token for generic callers without ever raising."""
        if not self._settings.enabled:
            return DISABLED_TOKEN

        try:
            return AuthToken(value=self.fetch_token())
        except Exception as exc:
            logger.warning(f"Failed to get an auth token: {exc}")
            return NO_TOKEN

    def invalidate(self) -> None:
        """Drop the cached token so the next call fetches a fresh one."""
        self._cache.invalidate(TOKEN_CACHE_KEY)
