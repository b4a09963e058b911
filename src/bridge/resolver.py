"""Lazy, memoized resolution of the configured event bridge."""

from __future__ import annotations

import threading
from typing import Optional

from pydantic import ValidationError

from src.auth.token_provider import TokenProvider
from src.clients.bridge_api import BridgeApiService
from src.config.settings import Settings
from src.models import DISABLED_BRIDGE, Bridge, BridgeResponse
from src.utils.errors import ConfigurationError, UpstreamMetadataError
from src.utils.logging import get_logger

logger = get_logger("bridge_resolver")

EVENTS_SUFFIX = "/events"


def normalize_endpoint(endpoint: str) -> str:
    """Strip a trailing ``/events`` segment from a bridge endpoint.

    The management API is moving to endpoints that end in ``/events``;
    callers append their own path, so the segment is removed.
    """
    if endpoint.endswith(EVENTS_SUFFIX):
        return endpoint[: endpoint.rfind("/")]
    return endpoint


class BridgeResolver:
    """Resolve the bridge once and hand out the memoized value afterwards.

    The first resolution is serialized with a lock, so concurrent first
    callers trigger one token fetch and one metadata request between them.
    Failures propagate to the caller and leave nothing memoized.
    """

    def __init__(
        self,
        settings: Settings,
        token_provider: TokenProvider,
        api_service: BridgeApiService,
    ) -> None:
        self._settings = settings
        self._token_provider = token_provider
        self._api_service = api_service
        self._lock = threading.Lock()
        # Set only under the lock; a non-None value means resolved.
        self._bridge: Optional[Bridge] = None

    @property
    def resolved(self) -> bool:
        return self._bridge is not None

    def resolve_bridge(self) -> Bridge:
        """Return the configured bridge, fetching it on first use.

        :return: Resolved bridge, or the disabled sentinel
        :raises UpstreamAuthError: If no token could be obtained
        :raises UpstreamMetadataError: If the metadata request fails or the
            response lacks ``id``, ``endpoint`` or ``name``
        """
        if not self._settings.enabled:
            return DISABLED_BRIDGE

        bridge = self._bridge
        if bridge is not None:
            return bridge

        with self._lock:
            bridge = self._bridge
            if bridge is None:
                bridge = self._fetch_bridge()
                self._bridge = bridge
        return bridge

    def _fetch_bridge(self) -> Bridge:
        bridge_id = self._settings.bridge_id
        if not bridge_id:
            raise ConfigurationError("No bridge id configured")

        logger.info(f"Resolving bridge {bridge_id}")
        token = self._token_provider.fetch_token()
        payload = self._api_service.get_bridge_by_id(bridge_id, token)

        try:
            data = BridgeResponse.model_validate(payload)
        except ValidationError as exc:
            raise UpstreamMetadataError(
                f"Incomplete metadata for bridge {bridge_id}: {exc}"
            ) from exc

        bridge = Bridge(
            id=data.id,
            endpoint=normalize_endpoint(data.endpoint),
            name=data.name,
        )
        logger.info(f"Resolved bridge {bridge.id} ({bridge.name}) at {bridge.endpoint}")
        return bridge

    def reset(self) -> None:
        """Forget the memoized bridge; the next call resolves again."""
        with self._lock:
            self._bridge = None
