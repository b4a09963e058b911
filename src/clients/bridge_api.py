"""HTTP client for the event-bridge management API."""

from typing import Any, Dict
from urllib.parse import quote

import requests

from src.config.settings import Settings
from src.utils.errors import UpstreamMetadataError
from src.utils.logging import get_logger

logger = get_logger("bridge_api")


class BridgeApiService:
    """Reads bridge metadata from ``/api/v1/bridges``."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def get_bridge_by_id(self, bridge_id: str, token: str) -> Dict[str, Any]:
        """Fetch the metadata of one bridge.

        :param bridge_id: Identifier of the bridge
        :param token: ``Authorization`` header value, ``"Bearer ..."``
        :return: Bridge metadata with at least ``id``, ``endpoint`` and ``name``
        :raises UpstreamMetadataError: On transport errors, non-success status
            or a body that is not a JSON object
        """
        url = f"{self._settings.api_base_url}/api/v1/bridges/{quote(bridge_id, safe='')}"
        logger.debug(f"Fetching bridge metadata from {url}")

        try:
            response = requests.get(
                url,
                headers={"Authorization": token, "Accept": "application/json"},
                timeout=self._settings.get_api_timeout(),
            )
        except Exception as exc:
            raise UpstreamMetadataError(
                f"Bridge metadata request for {bridge_id} failed: {exc}"
            ) from exc

        try:
            response.raise_for_status()
            payload = response.json()
        except Exception as exc:
            raise UpstreamMetadataError(
                f"Failed to read metadata for bridge {bridge_id}: {exc}"
            ) from exc

        if not isinstance(payload, dict):
            raise UpstreamMetadataError(
                f"Bridge metadata for {bridge_id} is not an object"
            )

        return payload
