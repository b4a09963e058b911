"""HTTP client for the event-bridge token endpoint."""

from typing import Any, Dict

import requests

from src.config.settings import Settings
from src.utils.errors import UpstreamAuthError
from src.utils.logging import get_logger

logger = get_logger("bridge_auth")


class BridgeAuthService:
    """Issues password-grant requests against the Keycloak token endpoint."""

    def __init__(self, settings: Settings):
        self._settings = settings

    def get_token_struct(self, body: str, auth: str) -> Dict[str, Any]:
        """Post a form-encoded grant and return the decoded JSON response.

        :param body: ``username=...&password=...&grant_type=password``
        :param auth: Value for the ``Authorization`` header
        :return: Token response body
        :raises UpstreamAuthError: On transport errors, non-success status
            or a body that is not a JSON object
        """
        url = self._settings.token_url
        logger.debug(f"Requesting bridge token from {url}")

        try:
            response = requests.post(
                url,
                data=body,
                headers={
                    "Authorization": auth,
                    "Content-Type": "application/x-www-form-urlencoded",
                    "Accept": "application/json",
                },
                timeout=self._settings.get_api_timeout(),
            )
        except Exception as exc:
            raise UpstreamAuthError(f"Token request to {url} failed: {exc}") from exc

        try:
            response.raise_for_status()
            payload = response.json()
        except Exception as exc:
            raise UpstreamAuthError(f"Failed to obtain bridge token: {exc}") from exc

        if not isinstance(payload, dict):
            raise UpstreamAuthError("Token endpoint returned an unexpected body")

        return payload
