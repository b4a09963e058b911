"""Shared Pydantic models for the bridge adapter.

This module contains the value objects handed to callers (``Bridge`` and
``AuthToken``), the sentinel instances used while the integration is
disabled or a token could not be obtained, and the response models used to
validate what the upstream endpoints return.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict


class Bridge(BaseModel):
    """Identity and network endpoint of an event bridge.

    :param id: Bridge identifier
    :type id: str
    :param endpoint: URL events are sent to
    :type endpoint: str
    :param name: Human readable bridge name
    :type name: str
    """

    model_config = ConfigDict(frozen=True)

    id: str
    endpoint: str
    name: str


class AuthToken(BaseModel):
    """Authorization header value for bridge calls.

    Holds either ``"Bearer <token>"`` or one of the sentinel strings.

    :param value: Header value
    :type value: str
    """

    model_config = ConfigDict(frozen=True)

    value: str

    def headers(self) -> Dict[str, str]:
        """Return the value as an ``Authorization`` header mapping."""
        return {"Authorization": self.value}


# Response models
class BridgeResponse(BaseModel):
    """Bridge metadata as returned by the management API."""

    model_config = ConfigDict(extra="ignore")

    id: str
    endpoint: str
    name: str


class TokenResponse(BaseModel):
    """Password-grant response from the token endpoint.

    Only ``access_token`` is required; ``expires_in``, ``token_type`` and
    friends are accepted and ignored.
    """

    model_config = ConfigDict(extra="ignore")

    access_token: str


DISABLED_BRIDGE = Bridge(
    id="- OB not enabled -", endpoint="http://does.not.exist", name="no name"
)
DISABLED_TOKEN = AuthToken(value="- OB not enabled token -")
NO_TOKEN = AuthToken(value="- No token - obtained -")
