"""Shared data models."""

from .base_models import (
    DISABLED_BRIDGE,
    DISABLED_TOKEN,
    NO_TOKEN,
    AuthToken,
    Bridge,
    BridgeResponse,
    TokenResponse,
)

__all__ = [
    "AuthToken",
    "Bridge",
    "BridgeResponse",
    "TokenResponse",
    "DISABLED_BRIDGE",
    "DISABLED_TOKEN",
    "NO_TOKEN",
]
