"""HTTP collaborators of the bridge adapter."""

from .bridge_api import BridgeApiService
from .bridge_auth import BridgeAuthService

__all__ = ["BridgeApiService", "BridgeAuthService"]
