"""Event-bridge discovery and authentication."""

from .helper import BridgeHelper, create_bridge_helper, get_bridge_helper
from .resolver import BridgeResolver, normalize_endpoint

__all__ = [
    "BridgeHelper",
    "BridgeResolver",
    "create_bridge_helper",
    "get_bridge_helper",
    "normalize_endpoint",
]
