"""Exception types raised by the bridge adapter.

Disabled mode is not represented here: it produces sentinel values and
never surfaces as a failure.
"""


class BridgeAdapterError(RuntimeError):
    """Base class for bridge adapter failures."""


class ConfigurationError(BridgeAdapterError):
    """Raised when the adapter settings are incomplete or invalid."""


class UpstreamAuthError(BridgeAdapterError):
    """Raised when a bearer token cannot be obtained from the token endpoint."""


class UpstreamMetadataError(BridgeAdapterError):
    """Raised when bridge metadata cannot be fetched or parsed."""


__all__ = [
    "BridgeAdapterError",
    "ConfigurationError",
    "UpstreamAuthError",
    "UpstreamMetadataError",
]
