"""Hue bridge integration.

Provides the CLIP v2 REST client used by the interactive UI and the
discovery/pairing helpers used by the setup command.
"""

from huepresets.bridge.base import BaseBridgeClient, BridgeClientConfig
from huepresets.bridge.client import BridgeClient, BridgeGateway
from huepresets.bridge.pairing import discover_bridge, pair_with_bridge, request_app_key

__all__ = [
    "BaseBridgeClient",
    "BridgeClient",
    "BridgeClientConfig",
    "BridgeGateway",
    "discover_bridge",
    "pair_with_bridge",
    "request_app_key",
]
