"""Bridge discovery and link-button pairing.

Used once by ``hue-presets setup`` to find the bridge on the local
network and obtain an application key for it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx
from pydantic import BaseModel

from huepresets.exceptions import BridgeClientError, PairingError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class DiscoveredBridge(BaseModel):
    """One entry of the discovery endpoint's response."""

    id: str
    internalipaddress: str
    port: int | None = None


async def discover_bridge(
    discovery_url: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DiscoveredBridge:
    """Ask the discovery endpoint for bridges on this network.

    Returns:
        The first bridge reported

    Raises:
        BridgeClientError: If discovery fails or finds nothing
    """
    try:
        async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT, transport=transport) as client:
            response = await client.get(discovery_url)
    except httpx.HTTPError as e:
        raise BridgeClientError(f"Discovery failed: {e}", "discover") from e

    if not response.is_success:
        raise BridgeClientError(
            f"Discovery failed: {response.reason_phrase}",
            "discover",
            status_code=response.status_code,
        )

    bridges = response.json()
    if not bridges:
        raise BridgeClientError("No Hue Bridge found on your network", "discover")

    bridge = DiscoveredBridge.model_validate(bridges[0])
    logger.info("Discovered bridge %s at %s", bridge.id, bridge.internalipaddress)
    return bridge


async def request_app_key(
    bridge_ip: str,
    device_type: str,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Make one pairing request.

    The bridge only grants a key within ~30s of its link button being
    pressed; otherwise it answers with error type 101.

    Raises:
        PairingError: With the bridge's error type when it refuses
        BridgeClientError: If the request itself fails
    """
    try:
        async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT, transport=transport) as client:
            response = await client.post(
                f"http://{bridge_ip}/api",
                json={"devicetype": device_type},
            )
    except httpx.HTTPError as e:
        raise BridgeClientError(f"Authentication request failed: {e}", "pair") from e

    if not response.is_success:
        raise BridgeClientError(
            f"Authentication request failed: {response.reason_phrase}",
            "pair",
            status_code=response.status_code,
        )

    payload: Any = response.json()
    result = payload[0] if isinstance(payload, list) and payload else {}

    error = result.get("error")
    if error:
        description = error.get("description") or "Authentication failed"
        raise PairingError(description, error_type=error.get("type"), description=description)

    username = (result.get("success") or {}).get("username")
    if username:
        return username

    raise PairingError("Unexpected response from bridge")


async def pair_with_bridge(
    bridge_ip: str,
    device_type: str,
    *,
    attempts: int = 3,
    on_retry: Callable[[int, int], None] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Pair with the bridge, retrying while the link button is not pressed.

    Args:
        bridge_ip: Bridge address
        device_type: ``app#device`` identifier shown in the Hue app
        attempts: Total number of pairing requests allowed
        on_retry: Called with (attempt, attempts) before each retry,
            typically to prompt the operator to press the button again
        transport: Optional httpx transport, mainly for tests

    Returns:
        The application key

    Raises:
        PairingError: On a non-retryable bridge error or when attempts run out
    """
    for attempt in range(1, attempts + 1):
        try:
            return await request_app_key(bridge_ip, device_type, transport=transport)
        except PairingError as e:
            if not e.retryable:
                raise
            logger.info("Link button not pressed (%d/%d)", attempt, attempts)
            if attempt < attempts and on_retry is not None:
                on_retry(attempt, attempts)

    raise PairingError("Failed to authenticate after multiple attempts. Please try again.")
