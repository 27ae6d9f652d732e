"""Unit tests for huepresets/bridge/pairing.py (discovery and link-button pairing)."""

import json

import httpx
import pytest

from huepresets.bridge.pairing import discover_bridge, pair_with_bridge, request_app_key
from huepresets.exceptions import BridgeClientError, PairingError

LINK_BUTTON_ERROR = [
    {"error": {"type": 101, "address": "", "description": "link button not pressed"}}
]
SUCCESS = [{"success": {"username": "abcdef0123456789"}}]


def _transport(*responses: httpx.Response, seen: list | None = None) -> httpx.MockTransport:
    queue = list(responses)

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return queue.pop(0) if len(queue) > 1 else queue[0]

    return httpx.MockTransport(handler)


class TestDiscoverBridge:
    @pytest.mark.asyncio
    async def test_returns_first_bridge(self):
        transport = _transport(
            httpx.Response(
                200,
                json=[
                    {"id": "001788fffe000001", "internalipaddress": "192.168.1.20", "port": 443},
                    {"id": "001788fffe000002", "internalipaddress": "192.168.1.21"},
                ],
            )
        )

        bridge = await discover_bridge("https://discovery.meethue.com", transport=transport)

        assert bridge.id == "001788fffe000001"
        assert bridge.internalipaddress == "192.168.1.20"

    @pytest.mark.asyncio
    async def test_no_bridges(self):
        transport = _transport(httpx.Response(200, json=[]))

        with pytest.raises(BridgeClientError, match="No Hue Bridge found"):
            await discover_bridge("https://discovery.meethue.com", transport=transport)

    @pytest.mark.asyncio
    async def test_http_error(self):
        transport = _transport(httpx.Response(429))

        with pytest.raises(BridgeClientError, match="Discovery failed: Too Many Requests"):
            await discover_bridge("https://discovery.meethue.com", transport=transport)


class TestRequestAppKey:
    @pytest.mark.asyncio
    async def test_success(self):
        seen: list[httpx.Request] = []
        transport = _transport(httpx.Response(200, json=SUCCESS), seen=seen)

        key = await request_app_key("192.168.1.20", "hue-presets#desk", transport=transport)

        assert key == "abcdef0123456789"
        assert str(seen[0].url) == "http://192.168.1.20/api"
        assert json.loads(seen[0].content) == {"devicetype": "hue-presets#desk"}

    @pytest.mark.asyncio
    async def test_link_button_error_is_retryable(self):
        transport = _transport(httpx.Response(200, json=LINK_BUTTON_ERROR))

        with pytest.raises(PairingError) as exc_info:
            await request_app_key("192.168.1.20", "hue-presets#desk", transport=transport)

        assert exc_info.value.error_type == 101
        assert exc_info.value.retryable is True

    @pytest.mark.asyncio
    async def test_other_error_is_not_retryable(self):
        body = [{"error": {"type": 7, "description": "invalid value for parameter"}}]
        transport = _transport(httpx.Response(200, json=body))

        with pytest.raises(PairingError, match="invalid value") as exc_info:
            await request_app_key("192.168.1.20", "x", transport=transport)

        assert exc_info.value.retryable is False

    @pytest.mark.asyncio
    async def test_unexpected_response(self):
        transport = _transport(httpx.Response(200, json=[{}]))

        with pytest.raises(PairingError, match="Unexpected response from bridge"):
            await request_app_key("192.168.1.20", "x", transport=transport)

    @pytest.mark.asyncio
    async def test_http_failure(self):
        transport = _transport(httpx.Response(500))

        with pytest.raises(BridgeClientError, match="Authentication request failed"):
            await request_app_key("192.168.1.20", "x", transport=transport)


class TestPairWithBridge:
    @pytest.mark.asyncio
    async def test_retries_until_button_pressed(self):
        retries: list[tuple[int, int]] = []
        transport = _transport(
            httpx.Response(200, json=LINK_BUTTON_ERROR),
            httpx.Response(200, json=SUCCESS),
        )

        key = await pair_with_bridge(
            "192.168.1.20",
            "hue-presets#desk",
            on_retry=lambda attempt, attempts: retries.append((attempt, attempts)),
            transport=transport,
        )

        assert key == "abcdef0123456789"
        assert retries == [(1, 3)]

    @pytest.mark.asyncio
    async def test_gives_up_after_attempts(self):
        seen: list[httpx.Request] = []
        retries: list[int] = []
        transport = _transport(httpx.Response(200, json=LINK_BUTTON_ERROR), seen=seen)

        with pytest.raises(PairingError, match="after multiple attempts"):
            await pair_with_bridge(
                "192.168.1.20",
                "x",
                attempts=3,
                on_retry=lambda attempt, _attempts: retries.append(attempt),
                transport=transport,
            )

        assert len(seen) == 3
        assert retries == [1, 2]

    @pytest.mark.asyncio
    async def test_fatal_error_stops_immediately(self):
        seen: list[httpx.Request] = []
        body = [{"error": {"type": 3, "description": "resource not available"}}]
        transport = _transport(httpx.Response(200, json=body), seen=seen)

        with pytest.raises(PairingError, match="resource not available"):
            await pair_with_bridge("192.168.1.20", "x", transport=transport)

        assert len(seen) == 1
