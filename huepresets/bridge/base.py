"""Base bridge client with HTTP request handling and connection management.

Provides the core HTTP client functionality: configuration, a pooled
``httpx.AsyncClient`` and uniform error translation.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import BaseModel, Field

from huepresets.exceptions import BridgeClientError, ConfigurationError
from huepresets.settings import Settings, get_settings

logger = logging.getLogger(__name__)

AUTH_HEADER = "hue-application-key"


class BridgeClientConfig(BaseModel):
    """Configuration for the bridge client."""

    bridge_ip: str = Field(..., description="Bridge address on the local network")
    api_token: str = Field(..., description="Application key from pairing")
    timeout: float = Field(default=10.0, description="Request timeout in seconds")
    verify_tls: bool = Field(default=False, description="Verify the bridge certificate")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> BridgeClientConfig:
        """Build client config from settings.

        Raises:
            ConfigurationError: If the bridge address or token is missing
        """
        settings = settings or get_settings()
        token = settings.hue_api_token.get_secret_value() if settings.hue_api_token else ""
        if not settings.hue_bridge_ip or not token:
            raise ConfigurationError(
                "HUE_BRIDGE_IP and HUE_API_TOKEN must be set (run `hue-presets setup`)"
            )
        return cls(
            bridge_ip=settings.hue_bridge_ip,
            api_token=token,
            timeout=settings.request_timeout,
            verify_tls=settings.verify_tls,
        )


class BaseBridgeClient:
    """Base HTTP client for the Hue CLIP v2 API.

    Handles connection management and HTTP requests.
    Resource-specific functionality is added via mixins.
    """

    def __init__(
        self,
        config: BridgeClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize base bridge client.

        Args:
            config: Optional configuration (uses settings if not provided)
            transport: Optional httpx transport, mainly for tests
        """
        self.config = config or BridgeClientConfig.from_settings()
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return f"https://{self.config.bridge_ip}"

    def _get_http_client(self) -> httpx.AsyncClient:
        """Get or create a shared httpx.AsyncClient with connection pooling.

        The client is created lazily on first use so it binds to the
        running event loop.
        """
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self.base_url,
                headers={AUTH_HEADER: self.config.api_token},
                timeout=self.config.timeout,
                verify=self.config.verify_tls,
                transport=self._transport,
            )
        return self._http_client

    async def close(self) -> None:
        """Close the shared HTTP client and release connections."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def _request(
        self,
        method: str,
        path: str,
        operation: str,
        json: dict | None = None,
    ) -> Any:
        """Make a request to the bridge.

        Args:
            method: HTTP method
            path: API path (without base URL)
            operation: Name used in errors and logs
            json: JSON body

        Returns:
            Response JSON ({} for an empty body)

        Raises:
            BridgeClientError: On transport failure or a non-2xx status
        """
        client = self._get_http_client()
        try:
            response = await client.request(method, path, json=json)
        except httpx.TimeoutException as e:
            raise BridgeClientError(f"Timeout: {e}", operation) from e
        except httpx.HTTPError as e:
            raise BridgeClientError(f"{type(e).__name__}: {e}", operation) from e

        if not response.is_success:
            detail = response.text or response.reason_phrase
            logger.debug("%s %s -> HTTP %d", method, path, response.status_code)
            raise BridgeClientError(
                f"HTTP {response.status_code}: {detail}",
                operation,
                status_code=response.status_code,
            )

        return response.json() if response.content else {}

    async def _list_resource(self, resource: str) -> list[dict[str, Any]]:
        """GET a CLIP v2 collection and unwrap its ``data`` array."""
        payload = await self._request("GET", f"/clip/v2/resource/{resource}", f"list_{resource}")
        data = payload.get("data") if isinstance(payload, dict) else None
        return data if isinstance(data, list) else []
