"""hue-presets exception hierarchy.

Base exceptions for all application layers with correlation ID support.

Usage:
    from huepresets.exceptions import BridgeClientError

    try:
        await client.activate_scene(scene.id, scene.kind)
    except BridgeClientError as e:
        logger.warning("Activation failed (%s): %s", e.correlation_id, e)
"""

import uuid
from typing import Any

# Hue API error type returned while the bridge link button is not pressed
LINK_BUTTON_NOT_PRESSED = 101


class HuePresetsError(Exception):
    """Base exception for all hue-presets errors.

    Carries a correlation_id for tracing errors across layers.
    """

    def __init__(self, message: str, *, correlation_id: str | None = None):
        self.correlation_id = correlation_id or str(uuid.uuid4())
        super().__init__(message)


class ConfigurationError(HuePresetsError):
    """Errors from application configuration."""

    pass


class BridgeClientError(HuePresetsError):
    """Errors from Hue bridge client operations.

    Raised when bridge REST calls fail, with the operation name and
    detail context for diagnostics.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
        *,
        status_code: int | None = None,
        correlation_id: str | None = None,
    ):
        self.operation = operation
        self.details = details or {}
        self.status_code = status_code
        super().__init__(message, correlation_id=correlation_id)


class PairingError(HuePresetsError):
    """Errors from the link-button pairing handshake."""

    def __init__(
        self,
        message: str,
        *,
        error_type: int | None = None,
        description: str | None = None,
        **kwargs,
    ):
        self.error_type = error_type
        self.description = description
        super().__init__(message, **kwargs)

    @property
    def retryable(self) -> bool:
        """Only an unpressed link button is worth another attempt."""
        return self.error_type == LINK_BUTTON_NOT_PRESSED
