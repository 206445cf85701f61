"""Exceptions raised by hue-bridge-client."""

from __future__ import annotations

from typing import Optional


class BridgeError(Exception):
    """Base error for all bridge client failures."""


class ConfigError(BridgeError):
    """Configuration is missing a required value or could not be loaded."""


class TransportError(BridgeError):
    """The exchange with the bridge failed or was rejected."""


class BridgeConnectionError(TransportError):
    """The bridge could not be reached."""


class BridgeTimeoutError(TransportError):
    """The bridge did not answer before the request deadline."""


class BridgeHTTPError(TransportError):
    """The bridge answered with a non-success HTTP status."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class BridgeApiError(TransportError):
    """The bridge answered with an error object in its JSON payload.

    Attributes:
        type: Bridge error type (1 is "unauthorized user", 101 is
            "link button not pressed")
        address: Resource address the error refers to
        description: Human readable description from the bridge
    """

    UNAUTHORIZED_USER = 1
    LINK_BUTTON_NOT_PRESSED = 101

    def __init__(self, type: int, description: str, address: Optional[str] = None):
        super().__init__(f"{description} (type {type})")
        self.type = type
        self.address = address
        self.description = description


class DecodeError(BridgeError):
    """The bridge answered with a payload of an unexpected shape."""


class UserNotFoundError(BridgeError):
    """The requested user is not in the bridge whitelist."""

    def __init__(self, username: str):
        super().__init__(f"User not found: {username}")
        self.username = username
