"""hue-bridge-client - asyncio client for Hue-style lighting bridges.

This package provides a command-based client for the bridge REST API:
lights, users, bridge configuration and software updates.
"""

__version__ = "1.0.0"
__author__ = "mccartyp"

from .client import Client
from .config import ClientConfig
from .exceptions import (
    BridgeApiError,
    BridgeConnectionError,
    BridgeError,
    BridgeHTTPError,
    BridgeTimeoutError,
    ConfigError,
    DecodeError,
    TransportError,
    UserNotFoundError,
)
from .models import Bridge, Light, LightState, Portal, SoftwareUpdate, User
from .transport import HttpTransport, Transport

__all__ = [
    "Client",
    "ClientConfig",
    "Transport",
    "HttpTransport",
    "Bridge",
    "Light",
    "LightState",
    "Portal",
    "SoftwareUpdate",
    "User",
    "BridgeError",
    "ConfigError",
    "TransportError",
    "BridgeConnectionError",
    "BridgeTimeoutError",
    "BridgeHTTPError",
    "BridgeApiError",
    "DecodeError",
    "UserNotFoundError",
    "__version__",
]
