"""Bridge configuration commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..config import ClientConfig
from ..models import Bridge, Portal
from . import Command, Request


@dataclass(frozen=True)
class Ping(Command):
    """Check that the bridge answers. Needs no credential."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", "/api/config")


@dataclass(frozen=True)
class GetBridge(Command):
    """Fetch the bridge configuration."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", self.api_path(config, "/config"))

    def decode(self, payload: Any) -> Bridge:
        return Bridge.from_dict(payload)


@dataclass(frozen=True)
class SaveBridge(Command):
    """Persist the writable fields of a bridge configuration."""

    bridge: Bridge

    def build_request(self, config: ClientConfig) -> Request:
        return Request("PUT", self.api_path(config, "/config"), self.bridge.attributes_payload())


@dataclass(frozen=True)
class GetPortal(Command):
    """Fetch the remote portal state."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", self.api_path(config, "/config"))

    def decode(self, payload: Any) -> Portal:
        return Portal.from_dict(payload["portalstate"])


@dataclass(frozen=True)
class GetTimeZones(Command):
    """List the time zones supported by the bridge."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", self.api_path(config, "/info/timezones"))

    def decode(self, payload: Any) -> list[str]:
        if not isinstance(payload, list):
            raise TypeError(f"expected a list of time zones, got {type(payload).__name__}")
        return [str(zone) for zone in payload]
