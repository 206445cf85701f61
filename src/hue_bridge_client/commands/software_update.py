"""Software update commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..config import ClientConfig
from ..models import SoftwareUpdate
from . import Command, Request


@dataclass(frozen=True)
class GetSoftwareUpdate(Command):
    """Fetch the software update status."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", self.api_path(config, "/config"))

    def decode(self, payload: Any) -> SoftwareUpdate:
        return SoftwareUpdate.from_dict(payload["swupdate"])


@dataclass(frozen=True)
class CheckForSoftwareUpdates(Command):
    """Ask the bridge to check the portal for updates."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request(
            "PUT", self.api_path(config, "/config"), {"swupdate": {"checkforupdate": True}}
        )


@dataclass(frozen=True)
class DisableInstallNotification(Command):
    """Turn off the notification shown after an update is installed."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("PUT", self.api_path(config, "/config"), {"swupdate": {"notify": False}})


@dataclass(frozen=True)
class InstallSoftwareUpdates(Command):
    """Start installing downloaded updates."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request(
            "PUT",
            self.api_path(config, "/config"),
            {"swupdate": {"updatestate": SoftwareUpdate.STATE_INSTALLING}},
        )
