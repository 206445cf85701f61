"""Light commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from ..config import ClientConfig
from ..models import Light
from . import Command, Request


def _light_id(light: Union[str, int, Light]) -> str:
    return light.id if isinstance(light, Light) else str(light)


@dataclass(frozen=True)
class StartLightScan(Command):
    """Start searching for new lights."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("POST", self.api_path(config, "/lights"))


@dataclass(frozen=True)
class GetNewLights(Command):
    """List lights found by the last scan."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", self.api_path(config, "/lights/new"))

    def decode(self, payload: Any) -> list[Light]:
        # "lastscan" sits next to the light entries
        return [
            Light.from_dict(light_id, entry)
            for light_id, entry in payload.items()
            if light_id != "lastscan"
        ]


@dataclass(frozen=True)
class GetLights(Command):
    """List all lights."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", self.api_path(config, "/lights"))

    def decode(self, payload: Any) -> list[Light]:
        return [Light.from_dict(light_id, entry) for light_id, entry in payload.items()]


@dataclass(frozen=True)
class GetLight(Command):
    """Fetch a single light."""

    light: Union[str, int, Light]

    def build_request(self, config: ClientConfig) -> Request:
        light_id = self.segment(_light_id(self.light))
        return Request("GET", self.api_path(config, f"/lights/{light_id}"))

    def decode(self, payload: Any) -> Light:
        return Light.from_dict(_light_id(self.light), payload)


@dataclass(frozen=True)
class SaveLight(Command):
    """Persist light attributes (name)."""

    light: Light

    def __post_init__(self) -> None:
        if not self.light.attributes_payload():
            raise ValueError(f"Light {self.light.id} has no attributes to save")

    def build_request(self, config: ClientConfig) -> Request:
        return Request(
            "PUT",
            self.api_path(config, f"/lights/{self.segment(self.light.id)}"),
            self.light.attributes_payload(),
        )


@dataclass(frozen=True)
class SaveLightState(Command):
    """Persist light state (on, brightness, color)."""

    light: Light

    def __post_init__(self) -> None:
        if not self.light.state_payload():
            raise ValueError(f"Light {self.light.id} has no state to save")

    def build_request(self, config: ClientConfig) -> Request:
        return Request(
            "PUT",
            self.api_path(config, f"/lights/{self.segment(self.light.id)}/state"),
            self.light.state_payload(),
        )


@dataclass(frozen=True)
class DeleteLight(Command):
    """Remove a light from the bridge."""

    light: Union[str, int, Light]

    def build_request(self, config: ClientConfig) -> Request:
        light_id = self.segment(_light_id(self.light))
        return Request("DELETE", self.api_path(config, f"/lights/{light_id}"))
