"""Domain objects exchanged with the bridge.

Each model maps the bridge JSON representation to a dataclass with
``from_dict`` and, where the bridge accepts writes, a payload helper that
returns only the writable fields that are set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


def _drop_unset(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


@dataclass
class LightState:
    """Light state as reported under ``state``."""

    on: Optional[bool] = None
    brightness: Optional[int] = None
    hue: Optional[int] = None
    saturation: Optional[int] = None
    xy: Optional[list[float]] = None
    color_temp: Optional[int] = None
    alert: Optional[str] = None
    effect: Optional[str] = None
    color_mode: Optional[str] = None
    reachable: Optional[bool] = None

    def to_payload(self) -> dict[str, Any]:
        """Convert writable fields to the bridge state payload."""
        return _drop_unset({
            "on": self.on,
            "bri": self.brightness,
            "hue": self.hue,
            "sat": self.saturation,
            "xy": self.xy,
            "ct": self.color_temp,
            "alert": self.alert,
            "effect": self.effect,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LightState:
        """Create from dictionary."""
        return cls(
            on=data.get("on"),
            brightness=data.get("bri"),
            hue=data.get("hue"),
            saturation=data.get("sat"),
            xy=data.get("xy"),
            color_temp=data.get("ct"),
            alert=data.get("alert"),
            effect=data.get("effect"),
            color_mode=data.get("colormode"),
            reachable=data.get("reachable"),
        )


@dataclass
class Light:
    """A light known to the bridge."""

    id: str
    name: Optional[str] = None
    type: Optional[str] = None
    model_id: Optional[str] = None
    unique_id: Optional[str] = None
    manufacturer: Optional[str] = None
    software_version: Optional[str] = None
    state: LightState = field(default_factory=LightState)

    def attributes_payload(self) -> dict[str, Any]:
        """Payload for the light attributes resource."""
        return _drop_unset({"name": self.name})

    def state_payload(self) -> dict[str, Any]:
        """Payload for the light state resource."""
        return self.state.to_payload()

    @classmethod
    def from_dict(cls, light_id: str, data: dict[str, Any]) -> Light:
        """Create from the bridge representation of light ``light_id``."""
        return cls(
            id=str(light_id),
            name=data["name"],
            type=data.get("type"),
            model_id=data.get("modelid"),
            unique_id=data.get("uniqueid"),
            manufacturer=data.get("manufacturername"),
            software_version=data.get("swversion"),
            state=LightState.from_dict(data.get("state", {})),
        )


@dataclass
class User:
    """A whitelisted bridge user."""

    username: str
    device_type: Optional[str] = None
    created: Optional[str] = None
    last_used: Optional[str] = None

    @classmethod
    def from_dict(cls, username: str, data: dict[str, Any]) -> User:
        """Create from a whitelist entry."""
        return cls(
            username=username,
            device_type=data.get("name"),
            created=data.get("create date"),
            last_used=data.get("last use date"),
        )


@dataclass
class Portal:
    """Remote portal connection status."""

    signed_on: bool
    incoming: bool
    outgoing: bool
    communication: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Portal:
        """Create from ``portalstate``."""
        return cls(
            signed_on=data["signedon"],
            incoming=data["incoming"],
            outgoing=data["outgoing"],
            communication=data.get("communication"),
        )


@dataclass
class SoftwareUpdate:
    """Bridge software update status."""

    # Bridge update states
    STATE_NO_UPDATE = 0
    STATE_DOWNLOADING = 1
    STATE_READY_TO_INSTALL = 2
    STATE_INSTALLING = 3

    state: int
    check_for_update: bool = False
    url: Optional[str] = None
    text: Optional[str] = None
    notify: bool = False
    bridge_update: bool = False
    light_updates: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SoftwareUpdate:
        """Create from ``swupdate``."""
        device_types = data.get("devicetypes", {})
        return cls(
            state=int(data["updatestate"]),
            check_for_update=data.get("checkforupdate", False),
            url=data.get("url") or None,
            text=data.get("text") or None,
            notify=data.get("notify", False),
            bridge_update=device_types.get("bridge", False),
            light_updates=list(device_types.get("lights", [])),
        )


@dataclass
class Bridge:
    """Bridge configuration."""

    id: Optional[str] = None
    name: Optional[str] = None
    model_id: Optional[str] = None
    factory_new: Optional[bool] = None
    software_version: Optional[str] = None
    api_version: Optional[str] = None
    zigbee_channel: Optional[int] = None
    mac_address: Optional[str] = None
    ip_address: Optional[str] = None
    dhcp: Optional[bool] = None
    netmask: Optional[str] = None
    gateway: Optional[str] = None
    proxy_address: Optional[str] = None
    proxy_port: Optional[int] = None
    utc: Optional[str] = None
    local_time: Optional[str] = None
    time_zone: Optional[str] = None
    link_button: Optional[bool] = None

    def attributes_payload(self) -> dict[str, Any]:
        """Payload of writable configuration fields."""
        return _drop_unset({
            "name": self.name,
            "zigbeechannel": self.zigbee_channel,
            "ipaddress": self.ip_address,
            "dhcp": self.dhcp,
            "netmask": self.netmask,
            "gateway": self.gateway,
            "proxyaddress": self.proxy_address,
            "proxyport": self.proxy_port,
            "timezone": self.time_zone,
        })

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Bridge:
        """Create from the bridge ``config`` resource."""
        return cls(
            id=data.get("bridgeid"),
            name=data["name"],
            model_id=data.get("modelid"),
            factory_new=data.get("factorynew"),
            software_version=data.get("swversion"),
            api_version=data.get("apiversion"),
            zigbee_channel=data.get("zigbeechannel"),
            mac_address=data.get("mac"),
            ip_address=data.get("ipaddress"),
            dhcp=data.get("dhcp"),
            netmask=data.get("netmask"),
            gateway=data.get("gateway"),
            proxy_address=data.get("proxyaddress"),
            proxy_port=data.get("proxyport"),
            utc=data.get("UTC"),
            local_time=data.get("localtime"),
            time_zone=data.get("timezone"),
            link_button=data.get("linkbutton"),
        )
