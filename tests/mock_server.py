"""Mock lighting bridge API server for testing."""

from __future__ import annotations

import copy
import secrets
from typing import Any, Optional

from fastapi import Body, FastAPI


# Mock data
FAKE_USERNAME = "abc123"

FAKE_LIGHTS = {
    "1": {
        "state": {
            "on": True,
            "bri": 144,
            "hue": 13088,
            "sat": 212,
            "xy": [0.5128, 0.4147],
            "ct": 467,
            "alert": "none",
            "effect": "none",
            "colormode": "xy",
            "reachable": True,
        },
        "type": "Extended color light",
        "name": "Living Room",
        "modelid": "LCT001",
        "manufacturername": "Philips",
        "uniqueid": "00:17:88:01:00:bd:c7:b9-0b",
        "swversion": "66009461",
    },
    "2": {
        "state": {
            "on": False,
            "bri": 0,
            "alert": "none",
            "reachable": True,
        },
        "type": "Dimmable light",
        "name": "Hallway",
        "modelid": "LWB004",
        "manufacturername": "Philips",
        "uniqueid": "00:17:88:01:00:d4:12:08-0b",
        "swversion": "66012040",
    },
}

FAKE_CONFIG = {
    "name": "Mock Bridge",
    "zigbeechannel": 15,
    "bridgeid": "001788FFFE09A206",
    "mac": "00:17:88:09:a2:06",
    "dhcp": True,
    "ipaddress": "192.168.1.2",
    "netmask": "255.255.255.0",
    "gateway": "192.168.1.1",
    "proxyaddress": "none",
    "proxyport": 0,
    "UTC": "2025-12-30T10:00:00",
    "localtime": "2025-12-30T11:00:00",
    "timezone": "Europe/Amsterdam",
    "modelid": "BSB002",
    "swversion": "1935144040",
    "apiversion": "1.35.0",
    "linkbutton": False,
    "factorynew": False,
    "portalstate": {
        "signedon": True,
        "incoming": False,
        "outgoing": True,
        "communication": "disconnected",
    },
    "swupdate": {
        "updatestate": 0,
        "checkforupdate": False,
        "devicetypes": {"bridge": False, "lights": []},
        "url": "",
        "text": "",
        "notify": False,
    },
    "whitelist": {
        FAKE_USERNAME: {
            "last use date": "2025-12-30T10:00:00",
            "create date": "2025-12-01T08:00:00",
            "name": "test#runner",
        },
        "def456": {
            "last use date": "2025-12-29T15:00:00",
            "create date": "2025-11-01T08:00:00",
            "name": "phone#app",
        },
    },
}

FAKE_TIMEZONES = ["Africa/Abidjan", "America/New_York", "Europe/Amsterdam"]

FAKE_NEW_LIGHTS = {
    "7": {"name": "Hue Lamp 7"},
    "lastscan": "2025-12-30T10:00:00",
}

# Writable light state fields
LIGHT_STATE_FIELDS = {"on", "bri", "hue", "sat", "xy", "ct", "alert", "effect"}


def _error(error_type: int, address: str, description: str) -> list[dict[str, Any]]:
    return [{"error": {"type": error_type, "address": address, "description": description}}]


def _success(address: str, value: Any) -> dict[str, Any]:
    return {"success": {address: value}}


def create_app(link_button: bool = False) -> FastAPI:
    """Create a mock bridge app with fresh state.

    Args:
        link_button: Whether the link button starts out pressed
    """
    app = FastAPI(title="Mock Lighting Bridge API")

    config = copy.deepcopy(FAKE_CONFIG)
    config["linkbutton"] = link_button
    lights = copy.deepcopy(FAKE_LIGHTS)
    app.state.config = config
    app.state.lights = lights

    def unauthorized(username: str) -> Optional[list[dict[str, Any]]]:
        if username not in config["whitelist"]:
            return _error(1, "/", "unauthorized user")
        return None

    def public_config() -> dict[str, Any]:
        keys = ("name", "bridgeid", "mac", "modelid", "swversion", "apiversion", "factorynew")
        return {key: config[key] for key in keys}

    @app.get("/api/config")
    def get_public_config():
        """Unauthenticated configuration."""
        return public_config()

    @app.post("/api")
    def create_user(payload: dict = Body(default={})):
        """Create a user if the link button is pressed."""
        if not config["linkbutton"]:
            return _error(101, "", "link button not pressed")
        username = secrets.token_hex(16)
        config["whitelist"][username] = {
            "last use date": config["UTC"],
            "create date": config["UTC"],
            "name": payload.get("devicetype", ""),
        }
        return [{"success": {"username": username}}]

    @app.get("/api/{username}")
    def get_full_state(username: str):
        """Full datastore."""
        return unauthorized(username) or {"config": config, "lights": lights}

    @app.get("/api/{username}/config")
    def get_config(username: str):
        """Bridge configuration."""
        return unauthorized(username) or config

    @app.put("/api/{username}/config")
    def update_config(username: str, payload: dict = Body(default={})):
        """Update bridge configuration."""
        error = unauthorized(username)
        if error:
            return error
        results = []
        for key, value in payload.items():
            if key == "swupdate":
                config["swupdate"].update(value)
            else:
                config[key] = value
            results.append(_success(f"/config/{key}", value))
        return results

    @app.delete("/api/{username}/config/whitelist/{target}")
    def delete_user(username: str, target: str):
        """Remove a user from the whitelist."""
        error = unauthorized(username)
        if error:
            return error
        if target not in config["whitelist"]:
            return _error(3, f"/config/whitelist/{target}", f"resource, /config/whitelist/{target}, not available")
        del config["whitelist"][target]
        return [{"success": f"/config/whitelist/{target} deleted"}]

    @app.get("/api/{username}/info/timezones")
    def get_timezones(username: str):
        """Supported time zones."""
        return unauthorized(username) or FAKE_TIMEZONES

    @app.post("/api/{username}/lights")
    def search_lights(username: str):
        """Start a light scan."""
        return unauthorized(username) or [_success("/lights", "Searching for new devices")]

    @app.get("/api/{username}/lights")
    def list_lights(username: str):
        """List all lights."""
        return unauthorized(username) or lights

    @app.get("/api/{username}/lights/new")
    def new_lights(username: str):
        """Lights found by the last scan."""
        return unauthorized(username) or FAKE_NEW_LIGHTS

    @app.get("/api/{username}/lights/{light_id}")
    def get_light(username: str, light_id: str):
        """Get a specific light."""
        error = unauthorized(username)
        if error:
            return error
        if light_id not in lights:
            return _error(3, f"/lights/{light_id}", f"resource, /lights/{light_id}, not available")
        return lights[light_id]

    @app.put("/api/{username}/lights/{light_id}")
    def rename_light(username: str, light_id: str, payload: dict = Body(default={})):
        """Update light attributes."""
        error = unauthorized(username)
        if error:
            return error
        if light_id not in lights:
            return _error(3, f"/lights/{light_id}", f"resource, /lights/{light_id}, not available")
        if "name" in payload:
            lights[light_id]["name"] = payload["name"]
        return [_success(f"/lights/{light_id}/name", payload.get("name"))]

    @app.put("/api/{username}/lights/{light_id}/state")
    def set_light_state(username: str, light_id: str, payload: dict = Body(default={})):
        """Update light state."""
        error = unauthorized(username)
        if error:
            return error
        if light_id not in lights:
            return _error(3, f"/lights/{light_id}", f"resource, /lights/{light_id}, not available")
        results = []
        for key, value in payload.items():
            if key not in LIGHT_STATE_FIELDS:
                return _error(6, f"/lights/{light_id}/state/{key}", f"parameter, {key}, not available")
            lights[light_id]["state"][key] = value
            results.append(_success(f"/lights/{light_id}/state/{key}", value))
        return results

    @app.delete("/api/{username}/lights/{light_id}")
    def delete_light(username: str, light_id: str):
        """Delete a light."""
        error = unauthorized(username)
        if error:
            return error
        if light_id not in lights:
            return _error(3, f"/lights/{light_id}", f"resource, /lights/{light_id}, not available")
        del lights[light_id]
        return [{"success": f"/lights/{light_id} deleted"}]

    return app


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(create_app(link_button=True), host="127.0.0.1", port=8000)
