"""Bridge API client for hue-bridge-client."""

from __future__ import annotations

import asyncio
from typing import Any, Mapping, Optional, Union

import httpx

from .commands import Command
from .commands.bridge import GetBridge, GetPortal, GetTimeZones, Ping, SaveBridge
from .commands.lights import (
    DeleteLight,
    GetLight,
    GetLights,
    GetNewLights,
    SaveLight,
    SaveLightState,
    StartLightScan,
)
from .commands.software_update import (
    CheckForSoftwareUpdates,
    DisableInstallNotification,
    GetSoftwareUpdate,
    InstallSoftwareUpdates,
)
from .commands.users import CreateUser, DeleteUser, GetUser, GetUsers, IsAuthenticated
from .config import ClientConfig
from .models import Bridge, Light, Portal, SoftwareUpdate, User
from .transport import HttpTransport, Transport


class Client:
    """Client for a lighting bridge.

    Every operation builds a command and hands it to ``invoke_command``.
    Operations are coroutines; failures are raised as ``BridgeError``
    subclasses.

    Example:
        async with Client(host="192.168.1.2", username="abc") as client:
            for light in await client.get_lights():
                print(light.id, light.name)
    """

    def __init__(
        self,
        config: Union[ClientConfig, Mapping[str, Any], None] = None,
        *,
        transport: Optional[Transport] = None,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
        **options: Any,
    ):
        """
        Initialize the client.

        Args:
            config: ClientConfig or mapping of configuration options; the
                client keeps its own copy
            transport: Optional transport to use instead of HttpTransport
            http_transport: Optional httpx transport for the default
                HttpTransport (used for testing)
            **options: Configuration options applied over ``config``
                (host, username, timeout, scheme)
        """
        if config is None:
            config = ClientConfig()
        elif not isinstance(config, ClientConfig):
            config = ClientConfig.from_dict(config)

        self.config = config.merged(options)
        if transport is None:
            transport = HttpTransport(self.config, http_transport=http_transport)
        self._transport = transport

    @property
    def host(self) -> Optional[str]:
        """Get bridge host."""
        return self.config.host

    @host.setter
    def host(self, host: Optional[str]) -> None:
        self.config.host = host

    @property
    def username(self) -> Optional[str]:
        """Get bridge username."""
        return self.config.username

    @username.setter
    def username(self, username: Optional[str]) -> None:
        self.config.username = username

    def get_transport(self) -> Transport:
        """Get the transport bound to this client."""
        return self._transport

    async def invoke_command(self, command: Command) -> Any:
        """Invoke a command with this client."""
        return await command.invoke(self)

    async def aclose(self) -> None:
        """Release the transport's connections."""
        await self._transport.aclose()

    async def __aenter__(self) -> Client:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.aclose()

    # Bridge

    async def ping(self) -> bool:
        """Check that the bridge is reachable."""
        return await self.invoke_command(Ping())

    async def get_bridge(self) -> Bridge:
        """Get bridge configuration."""
        return await self.invoke_command(GetBridge())

    async def save_bridge(self, bridge: Bridge) -> bool:
        """Save bridge configuration."""
        return await self.invoke_command(SaveBridge(bridge))

    async def get_portal(self) -> Portal:
        """Get remote portal state."""
        return await self.invoke_command(GetPortal())

    async def get_time_zones(self) -> list[str]:
        """Get time zones supported by the bridge."""
        return await self.invoke_command(GetTimeZones())

    # Software update

    async def get_software_update(self) -> SoftwareUpdate:
        """Get software update status."""
        return await self.invoke_command(GetSoftwareUpdate())

    async def check_for_software_updates(self) -> bool:
        """Ask the bridge to check for software updates."""
        return await self.invoke_command(CheckForSoftwareUpdates())

    async def disable_install_notification(self) -> bool:
        """Disable the post-install notification."""
        return await self.invoke_command(DisableInstallNotification())

    async def install_software_updates(self) -> bool:
        """Install downloaded software updates."""
        return await self.invoke_command(InstallSoftwareUpdates())

    # Users

    async def is_authenticated(self) -> bool:
        """Check whether the configured username is authorized."""
        return await self.invoke_command(IsAuthenticated())

    async def get_users(self) -> list[User]:
        """List whitelisted users."""
        return await self.invoke_command(GetUsers())

    async def get_user(self, username: Union[str, User, None] = None) -> User:
        """
        Get a whitelisted user.

        Args:
            username: Username or User; defaults to the configured username

        Returns:
            The matching user
        """
        if username is None:
            username = self.username
        return await self.invoke_command(GetUser(username))

    async def create_user(self, device_type: Optional[str] = None) -> User:
        """Create a user. Requires the bridge link button to be pressed."""
        return await self.invoke_command(CreateUser(device_type))

    async def delete_user(self, username: Union[str, User]) -> bool:
        """Delete a user from the whitelist."""
        return await self.invoke_command(DeleteUser(username))

    # Lights

    async def start_light_scan(self) -> bool:
        """Start scanning for new lights."""
        return await self.invoke_command(StartLightScan())

    async def get_new_lights(self) -> list[Light]:
        """List lights found by the last scan."""
        return await self.invoke_command(GetNewLights())

    async def get_lights(self) -> list[Light]:
        """List all lights."""
        return await self.invoke_command(GetLights())

    async def get_light(self, light_id: Union[str, int, Light]) -> Light:
        """Get a light by ID."""
        return await self.invoke_command(GetLight(light_id))

    async def save_light(self, light: Light) -> tuple[bool, bool]:
        """
        Save light attributes and state.

        Both writes are issued concurrently; the first failure is raised.
        Raises ValueError before any request if the light has no name or
        no writable state.
        """
        commands = (SaveLight(light), SaveLightState(light))
        attributes, state = await asyncio.gather(
            *(self.invoke_command(command) for command in commands)
        )
        return attributes, state

    async def delete_light(self, light_id: Union[str, int, Light]) -> bool:
        """Delete a light."""
        return await self.invoke_command(DeleteLight(light_id))
