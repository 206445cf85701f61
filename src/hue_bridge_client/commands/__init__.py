"""Commands understood by the bridge.

Each command is an immutable value object describing one remote operation:
the request it sends and how the response payload is decoded. Commands are
organized by domain:
- bridge: ping, bridge configuration, portal state, time zones
- software_update: software update status and control
- users: whitelist management
- lights: light discovery and control
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

from ..exceptions import DecodeError

if TYPE_CHECKING:
    from ..client import Client
    from ..config import ClientConfig


@dataclass(frozen=True)
class Request:
    """A request to send to the bridge."""

    method: str
    path: str
    body: Any = None


class Command(ABC):
    """Base class for bridge commands.

    Subclasses describe the request in ``build_request`` and turn the
    response payload into a result in ``decode``. Commands never keep a
    reference to the client; it is supplied to ``invoke``.
    """

    async def invoke(self, client: Client) -> Any:
        """
        Execute the command through the client's transport.

        Args:
            client: Client providing configuration and transport

        Returns:
            The decoded result
        """
        transport = client.get_transport()
        request = self.build_request(client.config)
        payload = await transport.send_request(request.method, request.path, request.body)
        try:
            return self.decode(payload)
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as exc:
            raise DecodeError(
                f"{type(self).__name__}: unexpected response from bridge: {exc!r}"
            ) from exc

    @abstractmethod
    def build_request(self, config: ClientConfig) -> Request:
        """Build the request, reading the credential from ``config``."""

    def decode(self, payload: Any) -> Any:
        """Decode the response payload. Write commands resolve to True."""
        return True

    @staticmethod
    def segment(value: Any) -> str:
        """Escape an identifier for use as a single path segment."""
        return quote(str(value), safe="")

    @classmethod
    def api_path(cls, config: ClientConfig, suffix: str = "") -> str:
        """Path below the authenticated API root of the configured user."""
        return f"/api/{cls.segment(config.require_username())}{suffix}"


__all__ = ["Command", "Request"]
