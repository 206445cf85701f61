"""User (whitelist) commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional, Union

from ..config import ClientConfig
from ..exceptions import BridgeApiError, UserNotFoundError
from ..models import User
from . import Command, Request

if TYPE_CHECKING:
    from ..client import Client

DEFAULT_DEVICE_TYPE = "hue-bridge-client"
MAX_DEVICE_TYPE_LENGTH = 40


def _username(user: Union[str, User]) -> str:
    return user.username if isinstance(user, User) else str(user)


@dataclass(frozen=True)
class IsAuthenticated(Command):
    """Check whether the configured username is accepted by the bridge."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", self.api_path(config))

    async def invoke(self, client: Client) -> bool:
        # Without a username the bridge can only answer "unauthorized user"
        if not client.config.username:
            return False
        try:
            return await super().invoke(client)
        except BridgeApiError as exc:
            if exc.type == BridgeApiError.UNAUTHORIZED_USER:
                return False
            raise


@dataclass(frozen=True)
class GetUsers(Command):
    """List whitelisted users."""

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", self.api_path(config, "/config"))

    def decode(self, payload: Any) -> list[User]:
        return [User.from_dict(name, entry) for name, entry in payload["whitelist"].items()]


@dataclass(frozen=True)
class GetUser(Command):
    """Look up one whitelisted user."""

    user: Union[str, User]

    def build_request(self, config: ClientConfig) -> Request:
        return Request("GET", self.api_path(config, "/config"))

    def decode(self, payload: Any) -> User:
        username = _username(self.user)
        whitelist = payload["whitelist"]
        if username not in whitelist:
            raise UserNotFoundError(username)
        return User.from_dict(username, whitelist[username])


@dataclass(frozen=True)
class CreateUser(Command):
    """Register a new user. The bridge link button must have been pressed."""

    device_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.device_type is not None and len(self.device_type) > MAX_DEVICE_TYPE_LENGTH:
            raise ValueError(
                f"Device type must be at most {MAX_DEVICE_TYPE_LENGTH} characters"
            )

    def build_request(self, config: ClientConfig) -> Request:
        return Request("POST", "/api", {"devicetype": self.device_type or DEFAULT_DEVICE_TYPE})

    def decode(self, payload: Any) -> User:
        username = payload[0]["success"]["username"]
        return User(username=username, device_type=self.device_type or DEFAULT_DEVICE_TYPE)


@dataclass(frozen=True)
class DeleteUser(Command):
    """Remove a user from the whitelist."""

    user: Union[str, User]

    def build_request(self, config: ClientConfig) -> Request:
        username = self.segment(_username(self.user))
        return Request("DELETE", self.api_path(config, f"/config/whitelist/{username}"))
