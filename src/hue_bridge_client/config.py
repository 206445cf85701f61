"""Configuration management for hue-bridge-client."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .exceptions import ConfigError

_LOGGER = logging.getLogger(__name__)

# Default configuration location
DEFAULT_CONFIG_DIR = Path.home() / ".hue_bridge_client"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"

DEFAULT_TIMEOUT = 10.0
DEFAULT_SCHEME = "http"


@dataclass
class ClientConfig:
    """Connection settings for a single bridge.

    Only the fields declared here are recognized. Unset ``host`` and
    ``username`` are allowed until a command needs them.
    """

    host: Optional[str] = None
    username: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    scheme: str = DEFAULT_SCHEME

    @property
    def base_url(self) -> str:
        """Get the base URL of the bridge."""
        if not self.host:
            raise ConfigError("Bridge host is not configured")
        return f"{self.scheme}://{self.host}"

    def require_username(self) -> str:
        """Return the configured username or raise ConfigError."""
        if not self.username:
            raise ConfigError("Bridge username is not configured")
        return self.username

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {key: value for key, value in asdict(self).items() if value is not None}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ClientConfig:
        """Create from dictionary, ignoring keys that are not config options."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            _LOGGER.warning("Ignoring unknown configuration options: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})

    def merged(self, options: Mapping[str, Any]) -> ClientConfig:
        """Return a new config with ``options`` applied over this one."""
        data = asdict(self)
        data.update(options)
        return ClientConfig.from_dict(data)

    @classmethod
    def load(cls, config_file: Path = DEFAULT_CONFIG_FILE) -> ClientConfig:
        """Load configuration from file."""
        if not config_file.exists():
            return cls()

        try:
            with open(config_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config from {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_file} must contain a mapping")
        return cls.from_dict(data)

    def save(self, config_file: Path = DEFAULT_CONFIG_FILE) -> None:
        """Save configuration to file."""
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, "w") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False, default_flow_style=False)
