"""
Configuration management for the cluster connector
"""
import json
import logging
import os
from typing import Dict, Optional

from pydantic import BaseModel, Field

from cluster_registry.core import options
from cluster_registry.core.errors import SettingsError
from cluster_registry.utils.helpers import has_text

logger = logging.getLogger(__name__)


class Settings:
    """
    Mutable key/value property store backing the node registry.

    Values are kept as strings, the same way they would be handed over by
    a job configuration. The registry reads and writes through this object
    only and never caches what it finds here.
    """

    def __init__(self, properties: Optional[Dict[str, str]] = None):
        self._properties: Dict[str, str] = {}
        for key, value in (properties or {}).items():
            self.set_property(key, value)

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self._properties.get(key, default)

    def set_property(self, key: str, value) -> None:
        """Store a value as a string; None removes the key"""
        if value is None:
            self.remove_property(key)
            return
        self._properties[key] = str(value)

    def remove_property(self, key: str) -> None:
        self._properties.pop(key, None)

    def get_nodes(self) -> str:
        """Raw declared nodes string"""
        return self.get_property(options.NODES, options.DEFAULT_NODES)

    def get_port(self) -> int:
        """
        Default port used to qualify bare hosts

        Raises:
            SettingsError: if the stored port is not a valid port number
        """
        raw = self.get_property(options.PORT)
        if not has_text(raw):
            return options.DEFAULT_PORT

        try:
            port = int(raw.strip())
        except ValueError as e:
            raise SettingsError(f"Invalid port '{raw}' for '{options.PORT}'") from e

        if not 1 <= port <= 65535:
            raise SettingsError(f"Port {port} for '{options.PORT}' is out of range")
        return port

    def as_dict(self) -> Dict[str, str]:
        return dict(self._properties)

    def copy(self) -> "Settings":
        return Settings(self._properties)

    def to_config(self) -> "ConnectorConfig":
        """Convert the store back into a validated configuration model"""
        properties = self.as_dict()
        nodes = properties.pop(options.NODES, options.DEFAULT_NODES)
        port = self.get_port()
        properties.pop(options.PORT, None)
        return ConnectorConfig(nodes=nodes, port=port, properties=properties)

    def __contains__(self, key: str) -> bool:
        return key in self._properties

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"Settings({self._properties!r})"


class ConnectorConfig(BaseModel):
    """Configuration for the cluster connector"""
    nodes: str = options.DEFAULT_NODES
    port: int = Field(default=options.DEFAULT_PORT, ge=1, le=65535)
    properties: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(cls) -> "ConnectorConfig":
        """Create configuration from environment variables"""
        return cls(
            nodes=os.getenv("CLUSTER_NODES", options.DEFAULT_NODES),
            port=int(os.getenv("CLUSTER_PORT", str(options.DEFAULT_PORT)))
        )

    @classmethod
    def load_from_file(cls, file_path: str) -> "ConnectorConfig":
        """Load configuration from JSON file"""
        with open(file_path, 'r') as f:
            data = json.load(f)
        logger.debug("Loaded configuration from %s", file_path)
        return cls(**data)

    def save_to_file(self, file_path: str) -> None:
        """Save configuration to JSON file"""
        with open(file_path, 'w') as f:
            json.dump(self.model_dump(), f, indent=2)
        logger.debug("Saved configuration to %s", file_path)

    def to_settings(self) -> Settings:
        """Build a property store holding this configuration"""
        settings = Settings(self.properties)
        settings.set_property(options.NODES, self.nodes)
        settings.set_property(options.PORT, self.port)
        return settings
