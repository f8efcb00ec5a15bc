"""
Cluster Registry

Client-side node registry for a distributed cluster connector: qualifies
cluster endpoints, reconciles declared and discovered nodes, pins tasks to
nodes and parses alias definitions.
"""

__version__ = "0.1.0"

from .core.config import ConnectorConfig, Settings
from .core.errors import IllegalStateError, RegistryError, SettingsError
from .core.registry import (
    add_discovered_nodes,
    declared_nodes,
    discovered_or_declared_nodes,
    get_pinned_node,
    has_pinned_node,
    is_legacy_protocol,
    parse_aliases,
    pin_node,
    qualify_node,
    qualify_nodes,
    set_discovered_nodes,
)

__all__ = [
    "ConnectorConfig",
    "Settings",
    "RegistryError",
    "SettingsError",
    "IllegalStateError",
    "qualify_node",
    "qualify_nodes",
    "declared_nodes",
    "add_discovered_nodes",
    "set_discovered_nodes",
    "discovered_or_declared_nodes",
    "pin_node",
    "has_pinned_node",
    "get_pinned_node",
    "parse_aliases",
    "is_legacy_protocol",
]
