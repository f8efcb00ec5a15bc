"""
Property keys and defaults for the cluster connector
"""

# User facing keys
NODES = "cluster.nodes"
PORT = "cluster.port"

DEFAULT_NODES = "localhost"
DEFAULT_PORT = 9200

# Internal keys, written by the connector itself
INTERNAL_PINNED_NODE = "cluster.internal.pinned.node"
INTERNAL_DISCOVERED_NODES = "cluster.internal.discovered.nodes"
INTERNAL_VERSION = "cluster.internal.version"

# Protocol versions up to the 1.0 pre-release are considered legacy
LEGACY_VERSION_MARKER = "1.0.0.RC"
LEGACY_VERSION_MILESTONE = "1.0.0"

# Delimiters accepted in the declared nodes string
NODE_DELIMITERS = ", \t\r\n"
