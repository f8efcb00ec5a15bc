"""
Node registry for the cluster connector.

Tracks which cluster nodes a job may talk to:
1. Qualifies bare hosts with the configured port ("host" -> "host:port")
2. Merges nodes learned through discovery with the declared ones
3. Pins a task to a single node for data locality
4. Parses "key:value" alias definitions
5. Tells whether the cluster speaks the legacy protocol

Every function takes the Settings store explicitly and keeps no state of
its own, so concurrent callers sharing one store must serialize access.
"""
import logging
from typing import Dict, Iterable, List, Optional, Union

from cluster_registry.core import options
from cluster_registry.core.config import Settings
from cluster_registry.core.errors import IllegalStateError
from cluster_registry.utils.helpers import concatenate, has_text, tokenize

logger = logging.getLogger(__name__)


def qualify_node(node: str, default_port: int) -> str:
    """
    Add the default port to a node that does not declare one.

    Args:
        node: Host, or host:port
        default_port: Port appended to bare hosts

    Returns:
        The node in host:port form
    """
    return node if ":" in node else f"{node}:{default_port}"


def qualify_nodes(nodes: Union[str, Iterable[str]], default_port: int) -> List[str]:
    """
    Qualify every node of a list, keeping order and duplicates.

    Args:
        nodes: Delimited nodes string or a sequence of nodes
        default_port: Port appended to bare hosts

    Returns:
        List of host:port strings
    """
    if nodes is None or isinstance(nodes, str):
        nodes = tokenize(nodes, options.NODE_DELIMITERS)
    return [qualify_node(node, default_port) for node in nodes]


def declared_nodes(settings: Settings) -> List[str]:
    """Nodes from the static configuration, qualified with the default port"""
    return qualify_nodes(settings.get_nodes(), settings.get_port())


def add_discovered_nodes(settings: Settings, discovered: Iterable[str]) -> None:
    """
    Merge newly discovered nodes with the declared ones and store the result.

    Declared nodes always come first and are never dropped, even if
    discovery did not report them. Duplicates are removed keeping the
    first occurrence.

    Args:
        settings: Property store
        discovered: Nodes reported by discovery, bare hosts get the default port
    """
    nodes = dict.fromkeys(declared_nodes(settings))
    nodes.update(dict.fromkeys(qualify_nodes(list(discovered), settings.get_port())))

    set_discovered_nodes(settings, nodes)
    logger.debug("Discovered nodes merged: %s", list(nodes))


def set_discovered_nodes(settings: Settings, nodes: Iterable[str]) -> None:
    """Store the discovered set as given, qualifying bare hosts"""
    qualified = qualify_nodes(list(nodes), settings.get_port())
    settings.set_property(options.INTERNAL_DISCOVERED_NODES, concatenate(qualified, ","))


def discovered_or_declared_nodes(settings: Settings) -> List[str]:
    """
    Nodes to use for routing.

    Once discovery stored any node, the discovered set replaces the
    declared one; otherwise the declared nodes are returned.
    """
    discovered = settings.get_property(options.INTERNAL_DISCOVERED_NODES)
    if has_text(discovered):
        return qualify_nodes(tokenize(discovered), settings.get_port())
    return declared_nodes(settings)


def pin_node(settings: Settings, node: str, port: Optional[int] = None) -> None:
    """
    Pin the current task to a node.

    The node is not checked against the declared or discovered sets.
    A task is meant to be pinned once; calling this again overwrites the
    previous pin, so callers wanting another node should pin a fresh
    Settings scope instead.

    Args:
        settings: Property store
        node: Host, or host:port
        port: Port for a bare host (defaults to the configured port)
    """
    if port is None:
        port = settings.get_port()
    pinned = qualify_node(node, port)
    settings.set_property(options.INTERNAL_PINNED_NODE, pinned)
    logger.info("Task pinned to node %s", pinned)


def has_pinned_node(settings: Settings) -> bool:
    return has_text(settings.get_property(options.INTERNAL_PINNED_NODE))


def get_pinned_node(settings: Settings) -> str:
    """
    Node the current task is pinned to.

    Raises:
        IllegalStateError: if the task was never pinned
    """
    node = settings.get_property(options.INTERNAL_PINNED_NODE)
    if not has_text(node):
        raise IllegalStateError("Task has not been pinned to a node...")
    return node


def parse_aliases(definition: Optional[str]) -> Dict[str, str]:
    """
    Parse a "key:value,key:value" alias definition.

    Each key is stored as written and in lower case, both pointing to the
    same value. Entries without a key or without a ':' are skipped; later
    entries overwrite earlier ones.

    Args:
        definition: Alias definition string

    Returns:
        Mapping of alias to target, empty for blank definitions
    """
    aliases: Dict[str, str] = {}

    for entry in tokenize(definition, ","):
        entry = entry.strip()
        index = entry.find(":")
        if index <= 0:
            logger.debug("Skipping malformed alias '%s'", entry)
            continue

        key = entry[:index]
        value = entry[index + 1:]
        aliases[key] = value
        aliases[key.lower()] = value

    return aliases


def is_legacy_protocol(settings: Settings) -> bool:
    """
    Whether the cluster speaks the legacy (pre 1.0) protocol.

    Unknown versions count as legacy. Versions are compared as plain
    strings, so they must share the dotted format of the markers.
    """
    version = settings.get_property(options.INTERNAL_VERSION)
    if not has_text(version):
        return True

    return (version <= options.LEGACY_VERSION_MARKER
            or version == options.LEGACY_VERSION_MILESTONE)
