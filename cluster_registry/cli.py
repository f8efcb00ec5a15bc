"""
Command Line Interface for the cluster registry
"""
import json
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from cluster_registry.core.config import ConnectorConfig, Settings
from cluster_registry.core.errors import RegistryError, SettingsError
from cluster_registry.core import registry
from cluster_registry.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def load_settings(config_file: str) -> Settings:
    """Load settings from a JSON file, falling back to the defaults"""
    if config_file and Path(config_file).exists():
        try:
            return ConnectorConfig.load_from_file(config_file).to_settings()
        except ValidationError:
            raise
        except (ValueError, TypeError, OSError) as e:
            raise SettingsError(f"Cannot read configuration file {config_file}: {e}") from e
    logger.debug("No configuration file at %s, using defaults", config_file)
    return ConnectorConfig().to_settings()


def save_settings(settings: Settings, config_file: str) -> None:
    try:
        settings.to_config().save_to_file(config_file)
    except OSError as e:
        raise SettingsError(f"Cannot write configuration file {config_file}: {e}") from e


def fail(message: str):
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.option('--config', '-c', 'config_file', default='cluster_config.json',
              help='Configuration file path')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config_file, verbose):
    """Cluster node registry CLI"""
    if verbose:
        setup_logging('DEBUG')

    ctx.ensure_object(dict)
    ctx.obj['config_file'] = config_file


@cli.command()
@click.option('--nodes', default=None, help='Declared nodes (comma separated)')
@click.option('--port', default=None, type=int, help='Default port')
@click.pass_context
def init_config(ctx, nodes, port):
    """Initialize a configuration file with default settings"""
    config_file = ctx.obj['config_file']
    values = {}
    if nodes is not None:
        values['nodes'] = nodes
    if port is not None:
        values['port'] = port

    try:
        config = ConnectorConfig(**values)
    except ValidationError as e:
        fail(str(e))

    config.save_to_file(config_file)
    click.echo(f"Configuration file created: {config_file}")


@cli.command()
@click.option('--declared', is_flag=True, help='Only show declared nodes')
@click.pass_context
def nodes(ctx, declared):
    """List the nodes used for routing"""
    try:
        settings = load_settings(ctx.obj['config_file'])
        found = (registry.declared_nodes(settings) if declared
                 else registry.discovered_or_declared_nodes(settings))
    except (RegistryError, ValidationError) as e:
        fail(str(e))

    for node in found:
        click.echo(node)


@cli.command()
@click.argument('discovered', nargs=-1, required=True)
@click.pass_context
def discover(ctx, discovered):
    """Merge discovered nodes into the configuration"""
    config_file = ctx.obj['config_file']
    try:
        settings = load_settings(config_file)
        registry.add_discovered_nodes(settings, discovered)
        save_settings(settings, config_file)
    except (RegistryError, ValidationError) as e:
        fail(str(e))

    click.echo(f"Nodes: {', '.join(registry.discovered_or_declared_nodes(settings))}")


@cli.command()
@click.argument('node')
@click.option('--port', default=None, type=int, help='Port for a bare host')
@click.pass_context
def pin(ctx, node, port):
    """Pin the task to a node"""
    config_file = ctx.obj['config_file']
    try:
        settings = load_settings(config_file)
        registry.pin_node(settings, node, port)
        save_settings(settings, config_file)
    except (RegistryError, ValidationError) as e:
        fail(str(e))

    click.echo(f"Pinned to {registry.get_pinned_node(settings)}")


@cli.command()
@click.pass_context
def pinned(ctx):
    """Show the node the task is pinned to"""
    try:
        settings = load_settings(ctx.obj['config_file'])
        click.echo(registry.get_pinned_node(settings))
    except (RegistryError, ValidationError) as e:
        fail(str(e))


@cli.command()
@click.argument('definition')
def aliases(definition):
    """Parse an alias definition (key:value,key:value)"""
    click.echo(json.dumps(registry.parse_aliases(definition), indent=2))


@cli.command()
@click.pass_context
def protocol(ctx):
    """Show whether the cluster uses the legacy protocol"""
    try:
        settings = load_settings(ctx.obj['config_file'])
    except (RegistryError, ValidationError) as e:
        fail(str(e))

    click.echo("legacy" if registry.is_legacy_protocol(settings) else "current")


def main():
    """Main entry point"""
    cli()


if __name__ == '__main__':
    main()
