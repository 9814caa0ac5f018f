"""Show and edit the host to key mapping in ~/.ssh/config."""

import click

from sshkm.commands.base import env_command
from sshkm.core.config import Environment
from sshkm.core.console import raw, success, warning
from sshkm.core.exceptions import AlreadyMappedError
from sshkm.core.mapping import map_key, unmap_key
from sshkm.core.ssh_config import load_config, read_config_text, save_config


@click.command("config")
@env_command
def show_config(env: Environment) -> None:
    """Show the SSH configuration from ~/.ssh/config."""
    raw(read_config_text(env))


@click.command("map")
@click.argument("key")
@click.argument("host")
@env_command
def map_(env: Environment, key: str, host: str) -> None:
    """Map an SSH key to a host."""
    config = load_config(env)
    try:
        map_key(config, key, host)
    except AlreadyMappedError as exc:
        warning(str(exc))
        return
    save_config(config, env)
    success(f"Mapped key {key} to host {host}")


@click.command()
@click.argument("key")
@click.argument("host")
@env_command
def unmap(env: Environment, key: str, host: str) -> None:
    """Remove the mapping of an SSH key from a host."""
    config = load_config(env)
    if not unmap_key(config, key, host, env):
        warning(f"Key {key} is not mapped to host {host}")
        return
    save_config(config, env)
    success(f"Unmapped key {key} from host {host}")
