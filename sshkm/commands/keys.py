"""List, generate and delete SSH keys."""

import click

from sshkm.commands.base import env_command
from sshkm.core.config import Environment
from sshkm.core.console import console, info, print_table, success
from sshkm.core.inventory import SSHKey, scan_keys
from sshkm.core.key_manager import (
    KEY_TYPES,
    default_key_name,
    delete_key,
    generate_key,
    key_type_for_choice,
)
from sshkm.core.mapping import drop_key
from sshkm.core.ssh_config import load_config, save_config


def key_rows(keys: list[SSHKey]) -> list[tuple[str, str, str]]:
    """Table rows of name, created and comment, sorted by key name."""
    return [
        (k.name, k.created_display, k.comment or "—")
        for k in sorted(keys, key=lambda k: k.name)
    ]


@click.command("list")
@env_command
def list_keys(env: Environment) -> None:
    """List SSH keys in ~/.ssh with their creation dates and comments."""
    keys = scan_keys(env)
    if not keys:
        info(f"No SSH keys found in {env.ssh_dir}")
        return
    print_table("SSH Keys", ["Name", "Created", "Comment"], key_rows(keys))


@click.command()
@env_command
def generate(env: Environment) -> None:
    """Generate a new SSH key with a guided interactive process."""
    console.print("Let's generate a new SSH key.")
    console.print("You will be asked for some information to help configure the key.")
    console.print("Choose a key type:")
    for choice, (key_type, label) in KEY_TYPES.items():
        console.print(f"{choice}. {key_type} ({label})")

    key_type = key_type_for_choice(click.prompt("Your choice", default="1"))
    name = click.prompt("Key name", default=default_key_name()).strip() or default_key_name()
    comment = click.prompt("Comment", default="", show_default=False).strip()

    key_path = generate_key(env, key_type, name, comment)
    success(f"Generated key {name}")
    info(f"Private key: {key_path}")


@click.command()
@click.argument("key")
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
@env_command
def delete(env: Environment, key: str, force: bool) -> None:
    """Delete an SSH key and remove it from any host mappings."""
    if not force:
        if not click.confirm(f"Delete SSH key '{key}'?", default=False):
            info("Cancelled")
            return

    key_path = delete_key(env, key)

    config = load_config(env)
    hosts = drop_key(config, str(key_path))
    if hosts or env.config_path.exists():
        save_config(config, env)

    success(f"Deleted key {key}")
    if hosts:
        info(f"Removed from hosts: {', '.join(hosts)}")
