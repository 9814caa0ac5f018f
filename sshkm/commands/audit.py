"""Report unused keys, key age and keys shared between hosts."""

from datetime import datetime, timezone

import click

from sshkm.commands.base import env_command
from sshkm.commands.keys import key_rows
from sshkm.core.config import Environment
from sshkm.core.console import console, heading, info, print_table
from sshkm.core.inventory import scan_keys
from sshkm.core.ssh_config import load_config
from sshkm.core.usage import find_multiple_mappings, find_unused_keys, format_age, is_key_used


@click.command()
@env_command
def unused(env: Environment) -> None:
    """List SSH keys that are not mapped to any host."""
    keys = find_unused_keys(scan_keys(env), load_config(env))
    if not keys:
        info("No unused keys found")
        return
    print_table("Unused Keys", ["Name", "Created", "Comment"], key_rows(keys))


@click.command()
@env_command
def audit(env: Environment) -> None:
    """Audit keys and configuration: key age, unused keys and keys mapped to multiple hosts."""
    keys = sorted(scan_keys(env), key=lambda k: k.name)
    config = load_config(env)
    now = datetime.now(timezone.utc)

    console.print("[bold]SSH Key Audit[/]")

    heading("Keys")
    if not keys:
        info(f"No SSH keys found in {env.ssh_dir}")
    else:
        rows = [
            (
                k.name,
                k.created_display,
                format_age(k.created, now),
                "yes" if is_key_used(k, config) else "no",
                k.comment or "—",
            )
            for k in keys
        ]
        print_table("", ["Name", "Created", "Age", "In Use", "Comment"], rows)

    heading("Unused Keys")
    unused_keys = find_unused_keys(keys, config)
    if not unused_keys:
        info("No unused keys found")
    else:
        print_table("", ["Name", "Created", "Comment"], key_rows(unused_keys))

    heading("Multiple Mappings")
    multiple = find_multiple_mappings(config)
    if not multiple:
        info("No keys with multiple mappings found")
    else:
        rows = [(key_path, ", ".join(hosts)) for key_path, hosts in sorted(multiple.items())]
        print_table("", ["Key", "Mapped to Hosts"], rows)
