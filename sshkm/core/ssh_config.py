"""Reading and writing the Host/IdentityFile mapping in the SSH client config.

Only two directives are understood::

    Host <name>
      IdentityFile <path>

Everything else in the file is ignored when parsing and is lost when the
mapping is written back, since writes always replace the whole file.
"""

from __future__ import annotations

import logging

from sshkm.core.config import Environment, ensure_ssh_dir
from sshkm.core.exceptions import KeyFileError

logger = logging.getLogger(__name__)

HOST_PREFIX = "Host "
IDENTITY_FILE_PREFIX = "IdentityFile "

HostConfig = dict[str, list[str]]


def parse_config(text: str, env: Environment) -> HostConfig:
    """Parse config text into a host -> key paths mapping.

    IdentityFile paths are expanded against *env*. A repeated ``Host`` line
    starts that host over with no keys. IdentityFile lines that appear before
    the first ``Host`` line belong to no host and are skipped.
    """
    config: HostConfig = {}
    current_host: str | None = None

    for lineno, line in enumerate(text.split("\n"), start=1):
        line = line.strip()
        if line.startswith(HOST_PREFIX):
            current_host = line[len(HOST_PREFIX):].strip()
            config[current_host] = []
        elif line.startswith(IDENTITY_FILE_PREFIX):
            key_path = line[len(IDENTITY_FILE_PREFIX):].strip()
            if current_host is None:
                logger.debug("Skipping IdentityFile outside a Host block on line %d", lineno)
                continue
            config[current_host].append(env.expand_path(key_path))

    return config


def render_config(config: HostConfig) -> str:
    """Render the mapping with hosts sorted by name and a blank line after each block."""
    lines: list[str] = []
    for host in sorted(config):
        lines.append(f"Host {host}")
        for key_path in config[host]:
            lines.append(f"  IdentityFile {key_path}")
        lines.append("")
    return "\n".join(lines)


def read_config_text(env: Environment) -> str:
    """Return the raw contents of the config file.

    Raises:
        KeyFileError: If the file is missing or unreadable
    """
    try:
        return env.config_path.read_text()
    except OSError as exc:
        raise KeyFileError(f"Failed to read SSH config {env.config_path}: {exc}") from exc


def load_config(env: Environment) -> HostConfig:
    """Load the mapping from disk. A missing config file is an empty mapping.

    Raises:
        KeyFileError: If the file exists but cannot be read
    """
    if not env.config_path.exists():
        logger.debug("No SSH config at %s, starting empty", env.config_path)
        return {}
    config = parse_config(read_config_text(env), env)
    logger.debug("Loaded %d host(s) from %s", len(config), env.config_path)
    return config


def save_config(config: HostConfig, env: Environment) -> None:
    """Overwrite the config file with the rendered mapping.

    Raises:
        KeyFileError: If the file cannot be written
    """
    try:
        ensure_ssh_dir(env)
        env.config_path.write_text(render_config(config))
    except OSError as exc:
        raise KeyFileError(f"Failed to write SSH config {env.config_path}: {exc}") from exc
    logger.debug("Wrote %d host(s) to %s", len(config), env.config_path)
