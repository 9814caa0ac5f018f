"""Host to key mapping changes, applied to an in-memory HostConfig."""

from __future__ import annotations

import logging

from sshkm.core.config import Environment
from sshkm.core.exceptions import AlreadyMappedError
from sshkm.core.ssh_config import HostConfig

logger = logging.getLogger(__name__)


def map_key(config: HostConfig, key: str, host: str) -> None:
    """Map *key* to *host*, creating the host entry if needed.

    The key string is stored as given.

    Raises:
        AlreadyMappedError: If the host already has a key
    """
    if config.get(host):
        raise AlreadyMappedError(host)
    config.setdefault(host, []).append(key)
    logger.debug("Mapped %s to %s", key, host)


def unmap_key(config: HostConfig, key: str, host: str, env: Environment) -> bool:
    """Remove the first entry under *host* matching *key*.

    An exact match wins; otherwise the ``~``-expanded form of *key* is tried,
    since stored entries read from disk are already expanded. The host entry
    itself is kept even when it ends up empty.

    Returns:
        True if an entry was removed
    """
    key_paths = config.get(host, [])
    for candidate in (key, env.expand_path(key)):
        if candidate in key_paths:
            key_paths.remove(candidate)
            logger.debug("Unmapped %s from %s", candidate, host)
            return True
    return False


def drop_key(config: HostConfig, key_path: str) -> list[str]:
    """Remove *key_path* from every host, deleting hosts left with no keys.

    Returns:
        Names of the hosts that referenced the key
    """
    affected: list[str] = []
    for host in list(config):
        key_paths = config[host]
        if key_path not in key_paths:
            continue
        key_paths.remove(key_path)
        affected.append(host)
        if not key_paths:
            del config[host]
            logger.debug("Removed host %s with no remaining keys", host)
    return affected
