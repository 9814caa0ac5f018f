"""Key usage and age analysis."""

from __future__ import annotations

import os
from datetime import datetime
from typing import Iterable

from sshkm.core.config import PUBLIC_KEY_SUFFIX
from sshkm.core.inventory import SSHKey
from sshkm.core.ssh_config import HostConfig


def _mapped_basenames(config: HostConfig) -> set[str]:
    return {os.path.basename(p) for key_paths in config.values() for p in key_paths}


def _key_basename(key: SSHKey) -> str:
    # The inventory holds .pub paths while IdentityFile points at the private half.
    name = key.path.name
    if name.endswith(PUBLIC_KEY_SUFFIX):
        name = name[: -len(PUBLIC_KEY_SUFFIX)]
    return name


def is_key_used(key: SSHKey, config: HostConfig) -> bool:
    return _key_basename(key) in _mapped_basenames(config)


def find_unused_keys(keys: Iterable[SSHKey], config: HostConfig) -> list[SSHKey]:
    """Keys whose name matches no IdentityFile basename in the config."""
    used = _mapped_basenames(config)
    return [k for k in keys if _key_basename(k) not in used]


def find_multiple_mappings(config: HostConfig) -> dict[str, list[str]]:
    """Key paths referenced by more than one host, with hosts in config order."""
    key_hosts: dict[str, list[str]] = {}
    for host, key_paths in config.items():
        for key_path in key_paths:
            key_hosts.setdefault(key_path, []).append(host)
    return {key_path: hosts for key_path, hosts in key_hosts.items() if len(hosts) > 1}


def format_age(created: datetime, now: datetime) -> str:
    hours = (now - created).total_seconds() / 3600
    if hours < 24:
        return f"{hours:.1f} hours ago"
    return f"{hours / 24:.1f} days ago"
